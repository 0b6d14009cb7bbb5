"""Typed client for the bank microservice."""

from bankserv.client.service import BankService
from bankserv.core.config import BankServiceSettings
from bankserv.core.config import get_bank_service_settings
from bankserv.core.errors import BankDecodingError
from bankserv.core.errors import BankEncodingError
from bankserv.core.errors import BankRemoteError
from bankserv.core.errors import BankServiceError
from bankserv.core.errors import BankTransportError
from bankserv.core.errors import errors_equal
from bankserv.schemas.bank_account import BankAccount
from bankserv.schemas.bank_account import BankAccounts
from bankserv.schemas.common import ZERO_UUID
from bankserv.schemas.common import Owner
from bankserv.schemas.common import OwnerKind
from bankserv.schemas.item import Item
from bankserv.schemas.tag import Tag
from bankserv.schemas.tag import Tags

__all__ = [
    "BankAccount",
    "BankAccounts",
    "BankDecodingError",
    "BankEncodingError",
    "BankRemoteError",
    "BankService",
    "BankServiceError",
    "BankServiceSettings",
    "BankTransportError",
    "Item",
    "Owner",
    "OwnerKind",
    "Tag",
    "Tags",
    "ZERO_UUID",
    "errors_equal",
    "get_bank_service_settings",
]
