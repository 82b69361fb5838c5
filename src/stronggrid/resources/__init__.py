"""Typed wrappers for the SendGrid resource endpoints."""

from .api_keys import ApiKeys
from .categories import Categories
from .contacts import Contacts, contact_payload
from .global_suppressions import GlobalSuppressions
from .invalid_emails import InvalidEmails
from .lists import Lists
from .segments import Segments
from .sender_identities import SenderIdentities
from .templates import Templates
from .user import User

__all__ = [
    "ApiKeys",
    "Categories",
    "Contacts",
    "GlobalSuppressions",
    "InvalidEmails",
    "Lists",
    "Segments",
    "SenderIdentities",
    "Templates",
    "User",
    "contact_payload",
]
