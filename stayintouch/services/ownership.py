# stayintouch/services/ownership.py
from enum import Enum
from typing import NamedTuple, Optional
from ..models.contact import Contact


class LookupStatus(Enum):
    FOUND = 'found'
    NOT_FOUND = 'not_found'
    FORBIDDEN = 'forbidden'


class Lookup(NamedTuple):
    status: LookupStatus
    contact: Optional[Contact] = None

    @property
    def found(self):
        return self.status is LookupStatus.FOUND


def check_owner(contact, user_id):
    """
    Ownership guard. Runs after the existence check: a missing contact is
    NOT_FOUND, a contact owned by someone else is FORBIDDEN, and only the
    owner gets the entity back.
    """
    if contact is None:
        return Lookup(LookupStatus.NOT_FOUND)
    if not contact.owned_by(user_id):
        return Lookup(LookupStatus.FORBIDDEN)
    return Lookup(LookupStatus.FOUND, contact)
