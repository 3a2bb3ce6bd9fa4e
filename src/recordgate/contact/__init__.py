"""
Contact

People, optionally linked to an Account.
"""

from recordgate.contact.mock import ContactRepositoryMock
from recordgate.contact.model import Contact
from recordgate.contact.repository import ContactQueries, ContactRepository

__all__ = ["Contact", "ContactQueries", "ContactRepository", "ContactRepositoryMock"]
