"""Repository implementations."""

from contactbook.persistence.repositories.base import BaseRepository
from contactbook.persistence.repositories.contact_repository import ContactRepository

__all__ = [
    "BaseRepository",
    "ContactRepository",
]
