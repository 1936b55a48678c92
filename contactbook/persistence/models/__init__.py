"""Database models."""

from contactbook.persistence.models.contact import Contact

__all__ = [
    "Contact",
]
