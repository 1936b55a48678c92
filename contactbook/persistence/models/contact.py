"""Contact model."""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, String

from contactbook.persistence.database import Base


def _new_id() -> str:
    return str(uuid.uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Contact(Base):
    """Contact model representing one entry in the contact book."""

    __tablename__ = "contacts"

    id = Column(String(36), primary_key=True, default=_new_id)
    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    phone_number = Column(String(50), nullable=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False, index=True)

    def to_dict(self) -> dict:
        """Row shape matching what the hosted store returns."""
        return {
            "id": self.id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "email": self.email,
            "phone_number": self.phone_number,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self) -> str:
        return f"<Contact(id={self.id}, email={self.email}, phone_number={self.phone_number})>"
