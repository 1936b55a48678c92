"""Domain services."""

from contactbook.domain.services.contact_form import ContactFormController
from contactbook.domain.services.contact_service import ContactService

__all__ = ["ContactFormController", "ContactService"]
