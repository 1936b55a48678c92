"""Non-interactive script to add a contact to the configured store.

Usage:
    python scripts/add_contact.py \
        --first-name "Jo" \
        --last-name "Lee" \
        --email "jo@example.com" \
        --phone-number "5551234567"
"""

import argparse
import asyncio
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from contactbook.core.errors import RemoteError, ValidationError
from contactbook.core.validation import validate_fields
from contactbook.domain.services.contact_service import ContactService
from contactbook.infrastructure.store.factory import create_store
from contactbook.settings import settings


async def add_contact(first_name: str, last_name: str, email: str, phone_number: str) -> int:
    """Validate and insert one contact, then print the current list."""
    fields = {
        "first_name": first_name.strip(),
        "last_name": last_name.strip(),
        "email": email.strip(),
        "phone_number": phone_number.strip(),
    }
    try:
        validate_fields(fields)
    except ValidationError as e:
        print(f"❌ {e.message}")
        return 1

    store = await create_store(settings)
    try:
        service = ContactService(store)
        await service.create_contact(fields)
        contacts = await service.list_contacts()
    except RemoteError as e:
        print(f"❌ Store error: {e.message}")
        return 1
    finally:
        await store.aclose()

    print(f"✅ Added {fields['first_name']} {fields['last_name']}")
    print()
    print(f"{'Name':<40} {'Email':<40} {'Phone':<15}")
    print("-" * 95)
    for contact in contacts:
        print(f"{contact.full_name[:38]:<40} {contact.email[:38]:<40} {contact.phone_number:<15}")
    print()
    print(f"Total contacts: {len(contacts)}")
    return 0


def main() -> None:
    parser = argparse.ArgumentParser(description="Add a contact to the contact book")
    parser.add_argument("--first-name", required=True)
    parser.add_argument("--last-name", required=True)
    parser.add_argument("--email", required=True)
    parser.add_argument("--phone-number", required=True)
    args = parser.parse_args()

    sys.exit(asyncio.run(add_contact(args.first_name, args.last_name, args.email, args.phone_number)))


if __name__ == "__main__":
    main()
