from __future__ import annotations

import re
from datetime import date

from homeservices.domain.entities.booking import BookingDraft
from homeservices.domain.entities.vertical import VerticalConfig

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
SLOT_RANGE_PATTERN = re.compile(r"^([01]\d|2[0-3]):[0-5]\d-([01]\d|2[0-3]):[0-5]\d$")

FIELD_LABELS = {
    "name": "Name",
    "email": "Email",
    "phone": "Phone number",
    "alternate_phone": "Alternate phone number",
    "address_line1": "Address",
    "city": "City",
    "state": "State",
    "pincode": "Pincode",
    "scheduled_date": "Date",
    "time_slot": "Time slot",
    "budget": "Budget",
    "preferred_style": "Preferred style",
    "property_type": "Property type",
    "area": "Area",
    "rooms": "Rooms",
}


def validate_draft(draft: BookingDraft, vertical: VerticalConfig, today: date | None = None) -> dict[str, str]:
    """
    Check a draft against the vertical's form rules.
    Returns field -> message; an empty dict means the draft can be submitted.
    """
    schema = vertical.field_schema
    today = today or date.today()
    errors: dict[str, str] = {}

    for name in schema.required:
        if not draft.get(name).strip():
            errors[name] = f"{_label(name)} is required"

    phone_pattern = re.compile(rf"^[0-9]{{{schema.phone_digits}}}$")
    for name in ("phone", "alternate_phone"):
        value = draft.get(name).strip()
        if value and name not in errors and not phone_pattern.match(value):
            errors[name] = f"{_label(name)} must be {schema.phone_digits} digits"

    pincode = draft.pincode.strip()
    if pincode and "pincode" not in errors:
        if not re.match(rf"^[0-9]{{{schema.pincode_digits}}}$", pincode):
            errors["pincode"] = f"Pincode must be {schema.pincode_digits} digits"

    email = draft.email.strip()
    if email and "email" not in errors and not EMAIL_PATTERN.match(email):
        errors["email"] = "Enter a valid email address"

    scheduled = draft.scheduled_date.strip()
    if scheduled and "scheduled_date" not in errors:
        try:
            when = date.fromisoformat(scheduled)
        except ValueError:
            errors["scheduled_date"] = "Date must be in YYYY-MM-DD format"
        else:
            if when < today:
                errors["scheduled_date"] = "Date cannot be in the past"

    slot = draft.time_slot.strip()
    if slot and "time_slot" not in errors:
        if slot not in vertical.time_slots and not SLOT_RANGE_PATTERN.match(slot):
            errors["time_slot"] = "Choose one of the available time slots"

    for name, allowed in schema.choices.items():
        value = draft.get(name).strip()
        if value and name not in errors and value not in allowed:
            errors[name] = f"{_label(name)} must be one of: {', '.join(allowed)}"

    for name in schema.numeric_fields:
        value = draft.get(name).strip()
        if value and name not in errors and not value.isdigit():
            errors[name] = f"{_label(name)} must be a number"

    return errors


def resolve_time_slot(slot: str, vertical: VerticalConfig) -> tuple[str, str]:
    """Map a slot name or an HH:MM-HH:MM range to (start, end); unknown slots get the vertical default."""
    normalized = slot.strip()
    if normalized in vertical.time_slots:
        return vertical.time_slots[normalized]
    if SLOT_RANGE_PATTERN.match(normalized):
        start, end = normalized.split("-", 1)
        return start, end
    return vertical.default_time_slot


def _label(name: str) -> str:
    return FIELD_LABELS.get(name, name.replace("_", " ").capitalize())
