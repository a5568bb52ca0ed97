from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Mapping


class BookingPhase(str, Enum):
    IDLE = "idle"
    SERVICE_SELECTED = "service_selected"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass
class BookingDraft:
    # contact
    name: str = ""
    email: str = ""
    phone: str = ""
    alternate_phone: str = ""
    # address
    address_line1: str = ""
    address_line2: str = ""
    city: str = ""
    state: str = ""
    pincode: str = ""
    # scheduling
    scheduled_date: str = ""  # YYYY-MM-DD
    time_slot: str = ""  # slot name ("morning") or "HH:MM-HH:MM"
    # vertical specific: budget, preferred_style, property_type, area, rooms, special_instructions
    requirements: dict[str, str] = field(default_factory=dict)

    def update(self, **values: Any) -> None:
        """Set known fields in place; anything else lands in requirements."""
        known = _field_names()
        for name, value in values.items():
            text = "" if value is None else str(value)
            if name == "requirements":
                for req_name, req_value in dict(value or {}).items():
                    self.requirements[req_name] = "" if req_value is None else str(req_value)
            elif name in known:
                setattr(self, name, text)
            else:
                self.requirements[name] = text

    def get(self, name: str) -> str:
        if name in _field_names() and name != "requirements":
            return getattr(self, name)
        return self.requirements.get(name, "")

    def snapshot(self) -> dict[str, Any]:
        data: dict[str, Any] = {f.name: getattr(self, f.name) for f in fields(self) if f.name != "requirements"}
        data["requirements"] = dict(self.requirements)
        return data

    def is_empty(self) -> bool:
        snapshot = self.snapshot()
        requirements = snapshot.pop("requirements")
        return not any(snapshot.values()) and not any(requirements.values())


@dataclass(frozen=True)
class BookingResult:
    booking_id: str
    status: str = "pending"
    is_mock: bool = False
    details: Mapping[str, Any] = field(default_factory=dict)


def _field_names() -> set[str]:
    return {f.name for f in fields(BookingDraft)}
