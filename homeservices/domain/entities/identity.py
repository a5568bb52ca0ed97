from dataclasses import dataclass


@dataclass(frozen=True)
class Identity:
    user_id: str
    name: str = ""
    email: str = ""
    phone: str = ""
    token: str | None = None
