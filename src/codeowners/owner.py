from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class OwnerKind(Enum):
    TEAM = "team"
    USERNAME = "username"
    EMAIL = "email"


@dataclass(frozen=True)
class Owner:
    kind: OwnerKind
    value: str

    def __str__(self) -> str:
        return self.value

    def to_dict(self) -> dict[str, str]:
        return {"kind": self.kind.value, "value": self.value}


def classify_owner(token: str) -> Owner:
    """Classify a raw owner token. Never fails.

    "@org/team" -> TEAM, "@alice" -> USERNAME, "bob@example.com" -> EMAIL.
    Anything else is kept verbatim as a USERNAME.
    """
    if token.startswith("@"):
        if "/" in token:
            return Owner(OwnerKind.TEAM, token)
        return Owner(OwnerKind.USERNAME, token)
    if "@" in token:
        return Owner(OwnerKind.EMAIL, token)
    return Owner(OwnerKind.USERNAME, token)


def is_recognized(token: str) -> bool:
    """True when the token has one of the three documented owner shapes."""
    return "@" in token
