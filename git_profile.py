#!/usr/bin/env python3
"""Git identity profile model."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from git_operations import ParseError


@dataclass(frozen=True)
class Profile:
    name: str
    email: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)

    @classmethod
    def from_dict(cls, profile_name: str, data: Any) -> "Profile":
        """Build a profile from its stored mapping; raise ParseError on a bad shape."""
        if not isinstance(data, dict):
            raise ParseError(f"Profile '{profile_name}' is not a mapping")
        name = data.get("name")
        email = data.get("email")
        if not isinstance(name, str) or not isinstance(email, str):
            raise ParseError(f"Profile '{profile_name}' needs string 'name' and 'email' fields")
        return cls(name=name, email=email)
