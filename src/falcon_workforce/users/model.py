from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class UserIdentity:
    """The slice of a user record the workforce core consumes.

    Owned by the external user directory. ``role=None`` means the user has no
    role at all, which is not the same as a role literally named "".
    """

    identity: str
    role: Optional[str] = None

    @classmethod
    def from_session(cls, data) -> Optional["UserIdentity"]:
        """Build from a Flask session (or any mapping) filled in at login."""
        user_id = data.get("user_id")
        if user_id is None or str(user_id) == "":
            return None
        role = data.get("role")
        return cls(identity=str(user_id), role=None if role is None else str(role))
