from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping

from ..core.constants import DEFAULT_ROLE_PERMISSIONS
from ..core.enums import Permission
from ..core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def _parse_permission(value) -> Permission:
    if isinstance(value, Permission):
        return value
    try:
        return Permission(str(value))
    except ValueError:
        pass
    # Accept enum member names too ("CREATE_JOB") for hand-written configs.
    try:
        return Permission[str(value)]
    except KeyError:
        raise ConfigurationError(f"Unknown permission in role configuration: {value!r}")


@dataclass(frozen=True)
class AuthorizationConfig:
    """Role table and super-admin set, immutable once built."""

    role_permissions: Mapping[str, frozenset[Permission]] = field(default_factory=lambda: MappingProxyType({}))
    super_admins: frozenset[str] = frozenset()

    @classmethod
    def from_mapping(
        cls,
        role_permissions: Mapping[str, Iterable],
        super_admins: Iterable[str] = (),
    ) -> "AuthorizationConfig":
        table: dict[str, frozenset[Permission]] = {}
        for role, perms in (role_permissions or {}).items():
            if not isinstance(role, str):
                raise ConfigurationError(f"Role names must be strings, got {role!r}")
            if isinstance(perms, (str, bytes)):
                raise ConfigurationError(f"Permissions for role {role!r} must be a list")
            table[role] = frozenset(_parse_permission(p) for p in perms)

        admins = frozenset(str(a).strip() for a in (super_admins or ()) if str(a).strip())
        logger.debug("Authorization config: %d roles, %d super-admins", len(table), len(admins))
        return cls(role_permissions=MappingProxyType(table), super_admins=admins)

    @classmethod
    def default(cls, super_admins: Iterable[str] = ()) -> "AuthorizationConfig":
        return cls.from_mapping(DEFAULT_ROLE_PERMISSIONS, super_admins)

    def permissions_of_role(self, role: str | None) -> frozenset[Permission]:
        if role is None:
            return frozenset()
        return self.role_permissions.get(role, frozenset())

    def as_dict(self) -> dict[str, list[str]]:
        """Role table as plain data, permissions in enumeration order."""
        return {
            role: [p.value for p in Permission if p in perms]
            for role, perms in sorted(self.role_permissions.items())
        }
