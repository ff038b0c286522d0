from __future__ import annotations

import logging

from ..core.enums import Permission
from ..core.exceptions import AuthorizationError
from ..users.model import UserIdentity
from .engine import AuthorizationEngine

logger = logging.getLogger(__name__)


class AccessService:
    """Use case: gate actions on permissions (controllers call this)."""

    def __init__(self, engine: AuthorizationEngine):
        self._engine = engine

    def check(self, permission: Permission, user: UserIdentity) -> bool:
        return self._engine.has_permission(permission, user)

    def require(self, permission: Permission, user: UserIdentity) -> None:
        if not self._engine.has_permission(permission, user):
            logger.info("Denied %s to user %s (role=%s)", permission.value, user.identity, user.role)
            raise AuthorizationError(f"Missing permission: {permission.label}")

    def describe(self, user: UserIdentity) -> dict:
        granted = self._engine.permissions_for(user)
        return {
            "identity": user.identity,
            "role": user.role,
            "is_super_admin": self._engine.is_super_admin(user),
            "permissions": [{"id": p.value, "label": p.label} for p in Permission if p in granted],
        }

    def role_table(self) -> dict[str, list[str]]:
        return self._engine.config.as_dict()
