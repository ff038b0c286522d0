from __future__ import annotations

from ..core.enums import Permission
from ..users.model import UserIdentity
from .model import AuthorizationConfig

ALL_PERMISSIONS: frozenset[Permission] = frozenset(Permission)


class AuthorizationEngine:
    """Answers "may this user do X?".

    Super-admins are checked first and skip the role table. Anything missing
    (no role, unknown role) resolves to no access; nothing here raises.
    """

    def __init__(self, config: AuthorizationConfig):
        self._config = config

    @property
    def config(self) -> AuthorizationConfig:
        return self._config

    def is_super_admin(self, user: UserIdentity) -> bool:
        return user.identity in self._config.super_admins

    def has_permission(self, permission: Permission, user: UserIdentity) -> bool:
        if self.is_super_admin(user):
            return True
        return permission in self._config.permissions_of_role(user.role)

    def permissions_for(self, user: UserIdentity) -> frozenset[Permission]:
        if self.is_super_admin(user):
            return ALL_PERMISSIONS
        return self._config.permissions_of_role(user.role)

    def permission_labels(self, user: UserIdentity) -> list[str]:
        granted = self.permissions_for(user)
        return [p.label for p in Permission if p in granted]
