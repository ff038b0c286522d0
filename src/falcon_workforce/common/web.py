from __future__ import annotations

from functools import wraps

from flask import g, jsonify, session

from ..authorization.service import AccessService
from ..core.enums import Permission
from ..users.model import UserIdentity


def current_user() -> UserIdentity | None:
    """Identity the external login flow stored in the Flask session."""
    return UserIdentity.from_session(session)


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        user = current_user()
        if user is None:
            return jsonify({"error": "Login required"}), 401
        g.user = user
        return view(*args, **kwargs)

    return wrapper


def permission_required(access: AccessService, permission: Permission):
    def decorator(view):
        @wraps(view)
        @login_required
        def wrapper(*args, **kwargs):
            access.require(permission, g.user)
            return view(*args, **kwargs)

        return wrapper

    return decorator
