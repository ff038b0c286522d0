from __future__ import annotations

from flask import Flask, g, jsonify

from ..common.web import login_required, permission_required
from ..container import Container
from ..core.enums import Permission


def register(app: Flask, container: Container) -> None:
    access = container.access_service

    @app.route("/api/me/permissions", methods=["GET"], endpoint="my_permissions")
    @login_required
    def my_permissions():
        return jsonify(access.describe(g.user))

    @app.route("/api/me/permissions/<permission_id>", methods=["GET"], endpoint="my_permission")
    @login_required
    def my_permission(permission_id: str):
        try:
            permission = Permission(permission_id)
        except ValueError:
            return jsonify({"error": f"Unknown permission: {permission_id}"}), 404
        return jsonify(
            {
                "permission": permission.value,
                "label": permission.label,
                "granted": access.check(permission, g.user),
            }
        )

    @app.route("/api/roles", methods=["GET"], endpoint="role_table")
    @permission_required(access, Permission.MANAGE_ROLES)
    def role_table():
        return jsonify({"roles": access.role_table()})
