from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask, jsonify

from .authorization.controller import register as register_authorization
from .common.datetime_utils import now_local
from .config import get_settings_module
from .container import build_container
from .core.exceptions import (
    AuthorizationError,
    ConfigurationError,
    DomainError,
    InvalidTransitionError,
    ValidationError,
)
from .timeclock.controller import register as register_timeclock

logger = logging.getLogger(__name__)


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def on_validation_error(e):
        return jsonify({"error": str(e)}), 400

    @app.errorhandler(AuthorizationError)
    def on_authorization_error(e):
        return jsonify({"error": str(e)}), 403

    @app.errorhandler(InvalidTransitionError)
    def on_invalid_transition(e):
        return jsonify({"error": str(e)}), 409

    @app.errorhandler(DomainError)
    def on_domain_error(e):
        logger.exception("Unhandled domain error")
        return jsonify({"error": "Internal error"}), 500


def create_app(settings_module: str | None = None, **overrides) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=str(getattr(settings, "LOG_LEVEL", "INFO")).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    try:
        container = build_container(
            role_permissions=overrides.get("role_permissions", getattr(settings, "ROLE_PERMISSIONS")),
            super_admins=overrides.get("super_admins", getattr(settings, "SUPER_ADMINS", ())),
            overtime_threshold_hours=getattr(settings, "OVERTIME_THRESHOLD_HOURS", 8),
            clock=overrides.get("clock", now_local),
        )
    except ConfigurationError:
        logger.error("Invalid authorization settings in %s", settings_module)
        raise

    logger.debug(
        "settings=%s roles=%d super_admins=%d",
        settings_module,
        len(container.authorization_config.role_permissions),
        len(container.authorization_config.super_admins),
    )

    app.extensions["falcon_workforce"] = container
    _register_error_handlers(app)
    register_authorization(app, container)
    register_timeclock(app, container)

    return app
