"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the rules live in the services and the engine.
"""

import importlib
from datetime import datetime

from falcon_workforce.config import get_settings_module
from falcon_workforce.container import build_container
from falcon_workforce.users.model import UserIdentity


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        role_permissions=settings.ROLE_PERMISSIONS,
        super_admins=settings.SUPER_ADMINS,
    )

    dispatcher = UserIdentity(identity="d-001", role="dispatcher")
    print(container.access_service.describe(dispatcher))

    timeclock = container.time_tracking_service
    timeclock.clock_in("d-001", now=datetime(2026, 3, 2, 9, 0))
    timeclock.start_lunch("d-001", now=datetime(2026, 3, 2, 12, 0))
    timeclock.end_lunch("d-001", now=datetime(2026, 3, 2, 12, 30))
    timeclock.clock_out("d-001", now=datetime(2026, 3, 2, 17, 0))
    print(timeclock.summary("d-001"))


if __name__ == "__main__":
    main()
