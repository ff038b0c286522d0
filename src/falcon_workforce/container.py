from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Iterable, Mapping

from .authorization.engine import AuthorizationEngine
from .authorization.model import AuthorizationConfig
from .authorization.service import AccessService
from .common.datetime_utils import now_local
from .core.constants import DEFAULT_OVERTIME_THRESHOLD_HOURS
from .payroll.calculator.standard_calculator import StandardPayrollCalculator
from .payroll.service import PayrollService
from .sessions.registry import SessionRegistry
from .timeclock.service import TimeTrackingService


@dataclass(frozen=True)
class Container:
    authorization_config: AuthorizationConfig
    authorization_engine: AuthorizationEngine
    session_registry: SessionRegistry

    access_service: AccessService
    time_tracking_service: TimeTrackingService
    payroll_service: PayrollService


def build_container(
    *,
    role_permissions: Mapping[str, Iterable],
    super_admins: Iterable[str] = (),
    overtime_threshold_hours=DEFAULT_OVERTIME_THRESHOLD_HOURS,
    clock: Callable[[], datetime] = now_local,
) -> Container:
    authorization_config = AuthorizationConfig.from_mapping(role_permissions, super_admins)
    authorization_engine = AuthorizationEngine(authorization_config)
    session_registry = SessionRegistry(clock=clock)

    access_service = AccessService(authorization_engine)
    time_tracking_service = TimeTrackingService(session_registry)
    payroll_service = PayrollService(
        calculator=StandardPayrollCalculator(),
        overtime_threshold_hours=overtime_threshold_hours,
    )

    return Container(
        authorization_config=authorization_config,
        authorization_engine=authorization_engine,
        session_registry=session_registry,
        access_service=access_service,
        time_tracking_service=time_tracking_service,
        payroll_service=payroll_service,
    )
