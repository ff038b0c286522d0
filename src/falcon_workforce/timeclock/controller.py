from __future__ import annotations

from flask import Flask, g, jsonify, request

from ..common.validators import require_decimal
from ..common.web import login_required, permission_required
from ..container import Container
from ..core.enums import Permission
from ..payroll.model import PayRate

# URL slug -> session operation
ACTIONS = {
    "clock-in": "clock_in",
    "start-lunch": "start_lunch",
    "end-lunch": "end_lunch",
    "clock-out": "clock_out",
}


def register(app: Flask, container: Container) -> None:
    access = container.access_service
    timeclock = container.time_tracking_service
    payroll = container.payroll_service

    @app.route("/api/timeclock", methods=["GET"], endpoint="timeclock_status")
    @login_required
    def timeclock_status():
        return jsonify(timeclock.summary(g.user.identity))

    @app.route("/api/timeclock/history", methods=["GET"], endpoint="timeclock_history")
    @login_required
    def timeclock_history():
        return jsonify({"sessions": timeclock.history(g.user.identity)})

    @app.route("/api/timeclock/<action>", methods=["POST"], endpoint="timeclock_action")
    @login_required
    def timeclock_action(action: str):
        operation = ACTIONS.get(action)
        if operation is None:
            return jsonify({"error": f"Unknown action: {action}"}), 404
        snapshot = timeclock.perform(g.user.identity, operation)
        return jsonify(timeclock.to_dict(snapshot))

    @app.route("/api/timeclock/new-session", methods=["POST"], endpoint="timeclock_new_session")
    @login_required
    def timeclock_new_session():
        snapshot = timeclock.begin_new_session(g.user.identity)
        return jsonify(timeclock.to_dict(snapshot)), 201

    @app.route("/api/timeclock/pay-stub", methods=["POST"], endpoint="timeclock_pay_stub")
    @login_required
    def timeclock_pay_stub():
        body = request.get_json(silent=True) or {}
        rate = PayRate(
            hourly_rate=require_decimal(body.get("hourly_rate"), "hourly_rate"),
            commission_rate=require_decimal(body.get("commission_rate"), "commission_rate", allow_none=True),
        )
        total_sales = require_decimal(body.get("total_sales"), "total_sales", allow_none=True)
        stub = payroll.build_pay_stub(timeclock.snapshot(g.user.identity), rate, total_sales=total_sales)
        return jsonify(stub.as_dict())

    @app.route("/api/workers/<worker_id>/timeclock", methods=["GET"], endpoint="worker_timeclock")
    @permission_required(access, Permission.ADD_USER)
    def worker_timeclock(worker_id: str):
        return jsonify(timeclock.summary(worker_id))
