from __future__ import annotations

from datetime import datetime
from functools import wraps
from typing import Optional

from flask import Flask, g, jsonify, request, session

from ..attendance.service import ActionResult
from ..common.datetime_utils import parse_optional_date
from ..core.enums import AdminTab, ResultKind
from ..core.exceptions import AuthenticationError, ValidationError
from ..container import Container
from .employee import FlashMessage


def _bearer_token() -> str:
    header = request.headers.get("Authorization", "")
    if header.startswith("Bearer ") and header[len("Bearer "):].strip():
        return header[len("Bearer "):].strip()
    token = session.get("token")
    if token:
        return str(token)
    raise AuthenticationError("Missing bearer token")


def _save_flash(message: Optional[FlashMessage]) -> None:
    if message is None:
        session.pop("flash", None)
        return
    session["flash"] = {
        "kind": message.result.kind.value,
        "message": message.result.message,
        "expires_at": message.expires_at.isoformat(),
    }


def _load_flash() -> Optional[FlashMessage]:
    data = session.get("flash")
    if not data:
        return None
    try:
        result = ActionResult(ResultKind(data["kind"]), str(data["message"]))
        return FlashMessage(result, datetime.fromisoformat(data["expires_at"]))
    except (KeyError, TypeError, ValueError):
        session.pop("flash", None)
        return None


def register(app: Flask, container: Container) -> None:
    def token_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                g.token = _bearer_token()
            except AuthenticationError as e:
                return jsonify({"success": False, "message": str(e)}), 401
            return view(*args, **kwargs)

        return wrapper

    @app.errorhandler(ValidationError)
    def handle_validation_error(e: ValidationError):
        return jsonify({"success": False, "message": str(e)}), 400

    @app.route("/session/token", methods=["POST"], endpoint="session_token")
    def session_token():
        data = request.get_json(silent=True) or {}
        token = str(data.get("token", "")).strip()
        if not token:
            return jsonify({"success": False, "message": "Token is required"}), 400
        session["token"] = token
        return jsonify({"success": True}), 200

    @app.route("/api/admin/attendance", methods=["GET"], endpoint="admin_attendance")
    @token_required
    def admin_attendance():
        from_date = parse_optional_date(request.args.get("from"))
        to_date = parse_optional_date(request.args.get("to"))
        try:
            tab = AdminTab(request.args.get("tab", AdminTab.ATTENDANCE.value))
        except ValueError:
            raise ValidationError("Unknown tab")

        dashboard = container.admin_dashboard(token=g.token)
        dashboard.select_tab(tab)
        dashboard.set_search(request.args.get("search", ""))
        dashboard.set_date_range(from_date=from_date, to_date=to_date)
        if tab == AdminTab.ATTENDANCE:
            dashboard.load()
        return jsonify(dashboard.to_dict()), 200

    @app.route("/api/me/dashboard", methods=["GET"], endpoint="employee_dashboard")
    @token_required
    def employee_dashboard():
        dashboard = container.employee_dashboard(token=g.token)
        dashboard.restore_message(_load_flash())
        selected = parse_optional_date(request.args.get("date"))
        if selected:
            dashboard.select_date(selected)
        dashboard.load()
        data = dashboard.to_dict()
        _save_flash(dashboard.flash_message)
        return jsonify(data), 200

    def _run_action(action: str):
        dashboard = container.employee_dashboard(token=g.token)
        dashboard.load()
        result = dashboard.check_in() if action == "checkin" else dashboard.check_out()
        _save_flash(dashboard.flash_message)
        payload = result.to_dict()
        payload["dashboard"] = dashboard.to_dict()
        return jsonify(payload), 200 if result.ok else 400

    @app.route("/api/me/checkin", methods=["POST"], endpoint="employee_checkin")
    @token_required
    def employee_checkin():
        return _run_action("checkin")

    @app.route("/api/me/checkout", methods=["POST"], endpoint="employee_checkout")
    @token_required
    def employee_checkout():
        return _run_action("checkout")

    @app.route("/me/attendance-report.csv", methods=["GET"], endpoint="employee_report_csv")
    @token_required
    def employee_report_csv():
        dashboard = container.employee_dashboard(token=g.token)
        dashboard.refresh_personal()
        filename, csv_bytes = dashboard.export_csv()
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )
