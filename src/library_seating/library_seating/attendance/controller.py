from __future__ import annotations

import logging

from flask import Flask, jsonify, request, send_file

from ..common.datetime_utils import parse_iso_date
from ..common.http import error_response, json_body
from ..core.constants import MANUAL_CHANNEL, SCANNER_CHANNEL
from ..core.exceptions import DomainError, MemberNotFound, StoreError, ValidationError
from ..container import Container
from .model import AttendanceLogRow, ToggleResult
from .qr import decode_qr_image, parse_member_code, render_member_qr

logger = logging.getLogger(__name__)


def _toggle_payload(result: ToggleResult) -> dict:
    return {
        "success": True,
        "member_id": result.member_id,
        "member_name": result.member_name,
        "status": result.new_state.value,
        "room_id": result.room_id,
        "seat_no": result.seat_no,
        "time": result.event_time.strftime("%H:%M"),
        "message": f"{result.new_state.value.upper()}: {result.member_name}",
    }


def _log_payload(row: AttendanceLogRow) -> dict:
    return {
        "log_id": row.log_id,
        "member_id": row.member_id,
        "member_name": row.member_name,
        "seat_info": row.seat_info,
        "date": row.event_time.strftime("%Y-%m-%d"),
        "status": row.status.value,
        "in_time": row.in_time.strftime("%H:%M:%S") if row.in_time else None,
        "out_time": row.out_time.strftime("%H:%M:%S") if row.out_time else None,
    }


def register(app: Flask, container: Container) -> None:
    def _scan(code, channel: str):
        """Toggle the member behind ``code`` unless ``channel`` is still busy."""

        with container.debouncer.hold(channel):
            member_id = parse_member_code(code)
            if member_id is None:
                raise MemberNotFound(code)
            return container.attendance_service.toggle(member_id)

    @app.route("/api/scan", methods=["POST"], endpoint="api_scan")
    def api_scan():
        data = json_body()
        code = str(data.get("code", "")).strip()
        channel = str(data.get("channel") or SCANNER_CHANNEL)
        if not code:
            return jsonify({"success": False, "message": "Scanned code is empty"}), 400

        try:
            return jsonify(_toggle_payload(_scan(code, channel))), 200
        except (DomainError, StoreError) as e:
            return error_response(e)

    @app.route("/api/scan/status", endpoint="api_scan_status")
    def api_scan_status():
        """Lets a scanner screen show "processing" while its channel is paused."""

        channel = request.args.get("channel") or SCANNER_CHANNEL
        return jsonify({"success": True, "channel": channel, "busy": container.debouncer.is_busy(channel)})

    @app.route("/api/scan/image", methods=["POST"], endpoint="api_scan_image")
    def api_scan_image():
        """Accept an uploaded photo of a member pass, decode it and toggle."""

        if "image" not in request.files:
            return jsonify({"success": False, "message": "Missing image file"}), 400

        try:
            code = decode_qr_image(request.files["image"].stream)
            if not code:
                raise ValidationError("No QR code found in the image")
            channel = request.form.get("channel") or SCANNER_CHANNEL
            return jsonify(_toggle_payload(_scan(code, channel))), 200
        except (DomainError, StoreError) as e:
            return error_response(e)

    @app.route("/api/members/<int:member_id>/toggle", methods=["POST"], endpoint="api_member_toggle")
    def api_member_toggle(member_id: int):
        channel = str(json_body().get("channel") or MANUAL_CHANNEL)
        try:
            return jsonify(_toggle_payload(_scan(member_id, channel))), 200
        except (DomainError, StoreError) as e:
            return error_response(e)

    @app.route("/api/members/<int:member_id>/presence", endpoint="api_member_presence")
    def api_member_presence(member_id: int):
        try:
            presence = container.attendance_service.resolve_presence(member_id)
        except (DomainError, StoreError) as e:
            return error_response(e)

        last = presence.last_log
        return jsonify(
            {
                "success": True,
                "member_id": presence.member_id,
                "status": presence.state.value,
                "since": last.event_time.strftime("%H:%M:%S") if last else None,
            }
        )

    @app.route("/api/members/<int:member_id>/qr", endpoint="api_member_qr")
    def api_member_qr(member_id: int):
        try:
            member = container.member_service.get(member_id)
        except (DomainError, StoreError) as e:
            return error_response(e)
        return send_file(render_member_qr(member.member_id), mimetype="image/png")

    @app.route("/api/logs", endpoint="api_logs")
    def api_logs():
        try:
            start = parse_iso_date(request.args["start"])
            end = parse_iso_date(request.args.get("end") or request.args["start"])
        except (KeyError, ValueError):
            return jsonify({"success": False, "message": "start/end must be YYYY-MM-DD"}), 400

        try:
            rows = container.attendance_service.list_logs(start=start, end=end)
        except (DomainError, StoreError) as e:
            return error_response(e)
        return jsonify({"success": True, "logs": [_log_payload(r) for r in rows]})
