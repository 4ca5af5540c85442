from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import format_hhmm
from ..common.http import error_response, json_body
from ..core.enums import MemberStatus
from ..core.exceptions import DomainError, StoreError, ValidationError
from ..container import Container
from .model import Member
from .service import MemberForm


def _member_payload(m: Member) -> dict:
    return {
        "member_id": m.member_id,
        "name": m.name,
        "mobile": m.mobile,
        "status": m.status.value,
        "seat_type": m.seat_type.value,
        "room_id": m.room_id,
        "seat_no": m.seat_no,
        "shift": m.shift.value,
        "start_time": format_hhmm(m.start_time),
        "end_time": format_hhmm(m.end_time),
        "monthly_fee": str(m.monthly_fee),
        "admission_date": m.admission_date.strftime("%Y-%m-%d"),
    }


def _form_from(data: dict) -> MemberForm:
    return MemberForm(
        name=str(data.get("name", "")),
        mobile=str(data.get("mobile") or ""),
        seat_type=str(data.get("seat_type") or "General"),
        room_id=data.get("room_id"),
        seat_no=data.get("seat_no"),
        shift=str(data.get("shift") or "FullDay"),
        start_time=str(data.get("start_time") or ""),
        end_time=str(data.get("end_time") or ""),
        monthly_fee=str(data.get("monthly_fee") or "0"),
    )


def register(app: Flask, container: Container) -> None:
    svc = container.member_service

    @app.route("/api/members", methods=["GET"], endpoint="api_members")
    def api_members():
        try:
            members = svc.list_active()
        except StoreError as e:
            return error_response(e)
        return jsonify({"success": True, "members": [_member_payload(m) for m in members]})

    @app.route("/api/members", methods=["POST"], endpoint="api_member_admit")
    def api_member_admit():
        try:
            member_id = svc.admit(_form_from(json_body()))
            return jsonify({"success": True, "member": _member_payload(svc.get(member_id))}), 201
        except (DomainError, StoreError) as e:
            return error_response(e)

    @app.route("/api/members/<int:member_id>", methods=["GET"], endpoint="api_member_detail")
    def api_member_detail(member_id: int):
        try:
            member = svc.get(member_id)
            days = container.attendance_service.count_attendance_days(member_id)
        except (DomainError, StoreError) as e:
            return error_response(e)
        return jsonify({"success": True, "member": _member_payload(member), "attendance_days": days})

    @app.route("/api/members/<int:member_id>", methods=["PUT"], endpoint="api_member_update")
    def api_member_update(member_id: int):
        try:
            svc.update(member_id, _form_from(json_body()))
            return jsonify({"success": True, "member": _member_payload(svc.get(member_id))})
        except (DomainError, StoreError) as e:
            return error_response(e)

    @app.route("/api/members/<int:member_id>/status", methods=["POST"], endpoint="api_member_status")
    def api_member_status(member_id: int):
        try:
            status = MemberStatus(str(json_body().get("status", "")))
        except ValueError:
            return error_response(ValidationError("status must be Active or Inactive"))

        try:
            svc.set_status(member_id, status)
        except (DomainError, StoreError) as e:
            return error_response(e)
        return jsonify({"success": True, "member_id": member_id, "status": status.value})
