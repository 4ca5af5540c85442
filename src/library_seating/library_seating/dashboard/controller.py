from __future__ import annotations

from dataclasses import asdict

from flask import Flask, jsonify

from ..common.http import error_response
from ..core.constants import STATUS_REFRESH_SECONDS
from ..core.exceptions import DomainError, StoreError
from ..container import Container
from .projector import SeatView


def _seat_payload(view: SeatView) -> dict:
    return {
        "seat_no": view.seat_no,
        "status": view.status.value,
        "member_id": view.member_id,
        "member_name": view.member_name,
        "shift": view.shift.value if view.shift else None,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/rooms/<int:room_id>/seats", endpoint="api_room_seats")
    def api_room_seats(room_id: int):
        try:
            room = container.room_service.get(room_id)
            seats = container.dashboard_service.get_seat_status(room_id)
        except (DomainError, StoreError) as e:
            return error_response(e)

        return jsonify(
            {
                "success": True,
                "room": {"room_id": room.room_id, "name": room.name, "rows": room.rows, "cols": room.cols},
                "refresh_seconds": STATUS_REFRESH_SECONDS,
                "seats": [_seat_payload(s) for s in seats],
            }
        )

    @app.route("/api/rooms/<int:room_id>/summary", endpoint="api_room_summary")
    def api_room_summary(room_id: int):
        try:
            summary = container.dashboard_service.room_summary(room_id)
        except (DomainError, StoreError) as e:
            return error_response(e)
        return jsonify({"success": True, **asdict(summary)})
