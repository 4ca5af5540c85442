from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import error_response, json_body
from ..core.exceptions import DomainError, StoreError
from ..container import Container
from .model import Room


def _room_payload(r: Room) -> dict:
    return {"room_id": r.room_id, "name": r.name, "capacity": r.capacity, "rows": r.rows, "cols": r.cols}


def register(app: Flask, container: Container) -> None:
    svc = container.room_service

    @app.route("/api/rooms", methods=["GET"], endpoint="api_rooms")
    def api_rooms():
        try:
            rooms = svc.list_all()
        except StoreError as e:
            return error_response(e)
        return jsonify({"success": True, "rooms": [_room_payload(r) for r in rooms]})

    @app.route("/api/rooms", methods=["POST"], endpoint="api_room_create")
    def api_room_create():
        data = json_body()
        try:
            room_id = svc.create(
                name=str(data.get("name", "")),
                capacity=data.get("capacity"),
                rows=data.get("rows"),
                cols=data.get("cols"),
            )
            return jsonify({"success": True, "room": _room_payload(svc.get(room_id))}), 201
        except (DomainError, StoreError) as e:
            return error_response(e)

    @app.route("/api/rooms/<int:room_id>", methods=["DELETE"], endpoint="api_room_delete")
    def api_room_delete(room_id: int):
        try:
            svc.delete(room_id)
        except (DomainError, StoreError) as e:
            return error_response(e)
        return jsonify({"success": True, "room_id": room_id})
