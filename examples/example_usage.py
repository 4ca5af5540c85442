"""Example: drive the service layer directly, without Flask.

Toggles member 1 (scan in or out) and prints the seat map of the first room.
"""

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src" / "library_seating"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from config import get_settings_module

from library_seating.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    result = container.attendance_service.toggle(1)
    print(f"{result.member_name}: {result.new_state.value} (room={result.room_id}, seat={result.seat_no})")

    room = container.room_service.list_all()[0]
    for seat in container.dashboard_service.get_seat_status(room.room_id):
        print(f"{room.name} #{seat.seat_no:>3} {seat.status.value:<8} {seat.member_name or ''}")


if __name__ == "__main__":
    main()
