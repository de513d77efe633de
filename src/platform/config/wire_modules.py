"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.seating.app.command import (
    toggle_seat_blocks_use_case,
    update_reservations_use_case,
)
from src.service.seating.app.query import (
    list_reservations_use_case,
    list_seat_blocks_use_case,
)
from src.service.seating.driving_adapter.http_controller import (
    reservation_controller,
    seat_block_controller,
)


WIRE_MODULES: list[ModuleType] = [
    update_reservations_use_case,
    toggle_seat_blocks_use_case,
    list_reservations_use_case,
    list_seat_blocks_use_case,
    reservation_controller,
    seat_block_controller,
]
