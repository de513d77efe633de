"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from src.service.seating.driven_adapter.model.event_model import EventModel
from src.service.seating.driven_adapter.model.participant_model import ParticipantModel
from src.service.seating.driven_adapter.model.seat_block_model import SeatBlockModel
from src.service.seating.driven_adapter.model.seat_model import SeatModel
from src.service.seating.driven_adapter.model.seat_reservation_model import (
    SeatReservationModel,
)

__all__ = [
    'EventModel',
    'ParticipantModel',
    'SeatBlockModel',
    'SeatModel',
    'SeatReservationModel',
]
