from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ReservationInputRequest(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            'examples': [
                {'seat_id': 101, 'participant_id': 'P-0001'},
                {
                    'id': 7,
                    'seat_id': 102,
                    'participant_id': 'P-0002',
                    'old_participant_id': 'P-0001',
                },
                {'id': 8, 'participant_id': 'P-0003', 'old_participant_id': 'P-0002'},
                {'id': 9, 'old_participant_id': 'P-0001'},
            ]
        }
    )

    id: Optional[int] = None  # Existing reservation, required for update/delete
    seat_id: Optional[int] = None  # Omitted on update: the seat stays, only the holder changes
    participant_id: Optional[str] = Field(default=None, max_length=50)
    old_participant_id: Optional[str] = Field(default=None, max_length=50)


class ReservationResponse(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'id': 7,
                'event_id': 1,
                'seat_id': 102,
                'participant_id': 'P-0002',
            }
        }
    )

    id: int
    event_id: int
    seat_id: int
    participant_id: str
