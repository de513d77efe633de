from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class SeatBlockInputRequest(BaseModel):
    model_config = ConfigDict(json_schema_extra={'example': {'seat_id': 103}})

    seat_id: int


class SeatBlockResponse(BaseModel):
    id: int
    event_id: int
    seat_id: int
    created_at: Optional[datetime] = None
