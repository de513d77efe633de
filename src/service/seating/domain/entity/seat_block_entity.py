from datetime import datetime
from typing import Optional

import attrs


@attrs.define(frozen=True)
class SeatBlock:
    event_id: int
    seat_id: int
    id: Optional[int] = None
    created_at: Optional[datetime] = None
