from typing import Optional

import attrs


@attrs.define(frozen=True)
class Reservation:
    """A participant holding one seat for one event"""

    event_id: int
    seat_id: int
    participant_id: str
    id: Optional[int] = None  # Store-assigned; stable across participant/seat reassignment
