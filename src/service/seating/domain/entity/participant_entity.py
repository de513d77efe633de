from typing import Optional

import attrs


@attrs.define(frozen=True)
class Participant:
    participant_id: str
    event_id: int
    name: str
    number_of_tickets: int = 1
    seat_color: Optional[str] = None

    def belongs_to(self, event_id: int) -> bool:
        return self.event_id == event_id
