import attrs


@attrs.define(frozen=True)
class SeatBlockToggle:
    """Flip the block state of one seat: blocked seats are released, free seats are blocked"""

    seat_id: int
