"""
Reservation change requests and their partition into bulk groups.

A caller submits a flat list of `ReservationChangeRequest`; `ReservationChangeBatch.partition`
classifies every request and builds three immutable groups, one per bulk statement.
Partitioning is pure: it never touches storage, so a malformed batch is rejected
before the first write.
"""

from typing import Iterable, Optional, Self, Tuple

import attrs

from src.platform.exception.exceptions import ValidationError
from src.service.seating.domain.enum.reservation_change_kind import ReservationChangeKind


@attrs.define(frozen=True)
class ReservationChangeRequest:
    seat_id: Optional[int] = None
    participant_id: Optional[str] = None  # New holder
    old_participant_id: Optional[str] = None  # Previous holder
    reservation_id: Optional[int] = None  # Target row for update/delete

    def classify(self) -> ReservationChangeKind:
        has_participant = self.participant_id is not None
        has_old_participant = self.old_participant_id is not None

        if has_participant and not has_old_participant:
            return ReservationChangeKind.INSERT
        if not has_participant and has_old_participant:
            return ReservationChangeKind.DELETE
        if has_participant and has_old_participant:
            return ReservationChangeKind.UPDATE
        raise ValidationError(
            'Invalid reservation input: both participantId and oldParticipantId are null'
        )


@attrs.define(frozen=True)
class SeatAssignment:
    """Insert key: give `seat_id` to `participant_id`"""

    participant_id: str
    seat_id: int


@attrs.define(frozen=True)
class ReservationKey:
    """Delete key: the row must still belong to the participant the caller saw"""

    reservation_id: int
    participant_id: str


@attrs.define(frozen=True)
class ReservationReassignment:
    """Update key: `seat_id` is None when only the holder changes"""

    reservation_id: int
    participant_id: str
    seat_id: Optional[int] = None


@attrs.define(frozen=True)
class ReservationChangeBatch:
    to_insert: Tuple[SeatAssignment, ...] = ()
    to_delete: Tuple[ReservationKey, ...] = ()
    to_update: Tuple[ReservationReassignment, ...] = ()

    @property
    def size(self) -> int:
        return len(self.to_insert) + len(self.to_delete) + len(self.to_update)

    @classmethod
    def partition(cls, requests: Iterable[ReservationChangeRequest]) -> Self:
        """
        Classify each request and group it with its bulk statement.

        Raises:
            ValidationError: a request is unclassifiable or lacks the id its kind needs
                (insert: seat_id; delete and update: reservation_id)
        """
        to_insert: list[SeatAssignment] = []
        to_delete: list[ReservationKey] = []
        to_update: list[ReservationReassignment] = []

        for request in requests:
            kind = request.classify()

            if kind is ReservationChangeKind.INSERT:
                if request.seat_id is None:
                    raise ValidationError('Reservation insert requires a seatId')
                to_insert.append(
                    SeatAssignment(participant_id=request.participant_id, seat_id=request.seat_id)  # type: ignore[arg-type]
                )
            elif kind is ReservationChangeKind.DELETE:
                if request.reservation_id is None:
                    raise ValidationError('All reservation deletions must include an id')
                to_delete.append(
                    ReservationKey(
                        reservation_id=request.reservation_id,
                        participant_id=request.old_participant_id,  # type: ignore[arg-type]
                    )
                )
            else:
                if request.reservation_id is None:
                    raise ValidationError('All reservation updates must include an id')
                to_update.append(
                    ReservationReassignment(
                        reservation_id=request.reservation_id,
                        participant_id=request.participant_id,  # type: ignore[arg-type]
                        seat_id=request.seat_id,
                    )
                )

        return cls(to_insert=tuple(to_insert), to_delete=tuple(to_delete), to_update=tuple(to_update))
