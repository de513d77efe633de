"""
Seat Reservation Command Repository Implementation (SQLAlchemy Core on the UoW session)

Each bulk method compiles to exactly one statement, whatever the batch size:
- insert: INSERT ... SELECT ... WHERE NOT EXISTS, so a seat already taken for the
  event is skipped by the database rather than pre-checked row by row
- delete: DELETE ... WHERE (id, participant_id) IN (...)
- update: UPDATE ... SET col = CASE id WHEN ... END WHERE id IN (...)

Statements run on the caller's session and never commit; the unit of work decides.
"""

from typing import List, Sequence, Set, cast

from sqlalchemy import (
    CursorResult,
    Executable,
    Integer,
    String,
    case,
    delete,
    insert,
    literal,
    select,
    tuple_,
    union_all,
    update,
)
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import ConflictError
from src.platform.logging.loguru_io import Logger
from src.service.seating.app.interface.i_seat_reservation_command_repo import (
    ISeatReservationCommandRepo,
)
from src.service.seating.domain.entity.reservation_entity import Reservation
from src.service.seating.domain.value_object.reservation_change import (
    ReservationKey,
    ReservationReassignment,
    SeatAssignment,
)
from src.service.seating.driven_adapter.model.seat_reservation_model import (
    SeatReservationModel,
)


_reservation = SeatReservationModel.__table__


class SeatReservationCommandRepoImpl(ISeatReservationCommandRepo):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    async def _execute_rowcount(self, stmt: Executable, *, conflict_message: str) -> int:
        try:
            result = cast(CursorResult, await self.session.execute(stmt))
        except IntegrityError as e:
            # (event_id, seat_id) uniqueness rejected the statement as a whole
            raise ConflictError(conflict_message) from e
        return result.rowcount

    @Logger.io
    async def bulk_insert(self, *, event_id: int, assignments: Sequence[SeatAssignment]) -> int:
        if not assignments:
            return 0

        requested_rows = [
            select(
                literal(assignment.participant_id, String(50)).label('participant_id'),
                literal(assignment.seat_id, Integer).label('seat_id'),
            )
            for assignment in assignments
        ]
        requested = (
            requested_rows[0] if len(requested_rows) == 1 else union_all(*requested_rows)
        ).subquery('requested')

        existing = _reservation.alias('existing')
        seat_taken = (
            select(existing.c.id)
            .where(existing.c.event_id == event_id, existing.c.seat_id == requested.c.seat_id)
            .exists()
        )

        stmt = insert(_reservation).from_select(
            ['event_id', 'participant_id', 'seat_id'],
            select(
                literal(event_id, Integer), requested.c.participant_id, requested.c.seat_id
            ).where(~seat_taken),
        )

        inserted = await self._execute_rowcount(
            stmt, conflict_message='One or more seats are already reserved'
        )
        Logger.base.info(
            f'🪑 [BULK_INSERT] event={event_id} requested={len(assignments)} inserted={inserted}'
        )
        return inserted

    @Logger.io
    async def bulk_delete(self, *, event_id: int, keys: Sequence[ReservationKey]) -> int:
        if not keys:
            return 0

        stmt = delete(_reservation).where(
            _reservation.c.event_id == event_id,
            tuple_(_reservation.c.id, _reservation.c.participant_id).in_(
                [(key.reservation_id, key.participant_id) for key in keys]
            ),
        )

        deleted = await self._execute_rowcount(
            stmt, conflict_message='Reservation could not be deleted'
        )
        Logger.base.info(
            f'🧹 [BULK_DELETE] event={event_id} requested={len(keys)} deleted={deleted}'
        )
        return deleted

    @Logger.io
    async def bulk_update(
        self, *, event_id: int, reassignments: Sequence[ReservationReassignment]
    ) -> int:
        if not reassignments:
            return 0

        new_participant = {r.reservation_id: r.participant_id for r in reassignments}
        # Holder-only changes keep their seat through the CASE fallback
        new_seat = {
            r.reservation_id: r.seat_id for r in reassignments if r.seat_id is not None
        }

        values = {
            'participant_id': case(
                new_participant, value=_reservation.c.id, else_=_reservation.c.participant_id
            )
        }
        if new_seat:
            values['seat_id'] = case(
                new_seat, value=_reservation.c.id, else_=_reservation.c.seat_id
            )

        stmt = (
            update(_reservation)
            .where(
                _reservation.c.event_id == event_id,
                _reservation.c.id.in_(list(new_participant)),
            )
            .values(values)
        )

        updated = await self._execute_rowcount(
            stmt, conflict_message='One or more target seats are already reserved'
        )
        Logger.base.info(
            f'🔁 [BULK_UPDATE] event={event_id} requested={len(reassignments)} updated={updated}'
        )
        return updated

    @Logger.io
    async def find_existing_ids(
        self, *, event_id: int, reservation_ids: Sequence[int]
    ) -> Set[int]:
        if not reservation_ids:
            return set()

        result = await self.session.execute(
            select(_reservation.c.id).where(
                _reservation.c.event_id == event_id,
                _reservation.c.id.in_(list(reservation_ids)),
            )
        )
        return set(result.scalars())

    @Logger.io
    async def find_by_event(self, *, event_id: int) -> List[Reservation]:
        # Plain column rows: bypasses the identity map, which the Core statements above
        # do not keep in sync
        result = await self.session.execute(
            select(
                _reservation.c.id,
                _reservation.c.event_id,
                _reservation.c.seat_id,
                _reservation.c.participant_id,
            )
            .where(_reservation.c.event_id == event_id)
            .order_by(_reservation.c.id)
        )
        return [
            Reservation(
                id=row.id,
                event_id=row.event_id,
                seat_id=row.seat_id,
                participant_id=row.participant_id,
            )
            for row in result
        ]
