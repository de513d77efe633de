import time
from typing import Dict, List, Optional, Self, Sequence

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace
from sqlalchemy.exc import SQLAlchemyError

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import ConflictError, StorageError, ValidationError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.seating_metrics import metrics
from src.service.seating.domain.entity.reservation_entity import Reservation
from src.service.seating.domain.enum.reservation_change_kind import ReservationChangeKind
from src.service.seating.domain.value_object.reservation_change import (
    ReservationChangeBatch,
    ReservationChangeRequest,
)


class UpdateReservationsUseCase:
    """
    Reconcile an event's reservations against a batch of change requests

    Flow (one unit of work, all-or-nothing):
    1. Partition requests into insert/delete/update groups (rejects unclassifiable input)
    2. Validate event, every participant (new and old), every seat and every targeted
       reservation id before any write
    3. Bulk insert → bulk delete → bulk update, one statement each
    4. Any statement touching fewer rows than requested raises ConflictError
    5. Re-read and return the full reservation list, then commit

    Dependencies:
    - uow: Unit of Work sharing one session across all repositories
    """

    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work]),
    ) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def apply(
        self, *, event_id: int, requests: Sequence[ReservationChangeRequest]
    ) -> List[Reservation]:
        """
        Args:
            event_id: Event whose reservations are reconciled
            requests: Change requests, classified by which participant fields they carry

        Returns:
            Every reservation of the event after the batch, ordered by id

        Raises:
            ValidationError: Empty batch, unknown event/participant/seat/reservation,
                malformed request
            ConflictError: A bulk statement affected fewer rows than requested
            StorageError: Any other database failure
        """
        start_time = time.perf_counter()
        result = 'success'

        with self.tracer.start_as_current_span(
            'use_case.update_reservations',
            attributes={
                'event.id': event_id,
                'batch.size': len(requests),
            },
        ):
            try:
                return await self._apply(event_id=event_id, requests=requests)
            except ValidationError:
                result = 'validation_error'
                raise
            except ConflictError:
                result = 'conflict'
                raise
            except SQLAlchemyError as e:
                result = 'storage_error'
                Logger.base.error(f'❌ [RESERVATION] Storage failure for event {event_id}: {e}')
                raise StorageError('Failed to update reservations') from e
            finally:
                metrics.record_reservation_batch(
                    event_id=event_id,
                    result=result,
                    duration=time.perf_counter() - start_time,
                )

    async def _apply(
        self, *, event_id: int, requests: Sequence[ReservationChangeRequest]
    ) -> List[Reservation]:
        if not requests:
            raise ValidationError('Reservation inputs list cannot be empty')

        # Pure partition first: a malformed request fails before any I/O
        batch = ReservationChangeBatch.partition(requests)

        async with self.uow:
            if not await self.uow.event_query_repo.exists(event_id=event_id):
                raise ValidationError('Event not found')

            await self._validate_references(event_id=event_id, requests=requests, batch=batch)

            Logger.base.info(
                f'📝 [RESERVATION] event={event_id} '
                f'insert={len(batch.to_insert)} delete={len(batch.to_delete)} '
                f'update={len(batch.to_update)}'
            )

            await self._execute(event_id=event_id, batch=batch)

            reservations = await self.uow.seat_reservation_command_repo.find_by_event(
                event_id=event_id
            )
            await self.uow.commit()

        Logger.base.info(
            f'✅ [RESERVATION] event={event_id} applied {batch.size} changes, '
            f'{len(reservations)} reservations now held'
        )
        return reservations

    async def _validate_references(
        self,
        *,
        event_id: int,
        requests: Sequence[ReservationChangeRequest],
        batch: ReservationChangeBatch,
    ) -> None:
        # participant_id -> label used in the error message; first occurrence wins
        participant_refs: Dict[str, str] = {}
        seat_ids: Dict[int, None] = {}

        for request in requests:
            if request.participant_id is not None:
                participant_refs.setdefault(request.participant_id, 'Participant')
            if request.old_participant_id is not None:
                participant_refs.setdefault(request.old_participant_id, 'Old participant')
            if request.seat_id is not None:
                seat_ids.setdefault(request.seat_id)

        for participant_id, label in participant_refs.items():
            participant = await self.uow.participant_query_repo.find(participant_id=participant_id)
            if participant is None or not participant.belongs_to(event_id):
                raise ValidationError(
                    f"{label} not found or doesn't belong to this event: {participant_id}"
                )

        for seat_id in seat_ids:
            if not await self.uow.seat_query_repo.exists(seat_id=seat_id):
                raise ValidationError(f'Seat not found: {seat_id}')

        reservation_ids = [key.reservation_id for key in batch.to_delete] + [
            reassignment.reservation_id for reassignment in batch.to_update
        ]
        if reservation_ids:
            existing = await self.uow.seat_reservation_command_repo.find_existing_ids(
                event_id=event_id, reservation_ids=reservation_ids
            )
            for reservation_id in reservation_ids:
                if reservation_id not in existing:
                    raise ValidationError(f'Reservation not found: {reservation_id}')

    async def _execute(self, *, event_id: int, batch: ReservationChangeBatch) -> None:
        repo = self.uow.seat_reservation_command_repo

        if batch.to_insert:
            inserted = await repo.bulk_insert(event_id=event_id, assignments=batch.to_insert)
            self._check_affected(
                expected=len(batch.to_insert),
                affected=inserted,
                message='One or more seats are already reserved',
            )
            metrics.record_reservation_changes(
                event_id=event_id, kind=ReservationChangeKind.INSERT, count=inserted
            )

        if batch.to_delete:
            deleted = await repo.bulk_delete(event_id=event_id, keys=batch.to_delete)
            self._check_affected(
                expected=len(batch.to_delete),
                affected=deleted,
                message=(
                    'One or more reservation IDs not found or do not match '
                    'the specified participant/event'
                ),
            )
            metrics.record_reservation_changes(
                event_id=event_id, kind=ReservationChangeKind.DELETE, count=deleted
            )

        if batch.to_update:
            updated = await repo.bulk_update(event_id=event_id, reassignments=batch.to_update)
            self._check_affected(
                expected=len(batch.to_update),
                affected=updated,
                message='One or more reservation IDs were not found for update',
            )
            metrics.record_reservation_changes(
                event_id=event_id, kind=ReservationChangeKind.UPDATE, count=updated
            )

    @staticmethod
    def _check_affected(*, expected: int, affected: Optional[int], message: str) -> None:
        if affected is None or affected < expected:
            Logger.base.warning(
                f'⚠️ [RESERVATION] Conflict: expected {expected} rows, affected {affected}'
            )
            raise ConflictError(message)
