from typing import List, Self, Sequence

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace
from sqlalchemy.exc import SQLAlchemyError

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import StorageError, ValidationError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.seating_metrics import metrics
from src.service.seating.domain.entity.seat_block_entity import SeatBlock
from src.service.seating.domain.value_object.seat_block_toggle import SeatBlockToggle


class ToggleSeatBlocksUseCase:
    """
    Flip the block state of each requested seat

    Unlike reservation batches this is best-effort per seat: an unknown seat or a seat
    blocked in the meantime is skipped and logged, the rest of the batch still applies.
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
    async def apply(self, *, event_id: int, requests: Sequence[SeatBlockToggle]) -> List[SeatBlock]:
        if not requests:
            raise ValidationError('Seat block inputs list cannot be empty')

        with self.tracer.start_as_current_span(
            'use_case.toggle_seat_blocks',
            attributes={
                'event.id': event_id,
                'batch.size': len(requests),
            },
        ):
            try:
                async with self.uow:
                    if not await self.uow.event_query_repo.exists(event_id=event_id):
                        raise ValidationError('Event not found')

                    to_unblock: List[int] = []
                    to_block: List[int] = []
                    for request in requests:
                        if await self.uow.seat_block_command_repo.exists(
                            event_id=event_id, seat_id=request.seat_id
                        ):
                            to_unblock.append(request.seat_id)
                        else:
                            to_block.append(request.seat_id)

                    for seat_id in to_unblock:
                        await self.uow.seat_block_command_repo.delete_by_event_and_seat(
                            event_id=event_id, seat_id=seat_id
                        )
                        metrics.record_seat_block_toggle(event_id=event_id, action='unblocked')

                    for seat_id in to_block:
                        await self._block(event_id=event_id, seat_id=seat_id)

                    seat_blocks = await self.uow.seat_block_command_repo.find_by_event(
                        event_id=event_id
                    )
                    await self.uow.commit()
            except SQLAlchemyError as e:
                Logger.base.error(f'❌ [SEAT_BLOCK] Storage failure for event {event_id}: {e}')
                raise StorageError('Failed to update seat blocks') from e

        Logger.base.info(
            f'🚧 [SEAT_BLOCK] event={event_id} unblocked={len(to_unblock)} '
            f'block_requested={len(to_block)} now_blocked={len(seat_blocks)}'
        )
        return seat_blocks

    async def _block(self, *, event_id: int, seat_id: int) -> None:
        if not await self.uow.seat_query_repo.exists(seat_id=seat_id):
            Logger.base.warning(f'⚠️ [SEAT_BLOCK] Seat not found, skipping block: {seat_id}')
            metrics.record_seat_block_toggle(event_id=event_id, action='skipped')
            return

        inserted = await self.uow.seat_block_command_repo.insert(event_id=event_id, seat_id=seat_id)
        if not inserted:
            Logger.base.debug(f'[SEAT_BLOCK] Seat {seat_id} already blocked for event {event_id}')
            metrics.record_seat_block_toggle(event_id=event_id, action='skipped')
            return

        metrics.record_seat_block_toggle(event_id=event_id, action='blocked')
