from typing import List

from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.seating.app.command.toggle_seat_blocks_use_case import ToggleSeatBlocksUseCase
from src.service.seating.app.query.list_seat_blocks_use_case import ListSeatBlocksUseCase
from src.service.seating.domain.entity.seat_block_entity import SeatBlock
from src.service.seating.domain.value_object.seat_block_toggle import SeatBlockToggle
from src.service.seating.driving_adapter.schema.seat_block_schema import (
    SeatBlockInputRequest,
    SeatBlockResponse,
)


router = APIRouter()


def _to_response(seat_block: SeatBlock) -> SeatBlockResponse:
    if seat_block.id is None:
        raise ValueError('Seat block ID should not be None after persisting.')

    return SeatBlockResponse(
        id=seat_block.id,
        event_id=seat_block.event_id,
        seat_id=seat_block.seat_id,
        created_at=seat_block.created_at,
    )


@router.get('/{event_id}/seat-blocks', status_code=status.HTTP_200_OK)
@Logger.io
async def list_seat_blocks(
    event_id: int,
    use_case: ListSeatBlocksUseCase = Depends(ListSeatBlocksUseCase.depends),
) -> List[SeatBlockResponse]:
    seat_blocks = await use_case.list_by_event(event_id=event_id)
    return [_to_response(seat_block) for seat_block in seat_blocks]


@router.put('/{event_id}/seat-blocks', status_code=status.HTTP_200_OK)
@Logger.io
async def toggle_seat_blocks(
    event_id: int,
    request: List[SeatBlockInputRequest],
    use_case: ToggleSeatBlocksUseCase = Depends(ToggleSeatBlocksUseCase.depends),
) -> List[SeatBlockResponse]:
    seat_blocks = await use_case.apply(
        event_id=event_id,
        requests=[SeatBlockToggle(seat_id=item.seat_id) for item in request],
    )
    return [_to_response(seat_block) for seat_block in seat_blocks]
