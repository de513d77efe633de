from typing import List

from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.seating.app.command.update_reservations_use_case import (
    UpdateReservationsUseCase,
)
from src.service.seating.app.query.list_reservations_use_case import ListReservationsUseCase
from src.service.seating.domain.entity.reservation_entity import Reservation
from src.service.seating.domain.value_object.reservation_change import ReservationChangeRequest
from src.service.seating.driving_adapter.schema.reservation_schema import (
    ReservationInputRequest,
    ReservationResponse,
)


router = APIRouter()


def _to_response(reservation: Reservation) -> ReservationResponse:
    if reservation.id is None:
        raise ValueError('Reservation ID should not be None after persisting.')

    return ReservationResponse(
        id=reservation.id,
        event_id=reservation.event_id,
        seat_id=reservation.seat_id,
        participant_id=reservation.participant_id,
    )


@router.get('/{event_id}/reservations', status_code=status.HTTP_200_OK)
@Logger.io
async def list_reservations(
    event_id: int,
    use_case: ListReservationsUseCase = Depends(ListReservationsUseCase.depends),
) -> List[ReservationResponse]:
    reservations = await use_case.list_by_event(event_id=event_id)
    return [_to_response(reservation) for reservation in reservations]


@router.put('/{event_id}/reservations', status_code=status.HTTP_200_OK)
@Logger.io
async def update_reservations(
    event_id: int,
    request: List[ReservationInputRequest],
    use_case: UpdateReservationsUseCase = Depends(UpdateReservationsUseCase.depends),
) -> List[ReservationResponse]:
    reservations = await use_case.apply(
        event_id=event_id,
        requests=[
            ReservationChangeRequest(
                reservation_id=item.id,
                seat_id=item.seat_id,
                participant_id=item.participant_id,
                old_participant_id=item.old_participant_id,
            )
            for item in request
        ],
    )
    return [_to_response(reservation) for reservation in reservations]
