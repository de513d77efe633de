"""
Seed data for seating integration tests

Every test starts from:
- event 1 (main) and event 2 (other)
- seats 101..105
- participants P1, P2 invited to event 1; P9 invited to event 2
- no reservations, no seat blocks
"""

from collections.abc import Awaitable, Callable
from typing import List, Tuple

import pytest
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from src.service.seating.driven_adapter.model import (
    EventModel,
    ParticipantModel,
    SeatBlockModel,
    SeatModel,
    SeatReservationModel,
)


@pytest.fixture(autouse=True)
async def seed_seating_data(session_maker: async_sessionmaker[AsyncSession]) -> None:
    async with session_maker() as session:
        session.add_all(
            [
                EventModel(id=1, name='Main Event'),
                EventModel(id=2, name='Other Event'),
            ]
        )
        session.add_all(
            SeatModel(id=seat_id, seat_row_id=1, order_number=seat_id - 100)
            for seat_id in range(101, 106)
        )
        await session.flush()
        session.add_all(
            [
                ParticipantModel(participant_id='P1', event_id=1, name='Alice'),
                ParticipantModel(participant_id='P2', event_id=1, name='Bob'),
                ParticipantModel(participant_id='P9', event_id=2, name='Zed'),
            ]
        )
        await session.commit()


@pytest.fixture
def add_reservation(
    session_maker: async_sessionmaker[AsyncSession],
) -> Callable[..., Awaitable[None]]:
    """Insert a reservation row directly, bypassing the use case"""

    async def _add(*, id: int, seat_id: int, participant_id: str, event_id: int = 1) -> None:
        async with session_maker() as session:
            session.add(
                SeatReservationModel(
                    id=id, event_id=event_id, seat_id=seat_id, participant_id=participant_id
                )
            )
            await session.commit()

    return _add


@pytest.fixture
def fetch_reservations(
    session_maker: async_sessionmaker[AsyncSession],
) -> Callable[..., Awaitable[List[Tuple[int, int, str]]]]:
    """Current (id, seat_id, participant_id) rows of an event, ordered by id"""

    async def _fetch(event_id: int = 1) -> List[Tuple[int, int, str]]:
        async with session_maker() as session:
            result = await session.execute(
                select(
                    SeatReservationModel.id,
                    SeatReservationModel.seat_id,
                    SeatReservationModel.participant_id,
                )
                .where(SeatReservationModel.event_id == event_id)
                .order_by(SeatReservationModel.id)
            )
            return [(row.id, row.seat_id, row.participant_id) for row in result]

    return _fetch


@pytest.fixture
def add_seat_block(
    session_maker: async_sessionmaker[AsyncSession],
) -> Callable[..., Awaitable[None]]:
    async def _add(*, seat_id: int, event_id: int = 1) -> None:
        async with session_maker() as session:
            session.add(SeatBlockModel(event_id=event_id, seat_id=seat_id))
            await session.commit()

    return _add


@pytest.fixture
def fetch_blocked_seats(
    session_maker: async_sessionmaker[AsyncSession],
) -> Callable[..., Awaitable[List[int]]]:
    """Seat ids currently blocked for an event, ordered by block id"""

    async def _fetch(event_id: int = 1) -> List[int]:
        async with session_maker() as session:
            result = await session.execute(
                select(SeatBlockModel.seat_id)
                .where(SeatBlockModel.event_id == event_id)
                .order_by(SeatBlockModel.id)
            )
            return list(result.scalars())

    return _fetch
