"""
Conftest for pure unit tests - no database.

`FakeUnitOfWork` keeps the real AbstractUnitOfWork enter/exit behaviour (rollback on exit)
and swaps every repository for an AsyncMock.
"""

from typing import List
from unittest.mock import AsyncMock

import pytest

from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.service.seating.domain.entity.participant_entity import Participant


class FakeUnitOfWork(AbstractUnitOfWork):
    def __init__(self) -> None:
        self.event_query_repo = AsyncMock()
        self.participant_query_repo = AsyncMock()
        self.seat_query_repo = AsyncMock()
        self.seat_reservation_command_repo = AsyncMock()
        self.seat_block_command_repo = AsyncMock()
        self.calls: List[str] = []
        self.committed = False
        self.rolled_back = False

    async def _commit(self) -> None:
        self.calls.append('commit')
        self.committed = True

    async def rollback(self) -> None:
        self.calls.append('rollback')
        self.rolled_back = True


PARTICIPANTS = {
    'P1': Participant(participant_id='P1', event_id=1, name='Alice'),
    'P2': Participant(participant_id='P2', event_id=1, name='Bob'),
    'P9': Participant(participant_id='P9', event_id=2, name='Zed'),
}
KNOWN_SEATS = {101, 102, 103, 104, 105}
KNOWN_RESERVATIONS = {7, 8}


@pytest.fixture
def uow() -> FakeUnitOfWork:
    """
    Event 1 exists, P1/P2 belong to it, P9 belongs to event 2, seats 101..105 exist,
    reservations 7 and 8 exist in event 1
    """
    fake = FakeUnitOfWork()

    async def event_exists(*, event_id: int) -> bool:
        return event_id in (1, 2)

    async def find_participant(*, participant_id: str) -> Participant | None:
        return PARTICIPANTS.get(participant_id)

    async def seat_exists(*, seat_id: int) -> bool:
        return seat_id in KNOWN_SEATS

    async def find_existing_ids(*, event_id: int, reservation_ids) -> set[int]:
        return {rid for rid in reservation_ids if event_id == 1 and rid in KNOWN_RESERVATIONS}

    fake.event_query_repo.exists.side_effect = event_exists
    fake.participant_query_repo.find.side_effect = find_participant
    fake.seat_query_repo.exists.side_effect = seat_exists
    fake.seat_reservation_command_repo.find_existing_ids.side_effect = find_existing_ids
    fake.seat_reservation_command_repo.find_by_event.return_value = []
    fake.seat_block_command_repo.find_by_event.return_value = []
    return fake
