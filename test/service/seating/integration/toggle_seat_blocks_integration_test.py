import pytest

from src.platform.exception.exceptions import ValidationError
from src.service.seating.app.command.toggle_seat_blocks_use_case import ToggleSeatBlocksUseCase
from src.service.seating.app.query.list_seat_blocks_use_case import ListSeatBlocksUseCase
from src.service.seating.domain.value_object.seat_block_toggle import SeatBlockToggle
from src.service.seating.driven_adapter.repo.seat_block_command_repo_impl import (
    SeatBlockCommandRepoImpl,
)


pytestmark = pytest.mark.integration

EVENT_ID = 1


@pytest.fixture
def use_case(uow_factory) -> ToggleSeatBlocksUseCase:
    return ToggleSeatBlocksUseCase(uow=uow_factory())


async def test_toggle_twice_blocks_then_releases(use_case, fetch_blocked_seats) -> None:
    """
    Given: seat 103 is not blocked
    When: it is toggled twice
    Then: the first call blocks it, the second call releases it
    """
    first = await use_case.apply(event_id=EVENT_ID, requests=[SeatBlockToggle(seat_id=103)])
    assert [block.seat_id for block in first] == [103]
    assert first[0].id is not None

    second = await use_case.apply(event_id=EVENT_ID, requests=[SeatBlockToggle(seat_id=103)])
    assert second == []
    assert await fetch_blocked_seats() == []


async def test_mixed_toggle_blocks_and_releases_in_one_call(
    use_case, add_seat_block, fetch_blocked_seats
) -> None:
    await add_seat_block(seat_id=101)

    result = await use_case.apply(
        event_id=EVENT_ID,
        requests=[SeatBlockToggle(seat_id=101), SeatBlockToggle(seat_id=102)],
    )

    assert [block.seat_id for block in result] == [102]
    assert await fetch_blocked_seats() == [102]


async def test_unknown_seat_is_skipped_rest_applies(use_case, fetch_blocked_seats) -> None:
    result = await use_case.apply(
        event_id=EVENT_ID,
        requests=[SeatBlockToggle(seat_id=999), SeatBlockToggle(seat_id=104)],
    )

    assert [block.seat_id for block in result] == [104]
    assert await fetch_blocked_seats() == [104]


async def test_blocks_are_scoped_per_event(
    use_case, add_seat_block, fetch_blocked_seats
) -> None:
    await add_seat_block(seat_id=105, event_id=2)

    await use_case.apply(event_id=EVENT_ID, requests=[SeatBlockToggle(seat_id=105)])

    assert await fetch_blocked_seats() == [105]
    assert await fetch_blocked_seats(2) == [105]


async def test_unknown_event_is_rejected(use_case) -> None:
    with pytest.raises(ValidationError, match='Event not found'):
        await use_case.apply(event_id=404, requests=[SeatBlockToggle(seat_id=101)])


async def test_list_seat_blocks(uow_factory, add_seat_block) -> None:
    await add_seat_block(seat_id=102)
    await add_seat_block(seat_id=101)

    blocks = await ListSeatBlocksUseCase(uow=uow_factory()).list_by_event(event_id=EVENT_ID)

    assert [block.seat_id for block in blocks] == [102, 101]
    assert all(block.created_at is not None for block in blocks)


async def test_insert_of_already_blocked_seat_affects_no_row(
    uow_factory, add_seat_block, fetch_blocked_seats
) -> None:
    await add_seat_block(seat_id=103)

    async with uow_factory() as uow:
        inserted = await uow.seat_block_command_repo.insert(event_id=EVENT_ID, seat_id=103)
        await uow.commit()

    assert inserted == 0
    assert await fetch_blocked_seats() == [103]


async def test_seat_blocked_concurrently_is_skipped_rest_applies(
    use_case, add_seat_block, fetch_blocked_seats, monkeypatch
) -> None:
    """
    Given: seats 101 and 103 are blocked, but the existence check for 103 reads stale data
           (another writer blocked it after the read)
    When: 101, 103 and 104 are toggled
    Then: 101 is released, 104 is blocked, 103 stays blocked and the call still commits
    """
    await add_seat_block(seat_id=101)
    await add_seat_block(seat_id=103)

    real_exists = SeatBlockCommandRepoImpl.exists

    async def stale_exists(self, *, event_id: int, seat_id: int) -> bool:
        if seat_id == 103:
            return False
        return await real_exists(self, event_id=event_id, seat_id=seat_id)

    monkeypatch.setattr(SeatBlockCommandRepoImpl, 'exists', stale_exists)

    result = await use_case.apply(
        event_id=EVENT_ID,
        requests=[
            SeatBlockToggle(seat_id=101),
            SeatBlockToggle(seat_id=103),
            SeatBlockToggle(seat_id=104),
        ],
    )

    assert [block.seat_id for block in result] == [103, 104]
    assert await fetch_blocked_seats() == [103, 104]
