"""
Unit tests for ReservationChangeRequest classification and ReservationChangeBatch partition

Tests:
- Classification by which participant fields are present
- Classification is a pure function of the request
- Partition groups requests per bulk statement and enforces required ids
"""

import pytest

from src.platform.exception.exceptions import ValidationError
from src.service.seating.domain.enum.reservation_change_kind import ReservationChangeKind
from src.service.seating.domain.value_object.reservation_change import (
    ReservationChangeBatch,
    ReservationChangeRequest,
    ReservationKey,
    ReservationReassignment,
    SeatAssignment,
)


pytestmark = pytest.mark.unit


class TestClassify:
    @pytest.mark.parametrize(
        ('request_', 'expected'),
        [
            (ReservationChangeRequest(seat_id=1, participant_id='P1'), ReservationChangeKind.INSERT),
            (
                ReservationChangeRequest(reservation_id=7, old_participant_id='P1'),
                ReservationChangeKind.DELETE,
            ),
            (
                ReservationChangeRequest(
                    reservation_id=7, seat_id=2, participant_id='P2', old_participant_id='P1'
                ),
                ReservationChangeKind.UPDATE,
            ),
        ],
    )
    def test_kind_follows_participant_fields(
        self, request_: ReservationChangeRequest, expected: ReservationChangeKind
    ) -> None:
        assert request_.classify() is expected

    def test_same_holder_on_both_sides_is_still_an_update(self) -> None:
        request = ReservationChangeRequest(
            reservation_id=7, seat_id=2, participant_id='P1', old_participant_id='P1'
        )

        assert request.classify() is ReservationChangeKind.UPDATE

    def test_no_participant_at_all_is_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            ReservationChangeRequest(seat_id=1, reservation_id=7).classify()

        assert exc_info.value.status_code == 400
        assert 'both participantId and oldParticipantId are null' in exc_info.value.message

    def test_classification_is_repeatable(self) -> None:
        request = ReservationChangeRequest(reservation_id=3, old_participant_id='P1')

        assert {request.classify() for _ in range(5)} == {ReservationChangeKind.DELETE}


class TestPartition:
    def test_groups_each_kind_in_request_order(self) -> None:
        batch = ReservationChangeBatch.partition(
            [
                ReservationChangeRequest(seat_id=101, participant_id='P1'),
                ReservationChangeRequest(reservation_id=7, old_participant_id='P1'),
                ReservationChangeRequest(seat_id=102, participant_id='P2'),
                ReservationChangeRequest(
                    reservation_id=8, seat_id=103, participant_id='P2', old_participant_id='P1'
                ),
            ]
        )

        assert batch.to_insert == (
            SeatAssignment(participant_id='P1', seat_id=101),
            SeatAssignment(participant_id='P2', seat_id=102),
        )
        assert batch.to_delete == (ReservationKey(reservation_id=7, participant_id='P1'),)
        assert batch.to_update == (
            ReservationReassignment(reservation_id=8, participant_id='P2', seat_id=103),
        )
        assert batch.size == 4

    def test_update_without_seat_only_changes_holder(self) -> None:
        batch = ReservationChangeBatch.partition(
            [
                ReservationChangeRequest(
                    reservation_id=7, participant_id='P2', old_participant_id='P1'
                )
            ]
        )

        assert batch.to_update == (
            ReservationReassignment(reservation_id=7, participant_id='P2', seat_id=None),
        )

    def test_delete_is_keyed_by_old_participant(self) -> None:
        batch = ReservationChangeBatch.partition(
            [ReservationChangeRequest(reservation_id=7, seat_id=101, old_participant_id='P1')]
        )

        assert batch.to_delete == (ReservationKey(reservation_id=7, participant_id='P1'),)

    def test_batch_is_immutable(self) -> None:
        batch = ReservationChangeBatch.partition(
            [ReservationChangeRequest(seat_id=101, participant_id='P1')]
        )

        with pytest.raises(AttributeError):
            batch.to_insert = ()  # type: ignore[misc]

    @pytest.mark.parametrize(
        ('request_', 'message'),
        [
            (ReservationChangeRequest(participant_id='P1'), 'Reservation insert requires a seatId'),
            (
                ReservationChangeRequest(old_participant_id='P1'),
                'All reservation deletions must include an id',
            ),
            (
                ReservationChangeRequest(seat_id=1, participant_id='P2', old_participant_id='P1'),
                'All reservation updates must include an id',
            ),
        ],
    )
    def test_missing_required_id_is_rejected(
        self, request_: ReservationChangeRequest, message: str
    ) -> None:
        with pytest.raises(ValidationError, match=message):
            ReservationChangeBatch.partition(
                [ReservationChangeRequest(seat_id=101, participant_id='P1'), request_]
            )

    def test_empty_input_gives_empty_batch(self) -> None:
        batch = ReservationChangeBatch.partition([])

        assert batch.size == 0
