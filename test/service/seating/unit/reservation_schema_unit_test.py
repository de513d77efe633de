import pytest

from src.service.seating.driving_adapter.schema.reservation_schema import ReservationInputRequest
from src.service.seating.driving_adapter.schema.seat_block_schema import SeatBlockInputRequest


pytestmark = pytest.mark.unit


def test_every_documented_reservation_example_is_a_valid_request() -> None:
    examples = ReservationInputRequest.model_json_schema()['examples']

    requests = [ReservationInputRequest.model_validate(example) for example in examples]

    assert len(requests) == 4
    holder_only = requests[2]
    assert holder_only.id == 8
    assert holder_only.seat_id is None


def test_seat_block_example_is_published() -> None:
    schema = SeatBlockInputRequest.model_json_schema()

    assert schema['example'] == {'seat_id': 103}
