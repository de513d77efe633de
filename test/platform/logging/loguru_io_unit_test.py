import pytest

from src.platform.exception.exceptions import ValidationError
from src.platform.logging.loguru_io import Logger
from src.platform.logging.loguru_io_config import MAX_CONTENT_LENGTH
from src.platform.logging.loguru_io_utils import (
    mask_sensitive,
    should_mask_keyword,
    truncate_content,
)


pytestmark = pytest.mark.unit


class TestMasking:
    def test_masks_sensitive_assignment_in_text(self) -> None:
        masked = mask_sensitive("connect(user='app', password='hunter2')")

        assert 'hunter2' not in masked
        assert "password='********'" in masked

    def test_leaves_plain_data_untouched(self) -> None:
        data = {'seat_id': 101}

        assert mask_sensitive(data) is data

    def test_masks_value_by_keyword(self) -> None:
        assert should_mask_keyword('token', 'abc') == '********'
        assert should_mask_keyword('participant_id', 'P1') == 'P1'


def test_truncates_long_content() -> None:
    truncated = truncate_content('x' * (MAX_CONTENT_LENGTH + 20))

    assert truncated.startswith('x' * MAX_CONTENT_LENGTH)
    assert truncated.endswith('<20 more chars>')
    assert truncate_content('short') == 'short'


class TestIoDecorator:
    async def test_async_return_value_passes_through(self) -> None:
        @Logger.io
        async def add(a: int, b: int) -> int:
            return a + b

        assert await add(1, 2) == 3

    def test_reraise_false_swallows_and_returns_none(self) -> None:
        @Logger.io(reraise=False)
        def explode() -> int:
            raise RuntimeError('boom')

        assert explode() is None

    async def test_nested_layers_log_exception_once(self) -> None:
        """
        Given: an error raised three @Logger.io layers deep
        When: it bubbles up to the caller
        Then: exactly one ERROR record is written for it
        """
        records: list[str] = []
        handler_id = Logger.base.add(
            lambda message: records.append(message.record['message']), level='ERROR'
        )

        @Logger.io
        async def inner() -> None:
            raise ValidationError('nested-layer-marker')

        @Logger.io
        async def middle() -> None:
            await inner()

        @Logger.io
        async def outer() -> None:
            await middle()

        try:
            with pytest.raises(ValidationError):
                await outer()
        finally:
            Logger.base.remove(handler_id)

        assert len([r for r in records if 'nested-layer-marker' in r]) == 1
