from abc import ABC, abstractmethod
from typing import List

from src.service.seating.domain.entity.seat_block_entity import SeatBlock


class ISeatBlockCommandRepo(ABC):
    @abstractmethod
    async def exists(self, *, event_id: int, seat_id: int) -> bool:
        pass

    @abstractmethod
    async def insert(self, *, event_id: int, seat_id: int) -> int:
        """
        Block the seat unless it is already blocked

        Returns:
            1 if a block was created, 0 if one already existed
        """
        pass

    @abstractmethod
    async def delete_by_event_and_seat(self, *, event_id: int, seat_id: int) -> int:
        pass

    @abstractmethod
    async def find_by_event(self, *, event_id: int) -> List[SeatBlock]:
        pass
