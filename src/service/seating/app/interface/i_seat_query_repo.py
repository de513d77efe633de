from abc import ABC, abstractmethod


class ISeatQueryRepo(ABC):
    @abstractmethod
    async def exists(self, *, seat_id: int) -> bool:
        pass
