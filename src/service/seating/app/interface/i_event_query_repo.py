from abc import ABC, abstractmethod


class IEventQueryRepo(ABC):
    @abstractmethod
    async def exists(self, *, event_id: int) -> bool:
        pass
