from abc import ABC, abstractmethod
from typing import Optional

from src.service.seating.domain.entity.participant_entity import Participant


class IParticipantQueryRepo(ABC):
    @abstractmethod
    async def find(self, *, participant_id: str) -> Optional[Participant]:
        """
        Args:
            participant_id: Participant ID (unique across events)

        Returns:
            Participant entity or None if not found
        """
        pass
