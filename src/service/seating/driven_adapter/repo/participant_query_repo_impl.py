from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.seating.app.interface.i_participant_query_repo import IParticipantQueryRepo
from src.service.seating.domain.entity.participant_entity import Participant
from src.service.seating.driven_adapter.model.participant_model import ParticipantModel


class ParticipantQueryRepoImpl(IParticipantQueryRepo):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @Logger.io
    async def find(self, *, participant_id: str) -> Optional[Participant]:
        result = await self.session.execute(
            select(ParticipantModel).where(ParticipantModel.participant_id == participant_id)
        )
        participant_model = result.scalar_one_or_none()

        if not participant_model:
            return None

        return self._model_to_entity(participant_model)

    def _model_to_entity(self, participant_model: ParticipantModel) -> Participant:
        return Participant(
            participant_id=participant_model.participant_id,
            event_id=participant_model.event_id,
            name=participant_model.name,
            number_of_tickets=participant_model.number_of_tickets,
            seat_color=participant_model.seat_color,
        )
