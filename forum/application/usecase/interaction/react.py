"""React use case."""

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.service import InteractionService
from forum.domain.value import InteractionType, TargetType, UserId, parse_uuid


class ReactRequest(BaseModel):
    """React request.

    Enum fields arrive as raw strings so unknown values are reported as
    domain validation errors.
    """

    user_id: str  # UUID string
    target_id: str  # UUID string
    target_type: str  # TOPIC or COMMENT
    interaction_type: str  # VOTE_UP, VOTE_DOWN or HEART


class ReactResponse(BaseModel):
    """React response."""

    success: bool
    delta: int
    target_id: str
    target_type: TargetType
    reaction: InteractionType | None  # Stored reaction after the call


class ReactUseCase(BaseUseCase[ReactRequest, ReactResponse]):
    """Use case for adding, toggling off or switching a reaction."""

    def __init__(self, interaction_service: InteractionService) -> None:
        """Initialize react use case.

        Args:
            interaction_service: Interaction ledger service
        """
        self.interaction_service = interaction_service

    async def execute(self, request: ReactRequest) -> ReactResponse:
        """Execute react flow.

        Args:
            request: React request

        Returns:
            Net score delta applied and the reaction now stored

        Raises:
            ValidationError: If an ID or enum value is invalid
            NotFoundError: If the target does not exist
            ConflictError: If a concurrent write keeps conflicting
            StorageError: If the store fails
        """
        user_id = UserId(parse_uuid(request.user_id, "user_id"))
        target_id = parse_uuid(request.target_id, "target_id")
        target_type = TargetType.parse(request.target_type)
        interaction_type = InteractionType.parse(request.interaction_type)

        outcome = await self.interaction_service.apply_reaction(
            user_id=user_id,
            target_type=target_type,
            target_id=target_id,
            interaction_type=interaction_type,
        )

        return ReactResponse(
            success=True,
            delta=outcome.delta,
            target_id=str(target_id),
            target_type=target_type,
            reaction=outcome.current,
        )
