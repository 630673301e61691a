"""Interaction routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from forum.application.usecase.interaction import (
    ReactRequest,
    ReactResponse,
    ReactUseCase,
)
from forum.domain.error import DomainError, StorageError
from forum.interface.error import ReactionUnavailableError, to_http_exception

router = APIRouter(tags=["interactions"], route_class=DishkaRoute)


class ReactAPIRequest(BaseModel):
    """API request for reacting to a topic or comment."""

    user_id: str
    target_id: str
    target_type: str
    interaction_type: str


@router.post("/interactions", response_model=ReactResponse)
async def react(
    request: ReactAPIRequest,
    react_use_case: FromDishka[ReactUseCase],
) -> ReactResponse:
    """Add, toggle off or switch a reaction.

    Repeating the stored reaction removes it; issuing a different one
    replaces it.

    Args:
        request: User, target and reaction type
        react_use_case: React use case from DI

    Returns:
        Net score delta and the reaction now stored

    Raises:
        HTTPException: 400 on invalid input, 404 if the target is missing,
            409 on a persisting concurrent conflict
        ReactionUnavailableError: If the store failed
    """
    try:
        return await react_use_case.execute(
            ReactRequest(
                user_id=request.user_id,
                target_id=request.target_id,
                target_type=request.target_type,
                interaction_type=request.interaction_type,
            )
        )
    except StorageError as e:
        raise ReactionUnavailableError(str(e)) from e
    except DomainError as e:
        raise to_http_exception(e, "react")
