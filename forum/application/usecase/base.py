"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=BaseModel)


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """One API operation orchestrating domain services.

    Takes a request model and returns a response model. Domain errors
    propagate to the interface layer, which maps them to HTTP responses.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass
