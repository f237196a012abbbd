"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=BaseModel)


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """One externally visible registry operation.

    Use cases translate request models into domain service calls and domain
    objects back into response models; domain errors pass through untouched.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT: ...
