"""
Base contract for controllers invoked by the HTTP adapter.
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Mapping, Optional, Type, Union

from pydantic import BaseModel

from lambda_adapter.errors.http import Unauthorized
from lambda_adapter.models.request import HandlerResult, NormalizedRequest


class Controller(ABC):
    """
    A unit of business logic behind one HTTP route.

    Subclasses implement ``handle``. When ``schema`` is set, the request body is
    validated with it before ``handle`` runs and the validated model replaces
    the raw body; a failing body raises pydantic's ``ValidationError``.
    When ``requires_account`` is set, requests without an account id are
    rejected with ``Unauthorized``.
    """

    schema: ClassVar[Optional[Type[BaseModel]]] = None
    requires_account: ClassVar[bool] = False

    async def execute(self, request: NormalizedRequest) -> Union[HandlerResult, Mapping[str, Any]]:
        if self.requires_account and request.account_id is None:
            raise Unauthorized()

        if self.schema is not None:
            request = request.model_copy(update={"body": self.validate_body(request.body)})

        return await self.handle(request)

    def validate_body(self, body: Any) -> BaseModel:
        return self.schema.model_validate({} if body is None else body)

    @abstractmethod
    async def handle(self, request: NormalizedRequest) -> Union[HandlerResult, Mapping[str, Any]]:
        ...
