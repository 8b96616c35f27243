"""
Enveloppe de réponse commune aux opérations de modification (PUT, DELETE)
et aux réponses "introuvable".
"""

from typing import Dict, Generic, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class GeneralResponse(BaseModel, Generic[T]):
    success: bool
    message: str
    data: Optional[Dict[str, T]] = None

    @classmethod
    def ok(cls, message: str, **data: T) -> "GeneralResponse[T]":
        return cls(success=True, message=message, data=data)

    @classmethod
    def fail(cls, message: str) -> "GeneralResponse[T]":
        return cls(success=False, message=message, data=None)
