from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, List, Optional, Protocol, TypeVar

if TYPE_CHECKING:
    from models.grape import GrapeCreate, GrapeRead

T = TypeVar("T")


@dataclass(frozen=True)
class OperationResult(Generic[T]):
    """
    Outcome of a collaborator call.

    Services catch their own exceptions and hand them back here, so request
    handlers branch on `ok` instead of wrapping every call in try/except.
    """
    value: Optional[T] = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Optional[T] = None) -> "OperationResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: BaseException) -> "OperationResult[T]":
        return cls(error=error)


# -----------------------------------------------------------------------------
# Collaborator interfaces consumed by the grape routers
# -----------------------------------------------------------------------------
class GrapeStore(Protocol):
    async def add_grape(self, grape: GrapeCreate) -> OperationResult[GrapeRead]: ...

    async def get_grapes(self) -> OperationResult[List[GrapeRead]]: ...

    async def delete_grape(self, grape_id: int) -> OperationResult[None]: ...


class GrapeNotifier(Protocol):
    async def send_grape_message(self) -> OperationResult[None]: ...
