from typing import Generic, List, TypeVar

from pydantic import BaseModel

T = TypeVar("T")

class HATEOASLink(BaseModel):
    href: str           # collection URL
    relation: str       # "add_grape", "get_all", "delete_grape"
    method: str         # "GET", "POST", "DELETE"

class HATEOASEnvelope(BaseModel, Generic[T]):
    data: T
    links: List[HATEOASLink]
