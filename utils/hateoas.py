from fastapi import Request
from typing import List, TypeVar
from models.hateoas import HATEOASLink, HATEOASEnvelope

T = TypeVar("T")


# -----------------------------------------------------------------------------
# Grape HATEOAS
# -----------------------------------------------------------------------------
def build_grape_links(base_url: str) -> List[HATEOASLink]:
    return [
        HATEOASLink(
            href=base_url,
            relation="add_grape",
            method="POST",
        ),
        HATEOASLink(
            href=base_url,
            relation="get_all",
            method="GET",
        ),
        HATEOASLink(
            href=base_url,
            relation="delete_grape",
            method="DELETE",
        ),
    ]

def to_hateoas_model(base_url: str, data: T) -> HATEOASEnvelope[T]:
    """Wrap `data` together with the grape collection links."""
    return HATEOASEnvelope(data=data, links=build_grape_links(base_url))

def hateoas_grapes(request: Request, data: T) -> HATEOASEnvelope[T]:
    # Host + collection path, shared by all three links
    base_url = str(request.url_for("list_hateoas_grapes"))

    return to_hateoas_model(base_url, data)
