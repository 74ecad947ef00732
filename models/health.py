from typing import Optional

from pydantic import BaseModel, Field


class Health(BaseModel):
    status: int
    status_message: str
    timestamp: str = Field(..., description="ISO-8601 timestamp of the check")
    ip_address: str
    echo: Optional[str] = Field(None, description="Echo from the query string")
    path_echo: Optional[str] = Field(None, description="Echo from the URL path")
