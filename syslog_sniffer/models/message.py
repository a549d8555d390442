"""
Data model for a syslog message extracted from a captured frame
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class ParsedMessage(BaseModel):
    """A decoded syslog payload and the hostname found in its header, if any"""
    model_config = ConfigDict(frozen=True)

    text: str = Field(..., min_length=1, description="Decoded payload, header fields included")
    hostname: Optional[str] = Field(
        default=None, description="Hostname from the RFC 5424/3164 header"
    )
