"""
Data models for per-host stats and the JSON report
"""
from typing import Dict
from pydantic import BaseModel, ConfigDict, Field

# Host key for messages whose header carried no hostname
UNKNOWN_HOST = "Unknown"


class HostRecord(BaseModel):
    """Message count and first-seen sample for one host"""
    model_config = ConfigDict(frozen=True)

    count: int = Field(..., ge=1, description="Messages seen in the window")
    sample: str = Field(..., description="First message seen in the window")


class StatsSnapshot(BaseModel):
    """Stats for one reporting window, as emitted on stdout"""
    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "interval_seconds": 5,
                "hosts": {
                    "mymachine": {
                        "count": 2,
                        "sample": "<13>Oct 11 22:14:15 mymachine su: su root"
                    }
                }
            }
        }
    )

    interval_seconds: int = Field(..., ge=0, description="Window length in seconds")
    hosts: Dict[str, HostRecord] = Field(default_factory=dict)

    def to_json(self) -> str:
        """Pretty-printed JSON report."""
        return self.model_dump_json(indent=2)
