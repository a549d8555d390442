"""
Run configuration and command line parsing.
"""

import argparse
from typing import List, Optional

from pydantic import BaseModel, Field, ValidationError, model_validator


class SnifferConfig(BaseModel):
    """Settings for one sniffer run"""
    interface: Optional[str] = Field(default=None, description="Interface to capture on")
    port: int = Field(default=514, ge=1, le=65535, description="UDP port to watch")
    debug: bool = Field(default=False, description="Enable debug logging")
    interval: int = Field(default=10, ge=0, description="Total run length in seconds")
    periodic: bool = Field(default=False, description="Report every `frequency` seconds")
    frequency: int = Field(default=5, ge=0, description="Seconds between periodic reports")
    listen: bool = Field(default=False, description="Bind a UDP socket instead of capturing")
    host: str = Field(default="0.0.0.0", description="Bind address in listen mode")
    timeout: float = Field(default=1.0, gt=0, description="Packet source poll timeout")
    log_file: Optional[str] = Field(default=None, description="Optional debug log file")

    @model_validator(mode="after")
    def _check_source(self) -> "SnifferConfig":
        if not self.listen and not self.interface:
            raise ValueError("an interface is required unless listen mode is used")
        return self


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="syslog-sniffer",
        description="Watch syslog traffic on a UDP port and report per-host message stats as JSON.",
    )
    parser.add_argument("-p", "--port", type=int, default=514, help="UDP port to watch (default: 514)")
    parser.add_argument("-i", "--interface", default=None, help="Network interface to capture on")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--interval", type=int, default=10, help="Total run length in seconds (default: 10)")
    parser.add_argument("--periodic", action="store_true", help="Emit a report every --frequency seconds")
    parser.add_argument("--frequency", type=int, default=5, help="Seconds between periodic reports (default: 5)")
    parser.add_argument(
        "--listen",
        action="store_true",
        help="Bind a UDP socket on --host:--port instead of capturing (no capture privileges needed)",
    )
    parser.add_argument("--host", default="0.0.0.0", help="Bind address for --listen (default: 0.0.0.0)")
    parser.add_argument("--timeout", type=float, default=1.0, help="Poll timeout in seconds (default: 1.0)")
    parser.add_argument("--log-file", default=None, help="Also write debug logs to this file")
    return parser


def parse_args(argv: Optional[List[str]] = None) -> SnifferConfig:
    """Parse command line arguments into a validated SnifferConfig."""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return SnifferConfig(**vars(args))
    except ValidationError as e:
        messages = "; ".join(err["msg"] for err in e.errors())
        parser.error(messages)


def determine_log_level(debug: bool, env_level_is_set: bool) -> Optional[str]:
    """
    Pick the log level for the run.

    --debug wins; with no LOGURU_LEVEL in the environment only errors are
    shown; otherwise None, meaning the environment's level is kept.
    """
    if debug:
        return "DEBUG"
    if not env_level_is_set:
        return "ERROR"
    return None
