"""Common lifecycle for packet sources feeding the capture worker."""

from abc import ABC, abstractmethod
from typing import Optional

from loguru import logger


class BasePacketSource(ABC):
    """
    A poll-with-timeout feed of raw frames.

    next_frame() either returns a frame, returns None once the source's
    own timeout expires with nothing to read, or raises CaptureError.
    """

    def __init__(self, name: str, timeout: float = 1.0) -> None:
        self.name = name
        self.timeout = timeout
        self.running = False

    @abstractmethod
    def start(self) -> None:
        """Open the underlying capture; raises CaptureError on failure."""

    @abstractmethod
    def next_frame(self) -> Optional[bytes]:
        """Return the next frame, or None if none arrived within the timeout."""

    @abstractmethod
    def link_description(self) -> str:
        """Human readable link type, for diagnostics."""

    def stop(self) -> None:
        logger.debug(f"[{self.name}] Stopping")
        self.running = False

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.stop()
