"""
Capture Worker

Main orchestration: Capture → Extract → Count → Report

Pulls frames from a packet source for a fixed run length, extracts the
syslog message from each, counts messages per host and emits JSON
snapshots, either once at the end or every `frequency` seconds.
"""

import sys
import time
from typing import Callable, Optional

from loguru import logger

from syslog_sniffer.base.base_source import BasePacketSource
from syslog_sniffer.config import SnifferConfig
from syslog_sniffer.exceptions import CaptureError
from syslog_sniffer.models import StatsSnapshot, UNKNOWN_HOST
from syslog_sniffer.parsers import extract
from syslog_sniffer.stats import StatsTracker

# Pause after a capture error so a failing source is not spun on
ERROR_BACKOFF_SECONDS = 0.01

# Start of the syslog PRI field
PRI_MARKER = b"<"


def print_snapshot(snapshot: StatsSnapshot) -> None:
    """Write a snapshot to stdout as pretty JSON."""
    print(snapshot.to_json(), file=sys.stdout, flush=True)


class CaptureWorker:
    """
    Runs one capture session.
    
    Flow:
        1. If periodic and `frequency` seconds passed since the last flush,
           emit the current window (if any) and start a new one
        2. Pull one frame from the source
        3. Slice from the first '<', extract, count under the hostname
        4. Repeat until `interval` seconds have passed, then emit the rest
    """
    
    def __init__(
        self,
        config: SnifferConfig,
        source: BasePacketSource,
        emit: Callable[[StatsSnapshot], None] = print_snapshot,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep
    ):
        """
        Initialize capture worker.
        
        Args:
            config: Run settings (interval, periodic, frequency)
            source: Started packet source
            emit: Called with each snapshot to report
            clock: Monotonic time in seconds
            sleep: Used for the error backoff
        """
        self.config = config
        self.source = source
        self.emit = emit
        self.clock = clock
        self.sleep = sleep
        
        self.tracker = StatsTracker()
        self.running = False
        
        self.stats = {
            "frames": 0,
            "parsed": 0,
            "dropped": 0,
            "timeouts": 0,
            "errors": 0,
            "reports": 0
        }
    
    def _elapsed_seconds(self, since: float) -> int:
        """Whole seconds elapsed since a clock reading."""
        return int(self.clock() - since)
    
    def _emit(self, interval_seconds: int) -> None:
        snapshot = self.tracker.get_summary(interval_seconds)
        self.emit(snapshot)
        self.stats["reports"] += 1
    
    def process_frame(self, frame: bytes) -> bool:
        """
        Extract and count the syslog message carried by one frame.
        
        Frames may start with link/IP/UDP headers of unknown length, so the
        message is assumed to begin at the first '<' byte (the PRI marker).
        Frames without one are handed over whole.
        
        Returns:
            True if a message was counted
        """
        self.stats["frames"] += 1
        logger.debug(f"Received packet: len={len(frame)}")
        
        start = frame.find(PRI_MARKER)
        payload = frame[start:] if start != -1 else frame
        
        message = extract(payload)
        if message is None:
            self.stats["dropped"] += 1
            return False
        
        hostname = message.hostname or UNKNOWN_HOST
        self.tracker.add_entry(hostname, message.text)
        self.stats["parsed"] += 1
        logger.debug(f"Captured from {hostname}: {message.text}")
        return True
    
    def _poll_once(self) -> None:
        try:
            frame = self.source.next_frame()
        except CaptureError as e:
            self.stats["errors"] += 1
            logger.debug(f"Error capturing packet: {e}")
            self.sleep(ERROR_BACKOFF_SECONDS)
            return
        
        if frame is None:
            # Timeout, nothing to read yet
            self.stats["timeouts"] += 1
            return
        
        self.process_frame(frame)
    
    def run(self) -> int:
        """
        Run the capture loop until the configured interval has passed.
        
        Returns:
            Number of snapshots emitted
        """
        config = self.config
        logger.debug(f"Port to sniff: {config.port}")
        logger.debug(f"Interface to sniff: {config.interface}")
        logger.debug(f"Interval: {config.interval} seconds")
        logger.debug(f"Datalink: {self.source.link_description()}")
        logger.debug("Starting capture loop")
        
        self.running = True
        start_time = self.clock()
        last_flush = self.clock()
        
        try:
            while self.running and self.clock() - start_time < config.interval:
                if config.periodic and self._elapsed_seconds(last_flush) >= config.frequency:
                    if not self.tracker.is_empty():
                        self._emit(config.frequency)
                        self.tracker.clear()
                    last_flush = self.clock()
                
                self._poll_once()
        
        except KeyboardInterrupt:
            logger.info("Interrupted, writing final report")
        
        finally:
            self.running = False
        
        if not config.periodic:
            self._emit(config.interval)
        elif not self.tracker.is_empty():
            self._emit(self._elapsed_seconds(last_flush))
        
        logger.debug(
            f"Capture finished | Frames: {self.stats['frames']} | "
            f"Parsed: {self.stats['parsed']} | Dropped: {self.stats['dropped']} | "
            f"Timeouts: {self.stats['timeouts']} | Errors: {self.stats['errors']} | "
            f"Reports: {self.stats['reports']}"
        )
        return self.stats["reports"]
    
    def stop(self) -> None:
        """Ask the loop to finish after the current iteration."""
        self.running = False
