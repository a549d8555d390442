"""
Entry point for the syslog-sniffer command.

Parses arguments, configures logging, opens the packet source and runs
one capture session. Exit status is 1 if the source cannot be opened.
"""

import signal
import sys
from typing import List, Optional

from loguru import logger

from syslog_sniffer.config import parse_args
from syslog_sniffer.exceptions import CaptureError
from syslog_sniffer.listener import open_source
from syslog_sniffer.utils.logger import configure_logging
from syslog_sniffer.workers import CaptureWorker


def signal_handler(worker: CaptureWorker):
    """Handle SIGTERM by ending the run; the final report is still written."""
    def handler(signum, frame):
        logger.info(f"Received signal {signum}, stopping capture")
        worker.stop()
    return handler


def main(argv: Optional[List[str]] = None) -> int:
    config = parse_args(argv)
    configure_logging(config.debug, config.log_file)
    logger.debug(f"Configuration: {config.model_dump()}")

    try:
        source = open_source(config)
    except CaptureError as e:
        logger.error(f"Failed to set up capture: {e}")
        return 1

    worker = CaptureWorker(config, source)
    previous = signal.signal(signal.SIGTERM, signal_handler(worker))
    try:
        worker.run()
    finally:
        signal.signal(signal.SIGTERM, previous or signal.SIG_DFL)
        source.stop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
