"""Exception types raised by the sniffer components."""


class SnifferError(Exception):
    """Base class for all sniffer errors."""


class CaptureError(SnifferError):
    """A packet source failed to open or to deliver a frame."""
