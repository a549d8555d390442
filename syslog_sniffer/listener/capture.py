"""
Raw capture source built on scapy.

Listens at layer 2 with a "udp port N" BPF filter, so frames arrive with
their link, IP and UDP headers still attached.
"""

import select
from typing import Optional

from loguru import logger
from scapy.all import conf, get_if_list
from scapy.error import Scapy_Exception

from syslog_sniffer.base.base_source import BasePacketSource
from syslog_sniffer.exceptions import CaptureError


class PcapCapture(BasePacketSource):
    """Passive capture of UDP traffic for one port on one interface."""

    def __init__(self, interface: str, port: int = 514, timeout: float = 1.0):
        super().__init__("PcapCapture", timeout=timeout)
        self.interface = interface
        self.port = port
        self._socket = None

    @property
    def bpf_filter(self) -> str:
        return f"udp port {self.port}"

    def start(self) -> None:
        if self.running:
            return

        try:
            interfaces = get_if_list()
        except (OSError, Scapy_Exception) as e:
            raise CaptureError(f"Device lookup failed: {e}") from e
        if self.interface not in interfaces:
            raise CaptureError(f"Device {self.interface} not found")

        try:
            self._socket = conf.L2listen(iface=self.interface, filter=self.bpf_filter)
        except (OSError, Scapy_Exception) as e:
            raise CaptureError(f"Failed to open capture on {self.interface}: {e}") from e

        self.running = True
        logger.debug(f"[{self.name}] Capturing on {self.interface} with filter '{self.bpf_filter}'")

    def next_frame(self) -> Optional[bytes]:
        if not self.running:
            raise CaptureError("Capture not started. Call start() first.")

        try:
            ready, _, _ = select.select([self._socket], [], [], self.timeout)
            if not ready:
                return None
            _cls, data, _ts = self._socket.recv_raw()
        except (OSError, Scapy_Exception) as e:
            raise CaptureError(f"Error capturing packet: {e}") from e

        # None: the socket consumed a packet it filtered out
        return data

    def link_description(self) -> str:
        link_layer = getattr(self._socket, "LL", None)
        if link_layer is None:
            return "unknown"
        return link_layer.__name__

    def stop(self) -> None:
        if self._socket is not None:
            self._socket.close()
            self._socket = None
        super().stop()
