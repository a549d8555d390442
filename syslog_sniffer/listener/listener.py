"""
UDP Listener

Bound UDP socket used as a packet source when raw capture is not possible.
"""

import socket
from typing import Optional

from loguru import logger

from syslog_sniffer.base.base_source import BasePacketSource
from syslog_sniffer.exceptions import CaptureError


class UdpSocketSource(BasePacketSource):
    """
    Packet source reading datagrams from a bound UDP socket.
    
    Unlike raw capture this takes the port over instead of observing it,
    and frames carry only the datagram payload (no link/IP/UDP headers).
    """
    
    def __init__(self, host: str = "0.0.0.0", port: int = 514, timeout: float = 1.0):
        """
        Initialize listener.
        
        Args:
            host: Bind address
            port: UDP port
            timeout: Socket timeout in seconds
        """
        super().__init__("UdpSocketSource", timeout=timeout)
        self.host = host
        self.port = port
        self.socket = None
    
    def start(self):
        """Open UDP socket and start listening."""
        if self.running:
            logger.debug(f"[{self.name}] Already running on {self.host}:{self.port}")
            return
        
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            sock.bind((self.host, self.port))
            sock.settimeout(self.timeout)
        except OSError as e:
            sock.close()
            raise CaptureError(f"Failed to bind UDP {self.host}:{self.port}: {e}") from e
        
        self.socket = sock
        self.running = True
        logger.debug(f"[{self.name}] Started on UDP {self.host}:{self.port}")
    
    def next_frame(self) -> Optional[bytes]:
        """
        Receive one datagram.
        
        Returns:
            Datagram payload, or None on timeout
        """
        if not self.running:
            raise CaptureError("Listener not started. Call start() first.")
        
        try:
            data, _addr = self.socket.recvfrom(65535)
        except socket.timeout:
            return None
        except OSError as e:
            raise CaptureError(f"Error receiving datagram: {e}") from e
        return data
    
    def link_description(self) -> str:
        return f"UDP socket {self.host}:{self.port}"
    
    def stop(self):
        """Close socket."""
        if self.socket:
            self.socket.close()
            self.socket = None
        super().stop()
