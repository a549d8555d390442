"""
Packet sources for the capture worker.
"""

from syslog_sniffer.listener.capture import PcapCapture
from syslog_sniffer.listener.listener import UdpSocketSource
from syslog_sniffer.listener.factory import open_source

__all__ = ['PcapCapture', 'UdpSocketSource', 'open_source']
