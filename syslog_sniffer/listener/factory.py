from syslog_sniffer.base.base_source import BasePacketSource
from syslog_sniffer.config import SnifferConfig
from syslog_sniffer.listener.capture import PcapCapture
from syslog_sniffer.listener.listener import UdpSocketSource


def open_source(config: SnifferConfig) -> BasePacketSource:
    """Build and start the packet source the config asks for."""
    if config.listen:
        source = UdpSocketSource(host=config.host, port=config.port, timeout=config.timeout)
    else:
        source = PcapCapture(config.interface, port=config.port, timeout=config.timeout)
    source.start()
    return source
