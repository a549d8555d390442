from syslog_sniffer.base.base_parser import BaseParser
from syslog_sniffer.base.base_source import BasePacketSource

__all__ = ['BaseParser', 'BasePacketSource']
