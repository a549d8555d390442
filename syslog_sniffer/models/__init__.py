"""
Data models for parsed messages and host stats.
"""

from syslog_sniffer.models.message import ParsedMessage
from syslog_sniffer.models.stats import HostRecord, StatsSnapshot, UNKNOWN_HOST

__all__ = [
    'ParsedMessage',
    'HostRecord',
    'StatsSnapshot',
    'UNKNOWN_HOST',
]
