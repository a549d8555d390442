"""
Syslog Sniffer

Passive syslog visibility: capture UDP frames, extract syslog messages,
attribute them to hosts and report per-window stats as JSON.
"""

from syslog_sniffer.models import ParsedMessage, HostRecord, StatsSnapshot
from syslog_sniffer.parsers import extract, SyslogParser
from syslog_sniffer.stats import StatsTracker

__version__ = "0.1.0"

__all__ = [
    'ParsedMessage',
    'HostRecord',
    'StatsSnapshot',
    'extract',
    'SyslogParser',
    'StatsTracker',
]
