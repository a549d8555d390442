"""
Parsers Module

Provides the syslog payload parser.
"""

from syslog_sniffer.parsers.syslog_parser import SyslogParser, HeaderGrammar, extract

__all__ = [
    'SyslogParser',
    'HeaderGrammar',
    'extract'
]
