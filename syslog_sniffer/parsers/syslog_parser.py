"""
Syslog Parser Module

Extracts syslog text and the sending hostname from a raw UDP payload.
Handles the two header layouts seen in the wild:

- RFC 5424: ``<165>1 2003-10-11T22:14:15.003Z mymachine.example.com app ...``
- RFC 3164: ``<13>Oct 11 22:14:15 mymachine su: su root``

Only the hostname is pulled out of the header; the message text is kept
verbatim, PRI and timestamp included.
"""

import re
from enum import Enum
from typing import Optional, Pattern, Tuple

from syslog_sniffer.base.base_parser import BaseParser
from syslog_sniffer.models import ParsedMessage


class HeaderGrammar(Enum):
    """Syslog header layouts, each with the group holding the hostname."""

    RFC5424 = (
        re.compile(
            r"^<(\d{1,3})>"   # PRI
            r"(\d)\s+"        # VERSION
            r"(\S+)\s+"       # TIMESTAMP
            r"(\S+)\s+"       # HOSTNAME
        ),
        4,
    )
    RFC3164 = (
        re.compile(
            r"^<(\d{1,3})>"                                             # PRI
            r"([A-Z][a-z]{2}\s+\d{1,2}\s+\d{1,2}:\d{1,2}:\d{1,2})\s+"   # TIMESTAMP
            r"(\S+)\s+"                                                 # HOSTNAME
        ),
        3,
    )

    def __init__(self, pattern: Pattern, hostname_group: int):
        self.pattern = pattern
        self.hostname_group = hostname_group

    def hostname(self, text: str) -> Optional[str]:
        """Hostname if this grammar matches at the start of text."""
        match = self.pattern.match(text)
        if not match:
            return None
        return match.group(self.hostname_group)


class SyslogParser(BaseParser):
    """
    Parser for syslog payloads.
    
    Grammars are tried in priority order; the first that matches
    at offset 0 supplies the hostname. A payload that decodes but
    matches neither grammar still yields a message, without a hostname.
    """
    
    # Priority order, first match wins
    GRAMMARS: Tuple[HeaderGrammar, ...] = (HeaderGrammar.RFC5424, HeaderGrammar.RFC3164)
    
    def get_log_type(self) -> str:
        """Return log type identifier."""
        return "syslog"
    
    def match_grammar(self, text: str) -> Optional[HeaderGrammar]:
        """
        Find the header grammar that matches text.
        
        Args:
            text: Decoded syslog message
            
        Returns:
            The first matching HeaderGrammar, or None
        """
        for grammar in self.GRAMMARS:
            if grammar.pattern.match(text):
                return grammar
        return None
    
    def parse(self, payload: bytes) -> Optional[ParsedMessage]:
        """
        Parse a single syslog payload.
        
        Args:
            payload: Raw bytes, expected to start with the PRI marker
            
        Returns:
            ParsedMessage, or None for empty or non UTF-8 payloads
        """
        if not payload:
            return None
        
        try:
            text = bytes(payload).decode("utf-8")
        except UnicodeDecodeError:
            return None
        
        hostname = None
        grammar = self.match_grammar(text)
        if grammar is not None:
            hostname = grammar.hostname(text)
        
        return ParsedMessage(text=text, hostname=hostname)


_default_parser = SyslogParser()


def extract(buffer: bytes) -> Optional[ParsedMessage]:
    """Extract a syslog message from buffer with the default parser."""
    return _default_parser.parse(buffer)
