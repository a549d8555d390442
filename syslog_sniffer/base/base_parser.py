"""
Base Parser Module

Provides abstract base class for payload parsers.
A parser turns the bytes handed over by the capture worker into a message.
"""

from abc import ABC, abstractmethod
from typing import Optional

from syslog_sniffer.models import ParsedMessage


class BaseParser(ABC):
    """
    Abstract base class for payload parsers.
    
    Each concrete parser must implement:
    - parse(): Turn one payload into a message, or None
    - get_log_type(): Return the log type identifier
    """
    
    @abstractmethod
    def parse(self, payload: bytes) -> Optional[ParsedMessage]:
        """
        Parse a single payload.
        
        Implementations must not raise: a payload that cannot be
        parsed yields None.
        
        Args:
            payload: Raw bytes, starting where the message is expected to start
            
        Returns:
            ParsedMessage, or None if the payload holds no message
        """
        pass
    
    @abstractmethod
    def get_log_type(self) -> str:
        """
        Return the log type identifier.
        
        Returns:
            String identifier ('syslog', ...)
        """
        pass