"""
Stats Tracker

Per-window accumulator: hostname -> (count, first sample message).
"""

from typing import Dict, List

from syslog_sniffer.models import HostRecord, StatsSnapshot


class StatsTracker:
    """
    Counts messages per host for the current window.
    
    The sample kept for a host is the first message recorded for it;
    later messages only bump the count. clear() starts a new window.
    """
    
    def __init__(self):
        # hostname -> [count, sample]
        self._stats: Dict[str, List] = {}
    
    def add_entry(self, hostname: str, message: str) -> None:
        """Count one message for hostname, keeping the first sample."""
        entry = self._stats.get(hostname)
        if entry is None:
            self._stats[hostname] = [1, message]
        else:
            entry[0] += 1
    
    def is_empty(self) -> bool:
        return not self._stats
    
    def clear(self) -> None:
        self._stats.clear()
    
    def get_summary(self, interval_seconds: int) -> StatsSnapshot:
        """
        Build a snapshot of the current window.
        
        The snapshot is an independent copy; the tracker is not modified.
        
        Args:
            interval_seconds: Window length to label the snapshot with
            
        Returns:
            StatsSnapshot for the recorded hosts
        """
        hosts = {
            hostname: HostRecord(count=count, sample=sample)
            for hostname, (count, sample) in self._stats.items()
        }
        return StatsSnapshot(interval_seconds=interval_seconds, hosts=hosts)
    
    def __len__(self) -> int:
        return len(self._stats)
    
    # Aliases
    record = add_entry
    reset = clear
    snapshot = get_summary
