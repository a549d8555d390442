from syslog_sniffer.stats.stats_tracker import StatsTracker

__all__ = ['StatsTracker']
