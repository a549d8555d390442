from syslog_sniffer.workers.capture_worker import CaptureWorker, print_snapshot

__all__ = ['CaptureWorker', 'print_snapshot']
