"""
Syslog Test Sender

Sends syslog lines over UDP, for trying the sniffer out by hand:

    python -m syslog_sniffer.utils.sender --port 5140
"""

import argparse
import socket
from typing import Iterable, Union

SAMPLE_LOGS = [
    # RFC 3164
    "<13>Dec  6 10:30:15 web-server sshd[12345]: Accepted password for admin from 192.168.1.100 port 54321",
    "<14>Dec  6 10:30:20 web-server systemd[1]: Started user session",
    "<11>Dec  6 10:30:25 db-server kernel: [  120.456] Out of memory",
    
    # RFC 5424
    "<165>1 2025-12-06T10:30:30.003Z fw01.example.com filterlog 4242 ID47 - block in on igb0",
    
    # No header, reported under "Unknown"
    "plain message without a syslog header",
]


def send_logs(lines: Iterable[Union[str, bytes]], host: str = "127.0.0.1", port: int = 514) -> int:
    """Send each line as one datagram. Returns the number sent."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sent = 0
    try:
        for line in lines:
            data = line.encode("utf-8") if isinstance(line, str) else line
            sock.sendto(data, (host, port))
            sent += 1
    finally:
        sock.close()
    return sent


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Send sample syslog messages over UDP")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=514)
    parser.add_argument("--count", type=int, default=1, help="Times to send the sample set")
    args = parser.parse_args()
    
    total = 0
    for _ in range(args.count):
        total += send_logs(SAMPLE_LOGS, args.host, args.port)
    print(f"Sent {total} logs to {args.host}:{args.port}")
