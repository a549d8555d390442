"""
Test module for packet sources
"""

import socket
import sys
from pathlib import Path

import pytest

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from syslog_sniffer.config import SnifferConfig
from syslog_sniffer.exceptions import CaptureError
from syslog_sniffer.listener import PcapCapture, UdpSocketSource, open_source
from syslog_sniffer.listener import capture as capture_module


def free_udp_port():
    probe = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    probe.bind(("127.0.0.1", 0))
    port = probe.getsockname()[1]
    probe.close()
    return port


def test_udp_source_receives_datagram():
    with UdpSocketSource(host="127.0.0.1", port=0, timeout=2.0) as source:
        port = source.socket.getsockname()[1]
        sender = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        try:
            sender.sendto(b"<13>Oct 11 22:14:15 mymachine su: su root", ("127.0.0.1", port))
        finally:
            sender.close()
        
        assert source.next_frame() == b"<13>Oct 11 22:14:15 mymachine su: su root"
        assert source.link_description() == "UDP socket 127.0.0.1:0"
    
    assert source.running is False
    assert source.socket is None


def test_udp_source_timeout():
    with UdpSocketSource(host="127.0.0.1", port=0, timeout=0.05) as source:
        assert source.next_frame() is None


def test_udp_source_not_started():
    source = UdpSocketSource(host="127.0.0.1", port=0)
    with pytest.raises(CaptureError):
        source.next_frame()


def test_udp_source_port_in_use():
    holder = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    holder.bind(("127.0.0.1", 0))
    port = holder.getsockname()[1]
    try:
        source = UdpSocketSource(host="127.0.0.1", port=port)
        with pytest.raises(CaptureError):
            source.start()
        assert source.running is False
    finally:
        holder.close()


def test_capture_invalid_interface():
    source = PcapCapture("non_existent_interface_xyz", port=514)
    with pytest.raises(CaptureError) as exc:
        source.start()
    
    message = str(exc.value)
    assert "Device non_existent_interface_xyz not found" in message or "Device lookup failed" in message


def test_capture_filter():
    assert PcapCapture("lo", port=5140).bpf_filter == "udp port 5140"


def test_capture_not_started():
    source = PcapCapture("lo")
    with pytest.raises(CaptureError):
        source.next_frame()
    assert source.link_description() == "unknown"


def test_open_source_listen_mode():
    source = open_source(SnifferConfig(listen=True, host="127.0.0.1", port=free_udp_port(), timeout=0.1))
    try:
        assert isinstance(source, UdpSocketSource)
        assert source.running
    finally:
        source.stop()


def test_capture_empty_frame_is_not_a_timeout(monkeypatch):
    class FakeSocket:
        def __init__(self, data):
            self.data = data
        
        def recv_raw(self):
            return None, self.data, 0.0
    
    monkeypatch.setattr(capture_module.select, "select", lambda r, w, x, t: (r, [], []))
    source = PcapCapture("lo")
    source.running = True
    
    source._socket = FakeSocket(b"")
    assert source.next_frame() == b""
    
    source._socket = FakeSocket(None)
    assert source.next_frame() is None
    
    source._socket = FakeSocket(b"\x00<13>x")
    assert source.next_frame() == b"\x00<13>x"
