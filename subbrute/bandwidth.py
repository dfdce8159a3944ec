"""Traffic accounting for speed tests and a per-second send budget."""

from __future__ import annotations

import asyncio
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass

DEFAULT_PACKET_SIZE = 64
_WAIT_SECONDS = 0.1


@dataclass(frozen=True)
class SpeedTestResult:
    """Rates measured over a test run."""

    send_rate: int
    recv_rate: int
    bandwidth_usage: int


def compute_rates(sent: int, received: int, bytes_sent: int, elapsed: float) -> SpeedTestResult:
    """Turn totals into per-second rates over whole elapsed seconds (at least one)."""
    seconds = max(int(elapsed), 1)
    return SpeedTestResult(sent // seconds, received // seconds, bytes_sent // seconds)


class TrafficCounter:
    """Thread-safe counters of packets sent and received and bytes sent."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.sent = 0
        self.received = 0
        self.bytes_sent = 0

    def reset(self) -> None:
        with self._lock:
            self.sent = self.received = self.bytes_sent = 0

    def record_received_packet(self) -> None:
        with self._lock:
            self.received += 1

    def record_sent_packet(self, size: int = DEFAULT_PACKET_SIZE) -> None:
        with self._lock:
            self.sent += 1
            self.bytes_sent += size

    def snapshot(self, elapsed: float) -> SpeedTestResult:
        with self._lock:
            return compute_rates(self.sent, self.received, self.bytes_sent, elapsed)


def format_speed_result(result: SpeedTestResult, target: str) -> str:
    """Render a speed test result as a short report."""
    megabytes = result.bandwidth_usage / 1024.0 / 1024.0
    return "\n".join(
        [
            "=== Speed test results ===",
            f"Target DNS server: {target}",
            f"Send rate: {result.send_rate} packets/s",
            f"Receive rate: {result.recv_rate} packets/s",
            f"Bandwidth: {result.bandwidth_usage} bytes/s ({megabytes:.2f} MB/s)",
        ]
    )


class BandwidthLimiter:
    """Allows at most *max_bytes_per_sec* bytes in each one-second window."""

    def __init__(
        self,
        max_bytes_per_sec: int,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_bytes_per_sec < 0:
            raise ValueError("bandwidth limit must not be negative")
        self.max_bytes_per_sec = max_bytes_per_sec
        self._clock = clock
        self._lock = threading.Lock()
        self._bytes_sent = 0
        self._last_reset = clock()

    async def can_send(self, packet_size: int) -> bool:
        """Return True if the packet fits this window; otherwise wait briefly and return False.

        When a new window starts the budget is cleared and the call returns True.
        """
        with self._lock:
            now = self._clock()
            if now - self._last_reset >= 1:
                self._bytes_sent = 0
                self._last_reset = now
                return True
            if self._bytes_sent + packet_size <= self.max_bytes_per_sec:
                self._bytes_sent += packet_size
                return True
        await asyncio.sleep(_WAIT_SECONDS)
        return False