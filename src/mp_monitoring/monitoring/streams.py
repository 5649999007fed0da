"""Monitoring – CountingOutputStream, a byte-counting tap on a binary sink."""
from __future__ import annotations

import io
from typing import Any

from mp_monitoring.monitoring.counter import MonitoredCounter


class CountingOutputStream(io.RawIOBase):
    """Forward writes to *sink* and add the bytes written to *counter*.

    The counter moves only after the sink has accepted the bytes, and only by
    the amount the sink reports.  A sink error propagates unchanged and
    leaves the counter where it was.  Nothing is buffered here.

    Usage::

        sent = MonitoredCounter.create("net.bytes_sent", "Bytes sent to peers")
        with CountingOutputStream(sock.makefile("wb"), sent) as out:
            out.write(payload)
    """

    def __init__(self, sink: Any, counter: MonitoredCounter) -> None:
        super().__init__()
        self._sink = sink
        self._counter = counter

    @property
    def sink(self) -> Any:
        return self._sink

    @property
    def counter(self) -> MonitoredCounter:
        return self._counter

    def writable(self) -> bool:
        return True

    def write(self, b: Any) -> int:
        """Write the whole buffer *b*; returns the number of bytes written."""
        if self.closed:
            raise ValueError("I/O operation on closed stream")
        data = memoryview(b)
        written = self._sink.write(data)
        if written is None:
            written = data.nbytes
        if written:
            self._counter.increment(written)
        return written

    def write_byte(self, value: int) -> int:
        """Write a single byte, given as an int in ``range(256)``."""
        if not 0 <= value <= 0xFF:
            raise ValueError(f"byte must be in range(0, 256), got {value}")
        return self.write(bytes((value,)))

    def write_range(self, b: Any, offset: int, length: int) -> int:
        """Write ``length`` bytes of *b* starting at *offset*."""
        data = memoryview(b)
        if offset < 0 or length < 0 or offset + length > data.nbytes:
            raise ValueError(
                f"range [{offset}:{offset + length}] out of bounds for buffer of {data.nbytes} bytes"
            )
        return self.write(data[offset:offset + length])

    def flush(self) -> None:
        super().flush()
        flush = getattr(self._sink, "flush", None)
        if flush is not None:
            flush()

    def close(self) -> None:
        if self.closed:
            return
        try:
            super().close()
        finally:
            self._sink.close()


__all__ = ["CountingOutputStream"]
