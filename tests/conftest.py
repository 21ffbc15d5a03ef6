"""Pytest configuration and shared fixtures."""

import io

import pytest
import structlog


class FailingSource(io.RawIOBase):
    """Readable stream that returns some data, then raises OSError."""

    def __init__(self, data: bytes, fail_after_reads: int = 1):
        self._data = io.BytesIO(data)
        self._reads_left = fail_after_reads

    def readable(self) -> bool:
        return True

    def read(self, size: int = -1) -> bytes:
        if self._reads_left == 0:
            raise OSError("simulated read failure")
        self._reads_left -= 1
        return self._data.read(size)


class FailingSink(io.RawIOBase):
    """Writable stream that accepts some writes, then raises OSError."""

    def __init__(self, fail_after_writes: int = 1):
        self.received = bytearray()
        self._writes_left = fail_after_writes

    def writable(self) -> bool:
        return True

    def write(self, data) -> int:
        if self._writes_left == 0:
            raise OSError("simulated write failure")
        self._writes_left -= 1
        self.received.extend(data)
        return len(data)


class TrickleSink(io.RawIOBase):
    """Writable stream that accepts at most max_bytes per write call."""

    def __init__(self, max_bytes: int = 100):
        self.received = bytearray()
        self.calls = 0
        self._max_bytes = max_bytes

    def writable(self) -> bool:
        return True

    def write(self, data) -> int:
        self.calls += 1
        accepted = bytes(data[:self._max_bytes])
        self.received.extend(accepted)
        return len(accepted)


@pytest.fixture
def sample_bytes() -> bytes:
    """Payload spanning several copy buffers with a partial last chunk."""
    return bytes(range(256)) * 10 + b"tail"


@pytest.fixture
def sample_text() -> str:
    """Text with characters outside ASCII and Latin-1."""
    return "Grüße aus Köln – ☕ and 東京"


@pytest.fixture
def failing_source_factory():
    """Factory for sources that fail after a number of reads."""
    return FailingSource


@pytest.fixture
def failing_sink_factory():
    """Factory for sinks that fail after a number of writes."""
    return FailingSink


@pytest.fixture
def trickle_sink_factory():
    """Factory for sinks that perform short writes."""
    return TrickleSink


@pytest.fixture(autouse=True)
def reset_structlog():
    """Restore structlog defaults after every test."""
    yield
    structlog.reset_defaults()
