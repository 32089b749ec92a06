"""
Test Configuration
==================

Pytest fixtures and test configuration for mpeg_sync.
"""

import io

import pytest


# V1 Layer 3, 128 kbps, 44100 Hz, no padding, joint stereo. 417 bytes.
SAMPLE_HEADER = bytes((0xFF, 0xFB, 0x90, 0x64))


def payload_for(header: bytes) -> bytes:
    """Deterministic payload that completes the frame started by ``header``."""
    from mpeg_sync.header import try_decode_header

    decoded = try_decode_header(header)
    assert decoded is not None, f"not a valid header: {header.hex()}"
    return bytes(i % 251 for i in range(decoded.frame_length - 4))


def build_frame(header: bytes) -> bytes:
    """Header followed by a full payload."""
    return header + payload_for(header)


class NonSeekableStream:
    """Forward-only stream that returns at most ``max_read`` bytes per read."""

    def __init__(self, data: bytes, max_read: int = 0) -> None:
        self._buffer = io.BytesIO(data)
        self._max_read = max_read
        self.read_calls = 0

    def read(self, size: int = -1) -> bytes:
        self.read_calls += 1
        if self._max_read and (size < 0 or size > self._max_read):
            size = self._max_read
        return self._buffer.read(size)

    def seekable(self) -> bool:
        return False

    @property
    def remaining(self) -> int:
        return len(self._buffer.getvalue()) - self._buffer.tell()


class CountingRawStream(io.RawIOBase):
    """Seekable raw stream that counts every byte handed to its caller."""

    def __init__(self, data: bytes) -> None:
        super().__init__()
        self._buffer = io.BytesIO(data)
        self.bytes_read = 0

    def readable(self) -> bool:
        return True

    def seekable(self) -> bool:
        return True

    def readinto(self, b) -> int:
        data = self._buffer.read(len(b))
        b[: len(data)] = data
        self.bytes_read += len(data)
        return len(data)

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        return self._buffer.seek(offset, whence)

    def tell(self) -> int:
        return self._buffer.tell()


@pytest.fixture
def sample_header():
    """Provide the 4 bytes of a V1 Layer 3 128 kbps 44.1 kHz header."""
    return SAMPLE_HEADER


@pytest.fixture
def sample_frame_bytes():
    """Provide one complete frame for the sample header."""
    return build_frame(SAMPLE_HEADER)


@pytest.fixture
def noise():
    """Provide 50 bytes of noise that never contains a sync byte."""
    return bytes((i * 37 + 11) % 255 for i in range(50))


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Run with no config file and no MPEG_SYNC_* environment overrides."""
    for name in (
        "MPEG_SYNC_CONFIG",
        "MPEG_SYNC_CAPTURE_DATA",
        "MPEG_SYNC_SKIP_MODE",
        "MPEG_SYNC_DISCARD_CHUNK_SIZE",
        "MPEG_SYNC_LOG_LEVEL",
        "MPEG_SYNC_LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def payload_builder():
    """Provide a function that builds the payload for a header."""
    return payload_for


@pytest.fixture
def frame_builder():
    """Provide a function that builds a complete frame for a header."""
    return build_frame


@pytest.fixture
def forward_only_stream():
    """Provide a factory for non-seekable streams with optional short reads."""
    return NonSeekableStream


@pytest.fixture
def counting_raw_stream():
    """Provide a factory for seekable raw streams that count bytes read."""
    return CountingRawStream
