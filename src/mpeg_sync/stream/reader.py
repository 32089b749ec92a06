"""
Frame Reader
============

Iterator over the frames of a binary stream.

FrameReader wraps ``read_frame`` with the bookkeeping a demuxer needs:
the byte offset of every frame, how much garbage was skipped during
resynchronisation, and a running summary of the stream.

Example:
    with open("track.mp3", "rb") as f:
        reader = FrameReader(f, capture_data=False)
        for frame in reader:
            print(reader.last_offset, frame)
        print(reader.summary())

Design Rules:
    - Frames are produced lazily, one read_frame call per frame
    - Offsets are relative to where the stream was when the reader was created
    - TruncatedFrameError propagates after being recorded in metrics
    - Not restartable: re-open the stream to scan again
"""

import io
import logging
from typing import BinaryIO, Iterator, List, Optional

from mpeg_sync import config
from mpeg_sync.errors import TruncatedFrameError
from mpeg_sync.header.tables import HEADER_SIZE
from mpeg_sync.models.frame import Frame
from mpeg_sync.models.options import SkipMode
from mpeg_sync.models.summary import StreamSummary
from mpeg_sync.stream.scanner import is_seekable, read_frame


logger = logging.getLogger(__name__)


class _CountingStream:
    """Pass-through stream that counts bytes consumed from the wrapped stream."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self.position: int = 0

    def read(self, size: int = -1) -> bytes:
        data = self._stream.read(size) or b""
        self.position += len(data)
        return data

    def seekable(self) -> bool:
        return is_seekable(self._stream)

    def tell(self) -> int:
        return self._stream.tell()

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        before = self._stream.tell()
        after = self._stream.seek(offset, whence)
        self.position += after - before
        return after


class FrameReaderMetrics:
    """Metrics for FrameReader observability."""

    __slots__ = (
        "frames_read",
        "bytes_skipped",
        "resync_events",
        "truncated",
    )

    def __init__(self) -> None:
        self.frames_read: int = 0
        self.bytes_skipped: int = 0
        self.resync_events: int = 0
        self.truncated: bool = False

    def to_dict(self) -> dict:
        """Export metrics as dict."""
        return {
            "frames_read": self.frames_read,
            "bytes_skipped": self.bytes_skipped,
            "resync_events": self.resync_events,
            "truncated": self.truncated,
        }


class FrameReader:
    """
    Lazy iterator of frames from a binary stream.

    Attributes:
        capture_data: Whether frames carry their raw bytes
        skip_mode: How uncaptured payloads are passed over
        metrics: Operational metrics
        last_offset: Offset of the most recent frame header, or None

    Example:
        reader = FrameReader.from_bytes(data)
        frames = list(reader)
        assert reader.metrics.frames_read == len(frames)
    """

    def __init__(
        self,
        stream: BinaryIO,
        capture_data: Optional[bool] = None,
        skip_mode: Optional[SkipMode] = None,
        discard_chunk_size: Optional[int] = None,
    ) -> None:
        """
        Initialize frame reader.

        Args:
            stream: Binary stream to scan
            capture_data: Keep raw frame bytes. None = settings default
            skip_mode: Payload skip strategy. None = settings default
            discard_chunk_size: Read size for read-and-discard.
                None = settings default
        """
        scanner_config = config.settings.scanner
        self.capture_data = (
            scanner_config.capture_data if capture_data is None else capture_data
        )
        self.skip_mode = SkipMode(
            scanner_config.skip_mode if skip_mode is None else skip_mode
        )
        self.discard_chunk_size = (
            scanner_config.discard_chunk_size
            if discard_chunk_size is None
            else discard_chunk_size
        )

        self._stream = _CountingStream(stream)
        self._finished: bool = False
        self.last_offset: Optional[int] = None
        self.metrics = FrameReaderMetrics()

        # Running totals for summary()
        self._total_samples: int = 0
        self._duration: float = 0.0
        self._weighted_bits: float = 0.0
        self._bit_rates: set = set()
        self._first: Optional[Frame] = None

    @classmethod
    def from_bytes(cls, data: bytes, **kwargs) -> "FrameReader":
        """Create a reader over an in-memory buffer."""
        return cls(io.BytesIO(data), **kwargs)

    @property
    def position(self) -> int:
        """Bytes consumed from the stream since the reader was created."""
        return self._stream.position

    def __iter__(self) -> Iterator[Frame]:
        return self

    def __next__(self) -> Frame:
        frame = self.read()
        if frame is None:
            raise StopIteration
        return frame

    def read(self) -> Optional[Frame]:
        """
        Read the next frame.

        Returns:
            Next Frame, or None once the stream is exhausted

        Raises:
            TruncatedFrameError: The stream ended inside a frame
        """
        if self._finished:
            return None

        start = self._stream.position
        try:
            frame = read_frame(
                self._stream,
                self.capture_data,
                skip_mode=self.skip_mode,
                discard_chunk_size=self.discard_chunk_size,
            )
        except TruncatedFrameError as e:
            self._finished = True
            self.metrics.truncated = True
            # Everything consumed before the committed header was garbage
            skipped = self._stream.position - start - HEADER_SIZE - e.available
            if skipped > 0:
                self.metrics.bytes_skipped += skipped
                self.metrics.resync_events += 1
            raise

        if frame is None:
            self._finished = True
            # Trailing bytes that never formed a frame
            self.metrics.bytes_skipped += self._stream.position - start
            logger.debug(
                f"FrameReader finished: {self.metrics.frames_read} frames, "
                f"{self.metrics.bytes_skipped} bytes skipped"
            )
            return None

        offset = self._stream.position - frame.frame_length
        skipped = offset - start
        if skipped:
            self.metrics.bytes_skipped += skipped
            self.metrics.resync_events += 1
        self.last_offset = offset
        self._record(frame)
        return frame

    def _record(self, frame: Frame) -> None:
        self.metrics.frames_read += 1
        if self._first is None:
            self._first = frame
        self._total_samples += frame.sample_count
        self._duration += frame.duration
        self._weighted_bits += frame.bit_rate * frame.duration
        self._bit_rates.add(frame.bit_rate)

    def summary(self) -> StreamSummary:
        """
        Summarize the frames read so far.

        Returns:
            StreamSummary over every complete frame produced
        """
        bit_rates: List[int] = sorted(self._bit_rates)
        average = round(self._weighted_bits / self._duration) if self._duration else 0
        first = self._first
        return StreamSummary(
            frame_count=self.metrics.frames_read,
            total_samples=self._total_samples,
            duration_seconds=self._duration,
            average_bit_rate=average,
            bit_rates=bit_rates,
            variable_bit_rate=len(bit_rates) > 1,
            bytes_skipped=self.metrics.bytes_skipped,
            version=first.version if first else None,
            layer=first.layer if first else None,
            sample_rate=first.sample_rate if first else None,
            channel_mode=first.channel_mode if first else None,
        )


def iter_frames(
    stream: BinaryIO,
    capture_data: bool = True,
    skip_mode: SkipMode = SkipMode.AUTO,
) -> Iterator[Frame]:
    """
    Yield frames until the stream is exhausted.

    Args:
        stream: Binary stream to scan
        capture_data: Keep raw frame bytes on each frame
        skip_mode: Payload skip strategy when not capturing

    Yields:
        Frame records in stream order

    Raises:
        TruncatedFrameError: The stream ended inside a frame
    """
    while True:
        frame = read_frame(stream, capture_data, skip_mode=skip_mode)
        if frame is None:
            return
        yield frame
