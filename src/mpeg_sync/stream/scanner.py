"""
Frame Scanner
=============

Synchronous frame-by-frame scanner over a binary stream.

Each call to ``read_frame`` consumes exactly one frame: it slides a
4-byte window over the stream until a valid header is found, then
reads (or skips) the rest of the frame.

Design Rules:
    - Invalid header bytes are never an error: shift one byte and retry
    - Fewer than 4 bytes, or an empty refill, is normal end-of-stream (None)
    - A committed header with a short payload raises TruncatedFrameError
    - No state is held between calls other than the stream position
    - Stream I/O errors propagate unchanged

Stream Interface:
    Required: read(n) -> bytes (short reads are retried)
    Optional: seekable(), tell(), seek() for skipping payloads
"""

import io
import logging
from typing import BinaryIO, Optional

from mpeg_sync.errors import TruncatedFrameError
from mpeg_sync.header.decoder import try_decode_header
from mpeg_sync.header.tables import HEADER_SIZE
from mpeg_sync.models.frame import Frame, FrameHeader
from mpeg_sync.models.options import SkipMode


logger = logging.getLogger(__name__)


DEFAULT_DISCARD_CHUNK_SIZE = 8192


def read_exact(stream: BinaryIO, size: int) -> bytes:
    """
    Read up to ``size`` bytes, retrying short reads.

    Returns fewer than ``size`` bytes only when the stream is exhausted.
    """
    chunks = []
    remaining = size
    while remaining > 0:
        chunk = stream.read(remaining)
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def is_seekable(stream: BinaryIO) -> bool:
    """True when the stream supports positional skips."""
    seekable = getattr(stream, "seekable", None)
    return callable(seekable) and bool(seekable())


def read_frame(
    stream: BinaryIO,
    capture_data: bool = True,
    *,
    skip_mode: SkipMode = SkipMode.AUTO,
    discard_chunk_size: int = DEFAULT_DISCARD_CHUNK_SIZE,
) -> Optional[Frame]:
    """
    Read the next frame from a stream.

    Args:
        stream: Binary stream positioned anywhere before a frame
        capture_data: Keep the whole frame in ``Frame.raw_data``.
            When False the payload is skipped without buffering.
        skip_mode: How to pass over the payload when not capturing
        discard_chunk_size: Read size when skipping by reading

    Returns:
        Next Frame, or None when the stream is exhausted

    Raises:
        TruncatedFrameError: A valid header was found but the stream
            ended before the frame was complete
    """
    window = bytearray(read_exact(stream, HEADER_SIZE))
    if len(window) < HEADER_SIZE:
        # Reached end of stream, no more frames
        return None

    skipped = 0
    header = try_decode_header(window)
    while header is None:
        # Shift down by one and try again
        window[0:3] = window[1:4]
        refill = read_exact(stream, 1)
        if not refill:
            if skipped:
                logger.debug(
                    f"End of stream, no frame in last {skipped + HEADER_SIZE} bytes"
                )
            return None
        window[3] = refill[0]
        skipped += 1
        header = try_decode_header(window)

    if skipped:
        logger.debug(f"Resynchronised after skipping {skipped} bytes: {header!r}")

    required = header.frame_length - HEADER_SIZE
    if capture_data:
        payload = read_exact(stream, required)
        if len(payload) < required:
            _raise_truncated(header, required, len(payload))
        return Frame(header=header, raw_data=bytes(window) + payload)

    _skip(stream, header, required, skip_mode, discard_chunk_size)
    return Frame(header=header)


def _skip(
    stream: BinaryIO,
    header: FrameHeader,
    required: int,
    skip_mode: SkipMode,
    discard_chunk_size: int,
) -> None:
    """Advance past ``required`` payload bytes without keeping them."""
    skip_mode = SkipMode(skip_mode)
    use_seek = skip_mode is SkipMode.SEEK or (
        skip_mode is SkipMode.AUTO and is_seekable(stream)
    )

    if use_seek:
        if required == 0:
            return
        # Relative seek stays inside a BufferedReader's buffer; reading the
        # last payload byte proves the frame is complete
        stream.seek(required - 1, io.SEEK_CUR)
        if not stream.read(1):
            start = stream.tell() - (required - 1)
            end = stream.seek(0, io.SEEK_END)
            # Leave the stream at its end, the partial frame is consumed
            _raise_truncated(header, required, max(end - start, 0))
        return

    discarded = 0
    while discarded < required:
        chunk = stream.read(min(discard_chunk_size, required - discarded))
        if not chunk:
            _raise_truncated(header, required, discarded)
        discarded += len(chunk)


def _raise_truncated(header: FrameHeader, required: int, available: int) -> None:
    logger.warning(
        f"Truncated frame: {header!r} needs {required} payload bytes, "
        f"only {available} available"
    )
    raise TruncatedFrameError(header, required, available)
