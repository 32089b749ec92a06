"""
mpeg_sync
=========

MPEG audio (MP3 family) frame synchronisation and header decoding.

This package finds 4-byte frame headers in an arbitrary byte stream,
validates them against the MPEG lookup tables, computes each frame's
length and sample count, and hands back immutable frame records. It
does not decode audio samples.

Components:
    - header: Lookup tables, header decoder and encoder
    - stream: Resynchronising frame scanner and frame reader
    - models: Frame records, scan options and stream summary
    - config: Settings loaded from YAML and environment

Example:
    from mpeg_sync import FrameReader

    with open("track.mp3", "rb") as f:
        reader = FrameReader(f)
        for frame in reader:
            print(frame.version, frame.layer, frame.bit_rate)
"""

__version__ = "0.1.0"

from mpeg_sync.errors import FrameError, TruncatedFrameError
from mpeg_sync.header import encode_header, try_decode_header
from mpeg_sync.models import (
    ChannelMode,
    Emphasis,
    Frame,
    FrameHeader,
    MpegLayer,
    MpegVersion,
    SkipMode,
    StreamSummary,
)
from mpeg_sync.stream import FrameReader, iter_frames, read_frame

__all__ = [
    "__version__",
    # Errors
    "FrameError",
    "TruncatedFrameError",
    # Header
    "try_decode_header",
    "encode_header",
    # Models
    "MpegVersion",
    "MpegLayer",
    "ChannelMode",
    "Emphasis",
    "FrameHeader",
    "Frame",
    "SkipMode",
    "StreamSummary",
    # Stream
    "read_frame",
    "iter_frames",
    "FrameReader",
]
