"""
Data Models
===========

Frame records, scan options and summaries for mpeg_sync.

Models:
    Frame:
        - MpegVersion, MpegLayer, ChannelMode, Emphasis: Header enumerations
        - FrameHeader: Decoded 4-byte header
        - Frame: Header plus optional raw frame bytes

    Options:
        - SkipMode: How uncaptured payload bytes are passed over

    Summary:
        - StreamSummary: Aggregate stats over a scanned stream
"""

from mpeg_sync.models.frame import (
    ChannelMode,
    Emphasis,
    Frame,
    FrameHeader,
    MpegLayer,
    MpegVersion,
)
from mpeg_sync.models.options import SkipMode
from mpeg_sync.models.summary import StreamSummary

__all__ = [
    # Frame
    "MpegVersion",
    "MpegLayer",
    "ChannelMode",
    "Emphasis",
    "FrameHeader",
    "Frame",
    # Options
    "SkipMode",
    # Summary
    "StreamSummary",
]
