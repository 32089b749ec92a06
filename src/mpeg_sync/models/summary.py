"""
Stream Summary
==============

Aggregate description of a scanned MPEG audio stream.

Built by ``FrameReader.summary()`` from the frames it has produced so
far. Values describe only frames that were actually read; a truncated
final frame is not counted.

Example:
    reader = FrameReader(open("track.mp3", "rb"), capture_data=False)
    for _ in reader:
        pass
    print(reader.summary().model_dump_json(indent=2))
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from mpeg_sync.models.frame import ChannelMode, MpegLayer, MpegVersion


class StreamSummary(BaseModel):
    """
    Summary of the frames read from one stream.
    
    Attributes:
        frame_count: Number of complete frames read
        total_samples: Sum of per-frame sample counts
        duration_seconds: Sum of per-frame durations
        average_bit_rate: Mean bitrate weighted by frame duration (bps)
        bit_rates: Distinct bitrates seen, ascending
        variable_bit_rate: More than one bitrate was seen
        bytes_skipped: Non-frame bytes passed over during resync
        version: Version of the first frame
        layer: Layer of the first frame
        sample_rate: Sample rate of the first frame
        channel_mode: Channel mode of the first frame
    """
    
    frame_count: int = Field(default=0, ge=0, description="Complete frames read")
    total_samples: int = Field(default=0, ge=0, description="Total PCM samples")
    duration_seconds: float = Field(default=0.0, ge=0, description="Total duration")
    average_bit_rate: int = Field(
        default=0,
        ge=0,
        description="Duration-weighted mean bitrate in bits per second",
    )
    bit_rates: List[int] = Field(default_factory=list, description="Distinct bitrates")
    variable_bit_rate: bool = Field(default=False, description="More than one bitrate seen")
    bytes_skipped: int = Field(default=0, ge=0, description="Bytes skipped by resync")
    version: Optional[MpegVersion] = Field(default=None, description="First frame version")
    layer: Optional[MpegLayer] = Field(default=None, description="First frame layer")
    sample_rate: Optional[int] = Field(default=None, description="First frame sample rate")
    channel_mode: Optional[ChannelMode] = Field(
        default=None,
        description="First frame channel mode",
    )
