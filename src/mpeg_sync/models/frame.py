"""
Frame Data Model
================

Immutable frame records produced by the scanner.

A FrameHeader holds every field decoded from a 4-byte MPEG audio
header plus the values derived from the lookup tables (bitrate, sample
rate, sample count) and the computed frame length. A Frame pairs a
header with the optional raw bytes of the whole frame.

Design Rules:
    - Records are only built by a successful decode (never partially valid)
    - Records are frozen, callers own them
    - Reserved version/layer values never appear in a record
    - Does NOT decode audio samples
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class MpegVersion(str, Enum):
    """
    MPEG audio version ID.
    
    RESERVED exists only so the 2-bit field maps one-to-one; headers
    carrying it are rejected before a record exists.
    """
    
    VERSION_1 = "MPEG-1"
    VERSION_2 = "MPEG-2"
    VERSION_2_5 = "MPEG-2.5"
    RESERVED = "RESERVED"


class MpegLayer(str, Enum):
    """MPEG audio layer description."""
    
    LAYER_1 = "I"
    LAYER_2 = "II"
    LAYER_3 = "III"
    RESERVED = "RESERVED"


class ChannelMode(str, Enum):
    """
    Channel mode, in header bit order.
    
    Attributes:
        STEREO: Two independent channels
        JOINT_STEREO: Mid/side and/or intensity stereo
        DUAL_CHANNEL: Two unrelated mono channels
        MONO: Single channel
    """
    
    STEREO = "STEREO"
    JOINT_STEREO = "JOINT_STEREO"
    DUAL_CHANNEL = "DUAL_CHANNEL"
    MONO = "MONO"


class Emphasis(str, Enum):
    """De-emphasis to apply after decoding, in header bit order."""
    
    NONE = "NONE"
    MS_50_15 = "50/15_MS"
    RESERVED = "RESERVED"
    CCITT_J17 = "CCITT_J17"


# Header bit order for the 2-bit fields
CHANNEL_MODES = (
    ChannelMode.STEREO,
    ChannelMode.JOINT_STEREO,
    ChannelMode.DUAL_CHANNEL,
    ChannelMode.MONO,
)

EMPHASES = (
    Emphasis.NONE,
    Emphasis.MS_50_15,
    Emphasis.RESERVED,
    Emphasis.CCITT_J17,
)


@dataclass(frozen=True, slots=True)
class FrameHeader:
    """
    Fully decoded MPEG audio frame header.
    
    Attributes:
        version: MPEG version (never RESERVED)
        layer: MPEG layer (never RESERVED)
        crc_present: A 16-bit CRC follows the header (counted in frame_length)
        bit_rate_index: Raw 4-bit bitrate index (1-14)
        bit_rate: Bitrate in bits per second, always > 0
        sample_rate_index: Raw 2-bit sample rate index (0-2)
        sample_rate: Sample rate in Hz
        padding: Frame carries one extra slot
        private: Application-specific private bit
        channel_mode: Channel mode
        channel_extension: Joint stereo mode extension (0-3)
        copyright: Copyright bit
        original: Original media bit
        emphasis: De-emphasis type
        sample_count: PCM samples represented by the frame
        frame_length: Total frame length in bytes, header included
        header_bytes: The 4 bytes the header was decoded from
    """
    
    version: MpegVersion
    layer: MpegLayer
    crc_present: bool
    bit_rate_index: int
    bit_rate: int
    sample_rate_index: int
    sample_rate: int
    padding: bool
    private: bool
    channel_mode: ChannelMode
    channel_extension: int
    copyright: bool
    original: bool
    emphasis: Emphasis
    sample_count: int
    frame_length: int
    header_bytes: bytes
    
    @property
    def payload_length(self) -> int:
        """Bytes following the 4-byte header."""
        return self.frame_length - len(self.header_bytes)
    
    @property
    def duration(self) -> float:
        """Playback duration in seconds."""
        return self.sample_count / self.sample_rate
    
    @property
    def channels(self) -> int:
        """Number of decoded output channels."""
        return 1 if self.channel_mode is ChannelMode.MONO else 2
    
    def __repr__(self) -> str:
        return (
            f"FrameHeader({self.version.value} layer {self.layer.value}, "
            f"{self.bit_rate // 1000}kbps, {self.sample_rate}Hz, "
            f"{self.channel_mode.value}, length={self.frame_length})"
        )


@dataclass(frozen=True, slots=True)
class Frame:
    """
    One MPEG audio frame found in a stream.
    
    The header fields are exposed directly on the frame for convenience.
    
    Attributes:
        header: Decoded header
        raw_data: Whole frame (header + payload) when the caller asked
            for payload capture, otherwise None
    """
    
    header: FrameHeader
    raw_data: Optional[bytes] = None
    
    @property
    def version(self) -> MpegVersion:
        return self.header.version
    
    @property
    def layer(self) -> MpegLayer:
        return self.header.layer
    
    @property
    def bit_rate(self) -> int:
        return self.header.bit_rate
    
    @property
    def sample_rate(self) -> int:
        return self.header.sample_rate
    
    @property
    def channel_mode(self) -> ChannelMode:
        return self.header.channel_mode
    
    @property
    def sample_count(self) -> int:
        return self.header.sample_count
    
    @property
    def frame_length(self) -> int:
        return self.header.frame_length
    
    @property
    def duration(self) -> float:
        return self.header.duration

    @property
    def channels(self) -> int:
        return self.header.channels

    @property
    def payload_length(self) -> int:
        return self.header.payload_length

    def __repr__(self) -> str:
        """Compact repr that doesn't dump the payload."""
        captured = "captured" if self.raw_data is not None else "skipped"
        return f"Frame({self.header!r}, data={captured})"
