"""
Header Decoder
==============

Validation and decoding of 4-byte MPEG audio frame headers.

Header layout (bit 31 first):

    AAAAAAAA AAABBCCD EEEEFFGH IIJJKLMM

    A  sync word (11 bits, all set)
    B  version ID        C  layer          D  protection (0 = CRC)
    E  bitrate index     F  sample rate    G  padding     H  private
    I  channel mode      J  mode extension K  copyright   L  original
    M  emphasis

Each check is an early rejection so the scanner can cheaply retry at
the next byte offset. A FrameHeader is only constructed once every
check has passed.

Reference:
    http://mpgedit.org/mpgedit/mpeg_format/mpeghdr.htm
"""

from typing import Optional

from mpeg_sync.header.tables import (
    HEADER_SIZE,
    FREE_FORMAT_INDEX,
    INVALID_BITRATE_INDEX,
    INVALID_SAMPLE_RATE_INDEX,
    LAYER_CODES,
    MAX_FRAME_LENGTH,
    SAMPLE_RATES,
    VERSION_CODES,
    bit_rate_for,
    sample_count_for,
)
from mpeg_sync.models.frame import (
    CHANNEL_MODES,
    EMPHASES,
    FrameHeader,
    MpegLayer,
    MpegVersion,
)


def is_sync(b0: int, b1: int) -> bool:
    """True when the two bytes start with the 11-bit frame sync."""
    return b0 == 0xFF and (b1 & 0xE0) == 0xE0


def compute_frame_length(
    layer: MpegLayer,
    bit_rate: int,
    sample_rate: int,
    sample_count: int,
    padding: bool,
) -> int:
    """
    Frame length in bytes, header included.
    
    Layer 1 counts in 4-byte slots, Layers 2 and 3 in 1-byte slots.
    Integer division truncates.
    
    Formula:
        coeff = sample_count / 8
        Layer 1:    (coeff * bit_rate / sample_rate + padding) * 4
        Layer 2/3:  coeff * bit_rate / sample_rate + padding
    """
    coefficient = sample_count // 8
    n_padding = 1 if padding else 0
    if layer is MpegLayer.LAYER_1:
        return (coefficient * bit_rate // sample_rate + n_padding) * 4
    return coefficient * bit_rate // sample_rate + n_padding


def try_decode_header(header: bytes) -> Optional[FrameHeader]:
    """
    Decode a candidate frame header.
    
    Only the first 4 bytes are examined. This is a pure function:
    decoding the same bytes always yields an equal result.
    
    Args:
        header: At least 4 candidate bytes
        
    Returns:
        Fully populated FrameHeader, or None if the bytes are not a
        valid (supported) header.
    """
    if len(header) < HEADER_SIZE:
        return None
    b0, b1, b2, b3 = header[0], header[1], header[2], header[3]
    
    if not is_sync(b0, b1):
        return None
    
    version = VERSION_CODES[(b1 & 0x18) >> 3]
    if version is MpegVersion.RESERVED:
        return None
    
    layer = LAYER_CODES[(b1 & 0x06) >> 1]
    if layer is MpegLayer.RESERVED:
        return None
    
    crc_present = (b1 & 0x01) == 0x00
    
    bit_rate_index = (b2 & 0xF0) >> 4
    if bit_rate_index == INVALID_BITRATE_INDEX:
        return None
    if bit_rate_index == FREE_FORMAT_INDEX:
        # Free format is unsupported: the length formula needs a bitrate
        return None
    bit_rate = bit_rate_for(version, layer, bit_rate_index)
    
    sample_rate_index = (b2 & 0x0C) >> 2
    if sample_rate_index == INVALID_SAMPLE_RATE_INDEX:
        return None
    sample_rate = SAMPLE_RATES[version][sample_rate_index]
    
    padding = (b2 & 0x02) == 0x02
    private = (b2 & 0x01) == 0x01
    
    channel_mode = CHANNEL_MODES[(b3 & 0xC0) >> 6]
    channel_extension = (b3 & 0x30) >> 4
    copyright = (b3 & 0x08) == 0x08
    original = (b3 & 0x04) == 0x04
    emphasis = EMPHASES[b3 & 0x03]
    
    sample_count = sample_count_for(version, layer)
    frame_length = compute_frame_length(
        layer, bit_rate, sample_rate, sample_count, padding
    )
    if frame_length > MAX_FRAME_LENGTH or frame_length < HEADER_SIZE:
        return None
    
    return FrameHeader(
        version=version,
        layer=layer,
        crc_present=crc_present,
        bit_rate_index=bit_rate_index,
        bit_rate=bit_rate,
        sample_rate_index=sample_rate_index,
        sample_rate=sample_rate,
        padding=padding,
        private=private,
        channel_mode=channel_mode,
        channel_extension=channel_extension,
        copyright=copyright,
        original=original,
        emphasis=emphasis,
        sample_count=sample_count,
        frame_length=frame_length,
        header_bytes=bytes(header[:HEADER_SIZE]),
    )
