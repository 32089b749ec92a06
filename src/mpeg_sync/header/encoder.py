"""
Header Encoder
==============

Builds 4-byte MPEG audio frame headers from semantic field values.

This is the inverse of ``try_decode_header``: decoding the bytes
returned by ``encode_header`` reproduces every field passed in. Useful
for synthesising test streams and for rewriting header flags.
"""

from mpeg_sync.header.tables import (
    LAYER_CODES,
    SAMPLE_RATES,
    VERSION_CODES,
    bit_rate_index_for,
)
from mpeg_sync.models.frame import (
    CHANNEL_MODES,
    EMPHASES,
    ChannelMode,
    Emphasis,
    MpegLayer,
    MpegVersion,
)


def encode_header(
    version: MpegVersion,
    layer: MpegLayer,
    bit_rate: int,
    sample_rate: int,
    *,
    padding: bool = False,
    channel_mode: ChannelMode = ChannelMode.STEREO,
    crc_present: bool = False,
    private: bool = False,
    channel_extension: int = 0,
    copyright: bool = False,
    original: bool = False,
    emphasis: Emphasis = Emphasis.NONE,
) -> bytes:
    """
    Encode a frame header.
    
    Args:
        version: MPEG version (not RESERVED)
        layer: MPEG layer (not RESERVED)
        bit_rate: Bitrate in bits per second, must be in the table for
            the version class and layer
        sample_rate: Sample rate in Hz, must be valid for the version
        padding: Set the padding bit
        channel_mode: Channel mode
        crc_present: Clear the protection bit (CRC follows header)
        private: Set the private bit
        channel_extension: Mode extension, 0-3
        copyright: Set the copyright bit
        original: Set the original bit
        emphasis: Emphasis type
        
    Returns:
        4 header bytes
        
    Raises:
        ValueError: If a field cannot be represented in a valid header
    """
    if version is MpegVersion.RESERVED:
        raise ValueError("Cannot encode a reserved MPEG version")
    if layer is MpegLayer.RESERVED:
        raise ValueError("Cannot encode a reserved MPEG layer")
    
    bit_rate_index = bit_rate_index_for(version, layer, bit_rate)
    if bit_rate_index is None or bit_rate_index == 0:
        raise ValueError(
            f"Bitrate {bit_rate} is not valid for {version.value} layer {layer.value}"
        )
    
    try:
        sample_rate_index = SAMPLE_RATES[version].index(sample_rate)
    except ValueError:
        raise ValueError(
            f"Sample rate {sample_rate} is not valid for {version.value}"
        ) from None
    
    if not 0 <= channel_extension <= 3:
        raise ValueError(f"Channel extension must be 0-3, got {channel_extension}")
    
    b1 = 0xE0
    b1 |= VERSION_CODES.index(version) << 3
    b1 |= LAYER_CODES.index(layer) << 1
    b1 |= 0x00 if crc_present else 0x01
    
    b2 = bit_rate_index << 4
    b2 |= sample_rate_index << 2
    b2 |= 0x02 if padding else 0x00
    b2 |= 0x01 if private else 0x00
    
    b3 = CHANNEL_MODES.index(channel_mode) << 6
    b3 |= channel_extension << 4
    b3 |= 0x08 if copyright else 0x00
    b3 |= 0x04 if original else 0x00
    b3 |= EMPHASES.index(emphasis)
    
    return bytes((0xFF, b1, b2, b3))
