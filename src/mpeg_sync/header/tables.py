"""
Lookup Tables
=============

Closed MPEG audio lookup tables.

All tables are keyed by the small enumerations from
``mpeg_sync.models.frame`` plus the raw header index. Version 2 and
Version 2.5 share one "version class" for bitrates and sample counts.
"""

from typing import Dict, Optional, Tuple

from mpeg_sync.models.frame import MpegLayer, MpegVersion


# Frames longer than this are treated as false syncs
MAX_FRAME_LENGTH = 16 * 1024

HEADER_SIZE = 4

FREE_FORMAT_INDEX = 0
INVALID_BITRATE_INDEX = 15
INVALID_SAMPLE_RATE_INDEX = 3


# 2-bit version field -> version (index 1 is reserved)
VERSION_CODES: Tuple[MpegVersion, ...] = (
    MpegVersion.VERSION_2_5,
    MpegVersion.RESERVED,
    MpegVersion.VERSION_2,
    MpegVersion.VERSION_1,
)

# 2-bit layer field -> layer (index 0 is reserved)
LAYER_CODES: Tuple[MpegLayer, ...] = (
    MpegLayer.RESERVED,
    MpegLayer.LAYER_3,
    MpegLayer.LAYER_2,
    MpegLayer.LAYER_1,
)


def version_class(version: MpegVersion) -> int:
    """Row selector for the bitrate and sample count tables."""
    return 0 if version is MpegVersion.VERSION_1 else 1


# Bitrates in kbps, index 0 is free format
BIT_RATES_KBPS: Tuple[Dict[MpegLayer, Tuple[int, ...]], ...] = (
    {
        # MPEG Version 1
        MpegLayer.LAYER_1: (0, 32, 64, 96, 128, 160, 192, 224, 256, 288, 320, 352, 384, 416, 448),
        MpegLayer.LAYER_2: (0, 32, 48, 56, 64, 80, 96, 112, 128, 160, 192, 224, 256, 320, 384),
        MpegLayer.LAYER_3: (0, 32, 40, 48, 56, 64, 80, 96, 112, 128, 160, 192, 224, 256, 320),
    },
    {
        # MPEG Version 2 & 2.5
        MpegLayer.LAYER_1: (0, 32, 48, 56, 64, 80, 96, 112, 128, 144, 160, 176, 192, 224, 256),
        MpegLayer.LAYER_2: (0, 8, 16, 24, 32, 40, 48, 56, 64, 80, 96, 112, 128, 144, 160),
        MpegLayer.LAYER_3: (0, 8, 16, 24, 32, 40, 48, 56, 64, 80, 96, 112, 128, 144, 160),
    },
)

SAMPLE_RATES: Dict[MpegVersion, Tuple[int, int, int]] = {
    MpegVersion.VERSION_1: (44100, 48000, 32000),
    MpegVersion.VERSION_2: (22050, 24000, 16000),
    MpegVersion.VERSION_2_5: (11025, 12000, 8000),
}

SAMPLES_PER_FRAME: Tuple[Dict[MpegLayer, int], ...] = (
    {MpegLayer.LAYER_1: 384, MpegLayer.LAYER_2: 1152, MpegLayer.LAYER_3: 1152},
    {MpegLayer.LAYER_1: 384, MpegLayer.LAYER_2: 1152, MpegLayer.LAYER_3: 576},
)


def bit_rate_for(version: MpegVersion, layer: MpegLayer, index: int) -> int:
    """Bitrate in bits per second, 0 for free format."""
    return BIT_RATES_KBPS[version_class(version)][layer][index] * 1000


def bit_rate_index_for(
    version: MpegVersion,
    layer: MpegLayer,
    bit_rate: int,
) -> Optional[int]:
    """Reverse bitrate lookup. Returns None when the rate is not in the table."""
    if bit_rate <= 0 or bit_rate % 1000:
        return None
    row = BIT_RATES_KBPS[version_class(version)][layer]
    try:
        return row.index(bit_rate // 1000)
    except ValueError:
        return None


def sample_count_for(version: MpegVersion, layer: MpegLayer) -> int:
    """PCM samples per frame."""
    return SAMPLES_PER_FRAME[version_class(version)][layer]
