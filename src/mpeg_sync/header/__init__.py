"""
Header Module
=============

MPEG audio frame header tables, decoding and encoding.

This module provides:
    - try_decode_header: Validate and decode 4 candidate bytes
    - encode_header: Build header bytes from field values
    - compute_frame_length: Layer-dependent frame length formula
    - MAX_FRAME_LENGTH, HEADER_SIZE: Framing constants
"""

from mpeg_sync.header.decoder import (
    compute_frame_length,
    is_sync,
    try_decode_header,
)
from mpeg_sync.header.encoder import encode_header
from mpeg_sync.header.tables import HEADER_SIZE, MAX_FRAME_LENGTH

__all__ = [
    # Decoding
    "try_decode_header",
    "compute_frame_length",
    "is_sync",
    # Encoding
    "encode_header",
    # Constants
    "HEADER_SIZE",
    "MAX_FRAME_LENGTH",
]
