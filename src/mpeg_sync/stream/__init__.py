"""
Stream Module
=============

Frame synchronisation over binary streams.

This module provides the scanning layer for mpeg_sync:
    - read_frame: Find and consume the next frame (resync on garbage)
    - iter_frames: Generator over read_frame
    - FrameReader: Iterator with offsets, metrics and a stream summary

Example:
    from mpeg_sync.stream import FrameReader

    with open("track.mp3", "rb") as f:
        for frame in FrameReader(f, capture_data=False):
            print(frame.bit_rate, frame.frame_length)
"""

from mpeg_sync.stream.scanner import read_frame
from mpeg_sync.stream.reader import FrameReader, FrameReaderMetrics, iter_frames


__all__ = [
    "read_frame",
    "iter_frames",
    "FrameReader",
    "FrameReaderMetrics",
]
