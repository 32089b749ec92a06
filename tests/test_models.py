"""
Model Tests
===========

Tests for the immutable frame records.
"""

import dataclasses

import pytest

from mpeg_sync import Frame, try_decode_header
from mpeg_sync.models.frame import ChannelMode, MpegLayer, MpegVersion


class TestFrame:
    """Frame and FrameHeader records."""

    def test_frozen(self, sample_header):
        """Verify records cannot be modified."""
        header = try_decode_header(sample_header)
        frame = Frame(header=header)

        with pytest.raises(dataclasses.FrozenInstanceError):
            header.bit_rate = 1
        with pytest.raises(dataclasses.FrozenInstanceError):
            frame.raw_data = b""

    def test_header_fields_exposed_on_frame(self, sample_frame_bytes):
        """Verify the frame delegates to its header."""
        header = try_decode_header(sample_frame_bytes)
        frame = Frame(header=header, raw_data=sample_frame_bytes)

        assert frame.version is MpegVersion.VERSION_1
        assert frame.layer is MpegLayer.LAYER_3
        assert frame.bit_rate == 128000
        assert frame.sample_rate == 44100
        assert frame.channel_mode is ChannelMode.JOINT_STEREO
        assert frame.sample_count == 1152
        assert frame.frame_length == 417
        assert frame.duration == pytest.approx(1152 / 44100)
        assert header.payload_length == 413
        assert header.channels == 2
        assert frame.payload_length == 413
        assert frame.channels == 2

    def test_mono_frame_channels(self):
        """Verify a mono header reports one channel through the frame."""
        # V1 Layer 3, 128 kbps, 44100 Hz, mono
        frame = Frame(header=try_decode_header(bytes((0xFF, 0xFB, 0x90, 0xC0))))

        assert frame.channel_mode is ChannelMode.MONO
        assert frame.channels == 1
        assert frame.payload_length == frame.frame_length - 4

    def test_repr_omits_payload(self, sample_frame_bytes):
        """Verify repr stays compact."""
        frame = Frame(header=try_decode_header(sample_frame_bytes), raw_data=sample_frame_bytes)
        text = repr(frame)

        assert "128kbps" in text
        assert "captured" in text
        assert len(text) < 200
