"""
Reader Tests
============

Tests for FrameReader offsets, metrics, summary and iter_frames.
"""

import io

import pytest

from mpeg_sync import config
from mpeg_sync.config import ScannerConfig, Settings
from mpeg_sync.errors import TruncatedFrameError
from mpeg_sync.models.frame import ChannelMode, MpegLayer, MpegVersion
from mpeg_sync.models.options import SkipMode
from mpeg_sync.stream import FrameReader, iter_frames


# V1 Layer 3, 192 kbps, 44100 Hz, stereo. 626 bytes.
SECOND_HEADER = bytes((0xFF, 0xFB, 0xB0, 0x00))


class TestFrameReader:
    """Iteration and offset tracking."""

    def test_offsets_after_noise(self, noise, sample_frame_bytes, frame_builder):
        """Verify offsets and skipped bytes for two frames behind noise."""
        second = frame_builder(SECOND_HEADER)
        reader = FrameReader.from_bytes(noise + sample_frame_bytes + second)

        first = reader.read()
        assert reader.last_offset == 50
        assert reader.position == 50 + 417
        assert first.frame_length == 417

        reader.read()
        assert reader.last_offset == 50 + 417
        assert reader.position == 50 + 417 + 626

        assert reader.read() is None
        assert reader.metrics.frames_read == 2
        assert reader.metrics.bytes_skipped == 50
        assert reader.metrics.resync_events == 1
        assert reader.metrics.truncated is False

    def test_iteration(self, sample_frame_bytes):
        """Verify the reader is an iterator that stops at end of stream."""
        reader = FrameReader.from_bytes(sample_frame_bytes * 3)
        frames = list(reader)

        assert len(frames) == 3
        assert all(frame.raw_data == sample_frame_bytes for frame in frames)
        assert list(reader) == []

    def test_gap_between_frames(self, sample_frame_bytes):
        """Verify garbage between frames is counted as a second resync."""
        data = sample_frame_bytes + b"\x00" * 7 + sample_frame_bytes
        reader = FrameReader.from_bytes(data, capture_data=False)
        list(reader)

        assert reader.metrics.bytes_skipped == 7
        assert reader.metrics.resync_events == 1
        assert reader.last_offset == 417 + 7

    def test_skip_on_forward_only_stream(self, noise, sample_frame_bytes, forward_only_stream):
        """Verify offsets are tracked when payloads are read and discarded."""
        stream = forward_only_stream(noise + sample_frame_bytes * 2, max_read=64)
        reader = FrameReader(stream, capture_data=False, skip_mode=SkipMode.AUTO)
        frames = list(reader)

        assert len(frames) == 2
        assert all(frame.raw_data is None for frame in frames)
        assert reader.last_offset == 50 + 417
        assert reader.metrics.bytes_skipped == 50

    def test_truncated_final_frame(self, sample_frame_bytes, sample_header, payload_builder):
        """Verify truncation propagates and is recorded."""
        data = sample_frame_bytes + sample_header + payload_builder(sample_header)[:10]
        reader = FrameReader.from_bytes(data)

        assert reader.read() is not None
        with pytest.raises(TruncatedFrameError):
            reader.read()

        assert reader.metrics.truncated is True
        assert reader.metrics.frames_read == 1
        assert reader.read() is None

    @pytest.mark.parametrize("capture_data", [True, False])
    def test_trailing_garbage_counted(self, sample_frame_bytes, capture_data):
        """Verify bytes after the last frame are reported as skipped."""
        reader = FrameReader.from_bytes(
            sample_frame_bytes + b"\x00" * 100, capture_data=capture_data
        )
        frames = list(reader)

        assert len(frames) == 1
        assert reader.position == 417 + 100
        assert reader.metrics.bytes_skipped == 100
        assert reader.summary().bytes_skipped == 100

    @pytest.mark.parametrize("skip_mode", [SkipMode.SEEK, SkipMode.READ])
    def test_garbage_before_truncated_frame_counted(
        self, noise, sample_header, payload_builder, skip_mode
    ):
        """Verify noise ahead of a truncated frame is reported as skipped."""
        data = noise + sample_header + payload_builder(sample_header)[:10]
        reader = FrameReader.from_bytes(data, capture_data=False, skip_mode=skip_mode)

        with pytest.raises(TruncatedFrameError) as exc_info:
            reader.read()

        assert exc_info.value.available == 10
        assert reader.metrics.bytes_skipped == 50
        assert reader.metrics.resync_events == 1
        assert reader.summary().bytes_skipped == 50

    def test_metrics_to_dict(self, sample_frame_bytes):
        """Verify metrics export."""
        reader = FrameReader.from_bytes(sample_frame_bytes)
        list(reader)

        assert reader.metrics.to_dict() == {
            "frames_read": 1,
            "bytes_skipped": 0,
            "resync_events": 0,
            "truncated": False,
        }


class TestBufferedSkip:
    """Seek skipping over a buffered file."""

    def test_raw_reads_stay_near_file_size(self, sample_frame_bytes, counting_raw_stream):
        """Verify skipping payloads does not discard the read buffer."""
        data = sample_frame_bytes * 1000
        raw = counting_raw_stream(data)
        reader = FrameReader(io.BufferedReader(raw), capture_data=False)
        frames = list(reader)

        assert len(frames) == 1000
        assert reader.position == len(data)
        assert reader.metrics.bytes_skipped == 0
        assert raw.bytes_read <= 2 * len(data)


class TestDefaultsFromSettings:
    """FrameReader falls back to the loaded settings."""

    def test_capture_disabled_by_settings(self, monkeypatch, sample_frame_bytes):
        """Verify scanner.capture_data is used when not passed."""
        monkeypatch.setattr(
            config,
            "settings",
            Settings(scanner=ScannerConfig(capture_data=False, skip_mode=SkipMode.READ)),
        )
        reader = FrameReader(io.BytesIO(sample_frame_bytes))

        assert reader.capture_data is False
        assert reader.skip_mode is SkipMode.READ
        assert reader.read().raw_data is None

    def test_explicit_arguments_win(self, monkeypatch, sample_frame_bytes):
        """Verify constructor arguments override settings."""
        monkeypatch.setattr(
            config,
            "settings",
            Settings(scanner=ScannerConfig(capture_data=False)),
        )
        reader = FrameReader(io.BytesIO(sample_frame_bytes), capture_data=True)

        assert reader.read().raw_data == sample_frame_bytes


class TestSummary:
    """StreamSummary aggregation."""

    def test_empty(self):
        """Verify the summary of an empty stream."""
        reader = FrameReader.from_bytes(b"")
        list(reader)
        summary = reader.summary()

        assert summary.frame_count == 0
        assert summary.duration_seconds == 0.0
        assert summary.average_bit_rate == 0
        assert summary.version is None

    def test_variable_bit_rate(self, noise, sample_frame_bytes, frame_builder):
        """Verify totals and the duration-weighted bitrate."""
        second = frame_builder(SECOND_HEADER)
        reader = FrameReader.from_bytes(noise + sample_frame_bytes + second)
        list(reader)
        summary = reader.summary()

        assert summary.frame_count == 2
        assert summary.total_samples == 2304
        assert summary.duration_seconds == pytest.approx(2304 / 44100)
        assert summary.average_bit_rate == 160000
        assert summary.bit_rates == [128000, 192000]
        assert summary.variable_bit_rate is True
        assert summary.bytes_skipped == 50
        assert summary.version == MpegVersion.VERSION_1
        assert summary.layer == MpegLayer.LAYER_3
        assert summary.sample_rate == 44100
        assert summary.channel_mode == ChannelMode.JOINT_STEREO

    def test_serialises(self, sample_frame_bytes):
        """Verify the summary is a pydantic model."""
        reader = FrameReader.from_bytes(sample_frame_bytes)
        list(reader)
        dumped = reader.summary().model_dump()

        assert dumped["frame_count"] == 1
        assert dumped["variable_bit_rate"] is False


class TestIterFrames:
    """Tests for the iter_frames generator."""

    def test_yields_until_exhausted(self, sample_frame_bytes):
        """Verify every frame is yielded."""
        frames = list(iter_frames(io.BytesIO(sample_frame_bytes * 2), capture_data=False))

        assert len(frames) == 2
        assert frames[0].raw_data is None

    def test_truncation_propagates(self, sample_frame_bytes):
        """Verify iter_frames surfaces truncation."""
        with pytest.raises(TruncatedFrameError):
            list(iter_frames(io.BytesIO(sample_frame_bytes + sample_frame_bytes[:100])))
