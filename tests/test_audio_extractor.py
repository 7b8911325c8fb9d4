from __future__ import annotations

import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from video_batch_summary.audio import extract_audio
from video_batch_summary.errors import AudioExtractionError


@pytest.fixture
def sample_video(tmp_path: Path) -> Path:
    video = tmp_path / "sample.mp4"
    video.write_bytes(b"fake-video-bytes")
    return video


def test_extract_audio_invokes_ffmpeg(sample_video: Path, tmp_path: Path) -> None:
    target = tmp_path / "work" / "sample.mp3"
    with patch("video_batch_summary.audio.subprocess.run") as mock_run:
        mock_run.return_value = subprocess.CompletedProcess(args=[], returncode=0)
        output_path = extract_audio(sample_video, target)

    assert output_path == target
    assert target.parent.is_dir()
    mock_run.assert_called_once()
    called_args = mock_run.call_args[0][0]
    assert called_args[0] == "ffmpeg"
    assert called_args[called_args.index("-i") + 1] == str(sample_video)
    assert "-vn" in called_args
    assert "libmp3lame" in called_args
    assert called_args[called_args.index("-ac") + 1] == "1"
    assert called_args[-1] == str(target)


def test_extract_audio_defaults_to_mp3_beside_video(sample_video: Path) -> None:
    with patch("video_batch_summary.audio.subprocess.run") as mock_run:
        mock_run.return_value = subprocess.CompletedProcess(args=[], returncode=0)
        output_path = extract_audio(sample_video, channels=2, audio_bitrate="48k", sample_rate=8000)

    assert output_path == sample_video.with_suffix(".mp3")
    called_args = mock_run.call_args[0][0]
    assert called_args[called_args.index("-ac") + 1] == "2"
    assert called_args[called_args.index("-b:a") + 1] == "48k"
    assert called_args[called_args.index("-ar") + 1] == "8000"


def test_extract_audio_raises_when_ffmpeg_fails(sample_video: Path) -> None:
    failure = subprocess.CalledProcessError(1, "ffmpeg", stderr=b"header\nInvalid data found when processing input\n")
    with patch("video_batch_summary.audio.subprocess.run", side_effect=failure):
        with pytest.raises(AudioExtractionError, match="Invalid data found"):
            extract_audio(sample_video)


def test_extract_audio_removes_partial_output_on_failure(sample_video: Path, tmp_path: Path) -> None:
    target = tmp_path / "work" / "sample.mp3"

    def write_partial_then_fail(command, **_kwargs):
        Path(command[-1]).write_bytes(b"truncated")
        raise subprocess.CalledProcessError(1, "ffmpeg", stderr=b"Conversion failed!")

    with patch("video_batch_summary.audio.subprocess.run", side_effect=write_partial_then_fail):
        with pytest.raises(AudioExtractionError, match="Conversion failed"):
            extract_audio(sample_video, target)

    assert not target.exists()


def test_extract_audio_raises_when_ffmpeg_missing(sample_video: Path) -> None:
    with patch("video_batch_summary.audio.subprocess.run", side_effect=FileNotFoundError("ffmpeg")):
        with pytest.raises(AudioExtractionError, match="not found"):
            extract_audio(sample_video)
