from __future__ import annotations

import subprocess
from pathlib import Path

from .errors import AudioExtractionError


def extract_audio(
    input_video: Path | str,
    output_path: Path | str | None = None,
    *,
    sample_rate: int = 16000,
    channels: int = 1,
    audio_bitrate: str | None = "64k",
) -> Path:
    """Extract the audio track of ``input_video`` into a compressed MP3.

    Args:
        input_video: Path to the source video file.
        output_path: Optional target path for the extracted audio. Defaults to the
            same stem as ``input_video`` with a ``.mp3`` suffix.
        sample_rate: Audio sampling rate in Hz.
        channels: 1 for mono, 2 for stereo.
        audio_bitrate: Target bitrate passed to the MP3 encoder.

    Returns:
        Path to the extracted audio file.
    """

    input_path = Path(input_video)
    target = Path(output_path) if output_path is not None else input_path.with_suffix(".mp3")
    target.parent.mkdir(parents=True, exist_ok=True)

    command = [
        "ffmpeg",
        "-nostdin",
        "-y",
        "-i",
        str(input_path),
        "-vn",
        "-ac",
        str(channels),
        "-ar",
        str(sample_rate),
        "-acodec",
        "libmp3lame",
    ]
    if audio_bitrate:
        command.extend(["-b:a", audio_bitrate])
    command.append(str(target))

    try:
        subprocess.run(command, check=True, stdout=subprocess.DEVNULL, stderr=subprocess.PIPE)
    except FileNotFoundError as exc:
        raise AudioExtractionError("ffmpeg executable not found") from exc
    except subprocess.CalledProcessError as exc:
        target.unlink(missing_ok=True)
        detail = _last_line(exc.stderr)
        message = f"Failed to extract audio from {input_path} with ffmpeg"
        raise AudioExtractionError(f"{message}: {detail}" if detail else message) from exc

    return target


def _last_line(stderr: bytes | str | None) -> str:
    if not stderr:
        return ""
    if isinstance(stderr, bytes):
        stderr = stderr.decode("utf-8", errors="replace")
    lines = [line.strip() for line in stderr.splitlines() if line.strip()]
    return lines[-1] if lines else ""
