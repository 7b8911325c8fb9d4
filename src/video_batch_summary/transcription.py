from __future__ import annotations

import logging
from pathlib import Path

import requests

from .config import DEFAULT_LANGUAGE
from .errors import TranscriptionError

logger = logging.getLogger(__name__)


class TranscriptionClient:
    """Client for an OpenAI-compatible ``audio/transcriptions`` endpoint."""

    def __init__(
        self,
        *,
        api_key: str,
        url: str,
        model: str,
        language: str = DEFAULT_LANGUAGE,
        timeout: float | None = None,
    ) -> None:
        if not api_key:
            raise TranscriptionError("An API key is required for transcription")
        self.api_key = api_key
        self.url = url
        self.model = model
        self.language = language
        self.timeout = timeout

    def transcribe(self, audio_path: Path | str) -> bytes:
        """Upload ``audio_path`` and return the raw response body.

        The body is returned whatever the status code so callers can persist
        error payloads as-is. Only transport failures raise.
        """

        path = Path(audio_path)
        headers = {"Authorization": f"Bearer {self.api_key}"}
        data = {"model": self.model, "language": self.language}

        try:
            handle = path.open("rb")
        except OSError as exc:
            raise TranscriptionError(f"Could not read audio file {path}") from exc

        with handle:
            try:
                response = requests.post(
                    self.url,
                    headers=headers,
                    data=data,
                    files={"file": (path.name, handle, "audio/mpeg")},
                    timeout=self.timeout,
                )
            except requests.RequestException as exc:
                raise TranscriptionError("Transcription request failed") from exc

        if not response.ok:
            logger.warning(
                "Transcription endpoint returned HTTP %s for %s; saving response as-is",
                response.status_code,
                path.name,
            )
        return response.content
