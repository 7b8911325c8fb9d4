"""Exceptions raised by the video batch summary pipeline."""

from __future__ import annotations

from typing import Iterable


class VideoSummaryError(RuntimeError):
    """Base class for every failure the CLI reports with exit code 1."""


class MissingDependenciesError(VideoSummaryError):
    """One or more required executables are not on ``PATH``."""

    def __init__(self, missing: Iterable[str]) -> None:
        self.missing = list(missing)
        listing = "\n".join(f"  - {name}" for name in self.missing)
        super().__init__(f"Missing required dependencies:\n{listing}")


class MissingCredentialError(VideoSummaryError):
    """The API key environment variable is unset or empty."""


class MissingConfigFileError(VideoSummaryError):
    """The configuration file could not be created or read."""


class IncompleteConfigError(VideoSummaryError):
    """Required configuration keys are empty after loading."""

    def __init__(self, keys: Iterable[str], path: object = None) -> None:
        self.keys = list(keys)
        location = f" in {path}" if path is not None else ""
        super().__init__(f"Missing configuration values{location}: {', '.join(self.keys)}")


class PromptNotFoundError(VideoSummaryError):
    """The requested prompt has no file in the prompts directory."""


class DirectoryNotProvidedError(VideoSummaryError):
    """No video directory was given on the command line."""


class DirectoryNotFoundError(VideoSummaryError):
    """The video directory does not exist."""


class StageError(VideoSummaryError):
    """A pipeline stage failed for a video."""


class AudioExtractionError(StageError):
    pass


class TranscriptionError(StageError):
    pass


class TextExtractionError(StageError):
    pass


class SummarizationError(StageError):
    pass
