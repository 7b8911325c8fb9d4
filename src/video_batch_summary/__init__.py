"""Batch video transcription and summarization pipeline."""

from .artifacts import ArtifactStore, Stage
from .config import Config, Paths, load_config
from .dependencies import check_credential, check_executables
from .extraction import extract_text
from .pipeline import VideoItem, discover_videos, process_video, run_pipeline
from .prompts import resolve_prompt
from .summarizer import CLISummarizer
from .transcription import TranscriptionClient

__all__ = [
    "ArtifactStore",
    "CLISummarizer",
    "Config",
    "Paths",
    "Stage",
    "TranscriptionClient",
    "VideoItem",
    "check_credential",
    "check_executables",
    "discover_videos",
    "extract_text",
    "load_config",
    "process_video",
    "resolve_prompt",
    "run_pipeline",
]
