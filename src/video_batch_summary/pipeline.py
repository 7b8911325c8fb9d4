from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .artifacts import ArtifactStore, Stage
from .audio import extract_audio
from .config import Config
from .errors import DirectoryNotFoundError
from .extraction import extract_text
from .summarizer import CLISummarizer
from .transcription import TranscriptionClient

logger = logging.getLogger(__name__)

VIDEO_EXTENSIONS = (".mp4", ".mkv", ".avi", ".mov")


@dataclass(frozen=True)
class VideoItem:
    path: Path

    @property
    def title(self) -> str:
        return self.path.stem

    @property
    def directory(self) -> Path:
        return self.path.parent

    @property
    def summary_path(self) -> Path:
        return self.directory / f"{self.title}.txt"


@dataclass(frozen=True)
class StageResult:
    stage: Stage
    path: Optional[Path]
    skipped: bool = False
    text: Optional[str] = None


@dataclass
class VideoResult:
    item: VideoItem
    stages: list[StageResult] = field(default_factory=list)

    @property
    def summary_path(self) -> Path:
        return self.item.summary_path


def discover_videos(directory: Path | str) -> list[VideoItem]:
    """List video files directly inside ``directory`` in enumeration order."""

    root = Path(directory)
    if not root.is_dir():
        raise DirectoryNotFoundError(f"Directory not found: {root}")

    items: list[VideoItem] = []
    seen: dict[str, str] = {}
    with os.scandir(root) as entries:
        for entry in entries:
            if not entry.is_file():
                continue
            if Path(entry.name).suffix.lower() not in VIDEO_EXTENSIONS:
                continue
            item = VideoItem(Path(entry.path))
            if item.title in seen:
                # Artifacts and the summary are keyed by title only.
                logger.warning(
                    "%s and %s share the title %r; they will share artifacts and %s",
                    seen[item.title],
                    entry.name,
                    item.title,
                    item.summary_path.name,
                )
            else:
                seen[item.title] = entry.name
            items.append(item)
    return items


def run_audio_stage(item: VideoItem, store: ArtifactStore) -> StageResult:
    target = store.path(item.title, Stage.AUDIO)
    if store.exists(item.title, Stage.AUDIO):
        logger.info("Audio for %s already exists, skipping extraction", item.title)
        return StageResult(Stage.AUDIO, target, skipped=True)

    logger.info("Extracting audio from %s", item.path.name)
    extract_audio(item.path, target)
    return StageResult(Stage.AUDIO, target)


def run_transcription_stage(
    item: VideoItem,
    store: ArtifactStore,
    transcriber: TranscriptionClient,
) -> StageResult:
    target = store.path(item.title, Stage.TRANSCRIPT)
    if store.exists(item.title, Stage.TRANSCRIPT):
        logger.info("Transcription for %s already exists, skipping transcription", item.title)
        return StageResult(Stage.TRANSCRIPT, target, skipped=True)

    logger.info("Transcribing %s", item.title)
    body = transcriber.transcribe(store.path(item.title, Stage.AUDIO))
    store.write(item.title, Stage.TRANSCRIPT, body)
    return StageResult(Stage.TRANSCRIPT, target)


def run_text_stage(item: VideoItem, store: ArtifactStore) -> StageResult:
    text = extract_text(store.path(item.title, Stage.TRANSCRIPT))
    return StageResult(Stage.TEXT, None, text=text)


def run_summary_stage(
    item: VideoItem,
    text: str,
    summarizer: CLISummarizer,
    prompt_path: Path,
) -> StageResult:
    logger.info("Summarizing %s", item.title)
    target = summarizer.summarize_to_file(text, prompt_path=prompt_path, output_path=item.summary_path)
    return StageResult(Stage.SUMMARY, target)


def process_video(
    item: VideoItem,
    *,
    config: Config,
    prompt_path: Path | str,
    store: ArtifactStore,
    api_key: str | None = None,
    transcriber: Optional[TranscriptionClient] = None,
    summarizer: Optional[CLISummarizer] = None,
) -> VideoResult:
    """Run the four stages for one video, in order.

    Audio extraction and transcription are skipped when their artifacts exist.
    Text extraction and summarization always run, overwriting any previous
    summary. The first failing stage raises and later stages do not run.
    """

    transcriber = transcriber or _default_transcriber(config, api_key)
    summarizer = summarizer or CLISummarizer(model=config.summary_model)

    result = VideoResult(item)
    result.stages.append(run_audio_stage(item, store))
    result.stages.append(run_transcription_stage(item, store, transcriber))
    text_result = run_text_stage(item, store)
    result.stages.append(text_result)
    result.stages.append(run_summary_stage(item, text_result.text or "", summarizer, Path(prompt_path)))
    return result


def run_pipeline(
    directory: Path | str,
    *,
    config: Config,
    prompt_path: Path | str,
    store: ArtifactStore,
    api_key: str | None = None,
    transcriber: Optional[TranscriptionClient] = None,
    summarizer: Optional[CLISummarizer] = None,
) -> list[VideoResult]:
    """Process every video in ``directory`` sequentially, stopping at the first failure."""

    videos = discover_videos(directory)
    if not videos:
        logger.info("No video files found in %s", directory)
        return []

    transcriber = transcriber or _default_transcriber(config, api_key)
    summarizer = summarizer or CLISummarizer(model=config.summary_model)

    results: list[VideoResult] = []
    for index, item in enumerate(videos, start=1):
        logger.info("[%d/%d] Processing %s", index, len(videos), item.path.name)
        results.append(
            process_video(
                item,
                config=config,
                prompt_path=prompt_path,
                store=store,
                transcriber=transcriber,
                summarizer=summarizer,
            )
        )
        logger.info("Summary written to %s", item.summary_path)
    return results


def _default_transcriber(config: Config, api_key: str | None) -> TranscriptionClient:
    return TranscriptionClient(
        api_key=api_key or "",
        url=config.transcription_url,
        model=config.transcription_model,
        language=config.language,
    )
