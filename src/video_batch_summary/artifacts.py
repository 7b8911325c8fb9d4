from __future__ import annotations

import enum
from pathlib import Path


class Stage(enum.Enum):
    AUDIO = "audio"
    TRANSCRIPT = "transcript"
    TEXT = "text"
    SUMMARY = "summary"


_STORED_SUFFIXES = {
    Stage.AUDIO: ".mp3",
    Stage.TRANSCRIPT: ".json",
}


class ArtifactStore:
    """Intermediate per-title artifacts kept in a shared working directory.

    An artifact counts as complete as soon as its file exists. Nothing is ever
    invalidated: a stale, changed or truncated file is reused as-is, so removing
    the file is the only way to force a stage to run again.
    """

    def __init__(self, work_dir: Path | str) -> None:
        self.work_dir = Path(work_dir)

    def path(self, title: str, stage: Stage) -> Path:
        try:
            suffix = _STORED_SUFFIXES[stage]
        except KeyError:
            raise ValueError(f"Stage {stage.value} has no stored artifact") from None
        return self.work_dir / f"{title}{suffix}"

    def exists(self, title: str, stage: Stage) -> bool:
        return self.path(title, stage).exists()

    def write(self, title: str, stage: Stage, data: bytes | str) -> Path:
        target = self.path(title, stage)
        self.work_dir.mkdir(parents=True, exist_ok=True)
        if isinstance(data, str):
            target.write_text(data)
        else:
            target.write_bytes(data)
        return target

    def remove(self, title: str, stage: Stage) -> None:
        self.path(title, stage).unlink(missing_ok=True)
