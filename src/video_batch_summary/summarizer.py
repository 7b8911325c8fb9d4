from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Sequence

from .dependencies import SUMMARIZER_EXECUTABLE
from .errors import SummarizationError


class CLISummarizer:
    """Runs the ``llm`` command line tool with the transcript on stdin."""

    def __init__(
        self,
        *,
        model: str,
        executable: str = SUMMARIZER_EXECUTABLE,
        extra_args: Sequence[str] = (),
        timeout: float | None = None,
    ) -> None:
        self.model = model
        self.executable = executable
        self.extra_args = list(extra_args)
        self.timeout = timeout

    def build_command(self, prompt_path: Path | str) -> list[str]:
        return [self.executable, "-m", self.model, "-f", str(prompt_path), *self.extra_args]

    def summarize(self, text: str, *, prompt_path: Path | str) -> str:
        command = self.build_command(prompt_path)
        try:
            result = subprocess.run(
                command,
                input=text,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as exc:
            raise SummarizationError(f"{self.executable} executable not found") from exc
        except subprocess.TimeoutExpired as exc:
            raise SummarizationError(f"{self.executable} timed out") from exc

        if result.returncode != 0:
            detail = (result.stderr or "").strip()
            raise SummarizationError(
                f"{self.executable} exited with status {result.returncode}" + (f": {detail}" if detail else "")
            )
        return result.stdout

    def summarize_to_file(self, text: str, *, prompt_path: Path | str, output_path: Path | str) -> Path:
        summary = self.summarize(text, prompt_path=prompt_path)
        target = Path(output_path)
        target.write_text(summary)
        return target
