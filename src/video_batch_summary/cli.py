from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from .artifacts import ArtifactStore
from .config import Paths, load_config
from .dependencies import API_KEY_ENV, REQUIRED_EXECUTABLES, check_credential, check_executables
from .errors import DirectoryNotProvidedError, VideoSummaryError
from .pipeline import VIDEO_EXTENSIONS, run_pipeline
from .prompts import DEFAULT_PROMPT_NAME, ensure_default_prompt, list_prompts, resolve_prompt

logger = logging.getLogger("video_batch_summary")


def build_parser() -> argparse.ArgumentParser:
    extensions = ", ".join(ext.lstrip(".") for ext in VIDEO_EXTENSIONS)
    parser = argparse.ArgumentParser(
        prog="video-batch-summary",
        description=(
            "Extract audio from every video in a directory, transcribe it and write a "
            f"summary next to each video as <title>.txt. Video types: {extensions}."
        ),
        epilog=(
            f"Requires {', '.join(REQUIRED_EXECUTABLES)} on PATH and the {API_KEY_ENV} "
            "environment variable."
        ),
    )
    parser.add_argument("directory", nargs="?", help="Directory containing the videos to process")
    parser.add_argument(
        "--prompt",
        default=DEFAULT_PROMPT_NAME,
        help="Name of the prompt file in the prompts directory (default: %(default)s)",
    )
    parser.add_argument(
        "--config-dir",
        dest="config_dir",
        help="Directory holding the config file and prompts/ (default: ~/.config/video_batch_summary)",
    )
    parser.add_argument(
        "--work-dir",
        dest="work_dir",
        help="Directory for intermediate audio and transcription files (default: ~/.cache/video_batch_summary/tmp)",
    )
    parser.add_argument(
        "--list-prompts",
        dest="list_prompts",
        action="store_true",
        help="List the available prompt names and exit",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def run(args: argparse.Namespace) -> None:
    paths = Paths.default(config_dir=args.config_dir, work_dir=args.work_dir)

    if args.list_prompts:
        ensure_default_prompt(paths.prompts_dir)
        for name in list_prompts(paths.prompts_dir):
            print(name)
        return

    if not args.directory:
        raise DirectoryNotProvidedError("No video directory provided")

    check_executables()
    api_key = check_credential()
    config = load_config(paths.config_file)
    prompt_path = resolve_prompt(args.prompt, paths.prompts_dir)
    logger.debug("Using prompt %s and work dir %s", prompt_path, paths.work_dir)

    results = run_pipeline(
        args.directory,
        config=config,
        prompt_path=prompt_path,
        store=ArtifactStore(paths.work_dir),
        api_key=api_key,
    )
    logger.info("Done: %d video(s) processed in %s", len(results), args.directory)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        run(args)
    except VideoSummaryError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
