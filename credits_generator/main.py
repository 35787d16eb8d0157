import argparse
import asyncio
import sys
from collections.abc import Callable, Coroutine
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import ValidationError

from credits_generator.config import CreditsConfig
from credits_generator.logger import get_app_logger, get_log_status_filter
from credits_generator.services import CrowdinCollector, GitCollector

PIPELINES = ["git", "crowdin"]


class CreditsManager:
    def __init__(self, config: CreditsConfig) -> None:
        logger = get_app_logger()
        logger.info("Initializing CreditsManager...\n")
        self.config = config

    async def generate_git(self) -> None:
        await GitCollector(self.config).run()

    async def generate_crowdin(self) -> None:
        await CrowdinCollector(self.config).run()

    def pipelines(self) -> dict[str, Callable[[], Coroutine[Any, Any, None]]]:
        return {
            "git": self.generate_git,
            "crowdin": self.generate_crowdin,
        }

    async def generate(self, pipeline_names: list[str]) -> None:
        """Run the pipelines concurrently and wait for all their files."""
        pipelines = self.pipelines()
        await asyncio.gather(
            *(pipelines[name]() for name in dict.fromkeys(pipeline_names))
        )


def args_parser(pipelines: list[str]) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=(
            "Generate the credit files of the git contributors "
            "and the Crowdin translators."
        ),
    )
    parser.add_argument(
        "--pipelines",
        nargs="+",
        choices=pipelines,
        default=pipelines,
        metavar="PIPELINE",
        help=(
            "One or more pipelines to run "
            f"(choices: {', '.join(pipelines)}). "
            "Defaults to running all."
        ),
    )
    parser.add_argument(
        "--project-id",
        dest="crowdin_project_id",
        type=int,
        help="Crowdin project id (env: CROWDIN_PROJECT_ID).",
    )
    parser.add_argument(
        "--token",
        dest="crowdin_token",
        help="Crowdin personal access token (env: CROWDIN_TOKEN).",
    )
    parser.add_argument(
        "--host",
        dest="crowdin_host",
        help="Crowdin host (env: CROWDIN_HOST). Defaults to crowdin.com.",
    )
    parser.add_argument(
        "--repository",
        type=Path,
        help="Git repository to read (env: CREDITS_REPOSITORY).",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        help="Directory of the credit files (env: CREDITS_OUTPUT_DIR).",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        help="HTTP timeout in seconds (env: CREDITS_HTTP_TIMEOUT).",
    )
    return parser


def check_logger_status() -> None:
    """Check log filter flags and exit or warn if needed."""
    logger = get_app_logger()
    log_status_filter = get_log_status_filter()

    if log_status_filter is None:
        logger.critical("No LogStatusFilter found, cannot verify log state.")
        sys.exit(1)

    if log_status_filter.had_error:
        logger.critical("One or more errors were logged. Check logs for details.")
        sys.exit(1)

    if log_status_filter.had_warning:
        logger.warning("One or more warnings were logged. Check logs for details.")


def main(argv: list[str] | None = None) -> None:
    load_dotenv()
    logger = get_app_logger()

    # Parse the arguments
    parser = args_parser(PIPELINES)
    args = vars(parser.parse_args(argv))
    pipeline_names: list[str] = args.pop("pipelines")

    # Build the configuration, flags override the environment
    try:
        config = CreditsConfig.load(args)
    except ValidationError:
        logger.exception("Invalid configuration")
        sys.exit(1)

    # Generate the credits
    credits_manager = CreditsManager(config)
    asyncio.run(credits_manager.generate(pipeline_names))

    # Check the logger status
    check_logger_status()
