from abc import ABC, abstractmethod
from pathlib import Path
from typing import ClassVar

from credits_generator.config import CreditsConfig
from credits_generator.logger import get_app_logger, log_operation, print_section
from credits_generator.models import sorted_contributors
from credits_generator.writers import render_json, render_markdown, write_outputs


class AbstractCollector(ABC):
    """A pipeline that collects contributors and writes their credit files."""

    TITLE: ClassVar[str]
    BASENAME: ClassVar[str]

    def __init__(self, config: CreditsConfig) -> None:
        self.config = config
        self.logger = get_app_logger()

    @abstractmethod
    async def collect(self) -> dict[str, str]:
        """Return the contributors, mapping each display name to a profile URL."""
        msg = "Subclasses must implement this method"
        raise NotImplementedError(msg)

    def render(self, contributors: dict[str, str]) -> dict[str, str]:
        """Render the contributors, keyed by the extension of the output file."""
        ordered = sorted_contributors(contributors)
        return {
            "md": render_markdown(ordered),
            "json": render_json(ordered),
        }

    async def write(self, contributors: dict[str, str]) -> list[Path]:
        return await write_outputs(
            self.config.output_dir, self.BASENAME, self.render(contributors)
        )

    async def run(self) -> None:
        """Collect then write, logging instead of raising on failure."""
        print_section(self.TITLE)
        with log_operation(f"generate the {self.TITLE} credits"):
            contributors = await self.collect()
            self.logger.debug("Found %d %s.\n", len(contributors), self.TITLE)
            await self.write(contributors)
