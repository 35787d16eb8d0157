import asyncio
import re

from credits_generator.clients import GitClient
from credits_generator.config import CreditsConfig

from .abstract_collector import AbstractCollector

LINE_BREAK = re.compile(r"\r\n|\n|\r")


class GitCollector(AbstractCollector):
    """Credit the committers found in the git history."""

    TITLE = "git contributors"
    BASENAME = "contributor"

    def __init__(self, config: CreditsConfig, client: GitClient | None = None) -> None:
        super().__init__(config)
        self.client = client if client is not None else GitClient(config.repository)

    async def collect(self) -> dict[str, str]:
        shortlog = await asyncio.to_thread(self.client.shortlog)
        self.logger.debug("%s", shortlog)
        for line in LINE_BREAK.split(shortlog):
            self.logger.debug("%s", line)

        # Committers are logged but not credited yet, pending a decision on
        # whether the shortlog should feed contributor.md.
        return {}
