import asyncio

from credits_generator.clients import CrowdinClient, get_crowdin_client
from credits_generator.config import CreditsConfig
from credits_generator.models import Member, sorted_contributors
from credits_generator.writers import render_cpp

from .abstract_collector import AbstractCollector


def collate_members(
    contributors: dict[str, str], members: list[Member], client: CrowdinClient
) -> None:
    """Add the members to ``contributors``, overwriting entries with the same name."""
    for member in members:
        # Don't credit blocked users for work not done
        if member.is_blocked:
            continue

        contributors[member.display_name] = client.profile_url(member.username)


class CrowdinCollector(AbstractCollector):
    """Credit the translators of the Crowdin project."""

    TITLE = "Crowdin translators"
    BASENAME = "translators"

    def __init__(
        self, config: CreditsConfig, client: CrowdinClient | None = None
    ) -> None:
        super().__init__(config)
        self.client = client

    async def collect(self) -> dict[str, str]:
        # A missing token fails this pipeline only
        client = self.client
        if client is None:
            client = get_crowdin_client(self.config)
        project_id = self.config.crowdin_project_id

        contributors: dict[str, str] = {}
        page = 0
        while True:
            members = await asyncio.to_thread(
                client.get_members_page, project_id, page
            )
            self.logger.debug(
                "Fetched %d members from page %d of project %d.",
                len(members),
                page,
                project_id,
            )
            collate_members(contributors, members, client)

            # A short page is the last one
            if len(members) < client.PAGE_SIZE:
                break
            page += 1

        return contributors

    def render(self, contributors: dict[str, str]) -> dict[str, str]:
        renders = super().render(contributors)
        renders["cpp"] = render_cpp(sorted_contributors(contributors))
        return renders
