import requests
from pydantic import ValidationError

from credits_generator.config import CreditsConfig
from credits_generator.exceptions import (
    ApiError,
    ConfigurationError,
    MalformedResponseError,
)
from credits_generator.logger import get_app_logger
from credits_generator.models import Member, MembersPage


class CrowdinClient:
    """Client of the Crowdin v2 REST API, limited to reading project members."""

    PAGE_SIZE = 100
    MEMBERS_PATH = "/api/v2/projects/{project_id}/members"

    def __init__(
        self,
        token: str,
        host: str = "crowdin.com",
        timeout: float = 10,
        session: requests.Session | None = None,
    ) -> None:
        self.host = host
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()
        self.session.headers.update(
            {
                "accept": "application/json",
                "authorization": f"Bearer {token}",
            }
        )

    def members_url(self, project_id: int) -> str:
        return f"https://{self.host}{self.MEMBERS_PATH.format(project_id=project_id)}"

    def profile_url(self, username: str) -> str:
        return f"https://{self.host}/profile/{username}"

    def get_members_page(self, project_id: int, page: int) -> list[Member]:
        """
        Fetch one page of the project members, ``page`` counting from 0.

        Raises:
            ApiError: the API answered with a status other than 200.
            MalformedResponseError: the body is not a page of members.
        """
        response = self.session.get(
            self.members_url(project_id),
            params={"limit": self.PAGE_SIZE, "offset": page * self.PAGE_SIZE},
            timeout=self.timeout,
        )
        if response.status_code != 200:  # noqa: PLR2004
            raise ApiError.from_response(response)

        try:
            return MembersPage.model_validate_json(response.content).members
        except ValidationError as e:
            msg = f"Unexpected members page {page} of project {project_id}"
            raise MalformedResponseError(msg) from e


def get_crowdin_client(config: CreditsConfig) -> CrowdinClient:
    """Get a Crowdin client authenticated with the configured token."""
    logger = get_app_logger()

    if not config.crowdin_token:
        msg = "CROWDIN_TOKEN is not set"
        logger.critical(msg)
        raise ConfigurationError(msg)

    return CrowdinClient(
        config.crowdin_token,
        host=config.crowdin_host,
        timeout=config.timeout,
    )
