from typing import Any

import requests


class CreditsError(Exception):
    """Base class for every error raised while generating credits."""


class ConfigurationError(CreditsError):
    """The configuration is missing a value a pipeline needs."""


class ProcessError(CreditsError):
    """Git could not be spawned or exited with a nonzero status."""

    def __init__(self, exit_code: int | None, stderr: str) -> None:
        self.exit_code = exit_code
        self.stderr = stderr
        if exit_code is None:
            msg = f"Failed to run git: {stderr}"
        else:
            msg = f"git exited with status {exit_code}: {stderr.strip()}"
        super().__init__(msg)


class ApiError(CreditsError):
    """The Crowdin API answered with a status other than 200."""

    def __init__(
        self,
        status_code: int,
        body: str,
        payload: Any = None,  # noqa: ANN401
    ) -> None:
        self.status_code = status_code
        self.body = body
        self.payload = payload
        super().__init__(f"Crowdin API returned HTTP {status_code}: {body}")

    @classmethod
    def from_response(cls, response: requests.Response) -> "ApiError":
        """
        Build the error from a failed response.

        The body is parsed as JSON; a body that is not valid JSON raises
        ``requests.exceptions.JSONDecodeError`` instead.
        """
        payload = response.json()
        return cls(response.status_code, response.text, payload)


class MalformedResponseError(CreditsError):
    """A successful response whose body is not a members page."""
