import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

DEFAULT_PROJECT_ID = 343435

# Environment variable backing each configuration field
ENV_VARS: dict[str, str] = {
    "crowdin_project_id": "CROWDIN_PROJECT_ID",
    "crowdin_token": "CROWDIN_TOKEN",
    "crowdin_host": "CROWDIN_HOST",
    "repository": "CREDITS_REPOSITORY",
    "output_dir": "CREDITS_OUTPUT_DIR",
    "timeout": "CREDITS_HTTP_TIMEOUT",
}


class CreditsConfig(BaseModel):
    crowdin_project_id: int = DEFAULT_PROJECT_ID
    crowdin_token: str | None = None
    crowdin_host: str = "crowdin.com"
    repository: Path = Path()
    output_dir: Path = Path()
    timeout: float = Field(default=10, gt=0)  # timeout in seconds

    @classmethod
    def load(cls, overrides: dict[str, Any] | None = None) -> "CreditsConfig":
        """
        Build the configuration from the environment.

        Values in ``overrides`` that are not None take precedence over the
        environment, which takes precedence over the defaults.
        """
        values: dict[str, Any] = {}
        for field, env_var in ENV_VARS.items():
            value = os.getenv(env_var)
            if value:
                values[field] = value

        for field, value in (overrides or {}).items():
            if value is not None:
                values[field] = value

        return cls.model_validate(values)
