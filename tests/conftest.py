from collections.abc import Generator
from pathlib import Path

import pytest

from credits_generator.config import ENV_VARS, CreditsConfig
from credits_generator.logger import get_log_status_filter


@pytest.fixture(autouse=True)
def reset_log_status() -> Generator[None, None, None]:
    """Forget errors and warnings logged by previous tests."""
    log_status_filter = get_log_status_filter()
    assert log_status_filter is not None
    log_status_filter.reset()
    yield
    log_status_filter.reset()


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's environment out of the configuration."""
    for env_var in ENV_VARS.values():
        monkeypatch.delenv(env_var, raising=False)


@pytest.fixture
def config(tmp_path: Path) -> CreditsConfig:
    return CreditsConfig(
        crowdin_token="secret-token",  # noqa: S106
        repository=tmp_path,
        output_dir=tmp_path / "out",
    )
