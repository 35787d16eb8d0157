import subprocess
from pathlib import Path

from credits_generator.exceptions import ProcessError


class GitClient:
    """Thin wrapper around the git command line of a local repository."""

    SHORTLOG_ARGS = ("shortlog", "-sn", "--all")

    def __init__(self, repository: Path, executable: str = "git") -> None:
        self.repository = repository
        self.executable = executable

    def shortlog(self) -> str:
        """Return the commit count summary of every author across all refs."""
        return self._run(*self.SHORTLOG_ARGS)

    def _run(self, *args: str) -> str:
        try:
            result = subprocess.run(  # noqa: S603
                [self.executable, *args],
                cwd=self.repository,
                # shortlog reads the log from stdin when it is not a terminal
                stdin=subprocess.DEVNULL,
                capture_output=True,
                text=True,
                encoding="utf-8",
                check=False,
            )
        except OSError as e:
            raise ProcessError(None, str(e)) from e

        if result.returncode != 0:
            raise ProcessError(result.returncode, result.stderr)

        return result.stdout
