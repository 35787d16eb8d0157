from .crowdin_client import CrowdinClient, get_crowdin_client
from .git_client import GitClient

__all__ = ["CrowdinClient", "GitClient", "get_crowdin_client"]
