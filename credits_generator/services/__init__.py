from .abstract_collector import AbstractCollector
from .crowdin_collector import CrowdinCollector, collate_members
from .git_collector import GitCollector

__all__ = ["AbstractCollector", "CrowdinCollector", "GitCollector", "collate_members"]
