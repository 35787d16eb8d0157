from .contributor import Contributor, sorted_contributors
from .member import Member, MemberResource, MembersPage

__all__ = [
    "Contributor",
    "Member",
    "MemberResource",
    "MembersPage",
    "sorted_contributors",
]
