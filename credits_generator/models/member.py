from pydantic import BaseModel, Field

BLOCKED_ROLE = "blocked"


class Member(BaseModel):
    """A project member as returned by the Crowdin API."""

    username: str
    full_name: str | None = Field(alias="fullName", default=None)
    role: str | None = None

    @property
    def is_blocked(self) -> bool:
        return self.role == BLOCKED_ROLE

    @property
    def display_name(self) -> str:
        """The full name when set, otherwise the username."""
        if self.full_name:
            return self.full_name
        return self.username


class MemberResource(BaseModel):
    data: Member


class MembersPage(BaseModel):
    data: list[MemberResource]

    @property
    def members(self) -> list[Member]:
        return [resource.data for resource in self.data]
