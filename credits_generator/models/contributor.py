from pydantic import BaseModel


class Contributor(BaseModel):
    name: str
    url: str = ""


def sorted_contributors(contributors: dict[str, str]) -> list[Contributor]:
    """Turn a name to URL mapping into contributors ordered by name."""
    return [
        Contributor(name=name, url=contributors[name]) for name in sorted(contributors)
    ]
