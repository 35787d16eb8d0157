import asyncio
import json
from pathlib import Path

from credits_generator.logger import get_app_logger
from credits_generator.models import Contributor

ABOUT_ENTRY_TEMPLATE = (
    '\tstreamfx::ui::about::entry{{"{name}", '
    'streamfx::ui::about::role_type::{role}, "",\n'
    '\t\t"{url}"}}, // {url}'
)


def render_markdown(contributors: list[Contributor]) -> str:
    return ", ".join(f"[{c.name}]({c.url})" for c in contributors)


def render_json(contributors: list[Contributor]) -> str:
    return json.dumps(
        [c.model_dump() for c in contributors],
        indent="\t",
        ensure_ascii=False,
    )


def render_cpp(contributors: list[Contributor], role: str = "TRANSLATOR") -> str:
    """Render the entries of the about dialog, one initializer per contributor."""
    return "\n".join(
        ABOUT_ENTRY_TEMPLATE.format(name=c.name, role=role, url=c.url)
        for c in contributors
    )


async def write_outputs(
    directory: Path, basename: str, renders: dict[str, str]
) -> list[Path]:
    """
    Write each rendering to ``<directory>/<basename>.<extension>``.

    ``renders`` maps a file extension to the text written under it.
    """
    logger = get_app_logger()
    await asyncio.to_thread(directory.mkdir, parents=True, exist_ok=True)

    paths = []
    for extension, content in renders.items():
        path = directory / f"{basename}.{extension}"
        await asyncio.to_thread(
            path.write_text, content, encoding="utf-8", newline="\n"
        )
        logger.debug("Wrote %s.", path)
        paths.append(path)

    return paths
