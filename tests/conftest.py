"""Shared fixtures for blogindex tests."""

from pathlib import Path
from typing import Callable, Optional

import pytest

WritePost = Callable[..., Path]


def front_matter(title: str, date: str, tags: Optional[list[str]] = None, extra: str = "") -> str:
    lines = ["---", f"title: {title}", f"date: {date}"]
    if tags is not None:
        lines.append(f"tags: [{', '.join(tags)}]")
    if extra:
        lines.append(extra.rstrip("\n"))
    lines.append("---")
    lines.append("")
    lines.append(f"# {title}")
    return "\n".join(lines) + "\n"


@pytest.fixture
def write_post(tmp_path: Path) -> WritePost:
    """Returns a helper that writes a Markdown post under tmp_path."""

    def _write(rel: str, text: str) -> Path:
        path = tmp_path / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_site(write_post: WritePost, tmp_path: Path) -> Path:
    """Two posts in July 2025, laid out as posts/<year>/<month>/<day>.md."""
    write_post("posts/2025/07/07.md", front_matter("A", "2025-07-07", ["ts"]))
    write_post("posts/2025/07/08.md", front_matter("B", "2025-07-08", ["ts", "generics"]))
    return tmp_path


@pytest.fixture
def post_text() -> Callable[..., str]:
    """Returns the front_matter helper for building post sources."""
    return front_matter
