from __future__ import annotations

from pathlib import Path
from typing import Optional

from .content import parse_front_matter
from .errors import BlogIndexError, CollectionBuildError
from .models import Post, build_post


def list_markdown_files(root: Path) -> list[Path]:
    if not root.exists():
        return []
    return sorted((path for path in root.rglob("*.md") if path.is_file()), key=lambda p: p.as_posix())


def rel_key(path: Path, base: Path) -> str:
    try:
        return path.relative_to(base).as_posix()
    except ValueError:
        return path.as_posix()


def load_post(md_file: Path, base: Path) -> Post:
    rel = rel_key(md_file, base)
    raw_text = md_file.read_text(encoding="utf-8")
    meta, _body = parse_front_matter(raw_text, rel)
    return build_post(meta, rel)


def collect_posts(content_root: Path, base: Optional[Path] = None) -> list[Post]:
    content_root = Path(content_root)
    base = Path(base) if base is not None else content_root
    posts = []
    for md_file in list_markdown_files(content_root):
        try:
            posts.append(load_post(md_file, base))
        except (BlogIndexError, OSError, UnicodeDecodeError) as exc:
            raise CollectionBuildError(rel_key(md_file, base), exc) from exc
    return posts


def sort_newest_first(posts: list[Post]) -> list[Post]:
    return sorted(posts, key=lambda p: (p.date, p.path), reverse=True)


def newest_posts(posts: list[Post], limit: int) -> list[Post]:
    return sort_newest_first(posts)[: max(0, limit)]
