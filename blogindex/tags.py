from __future__ import annotations

from .collector import sort_newest_first
from .models import Post


def extract_tags(posts: list[Post]) -> list[str]:
    return sorted({tag for post in posts for tag in post.tags})


def group_by_tag(posts: list[Post]) -> dict[str, list[Post]]:
    tag_map: dict[str, list[Post]] = {}
    for post in sort_newest_first(posts):
        for tag in post.tags:
            tag_map.setdefault(tag, []).append(post)
    return {tag: tag_map[tag] for tag in sorted(tag_map)}
