from __future__ import annotations

from pathlib import Path
from typing import Optional

import pydantic

from .collector import collect_posts, sort_newest_first
from .models import Post
from .planner import PageEntry, TagPageEntry, paginate, plan_pages, plan_tag_pages
from .tags import extract_tags, group_by_tag
from .utils import join_url

DEFAULT_PAGE_SIZE = 10
DEFAULT_NEWEST = 5


class SiteContext(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(frozen=True)

    posts: tuple[Post, ...]
    tags: tuple[str, ...]
    pages: tuple[PageEntry, ...]
    tag_pages: tuple[TagPageEntry, ...]
    page_size: int = DEFAULT_PAGE_SIZE

    @classmethod
    def from_posts(cls, posts: list[Post], page_size: int = DEFAULT_PAGE_SIZE) -> SiteContext:
        page_size = max(1, int(page_size))
        tags = extract_tags(posts)
        return cls(
            posts=tuple(sort_newest_first(posts)),
            tags=tuple(tags),
            pages=tuple(plan_pages(len(posts), page_size)),
            tag_pages=tuple(plan_tag_pages(tags)),
            page_size=page_size,
        )

    @classmethod
    def build(
        cls,
        content_root: Path,
        base: Optional[Path] = None,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> SiteContext:
        return cls.from_posts(collect_posts(content_root, base), page_size)

    def newest(self, limit: int = DEFAULT_NEWEST) -> list[Post]:
        return list(self.posts[: max(0, limit)])

    def posts_for_tag(self, tag: str) -> list[Post]:
        return group_by_tag(list(self.posts)).get(tag, [])

    def posts_on_page(self, page: int) -> list[Post]:
        return paginate(list(self.posts), page, self.page_size)

    def find(self, path: str) -> Optional[Post]:
        for post in self.posts:
            if post.path == path:
                return post
        return None

    def to_data(self, base_url: str = "/", newest: int = DEFAULT_NEWEST) -> dict:
        def url(route: str) -> str:
            return join_url(base_url, route) or "/"

        tag_map = group_by_tag(list(self.posts))

        def post_data(post: Post) -> dict:
            data = post.model_dump(mode="json")
            data["url"] = url(post.route)
            return data

        return {
            "posts": [post_data(post) for post in self.posts],
            "newest": [post.path for post in self.newest(newest)],
            "tags": [
                {
                    "name": entry.tag,
                    "url": url(entry.route),
                    "posts": [p.path for p in tag_map.get(entry.tag, [])],
                }
                for entry in self.tag_pages
            ],
            "pages": [
                {
                    "page": entry.page,
                    "url": url(entry.route),
                    "posts": [p.path for p in self.posts_on_page(entry.page)],
                }
                for entry in self.pages
            ],
        }
