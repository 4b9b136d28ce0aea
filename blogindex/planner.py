from __future__ import annotations

import math

import pydantic

from .models import Post

PAGE_ROUTE = "/posts/page/{page}"
TAG_ROUTE = "/tags/{tag}"


class PageEntry(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(frozen=True)

    page: int

    @property
    def route(self) -> str:
        return PAGE_ROUTE.format(page=self.page)


class TagPageEntry(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(frozen=True)

    tag: str

    @property
    def route(self) -> str:
        return TAG_ROUTE.format(tag=self.tag)


def count_pages(total: int, page_size: int) -> int:
    per_page = max(1, int(page_size))
    return max(1, math.ceil(max(0, total) / per_page))


def plan_pages(total: int, page_size: int) -> list[PageEntry]:
    return [PageEntry(page=page) for page in range(1, count_pages(total, page_size) + 1)]


def plan_tag_pages(tags: list[str]) -> list[TagPageEntry]:
    return [TagPageEntry(tag=tag) for tag in tags]


def paginate(posts: list[Post], page: int, page_size: int) -> list[Post]:
    per_page = max(1, int(page_size))
    if page < 1:
        return []
    start = (page - 1) * per_page
    return posts[start : start + per_page]
