from __future__ import annotations

import datetime as dt
from collections.abc import Mapping
from pathlib import PurePosixPath
from typing import Literal, Optional, Union

import pydantic

from .content import parse_date, parse_list
from .errors import InvalidFieldValue, MissingRequiredField

REQUIRED_FIELDS = ("date", "title")


class NavLink(pydantic.BaseModel):
    """Author-supplied prev/next link shown at the bottom of a post."""

    model_config = pydantic.ConfigDict(frozen=True)

    text: str
    link: str


Navigation = Union[NavLink, Literal[False], None]


def normalize_tags(values: object) -> tuple[str, ...]:
    if values is None:
        return ()
    if isinstance(values, str):
        values = parse_list(values)
    tags: list[str] = []
    for value in values:
        if value is None:
            continue
        tag = str(value).strip()
        if tag and tag not in tags:
            tags.append(tag)
    return tuple(tags)


class Post(pydantic.BaseModel):
    """One published article, identified by its path under the content root."""

    model_config = pydantic.ConfigDict(frozen=True)

    path: str
    date: dt.datetime
    title: str
    description: str = ""
    tags: tuple[str, ...] = ()
    prev: Navigation = None
    next: Navigation = None

    @pydantic.field_validator("tags", mode="before")
    @classmethod
    def dedupe_tags(cls, value: object) -> tuple[str, ...]:
        return normalize_tags(value)

    @property
    def route(self) -> str:
        rel = PurePosixPath(self.path)
        if rel.name == "index.md":
            parent = rel.parent.as_posix()
            return "/" if parent == "." else f"/{parent}/"
        return "/" + rel.with_suffix("").as_posix()

    @property
    def prev_link(self) -> Optional[NavLink]:
        return self.prev or None

    @property
    def next_link(self) -> Optional[NavLink]:
        return self.next or None


def _text(meta: Mapping, key: str, path: str) -> str:
    value = meta.get(key)
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        raise InvalidFieldValue(key, value, path)
    return str(value).strip()


def _navigation(meta: Mapping, key: str, path: str) -> Navigation:
    value = meta.get(key)
    if value is None or value is False:
        return value
    if isinstance(value, Mapping):
        text = value.get("text")
        link = value.get("link")
        if isinstance(text, str) and isinstance(link, str):
            return NavLink(text=text, link=link)
    raise InvalidFieldValue(key, value, path)


def _tags(meta: Mapping, path: str) -> tuple[str, ...]:
    value = meta.get("tags")
    if isinstance(value, (list, tuple)) and any(isinstance(item, (dict, list)) for item in value):
        raise InvalidFieldValue("tags", value, path)
    if value is None or isinstance(value, (str, list, tuple)):
        return normalize_tags(value)
    raise InvalidFieldValue("tags", value, path)


def build_post(meta: Mapping, path: str) -> Post:
    for field in REQUIRED_FIELDS:
        value = meta.get(field)
        if value is None or (isinstance(value, str) and not value.strip()):
            raise MissingRequiredField(field, path)

    title = _text(meta, "title", path)
    if not title:
        raise MissingRequiredField("title", path)

    return Post(
        path=path,
        date=parse_date(meta["date"], path),
        title=title,
        description=_text(meta, "description", path),
        tags=_tags(meta, path),
        prev=_navigation(meta, "prev", path),
        next=_navigation(meta, "next", path),
    )
