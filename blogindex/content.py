from __future__ import annotations

import datetime as dt
from typing import Optional

import yaml

from .errors import InvalidDateFormat, MalformedFrontMatter

FRONT_MATTER_DELIMITER = "---"
FRONT_MATTER_END = {"---", "..."}
TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class FrontMatterLoader(yaml.SafeLoader):
    pass


# Keep dates as plain strings; parse_date decides what is a valid date.
FrontMatterLoader.yaml_implicit_resolvers = {
    first: [resolver for resolver in resolvers if resolver[0] != TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def parse_list(value: str) -> list[str]:
    value = value.strip()
    if value.startswith("[") and value.endswith("]"):
        inner = value[1:-1]
        items = [item.strip().strip("'\"") for item in inner.split(",")]
    else:
        items = [item.strip() for item in value.split(",")]
    return [item for item in items if item]


def split_front_matter(text: str, path: Optional[str] = None) -> tuple[str, str]:
    clean_text = text.lstrip("\ufeff")
    lines = clean_text.splitlines()
    if not lines or lines[0].strip() != FRONT_MATTER_DELIMITER:
        raise MalformedFrontMatter("no front matter block at start of file", path)

    end = None
    for i in range(1, len(lines)):
        if lines[i].strip() in FRONT_MATTER_END:
            end = i
            break
    if end is None:
        raise MalformedFrontMatter("front matter block is not closed", path)

    block = "\n".join(lines[1:end])
    body = "\n".join(lines[end + 1 :])
    return block, body


def parse_front_matter(text: str, path: Optional[str] = None) -> tuple[dict, str]:
    block, body = split_front_matter(text, path)
    try:
        meta = yaml.load(block, Loader=FrontMatterLoader)
    except yaml.YAMLError as exc:
        raise MalformedFrontMatter(f"invalid YAML in front matter: {exc}", path) from exc
    if meta is None:
        return {}, body
    if not isinstance(meta, dict):
        raise MalformedFrontMatter("front matter must be a mapping", path)
    return meta, body


def parse_date(value: object, path: Optional[str] = None) -> dt.datetime:
    if isinstance(value, dt.datetime):
        parsed = value
    elif isinstance(value, dt.date):
        parsed = dt.datetime.combine(value, dt.time())
    elif isinstance(value, str):
        date_value = value.strip()
        try:
            parsed = dt.datetime.fromisoformat(date_value)
        except ValueError:
            raise InvalidDateFormat(value, path) from None
    else:
        raise InvalidDateFormat(value, path)
    if parsed.tzinfo is not None:
        try:
            parsed = parsed.astimezone(dt.timezone.utc).replace(tzinfo=None)
        except OverflowError:
            raise InvalidDateFormat(value, path) from None
    return parsed
