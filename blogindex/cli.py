from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import Optional, Sequence

from .config import load_config
from .context import DEFAULT_NEWEST, DEFAULT_PAGE_SIZE, SiteContext
from .errors import CollectionBuildError
from .utils import parse_bool, parse_int, write_json

DATA_FILE = "site-data.json"


def build_site(args: argparse.Namespace) -> SiteContext:
    site_root = Path(args.site_root)
    posts_dir = Path(args.posts)
    if not posts_dir.is_absolute():
        posts_dir = site_root / posts_dir
    output_dir = Path(args.output)
    if not output_dir.is_absolute():
        output_dir = site_root / output_dir

    if not posts_dir.exists():
        print(f"Posts directory not found: {posts_dir}", file=sys.stderr)
        sys.exit(1)

    try:
        context = SiteContext.build(posts_dir, base=site_root, page_size=args.posts_per_page)
    except CollectionBuildError as exc:
        print(f"Build failed: {exc}", file=sys.stderr)
        sys.exit(1)

    print(f"Indexed {len(context.posts)} posts, {len(context.tags)} tags, {len(context.pages)} pages.")
    data = context.to_data(base_url=args.base, newest=args.newest)
    data_file = output_dir / DATA_FILE
    write_json(data_file, data, pretty=parse_bool(args.pretty))
    print(f"Site data written to: {data_file}")
    return context


def main(argv: Optional[Sequence[str]] = None) -> None:
    pre_parser = argparse.ArgumentParser(add_help=False)
    pre_parser.add_argument(
        "--config",
        default="site.toml",
        help="Path to site config file (TOML/YAML/JSON).",
    )
    pre_args, _ = pre_parser.parse_known_args(argv)
    config = load_config(Path(pre_args.config))

    def cfg_value(key: str, default: object) -> object:
        value = config.get(key)
        return default if value is None else value

    def cfg_str(key: str, default: str) -> str:
        value = cfg_value(key, default)
        return default if value is None else str(value)

    def cfg_bool(key: str, default: bool) -> bool:
        value = cfg_value(key, default)
        return parse_bool(value) if value is not None else default

    def cfg_int(key: str, default: int) -> int:
        value = cfg_value(key, default)
        return parse_int(value, default)

    parser = argparse.ArgumentParser(description="Index a Markdown blog for static page generation.")
    parser.add_argument("--config", default=pre_args.config, help="Path to site config file (TOML/YAML/JSON).")
    parser.add_argument(
        "--site-root",
        default=cfg_str("site_root", "."),
        help="Root of the site; post paths are relative to it.",
    )
    parser.add_argument("--posts", default=cfg_str("posts", "posts"), help="Directory containing Markdown posts.")
    parser.add_argument("--output", default=cfg_str("output", "dist"), help="Output directory for the site data file.")
    parser.add_argument("--base", default=cfg_str("base", "/"), help="Base URL path the site is served under.")
    parser.add_argument(
        "--posts-per-page",
        default=cfg_int("posts_per_page", DEFAULT_PAGE_SIZE),
        type=int,
        help="Number of posts on each numbered listing page.",
    )
    parser.add_argument(
        "--newest",
        default=cfg_int("newest", DEFAULT_NEWEST),
        type=int,
        help="Number of posts in the newest-posts list.",
    )
    parser.add_argument(
        "--pretty",
        action=argparse.BooleanOptionalAction,
        default=cfg_bool("pretty", True),
        help="Indent the generated JSON.",
    )
    args = parser.parse_args(argv)
    start = time.perf_counter()
    build_site(args)
    elapsed = time.perf_counter() - start
    print(f"Build completed in {elapsed:.2f}s.")
