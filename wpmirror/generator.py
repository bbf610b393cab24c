"""Render a crawled dataset into the static site directory."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import AbstractSet, List

from .config import SiteConfig
from .dates import format_french_date, parse_french_date
from .models import Dataset, Post
from .render import (
    render_homepage,
    render_not_found,
    render_post_page,
    render_robots,
    render_sitemap,
)
from .theme import CSS

logger = logging.getLogger("wpmirror")


@dataclass
class GenerationResult:
    """Files written by a generation run."""

    posts: List[Post]
    written: List[Path] = field(default_factory=list)

    @property
    def page_count(self) -> int:
        # homepage + posts + 404
        return len(self.posts) + 2


def filter_posts(posts: List[Post], attachment_slugs: AbstractSet[str]) -> List[Post]:
    """Drop media-attachment pages that were crawled as if they were posts."""
    return [post for post in posts if post.slug not in attachment_slugs]


def annotate_dates(posts: List[Post]) -> None:
    for post in posts:
        parsed = parse_french_date(post.date)
        post.parsed_date = parsed
        post.parsed_date_str = format_french_date(parsed) if parsed else post.date


def sort_posts(posts: List[Post]) -> List[Post]:
    """Newest first; undated posts sink to the end, keeping their relative order."""
    return sorted(
        posts,
        key=lambda post: post.parsed_date.toordinal() if post.parsed_date else 0,
        reverse=True,
    )


def _write(path: Path, text: str, result: GenerationResult) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    result.written.append(path)


def generate_site(
    dataset: Dataset,
    config: SiteConfig,
    attachment_slugs: AbstractSet[str] = frozenset(),
) -> GenerationResult:
    """Write every page and static file of the site into ``config.output_dir``."""
    output_dir = config.output_dir
    output_dir.mkdir(parents=True, exist_ok=True)

    posts = filter_posts(dataset.posts, attachment_slugs)
    logger.info(
        "Processing %d blog posts (filtered from %d total)",
        len(posts),
        len(dataset.posts),
    )
    annotate_dates(posts)
    posts = sort_posts(posts)
    result = GenerationResult(posts=posts)

    css_path = output_dir / "style.css"
    _write(css_path, CSS, result)
    logger.info("Generated: %s", css_path)

    for index, post in enumerate(posts):
        prev_post = posts[index + 1] if index + 1 < len(posts) else None
        next_post = posts[index - 1] if index > 0 else None
        html = render_post_page(
            config, post, prev_post, next_post, dataset.image_map, config.images_dir
        )
        _write(output_dir / post.slug / "index.html", html, result)
        logger.info("  [%d/%d] Generated: /%s/", index + 1, len(posts), post.slug)

    homepage_path = output_dir / "index.html"
    _write(homepage_path, render_homepage(config, posts), result)
    logger.info("Generated: %s", homepage_path)

    cname_path = output_dir / "CNAME"
    _write(cname_path, f"{config.cname}\n", result)
    logger.info("Generated: %s", cname_path)

    nojekyll_path = output_dir / ".nojekyll"
    _write(nojekyll_path, "", result)
    logger.info("Generated: %s", nojekyll_path)

    not_found_path = output_dir / "404.html"
    _write(not_found_path, render_not_found(config), result)
    logger.info("Generated: %s", not_found_path)

    sitemap_path = output_dir / "sitemap.xml"
    _write(sitemap_path, render_sitemap(config, posts), result)
    logger.info("Generated: %s", sitemap_path)

    robots_path = output_dir / "robots.txt"
    if robots_path.exists():
        logger.info("Skipped: %s (already exists, managed manually)", robots_path)
    else:
        _write(robots_path, render_robots(config), result)
        logger.info("Generated: %s", robots_path)

    logger.info("=== Site generation complete ===")
    logger.info("Output directory: %s/", output_dir)
    logger.info(
        "Total pages: %d (homepage + %d posts + 404)", result.page_count, len(posts)
    )
    return result
