"""Sitemap-driven crawl of the WordPress site into a JSON dataset."""

from __future__ import annotations

import logging
import re
import time
from dataclasses import dataclass
from typing import AbstractSet, Callable, List, Optional
from urllib.parse import urlparse

import requests

from .config import SiteConfig
from .content import extract_post
from .images import download_images, resolve_local_images
from .models import Dataset, Post, save_dataset

logger = logging.getLogger("wpmirror")

LOC_PATTERN = re.compile(r"<loc>(.*?)</loc>")
ATTACHMENT_MARKER = "attachment_id"


@dataclass
class CrawlResult:
    """Outcome of a crawl run."""

    dataset: Dataset
    candidate_urls: List[str]
    failed_urls: List[str]


def build_session(config: SiteConfig) -> requests.Session:
    session = requests.Session()
    session.headers.update({"User-Agent": config.user_agent})
    return session


def fetch_text(session: requests.Session, url: str, timeout: float) -> str:
    resp = session.get(url, timeout=timeout)
    resp.raise_for_status()
    return resp.text


def extract_sitemap_urls(xml: str) -> List[str]:
    """Pull every ``<loc>`` value out of a flat sitemap."""
    return [match.strip() for match in LOC_PATTERN.findall(xml)]


def fetch_sitemap(session: requests.Session, config: SiteConfig) -> List[str]:
    logger.info("Fetching sitemap...")
    xml = fetch_text(
        session, config.base_url.rstrip("/") + "/sitemap.xml", config.request_timeout
    )
    return extract_sitemap_urls(xml)


def is_blog_post_url(url: str, skip_slugs: AbstractSet[str] = frozenset()) -> bool:
    """True for single-segment post URLs that are not known pages or attachments."""
    path = urlparse(url).path.strip("/")
    if not path:
        return False
    if path in skip_slugs:
        return False
    if len(path.split("/")) > 1:
        return False
    if ATTACHMENT_MARKER in url:
        return False
    return True


def crawl_post(
    session: requests.Session, url: str, config: SiteConfig
) -> Optional[Post]:
    """Fetch and extract a single post; network errors are logged, not raised."""
    logger.info("  Fetching: %s", url)
    try:
        html = fetch_text(session, url, config.request_timeout)
    except requests.RequestException as exc:
        logger.error("  Error fetching %s: %s", url, exc)
        return None
    return extract_post(url, html, config.base_url)


def log_post_summary(posts: List[Post]) -> None:
    logger.info("--- Post List ---")
    for post in sorted(posts, key=lambda p: p.date, reverse=True):
        logger.info(
            "  %-20s | %-50s | %d img | %d comments",
            post.date,
            post.title[:50],
            len(post.images),
            len(post.comments),
        )


def run_crawler(
    config: SiteConfig,
    session: Optional[requests.Session] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> CrawlResult:
    """Crawl every post listed in the sitemap, download images and save the dataset."""
    session = session or build_session(config)
    config.images_dir.mkdir(parents=True, exist_ok=True)

    all_urls = fetch_sitemap(session, config)
    logger.info("Found %d URLs in sitemap", len(all_urls))

    post_urls = [url for url in all_urls if is_blog_post_url(url, config.skip_slugs)]
    logger.info("Filtered to %d blog post URLs", len(post_urls))

    posts: List[Post] = []
    failed: List[str] = []
    for index, url in enumerate(post_urls, start=1):
        logger.info("[%d/%d] Processing %s", index, len(post_urls), url)
        post = crawl_post(session, url, config)
        if post is None:
            failed.append(url)
        else:
            posts.append(post)
        if config.request_delay:
            sleep(config.request_delay)

    logger.info("Successfully extracted %d posts", len(posts))

    logger.info("Downloading images...")
    image_urls = [image for post in posts for image in post.images]
    image_urls.append(config.author_avatar_url)
    image_map = download_images(
        session,
        image_urls,
        config.images_dir,
        config.base_url,
        config.request_timeout,
    )

    for post in posts:
        post.local_images = resolve_local_images(post, image_map)

    dataset = Dataset(posts=posts, image_map=image_map)
    save_dataset(dataset, config.data_file)

    logger.info("Data saved to %s", config.data_file)
    logger.info("Images saved to %s/", config.images_dir)
    logger.info("Total posts: %d", len(posts))
    logger.info("Total images downloaded: %d", len(image_map))
    log_post_summary(posts)

    return CrawlResult(dataset=dataset, candidate_urls=post_urls, failed_urls=failed)
