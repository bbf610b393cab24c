"""HTML extraction of posts, images and comments from WordPress pages."""

from __future__ import annotations

import logging
import re
from typing import List, Optional

from bs4 import BeautifulSoup, Tag

from .models import Comment, Post
from .utils import (
    SHARE_CLASS_PATTERN,
    class_string,
    is_image_href,
    normalize_image_url,
    slug_from_url,
)

logger = logging.getLogger("wpmirror")

POST_CLASS_PATTERN = re.compile(r"post-\d+")
ANONYMOUS_AUTHOR = "Anonyme"


def _text_or_empty(tag: Optional[Tag]) -> str:
    return tag.get_text().strip() if tag is not None else ""


def _find_post_container(soup: BeautifulSoup) -> Optional[Tag]:
    """Locate the post body: a ``post-NNN`` div first, then any article."""
    container = soup.find("div", class_=POST_CLASS_PATTERN)
    if container is None:
        container = soup.find("article")
    return container


def _remove_clutter(content: Tag) -> None:
    for link in content.select("a.more-link"):
        link.decompose()
    for div in content.find_all("div"):
        if div.decomposed:
            continue
        if SHARE_CLASS_PATTERN.search(class_string(div)):
            div.decompose()


def _image_source(img: Tag, base_url: str) -> Optional[str]:
    """Pick the best URL for an image: linked original, srcset, then src."""
    src = img.get("src") or ""
    if not src:
        return None

    full_src: Optional[str] = None
    parent_link = img.find_parent("a")
    if parent_link is not None:
        href = parent_link.get("href") or ""
        if is_image_href(href):
            full_src = href

    if not full_src:
        srcset = img.get("srcset") or ""
        if srcset:
            first = srcset.split(",")[0].strip().split()
            if first:
                full_src = first[0]

    final_src = full_src or src
    if not final_src.startswith("http"):
        final_src = normalize_image_url(final_src, base_url)
    return final_src


def _collect_images(content: Tag, base_url: str) -> List[str]:
    images: List[str] = []
    for img in content.find_all("img"):
        source = _image_source(img, base_url)
        if source:
            images.append(source)
    return images


def _collect_list_comments(soup: BeautifulSoup) -> List[Comment]:
    comments: List[Comment] = []
    comment_list = soup.select_one("ol.commentlist")
    if comment_list is None:
        return comments
    # Replies live in nested lists; only direct children are top-level comments.
    for item in comment_list.find_all("li", class_="comment", recursive=False):
        author_tag = item.select_one("cite.fn") or item.select_one("span.fn")
        author = _text_or_empty(author_tag) or ANONYMOUS_AUTHOR
        body = item.select_one("div.comment-body") or item.select_one("p")
        if body is None:
            continue
        for meta in body.select("cite, div.comment-author, div.comment-meta"):
            if not meta.decomposed:
                meta.decompose()
        text = body.get_text().strip()
        if text:
            comments.append(Comment(author=author, text=text))
    return comments


def _collect_fallback_comments(soup: BeautifulSoup) -> List[Comment]:
    comments: List[Comment] = []
    container = soup.select_one("div#comments")
    if container is None:
        return comments
    for block in container.select("div.comment"):
        author_tag = block.select_one('[class*="comment-author"]')
        author = _text_or_empty(author_tag) or ANONYMOUS_AUTHOR
        text = _text_or_empty(block.select_one('[class*="comment-content"]'))
        if text:
            comments.append(Comment(author=author, text=text))
    return comments


def extract_post(url: str, html: str, base_url: str) -> Optional[Post]:
    """Extract a post from a fetched page, or ``None`` if no post body is found."""
    soup = BeautifulSoup(html, "html.parser")

    container = _find_post_container(soup)
    if container is None:
        logger.warning("Could not find post content in %s", url)
        return None

    title_tag = (
        container.select_one("h1.entry-title")
        or container.select_one("h2.entry-title")
        or soup.select_one("h1.entry-title")
        or soup.select_one("h2.entry-title")
    )
    date_tag = container.select_one("span.entry-date")

    content = container.select_one("div.entry-content") or container.select_one(
        "div.entry-summary"
    )
    content_html = ""
    images: List[str] = []
    if content is not None:
        _remove_clutter(content)
        images = _collect_images(content, base_url)
        content_html = content.decode()

    comments = _collect_list_comments(soup) or _collect_fallback_comments(soup)

    return Post(
        title=_text_or_empty(title_tag),
        date=_text_or_empty(date_tag),
        slug=slug_from_url(url),
        url=url,
        content_html=content_html,
        images=images,
        comments=comments,
    )
