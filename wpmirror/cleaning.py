"""Normalization of crawled WordPress post markup for the static site."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Dict, Optional

from bs4 import BeautifulSoup, Tag

from .utils import (
    SHARE_CLASS_PATTERN,
    class_string,
    clean_filename,
    is_image_href,
    url_basename,
)

SIZE_SUFFIX_PATTERN = re.compile(r"-\d+x\d+(\.\w+)$")
WP_IMAGE_ATTRIBUTES = ("srcset", "sizes", "class", "width", "height")
IMAGES_URL_PREFIX = "/images/"

_CLEANUP_PATTERNS = (
    (re.compile(r"<p>\s*<br\s*/?>\s*</p>"), ""),
    (re.compile(r"<p>\s*</p>"), ""),
    (re.compile(r"<div>\s*<br\s*/?>\s*</div>"), ""),
    (re.compile(r"<div>\s*</div>"), ""),
    (re.compile(r"\n{3,}"), "\n\n"),
)


def find_local_image(
    url: str,
    image_map: Dict[str, str],
    images_dir: Optional[Path] = None,
) -> Optional[str]:
    """Resolve an image URL to a local filename, or ``None``.

    Tried in order: exact (https-normalized) key, key without the WordPress
    ``-WxH`` size suffix, any key with the same basename, and finally a file
    with the sanitized basename already present in ``images_dir``.
    """
    normalized = url.replace("http://", "https://", 1)
    if image_map.get(normalized):
        return image_map[normalized]

    unsized = SIZE_SUFFIX_PATTERN.sub(r"\1", normalized)
    if image_map.get(unsized):
        return image_map[unsized]

    filename = url_basename(url)
    for key, value in image_map.items():
        if value and url_basename(key) == filename:
            return value

    if images_dir is not None:
        candidate = clean_filename(filename)
        if (Path(images_dir) / candidate).is_file():
            return candidate
    return None


def _prune_empty_blocks(root: Tag) -> None:
    for el in root.find_all(["p", "div"]):
        if el.decomposed:
            continue
        if not el.get_text().strip() and el.find("img") is None:
            el.decompose()


def _remove_unresolved_image(img: Tag) -> None:
    container = img.find_parent("figure") or img.find_parent("a") or img
    container.decompose()


def _rewrite_image(img: Tag, filename: str) -> None:
    img["src"] = IMAGES_URL_PREFIX + filename
    for attr in WP_IMAGE_ATTRIBUTES:
        if attr in img.attrs:
            del img[attr]
    parent_link = img.find_parent("a")
    if parent_link is not None and is_image_href(parent_link.get("href") or ""):
        img.extract()
        parent_link.replace_with(img)


def clean_content_html(
    html: str,
    image_map: Dict[str, str],
    images_dir: Optional[Path] = None,
) -> str:
    """Strip WordPress cruft from a post body and point images at local files."""
    if not html:
        return ""

    soup = BeautifulSoup(html, "html.parser")
    root: Tag = soup
    wrapper = soup.select_one("div.entry-content")
    if wrapper is not None:
        # Work on the wrapper alone so nothing around it leaks into the output.
        soup = BeautifulSoup(wrapper.decode(), "html.parser")
        root = soup.select_one("div.entry-content")

    for el in root.find_all(["div", "span"]):
        if not el.decomposed and SHARE_CLASS_PATTERN.search(class_string(el)):
            el.decompose()

    for link in root.select("a.more-link"):
        if not link.decomposed:
            link.decompose()

    _prune_empty_blocks(root)

    for img in root.find_all("img"):
        if img.decomposed:
            continue
        src = img.get("src") or ""
        if not src:
            continue
        filename = find_local_image(src, image_map, images_dir)
        if filename is None:
            _remove_unresolved_image(img)
            continue
        _rewrite_image(img, filename)

    # Blocks that only held an unresolvable image are empty now.
    _prune_empty_blocks(root)

    for figure in root.find_all("figure"):
        if figure.decomposed:
            continue
        caption = figure.find("figcaption")
        if caption is not None and not caption.get_text().strip():
            caption.decompose()

    inner_html = root.decode_contents() if wrapper is not None else soup.decode()
    for pattern, replacement in _CLEANUP_PATTERNS:
        inner_html = pattern.sub(replacement, inner_html)
    return inner_html.strip()
