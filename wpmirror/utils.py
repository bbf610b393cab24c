"""Utility helpers for URL, filename and markup normalization."""

from __future__ import annotations

import html
import posixpath
import re
from urllib.parse import urljoin, urlparse

FILENAME_PATTERN = re.compile(r"[^\w\-_.]")
IMAGE_HREF_PATTERN = re.compile(r"\.(jpg|jpeg|png|gif)$", re.IGNORECASE)
SHARE_CLASS_PATTERN = re.compile(r"a2a|addtoany|sharedaddy")


def slug_from_url(url: str) -> str:
    """Derive a post slug from the URL path, without surrounding slashes."""
    return urlparse(url).path.strip("/")


def clean_filename(name: str) -> str:
    """Replace anything that is not a word character, dash or dot."""
    return FILENAME_PATTERN.sub("_", name) or "image.jpg"


def normalize_image_url(url: str, base_url: str) -> str:
    """Make an image URL absolute and force the https scheme."""
    if url.startswith("//"):
        url = "https:" + url
    elif not url.startswith("http"):
        url = urljoin(base_url, url)
    return url.replace("http://", "https://", 1)


def url_basename(url: str) -> str:
    """Last path segment of a URL, ignoring any query string."""
    return posixpath.basename(url.split("?")[0])


def image_filename(url: str) -> str:
    """Local filename an image URL is stored under."""
    return clean_filename(posixpath.basename(urlparse(url).path))


def class_string(tag) -> str:
    """Space-joined class attribute of a BeautifulSoup tag."""
    value = tag.get("class") or []
    if isinstance(value, str):
        return value
    return " ".join(value)


def is_image_href(href: str) -> bool:
    return bool(IMAGE_HREF_PATTERN.search(href or ""))


def escape_html(value: str) -> str:
    return html.escape(value or "", quote=True)


def join_url(base: str, path: str) -> str:
    base = base.rstrip("/")
    path = path.lstrip("/")
    if not path:
        return base
    return f"{base}/{path}"
