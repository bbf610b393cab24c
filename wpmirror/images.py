"""Image downloading and validation utilities."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional

import requests
from filetype import guess

from .models import Post
from .utils import image_filename, normalize_image_url

logger = logging.getLogger("wpmirror")


def detect_image_format(data: bytes) -> Optional[str]:
    """Detect image type using filetype; returns lowercase extension."""
    kind = guess(data)
    if kind and kind.mime.startswith("image/"):
        ext = kind.extension.lower()
        if ext == "jpeg":
            return "jpg"
        return ext
    return None


def looks_like_image(content_type: Optional[str], data: bytes) -> bool:
    """True when the payload sniffs as an image or is served as one."""
    if detect_image_format(data):
        return True
    if not content_type:
        return False
    return content_type.split(";")[0].strip().lower().startswith("image/")


def download_image(
    session: requests.Session,
    image_url: str,
    images_dir: Path,
    base_url: str,
    timeout: float = 30.0,
) -> Optional[str]:
    """Fetch one image into ``images_dir`` and return its local filename.

    Files already on disk are not fetched again. Any failure is logged and
    reported as ``None`` so a crawl run is never aborted by a single image.
    """
    url = normalize_image_url(image_url, base_url)
    filename = image_filename(url)
    destination = images_dir / filename

    if destination.exists():
        return filename

    try:
        resp = session.get(url, timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as exc:
        logger.error("Error downloading %s: %s", url, exc)
        return None

    content_type = resp.headers.get("Content-Type", "")
    data = resp.content
    if not looks_like_image(content_type, data):
        logger.error(
            "Error downloading %s: not an image (Content-Type=%s)", url, content_type
        )
        return None

    try:
        destination.write_bytes(data)
    except OSError as exc:
        logger.error("Failed to write image %s: %s", destination, exc)
        return None
    logger.info("Downloaded: %s", filename)
    return filename


def download_images(
    session: requests.Session,
    image_urls: Iterable[str],
    images_dir: Path,
    base_url: str,
    timeout: float = 30.0,
) -> Dict[str, str]:
    """Download each distinct image in order; returns the remote-URL to filename map."""
    images_dir.mkdir(parents=True, exist_ok=True)
    image_map: Dict[str, str] = {}
    for image_url in dict.fromkeys(image_urls):
        filename = download_image(session, image_url, images_dir, base_url, timeout)
        if filename:
            image_map[image_url] = filename
    return image_map


def resolve_local_images(post: Post, image_map: Dict[str, str]) -> List[Optional[str]]:
    """Local filename (or ``None``) for each image referenced by a post."""
    resolved: List[Optional[str]] = []
    for image_url in post.images:
        normalized = image_url.replace("http://", "https://", 1)
        resolved.append(image_map.get(normalized) or image_map.get(image_url))
    return resolved
