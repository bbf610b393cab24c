"""Configuration objects and constants for crawling and site generation."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet

logger = logging.getLogger("wpmirror")

DEFAULT_BASE_URL = "https://lespetitsvendredis.com"
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) LespetitsvendredisCrawler/1.0"
)
DEFAULT_SKIP_SLUGS = frozenset(
    {"products", "activites-du-site", "membres", "page-d-exemple"}
)
AUTHOR_AVATAR_PATH = "/wp-content/themes/vintagecustom/images/sylvie.jpg"


@dataclass
class SiteConfig:
    """Top-level settings shared by the crawler, the generator and the preview server."""

    base_url: str = DEFAULT_BASE_URL
    output_dir: Path = Path("docs")
    data_file: Path = Path("posts_data.json")
    attachment_slugs_file: Path = Path("attachment_slugs.json")
    user_agent: str = DEFAULT_USER_AGENT
    skip_slugs: FrozenSet[str] = field(default_factory=lambda: DEFAULT_SKIP_SLUGS)
    request_delay: float = 0.5
    request_timeout: float = 30.0
    site_name: str = "Les petits vendredis"
    site_description: str = (
        "Les petites histoires farfelues du vendredi de Sylvie Lafleur"
    )
    home_description: str = (
        "Voici les petites histoires farfelues du vendredi de Sylvie Lafleur"
    )
    home_tagline: str = (
        "Voici mes petites histoires du vendredi, plus farfelues les unes que les autres"
    )
    author_name: str = "Sylvie Lafleur"
    author_bio: str = (
        "Femme ordinaire, mère qui s'est bien tirée d'affaire, folle à temps "
        "partiel ayant un esprit très frivole et des idées plus farfelues les "
        "unes que les autres."
    )
    cname: str = "lespetitsvendredis.com"
    preview_port: int = 3000

    @property
    def images_dir(self) -> Path:
        return self.output_dir / "images"

    @property
    def author_avatar_url(self) -> str:
        return self.base_url.rstrip("/") + AUTHOR_AVATAR_PATH

    @property
    def public_url(self) -> str:
        return f"https://{self.cname}"


def load_attachment_slugs(path: Path) -> FrozenSet[str]:
    """Read the list of WordPress attachment slugs excluded from generation."""
    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
    except FileNotFoundError:
        logger.warning("Attachment slug list %s not found; nothing excluded", path)
        return frozenset()
    except (OSError, ValueError) as exc:
        logger.warning("Could not read attachment slugs from %s: %s", path, exc)
        return frozenset()
    if not isinstance(raw, list):
        logger.warning("Attachment slug list %s is not a JSON array; ignored", path)
        return frozenset()
    return frozenset(str(slug) for slug in raw)
