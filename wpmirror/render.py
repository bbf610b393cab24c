"""HTML page, sitemap and robots.txt templates for the generated site."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Dict, List, Optional

from bs4 import BeautifulSoup

from .cleaning import IMAGES_URL_PREFIX, clean_content_html
from .config import SiteConfig
from .models import Post
from .utils import escape_html, image_filename, join_url

READ_MORE_TEXT = "Continuer la lecture →"
POST_EXCERPT_CHARS = 160
HOME_EXCERPT_CHARS = 180
LAST_WHITESPACE_PATTERN = re.compile(r"\s\S*\Z")


def get_excerpt(html: str, max_length: int = 200) -> str:
    """Plain-text excerpt cut at the last whitespace before ``max_length``."""
    text = BeautifulSoup(html or "", "html.parser").get_text()
    text = text.replace(READ_MORE_TEXT, "").strip()
    if len(text) > max_length:
        head = text[:max_length]
        match = LAST_WHITESPACE_PATTERN.search(head)
        if match and match.start() > 0:
            head = head[: match.start()].rstrip()
        text = head + "..."
    return text


def html_head(config: SiteConfig, title: str, description: str = "") -> str:
    desc = description or config.site_description
    return f"""<!DOCTYPE html>
<html lang="fr-FR">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>{escape_html(title)}</title>
<meta name="description" content="{escape_html(desc)}">
<meta property="og:title" content="{escape_html(title)}">
<meta property="og:type" content="article">
<meta property="og:site_name" content="{escape_html(config.site_name)}">
<meta name="robots" content="noai, noimageai">
<meta name="robots" content="max-snippet:-1, max-image-preview:large, max-video-preview:-1">
<link rel="preconnect" href="https://fonts.googleapis.com">
<link rel="preconnect" href="https://fonts.gstatic.com" crossorigin>
<link href="https://fonts.googleapis.com/css2?family=Playfair+Display:ital,wght@0,400;0,600;1,400&family=DM+Sans:wght@400;500&display=swap" rel="stylesheet">
<link rel="icon" href="/favicon.svg" type="image/svg+xml">
<link rel="stylesheet" href="/style.css">
</head>"""


def site_header(config: SiteConfig) -> str:
    return f"""<header class="site-header">
  <h1 class="site-title"><a href="/">{escape_html(config.site_name)}</a></h1>
  <nav class="site-nav">
    <a href="/">Accueil</a>
  </nav>
</header>"""


def site_footer(config: SiteConfig) -> str:
    return f"""<footer class="site-footer">
  <div class="footer-title">{escape_html(config.site_name)}</div>
  <p class="footer-tagline">{escape_html(config.site_description)}</p>
</footer>"""


def _avatar_src(config: SiteConfig) -> str:
    return IMAGES_URL_PREFIX + image_filename(config.author_avatar_url)


def _page(config: SiteConfig, head: str, main: str) -> str:
    return f"""{head}
<body>

{site_header(config)}

<main class="main-content">
{main}
</main>

{site_footer(config)}

</body>
</html>"""


def render_post_navigation(prev_post: Optional[Post], next_post: Optional[Post]) -> str:
    if prev_post is None and next_post is None:
        return ""
    lines = ['<nav class="post-navigation">']
    for post, direction, label in (
        (prev_post, "prev", "Précédent"),
        (next_post, "next", "Suivant"),
    ):
        if post is None:
            lines.append("    <div></div>")
            continue
        lines.append(f'    <a href="/{post.slug}/" class="nav-link {direction}">')
        lines.append(f'      <div class="nav-label">{label}</div>')
        lines.append(f'      <div class="nav-title">{escape_html(post.title)}</div>')
        lines.append("    </a>")
    lines.append("  </nav>")
    return "\n".join(lines)


def render_comments(post: Post) -> str:
    if not post.comments:
        return ""
    count = len(post.comments)
    label = "commentaire" if count == 1 else "commentaires"
    lines = [
        '<section class="comments-section">',
        f'    <h3 class="comments-title">{count} {label}</h3>',
    ]
    for comment in post.comments:
        lines.append('    <div class="comment">')
        lines.append(
            f'      <div class="comment-author">{escape_html(comment.author)}</div>'
        )
        lines.append(
            f'      <div class="comment-content">{escape_html(comment.text)}</div>'
        )
        lines.append("    </div>")
    lines.append("  </section>")
    return "\n".join(lines)


def render_post_page(
    config: SiteConfig,
    post: Post,
    prev_post: Optional[Post],
    next_post: Optional[Post],
    image_map: Dict[str, str],
    images_dir: Optional[Path] = None,
) -> str:
    """Full HTML document for one post, with older/newer navigation."""
    content = clean_content_html(post.content_html, image_map, images_dir)
    excerpt = get_excerpt(post.content_html, POST_EXCERPT_CHARS)
    head = html_head(config, f"{post.title} | {config.site_name}", excerpt)
    main = f"""  <article class="post">
    <header class="entry-header">
      <h1 class="entry-title">{escape_html(post.title)}</h1>
      <div class="entry-meta">{escape_html(post.display_date)}</div>
    </header>

    <div class="entry-content">
      {content}
    </div>
  </article>

  <div class="divider">&middot;&middot;&middot;</div>

  <section class="author-section">
    <img src="{_avatar_src(config)}" alt="{escape_html(config.author_name)}">
    <div class="author-info">
      <h4>{escape_html(config.author_name)}</h4>
      <p>{escape_html(config.author_bio)}</p>
    </div>
  </section>

  {render_post_navigation(prev_post, next_post)}

  {render_comments(post)}"""
    return _page(config, head, main)


def render_homepage(config: SiteConfig, posts: List[Post]) -> str:
    items = []
    for post in posts:
        excerpt = get_excerpt(post.content_html, HOME_EXCERPT_CHARS)
        items.append(
            f"""    <li class="post-list-item">
      <a href="/{post.slug}/">
        <div class="post-list-date">{escape_html(post.display_date)}</div>
        <h2 class="post-list-title">{escape_html(post.title)}</h2>
        <p class="post-list-excerpt">{escape_html(excerpt)}</p>
      </a>
    </li>
"""
        )
    head = html_head(config, config.site_name, config.home_description)
    main = f"""  <div class="page-header">
    <h1 class="home-title">{escape_html(config.site_name)}</h1>
    <p class="home-tagline">{escape_html(config.home_tagline)}</p>
    <div class="home-author">
      <img src="{_avatar_src(config)}" alt="{escape_html(config.author_name)}">
      <span>Par {escape_html(config.author_name)}</span>
    </div>
  </div>

  <ul class="post-list">
{"".join(items)}  </ul>"""
    return _page(config, head, main)


def render_not_found(config: SiteConfig) -> str:
    head = html_head(config, f"Page introuvable | {config.site_name}")
    main = """  <div class="page-header" style="margin-top: 60px;">
    <h1 class="home-title">Page introuvable</h1>
    <p class="home-tagline">Cette page n'existe pas ou a été déplacée.</p>
    <p style="margin-top: 30px;"><a href="/">Retour à l'accueil</a></p>
  </div>"""
    return _page(config, head, main)


def render_sitemap(config: SiteConfig, posts: List[Post]) -> str:
    """Sitemap with the homepage first, then one entry per post."""
    root = config.public_url
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">',
        "  <url>",
        f"    <loc>{root}/</loc>",
        "    <priority>1.0</priority>",
        "  </url>",
    ]
    for post in posts:
        lastmod = ""
        if post.parsed_date is not None:
            lastmod = f"\n    <lastmod>{post.parsed_date.isoformat()}</lastmod>"
        loc = escape_html(join_url(root, post.slug) + "/")
        lines.append("  <url>")
        lines.append(f"    <loc>{loc}</loc>{lastmod}")
        lines.append("  </url>")
    lines.append("</urlset>")
    return "\n".join(lines) + "\n"


def render_robots(config: SiteConfig) -> str:
    return f"User-agent: *\nAllow: /\n\nSitemap: {config.public_url}/sitemap.xml\n"
