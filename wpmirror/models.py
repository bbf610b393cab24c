"""Data models shared by the crawler and the site generator."""

from __future__ import annotations

import datetime as dt
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional


@dataclass
class Comment:
    """A top-level reader comment attached to a post."""

    author: str
    text: str

    def to_dict(self) -> Dict[str, str]:
        return {"author": self.author, "text": self.text}


@dataclass
class Post:
    """A single blog post as extracted from the source site."""

    title: str
    date: str
    slug: str
    url: str
    content_html: str
    images: List[str] = field(default_factory=list)
    comments: List[Comment] = field(default_factory=list)
    local_images: Optional[List[Optional[str]]] = None
    # Filled in by the generator only, never serialised.
    parsed_date: Optional[dt.date] = None
    parsed_date_str: Optional[str] = None

    @property
    def display_date(self) -> str:
        if self.parsed_date_str is not None:
            return self.parsed_date_str
        return self.date

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "title": self.title,
            "date": self.date,
            "slug": self.slug,
            "url": self.url,
            "content_html": self.content_html,
            "images": list(self.images),
            "comments": [comment.to_dict() for comment in self.comments],
        }
        if self.local_images is not None:
            data["local_images"] = list(self.local_images)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Post":
        comments = [
            Comment(author=item.get("author") or "Anonyme", text=item.get("text", ""))
            for item in data.get("comments") or []
        ]
        return cls(
            title=data.get("title", ""),
            date=data.get("date", ""),
            slug=data.get("slug", ""),
            url=data.get("url", ""),
            content_html=data.get("content_html", ""),
            images=list(data.get("images") or []),
            comments=comments,
            local_images=data.get("local_images"),
        )


@dataclass
class Dataset:
    """Crawl output: the posts plus the remote-URL to local-filename image map."""

    posts: List[Post] = field(default_factory=list)
    image_map: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "posts": [post.to_dict() for post in self.posts],
            "image_map": dict(self.image_map),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Dataset":
        return cls(
            posts=[Post.from_dict(item) for item in data.get("posts") or []],
            image_map=dict(data.get("image_map") or {}),
        )


def load_dataset(path: Path) -> Dataset:
    """Read a dataset JSON file. Errors propagate to the caller."""
    with Path(path).open("r", encoding="utf-8") as handle:
        return Dataset.from_dict(json.load(handle))


def save_dataset(dataset: Dataset, path: Path) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(dataset.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8"
    )
