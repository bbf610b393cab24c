from __future__ import annotations

from typing import Dict, List, Optional, Union

import pytest
import requests

from wpmirror.config import SiteConfig

JPEG_BYTES = b"\xff\xd8\xff\xe0" + b"\x00" * 64


class FakeResponse:
    def __init__(
        self,
        body: Union[str, bytes] = "",
        status_code: int = 200,
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        self.status_code = status_code
        self.headers = headers or {}
        if isinstance(body, bytes):
            self.content = body
            self.text = body.decode("latin-1")
        else:
            self.text = body
            self.content = body.encode("utf-8")

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")


class FakeSession:
    """Stands in for ``requests.Session``; unknown URLs raise a connection error."""

    def __init__(self, routes: Optional[Dict[str, FakeResponse]] = None) -> None:
        self.routes = dict(routes or {})
        self.requested: List[str] = []

    def get(self, url: str, timeout: float = None) -> FakeResponse:
        self.requested.append(url)
        if url not in self.routes:
            raise requests.ConnectionError(f"no route to {url}")
        return self.routes[url]


POST_PAGE = """<!DOCTYPE html>
<html><body>
<div id="content">
  <div id="post-42" class="post-42 post type-post hentry">
    <h2 class="entry-title"><a href="/le-chat/">Le chat</a></h2>
    <div class="entry-meta"><span class="entry-date">5 mars 2020</span></div>
    <div class="entry-content">
      <p>Il était une fois un chat.</p>
      <p><a href="http://example.com/wp-content/uploads/chat.jpg"><img class="size-medium" src="http://example.com/wp-content/uploads/chat-300x200.jpg" width="300" height="200"></a></p>
      <p><img src="/wp-content/uploads/souris.png" srcset="/wp-content/uploads/souris-1024x768.png 1024w, /wp-content/uploads/souris-300x200.png 300w"></p>
      <p><img src="https://example.com/wp-content/uploads/oiseau.gif"></p>
      <div class="addtoany_share_save_container"><a href="#">Partager</a></div>
      <p><a href="/le-chat/#more-42" class="more-link">Continuer la lecture →</a></p>
    </div>
  </div>
  <div id="comments">
    <ol class="commentlist">
      <li class="comment" id="comment-1">
        <div class="comment-author vcard"><cite class="fn">Marie</cite></div>
        <div class="comment-meta">12 mars 2020</div>
        <p>Quelle belle histoire!</p>
        <ul class="children">
          <li class="comment" id="comment-2"><cite class="fn">Sylvie</cite><p>Merci!</p></li>
        </ul>
      </li>
      <li class="comment" id="comment-3">
        <p>   </p>
      </li>
      <li class="comment" id="comment-4">
        <div class="comment-body"><div class="comment-author">Paul</div>Super</div>
      </li>
    </ol>
  </div>
</div>
</body></html>
"""


@pytest.fixture
def config(tmp_path) -> SiteConfig:
    return SiteConfig(
        base_url="https://example.com",
        output_dir=tmp_path / "docs",
        data_file=tmp_path / "posts_data.json",
        attachment_slugs_file=tmp_path / "attachment_slugs.json",
        request_delay=0,
        cname="example.com",
    )
