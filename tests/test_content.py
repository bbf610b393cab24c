from wpmirror.content import extract_post
from wpmirror.models import Comment

from .conftest import POST_PAGE

BASE = "https://example.com"


def test_extract_post_fields():
    post = extract_post("https://example.com/le-chat/", POST_PAGE, BASE)

    assert post is not None
    assert post.title == "Le chat"
    assert post.date == "5 mars 2020"
    assert post.slug == "le-chat"
    assert post.url == "https://example.com/le-chat/"


def test_extract_post_strips_clutter():
    post = extract_post("https://example.com/le-chat/", POST_PAGE, BASE)

    assert post.content_html.startswith('<div class="entry-content">')
    assert "more-link" not in post.content_html
    assert "addtoany" not in post.content_html
    assert "Il était une fois un chat." in post.content_html


def test_extract_post_image_priority():
    post = extract_post("https://example.com/le-chat/", POST_PAGE, BASE)

    assert post.images == [
        # linked full-size original wins over the thumbnail
        "http://example.com/wp-content/uploads/chat.jpg",
        # first srcset candidate, resolved against the base URL
        "https://example.com/wp-content/uploads/souris-1024x768.png",
        # plain src
        "https://example.com/wp-content/uploads/oiseau.gif",
    ]


def test_extract_post_top_level_comments_only():
    post = extract_post("https://example.com/le-chat/", POST_PAGE, BASE)

    assert post.comments == [
        Comment(author="Marie", text="Quelle belle histoire!"),
        Comment(author="Anonyme", text="Super"),
    ]


def test_extract_post_falls_back_to_article():
    html = """<html><body><article>
    <h1 class="entry-title">Titre</h1>
    <div class="entry-summary"><p>Résumé</p></div>
    </article></body></html>"""

    post = extract_post("https://example.com/titre/", html, BASE)

    assert post.title == "Titre"
    assert post.date == ""
    assert "Résumé" in post.content_html
    assert post.images == []
    assert post.comments == []


def test_extract_post_uses_page_title_outside_container():
    html = """<html><body><h1 class="entry-title">Dehors</h1>
    <div class="post-7"><div class="entry-content"><p>x</p></div></div>
    </body></html>"""

    post = extract_post("https://example.com/dehors/", html, BASE)

    assert post.title == "Dehors"


def test_extract_post_without_container_returns_none():
    html = "<html><body><div class='page'><p>Rien</p></div></body></html>"

    assert extract_post("https://example.com/rien/", html, BASE) is None


def test_extract_post_comment_fallback_container():
    html = """<html><body>
    <div class="post-9"><div class="entry-content"><p>x</p></div></div>
    <div id="comments">
      <div class="comment">
        <span class="comment-author-name">Jeanne</span>
        <div class="comment-content"><p>Bravo</p></div>
      </div>
      <div class="comment">
        <div class="comment-content">  </div>
      </div>
      <div class="comment">
        <div class="comment-content">Anonyme ici</div>
      </div>
    </div>
    </body></html>"""

    post = extract_post("https://example.com/x/", html, BASE)

    assert post.comments == [
        Comment(author="Jeanne", text="Bravo"),
        Comment(author="Anonyme", text="Anonyme ici"),
    ]
