import re

import pytest

from wpmirror.cleaning import clean_content_html, find_local_image


@pytest.fixture
def images_dir(tmp_path):
    path = tmp_path / "images"
    path.mkdir()
    (path / "vieux_20chat-150x150.jpg").write_bytes(b"jpg")
    return path


IMAGE_MAP = {
    "https://example.com/up/photo.jpg": "photo.jpg",
    "https://example.com/up/chat.jpg": "chat.jpg",
}


class TestFindLocalImage:
    def test_exact_match_after_https_normalization(self):
        assert find_local_image("http://example.com/up/photo.jpg", IMAGE_MAP) == "photo.jpg"

    def test_size_suffix_stripped(self):
        url = "https://example.com/up/photo-300x200.jpg"
        assert find_local_image(url, IMAGE_MAP) == "photo.jpg"

    def test_basename_match_ignores_host_and_query(self):
        url = "https://cdn.example.net/other/chat.jpg?resize=300"
        assert find_local_image(url, IMAGE_MAP) == "chat.jpg"

    def test_existing_file_in_images_dir(self, images_dir):
        url = "https://example.com/up/vieux%20chat-150x150.jpg"
        assert find_local_image(url, IMAGE_MAP, images_dir) == "vieux_20chat-150x150.jpg"
        assert find_local_image(url, IMAGE_MAP) is None

    def test_unresolvable(self, images_dir):
        assert find_local_image("https://example.com/up/gone.jpg", IMAGE_MAP, images_dir) is None


def test_size_suffixed_variant_resolves_to_unsuffixed_file():
    html = (
        '<div class="entry-content"><p><img src="https://example.com/up/photo-300x200.jpg"'
        ' class="wp-image-1" width="300" height="200" srcset="x 300w"'
        ' sizes="(max-width: 300px) 100vw"></p></div>'
    )

    assert clean_content_html(html, IMAGE_MAP) == '<p><img src="/images/photo.jpg"/></p>'


def test_unresolvable_image_removes_whole_figure(images_dir):
    html = (
        '<div class="entry-content"><p>Avant</p>'
        '<figure class="wp-block-image"><a href="https://example.com/up/x.jpg">'
        '<img src="https://example.com/up/gone.jpg"></a>'
        "<figcaption>Légende</figcaption></figure><p>Après</p></div>"
    )

    assert clean_content_html(html, IMAGE_MAP, images_dir) == "<p>Avant</p><p>Après</p>"


def test_unresolvable_image_removes_enclosing_link():
    html = '<p>Texte <a href="/ailleurs/"><img src="https://example.com/gone.jpg"></a></p>'

    cleaned = clean_content_html(html, IMAGE_MAP)

    assert "<a" not in cleaned
    assert "<img" not in cleaned
    assert "Texte" in cleaned


def test_unresolvable_bare_image_removed():
    html = "<p>Texte <img src='https://example.com/gone.jpg'> suite</p>"

    assert clean_content_html(html, IMAGE_MAP) == "<p>Texte  suite</p>"


def test_image_link_is_unwrapped():
    html = (
        '<p><a href="https://example.com/up/chat.jpg">'
        '<img src="https://example.com/up/chat-300x200.jpg" class="size-medium"></a></p>'
    )

    assert clean_content_html(html, IMAGE_MAP) == '<p><img src="/images/chat.jpg"/></p>'


def test_link_to_page_is_kept():
    html = '<p><a href="https://example.com/autre/"><img src="https://example.com/up/chat.jpg"></a></p>'

    assert (
        clean_content_html(html, IMAGE_MAP)
        == '<p><a href="https://example.com/autre/"><img src="/images/chat.jpg"/></a></p>'
    )


def test_share_widgets_read_more_and_empty_blocks_removed():
    html = (
        '<div class="entry-content"><p>Bonjour</p><p> </p><div></div>'
        '<span class="sharedaddy sd-sharing">x</span>'
        '<div class="a2a_kit"><a>y</a></div>'
        '<div class="addtoany_share_save_container">z</div>'
        '<p><a class="more-link" href="#">Continuer la lecture →</a></p></div>'
    )

    assert clean_content_html(html, IMAGE_MAP) == "<p>Bonjour</p>"


def test_empty_figcaption_removed():
    html = '<figure><img src="https://example.com/up/photo.jpg"><figcaption>  </figcaption></figure>'

    assert clean_content_html(html, IMAGE_MAP) == '<figure><img src="/images/photo.jpg"/></figure>'


def test_non_empty_figcaption_kept():
    html = '<figure><img src="https://example.com/up/photo.jpg"><figcaption>Le chat</figcaption></figure>'

    assert "<figcaption>Le chat</figcaption>" in clean_content_html(html, IMAGE_MAP)


def test_only_wrapper_contents_are_emitted():
    html = '<div class="post-1"><h2>Titre</h2><div class="entry-content"><p>Corps</p></div></div>'

    assert clean_content_html(html, IMAGE_MAP) == "<p>Corps</p>"


def test_blank_lines_collapsed():
    assert clean_content_html("<p>a\n\n\n\nb</p>", {}) == "<p>a\n\nb</p>"


def test_empty_input():
    assert clean_content_html("", IMAGE_MAP) == ""


RICH_FRAGMENT = (
    '<div class="entry-content"><p>Intro</p>'
    '<p style="text-align: center;"><a href="https://example.com/up/gone.jpg">'
    '<img src="https://example.com/up/gone-300x300.jpg"></a></p>'
    '<figure class="wp-caption"><a href="https://example.com/up/photo.jpg">'
    '<img class="aligncenter" src="https://example.com/up/photo-300x200.jpg" width="300" height="200"></a>'
    "<figcaption> </figcaption></figure>"
    '<p><img src="http://cdn.example.com/up/chat.jpg?w=300"> Miaou</p>'
    '<p><img src="https://example.com/up/vieux%20chat-150x150.jpg"></p>'
    "\n\n\n\n<p>Fin</p></div>"
)


def test_cleaning_is_idempotent(images_dir):
    once = clean_content_html(RICH_FRAGMENT, IMAGE_MAP, images_dir)
    twice = clean_content_html(once, IMAGE_MAP, images_dir)

    assert twice == once
    assert "gone" not in once
    assert "text-align" not in once
    assert "<figcaption" not in once


def test_remaining_images_point_at_known_local_files(images_dir):
    cleaned = clean_content_html(RICH_FRAGMENT, IMAGE_MAP, images_dir)

    sources = re.findall(r'<img src="([^"]+)"', cleaned)
    assert sources == [
        "/images/photo.jpg",
        "/images/chat.jpg",
        "/images/vieux_20chat-150x150.jpg",
    ]
    known = set(IMAGE_MAP.values()) | {p.name for p in images_dir.iterdir()}
    for src in sources:
        assert src[len("/images/"):] in known


def test_cleaning_is_deterministic(images_dir):
    first = clean_content_html(RICH_FRAGMENT, IMAGE_MAP, images_dir)
    assert all(
        clean_content_html(RICH_FRAGMENT, IMAGE_MAP, images_dir) == first for _ in range(3)
    )
