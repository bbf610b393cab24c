import json

from wpmirror import cli
from wpmirror.crawler import CrawlResult
from wpmirror.models import Dataset


def test_generate_command_writes_site(tmp_path):
    data = tmp_path / "posts_data.json"
    data.write_text(
        json.dumps(
            {
                "posts": [
                    {
                        "title": "Le chat",
                        "date": "5 mars 2020",
                        "slug": "le-chat",
                        "url": "https://example.com/le-chat/",
                        "content_html": "<p>Miaou</p>",
                        "images": [],
                        "comments": [],
                    }
                ],
                "image_map": {},
            }
        ),
        encoding="utf-8",
    )
    output = tmp_path / "docs"

    code = cli.main(
        [
            "generate",
            "--data",
            str(data),
            "--output",
            str(output),
            "--attachments",
            str(tmp_path / "none.json"),
        ]
    )

    assert code == 0
    assert (output / "le-chat" / "index.html").exists()
    assert (output / "index.html").exists()


def test_generate_command_fails_on_missing_dataset(tmp_path):
    code = cli.main(
        ["generate", "--data", str(tmp_path / "absent.json"), "--output", str(tmp_path / "docs")]
    )

    assert code == 1


def test_crawl_command_wires_config(tmp_path, monkeypatch):
    seen = {}

    def fake_run_crawler(config):
        seen["config"] = config
        return CrawlResult(dataset=Dataset(), candidate_urls=[], failed_urls=[])

    monkeypatch.setattr(cli, "run_crawler", fake_run_crawler)

    code = cli.main(
        [
            "crawl",
            "--base-url",
            "https://blog.example.org",
            "--delay",
            "0",
            "--output",
            str(tmp_path / "docs"),
            "--data",
            str(tmp_path / "data.json"),
        ]
    )

    assert code == 0
    config = seen["config"]
    assert config.base_url == "https://blog.example.org"
    assert config.request_delay == 0
    assert config.images_dir == tmp_path / "docs" / "images"
    assert config.author_avatar_url.startswith("https://blog.example.org/wp-content/")
