"""Command-line entry point for crawling, generating and previewing the site."""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Sequence

from .config import DEFAULT_BASE_URL, SiteConfig, load_attachment_slugs
from .crawler import run_crawler
from .generator import generate_site
from .models import load_dataset
from .server import serve

logger = logging.getLogger("wpmirror.cli")


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--output",
        default="docs",
        type=Path,
        help="Directory holding the generated site and downloaded images",
    )
    parser.add_argument(
        "--data",
        default="posts_data.json",
        type=Path,
        help="JSON dataset written by the crawler and read by the generator",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Mirror a WordPress blog into a JSON dataset and a static site.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    crawl_parser = subparsers.add_parser(
        "crawl", help="Fetch every post from the sitemap and download images"
    )
    _add_common_arguments(crawl_parser)
    crawl_parser.add_argument(
        "--base-url",
        default=DEFAULT_BASE_URL,
        help="Root URL of the WordPress site to crawl",
    )
    crawl_parser.add_argument(
        "--delay",
        type=float,
        default=0.5,
        help="Seconds to sleep between page requests",
    )

    generate_parser = subparsers.add_parser(
        "generate", help="Render the dataset into static HTML"
    )
    _add_common_arguments(generate_parser)
    generate_parser.add_argument(
        "--attachments",
        default="attachment_slugs.json",
        type=Path,
        help="JSON list of attachment slugs to leave out of the site",
    )

    serve_parser = subparsers.add_parser("serve", help="Preview the generated site")
    _add_common_arguments(serve_parser)
    serve_parser.add_argument(
        "--port",
        type=int,
        default=3000,
        help="Port to listen on",
    )

    return parser.parse_args(argv)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )


def _run_crawl(args: argparse.Namespace) -> None:
    config = SiteConfig(
        base_url=args.base_url,
        output_dir=args.output,
        data_file=args.data,
        request_delay=args.delay,
    )
    overall_start = time.perf_counter()
    result = run_crawler(config)
    logger.info(
        "Crawl finished in %.2fs (%d/%d succeeded, %d failed)",
        time.perf_counter() - overall_start,
        len(result.dataset.posts),
        len(result.candidate_urls),
        len(result.failed_urls),
    )


def _run_generate(args: argparse.Namespace) -> None:
    config = SiteConfig(
        output_dir=args.output,
        data_file=args.data,
        attachment_slugs_file=args.attachments,
    )
    dataset = load_dataset(config.data_file)
    attachment_slugs = load_attachment_slugs(config.attachment_slugs_file)
    generate_site(dataset, config, attachment_slugs)


def _run_serve(args: argparse.Namespace) -> None:
    config = SiteConfig(output_dir=args.output, preview_port=args.port)
    serve(config.output_dir, config.preview_port)


COMMANDS = {
    "crawl": _run_crawl,
    "generate": _run_generate,
    "serve": _run_serve,
}


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    _configure_logging(args.verbose)
    try:
        COMMANDS[args.command](args)
    except Exception:  # pylint: disable=broad-except
        logger.exception("Fatal error")
        return 1
    return 0


def crawl_main() -> None:
    sys.exit(main(["crawl", *sys.argv[1:]]))


def generate_main() -> None:
    sys.exit(main(["generate", *sys.argv[1:]]))


if __name__ == "__main__":
    sys.exit(main())
