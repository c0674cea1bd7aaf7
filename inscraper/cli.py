"""Command line entry point that runs one of the spiders."""

from __future__ import annotations

import argparse
import asyncio
import logging
from typing import Any, Optional, Sequence

from .company import CompanyProfileSpider
from .config import Config
from .jobs import JobsSpider
from .people import PeopleProfileSpider
from .pipeline import JsonPipeline
from .spider import Request, Spider

logger = logging.getLogger(__name__)


def configure_common(
    config: Config, concurrent: int, output: str, timeout: int, retries: int
) -> Config:
    """Apply the options shared by every command to ``config`` and return it."""
    config.concurrent_requests = concurrent
    config.output_dir = output
    config.request_timeout = timeout
    config.max_retries = retries
    return config


async def run_spider(spider: Spider, pipeline: Any) -> None:
    """Crawl from the spider's start requests until no requests remain.

    Items go through ``pipeline.process_item``. Failures of a request or of
    the pipeline are logged and the crawl carries on.
    """
    logger.info("Starting spider: %s", spider.name)

    limit = spider.config.concurrent_requests
    if limit < 1:
        raise ValueError(f"concurrent requests must be at least 1, got {limit}")
    semaphore = asyncio.Semaphore(limit)

    async def work(request: Request) -> list[Request]:
        async with semaphore:
            try:
                items, next_requests = await spider.execute_request(request)
            except Exception as err:
                logger.error("Spider error: %s", err)
                return []
            for item in items:
                try:
                    await pipeline.process_item(spider.name, item)
                except Exception as err:
                    logger.error("Pipeline error: %s", err)
            return list(next_requests)

    queue = list(await spider.start_requests())
    pending: set[asyncio.Task[list[Request]]] = set()

    while queue or pending:
        while queue:
            pending.add(asyncio.create_task(work(queue.pop())))
        if pending:
            done, pending = await asyncio.wait(
                pending, return_when=asyncio.FIRST_COMPLETED
            )
            for task in done:
                if not task.cancelled() and task.exception() is None:
                    queue.extend(task.result())

    logger.info("Spider %s completed", spider.name)


def _add_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-c", "--concurrent", type=int, default=1)
    parser.add_argument("-o", "--output", default="data")
    parser.add_argument("--timeout", type=int, default=30)
    parser.add_argument("--retries", type=int, default=3)


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser with one sub-command per spider."""
    parser = argparse.ArgumentParser(
        prog="in-scraper", description="LinkedIn data scraper"
    )
    commands = parser.add_subparsers(dest="command", required=True)

    company = commands.add_parser("company-profile")
    company.add_argument("--urls", action="append", default=[])
    _add_common(company)

    jobs = commands.add_parser("jobs")
    jobs.add_argument("--keywords", required=True)
    jobs.add_argument("--location", required=True)
    _add_common(jobs)

    people = commands.add_parser("people-profile")
    people.add_argument("--profiles", action="append", default=[])
    _add_common(people)

    return parser


def _make_spider(args: argparse.Namespace, config: Config) -> Spider:
    if args.command == "company-profile":
        return CompanyProfileSpider(config, args.urls)
    if args.command == "jobs":
        return JobsSpider(config, args.keywords, args.location)
    return PeopleProfileSpider(config, args.profiles)


async def _crawl(spider: Spider, pipeline: JsonPipeline) -> None:
    try:
        await run_spider(spider, pipeline)
    finally:
        await spider.http_client.aclose()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse the command line, run the chosen spider and return 0."""
    logging.basicConfig(level=logging.INFO)
    args = build_parser().parse_args(argv)

    config = configure_common(
        Config.from_env(), args.concurrent, args.output, args.timeout, args.retries
    )
    with JsonPipeline(config) as pipeline:
        spider = _make_spider(args, config)
        asyncio.run(_crawl(spider, pipeline))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())