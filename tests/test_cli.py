import asyncio
import json

import pytest

from inscraper.cli import build_parser, configure_common, main, run_spider
from inscraper.config import Config
from inscraper.http_client import HttpError
from inscraper.pipeline import JsonPipeline
from inscraper.spider import Request, Spider


class FakeClient:
    def __init__(self, pages, delay=0.0):
        self.pages = pages
        self.delay = delay
        self.in_flight = 0
        self.max_in_flight = 0
        self.fetched = []

    async def get_text(self, url):
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delay)
            self.fetched.append(url)
            if url not in self.pages:
                raise HttpError(f"HTTP client error: 404 for {url}")
            return self.pages[url][0]
        finally:
            self.in_flight -= 1

    async def aclose(self):
        return None


class PagedSpider(Spider):
    name = "paged"

    def __init__(self, config, pages, start, delay=0.0):
        super().__init__(config, http_client=FakeClient(pages, delay))
        self.pages = pages
        self.start = start

    async def start_requests(self):
        return [Request(url) for url in self.start]

    async def parse(self, response, request):
        links = self.pages[request.url][1]
        return [{"url": request.url, "body": response}], [Request(u) for u in links]


class RecordingPipeline:
    def __init__(self, fail_on=()):
        self.items = []
        self.fail_on = set(fail_on)

    async def process_item(self, spider_name, item):
        if item["url"] in self.fail_on:
            raise RuntimeError("cannot store")
        self.items.append((spider_name, item))


PAGES = {
    "a": ("A", ["b", "c"]),
    "b": ("B", ["d"]),
    "c": ("C", []),
    "d": ("D", []),
}


def test_configure_common_sets_shared_options():
    config = Config()
    result = configure_common(config, 4, "out", 10, 7)
    assert result is config
    assert (config.concurrent_requests, config.output_dir) == (4, "out")
    assert (config.request_timeout, config.max_retries) == (10, 7)
    assert config.bot_name == "linkedin"


def test_parser_company_defaults():
    args = build_parser().parse_args(["company-profile", "--urls", "x", "--urls", "y"])
    assert args.command == "company-profile"
    assert args.urls == ["x", "y"]
    assert (args.concurrent, args.output, args.timeout, args.retries) == (1, "data", 30, 3)


def test_parser_jobs_options():
    args = build_parser().parse_args(
        ["jobs", "--keywords", "rust", "--location", "Berlin", "-c", "3", "-o", "dir"]
    )
    assert (args.keywords, args.location) == ("rust", "Berlin")
    assert (args.concurrent, args.output) == (3, "dir")


def test_parser_people_profiles_default_empty():
    args = build_parser().parse_args(["people-profile", "--timeout", "5", "--retries", "0"])
    assert args.profiles == []
    assert (args.timeout, args.retries) == (5, 0)


def test_parser_requires_command():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_parser_jobs_requires_keywords():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["jobs", "--location", "Berlin"])


@pytest.mark.asyncio
async def test_run_spider_follows_all_requests():
    spider = PagedSpider(Config(), PAGES, ["a"])
    pipeline = RecordingPipeline()
    await run_spider(spider, pipeline)
    assert sorted(item["url"] for _, item in pipeline.items) == ["a", "b", "c", "d"]
    assert {name for name, _ in pipeline.items} == {"paged"}
    assert sorted(spider.http_client.fetched) == ["a", "b", "c", "d"]


@pytest.mark.asyncio
async def test_run_spider_continues_after_spider_error():
    spider = PagedSpider(Config(), PAGES, ["missing", "c"])
    pipeline = RecordingPipeline()
    await run_spider(spider, pipeline)
    assert [item["url"] for _, item in pipeline.items] == ["c"]
    assert sorted(spider.http_client.fetched) == ["c", "missing"]


@pytest.mark.asyncio
async def test_run_spider_continues_after_pipeline_error():
    spider = PagedSpider(Config(), PAGES, ["a"])
    pipeline = RecordingPipeline(fail_on={"a"})
    await run_spider(spider, pipeline)
    assert sorted(item["url"] for _, item in pipeline.items) == ["b", "c", "d"]


@pytest.mark.asyncio
async def test_run_spider_respects_concurrency_limit():
    pages = {str(n): (str(n), []) for n in range(6)}
    config = configure_common(Config(), 2, "data", 30, 3)
    spider = PagedSpider(config, pages, list(pages), delay=0.01)
    pipeline = RecordingPipeline()
    await run_spider(spider, pipeline)
    assert len(pipeline.items) == 6
    assert spider.http_client.max_in_flight <= 2


@pytest.mark.asyncio
async def test_run_spider_rejects_zero_concurrency():
    config = configure_common(Config(), 0, "data", 30, 3)
    spider = PagedSpider(config, PAGES, ["a"])
    with pytest.raises(ValueError):
        await run_spider(spider, RecordingPipeline())


@pytest.mark.asyncio
async def test_run_spider_writes_json_lines(tmp_path):
    config = configure_common(Config(), 1, str(tmp_path), 30, 3)
    spider = PagedSpider(config, PAGES, ["b"])
    with JsonPipeline(config) as pipeline:
        await run_spider(spider, pipeline)
    files = list(tmp_path.glob("paged_*.jsonl"))
    assert len(files) == 1
    records = [json.loads(line) for line in files[0].read_text().splitlines()]
    assert sorted(record["url"] for record in records) == ["b", "d"]
    assert {record["body"] for record in records} == {"B", "D"}


def test_main_with_no_profiles_writes_nothing(tmp_path):
    out = tmp_path / "out"
    assert main(["people-profile", "-o", str(out)]) == 0
    assert list(out.glob("*.jsonl")) == [] if out.exists() else not out.exists()


def test_main_with_no_company_urls_returns_zero(tmp_path):
    out = tmp_path / "company"
    assert main(["company-profile", "--output", str(out)]) == 0
    assert not out.exists()


def test_main_rejects_unknown_command():
    with pytest.raises(SystemExit):
        main(["unknown"])