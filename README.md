# inscraper

An asynchronous scraper for public LinkedIn pages. It collects:

- **company profiles**: name, summary, industry, size and founding year;
- **job listings**: from the guest job search. Result pages are followed as
  long as a page still holds list entries, and a posting whose address was
  already seen on the same page is dropped;
- **people profiles**: name, headline, location, followers, connections,
  experience, education, projects, languages and recent activity.

Every item is written as one compact JSON object per line. Each spider gets
its own file in the output directory. The file is named after the spider and
the local time at which its first item arrived, for example
`linkedin_jobs_01_02_2025_14:30:00.jsonl`. The name holds colons, so the
output directory must be on a file system that allows them.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

The package installs the `in-scraper` command, which has three subcommands.

Company profiles, with one `--urls` option per page:

```
in-scraper company-profile --urls <company-page-url> --urls <another-company-page-url>
```

Job listings for a search. `--keywords` and `--location` are both required:

```
in-scraper jobs --keywords "python developer" --location "Berlin"
```

People profiles, given by their profile identifiers. Each one is fetched from
`https://linkedin.com/in/<identifier>/`:

```
in-scraper people-profile --profiles some-profile-id --profiles another-profile-id
```

Every subcommand takes these options:

| Option               | Default | Meaning                                       |
|----------------------|---------|-----------------------------------------------|
| `-c`, `--concurrent` | `1`     | number of requests in flight at once (at least 1) |
| `-o`, `--output`     | `data`  | directory the `.jsonl` files are written to   |
| `--timeout`          | `30`    | request timeout in seconds                    |
| `--retries`          | `3`     | retries after a failed request                |

Log messages go to standard error at level INFO.

## Retries

`HttpClient.get` retries a request that fails in transport, gets HTTP 429, or
gets a server error. The wait before retry *n* is *n* times the base delay.
The base delay comes from `RETRY_DELAY_MS`.

When the retries are used up, the outcome depends on the failure:

- a transport failure raises `HttpError`;
- a 429 is treated as a client error and raises `HttpError`;
- a server error response is returned as it is.

Any other client error raises `HttpError` at once. A request that fails in the
end is logged and skipped, and the crawl goes on.

## Environment

`Config.from_env()` reads these variables. The command-line options are then
applied over them, so `CONCURRENT_REQUESTS`, `REQUEST_TIMEOUT` and
`MAX_RETRIES` only take effect when the package is used as a library.

- `CONCURRENT_REQUESTS`
- `REQUEST_TIMEOUT` (seconds)
- `MAX_RETRIES`
- `RETRY_DELAY_MS` (base delay between retries, default 1000)
- `USER_AGENT`

A numeric variable is ignored unless it is a non-negative integer.

## Library use

```python
import asyncio

from inscraper.cli import configure_common, run_spider
from inscraper.config import Config
from inscraper.jobs import JobsSpider
from inscraper.pipeline import JsonPipeline

config = configure_common(Config.from_env(), 2, "out", 30, 3)

async def crawl() -> None:
    spider = JobsSpider(config, "data engineer", "Remote")
    try:
        await run_spider(spider, pipeline)
    finally:
        await spider.http_client.aclose()

with JsonPipeline(config) as pipeline:
    asyncio.run(crawl())
```

Spiders can also be driven by hand. `start_requests()` gives the first
`Request` objects. `parse(html, request)` turns a page into items and
follow-up requests without touching the network.

A spider makes its own `HttpClient` unless one is passed as `http_client`.
`HttpClient` accepts an `httpx` transport, for example `httpx.MockTransport`
in tests.

The modules are:

- `inscraper.config`: `Config`.
- `inscraper.items`: the item dataclasses (`CompanyProfile`, `JobListing`,
  `PersonProfile`, `Experience`, `Education`, `Project`, `Language`,
  `Activity`) and `item_to_dict`.
- `inscraper.css_selectors`: the selector constants and `parse_selector`,
  which raises `SelectorError` when nothing compiles.
- `inscraper.http_client`: `HttpClient` and `HttpError`.
- `inscraper.spider`: `Request` and the abstract `Spider`.
- `inscraper.company`, `inscraper.jobs`, `inscraper.people`: the three spiders.
- `inscraper.pipeline`: `JsonPipeline`.
- `inscraper.middleware`: `SpiderMiddleware` and `LinkedinSpiderMiddleware`.
- `inscraper.cli`: `configure_common`, `run_spider`, `build_parser` and `main`.

## What it does not do

- It does not log in and sends no session cookies. Only pages that LinkedIn
  serves to anonymous visitors can be scraped.
- `Config` has a `robotstxt_obey` setting, but nothing reads it. `robots.txt`
  is never fetched or honoured.
- `Config` also has a `bot_name` setting that nothing reads.
- The middleware classes are not called by `run_spider`. They are hooks for
  your own crawl loop.
- Output goes to JSON Lines files only. There is no database or other storage.