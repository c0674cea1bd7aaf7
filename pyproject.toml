[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "inscraper"
version = "0.1.0"
description = "Asynchronous scraper for public LinkedIn company pages, job listings and people profiles, writing JSON Lines output"
requires-python = ">=3.10"
keywords = ["scraper", "crawler", "linkedin", "jobs", "jsonl", "asyncio"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Framework :: AsyncIO",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Indexing/Search",
]
dependencies = [
    "httpx>=0.24",
    "beautifulsoup4>=4.12",
]

[project.optional-dependencies]
test = [
    "pytest>=7.4",
    "pytest-asyncio>=0.21",
]

[project.scripts]
in-scraper = "inscraper.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["inscraper"]

[tool.hatch.build.targets.sdist]
include = ["inscraper", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
ignore_missing_imports = true
