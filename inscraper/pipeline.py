"""Pipeline that appends scraped items to JSON Lines files."""

from __future__ import annotations

import asyncio
import json
from datetime import datetime
from pathlib import Path
from typing import IO, Any

from .config import Config
from .items import item_to_dict


def _jsonable(item: Any) -> Any:
    try:
        return item_to_dict(item)
    except TypeError:
        return item


class JsonPipeline:
    """Writes each spider's items to its own timestamped ``.jsonl`` file."""

    def __init__(self, config: Config) -> None:
        self.config = config
        self._files: dict[str, tuple[IO[str], Path]] = {}
        self._lock = asyncio.Lock()

    def _open(self, output_dir: Path, spider_name: str) -> tuple[IO[str], Path]:
        timestamp = datetime.now().strftime("%d_%m_%Y_%H:%M:%S")
        filepath = output_dir / f"{spider_name}_{timestamp}.jsonl"
        return filepath.open("a", encoding="utf-8"), filepath

    async def process_item(self, spider_name: str, item: Any) -> None:
        """Serialise ``item`` as one JSON line in the spider's output file."""
        output_dir = Path(self.config.output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

        async with self._lock:
            if spider_name not in self._files:
                self._files[spider_name] = self._open(output_dir, spider_name)
            handle, _ = self._files[spider_name]

            line = json.dumps(
                _jsonable(item), ensure_ascii=False, separators=(",", ":")
            )
            handle.write(line + "\n")
            handle.flush()

    def close(self) -> None:
        """Close every open output file."""
        for handle, _ in self._files.values():
            handle.close()
        self._files.clear()

    def __enter__(self) -> "JsonPipeline":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()