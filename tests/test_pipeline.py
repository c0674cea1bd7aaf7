import json

import pytest

from inscraper.config import Config
from inscraper.items import CompanyProfile
from inscraper.pipeline import JsonPipeline


def _files(directory):
    return sorted(directory.glob("*.jsonl"))


@pytest.mark.asyncio
async def test_items_are_appended_as_lines(tmp_path):
    out = tmp_path / "nested" / "out"
    pipeline = JsonPipeline(Config(output_dir=str(out)))
    first = CompanyProfile(name="Acme", summary="Tools")
    second = CompanyProfile(name="Büro", summary="Paper", founded="1999")
    await pipeline.process_item("linkedin_company_profile", first)
    await pipeline.process_item("linkedin_company_profile", second)
    pipeline.close()

    files = _files(out)
    assert len(files) == 1
    assert files[0].name.startswith("linkedin_company_profile_")
    lines = files[0].read_text(encoding="utf-8").splitlines()
    assert [CompanyProfile(**json.loads(line)) for line in lines] == [first, second]
    assert "Büro" in lines[1]


@pytest.mark.asyncio
async def test_each_spider_gets_its_own_file(tmp_path):
    with JsonPipeline(Config(output_dir=str(tmp_path))) as pipeline:
        await pipeline.process_item("alpha", {"n": 1})
        await pipeline.process_item("beta", {"n": 2})
        await pipeline.process_item("alpha", {"n": 3})

    files = _files(tmp_path)
    assert len(files) == 2
    by_prefix = {f.name.split("_")[0]: f for f in files}
    alpha = [json.loads(x) for x in by_prefix["alpha"].read_text().splitlines()]
    beta = [json.loads(x) for x in by_prefix["beta"].read_text().splitlines()]
    assert alpha == [{"n": 1}, {"n": 3}]
    assert beta == [{"n": 2}]


@pytest.mark.asyncio
async def test_lines_are_compact(tmp_path):
    with JsonPipeline(Config(output_dir=str(tmp_path))) as pipeline:
        await pipeline.process_item("s", {"a": 1, "b": [1, 2]})
    (path,) = _files(tmp_path)
    assert path.read_text() == '{"a":1,"b":[1,2]}\n'


@pytest.mark.asyncio
async def test_unserialisable_item_raises(tmp_path):
    with JsonPipeline(Config(output_dir=str(tmp_path))) as pipeline:
        with pytest.raises(TypeError):
            await pipeline.process_item("s", {"a": object()})