"""Tests for the seed CLI wrapper."""

from __future__ import annotations

import pytest

from scripts.seed import parse_args, seed


def test_parse_args_defaults():
    args = parse_args([])
    assert args.database_url is None
    assert args.data_dir is None
    assert args.verbose is False


def test_parse_args_custom_values():
    args = parse_args(["--database-url", "sqlite+aiosqlite:///tmp.db", "--data-dir", "/data", "--verbose"])
    assert args.database_url == "sqlite+aiosqlite:///tmp.db"
    assert args.data_dir == "/data"
    assert args.verbose is True


@pytest.mark.anyio
async def test_seed_creates_tables_and_loads_data(tmp_path):
    url = f"sqlite+aiosqlite:///{tmp_path / 'seed.db'}"

    first = await seed(parse_args(["--database-url", url]))
    second = await seed(parse_args(["--database-url", url]))

    assert first == {"employees": 10, "roles": 8, "career_histories": 16}
    assert second == {"employees": 0, "roles": 0, "career_histories": 0}
