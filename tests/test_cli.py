"""Tests for the matching CLI."""

import json

import pytest

from lostfound.cli import load_items, main

ITEMS = [
    {
        "id": "lost-1",
        "title": "Blue Backpack",
        "description": "Navy blue backpack",
        "category": "accessories",
        "location": "Library",
        "date": "2024-01-10",
        "status": "lost",
    },
    {
        "id": "found-1",
        "title": "Blue backpack",
        "description": "Navy blue backpack",
        "category": "accessories",
        "location": "Library front desk",
        "date": "2024-01-11",
        "status": "found",
    },
    {
        "id": "found-2",
        "title": "Umbrella",
        "category": "other",
        "location": "Bus stop",
        "date": "2023-06-01",
        "status": "found",
    },
]


@pytest.fixture
def items_file(tmp_path):
    path = tmp_path / "items.json"
    path.write_text(json.dumps(ITEMS), encoding="utf-8")
    return path


def test_load_items(items_file):
    items = load_items(items_file)
    assert [item.id for item in items] == ["lost-1", "found-1", "found-2"]


def test_load_items_rejects_non_list(tmp_path):
    path = tmp_path / "items.json"
    path.write_text(json.dumps({"id": "x"}), encoding="utf-8")
    with pytest.raises(ValueError):
        load_items(path)


def test_cli_json_output(items_file, capsys):
    assert main([str(items_file), "lost-1", "--json"]) == 0

    body = json.loads(capsys.readouterr().out)
    assert body["targetId"] == "lost-1"
    assert [m["item"]["id"] for m in body["matches"]] == ["found-1"]
    assert body["matches"][0]["isHighPotentialMatch"] is True


def test_cli_text_output(items_file, capsys):
    assert main([str(items_file), "lost-1", "--threshold", "0", "--limit", "5"]) == 0

    out = capsys.readouterr().out
    assert "Potential matches for lost item lost-1" in out
    assert "Blue backpack (found-1)" in out
    assert "Umbrella (found-2)" in out
    assert "[HIGH]" in out


def test_cli_unknown_target(items_file, capsys):
    assert main([str(items_file), "nope"]) == 1
    assert "not found" in capsys.readouterr().out


def test_cli_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.json"), "lost-1"]) == 1
    assert "Could not load items" in capsys.readouterr().out


def test_cli_usage(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().out

    assert main(["items.json", "x", "--threshold"]) == 1
