"""Tests for the content catalog loader."""
import copy
import json

import pytest

from sentience import config
from sentience.model.content import ContentCatalog, ContentError, load_content

from conftest import CATALOG_DATA


def test_bundled_catalog_loads():
    catalog = load_content(config.CONTENT_PATH)

    assert len(catalog.sections) == config.TOTAL_SECTIONS
    assert catalog.stats
    assert all(stat.target >= 0 for stat in catalog.stats)
    assert catalog.terminal_lines


def test_from_dict_fills_defaults():
    catalog = ContentCatalog.from_dict(CATALOG_DATA)

    assert catalog.brand == "TEST"
    assert catalog.section(2).nav_label == "Section 2"
    assert catalog.section(2).eyebrow == ""
    assert catalog.stats[1].suffix == "+"
    assert catalog.stats[0].suffix == ""


def test_wrong_section_count_is_rejected():
    data = copy.deepcopy(CATALOG_DATA)
    data["sections"].pop()

    with pytest.raises(ContentError, match="Expected 6 sections"):
        ContentCatalog.from_dict(data)


@pytest.mark.parametrize("target", [-1, 1.5, "12", True])
def test_invalid_stat_target_is_rejected(target):
    data = copy.deepcopy(CATALOG_DATA)
    data["stats"][0]["target"] = target

    with pytest.raises(ContentError):
        ContentCatalog.from_dict(data)


def test_missing_keys_are_reported():
    with pytest.raises(ContentError, match="Malformed"):
        ContentCatalog.from_dict({"sections": [{"title": "no key"}] * 6})


def test_load_from_file(tmp_path):
    path = tmp_path / "content.json"
    path.write_text(json.dumps(CATALOG_DATA), encoding="utf-8")

    catalog = load_content(str(path))
    assert catalog.terminal_lines == ["$ boot", "> one", "> two"]


def test_unreadable_file_raises_content_error(tmp_path):
    with pytest.raises(ContentError):
        load_content(str(tmp_path / "missing.json"))

    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    with pytest.raises(ContentError):
        load_content(str(broken))


def test_content_error_is_a_value_error():
    assert issubclass(ContentError, ValueError)
