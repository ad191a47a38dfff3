from __future__ import annotations

import pytest

from libs.common.yaml_config import load_yaml_mapping


def test_loads_mapping(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("source:\n  env_var: FOO\n", encoding="utf-8")

    assert load_yaml_mapping(path) == {"source": {"env_var": "FOO"}}


def test_empty_file_is_empty_mapping(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("", encoding="utf-8")

    assert load_yaml_mapping(path) == {}


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_yaml_mapping(tmp_path / "nope.yml")


def test_top_level_list_is_rejected(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(ValueError):
        load_yaml_mapping(path)
