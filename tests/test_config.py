from pathlib import Path

import pytest

from poststub.config import ConfigError, content_dir, load_config, parse_policy
from poststub.writer import ExistsPolicy


def test_load_config_defaults(tmp_path):
    config = load_config(tmp_path)
    assert config["content_dir"] == "content/post"
    assert config["on_exists"] is ExistsPolicy.FAIL
    assert config["git_remote"] is None
    assert content_dir(tmp_path, config) == tmp_path / "content" / "post"


def test_load_config_from_yaml(tmp_path):
    (tmp_path / "poststub.yaml").write_text(
        "content_dir: posts\non_exists: Overwrite\ngit_remote: origin\ngit_branch: main\n",
        encoding="utf-8",
    )
    config = load_config(tmp_path)
    assert config["on_exists"] is ExistsPolicy.OVERWRITE
    assert config["git_remote"] == "origin"
    assert config["git_branch"] == "main"
    assert content_dir(tmp_path, config) == tmp_path / "posts"


def test_load_config_ignores_non_mapping(tmp_path):
    (tmp_path / "poststub.yaml").write_text("- just\n- a list\n", encoding="utf-8")
    assert load_config(tmp_path)["content_dir"] == "content/post"


def test_load_config_rejects_unknown_policy(tmp_path):
    (tmp_path / "poststub.yaml").write_text("on_exists: clobber\n", encoding="utf-8")
    with pytest.raises(ConfigError) as excinfo:
        load_config(tmp_path)
    assert "clobber" in str(excinfo.value)


def test_content_dir_absolute(tmp_path):
    absolute = tmp_path / "elsewhere"
    assert content_dir(Path("/project"), {"content_dir": str(absolute)}) == absolute


def test_parse_policy_passthrough():
    assert parse_policy(ExistsPolicy.APPEND) is ExistsPolicy.APPEND
    assert parse_policy("append") is ExistsPolicy.APPEND


def test_load_config_broken_yaml(tmp_path):
    (tmp_path / "poststub.yaml").write_text("content_dir: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError) as excinfo:
        load_config(tmp_path)
    assert "poststub.yaml" in str(excinfo.value)


def test_load_config_not_utf8(tmp_path):
    (tmp_path / "poststub.yaml").write_bytes(b"content_dir: \xff\xfe\n")
    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_load_config_empty_values_fall_back_to_defaults(tmp_path):
    (tmp_path / "poststub.yaml").write_text("on_exists:\ncontent_dir:\n", encoding="utf-8")
    config = load_config(tmp_path)
    assert config["on_exists"] is ExistsPolicy.FAIL
    assert content_dir(tmp_path, config) == tmp_path / "content" / "post"
