# File: tests/test_config.py
import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from link_checker.config import CheckerConfig, load_config
from link_checker.crawler.scope import ScopeMode


def write_file(tmp_path: Path, content: str, suffix: str) -> Path:
    path = tmp_path / f"config{suffix}"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "content,expect_exc",
    [
        ("seed_url: http://example.com/docs/\nscope_mode: domain", None),
        (json.dumps({"seed_url": "http://example.com/docs/", "scope_mode": "domain"}), None),
        ("{}", ValidationError),
        ("not: a: mapping", ValueError),
        ("- just\n- a list", TypeError),
        ("seed_url: http://example.com/\nunknown_key: 1", ValidationError),
        ("seed_url: http://example.com/\nskip_pattern: '(unclosed'", ValidationError),
        ("seed_url: http://example.com/\nworkers: 0", ValidationError),
        ("seed_url: ftp://example.com/", ValidationError),
    ],
)
def test_load_config_variants(tmp_path, content, expect_exc):
    suffix = ".yaml" if not content.strip().startswith("{") else ".json"
    cfg_path = write_file(tmp_path, content, suffix)
    if expect_exc:
        with pytest.raises(expect_exc):
            load_config(cfg_path)
    else:
        cfg = load_config(cfg_path)
        assert isinstance(cfg, CheckerConfig)
        assert str(cfg.seed_url) == "http://example.com/docs/"
        assert cfg.scope_mode is ScopeMode.DOMAIN


def test_defaults_and_scope():
    cfg = load_config(seed_url="https://example.com/products/widgets", skip_pattern=r"\.pdf$")
    assert cfg.workers == 8
    assert cfg.timeout == 10.0
    assert cfg.add_trailing_slash is True
    assert cfg.user_agent.startswith("LinkChecker/")

    scope = cfg.scope()
    assert scope.seed_url == "https://example.com/products/widgets/"
    assert scope.seed_path_prefix == "/products/widgets/"
    assert scope.mode is ScopeMode.PATH_PREFIX
    assert scope.is_skipped("https://example.com/a.pdf")


def test_overrides_win_over_file(tmp_path):
    cfg_path = write_file(tmp_path, "seed_url: http://example.com/\nworkers: 2\ntimeout: 3", ".yml")
    cfg = load_config(cfg_path, seed_url="http://example.org/", workers=None, timeout=1.5)
    assert str(cfg.seed_url) == "http://example.org/"
    assert cfg.workers == 2
    assert cfg.timeout == 1.5


def test_config_is_frozen():
    cfg = load_config(seed_url="http://example.com/")
    with pytest.raises(ValidationError):
        cfg.workers = 3


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_unsupported_suffix(tmp_path):
    with pytest.raises(ValueError):
        load_config(write_file(tmp_path, "seed_url = 'x'", ".toml"))
