"""Root test configuration: isolated working directory and post-writing fixtures"""

import os

import pytest
import yaml

from postfeed.config import ENV_PREFIX


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Run each test from tmp_path with no POSTFEED_* variables or config.yaml in scope."""
    for name in list(os.environ):
        if name.startswith(ENV_PREFIX):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(name="content_dir")
def content_dir_fixture(tmp_path):
    d = tmp_path / "posts"
    d.mkdir()
    return d


@pytest.fixture(name="write_post")
def write_post_fixture(content_dir):
    """Return a writer: write_post(filename, body=..., **frontmatter) -> Path."""
    def _write(filename: str, body: str = "Some body text.\n", **fields):
        header = yaml.safe_dump(fields, sort_keys=False, allow_unicode=True) if fields else ""
        path = content_dir / filename
        path.write_text(f"---\n{header}---\n\n{body}", encoding="utf-8")
        return path
    return _write
