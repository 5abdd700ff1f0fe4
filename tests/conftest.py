"""Shared test fixtures."""

from pathlib import Path

import pytest
from distserve.config import Config, ServerConfig, SiteConfig

INDEX_HTML = "<html>ok</html>"
APP_JS = "console.log(1);"


@pytest.fixture
def dist_dir(tmp_path: Path) -> Path:
    """Create a build output directory with an entry document and assets.

    Layout:
        dist/index.html
        dist/assets/app.js
        dist/assets/style.css
        dist/assets/fonts/icon.woff2
    """
    dist = tmp_path / "dist"
    assets = dist / "assets"
    (assets / "fonts").mkdir(parents=True)

    (dist / "index.html").write_text(INDEX_HTML)
    (assets / "app.js").write_text(APP_JS)
    (assets / "style.css").write_text("body { margin: 0; }")
    (assets / "fonts" / "icon.woff2").write_bytes(bytes(range(256)))

    return dist


@pytest.fixture
def test_config(dist_dir: Path) -> Config:
    """Create a test configuration pointing at dist_dir."""
    return Config(server=ServerConfig(), site=SiteConfig(static_dir=dist_dir))
