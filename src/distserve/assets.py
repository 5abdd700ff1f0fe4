"""Static asset serving for the SPA build output.

Locates files under the assets directory and falls through to the SPA
fallback when a request does not map to a regular file.
"""

import logging
from pathlib import Path

from aiohttp import web

from distserve.app_keys import site_key
from distserve.config import SiteConfig
from distserve.spa import serve_index

logger = logging.getLogger(__name__)


def resolve_asset(assets_dir: Path, relative: str) -> Path | None:
    """Resolve a URL suffix to a regular file inside the assets directory.

    Args:
        assets_dir: Root directory of the static assets
        relative: URL path remainder after the assets prefix

    Returns:
        Path to the file, or None if it does not exist, is not a regular
        file, or lies outside assets_dir.
    """
    if not relative or "\x00" in relative:
        return None

    try:
        root = assets_dir.resolve()
        candidate = (root / relative.lstrip("/")).resolve()
        if not candidate.is_relative_to(root):
            logger.debug(f"Rejected asset path outside {root}: {relative}")
            return None
        if not candidate.is_file():
            return None
    except (OSError, RuntimeError) as e:
        # unresolvable names (ENAMETOOLONG, EACCES) count as misses
        logger.debug(f"Could not resolve asset {relative!r}: {e}")
        return None
    return candidate


async def serve_asset(request: web.Request) -> web.StreamResponse:
    """Serve a file from the assets directory.

    Missing files and directories are handed to the SPA fallback instead of
    producing a 404.
    """
    site = request.app[site_key]
    filename = request.match_info.get("filename", "")
    path = resolve_asset(site.assets_path, filename)
    if path is None:
        return await serve_index(request)
    return web.FileResponse(path)


def check_layout(site: SiteConfig) -> list[Path]:
    """Verify the build output layout.

    Args:
        site: Site configuration to check

    Returns:
        Sorted list of asset files found under the assets directory.

    Raises:
        FileNotFoundError: If the static directory, entry document or assets
            directory is missing.
    """
    if not site.static_dir.is_dir():
        raise FileNotFoundError(f"Static directory not found: {site.static_dir}")
    if not site.index_path.is_file():
        raise FileNotFoundError(f"Entry document not found: {site.index_path}")
    if not site.assets_path.is_dir():
        raise FileNotFoundError(f"Assets directory not found: {site.assets_path}")
    return sorted(p for p in site.assets_path.rglob("*") if p.is_file())
