"""aiohttp server for distserve.

Application factory and route registration.
"""

import logging

from aiohttp import web

from distserve.app_keys import site_key
from distserve.assets import serve_asset
from distserve.config import Config
from distserve.spa import serve_index
from distserve.tracing import access_log_kwargs

logger = logging.getLogger(__name__)


def create_app(config: Config) -> web.Application:
    """Create aiohttp application.

    Args:
        config: Application configuration

    Returns:
        Configured aiohttp application
    """
    app = web.Application()
    app[site_key] = config.site

    prefix = config.site.assets_prefix
    app.router.add_get(prefix + "/{filename:.*}", serve_asset)

    # SPA fallback - must be last to catch everything else
    app.router.add_get("/{path:.*}", serve_index)

    return app


def run_server(config: Config) -> None:
    """Run the server.

    Args:
        config: Application configuration
    """
    app = create_app(config)
    logger.info(f"Serving {config.site.static_dir} on {config.server.host}:{config.server.port}")
    web.run_app(
        app,
        host=config.server.host,
        port=config.server.port,
        print=None,
        **access_log_kwargs(),
    )
