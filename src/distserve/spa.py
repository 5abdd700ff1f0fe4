"""SPA fallback handler.

Every request the asset route does not satisfy receives the entry document so
the client-side router can interpret the URL.
"""

import asyncio
import logging
from pathlib import Path

from aiohttp import web

from distserve.app_keys import site_key

logger = logging.getLogger(__name__)

# Served with status 200 when the entry document cannot be read.
MISSING_INDEX_BODY = "<h1>Error: index.html not found</h1>"


def read_entry_document(path: Path) -> str:
    """Read the entry document from disk.

    Args:
        path: Path to the HTML entry point

    Returns:
        Document contents

    Raises:
        OSError: If the file cannot be read
        UnicodeDecodeError: If the file is not valid UTF-8
    """
    return path.read_text(encoding="utf-8")


async def serve_index(request: web.Request) -> web.Response:
    """Serve the entry document for SPA client-side routing.

    The document is re-read on every request. An unreadable document still
    produces a 200 response carrying a short HTML error message.
    """
    index_path = request.app[site_key].index_path
    try:
        body = await asyncio.to_thread(read_entry_document, index_path)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Could not read entry document {index_path}: {e}")
        body = MISSING_INDEX_BODY
    return web.Response(text=body, content_type="text/html")
