"""Application keys for type-safe app configuration access."""

from aiohttp import web

from distserve.config import SiteConfig

site_key = web.AppKey("site", SiteConfig)
