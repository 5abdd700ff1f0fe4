"""Configuration management for distserve.

Supports TOML configuration format with auto-discovery.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path, PurePosixPath

CONFIG_FILENAME = "distserve.toml"

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000


@dataclass(frozen=True)
class ServerConfig:
    """Server configuration."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT


@dataclass(frozen=True)
class SiteConfig:
    """Build output layout.

    Relative paths are left unresolved so they are interpreted against the
    working directory at request time.
    """

    static_dir: Path = field(default_factory=lambda: Path("dist"))
    assets_dir: str = "assets"
    assets_prefix: str = "/assets"
    index: str = "index.html"

    @property
    def assets_path(self) -> Path:
        """Directory served under the assets prefix."""
        return self.static_dir / self.assets_dir

    @property
    def index_path(self) -> Path:
        """Entry document returned by the SPA fallback."""
        return self.static_dir / self.index


@dataclass(frozen=True)
class Config:
    """Application configuration."""

    server: ServerConfig
    site: SiteConfig
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> Config:
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for distserve.toml in current directory and parents.

        Args:
            config_path: Optional explicit path to config file

        Returns:
            Config instance with defaults for missing sections

        Raises:
            FileNotFoundError: If explicit config_path doesn't exist
            ValueError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls._load_from_file(config_path)

        discovered_path = cls._discover_config()
        if discovered_path is None:
            return cls._default()

        return cls._load_from_file(discovered_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Search for config file in current directory and parents."""
        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent

    @classmethod
    def _default(cls) -> Config:
        return cls(server=ServerConfig(), site=SiteConfig())

    @classmethod
    def _load_from_file(cls, path: Path) -> Config:
        """Load configuration from a specific file.

        Args:
            path: Path to TOML configuration file

        Returns:
            Config instance

        Raises:
            ValueError: If configuration is invalid
        """
        with path.open("rb") as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ValueError(f"Invalid TOML in {path}: {e}") from e

        config_dir = path.parent

        server = cls._parse_server(data.get("server"))
        site = cls._parse_site(data.get("site"), config_dir)

        return cls(server=server, site=site, config_path=path)

    @classmethod
    def _parse_server(cls, data: object) -> ServerConfig:
        """Parse server configuration section.

        Args:
            data: Raw server section data

        Returns:
            ServerConfig instance
        """
        if data is None:
            return ServerConfig()

        if not isinstance(data, dict):
            raise ValueError("server section must be a dictionary")

        host = data.get("host", DEFAULT_HOST)
        if not isinstance(host, str):
            raise ValueError("server.host must be a string")

        port = data.get("port", DEFAULT_PORT)
        # bool is an int subclass
        if not isinstance(port, int) or isinstance(port, bool):
            raise ValueError("server.port must be an integer")
        _validate_port(port, "server.port")

        return ServerConfig(host=host, port=port)

    @classmethod
    def _parse_site(cls, data: object, config_dir: Path) -> SiteConfig:
        """Parse site configuration section.

        Args:
            data: Raw site section data
            config_dir: Directory containing config file (for relative paths)

        Returns:
            SiteConfig instance
        """
        if data is None:
            return SiteConfig(static_dir=config_dir / "dist")

        if not isinstance(data, dict):
            raise ValueError("site section must be a dictionary")

        static_dir = data.get("static_dir", "dist")
        if not isinstance(static_dir, str):
            raise ValueError("site.static_dir must be a string")

        assets_dir = data.get("assets_dir", "assets")
        if not isinstance(assets_dir, str):
            raise ValueError("site.assets_dir must be a string")

        assets_prefix = data.get("assets_prefix", "/assets")
        if not isinstance(assets_prefix, str):
            raise ValueError("site.assets_prefix must be a string")
        assets_prefix = _normalize_prefix(assets_prefix)

        index = data.get("index", "index.html")
        if not isinstance(index, str):
            raise ValueError("site.index must be a string")
        _validate_file_name(index, "site.index")

        return SiteConfig(
            static_dir=config_dir / static_dir,
            assets_dir=assets_dir,
            assets_prefix=assets_prefix,
            index=index,
        )

    def with_overrides(
        self,
        *,
        host: str | None = None,
        port: int | None = None,
        static_dir: Path | None = None,
    ) -> Config:
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config. The original
        Config is not modified.

        Args:
            host: Override server.host
            port: Override server.port
            static_dir: Override site.static_dir

        Returns:
            New Config instance with overrides applied
        """
        server = self.server
        if host is not None or port is not None:
            if port is not None:
                _validate_port(port, "port")
            server = replace(
                self.server,
                host=host if host is not None else self.server.host,
                port=port if port is not None else self.server.port,
            )

        site = self.site
        if static_dir is not None:
            site = replace(self.site, static_dir=static_dir)

        return replace(self, server=server, site=site)


def _validate_port(port: int, name: str) -> None:
    if not 1 <= port <= 65535:
        raise ValueError(f"{name} must be between 1 and 65535")


def _normalize_prefix(prefix: str) -> str:
    """Return the URL prefix with a leading slash and no trailing slash."""
    if not prefix.startswith("/"):
        raise ValueError("site.assets_prefix must start with '/'")
    normalized = prefix.rstrip("/")
    if not normalized:
        raise ValueError("site.assets_prefix must not be '/'")
    return normalized


def _validate_file_name(name: str, key: str) -> None:
    if not name or PurePosixPath(name).name != name or name in (".", ".."):
        raise ValueError(f"{key} must be a plain file name")
