"""
Deployment Environment - Resolve runtime settings once at startup.

Two strategies:
    LOCAL    paths relative to the repository root
    MANAGED  serverless bundle; probe /var/task, cwd and repository root

Explicit BLOG_DATA_PATH / UI_ASSETS_DIR always win over the strategy.

Usage:
    settings = Settings.from_env()
    container.config.from_dict(settings.to_config())
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import asdict, dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from magazine_search.application.corpus import DEFAULT_LISTED_RESOURCES
from magazine_search.core.exceptions import ConfigurationError, ErrorContext

logger = logging.getLogger(__name__)

DEFAULT_PORT = 8001
DEFAULT_HOST = "0.0.0.0"  # noqa: S104
DEFAULT_MCP_PATH = "/mcp"
CORPUS_FILENAME = "blogposts.en.json"
ASSETS_SUBDIR = ("ui-sdk", "dist")
MANAGED_ROOT = Path("/var/task")

REPO_ROOT = Path(__file__).resolve().parents[3]


class DeploymentEnvironment(Enum):
    LOCAL = "local"
    MANAGED = "managed"

    @classmethod
    def detect(cls, environ: Mapping[str, str]) -> DeploymentEnvironment:
        """DEPLOYMENT_ENV when set, otherwise MANAGED iff VERCEL is set."""
        explicit = environ.get("DEPLOYMENT_ENV", "").strip().lower()
        if explicit:
            try:
                return cls(explicit)
            except ValueError:
                raise ConfigurationError(
                    f"Unknown DEPLOYMENT_ENV: {explicit}",
                    context=ErrorContext(
                        input_value=explicit,
                        suggestion="Use 'local' or 'managed'",
                    ),
                ) from None
        return cls.MANAGED if environ.get("VERCEL") else cls.LOCAL

    def candidate_roots(self, cwd: Path | None = None) -> list[Path]:
        if self is DeploymentEnvironment.LOCAL:
            return [REPO_ROOT]
        return [MANAGED_ROOT, cwd or Path.cwd(), REPO_ROOT]

    def resolve(self, *relative: str, cwd: Path | None = None) -> Path:
        """First existing candidate; the first candidate when none exists."""
        candidates = [root.joinpath(*relative) for root in self.candidate_roots(cwd)]
        for candidate in candidates:
            if candidate.exists():
                return candidate
        return candidates[0]


def _int_env(environ: Mapping[str, str], key: str, default: int) -> int:
    raw = environ.get(key, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring non-integer {key}={raw!r}, using {default}")
        return default


def _origins(raw: str) -> tuple[str, ...]:
    return tuple(part.strip() for part in raw.split(",") if part.strip())


@dataclass(frozen=True)
class Settings:
    """
    Process-wide settings.

    Attributes:
        blog_data_path: Corpus JSON file
        ui_assets_dir: Built widget bundles
        widget_prebuilt_dir: Prebuilt self-contained widget documents
        port: Listening port
        host: Bind host
        mcp_path: Session endpoint path
        max_listed_resources: Number of article resources listed
        allowed_origins: Production CORS allow-list (empty means defaults)
        production: Strict CORS policy when True
        deployment: Resolved deployment strategy
        log_level: Logging level name
    """

    blog_data_path: Path
    ui_assets_dir: Path
    widget_prebuilt_dir: Path
    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST
    mcp_path: str = DEFAULT_MCP_PATH
    max_listed_resources: int = DEFAULT_LISTED_RESOURCES
    allowed_origins: tuple[str, ...] = ()
    production: bool = False
    deployment: DeploymentEnvironment = DeploymentEnvironment.LOCAL
    log_level: str = "INFO"

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        cwd: Path | None = None,
    ) -> Settings:
        """Load settings from environment variables."""
        env = os.environ if environ is None else environ
        deployment = DeploymentEnvironment.detect(env)

        data_path = env.get("BLOG_DATA_PATH", "").strip()
        assets_dir = env.get("UI_ASSETS_DIR", "").strip()
        prebuilt_dir = env.get("WIDGET_PREBUILT_DIR", "").strip()

        blog_data_path = (
            Path(data_path) if data_path else deployment.resolve(CORPUS_FILENAME, cwd=cwd)
        )
        ui_assets_dir = (
            Path(assets_dir) if assets_dir else deployment.resolve(*ASSETS_SUBDIR, cwd=cwd)
        )

        max_listed = _int_env(env, "MAX_LISTED_ARTICLE_RESOURCES", DEFAULT_LISTED_RESOURCES)
        if max_listed < 1:
            max_listed = DEFAULT_LISTED_RESOURCES

        mcp_path = env.get("MCP_PATH", "").strip() or DEFAULT_MCP_PATH
        if not mcp_path.startswith("/"):
            mcp_path = f"/{mcp_path}"

        settings = cls(
            blog_data_path=blog_data_path,
            ui_assets_dir=ui_assets_dir,
            widget_prebuilt_dir=Path(prebuilt_dir) if prebuilt_dir else ui_assets_dir,
            port=_int_env(env, "PORT", DEFAULT_PORT),
            host=env.get("MCP_HOST", "").strip() or DEFAULT_HOST,
            mcp_path=mcp_path.rstrip("/") or DEFAULT_MCP_PATH,
            max_listed_resources=max_listed,
            allowed_origins=_origins(env.get("ALLOWED_ORIGIN", "")),
            production=env.get("APP_ENV", "").strip().lower() == "production",
            deployment=deployment,
            log_level=(env.get("LOG_LEVEL", "").strip() or "INFO").upper(),
        )
        logger.debug(f"Resolved settings: {settings}")
        return settings

    def to_config(self) -> dict[str, Any]:
        """Plain dict for ``providers.Configuration.from_dict``."""
        config = asdict(self)
        config["blog_data_path"] = str(self.blog_data_path)
        config["ui_assets_dir"] = str(self.ui_assets_dir)
        config["widget_prebuilt_dir"] = str(self.widget_prebuilt_dir)
        config["allowed_origins"] = list(self.allowed_origins)
        config["deployment"] = self.deployment.value
        return config
