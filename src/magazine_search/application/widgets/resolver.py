"""
Widget Resolver - Locate, select and inline built widget assets.

Each logical widget name moves through UNRESOLVED -> RESOLVED | UNAVAILABLE
exactly once per resolver. The resolved HTML document is memoized.

Resolution order (first success wins):
    1. {prebuilt_dir}/{name}.html, used verbatim
    2. {name}-*.js / {name}-*.css (lexicographically last hash),
       else {name}.js / {name}.css, escaped and inlined into one document

Failures are logged and never raised to callers. An unavailable widget
still has a document to serve: {assets_dir}/fallback-widget.html or a
minimal placeholder.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from magazine_search.core.exceptions import WidgetUnavailableError

logger = logging.getLogger(__name__)

FALLBACK_FILENAME = "fallback-widget.html"
UNAVAILABLE_HTML = "<div>Widget unavailable</div>"
WIDGET_MIME_TYPE = "text/html+skybridge"

_SCRIPT_CLOSE = re.compile(r"</script", re.IGNORECASE)
_STYLE_CLOSE = re.compile(r"</style", re.IGNORECASE)


class WidgetState(Enum):
    UNRESOLVED = "unresolved"
    RESOLVED = "resolved"
    UNAVAILABLE = "unavailable"


@dataclass(frozen=True)
class WidgetSpec:
    """Static identity of a widget, known before any asset is read."""

    name: str
    id: str
    title: str
    invoking: str
    invoked: str
    description: str = ""

    @property
    def template_uri(self) -> str:
        return f"ui://widget/{self.name}.html"

    @property
    def root_id(self) -> str:
        return f"{self.name}-root"


@dataclass(frozen=True)
class WidgetDescriptor:
    """A resolved widget: identity plus its self-contained HTML document."""

    name: str
    id: str
    title: str
    template_uri: str
    invoking: str
    invoked: str
    html: str

    @classmethod
    def from_spec(cls, spec: WidgetSpec, html: str) -> WidgetDescriptor:
        return cls(
            name=spec.name,
            id=spec.id,
            title=spec.title,
            template_uri=spec.template_uri,
            invoking=spec.invoking,
            invoked=spec.invoked,
            html=html,
        )


ARTICLE_LIST = WidgetSpec(
    name="article-list",
    id="unic-article-list",
    title="Unic magazine article list",
    invoking="Curating magazine stories",
    invoked="Article list ready",
    description="Interactive article list widget markup",
)

ARTICLE_PREVIEW = WidgetSpec(
    name="article-preview",
    id="unic-article-preview",
    title="Unic magazine article preview",
    invoking="Loading article preview",
    invoked="Article preview ready",
    description="Interactive article preview widget markup",
)

WIDGET_SPECS: dict[str, WidgetSpec] = {
    ARTICLE_LIST.name: ARTICLE_LIST,
    ARTICLE_PREVIEW.name: ARTICLE_PREVIEW,
}


# ============================================================================
# Meta helpers
# ============================================================================


def widget_descriptor_meta(descriptor: WidgetDescriptor) -> dict[str, object]:
    """Tool/resource _meta that binds a tool to its output template."""
    return {
        "openai/outputTemplate": descriptor.template_uri,
        "openai/toolInvocation/invoking": descriptor.invoking,
        "openai/toolInvocation/invoked": descriptor.invoked,
        "openai/widgetAccessible": True,
    }


def widget_invocation_meta(descriptor: WidgetDescriptor) -> dict[str, object]:
    """Per-call _meta with the invocation phrases."""
    return {
        "openai/toolInvocation/invoking": descriptor.invoking,
        "openai/toolInvocation/invoked": descriptor.invoked,
    }


# ============================================================================
# Asset handling
# ============================================================================


def escape_inline_script(source: str) -> str:
    return _SCRIPT_CLOSE.sub(r"<\\/script", source)


def escape_inline_style(source: str) -> str:
    return _STYLE_CLOSE.sub(r"<\\/style", source)


def resolve_widget_asset(name: str, extension: str, assets_dir: Path) -> Path:
    """
    Pick the asset file for a widget.

    Hashed bundles ({name}-<hash>{ext}) win over the plain {name}{ext};
    among several hashed bundles the lexicographically last is used.

    Raises:
        WidgetUnavailableError: If neither form exists or the directory
            cannot be listed.
    """
    try:
        files = sorted(p.name for p in assets_dir.iterdir() if p.is_file())
    except OSError as e:
        raise WidgetUnavailableError(name, f"cannot list {assets_dir}: {e}") from e
    hashed = [f for f in files if f.startswith(f"{name}-") and f.endswith(extension)]
    if hashed:
        return assets_dir / hashed[-1]

    plain = f"{name}{extension}"
    if plain in files:
        return assets_dir / plain

    raise WidgetUnavailableError(
        name, f"missing {extension} asset inside {assets_dir}; build the UI bundle first"
    )


def render_widget_document(root_id: str, script: str, style: str) -> str:
    """Inline escaped script and style into a standalone HTML document."""
    return (
        "<!doctype html>\n"
        "<html>\n"
        "<head>\n"
        f"<style>{escape_inline_style(style)}</style>\n"
        "</head>\n"
        "<body>\n"
        f'<div id="{root_id}"></div>\n'
        f'<script type="module">{escape_inline_script(script)}</script>\n'
        "</body>\n"
        "</html>\n"
    )


def build_widget_html(
    name: str,
    assets_dir: str | Path,
    prebuilt_dir: str | Path | None = None,
) -> str:
    """
    Build the self-contained document for a widget.

    Raises:
        WidgetUnavailableError: If no prebuilt document exists and the assets
            cannot be located or read.
    """
    assets_path = Path(assets_dir)
    prebuilt_path = Path(prebuilt_dir) if prebuilt_dir else assets_path

    prebuilt = prebuilt_path / f"{name}.html"
    if prebuilt.is_file():
        try:
            return prebuilt.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise WidgetUnavailableError(name, f"cannot read {prebuilt}: {e}") from e

    if not assets_path.is_dir():
        raise WidgetUnavailableError(name, f"widget assets not found at {assets_path}")

    js_path = resolve_widget_asset(name, ".js", assets_path)
    css_path = resolve_widget_asset(name, ".css", assets_path)
    try:
        script = js_path.read_text(encoding="utf-8")
        style = css_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise WidgetUnavailableError(name, f"cannot read assets: {e}") from e

    return render_widget_document(f"{name}-root", script, style)


# ============================================================================
# Resolver
# ============================================================================


class WidgetResolver:
    """
    Memoizing resolver for the widgets of one process.

    Args:
        assets_dir: Directory holding built bundles and fallback-widget.html.
        prebuilt_dir: Directory holding prebuilt {name}.html documents.
            Defaults to assets_dir.
    """

    def __init__(self, assets_dir: str | Path, prebuilt_dir: str | Path | None = None):
        self.assets_dir = Path(assets_dir)
        self.prebuilt_dir = Path(prebuilt_dir) if prebuilt_dir else self.assets_dir
        self._resolved: dict[str, WidgetDescriptor | None] = {}
        self._fallback_html: str | None = None

    def state(self, name: str) -> WidgetState:
        if name not in self._resolved:
            return WidgetState.UNRESOLVED
        if self._resolved[name] is None:
            return WidgetState.UNAVAILABLE
        return WidgetState.RESOLVED

    def resolve(self, name: str) -> WidgetDescriptor | None:
        """Resolve a widget once; later calls return the memoized outcome."""
        if name in self._resolved:
            return self._resolved[name]

        spec = WIDGET_SPECS.get(name)
        descriptor: WidgetDescriptor | None = None
        try:
            if spec is None:
                raise WidgetUnavailableError(name, "unknown widget")
            html = build_widget_html(name, self.assets_dir, self.prebuilt_dir)
            descriptor = WidgetDescriptor.from_spec(spec, html)
            logger.info(f"Widget '{name}' resolved")
        except WidgetUnavailableError as e:
            logger.warning(f"{e}")
        except OSError as e:
            logger.warning(f"Widget '{name}' unavailable: {e}")

        self._resolved[name] = descriptor
        return descriptor

    def resolve_all(self) -> dict[str, WidgetDescriptor | None]:
        """Resolve every known widget."""
        return {name: self.resolve(name) for name in WIDGET_SPECS}

    def get(self, name: str) -> WidgetDescriptor | None:
        """Memoized descriptor; None when unresolved or unavailable."""
        return self._resolved.get(name)

    @property
    def fallback_html(self) -> str:
        """Document served in place of an unavailable widget."""
        if self._fallback_html is None:
            fallback = self.assets_dir / FALLBACK_FILENAME
            html = UNAVAILABLE_HTML
            if fallback.is_file():
                try:
                    html = fallback.read_text(encoding="utf-8")
                except (OSError, UnicodeDecodeError) as e:
                    logger.warning(f"Cannot read {fallback}: {e}")
            self._fallback_html = html
        return self._fallback_html

    def document(self, name: str) -> str:
        """HTML for a widget resource: the resolved document or the fallback."""
        descriptor = self.resolve(name)
        return descriptor.html if descriptor is not None else self.fallback_html
