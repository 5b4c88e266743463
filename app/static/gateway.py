"""Static asset resolution with single-page-app fallback."""

import logging
import os
from pathlib import Path

from app.config import Settings

logger = logging.getLogger(__name__)

DIRECTORY_INDEX = "index.html"


def _is_within(path: Path, root: Path) -> bool:
    try:
        path.resolve().relative_to(root)
        return True
    except (OSError, ValueError):
        return False


class StaticGateway:
    """Maps request paths onto the built SPA directory.

    Lookup is ordered: a file under the static root wins, anything else
    gets the fallback document so the client-side router can take over.
    """

    def __init__(self, settings: Settings):
        self.root = settings.static_dir.resolve()
        self._index_path = settings.index_path

    def _candidate(self, url_path: str) -> Path | None:
        parts = [p for p in url_path.split("/") if p]

        # Dotfiles are never served; this also rejects "." and ".." segments
        if any(p.startswith(".") for p in parts):
            return None
        return self.root.joinpath(*parts)

    def is_directory(self, url_path: str) -> bool:
        """True for a directory requested without its trailing slash."""
        if not url_path or url_path.endswith("/"):
            return False
        candidate = self._candidate(url_path)
        # os.path checks report unreadable or over-long names as absent
        return (
            candidate is not None
            and os.path.isdir(candidate)
            and _is_within(candidate, self.root)
        )

    def resolve_asset(self, url_path: str) -> Path | None:
        """Return the file under the static root for a request path, or None."""
        candidate = self._candidate(url_path)
        if candidate is None:
            return None

        if os.path.isdir(candidate):
            candidate = candidate / DIRECTORY_INDEX

        if not os.path.isfile(candidate) or not _is_within(candidate, self.root):
            return None
        return candidate

    def fallback(self) -> Path:
        return self._index_path

    def lookup(self, url_path: str) -> Path:
        """Resolve a static asset, else return the fallback document."""
        asset = self.resolve_asset(url_path)
        if asset is not None:
            return asset
        logger.debug(f"No asset for '/{url_path}', serving {self._index_path.name}")
        return self.fallback()
