"""Search-path registry and executable lookup."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator

from loguru import logger

DEFAULT_SEARCH_PATH = ("/bin", "/usr/bin")


class SearchPath:
    """Ordered directories consulted to resolve a bare command name.

    Only the ``path`` built-in replaces the contents; earlier directories shadow
    later ones for identically named files.
    """

    def __init__(self, directories: Iterable[str] = DEFAULT_SEARCH_PATH) -> None:
        self._directories: list[str] = list(directories)

    @property
    def directories(self) -> list[str]:
        return list(self._directories)

    def replace(self, directories: Iterable[str]) -> None:
        """Discard every directory and install ``directories`` in order."""
        self._directories = list(directories)
        logger.debug("wish.path.replace directories={}", self._directories)

    def resolve(self, name: str) -> str | None:
        """Return the first ``directory/name`` with execute permission."""
        for directory in self._directories:
            candidate = f"{directory}/{name}"
            try:
                if os.access(candidate, os.X_OK):
                    return candidate
            except ValueError:
                # Embedded NUL: no file can have this name.
                return None
        return None

    def __iter__(self) -> Iterator[str]:
        return iter(self._directories)

    def __repr__(self) -> str:
        return f"SearchPath({self._directories!r})"
