"""Map relative import specifiers to project files."""

from __future__ import annotations

import posixpath
from collections.abc import Collection

from codeviz.models import AnalysisConfig


def is_relative(specifier: str) -> bool:
    return specifier.startswith(".")


class ModuleResolver:
    """Resolve specifiers against a fixed set of known file keys.

    Candidate order is: the joined path verbatim, then with each source
    extension appended, then as a directory holding an index file. The
    first known key wins.
    """

    def __init__(self, known_keys: Collection[str], config: AnalysisConfig | None = None):
        config = config or AnalysisConfig()
        self.known_keys = known_keys if isinstance(known_keys, (set, frozenset, dict)) else set(known_keys)
        self.extensions = config.source_extensions
        self.index_files = tuple(
            f"{base}{ext}"
            for base in config.index_base_names
            for ext in config.source_extensions
        )

    def candidates(self, importer: str, specifier: str) -> list[str]:
        base = posixpath.normpath(posixpath.join(posixpath.dirname(importer), specifier))
        # The project root itself can only be imported through its index file
        if base == ".":
            return list(self.index_files)
        out: list[str] = []
        # "./util/" can only name a directory
        if not specifier.endswith("/"):
            out.append(base)
            out.extend(f"{base}{ext}" for ext in self.extensions)
        out.extend(posixpath.join(base, name) for name in self.index_files)
        return out

    def resolve(self, importer: str, specifier: str) -> str | None:
        """Return the project key ``specifier`` points at, or None."""
        if not is_relative(specifier):
            return None
        for candidate in self.candidates(importer, specifier):
            if candidate in self.known_keys:
                return candidate
        return None
