"""codeviz: file-level import dependency graphs for JavaScript/TypeScript projects."""

from __future__ import annotations

__version__ = "0.1.0"
