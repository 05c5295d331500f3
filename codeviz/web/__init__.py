"""HTTP API for codeviz (requires the ``web`` extra)."""

from codeviz.web.app import create_app

__all__ = ["create_app"]
