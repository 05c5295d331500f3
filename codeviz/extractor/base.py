"""Abstract base import extractor."""

from __future__ import annotations

import abc
import logging
from pathlib import Path

from codeviz.models import ExtractionResult, ExtractionStatus

logger = logging.getLogger(__name__)


class BaseImportExtractor(abc.ABC):
    """Base class for dialect-specific import extractors."""

    @abc.abstractmethod
    def extract_source(self, source: bytes) -> ExtractionResult:
        """Return the static import specifiers found in ``source``."""

    def extract(self, path: Path, *, source: bytes | None = None) -> ExtractionResult:
        if source is None:
            try:
                source = path.read_bytes()
            except OSError as e:
                logger.debug("cannot read %s: %s", path, e)
                return ExtractionResult.failed(ExtractionStatus.UNREADABLE)
        result = self.extract_source(source)
        if result.status is ExtractionStatus.PARSE_FAILED:
            logger.debug("parse failed, no imports collected: %s", path)
        return result
