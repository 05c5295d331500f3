"""FastAPI routes for the codeviz analysis API."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel

from codeviz.models import AnalysisConfig, AnalysisError, CycleMode
from codeviz.pipeline import run_analysis

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


# --- Request models ---

class VisualizeRequest(BaseModel):
    path: str
    cycle_mode: CycleMode = CycleMode.BACK_EDGE
    extensions: list[str] | None = None
    exclude: list[str] | None = None
    index_names: list[str] | None = None


# --- Path safety ---

def _validate_path(p: str, allowed_root: Path | None) -> Path:
    """Ensure path exists, is a directory and sits under the allowed root."""
    resolved = Path(p).expanduser().resolve()
    if not resolved.exists():
        raise HTTPException(404, f"Path not found: {resolved}")
    if allowed_root is not None:
        root = allowed_root.resolve()
        if resolved != root and root not in resolved.parents:
            raise HTTPException(403, f"Path must be under {root}")
    if not resolved.is_dir():
        raise HTTPException(400, "Path must be a directory")
    return resolved


def _config_from(req: VisualizeRequest) -> AnalysisConfig:
    defaults = AnalysisConfig()
    return AnalysisConfig(
        source_extensions=tuple(req.extensions or defaults.source_extensions),
        excluded_dir_names=tuple(req.exclude or defaults.excluded_dir_names),
        index_base_names=tuple(req.index_names or defaults.index_base_names),
        cycle_mode=req.cycle_mode,
    )


# --- Endpoints ---

@router.get("/health")
async def health():
    return {"status": "ok"}


@router.post("/visualize")
async def visualize(req: VisualizeRequest, request: Request):
    source = _validate_path(req.path, request.app.state.allowed_root)
    config = _config_from(req)

    try:
        result = await asyncio.to_thread(run_analysis, source, config)
    except AnalysisError:
        logger.exception("analysis failed for %s", source)
        raise HTTPException(500, "Failed to analyze project.")

    return result.to_dict()
