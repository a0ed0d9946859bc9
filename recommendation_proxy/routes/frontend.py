"""
Static frontend serving for single-host deployments.

In production the pre-built frontend bundle (STATIC_DIR) can be served by
this process: real files are returned as-is and every other GET path falls
back to index.html so client-side routing works.
"""

import logging
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, FastAPI, HTTPException, status
from fastapi.responses import FileResponse

logger = logging.getLogger(__name__)

INDEX_FILE = "index.html"


def resolve_static_file(static_dir: Path, requested: str) -> Optional[Path]:
    """
    Map a request path to a file inside static_dir.

    Returns None when the path does not name an existing file or escapes the
    bundle directory.
    """
    root = static_dir.resolve()
    candidate = (root / requested).resolve()
    if root != candidate and root not in candidate.parents:
        return None
    if candidate.is_file():
        return candidate
    return None


def build_frontend_router(static_dir: Path) -> APIRouter:
    router = APIRouter(include_in_schema=False)
    index_file = static_dir / INDEX_FILE

    @router.get("/{full_path:path}")
    async def serve_frontend(full_path: str) -> FileResponse:
        if full_path.startswith("api/"):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
        static_file = resolve_static_file(static_dir, full_path) if full_path else None
        return FileResponse(static_file or index_file)

    return router


def mount_frontend(app: FastAPI, static_dir: str) -> bool:
    """
    Register the frontend fallback route if the bundle exists.

    Must be called after every API router so the catch-all comes last.

    Returns:
        True if the bundle was found and mounted.
    """
    bundle = Path(static_dir)
    if not (bundle / INDEX_FILE).is_file():
        logger.warning(f"Static frontend not found at '{bundle}', serving API only")
        return False

    app.include_router(build_frontend_router(bundle))
    logger.info(f"Serving static frontend from '{bundle}'")
    return True
