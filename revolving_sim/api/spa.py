"""Static host for the compiled frontend with single-page-app fallback"""

from pathlib import Path
from fastapi import FastAPI, Request
from fastapi.responses import FileResponse, JSONResponse

INDEX_DOCUMENT = "index.html"


class FrontendBundleMissingError(Exception):
    """Static bundle directory has no index document to serve"""

    pass


def resolve_static_path(static_dir: Path, requested: str) -> Path:
    """
    Map a request path to a file in the bundle.

    Existing files inside static_dir are served directly. Anything else,
    including paths escaping static_dir or paths the filesystem rejects,
    falls back to the index document so client-side routing can handle it.
    """
    root = static_dir.resolve()
    index = root / INDEX_DOCUMENT

    if requested:
        try:
            candidate = (root / requested).resolve()
            if candidate.is_relative_to(root) and candidate.is_file():
                return candidate
        except (ValueError, OSError):
            # e.g. embedded null byte, name too long
            pass

    if not index.is_file():
        raise FrontendBundleMissingError(f"No {INDEX_DOCUMENT} in {root}")

    return index


def register_spa(app: FastAPI, static_dir: Path) -> None:
    """Register the catch-all route; must run after every API router"""

    @app.exception_handler(FrontendBundleMissingError)
    async def bundle_missing_handler(request: Request, exc: FrontendBundleMissingError):
        return JSONResponse(status_code=404, content={"detail": "Frontend bundle not found"})

    @app.get("/{full_path:path}", include_in_schema=False)
    def serve_frontend(full_path: str):
        return FileResponse(resolve_static_path(static_dir, full_path))
