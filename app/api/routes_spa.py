"""Catch-all route serving the built single-page application."""

import logging
from urllib.parse import quote

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import FileResponse, RedirectResponse

from app.static.gateway import StaticGateway

logger = logging.getLogger(__name__)

router = APIRouter(tags=["spa"])

OTHER_METHODS = ["POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def get_gateway(request: Request) -> StaticGateway:
    return request.app.state.gateway


@router.api_route("/{full_path:path}", methods=["GET", "HEAD"])
async def serve_spa(
    full_path: str,
    request: Request,
    gateway: StaticGateway = Depends(get_gateway),
):
    """Serve the requested file, or the SPA entry point for unknown routes.

    Content type is inferred from the file extension. A directory asked
    for without a trailing slash is redirected to its slash form so
    relative URLs in its index resolve against the directory.
    """
    if gateway.is_directory(full_path):
        location = quote(f"/{full_path}/")
        if request.url.query:
            location = f"{location}?{request.url.query}"
        return RedirectResponse(location, status_code=301)

    target = gateway.lookup(full_path)
    if not target.is_file():
        logger.warning(f"Fallback document not found: {target}")
        raise HTTPException(status_code=404, detail="Not Found")
    return FileResponse(target)


@router.api_route("/{full_path:path}", methods=OTHER_METHODS)
async def reject_method(full_path: str, request: Request):
    """Only retrieval is routed; everything else is not found."""
    raise HTTPException(status_code=404, detail=f"Cannot {request.method} /{full_path}")
