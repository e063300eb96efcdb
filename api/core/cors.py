"""
CORS pre-filter.

Runs before routing. Every response gets the permissive CORS headers, and any
OPTIONS request is answered with 204 without reaching a route.
"""

from __future__ import annotations

from fastapi import FastAPI, Request, Response

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, GET, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


def install_cors(app: FastAPI) -> None:
    @app.middleware("http")
    async def cors_pre_filter(request: Request, call_next) -> Response:
        if request.method == "OPTIONS":
            response = Response(status_code=204)
        else:
            response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response
