from typing import Any, Dict
from fastapi import Response
from fastapi.responses import JSONResponse

ALLOWED_METHODS = "POST,OPTIONS"
ALLOWED_HEADERS = "Content-Type"

# routes dispatch on the method themselves
ANY_METHOD = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def cors_headers(origin: str = "*") -> Dict[str, str]:
    return {
        "Access-Control-Allow-Origin": origin,
        "Access-Control-Allow-Methods": ALLOWED_METHODS,
        "Access-Control-Allow-Headers": ALLOWED_HEADERS,
    }


def json_response(status_code: int, payload: Any, origin: str = "*") -> JSONResponse:
    """JSON body with the CORS headers every handler response carries."""
    return JSONResponse(
        status_code=status_code,
        content=payload,
        headers=cors_headers(origin),
        media_type="application/json",
    )


def preflight_response(origin: str = "*") -> Response:
    # 204 must not carry a body or a content type
    return Response(status_code=204, headers=cors_headers(origin))
