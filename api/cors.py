"""
CORS headers shared by every function endpoint.

Browsers call the functions straight from the evaluation page, so preflight
requests are answered by the routes themselves with this fixed header set.
"""

from fastapi import Response

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}


def preflight_response() -> Response:
    """Empty 200 answer for OPTIONS requests."""
    return Response(status_code=200, headers=CORS_HEADERS)
