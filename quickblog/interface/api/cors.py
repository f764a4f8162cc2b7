"""Open CORS policy.

The blog API is public: any origin may call it, preflight requests are
answered directly, and every response carries the same headers whether or
not the request had an Origin.
"""

from fastapi import FastAPI, Request, Response, status

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
}


def setup_cors(app: FastAPI) -> None:
    """Add the CORS middleware to the app.

    Args:
        app: FastAPI application
    """

    @app.middleware("http")
    async def add_cors_headers(request: Request, call_next) -> Response:
        if request.method == "OPTIONS":
            return Response(status_code=status.HTTP_200_OK, headers=CORS_HEADERS)

        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response
