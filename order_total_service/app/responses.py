from fastapi import Response

from .models import ErrorEnvelope

# CORS headers sent with every /compute response.
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "api,Keep-Alive,User-Agent,Content-Type",
}


def build_response(body: str, status_code: int = 200, media_type: str = "application/json") -> Response:
    """Wrap a body as-is with the CORS headers."""
    return Response(
        content=body,
        status_code=status_code,
        headers=CORS_HEADERS,
        media_type=media_type if body else None,
    )


def error_response(message: str, status_code: int = 200) -> Response:
    """Error envelope; domain failures still answer 200."""
    envelope = ErrorEnvelope(message=message)
    return build_response(envelope.model_dump_json(), status_code=status_code)
