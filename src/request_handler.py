"""
Request Handler

Glue between the invocation shapes and the Transformation Service. The
transform is an explicit argument so callers (and tests) can swap it.
"""

from typing import Any, Callable, Dict

from models import Request, Response
from uppercase_service import to_upper


def handle_request(request: Request, transform: Callable[[str], str] = to_upper) -> Response:
    """Run transform over request.input and wrap the output."""
    return Response(result=transform(request.input))


def handle_payload(payload: Any, transform: Callable[[str], str] = to_upper) -> Dict[str, str]:
    """
    Full invocation path: deserialize, handle, serialize.

    Args:
        payload: Decoded JSON payload, e.g. {"input": "hello"}
        transform: Transformation applied to the input field

    Returns:
        dict: {"result": "<transformed text>"}

    Raises:
        InvalidRequestError: If the payload is not a valid request
    """
    request = Request.from_payload(payload)
    return handle_request(request, transform).to_payload()
