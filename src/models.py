"""
Request/Response shapes for the uppercase function

The payload contract is a single named field in each direction:

    request:  {"input": "Welcome to happy land!"}
    response: {"result": "WELCOME TO HAPPY LAND!"}

Both shapes are immutable and live for a single invocation.
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class Request:
    """Deserialized invocation payload."""

    input: str

    @classmethod
    def from_payload(cls, payload: Any) -> 'Request':
        """
        Build a Request from a decoded JSON payload.

        Args:
            payload: Decoded JSON body or direct invocation event

        Returns:
            Request: The validated request

        Raises:
            InvalidRequestError: If payload is not an object, or 'input'
                is absent, null, or not a string
        """
        if not isinstance(payload, dict):
            raise InvalidRequestError("Request body must be a JSON object")

        text = payload.get('input')
        if text is None:
            raise InvalidRequestError("Missing input field")
        if not isinstance(text, str):
            raise InvalidRequestError("Field 'input' must be a string")

        return cls(input=text)


@dataclass(frozen=True)
class Response:
    """Transformation output, serialized back to the caller."""

    result: str

    def to_payload(self) -> Dict[str, str]:
        return {'result': self.result}


class InvalidRequestError(Exception):
    """Raised when an invocation payload cannot produce a valid Request."""
    pass
