"""
Tagged results of HTTP exchanges with the aggregator.

Every request made by the clients resolves to exactly one of ``ApiSuccess``
(2xx with a body to decode) or ``ApiFailure`` (any other status).
"""

import json
from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class ApiSuccess:
    """A 2xx response and its body."""
    status_code: int
    text: str

    def json(self) -> Any:
        """Parse the body as JSON.

        Raises:
            json.JSONDecodeError: If the body is not JSON
        """
        return json.loads(self.text)


@dataclass(frozen=True)
class ApiFailure:
    """A non-success response."""
    status_code: int
    text: str = ""


ApiResult = Union[ApiSuccess, ApiFailure]
