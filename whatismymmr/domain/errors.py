"""Errors reported by the whatismymmr.com service."""
from typing import Any, Dict, Mapping, Optional


class WhatIsMyMMRError(Exception):
    """The service answered with a non-200 status and an ``error`` object.

    ``message`` and ``code`` are passed through exactly as the service sent
    them; either may be ``None`` if the error object omitted it.
    """

    def __init__(
        self,
        message: Optional[str],
        code: Optional[int],
        status_code: Optional[int] = None,
        raw: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.raw = raw

    @classmethod
    def from_body(cls, body: Any, status_code: Optional[int] = None) -> "WhatIsMyMMRError":
        """Extract the nested ``error`` object of a decoded response body.

        An ``error`` that is present but not an object (``{"error": "nope"}``)
        becomes the message as text, with no code. ``raw`` always holds the
        ``error`` value exactly as decoded.
        """
        error = body.get("error") if isinstance(body, Mapping) else None
        if isinstance(error, Mapping):
            return cls(error.get("message"), error.get("code"), status_code=status_code, raw=error)
        message = None if error is None else str(error)
        return cls(message, None, status_code=status_code, raw=error)

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message, "code": self.code}

    def __repr__(self) -> str:
        return f"WhatIsMyMMRError(message={self.message!r}, code={self.code!r})"
