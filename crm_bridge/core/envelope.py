"""Response Envelope: the uniform {ok, payload | error} shape every invocation returns.

Invariants:
    - Exactly one of payload / error is populated
    - payload is the CRM body pretty-printed as JSON (indent=2), never reshaped
    - Serialization is deterministic: same body -> byte-identical payload

Design Decisions:
    - Pydantic model over a bare dict: the one-of rule is enforced at construction
    - ensure_ascii=False: contact names and subjects stay readable for the host LLM
"""

import json
from typing import Any

from pydantic import BaseModel, model_validator


class ToolResponse(BaseModel):
    """Envelope returned by ToolDispatch.execute."""
    ok: bool
    payload: str | None = None
    error: str | None = None

    @model_validator(mode="after")
    def _exactly_one_side(self) -> "ToolResponse":
        if self.ok and (self.payload is None or self.error is not None):
            raise ValueError("successful response needs payload and no error")
        if not self.ok and (self.error is None or self.payload is not None):
            raise ValueError("failed response needs error and no payload")
        return self

    @classmethod
    def success(cls, data: Any) -> "ToolResponse":
        return cls(ok=True, payload=json.dumps(data, indent=2, ensure_ascii=False))

    @classmethod
    def failure(cls, message: str) -> "ToolResponse":
        return cls(ok=False, error=message)

    def to_text(self) -> str:
        """Text block handed to the transport."""
        if self.ok:
            return self.payload
        return f"Error: {self.error}"
