from typing import Literal, Optional

from pydantic import BaseModel

ProviderStatus = Literal[
    "ok",
    "missing_key",
    "transport_error",
    "rate_limited",
    "rejected",
    "shape_mismatch",
    "empty",
]


class ProviderResponse(BaseModel):
    provider: str
    endpoint: str
    status: ProviderStatus = "ok"
    status_code: Optional[int] = None
    payload: Optional[list] = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"
