from __future__ import annotations

from dataclasses import dataclass

from leftronic.errors import RemoteError

SUCCESS_STATUS = 200


@dataclass(frozen=True)
class DispatchResult:
    """Status and body of a completed request; the HTTP response is already released."""

    status_code: int
    body: str

    @property
    def ok(self) -> bool:
        return self.status_code == SUCCESS_STATUS


def classify(result: DispatchResult) -> DispatchResult:
    """
    Binary classification: exactly 200 is success, every other status
    (redirects, 4xx and 5xx alike) raises RemoteError.
    """
    if not result.ok:
        raise RemoteError(result.status_code, result.body)
    return result
