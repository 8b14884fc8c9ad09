from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional

from spike_api.errors import SpikeError


@dataclass(frozen=True)
class ApiResult:
    """Outcome of one operation: an error, a decoded body, or both.

    API errors (status >= 400) carry both the error and the decoded error
    payload. Transport and validation errors carry no body.

    Unpacks like a completion pair::

        error, body = await client.get_charge("ch_xxx")
    """

    error: Optional[SpikeError] = None
    body: Any = None
    status_code: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        """Return the body, raising the error if there is one."""
        if self.error is not None:
            raise self.error
        return self.body

    def __iter__(self) -> Iterator[Any]:
        yield self.error
        yield self.body
