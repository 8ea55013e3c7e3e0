"""An HTTP transport that tags every request with the client's User-Agent."""

from __future__ import annotations

import copy
import urllib.request
from typing import Any, Callable

USER_AGENT = "GeoApiClient/0.1"

_HEADER = "User-agent"


def merge_user_agent(existing: str | None) -> str:
    """Return the User-Agent value with the client's own agent appended."""
    if not existing:
        return USER_AGENT
    return f"{existing};{USER_AGENT}"


def clone_request(request: urllib.request.Request) -> urllib.request.Request:
    """Shallow-copy a request, giving the copy its own header dictionaries."""
    clone = copy.copy(request)
    clone.headers = dict(request.headers)
    clone.unredirected_hdrs = dict(request.unredirected_hdrs)
    return clone


class UserAgentTransport:
    """Sends requests through ``base`` after adding the User-Agent header."""

    def __init__(
        self, base: Callable[[urllib.request.Request], Any] | None = None
    ) -> None:
        if isinstance(base, UserAgentTransport):
            base = base.base
        self.base = base if base is not None else urllib.request.urlopen

    def round_trip(self, request: urllib.request.Request) -> Any:
        """Send a copy of ``request`` carrying the merged User-Agent header."""
        request = clone_request(request)
        agent = merge_user_agent(request.get_header(_HEADER))
        request.unredirected_hdrs.pop(_HEADER, None)
        request.add_header(_HEADER, agent)
        return self.base(request)

    __call__ = round_trip