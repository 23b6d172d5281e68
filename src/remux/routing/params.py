"""Path parameters captured by a pattern route.

A ``Params`` carrier is built once per successful pattern match and stored
in ``Request.context``. Handlers read it back with ``get_params``.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from remux.errors import NoParameters
from remux.http.request import Request

# Private key under which the carrier lives in Request.context
PARAMS_KEY = "remux.params"


@dataclass(frozen=True, slots=True)
class Params:
    """Named and positional captures from a pattern match.

    ``named`` maps each named group to its substring. ``positional`` holds
    every group, named or not, in declaration order: index 0 is the first
    group, not the whole match. Groups that did not take part in the match
    contribute an empty string.
    """

    named: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    positional: tuple[str, ...] = ()

    @classmethod
    def from_match(cls, match: re.Match[str]) -> "Params":
        return cls(
            named=MappingProxyType(match.groupdict(default="")),
            positional=match.groups(default=""),
        )

    def __getitem__(self, key: str | int) -> str:
        """``params["id"]`` reads a named group, ``params[0]`` a positional one."""
        if isinstance(key, int):
            return self.positional[key]
        return self.named[key]


def get_params(request: Request) -> Params:
    """Return the parameters attached to *request* by a pattern match.

    Raises ``NoParameters`` when the request was resolved by an exact route
    or by the fallback. That is the expected outcome for such requests.
    """
    params = request.context.get(PARAMS_KEY)
    if not isinstance(params, Params):
        raise NoParameters
    return params
