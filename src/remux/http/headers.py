"""Request headers, decoded once from the ASGI scope.

The router never inspects headers; they are carried for handlers and
middleware. Names are folded to lower case when the request is built, so
every lookup after that is a single dict access.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping


class Headers(Mapping[str, str]):
    """Read-only header view keyed by lower-cased name.

    ``headers[name]`` is the first value sent for *name*; ``get_list``
    returns every value in arrival order.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, tuple[str, ...]] | None = None) -> None:
        self._values: dict[str, tuple[str, ...]] = dict(values or {})

    @classmethod
    def from_asgi(cls, raw: Iterable[tuple[bytes, bytes]]) -> Headers:
        """Group ASGI ``(name, value)`` byte pairs by lower-cased name."""
        grouped: dict[str, list[str]] = {}
        for name, value in raw:
            grouped.setdefault(name.decode("latin-1").lower(), []).append(value.decode("latin-1"))
        return cls({name: tuple(values) for name, values in grouped.items()})

    def __getitem__(self, key: str) -> str:
        return self._values[key.lower()][0]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Headers({self._values!r})"

    def get_list(self, key: str) -> list[str]:
        return list(self._values.get(key.lower(), ()))
