"""Generated output: one deliverable per URL.

A ``StaticWebsite`` is what ``generate()`` hands to whatever publishes
the site (an S3 upload, a directory writer, a test).
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True, slots=True)
class Deliverable:
    """The final response for one URL."""

    url: str
    headers: Mapping[str, str]
    body: bytes

    @property
    def text(self) -> str:
        """Body decoded as UTF-8."""
        return self.body.decode("utf-8")


@dataclass(frozen=True, slots=True)
class StaticWebsite:
    """Ordered, immutable collection of deliverables."""

    deliverables: tuple[Deliverable, ...] = ()
    _by_url: Mapping[str, Deliverable] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        by_url = {d.url: d for d in self.deliverables}
        object.__setattr__(self, "_by_url", MappingProxyType(by_url))

    def get(self, url: str) -> Deliverable | None:
        """Return the deliverable for *url*, or ``None``."""
        return self._by_url.get(url)

    @property
    def urls(self) -> tuple[str, ...]:
        return tuple(d.url for d in self.deliverables)

    def __iter__(self) -> Iterator[Deliverable]:
        return iter(self.deliverables)

    def __len__(self) -> int:
        return len(self.deliverables)
