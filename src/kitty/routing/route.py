"""Route, Segment and RouteMatch frozen dataclasses."""

from dataclasses import dataclass

from kitty._internal.types import Handler
from kitty.routing.params import DecodeFallback

PARAM_PREFIX = ":"


@dataclass(frozen=True, slots=True)
class Literal:
    """A segment that must equal the request segment exactly.

    Compared against the escaped request text, case-sensitive.
    """

    text: str


@dataclass(frozen=True, slots=True)
class Parameter:
    """A ``:name`` segment. Matches any single request segment."""

    name: str


Segment = Literal | Parameter


def parse_segment(text: str) -> Segment:
    """``":key"`` -> ``Parameter("key")``, anything else -> ``Literal``."""
    if text.startswith(PARAM_PREFIX):
        return Parameter(text[len(PARAM_PREFIX) :])
    return Literal(text)


@dataclass(frozen=True, slots=True)
class Route:
    """A registered route. Created at registration, never mutated."""

    method: str
    path: str
    segments: tuple[Segment, ...]
    handler: Handler

    @property
    def param_names(self) -> tuple[str, ...]:
        return tuple(seg.name for seg in self.segments if isinstance(seg, Parameter))


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match.

    ``fallbacks`` records every captured segment that could not be
    percent-decoded and was bound as raw text instead.
    """

    route: Route
    path_params: dict[str, str]
    fallbacks: tuple[DecodeFallback, ...] = ()
