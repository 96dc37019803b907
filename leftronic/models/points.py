from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from leftronic.errors import EncodingError


@dataclass(frozen=True)
class Number:
    """Custom Number widget value. Forwarded as-is, no range checks."""

    value: int

    def to_payload(self) -> int:
        return self.value


@dataclass(frozen=True)
class GraphPoint:
    """
    Number plotted against an explicit time (epoch seconds).
    Without a timestamp the service stamps the point on arrival.
    """

    number: float
    timestamp: Optional[int] = None

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"number": self.number}
        if self.timestamp is not None:
            payload["timestamp"] = self.timestamp
        return payload


@dataclass(frozen=True)
class GeoPoint:
    """Custom Geo widget value. Out-of-range coordinates are left to the service."""

    lat: float
    lon: float

    def to_payload(self) -> Dict[str, float]:
        return {"lat": self.lat, "long": self.lon}


@dataclass(frozen=True)
class Text:
    """
    Custom Text widget value.

    imgUrl is dropped from the payload entirely when unset: the service treats
    an absent key differently from a present-but-empty one.
    """

    title: str
    message: str
    img_url: Optional[str] = None

    def to_payload(self) -> Dict[str, str]:
        payload = {"title": self.title, "message": self.message}
        if self.img_url is not None:
            payload["imgUrl"] = self.img_url
        return payload


@dataclass(frozen=True)
class LeaderboardEntry:
    name: str
    score: int

    def to_payload(self) -> Dict[str, Any]:
        return {"name": self.name, "value": self.score}


@dataclass(frozen=True)
class Leaderboard:
    entries: Tuple[LeaderboardEntry, ...] = field(default_factory=tuple)

    @classmethod
    def of(
        cls,
        entries: Iterable[Union[LeaderboardEntry, Tuple[str, int]]],
    ) -> "Leaderboard":
        """Build from entries or (name, score) pairs, keeping their order."""
        normalized = []
        for entry in entries:
            if not isinstance(entry, LeaderboardEntry):
                try:
                    name, score = entry
                except (TypeError, ValueError) as e:
                    raise EncodingError(
                        f"Leaderboard entry must be (name, score), got {entry!r}"
                    ) from e
                entry = LeaderboardEntry(name=name, score=score)
            normalized.append(entry)
        return cls(entries=tuple(normalized))

    def to_payload(self) -> List[Dict[str, Any]]:
        return [entry.to_payload() for entry in self.entries]


@dataclass(frozen=True)
class ListPayload:
    """Custom List widget value; each string is wrapped as {"name": ...}."""

    entries: Tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def of(cls, entries: Union[str, Iterable[str]]) -> "ListPayload":
        """A bare string is one entry, not one entry per character."""
        if isinstance(entries, str):
            return cls(entries=(entries,))
        return cls(entries=tuple(entries))

    def to_payload(self) -> List[Dict[str, str]]:
        return [{"name": entry} for entry in self.entries]


TypedValue = Union[Number, GraphPoint, GeoPoint, Text, Leaderboard, ListPayload]

TYPED_VALUES = (Number, GraphPoint, GeoPoint, Text, Leaderboard, ListPayload)


def widget_kind(value: Any) -> Optional[str]:
    """Return the widget kind name for a typed value, or None for raw payloads."""
    for kind, cls in _KINDS.items():
        if isinstance(value, cls):
            return kind
    return None


_KINDS = {
    "number": Number,
    "graph_point": GraphPoint,
    "geo_point": GeoPoint,
    "text": Text,
    "leaderboard": Leaderboard,
    "list": ListPayload,
}
