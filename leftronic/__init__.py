"""
Leftronic push client.

Typed dashboard values are wrapped in an access-key/stream envelope and POSTed
to the customSend endpoint with bounded concurrency.
"""

from leftronic.client import AsyncLeftronicClient, LeftronicClient
from leftronic.errors import (
    ConfigError,
    EncodingError,
    LeftronicError,
    NetworkError,
    RemoteError,
)
from leftronic.models.points import (
    GeoPoint,
    GraphPoint,
    Leaderboard,
    LeaderboardEntry,
    ListPayload,
    Number,
    Text,
    TypedValue,
)
from leftronic.shared.config.client import LeftronicConfig, load_env_config

__version__ = "0.3.0"

__all__ = [
    "LeftronicClient",
    "AsyncLeftronicClient",
    "LeftronicConfig",
    "load_env_config",
    "LeftronicError",
    "ConfigError",
    "EncodingError",
    "NetworkError",
    "RemoteError",
    "Number",
    "GraphPoint",
    "GeoPoint",
    "Text",
    "Leaderboard",
    "LeaderboardEntry",
    "ListPayload",
    "TypedValue",
]
