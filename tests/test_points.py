"""Tests for widget value payload shapes."""
import dataclasses

import pytest

from leftronic.errors import EncodingError
from leftronic.models.points import (
    GeoPoint,
    GraphPoint,
    Leaderboard,
    LeaderboardEntry,
    ListPayload,
    Number,
    Text,
    widget_kind,
)


def test_number_is_forwarded_without_range_checks():
    assert Number(42).to_payload() == 42
    assert Number(-(2 ** 40)).to_payload() == -(2 ** 40)


def test_geo_point_uses_long_key_and_keeps_out_of_range_values():
    assert GeoPoint(123.5, -400.25).to_payload() == {"lat": 123.5, "long": -400.25}


def test_text_without_image_omits_img_url_key():
    payload = Text("Down", "Server unreachable").to_payload()
    assert payload == {"title": "Down", "message": "Server unreachable"}
    assert "imgUrl" not in payload


def test_text_with_image_includes_img_url():
    payload = Text("Down", "msg", "http://x/y.png").to_payload()
    assert payload == {"title": "Down", "message": "msg", "imgUrl": "http://x/y.png"}


def test_text_with_empty_image_keeps_key():
    assert Text("t", "m", "").to_payload()["imgUrl"] == ""


def test_graph_point_timestamp_is_optional():
    assert GraphPoint(1.5).to_payload() == {"number": 1.5}
    assert GraphPoint(1.5, 1700000000).to_payload() == {"number": 1.5, "timestamp": 1700000000}


def test_leaderboard_preserves_order_and_accepts_pairs():
    board = Leaderboard.of([("zed", 1), LeaderboardEntry("amy", 99), ("bob", 50)])
    assert board.to_payload() == [
        {"name": "zed", "value": 1},
        {"name": "amy", "value": 99},
        {"name": "bob", "value": 50},
    ]


def test_empty_leaderboard_is_empty_list():
    assert Leaderboard.of([]).to_payload() == []
    assert Leaderboard().to_payload() == []


def test_list_wraps_each_entry_in_order():
    payload = ListPayload.of(iter(["c", "a", "b"])).to_payload()
    assert payload == [{"name": "c"}, {"name": "a"}, {"name": "b"}]


def test_values_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        Number(1).value = 2


@pytest.mark.parametrize(
    "value,kind",
    [
        (Number(1), "number"),
        (GraphPoint(1.0), "graph_point"),
        (GeoPoint(0, 0), "geo_point"),
        (Text("a", "b"), "text"),
        (Leaderboard(), "leaderboard"),
        (ListPayload(), "list"),
        ({"custom": True}, None),
    ],
)
def test_widget_kind(value, kind):
    assert widget_kind(value) == kind


@pytest.mark.parametrize("bad", [("amy",), ("amy", 1, 2), 7, None])
def test_malformed_leaderboard_entry_raises_encoding_error(bad):
    with pytest.raises(EncodingError):
        Leaderboard.of([bad])


def test_bare_string_is_a_single_list_entry():
    assert ListPayload.of("deploy").to_payload() == [{"name": "deploy"}]
