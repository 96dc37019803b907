"""Tests for the leftronic-send command."""
import httpx
import pytest

from leftronic.cli import main

from conftest import RecordingHandler


@pytest.fixture
def env(clean_env, tmp_path):
    clean_env.setenv("LEFTRONIC_ACCESS_KEY", "abc")
    clean_env.setenv("LEFTRONIC_MAX_CONCURRENCY", "1")
    return str(tmp_path / "missing.env")


def _run(env_file, handler, *argv):
    return main(["--env-file", env_file, *argv], transport=httpx.MockTransport(handler))


def test_number(env):
    handler = RecordingHandler()
    assert _run(env, handler, "number", "sales", "42") == 0
    assert handler.documents() == [{"accessKey": "abc", "name": "sales", "value": 42}]


def test_text_with_image(env):
    handler = RecordingHandler()
    assert _run(env, handler, "text", "alerts", "Down", "msg", "--img-url", "http://x/y.png") == 0
    assert handler.documents()[0]["value"]["imgUrl"] == "http://x/y.png"


def test_leaderboard_pairs(env):
    handler = RecordingHandler()
    assert _run(env, handler, "leaderboard", "top", "amy=3", "bob=2") == 0
    assert handler.documents()[0]["value"] == [
        {"name": "amy", "value": 3},
        {"name": "bob", "value": 2},
    ]


def test_leaderboard_rejects_malformed_pair(env):
    with pytest.raises(SystemExit):
        _run(env, RecordingHandler(), "leaderboard", "top", "amy")


def test_geo_list_and_command(env):
    handler = RecordingHandler()
    assert _run(env, handler, "geo", "map", "1.5", "-2.5") == 0
    assert _run(env, handler, "list", "todo", "a", "b") == 0
    assert _run(env, handler, "command", "board", "clear") == 0

    geo, items, command = handler.documents()
    assert geo["value"] == {"lat": 1.5, "long": -2.5}
    assert items["value"] == [{"name": "a"}, {"name": "b"}]
    assert command["command"] == "clear"


def test_remote_failure_exit_code(env, capsys):
    handler = RecordingHandler(status=500, body="boom")
    assert _run(env, handler, "number", "sales", "1") == 1
    assert "HTTP 500" in capsys.readouterr().err


def test_missing_config_exit_code(clean_env, tmp_path, capsys):
    handler = RecordingHandler()
    assert _run(str(tmp_path / "missing.env"), handler, "number", "sales", "1") == 1
    assert "LEFTRONIC_ACCESS_KEY" in capsys.readouterr().err
    assert handler.requests == []
