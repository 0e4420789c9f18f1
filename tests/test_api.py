import io
import json
from unittest.mock import patch

import pytest

from steam_optionx.api import APP_LIST_URL, app_names, parse_app_list


def _payload(*apps):
    return {"applist": {"apps": [{"appid": appid, "name": name} for appid, name in apps]}}


def test_parse_app_list_maps_ids_to_names():
    result = parse_app_list(_payload((730, "Counter-Strike 2"), (10, "Counter-Strike")))
    assert result == {10: "Counter-Strike", 730: "Counter-Strike 2"}
    assert list(result) == [10, 730]


def test_parse_app_list_later_duplicate_wins():
    result = parse_app_list(_payload((5, "first"), (5, "second")))
    assert result == {5: "second"}


def test_parse_app_list_empty():
    assert parse_app_list(_payload()) == {}


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"applist": {}},
        {"applist": {"apps": "nope"}},
        {"applist": {"apps": [{"appid": "7", "name": "x"}]}},
        {"applist": {"apps": [{"appid": -1, "name": "x"}]}},
        {"applist": {"apps": [{"appid": 2**32, "name": "x"}]}},
        {"applist": {"apps": [{"appid": 7}]}},
        {"applist": {"apps": [7]}},
        [],
    ],
)
def test_parse_app_list_rejects_malformed(payload):
    with pytest.raises(ValueError):
        parse_app_list(payload)


def test_app_names_fetches_and_parses():
    body = json.dumps(_payload((440, "Team Fortress 2"))).encode("utf-8")
    with patch("urllib.request.urlopen", return_value=io.BytesIO(body)) as urlopen:
        result = app_names()
    assert result == {440: "Team Fortress 2"}
    assert urlopen.call_args.args[0] == APP_LIST_URL


def test_app_names_rejects_invalid_json():
    with patch("urllib.request.urlopen", return_value=io.BytesIO(b"not json")):
        with pytest.raises(ValueError):
            app_names()