from unittest import mock
from urllib.error import URLError

import pytest

from steam_optionx.gui import STORE_URL, main, store_url


def test_store_url_points_at_store_page():
    assert store_url(10) == "https://store.steampowered.com/app/10"


def test_store_url_starts_with_store_prefix():
    url = store_url(4000)
    assert url.startswith(STORE_URL)
    assert url.endswith("/4000")


def test_main_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0
    assert "launch options" in capsys.readouterr().out


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit) as excinfo:
        main(["--no-such-option"])
    assert excinfo.value.code == 2


def test_main_reports_api_failure():
    with mock.patch("urllib.request.urlopen", side_effect=URLError("offline")):
        with pytest.raises(SystemExit) as excinfo:
            main([])
    assert "Error getting Steam apps from Steam API" in str(excinfo.value.code)