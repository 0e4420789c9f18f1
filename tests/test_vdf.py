import pytest

from steam_optionx.vdf import VdfError, dumps, loads, read, write

SAMPLE = """\
"UserLocalConfigStore"
{
\t// user settings
\t"friends"
\t{
\t\t"name"\t\t"someone"
\t}
\t"Software"
\t{
\t\t"Valve"
\t\t{
\t\t\t"Steam"
\t\t\t{
\t\t\t\t"apps"
\t\t\t\t{
\t\t\t\t\t"730"
\t\t\t\t\t{
\t\t\t\t\t\t"LastPlayed"\t\t"123"
\t\t\t\t\t}
\t\t\t\t\t"570"
\t\t\t\t\t{
\t\t\t\t\t\t"LaunchOptions"\t\t"-novid"
\t\t\t\t\t\t"Playtime"\t\t"42"
\t\t\t\t\t}
\t\t\t\t}
\t\t\t\t"other"\t\t"kept"
\t\t\t}
\t\t}
\t}
}
"""


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "localconfig.vdf"
    path.write_text(SAMPLE, encoding="utf-8")
    return path


def test_loads_nested_document():
    key, data = loads(SAMPLE)
    assert key == "UserLocalConfigStore"
    assert data["Software"]["Valve"]["Steam"]["apps"]["570"]["LaunchOptions"] == "-novid"
    assert data["friends"] == {"name": "someone"}


def test_loads_unquoted_tokens_and_comments():
    text = 'root { key value // trailing comment\n "a" "b" }'
    assert loads(text) == ("root", {"key": "value", "a": "b"})


def test_loads_skips_conditionals():
    assert loads('"r" { "a" "b" [$WIN32] }') == ("r", {"a": "b"})


def test_escapes_round_trip():
    data = {"path": 'C:\\Games\\"quoted"\n\tend', "nested": {"empty": ""}}
    assert loads(dumps("k", data)) == ("k", data)


def test_dumps_layout():
    text = dumps("A", {"b": "c", "d": {}})
    assert text == '"A"\n{\n\t"b"\t\t"c"\n\t"d"\n\t{\n\t}\n}\n'


def test_dumps_rejects_unsupported_values():
    with pytest.raises(TypeError):
        dumps("A", {"b": 3})


@pytest.mark.parametrize(
    "text",
    ['"a" { "b" "c"', '"a" "b', '"a" { } extra', '"a" }', "", '"a" { "b" }', "{ }"],
)
def test_loads_rejects_malformed(text):
    with pytest.raises(VdfError):
        loads(text)


def test_read_launch_options(config_file):
    result = read(config_file)
    assert result == {570: "-novid", 730: ""}
    assert list(result) == sorted(result)


def test_read_rejects_non_numeric_app_id(tmp_path):
    path = tmp_path / "bad.vdf"
    path.write_text(SAMPLE.replace('"730"', '"abc"'), encoding="utf-8")
    with pytest.raises(VdfError):
        read(path)


def test_read_rejects_missing_apps_section(tmp_path):
    path = tmp_path / "bad.vdf"
    path.write_text('"UserLocalConfigStore" { "Software" { } }', encoding="utf-8")
    with pytest.raises(VdfError):
        read(path)


def test_read_rejects_non_string_launch_options(tmp_path):
    path = tmp_path / "bad.vdf"
    path.write_text(
        '"S" { "Software" { "Valve" { "Steam" { "apps" { "1" { "LaunchOptions" { } } } } } } }',
        encoding="utf-8",
    )
    with pytest.raises(VdfError):
        read(path)


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read(tmp_path / "absent.vdf")


def test_write_then_read(config_file):
    write(config_file, {570: "", 730: "-high", 440: "-fullscreen"})
    assert read(config_file) == {440: "-fullscreen", 570: "", 730: "-high"}


def test_write_replaces_entries_and_keeps_other_sections(config_file):
    write(config_file, {570: "   ", 730: "-high"})
    key, data = loads(config_file.read_text(encoding="utf-8"))
    assert key == "UserLocalConfigStore"
    apps = data["Software"]["Valve"]["Steam"]["apps"]
    assert apps["730"] == {"LaunchOptions": "-high"}
    assert apps["570"] == {}
    assert data["Software"]["Valve"]["Steam"]["other"] == "kept"
    assert data["friends"] == {"name": "someone"}


def test_write_leaves_unlisted_apps_alone(config_file):
    write(config_file, {730: "-high"})
    _, data = loads(config_file.read_text(encoding="utf-8"))
    apps = data["Software"]["Valve"]["Steam"]["apps"]
    assert apps["570"] == {"LaunchOptions": "-novid", "Playtime": "42"}


def test_write_uses_standard_top_level_key(tmp_path):
    path = tmp_path / "renamed.vdf"
    path.write_text(SAMPLE.replace("UserLocalConfigStore", "Other"), encoding="utf-8")
    write(path, {570: "-novid"})
    key, _ = loads(path.read_text(encoding="utf-8"))
    assert key == "UserLocalConfigStore"