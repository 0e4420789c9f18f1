"""Reading and writing Steam's text KeyValues (VDF) configuration files."""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum, auto
from os import PathLike
from pathlib import Path
from typing import TypeAlias, Union

OPTION = "LaunchOptions"
ROOT_NAME = "UserLocalConfigStore"
APPS_SECTION = ("Software", "Valve", "Steam", "apps")

VdfValue: TypeAlias = Union[str, dict[str, "VdfValue"]]

_QUOTED = re.compile(r'"((?:[^"\\]|\\.)*)"', re.DOTALL)
_BARE = re.compile(r'[^\s{}"]+')
_ESCAPE_SEQUENCE = re.compile(r"\\(.)", re.DOTALL)
_UNESCAPES = {"n": "\n", "t": "\t", "r": "\r", "\\": "\\", '"': '"'}
_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\t": "\\t", "\r": "\\r"}


class VdfError(ValueError):
    """Raised when a VDF document is malformed or lacks the expected layout."""


class _Kind(Enum):
    OPEN = auto()
    CLOSE = auto()
    STRING = auto()


@dataclass(frozen=True)
class _Lexeme:
    kind: _Kind
    text: str
    offset: int


def _unescape(body: str) -> str:
    return _ESCAPE_SEQUENCE.sub(lambda m: _UNESCAPES.get(m[1], m[0]), body)


def _tokenize(text: str) -> Iterator[_Lexeme]:
    pos = 0
    length = len(text)
    while pos < length:
        ch = text[pos]
        if ch.isspace():
            pos += 1
        elif text.startswith("//", pos):
            newline = text.find("\n", pos)
            pos = length if newline == -1 else newline + 1
        elif ch == "{":
            yield _Lexeme(_Kind.OPEN, ch, pos)
            pos += 1
        elif ch == "}":
            yield _Lexeme(_Kind.CLOSE, ch, pos)
            pos += 1
        elif ch == "[":
            # Platform conditionals such as [$WIN32] carry no data here.
            end = text.find("]", pos)
            if end == -1:
                raise VdfError(f"unterminated condition at offset {pos}")
            pos = end + 1
        elif ch == '"':
            match = _QUOTED.match(text, pos)
            if match is None:
                raise VdfError(f"unterminated string at offset {pos}")
            yield _Lexeme(_Kind.STRING, _unescape(match[1]), pos)
            pos = match.end()
        else:
            match = _BARE.match(text, pos)
            yield _Lexeme(_Kind.STRING, match.group(), pos)
            pos = match.end()


class _Parser:
    def __init__(self, text: str) -> None:
        self._lexemes = _tokenize(text)

    def _next(self, expected: str) -> _Lexeme:
        lexeme = next(self._lexemes, None)
        if lexeme is None:
            raise VdfError(f"unexpected end of input, expected {expected}")
        return lexeme

    def document(self) -> tuple[str, VdfValue]:
        head = self._next("a name")
        if head.kind is not _Kind.STRING:
            raise VdfError(f"expected a name at offset {head.offset}")
        value = self._value()
        extra = next(self._lexemes, None)
        if extra is not None:
            raise VdfError(f"unexpected {extra.text!r} at offset {extra.offset}")
        return head.text, value

    def _value(self) -> VdfValue:
        lexeme = self._next("a value")
        if lexeme.kind is _Kind.OPEN:
            return self._object()
        if lexeme.kind is _Kind.STRING:
            return lexeme.text
        raise VdfError(f"unexpected '}}' at offset {lexeme.offset}")

    def _object(self) -> dict[str, VdfValue]:
        result: dict[str, VdfValue] = {}
        while (lexeme := self._next("'}'")).kind is not _Kind.CLOSE:
            if lexeme.kind is not _Kind.STRING:
                raise VdfError(f"expected a name at offset {lexeme.offset}")
            result[lexeme.text] = self._value()
        return result


def loads(text: str) -> tuple[str, VdfValue]:
    """Parse a VDF document into its top-level name and value."""
    return _Parser(text).document()


def _quote(text: str) -> str:
    return '"' + "".join(_ESCAPES.get(ch, ch) for ch in text) + '"'


def _emit(lines: list[str], name: str, value: VdfValue, depth: int) -> None:
    indent = "\t" * depth
    if isinstance(value, Mapping):
        lines.append(f"{indent}{_quote(name)}")
        lines.append(f"{indent}{{")
        for child_name, child in value.items():
            _emit(lines, child_name, child, depth + 1)
        lines.append(f"{indent}}}")
    elif isinstance(value, str):
        lines.append(f"{indent}{_quote(name)}\t\t{_quote(value)}")
    else:
        raise TypeError(f"cannot serialize {type(value).__name__} as VDF")


def dumps(key: str, data: VdfValue) -> str:
    """Serialize a value under a top-level name as VDF text."""
    lines: list[str] = []
    _emit(lines, key, data, 0)
    return "\n".join(lines) + "\n"


def _apps_section(root: VdfValue) -> dict[str, VdfValue]:
    section = root
    for name in APPS_SECTION:
        if not isinstance(section, dict):
            raise VdfError(f"section {name!r} is not an object")
        try:
            section = section[name]
        except KeyError:
            raise VdfError(f"missing section {name!r}") from None
    if not isinstance(section, dict):
        raise VdfError("section 'apps' is not an object")
    return section


def _parse_appid(text: str) -> int:
    if not re.fullmatch(r"\+?[0-9]+", text, re.ASCII):
        raise VdfError(f"invalid app id {text!r}")
    appid = int(text)
    if appid >= 2**32:
        raise VdfError(f"app id {text!r} is out of range")
    return appid


def read(filename: str | PathLike[str]) -> dict[int, str]:
    """Return the launch options of every app in a localconfig.vdf, by app id."""
    _, root = loads(Path(filename).read_text(encoding="utf-8"))
    results: dict[int, str] = {}
    for appid, properties in _apps_section(root).items():
        if not isinstance(properties, dict):
            raise VdfError(f"app {appid!r} is not an object")
        launch_options = properties.get(OPTION, "")
        if not isinstance(launch_options, str):
            raise VdfError(f"{OPTION} of app {appid!r} is not a string")
        results[_parse_appid(appid)] = launch_options
    return dict(sorted(results.items()))


def write(filename: str | PathLike[str], all_launch_options: Mapping[int, str]) -> None:
    """Rewrite the launch options of the given apps in a localconfig.vdf.

    Each listed app's entry is replaced by one holding only its launch
    options, or left empty when the options are blank.
    """
    path = Path(filename)
    _, root = loads(path.read_text(encoding="utf-8"))
    apps = _apps_section(root)
    for appid, launch_options in sorted(all_launch_options.items()):
        apps[str(appid)] = {OPTION: launch_options} if launch_options.strip() else {}
    path.write_text(dumps(ROOT_NAME, root), encoding="utf-8", newline="\n")