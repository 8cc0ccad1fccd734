"""Reader and writer for Java-style ``.properties`` files.

Follows the rules of ``java.util.Properties.load``/``store``: ``#`` and ``!``
comments, ``=``/``:``/whitespace separators, backslash line continuations and
``\\uXXXX`` escapes. Files are ISO-8859-1; anything outside printable ASCII is
written as a unicode escape, so the output is plain ASCII.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Dict, Iterator, Mapping, Optional


ENCODING = "latin-1"

_LINE_BREAK = re.compile(r"\r\n|\r|\n")
_WHITESPACE = " \t\f"
_SEPARATORS = "=:"
_DECODE_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_ENCODE_ESCAPES = {"\t": "\\t", "\n": "\\n", "\r": "\\r", "\f": "\\f"}


class PropertiesFormatError(ValueError):
    """Raised when property text contains an invalid escape sequence."""


def loads(text: str) -> Dict[str, str]:
    """Parse property-file text into a dict. Later duplicate keys win."""
    properties: Dict[str, str] = {}
    for line in _logical_lines(text):
        key, value = _split_entry(line)
        properties[_unescape(key)] = _unescape(value)
    return properties


def dumps(properties: Mapping[str, Optional[str]]) -> str:
    """Serialize a mapping as ``key=value`` lines, sorted by key, no header."""
    lines = [
        f"{_escape(str(key), escape_space=True)}={_escape(str(value), escape_space=False)}"
        for key, value in sorted(properties.items(), key=lambda item: str(item[0]))
        if value is not None
    ]
    return "".join(f"{line}\n" for line in lines)


def read_properties(path: Path) -> Dict[str, str]:
    with Path(path).open("r", encoding=ENCODING, newline="") as handle:
        return loads(handle.read())


def write_properties(path: Path, properties: Mapping[str, Optional[str]]) -> None:
    text = dumps(properties)
    with Path(path).open("w", encoding=ENCODING, newline="\n") as handle:
        handle.write(text)


def _logical_lines(text: str) -> Iterator[str]:
    pending: Optional[str] = None
    for raw in _LINE_BREAK.split(text):
        line = raw.lstrip(_WHITESPACE)
        if pending is None and (not line or line[0] in "#!"):
            continue
        trailing = len(line) - len(line.rstrip("\\"))
        if trailing % 2 == 1:
            pending = (pending or "") + line[:-1]
            continue
        yield (pending or "") + line
        pending = None
    if pending:
        yield pending


def _split_entry(line: str) -> tuple[str, str]:
    key_end = len(line)
    value_start = len(line)
    has_separator = False
    preceding_backslash = False
    for index, char in enumerate(line):
        if char in _SEPARATORS and not preceding_backslash:
            key_end, value_start, has_separator = index, index + 1, True
            break
        if char in _WHITESPACE and not preceding_backslash:
            key_end, value_start = index, index + 1
            break
        preceding_backslash = char == "\\" and not preceding_backslash

    while value_start < len(line):
        char = line[value_start]
        if char in _WHITESPACE:
            value_start += 1
        elif char in _SEPARATORS and not has_separator:
            has_separator = True
            value_start += 1
        else:
            break
    return line[:key_end], line[value_start:]


def _unescape(text: str) -> str:
    if "\\" not in text:
        return text
    out = []
    index = 0
    while index < len(text):
        char = text[index]
        index += 1
        if char != "\\":
            out.append(char)
            continue
        if index >= len(text):
            break
        char = text[index]
        index += 1
        if char == "u":
            digits = text[index:index + 4]
            if len(digits) < 4 or any(d not in "0123456789abcdefABCDEF" for d in digits):
                raise PropertiesFormatError(f"Malformed \\uxxxx encoding: \\u{digits}")
            out.append(chr(int(digits, 16)))
            index += 4
        else:
            out.append(_DECODE_ESCAPES.get(char, char))
    # \uXXXX pairs may spell a UTF-16 surrogate pair; fold them into one code point.
    return "".join(out).encode("utf-16-le", "surrogatepass").decode("utf-16-le", "surrogatepass")


def _escape(text: str, escape_space: bool) -> str:
    out = []
    for index, char in enumerate(text):
        code = ord(char)
        if char == "\\":
            out.append("\\\\")
        elif char == " ":
            out.append("\\ " if index == 0 or escape_space else " ")
        elif char in _ENCODE_ESCAPES:
            out.append(_ENCODE_ESCAPES[char])
        elif char in "=:#!":
            out.append("\\" + char)
        elif code < 0x20 or code > 0x7E:
            out.extend(f"\\u{unit:04X}" for unit in _utf16_units(char))
        else:
            out.append(char)
    return "".join(out)


def _utf16_units(char: str) -> list[int]:
    encoded = char.encode("utf-16-be", "surrogatepass")
    return [int.from_bytes(encoded[i:i + 2], "big") for i in range(0, len(encoded), 2)]
