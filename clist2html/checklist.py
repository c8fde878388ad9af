"""Parsing of checklist source files into checklists, colours and comments."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from .textutils import Line, join_to_end, read_text_file, split_string

_ITEM_COMMANDS = frozenset(
    {
        "sw_item",
        "sw_item_c",
        "sw_iteminfo",
        "sw_itemvoid",
        "sw_itemvoid_c",
        "sw_remark",
    }
)

_INLINE_COLOUR = re.compile(r"\\[a-z]*\\")
_FLOAT_PREFIX = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class UnknownCommandError(ValueError):
    """Raised when a line starts with a command that is not recognised."""

    def __init__(self, command: str) -> None:
        super().__init__(f"Unknown command: {command}")
        self.command = command


@dataclass
class Item:
    """One row of a checklist."""

    text: str = ""
    text_colour: str = ""
    check: str = ""
    check_colour: str = ""
    comment: str = ""

    def has_text(self) -> bool:
        """True if the item has either text or a check value."""
        return bool(self.text or self.check)


@dataclass
class CheckList:
    """A named list of items."""

    name: str = ""
    items: list[Item] = field(default_factory=list)


@dataclass
class CheckLists:
    """Everything read from one source file."""

    checklists: list[CheckList] = field(default_factory=list)
    colours: dict[str, str] = field(default_factory=dict)
    comments: list[str] = field(default_factory=list)


def _split_colour(text: str) -> tuple[str, str]:
    """Separate a leading ``\\colour\\`` marker; drop any inline markers."""
    if not text.startswith("\\"):
        return text, ""
    text = text[1:]
    colour = ""
    name, sep, rest = text.partition("\\")
    if sep:
        colour, text = name, rest
    return _INLINE_COLOUR.sub("", text), colour


def _parse_item(command: str, tokens: list[str]) -> Item | None:
    if len(tokens) < 2:
        return None
    textline = join_to_end(tokens, 1) if command.startswith("sw_itemvoid") else tokens[1]
    parts = split_string(textline, "|")
    if not parts:
        return None
    item = Item(text=parts[0], check=parts[1] if len(parts) > 1 else "")
    if command.endswith("_c"):
        item.text, item.text_colour = _split_colour(item.text)
        item.check, item.check_colour = _split_colour(item.check)
    return item


def _atof(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    return float(match.group()) if match else 0.0


def _hex_colour(rgb: str) -> str:
    parts = split_string(rgb, ",")
    if len(parts) < 3:
        raise ValueError(f"Colour needs three components: {rgb}")
    channels = (int(_atof(part) * 255.0) for part in parts[:3])
    return "#" + "".join(f"{value & 0xFFFFFFFF:02x}" for value in channels)


def parse_lines(lines: Iterable[Line]) -> CheckLists:
    """Build checklists from already split lines."""
    result = CheckLists()
    current: CheckList | None = None

    for line in lines:
        tokens = line.tokens
        if not tokens:
            continue
        command = tokens[0]

        if command == "sw_checklist":
            if len(tokens) < 2:
                raise ValueError("sw_checklist needs an identifier")
            current = CheckList(name=tokens[2] if len(tokens) > 2 else tokens[1])
            result.checklists.append(current)
        elif command in _ITEM_COMMANDS:
            item = _parse_item(command, tokens)
            if item is None:
                continue
            if current is None:
                raise ValueError(f"{command} appears before any sw_checklist")
            current.items.append(item)
        elif command == "sw_define_colour":
            if len(tokens) == 3:
                result.colours.setdefault(tokens[1], _hex_colour(tokens[2]))
        elif (
            command.startswith("sw_continue")
            or command.startswith("sw_rcolsize")
            or command == "sw_show"
        ):
            pass
        elif command.startswith("#"):
            comment = line.line[1:]
            if not comment.startswith("sw_"):
                result.comments.append(comment)
        else:
            raise UnknownCommandError(command)

    return result


def read_checklists(path: str | Path) -> CheckLists:
    """Read and parse a checklist source file."""
    return parse_lines(read_text_file(path, True))