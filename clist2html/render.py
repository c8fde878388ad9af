"""HTML rendering of parsed checklists."""

from __future__ import annotations

import re
from typing import Iterator, Mapping, Sequence

from .checklist import CheckLists, Item

_LONG_RULE = re.compile(r"([-_=]){3,}")
_DASHES_ONLY = re.compile(r"-*")


def encode(text: str) -> str:
    """Escape HTML specials and shorten long runs of rule characters."""
    text = text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")
    return _LONG_RULE.sub(r"\1\1\1", text)


def cell(
    text: str,
    colour_name: str,
    class_name: str,
    colspan: int,
    colours: Mapping[str, str],
) -> str:
    """Render one table cell."""
    colour = colours.get(colour_name, "") if colour_name else ""
    td = "<td "
    if colspan > 1:
        td += f"colspan={colspan} "
    if colour:
        td += f'bgcolor="{colour}" '
    if class_name:
        td += f'class="{class_name}" '
    body = encode(text) if text else "&nbsp;"
    return f"{td}>{body}</td>"


def _with_neighbours(
    items: Sequence[Item],
) -> Iterator[tuple[Item | None, Item, Item | None]]:
    previous = [None, *items[:-1]]
    following = [*items[1:], None]
    return zip(previous, items, following)


def _header(columns: int) -> list[str]:
    return [
        "<!DOCTYPE html>\n",
        "<html>\n",
        "<head>\n",
        "<style>\n",
        "html * {font-family: monospace; }\n",
        "table, th, td { border: 1px solid black; border-collapse: collapse; margin-bottom: 20px; }\n",
        "tr:nth-child(odd) { background-color: #eeeeee; }\n",
        ".title { font-size: 2em; }\n",
        f".checkListContainer {{ column-count: {columns}; }}\n",
        ".checkList { width: 90%; page-break-inside: avoid; }\n",
        ".checkListTitle { background-color: #000; color: #ffffff; font-size: 1.3em; }\n",
        ".itemInfo { text-align: center; }\n",
        ".itemTest { text-align: left; }\n",
        ".itemCheck { text-align: right ; width: 1%; white-space: nowrap; }\n",
        "</style>\n",
        "</head>\n",
        "<body>\n",
    ]


def render_html(checklists: CheckLists, columns: int = 2, title: str = "") -> str:
    """Render the whole document as a string."""
    out = _header(columns)
    if title:
        out.append(f'<h1 class="title">{title}</h1>\n')

    out.append('<div class="checkListContainer">\n')
    out.extend(f"<!-- {encode(comment)} -->\n" for comment in checklists.comments)

    colours = checklists.colours
    for checklist in checklists.checklists:
        out.append('<table class="checkList">\n')
        out.append(
            f'<tr><th colspan=2 class="checkListTitle">{encode(checklist.name)}</th></tr>\n'
        )
        for previous, item, following in _with_neighbours(checklist.items):
            out.append("<tr>")
            text = "" if _DASHES_ONLY.fullmatch(item.text) else item.text
            if item.check:
                out.append(
                    cell(text, item.text_colour, "itemText", 1, colours)
                    + cell(item.check, item.check_colour, "itemCheck", 1, colours)
                    + "\n"
                )
            else:
                skip = False
                if not text:
                    if previous is not None:
                        skip = not previous.check
                    if following is not None:
                        skip = skip or not following.check
                if not skip:
                    out.append(cell(text, item.text_colour, "itemInfo", 2, colours) + "\n")
            out.append("</tr>")
        out.append("</table>\n")

    out.append("</div></body></html>")
    return "".join(out)