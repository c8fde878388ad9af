from clist2html.checklist import CheckList, CheckLists, Item
from clist2html.render import cell, encode, render_html


def test_encode_escapes_specials():
    assert encode("<a & b>") == "&lt;a &amp; b&gt;"


def test_encode_shortens_rules():
    assert encode("-" * 20) == "---"
    assert encode("=" * 5 + "x") == "===x"


def test_encode_leaves_short_runs():
    assert encode("a--b") == "a--b"


def test_cell_empty_text_is_nbsp():
    result = cell("", "", "itemInfo", 1, {})
    assert result.startswith("<td ")
    assert result.endswith(">&nbsp;</td>")
    assert 'class="itemInfo" ' in result


def test_cell_colspan_and_colour():
    result = cell("A", "red", "x", 2, {"red": "#ff0000"})
    assert "colspan=2 " in result
    assert 'bgcolor="#ff0000" ' in result
    assert result.endswith(">A</td>")


def test_cell_unknown_colour_has_no_bgcolor():
    result = cell("A", "blue", "", 1, {"red": "#ff0000"})
    assert "bgcolor" not in result
    assert "colspan" not in result
    assert "class=" not in result


def test_cell_encodes_text():
    assert cell("a<b", "", "", 1, {}).endswith(">" + encode("a<b") + "</td>")


def _doc(items, **kwargs):
    lists = CheckLists(checklists=[CheckList(name="Start", items=items)], comments=["c <1>"])
    return render_html(lists, **kwargs)


def test_render_structure():
    html = _doc([Item(text="BATTERY", check="ON")], columns=3, title="My Lists")
    assert html.startswith("<!DOCTYPE html>\n")
    assert html.endswith("</div></body></html>")
    assert "column-count: 3;" in html
    assert '<h1 class="title">My Lists</h1>' in html
    assert "<!-- " + encode("c <1>") + " -->" in html
    assert "Start</th></tr>" in html
    assert 'class="itemText" >BATTERY</td>' in html
    assert 'class="itemCheck" >ON</td>' in html


def test_render_without_title_has_no_heading():
    assert "<h1" not in _doc([])


def test_info_item_spans_two_columns():
    html = _doc([Item(text="NOTE")])
    assert 'colspan=2 class="itemInfo" >NOTE</td>' in html


def test_blank_between_checked_rows_is_kept():
    items = [Item(text="A", check="1"), Item(text=""), Item(text="B", check="2")]
    html = _doc(items)
    assert ">&nbsp;</td>" in html