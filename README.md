# clist2html

Turn a checklist file into a single HTML page with one table per
checklist, ready to view in a browser or print.

## Installation

```
pip install .
```

No third-party libraries are needed. To run the tests, install the `test`
extra (`pip install .[test]`) and run `pytest`.

## Usage

```
clist2html [options] <filename>
```

Options:

- `-c`, `--columns <n>`: how many columns the checklists are laid out in (default 2)
- `-t`, `--title <title>`: a heading shown at the top of the page
- `-o`, `--output <filename>`: where the HTML is written. If you leave it out,
  everything after the last `.` in the input path is replaced with `html`, so
  `checklist.txt` gives `checklist.html`. A path with no `.` gets `.html` added.
- `-h`, `--help`: print the usage text to standard error and exit with status 0

Example:

```
clist2html --columns 3 --title "Preflight" checklist.txt
```

The exit status is 0 on success. It is 1 when an option is not recognised,
when no input file is given, when the input has an unknown command or another
error, or when the output file cannot be written. An input file that cannot
be opened is reported on standard error and treated as empty.

## Input format

Each line is a command, with its fields separated by `:`. Fields are trimmed
of surrounding whitespace and empty fields are dropped. A leading UTF-8 byte
order mark is ignored.

- `sw_checklist:<id>[:<name>]` starts a new checklist. The checklist is
  headed by its name, or by its id if it has no name.
- `sw_item:<text>|<check>`, `sw_iteminfo:...` and `sw_remark:...` add a row
  to the current checklist. A row with a check value is shown as two cells;
  one without is shown as a single centred cell across both columns.
- `sw_itemvoid:...` adds a row made from every field after the command, joined
  with spaces.
- `sw_item_c` and `sw_itemvoid_c` work like `sw_item` and `sw_itemvoid`, but
  the text or the check may begin with `\colour\` to colour its cell. Other
  `\name\` markers inside the text are removed.
- `sw_define_colour:<name>:<r>,<g>,<b>` defines a colour. The channels are
  numbers from 0 to 1. If a name is defined twice, the first definition is kept.
- `sw_continue...`, `sw_rcolsize...` and `sw_show` are accepted and ignored.
- Lines that start with `#` are comments. They are copied into the page as
  HTML comments, except those whose text begins with `sw_`.

Any other command is an error, and so is an item that comes before the first
`sw_checklist`.

In the page, `&`, `<` and `>` are escaped, and runs of three or more `-`, `_`
or `=` are shortened to three. Row text made only of dashes is shown as a
blank row; a blank row that sits next to another row without a check value
is left empty.

## Library use

```python
from clist2html.checklist import read_checklists
from clist2html.render import render_html

lists = read_checklists("checklist.txt")
html = render_html(lists, 2, "Preflight")
```

- `clist2html.checklist`: `read_checklists(path)` and `parse_lines(lines)`
  return a `CheckLists` holding `checklists` (a list of `CheckList`, each with
  a `name` and `items` of `Item`), `colours` and `comments`. An unrecognised
  command raises `UnknownCommandError`, a subclass of `ValueError`.
- `clist2html.render`: `render_html(checklists, columns, title)` returns the
  page as a string; `cell(...)` and `encode(text)` build single cells and
  escaped text.
- `clist2html.textutils`: `read_text_file(path, split)` returns `Line`
  objects; `trim`, `split_string` and `join_to_end` are the text helpers
  the parser uses.
- `clist2html.cli`: `main(argv)` runs the command and returns its exit
  status; `default_output_path(input_path)` gives the default output name.