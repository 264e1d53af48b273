# h2m

A small command-line tool that converts Markdown files to HTML and HTML files
back to Markdown.

## Installation

```
pip install .
```

This installs the `h2m` command.

## Usage

Convert a Markdown document to HTML:

```
h2m md2html -i document.md -o result.html
```

Convert an HTML page to Markdown:

```
h2m html2md -i page.html -o result.md
```

The commands also answer to the longer names `markdown-to-html` and
`html-to-markdown`. The `-i/--input` and `-o/--output` options may be given
before or after the command name.

If `-i/--input` or `-o/--output` is missing, you are asked for the path on
standard input. The input file must end in `.md` for `md2html` and in `.html`
for `html2md`, and the output file must end in the other extension; any other
path stops the program with an error. Read, conversion and write failures stop
it the same way. On success the output file is written and a confirmation
line is printed.

Before running a command, `h2m` prints its banner with the features and
examples. While a file is being converted, a spinner is drawn if standard
output is a terminal.

If you run `h2m` with no arguments, it starts an interactive prompt. Type a
command such as `md2html -i notes.md -o notes.html` at the `H2M>` prompt;
type `exit`, end the input, or press Ctrl+C to leave.

`h2m --help` lists the commands and options, and `h2m --version` prints the
version.

Colours are used only when standard output is a terminal, and are turned off
when `NO_COLOR` is set or `TERM` is `dumb`.

## What the conversions cover

- Markdown to HTML follows CommonMark. Raw HTML inside the Markdown is escaped
  rather than passed through.
- HTML to Markdown handles headings, paragraphs and other block containers,
  bold and italic text, links, images, ordered and unordered lists,
  blockquotes, inline code, preformatted blocks (written as indented code),
  line breaks and horizontal rules. The contents of `script`, `style`, `head`,
  `noscript` and `template` are dropped; other tags keep only their text.
  Tables are not converted to Markdown tables: their cells become plain text.

## Library use

The conversion functions can be called from Python as well:

```python
from h2m.converter import convert_markdown_to_html, convert_html_to_markdown

convert_markdown_to_html(b"# Title")        # '<h1>Title</h1>\n'
convert_html_to_markdown("<h1>Title</h1>")  # '# Title'
```

`convert_markdown_to_html` accepts bytes or text. `h2m.files.read_file` returns
the raw bytes of a file, and `h2m.files.write_file` writes bytes or text
(encoded as UTF-8), creating or truncating the file.

The command line itself is available as `h2m.cli.main(argv)`, and the
individual steps as `h2m.cli.run_md2html(input_file, output_file)` and
`h2m.cli.run_html2md(input_file, output_file)`, which return the converted
text after writing it.