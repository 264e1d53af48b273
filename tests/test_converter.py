import pytest

from h2m.converter import convert_html_to_markdown, convert_markdown_to_html


def test_convert_markdown_to_html():
    assert convert_markdown_to_html(b"# Titre") == "<h1>Titre</h1>\n"


def test_convert_markdown_to_html_accepts_text():
    assert convert_markdown_to_html("# Titre") == "<h1>Titre</h1>\n"


def test_convert_markdown_bold_paragraph():
    assert convert_markdown_to_html(b"**bold**") == "<p><strong>bold</strong></p>\n"


def test_convert_markdown_empty():
    assert convert_markdown_to_html(b"") == ""


def test_convert_html_to_markdown():
    assert convert_html_to_markdown("<h1>Titre</h1>") == "# Titre"


@pytest.mark.parametrize("level", range(1, 7))
def test_heading_levels(level):
    html = f"<h{level}>Titre</h{level}>"
    assert convert_html_to_markdown(html) == "#" * level + " Titre"


def test_paragraph_with_strong_and_em():
    html = "<p>Hello <strong>world</strong> and <em>you</em></p>"
    assert convert_html_to_markdown(html) == "Hello **world** and _you_"


def test_paragraphs_are_separated_by_blank_line():
    assert convert_html_to_markdown("<p>one</p>\n<p>two</p>") == "one\n\ntwo"


def test_unordered_list():
    html = "<ul>\n  <li>a</li>\n  <li>b</li>\n</ul>"
    assert convert_html_to_markdown(html) == "- a\n- b"


def test_ordered_list():
    assert convert_html_to_markdown("<ol><li>a</li><li>b</li></ol>") == "1. a\n2. b"


def test_nested_list_is_indented():
    html = "<ul><li>a<ul><li>b</li></ul></li></ul>"
    assert convert_html_to_markdown(html) == "- a\n  - b"


def test_link_and_image():
    html = '<p><a href="https://example.com">site</a> <img src="pic.png" alt="pic"></p>'
    assert convert_html_to_markdown(html) == "[site](https://example.com) ![pic](pic.png)"


def test_inline_code_and_code_block():
    assert convert_html_to_markdown("<p><code>x = 1</code></p>") == "`x = 1`"
    assert convert_html_to_markdown("<pre><code>a\nb\n</code></pre>") == "    a\n    b"


def test_blockquote():
    assert convert_html_to_markdown("<blockquote><p>quoted</p></blockquote>") == "> quoted"


def test_script_is_dropped_and_surrounding_whitespace_trimmed():
    html = "  <script>alert(1)</script><p>kept</p>  \n"
    assert convert_html_to_markdown(html) == "kept"


def test_markdown_characters_are_escaped():
    assert convert_html_to_markdown("<p>a_b*c</p>") == "a\\_b\\*c"


def test_round_trip_heading():
    html = convert_markdown_to_html(b"## Section")
    assert convert_html_to_markdown(html) == "## Section"