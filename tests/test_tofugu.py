import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from scrape.base import ScrapeError
from scrape.tofugu import (
    TofuguScraper,
    first_line,
    parse_tofugu_blockquote,
    parse_tofugu_table_cell,
)


@pytest.fixture
def serve():
    servers = []

    def start(body: str) -> str:
        payload = f"<html><body>{body}</body></html>".encode("utf-8")

        class Handler(BaseHTTPRequestHandler):
            def do_GET(self):
                self.send_response(200)
                self.send_header("Content-Type", "text/html; charset=utf-8")
                self.send_header("Content-Length", str(len(payload)))
                self.end_headers()
                self.wfile.write(payload)

            def log_message(self, format, *args):
                pass

        server = ThreadingHTTPServer(("127.0.0.1", 0), Handler)
        threading.Thread(target=server.serve_forever, daemon=True).start()
        servers.append(server)
        host, port = server.server_address[:2]
        return f"http://{host}:{port}"

    yield start
    for server in servers:
        server.shutdown()
        server.server_close()


def _title(text):
    return f'<h1 class="article-title">{text}</h1>'


def _main(*parts):
    return '<article><div class="main">' + "".join(parts) + "</div></article>"


def _tag(name, *children, cls=None):
    attrs = f' class="{cls}"' if cls else ""
    return f"<{name}{attrs}>" + "".join(children) + f"</{name}>"


def _items(name, *texts, cls=None):
    return _tag(name, *(_tag("li", text) for text in texts), cls=cls)


def _row(cell, *texts):
    return _tag("tr", *(_tag(cell, text) for text in texts))


def _meta(*texts):
    return _tag("div", _items("ul", *texts, cls="meta"), cls="article-header-elements")


def scrape(serve, *parts) -> str:
    return TofuguScraper().scrape_article(serve("".join(parts)))


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", ""),
        ("hello world", "hello world"),
        ("first line\nsecond line\nthird line", "first line"),
        ("\n", ""),
        ("\nsecond line", ""),
        ("hello world\n", "hello world"),
        ("first line\r\nsecond line", "first line\r"),
    ],
)
def test_first_line(text, expected):
    assert first_line(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", ""),
        ("hello world", "hello world"),
        ("  hello world  ", "hello world"),
        ("hello\nworld", "hello; world"),
        ("hello\n\nworld", "hello; world"),
        ("hello\n\n\nworld", "hello; ; world"),
        ("\n\nhello world", "hello world"),
        ("hello world\n\n", "hello world"),
        ("  first\n\nsecond\nthird  ", "first; second; third"),
    ],
)
def test_parse_tofugu_table_cell(text, expected):
    assert parse_tofugu_table_cell(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", ""),
        ("hello world", "hello world"),
        ("  hello world  ", "hello world"),
        ("first line\nsecond line", "first line\n> second line"),
        ("  first line\nsecond line  ", "first line\n> second line"),
        ("line one\nline two\nline three", "line one\n> line two\n> line three"),
        ("\nfirst line\nsecond line", "first line\n> second line"),
        ("first line\nsecond line\n", "first line\n> second line"),
    ],
)
def test_parse_tofugu_blockquote(text, expected):
    assert parse_tofugu_blockquote(text) == expected


def test_title(serve):
    result = scrape(serve, _title("Japanese Grammar Guide"), _main())
    assert result == "# Japanese Grammar Guide\n\n"


def test_title_and_meta(serve):
    result = scrape(serve, _title("Learn Hiragana"), _meta("By Tofugu", "March 2024"), _main())
    assert "# Learn Hiragana" in result
    assert "Tofugu" in result
    assert "March 2024" in result


def test_headings(serve):
    headings = [("h2", "Section One"), ("h3", "Subsection A"), ("h4", "Detail Level"), ("h5", "Deep Level")]
    result = scrape(serve, _title("Main Title"), _main(*(_tag(n, t) for n, t in headings)))
    assert "# Main Title" in result
    for name, text in headings:
        assert f"{'#' * int(name[1])} {text}" in result


def test_paragraphs(serve):
    texts = ["First paragraph content.", "Second paragraph content."]
    result = scrape(serve, _title("Title"), _main(*(_tag("p", t) for t in texts)))
    for text in texts:
        assert f"{text}\n\n" in result


def test_ordered_list(serve):
    result = scrape(serve, _title("Title"), _main(_items("ol", "First item", "Second item", "Third item")))
    assert "1. First item\n2. Second item\n3. Third item\n\n" in result


def test_example_sentence(serve):
    result = scrape(
        serve, _title("Title"), _main(_items("ul", "日本語の文", "English translation", cls="example-sentence"))
    )
    for expected in ["Example", "- Japanese:", "- English:", "日本語の文", "English translation"]:
        assert expected in result


def test_table_of_contents(serve):
    entries = ["Introduction", "Chapter One", "Chapter Two"]
    result = scrape(serve, _title("Title"), _main(_items("ul", *entries)))
    for entry in entries:
        assert f"* {entry}" in result


def test_nested_table_of_contents(serve):
    innermost = _items("ul", "Subsection 1.1.1")
    middle = _tag("ul", _tag("li", "Section 1.1\n", innermost))
    outer = _tag("ul", _tag("li", "Chapter One\n", middle))
    result = scrape(serve, _title("Title"), _main(outer))
    assert "* Chapter One" in result
    assert "  * Section 1.1" in result
    assert "    * Subsection 1.1.1" in result


def test_table(serve):
    table = _tag("table", _row("th", "Header 1", "Header 2"), _row("td", "Cell 1", "Cell 2"))
    result = scrape(serve, _title("Title"), _main(table))
    for expected in ["| Header 1 ", "| Header 2 ", "| --- ", "| Cell 1 ", "| Cell 2 "]:
        assert expected in result


def test_table_layout(serve):
    table = _tag("table", _row("th", "Header 1", "Header 2"), _row("td", "Cell 1", "Cell 2"))
    result = scrape(serve, _main(table))
    assert result == "| Header 1 | Header 2 |\n| --- | --- |\n| Cell 1 | Cell 2 |\n\n"


def test_table_without_headers(serve):
    table = _tag("table", _row("td", "Cell A", "Cell B"), _row("td", "Cell C", "Cell D"))
    result = scrape(serve, _title("Title"), _main(table))
    assert "| |" in result
    assert "|---" in result
    assert "| Cell A " in result


def test_blockquote(serve):
    result = scrape(serve, _title("Title"), _main(_tag("blockquote", "This is a quoted text")))
    assert "> This is a quoted text" in result


def test_multiline_blockquote(serve):
    quote = _tag("blockquote", "\n".join(["Line one", "Line two", "Line three"]))
    result = scrape(serve, _title("Title"), _main(quote))
    assert "> Line one\n> Line two\n> Line three" in result


def test_invalid_url():
    with pytest.raises(ScrapeError):
        TofuguScraper().scrape_article("http://invalid.localhost.test:99999/nonexistent")


def test_empty_content(serve):
    result = scrape(serve, _title("Empty Article"), _main("\n"))
    assert result == "# Empty Article\n\n"


def test_no_title(serve):
    result = scrape(serve, _main(_tag("h2", "Section"), _tag("p", "Content")))
    assert "## Section" in result
    assert "Content" in result
    assert not result.startswith("# ")


def test_headings_order(serve):
    result = scrape(
        serve,
        _title("Title"),
        _main(
            _tag("h2", "First Section"),
            _tag("p", "First paragraph"),
            _tag("h2", "Second Section"),
            _tag("p", "Second paragraph"),
        ),
    )
    markers = ["# Title", "## First Section", "First paragraph", "## Second Section", "Second paragraph"]
    positions = [result.index(marker) for marker in markers]
    assert positions == sorted(positions)


def test_mixed_content(serve):
    table = _tag("table", _row("th", "Particle", "Usage"), _row("td", "は", "Topic marker"))
    result = scrape(
        serve,
        _title("Japanese Grammar Guide"),
        _meta("Grammar"),
        _main(
            _tag("h2", "Introduction"),
            _tag("p", "Welcome to Japanese grammar."),
            _tag("h3", "Prerequisites"),
            _items("ol", "Basic hiragana", "Basic katakana"),
            _items("ul", "これは本です", "This is a book", cls="example-sentence"),
            table,
            _tag("blockquote", "Important note about grammar"),
        ),
    )
    for expected in [
        "# Japanese Grammar Guide",
        "Grammar",
        "## Introduction",
        "Welcome to Japanese grammar.",
        "### Prerequisites",
        "1. Basic hiragana",
        "Example",
        "- Japanese:",
        "これは本です",
        "| Particle ",
        "| --- ",
        "| は ",
        "> Important note about grammar",
    ]:
        assert expected in result


def test_only_direct_children(serve):
    wrapper = _tag("div", _tag("h2", "Nested H2"), cls="wrapper")
    result = scrape(serve, _title("Title"), _main(wrapper, _tag("h2", "Direct H2")))
    assert "## Direct H2" in result
    assert result.count("## ") == 1


def test_table_with_newlines_in_cells(serve):
    table = _tag("table", _row("th", "Header"), _row("td", "Line 1\nLine 2"))
    result = scrape(serve, _title("Title"), _main(table))
    assert "Line 1; Line 2" in result


def test_whitespace_handling(serve):
    result = scrape(
        serve,
        _title("   Title With Spaces   "),
        _main(_tag("p", "   Paragraph with extra spaces   ")),
    )
    assert "# Title With Spaces\n\n" in result


def test_alternative_body_container(serve):
    body = '<article><div class="article-content"><div class="container"><h2>Alternative</h2></div></div></article>'
    result = scrape(serve, body)
    assert result == "## Alternative\n\n"