"""Tests for Markdown-to-HTML rendering of section bodies."""

from __future__ import annotations

import pytest
from bs4 import BeautifulSoup

from frx_docs.builder import HtmlContentRenderer
from frx_docs.markdown_parser import extract_toc


@pytest.fixture
def renderer() -> HtmlContentRenderer:
    return HtmlContentRenderer()


def _soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def test_every_heading_gets_slug_id(renderer: HtmlContentRenderer) -> None:
    html = renderer.markdown(
        "## HTTP Middleware (httpx)\n\n### The `Recovery` handler\n\n#### Notes ##\n"
    )
    soup = _soup(html)
    assert soup.find("h2")["id"] == "http-middleware-httpx"
    assert soup.find("h3")["id"] == "the-recovery-handler"
    assert soup.find("h4")["id"] == "notes"


def test_source_line_breaks_become_br(renderer: HtmlContentRenderer) -> None:
    html = renderer.markdown("first line\nsecond line")
    assert _soup(html).find("p").find("br") is not None


def test_fenced_code_is_tagged_not_highlighted(renderer: HtmlContentRenderer) -> None:
    html = renderer.markdown('```go\nfmt.Println("<hi>")\n```\n')
    code = _soup(html).select_one("pre > code")
    assert code is not None
    assert code["class"] == ["language-go"]
    assert code.get_text() == 'fmt.Println("<hi>")\n'
    assert "codehilite" not in html


def test_fence_info_string_is_reduced_to_language(
    renderer: HtmlContentRenderer,
) -> None:
    html = renderer.markdown("- item\n\n  ```rust,no_run\n  fn main() {}\n  ```\n")
    code = _soup(html).select_one("code.language-rust")
    assert code is not None
    assert "fn main" in code.get_text()


def test_tables_render(renderer: HtmlContentRenderer) -> None:
    html = renderer.markdown("| Code | Meaning |\n| --- | --- |\n| 0 | OK |\n")
    cells = [td.get_text() for td in _soup(html).select("tbody td")]
    assert cells == ["0", "OK"]


def test_bare_urls_are_autolinked(renderer: HtmlContentRenderer) -> None:
    html = renderer.markdown(
        "Visit https://github.com/crazyfrankie/frx. Or www.example.com today."
    )
    hrefs = [a["href"] for a in _soup(html).find_all("a")]
    assert hrefs == ["https://github.com/crazyfrankie/frx", "http://www.example.com"]


def test_existing_links_are_not_relinked(renderer: HtmlContentRenderer) -> None:
    html = renderer.markdown(
        "[https://example.com](https://example.com) and `https://in.code`"
    )
    soup = _soup(html)
    assert len(soup.find_all("a")) == 1
    assert soup.find("a").find("a") is None
    assert soup.find("code").get_text() == "https://in.code"


def test_strikethrough(renderer: HtmlContentRenderer) -> None:
    html = renderer.markdown("~~old~~ new")
    assert _soup(html).find("del").get_text() == "old"


def test_blank_markdown_renders_empty(renderer: HtmlContentRenderer) -> None:
    assert renderer.markdown("  \n\n") == ""


def test_escaped_heading_id_matches_section_slug(renderer: HtmlContentRenderer) -> None:
    html = renderer.markdown("## Error Handling \\(errorx\\)\n")
    heading = _soup(html).find("h2")
    assert heading["id"] == "error-handling-errorx"
    assert heading.get_text() == "Error Handling (errorx)"


@pytest.mark.parametrize(
    ("title", "slug"),
    [
        ("Use `x<y>`", "use-x-y"),
        ("Wait on `<-ctx.Done()`", "wait-on-ctx-done"),
        ("Use `a && b`", "use-a-b"),
        ("Generic <T> helpers", "generic-t-helpers"),
        ("Tom &amp; Jerry", "tom-amp-jerry"),
        ("Plain **bold** snake_case", "plain-bold-snake-case"),
        ("Cats & dogs", "cats-dogs"),
    ],
)
def test_heading_id_matches_toc_slug(
    renderer: HtmlContentRenderer, title: str, slug: str
) -> None:
    (entry,) = extract_toc([f"### {title}"])
    heading = _soup(renderer.markdown(f"### {title}\n")).find("h3")
    assert entry.slug == slug
    assert heading["id"] == slug
