"""Tests for whole-document conversion and cleanup."""

import pytest
from bs4 import BeautifulSoup

from research_export.converter import HTMLConverter, clean_markdown, convert


class TestCleanMarkdown:
    """Test clean_markdown post-processing."""

    def test_three_blank_lines_collapse_to_one(self):
        assert clean_markdown("a\n\n\n\nb") == "a\n\nb"

    def test_whitespace_only_lines_count_as_blank(self):
        assert clean_markdown("a\n \n\t\n\nb") == "a\n\nb"

    def test_single_blank_line_is_kept(self):
        assert clean_markdown("a\n\nb\nc") == "a\n\nb\nc"

    def test_document_is_trimmed(self):
        assert clean_markdown("\n\n  # Title\n\nText\n\n\n") == "# Title\n\nText"

    @pytest.mark.parametrize(
        "text",
        [
            "a\n\n\n\nb",
            "\n x \n \n \n y\n\n\n",
            "- one\n- two\n\n\n\n\n## next\n\n",
            "",
            "no newlines",
        ],
    )
    def test_idempotent(self, text):
        once = clean_markdown(text)

        assert clean_markdown(once) == once


class TestConvert:
    """Test convert on parsed trees."""

    def test_heading_and_paragraph_document(self, test_settings):
        soup = BeautifulSoup("<h1>Title</h1><p>Hello <strong>world</strong></p>", "html.parser")

        result = convert(soup, test_settings)

        assert result.markdown == "# Title\n\nHello **world**"
        assert result.citations == []

    def test_citation_index(self, test_settings):
        soup = BeautifulSoup(
            '<p>A<a href="https://b.org/x?s=1">b</a> C<a href="https://c.org/">c</a>'
            ' again<a href="https://b.org/x">b</a></p>',
            "html.parser",
        )

        result = convert(soup, test_settings)

        assert result.markdown == (
            "A([1](https://b.org/x?s=1)) C([2](https://c.org/)) again([1](https://b.org/x))"
        )
        assert [(c.number, c.key) for c in result.citations] == [
            (1, "https://b.org/x"),
            (2, "https://c.org/"),
        ]

    def test_each_conversion_numbers_from_one(self, test_settings):
        first = BeautifulSoup('<a href="https://one.com/">1</a>', "html.parser")
        second = BeautifulSoup('<a href="https://two.com/">2</a>', "html.parser")

        convert(first, test_settings)
        result = convert(second, test_settings)

        assert result.markdown == "([1](https://two.com/))"


class TestHTMLConverter:
    """Test HTMLConverter on markup strings."""

    def test_empty_html(self, test_settings):
        assert HTMLConverter(test_settings).to_markdown("") == ""

    def test_to_markdown(self, test_settings):
        html = "<div>\n<h2>Findings</h2>\n\n\n<ul><li>One</li><li>Two</li></ul>\n</div>"

        markdown = HTMLConverter(test_settings).to_markdown(html)

        assert markdown == "## Findings\n\n- One\n- Two"
