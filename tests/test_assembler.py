"""Tests for DocumentAssembler."""

from datetime import date

import pytest

from research_export.errors import ResearchContentNotFound
from research_export.export.assembler import DocumentAssembler


class RecordingSink:
    def __init__(self):
        self.written = []

    def write(self, text: str) -> str:
        self.written.append(text)
        return "recording"


@pytest.fixture
def assembler(test_settings):
    return DocumentAssembler(test_settings)


class TestAssemble:
    def test_converts_only_the_research_container(self, assembler, research_page, research_markdown):
        markdown = assembler.assemble(research_page, include_frontmatter=False)

        assert markdown == research_markdown
        assert "Menu" not in markdown

    def test_frontmatter_uses_title_and_canonical_url(self, assembler, research_page, research_markdown):
        markdown = assembler.assemble(research_page, include_frontmatter=True, on=date(2025, 2, 3))

        assert markdown == (
            "---\n"
            'title: "Solar- Power"\n'
            "url: https://chatgpt.com/c/abc\n"
            "date: 2025-02-03\n"
            "---\n\n" + research_markdown
        )

    def test_explicit_source_url_wins(self, assembler, research_page):
        markdown = assembler.assemble(
            research_page,
            source_url="https://chatgpt.com/c/explicit",
            include_frontmatter=True,
        )

        assert "url: https://chatgpt.com/c/explicit\n" in markdown

    def test_fallback_url_when_page_has_none(self, assembler):
        html = '<div class="deep-research-result"><p>Body</p></div>'

        markdown = assembler.assemble(
            html, include_frontmatter=True, fallback_url="file:///tmp/page.html", on=date(2025, 1, 1)
        )

        assert markdown.startswith('---\ntitle: "ChatGPT Research"\nurl: file:///tmp/page.html\n')
        assert markdown.endswith("---\n\nBody")

    def test_frontmatter_follows_settings_by_default(self, test_settings, research_page):
        test_settings.include_frontmatter = True

        markdown = DocumentAssembler(test_settings).assemble(research_page)

        assert markdown.startswith("---\n")

    def test_missing_container_raises(self, assembler, plain_page):
        with pytest.raises(ResearchContentNotFound) as exc:
            assembler.assemble(plain_page)

        assert ".deep-research-result" in str(exc.value)

    def test_has_research_content(self, assembler, research_page, plain_page):
        assert assembler.has_research_content(research_page)
        assert not assembler.has_research_content(plain_page)


class TestDelivery:
    def test_export_to_file(self, assembler, research_page, research_markdown, tmp_path):
        target = tmp_path / "out" / "research.md"

        path = assembler.export_to_file(research_page, target, include_frontmatter=False)

        assert path == target
        assert target.read_text(encoding="utf-8") == research_markdown

    def test_export_to_default_filename(self, assembler, research_page, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        path = assembler.export_to_file(research_page, include_frontmatter=False)

        assert path.name == "chatgpt-research-export.md"
        assert (tmp_path / "chatgpt-research-export.md").exists()

    def test_missing_container_writes_nothing(self, assembler, plain_page, tmp_path):
        target = tmp_path / "research.md"

        with pytest.raises(ResearchContentNotFound):
            assembler.export_to_file(plain_page, target)

        assert not target.exists()

    def test_copy_to_clipboard(self, assembler, research_page, research_markdown):
        sink = RecordingSink()

        assert assembler.copy_to_clipboard(research_page, sink, include_frontmatter=False) == "recording"
        assert sink.written == [research_markdown]
