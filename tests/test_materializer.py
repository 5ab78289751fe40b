"""Tests for materializer.render_page and materialize_page."""

import pytest
from bs4 import BeautifulSoup

from social_meta.models.page import LogicalPage
from social_meta.services.materializer import materialize_page, output_path_for, render_page

_BLANK = """<!DOCTYPE html>
<html>
<head>
  <base href="/" />
  <link rel="stylesheet" href="css/app.css" />
</head>
<body><script src="_framework/blazor.webassembly.js"></script></body>
</html>
"""

_PAGE = LogicalPage(slug="blog/post-1", title="Post One", description="First post")


class TestRenderPage:
    def test_tags_inserted_before_head_close(self):
        document = render_page(_BLANK, _PAGE, "/")
        head = document.split("</head>")[0]
        assert head.rstrip().endswith('<meta property="og:url" content="/blog/post-1/" />')
        assert document.count("</head>") == 1

    def test_tag_order_in_head(self):
        document = render_page(_BLANK, _PAGE, "https://ex.com")
        soup = BeautifulSoup(document, "lxml")
        names = [
            tag.get("name") or tag.get("rel", [None])[0] or tag.get("property") or tag.name
            for tag in soup.head.find_all(["meta", "link", "title"])
        ]
        assert names == [
            "stylesheet",
            "description",
            "canonical",
            "title",
            "og:type",
            "og:title",
            "og:description",
            "og:url",
        ]

    def test_base_href_rewritten_to_base_url(self):
        document = render_page(_BLANK, _PAGE, "https://ex.com/")
        assert '<base href="https://ex.com/" />' in document
        assert '<base href="/" />' not in document

    def test_base_href_unchanged_for_root_base_url(self):
        document = render_page(_BLANK, _PAGE, "/")
        assert '<base href="/" />' in document

    def test_missing_base_tag_is_noop(self):
        blank = "<html><head></head><body></body></html>"
        document = render_page(blank, _PAGE, "https://ex.com")
        assert "<base" not in document

    def test_relative_urls_rooted(self):
        document = render_page(_BLANK, _PAGE, "/")
        assert 'href="/css/app.css"' in document
        assert 'src="/_framework/blazor.webassembly.js"' in document

    def test_absolute_canonical_not_rooted(self):
        document = render_page(_BLANK, _PAGE, "https://ex.com")
        assert '<link rel="canonical" href="https://ex.com/blog/post-1/" />' in document

    def test_body_preserved(self):
        document = render_page(_BLANK, _PAGE, "/")
        assert document.endswith("</body>\n</html>\n")

    def test_uppercase_head_close(self):
        blank = "<HTML><HEAD><base href=\"/\" /></HEAD><BODY></BODY></HTML>"
        document = render_page(blank, _PAGE, "/")
        assert document.count("</HEAD>") == 1
        head = document.split("</HEAD>")[0]
        assert head.endswith('<meta property="og:url" content="/blog/post-1/" />\n')

    def test_only_first_head_close_gets_tags(self):
        blank = "<head></head><body><pre>&lt;/head&gt;</pre></head ></body>"
        document = render_page(blank, _PAGE, "/")
        assert document.count("og:type") == 1
        assert document.index("og:type") < document.index("</head>")

    def test_base_url_escaped_in_base_tag(self):
        document = render_page(_BLANK, _PAGE, 'https://ex.com/?a=1&b="2"')
        assert '<base href="https://ex.com/?a=1&amp;b=&quot;2&quot;/" />' in document

    def test_missing_head_close_raises(self):
        with pytest.raises(ValueError):
            render_page("<html><body></body></html>", _PAGE, "/")

    def test_template_not_mutated_between_pages(self):
        other = LogicalPage(slug="about", title="About", description="About us")
        first = render_page(_BLANK, _PAGE, "/")
        second = render_page(_BLANK, other, "/")
        assert "Post One" in first
        assert "Post One" not in second
        assert "About us" in second


class TestMaterializePage:
    def test_output_path(self, tmp_path):
        page = LogicalPage(slug="/docs/intro/", title="Intro")
        assert output_path_for(tmp_path, page) == tmp_path / "docs" / "intro" / "index.html"

    def test_writes_file_and_creates_directories(self, tmp_path):
        path = materialize_page(_BLANK, _PAGE, "/", tmp_path)
        assert path == tmp_path / "blog" / "post-1" / "index.html"
        assert path.read_text(encoding="utf-8") == render_page(_BLANK, _PAGE, "/")

    def test_overwrites_existing_file(self, tmp_path):
        target = tmp_path / "blog" / "post-1" / "index.html"
        target.parent.mkdir(parents=True)
        target.write_text("stale", encoding="utf-8")
        materialize_page(_BLANK, _PAGE, "/", tmp_path)
        assert "stale" not in target.read_text(encoding="utf-8")

    def test_existing_directory_is_fine(self, tmp_path):
        (tmp_path / "blog" / "post-1").mkdir(parents=True)
        materialize_page(_BLANK, _PAGE, "/", tmp_path)
        materialize_page(_BLANK, _PAGE, "/", tmp_path)
        assert (tmp_path / "blog" / "post-1" / "index.html").is_file()

    def test_write_failure_propagates(self, tmp_path):
        # A file where the page directory should be makes mkdir fail.
        (tmp_path / "blog").write_text("not a directory", encoding="utf-8")
        with pytest.raises(OSError):
            materialize_page(_BLANK, _PAGE, "/", tmp_path)

    def test_utf8_content(self, tmp_path):
        page = LogicalPage(slug="cafe", title="Café ☕", description="Crème brûlée")
        path = materialize_page(_BLANK, page, "/", tmp_path)
        assert "Café ☕" in path.read_text(encoding="utf-8")
