from MarkPreview.config import RenderConfig
from MarkPreview.markdown_parser import segment
from MarkPreview.renderer_html import render_html, render_html_page


def _html(text):
    document, registry = segment(text)
    return render_html(document, registry)


def test_block_templates():
    html = _html("## Title\n\ntext\n\n- a\n- b\n\n1. one\n\n> quote\n\n***")
    assert "<h2>Title</h2>" in html
    assert "<p>text</p>" in html
    assert "<ul>\n<li>a</li>\n<li>b</li>\n</ul>" in html
    assert "<ol>\n<li>one</li>\n</ol>" in html
    assert "<blockquote>quote</blockquote>" in html
    assert "<hr>" in html


def test_inline_templates():
    html = _html("**b** *i* ~~s~~ `c` ![alt](pic.png)")
    assert "<strong>b</strong>" in html
    assert "<em>i</em>" in html
    assert "<del>s</del>" in html
    assert "<code>c</code>" in html
    assert '<img src="pic.png" alt="alt">' in html


def test_code_block_language_class_and_escaping():
    html = _html("```html\n<b>&</b>\n```")
    assert '<pre><code class="language-html">&lt;b&gt;&amp;&lt;/b&gt;\n</code></pre>' in html


def test_links_and_footnotes_section():
    html = _html("[A](http://x) [B](http://y)\n\n[C](http://x)")
    assert '<a href="http://x" title="http://x" target="_blank">A<sup>[1]</sup></a>' in html
    assert "C<sup>[1]</sup>" in html
    assert "B<sup>[2]</sup>" in html
    assert "<h2>References &amp; Footnotes</h2>" in html
    assert '<li id="footnote-1"><a href="http://x" target="_blank">A</a></li>' in html
    assert '<li id="footnote-2"><a href="http://y" target="_blank">B</a></li>' in html


def test_footnote_without_title_shows_url():
    html = _html("[http://z](http://z)")
    assert '<li id="footnote-1"><a href="http://z" target="_blank">http://z</a></li>' in html


def test_no_footnotes_section_without_links():
    assert "footnotes" not in _html("# Plain")


def test_empty_document_renders_empty_string():
    assert _html("") == ""


def test_page_wraps_fragment():
    document, registry = segment("# Hi")
    page = render_html_page(document, registry, RenderConfig(html_title="My <Doc>"))
    assert page.startswith("<!DOCTYPE html>")
    assert "<title>My &lt;Doc&gt;</title>" in page
    assert "<h1>Hi</h1>" in page
    assert ".footnotes" in page
