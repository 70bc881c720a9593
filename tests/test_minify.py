import pytest
from bs4 import BeautifulSoup

from ghibli_site import minify
from ghibli_site.minify import HtmlMinifier, NullMinifier, select_minifier
from ghibli_site.render import render_film_page, render_index_page, render_species_page

PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
    <title>Totoro</title>
</head>
<body>
    <!-- Soot Sprites -->
    <div class="info-tag">None</div>
    <a href="film_f1.html" class="info-tag">My   Neighbor Totoro</a>
</body>
</html>"""


def test_null_minifier_is_identity():
    assert NullMinifier().minify(PAGE) == PAGE


def test_disabled_selects_null():
    assert isinstance(select_minifier(False), NullMinifier)


def test_unavailable_library_falls_back(monkeypatch, caplog):
    monkeypatch.setattr(minify, "HAVE_MINIFY_HTML", False)
    chosen = select_minifier(True)
    assert isinstance(chosen, NullMinifier)
    assert "minify-html not installed" in caplog.text


def test_html_minifier_strips_comments_and_keeps_content():
    pytest.importorskip("minify_html")
    chosen = select_minifier(True)
    assert isinstance(chosen, HtmlMinifier)

    out = chosen.minify(PAGE)
    assert "Soot Sprites" not in out
    assert len(out) < len(PAGE)
    assert "film_f1.html" in out
    assert "None" in out
    assert "Totoro" in out


def _attribute_values(html):
    page = BeautifulSoup(html, "html.parser")
    return {
        attr: [tag[attr] for tag in page.select(f"[{attr}]")]
        for attr in ("style", "href", "src")
    }


def test_html_minifier_keeps_attribute_values(dataset):
    pytest.importorskip("minify_html")
    minifier = HtmlMinifier()
    pages = [render_index_page(dataset), render_film_page(dataset.films[1], dataset)]
    pages.extend(render_species_page(sp, dataset) for sp in dataset.species)
    for html in pages:
        before = _attribute_values(html)
        assert before["style"]
        assert _attribute_values(minifier.minify(html)) == before


def test_css_minification_is_off():
    assert HtmlMinifier.OPTIONS["minify_css"] is False


def test_missing_library_warns_once(monkeypatch, caplog):
    monkeypatch.setattr(minify, "HAVE_MINIFY_HTML", False)
    select_minifier(True)
    records = [r for r in caplog.records if r.name == "ghibli_site.minify"]
    assert len(records) == 1
    assert records[0].levelname == "WARNING"
