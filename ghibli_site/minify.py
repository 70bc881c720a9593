"""
HTML minification strategies.

The generator is handed one minifier at startup:
- HtmlMinifier wraps the minify-html library
- NullMinifier returns pages unchanged

select_minifier() picks the real one when minification is enabled and the
library can be imported, and falls back to NullMinifier with a warning.
"""

import logging

logger = logging.getLogger(__name__)

# minify-html is an optional runtime dependency
try:
    import minify_html
    HAVE_MINIFY_HTML = True
except ImportError:
    minify_html = None
    HAVE_MINIFY_HTML = False


class NullMinifier:
    """Leaves HTML untouched."""

    name = "none"

    def minify(self, html: str) -> str:
        return html


class HtmlMinifier:
    """
    Minifies pages with minify-html.

    Options are fixed and conservative: comments dropped, whitespace
    collapsed, script bodies minified. CSS minification stays off because
    the only CSS in the pages lives in style attributes and minify-html
    would rewrite and reorder those declarations. Closing tags are kept.
    """

    name = "minify-html"

    OPTIONS = {
        "keep_comments": False,
        "keep_closing_tags": True,
        "minify_css": False,
        "minify_js": True,
    }

    def __init__(self):
        if not HAVE_MINIFY_HTML:
            raise RuntimeError("minify-html is not installed (pip install minify-html)")

    def minify(self, html: str) -> str:
        return minify_html.minify(html, **self.OPTIONS)


def select_minifier(enabled: bool = True):
    """Minifier to use for this run."""
    if not enabled:
        return NullMinifier()
    if not HAVE_MINIFY_HTML:
        logger.warning("minify-html not installed, HTML will not be minified "
                       "(install with: pip install minify-html)")
        return NullMinifier()
    return HtmlMinifier()
