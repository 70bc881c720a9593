"""
HTML document shells shared by every generated page.

All pages use the same skeleton (doctype, head with global stylesheet,
body, footer crediting the API). Pages differ only in their page
stylesheet and, for the index page, the decorative overlay of soot sprites,
kodama and falling leaves plus the companion soot script.
"""

from .soot import SCRIPT_FILENAME

GLOBAL_CSS = "global-min.css"
INDEX_CSS = "index-min.css"
FILM_CSS = "film-min.css"
SPECIES_CSS = "species-min.css"

API_HOME = "https://ghibliapi.vercel.app/"

FOOTER = f"""
    <footer>
        <div class="container">
            <p>Data provided by <a href="{API_HOME}" target="_blank">Ghibli API</a></p>
            <p>&copy; 2025 Studio Ghibli Fan Site</p>
        </div>
    </footer>"""

# (left %, animation delay s, size px)
SOOT_SPRITES = [
    (10, 0, 28),
    (25, 2, 32),
    (45, 4, 26),
    (65, 1, 30),
    (80, 3, 34),
    (90, 5, 27),
]

# (left %, top %)
KODAMA = [
    (15, 20),
    (75, 35),
    (30, 60),
]

# (left %, animation delay s)
LEAVES = [
    (20, 0),
    (50, 3),
    (70, 6),
    (85, 9),
]


def soot_overlay():
    """Decorative markup placed before the index page content."""
    sprites = "".join(f"""
        <div class="soot-sprite" style="left: {left}%; animation-delay: {delay}s; width: {size}px; height: {size}px;">
            <div class="soot-limbs"></div>
        </div>""" for left, delay, size in SOOT_SPRITES)
    kodama = "".join(f"""
        <div class="kodama" style="left: {left}%; top: {top}%;"></div>"""
                     for left, top in KODAMA)
    leaves = "".join(f"""
        <div class="leaf" style="left: {left}%; animation-delay: {delay}s;"></div>"""
                     for left, delay in LEAVES)

    return f"""
    <!-- Soot Sprites (Susuwatari) -->
    <div class="soot-sprites">{sprites}
    </div>

    <!-- Kodama (Tree Spirits) -->
    <div class="kodama-container">{kodama}
    </div>

    <!-- Floating Leaves -->
    <div class="leaves">{leaves}
    </div>
"""


def document(content, title, stylesheet, overlay="", scripts=()):
    """Wrap page content in the shared document shell."""
    script_tags = "".join(f'\n    <script src="{src}"></script>' for src in scripts)

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{title}</title>
    <link rel="stylesheet" href="{GLOBAL_CSS}">
    <link rel="stylesheet" href="{stylesheet}">
</head>
<body>
{overlay}
    {content}
{FOOTER}
{script_tags}
</body>
</html>"""


CLOUDS = '    <div class="clouds"></div>\n'


def base_template(content, title="Studio Ghibli"):
    """Shell for film detail pages."""
    return document(content, title, FILM_CSS, overlay=CLOUDS)


def species_template(content, title="Species - Studio Ghibli"):
    """Shell for species detail pages."""
    return document(content, title, SPECIES_CSS, overlay=CLOUDS)


def index_template(content, title="Studio Ghibli"):
    """Shell for the front page, with the decorative overlay and soot script."""
    return document(content, title, INDEX_CSS, overlay=soot_overlay(), scripts=(SCRIPT_FILENAME,))
