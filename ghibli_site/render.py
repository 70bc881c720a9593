"""
HTML page rendering.

Every page is a pure function of a record and the Dataset: rendering the
same data twice gives byte-identical output. Three page kinds are produced:

- index page: one card per film, ordered by release year
- film page: banner, metadata, characters, locations, species, vehicles
- species page: classification hero, metadata, characters, films

Usage:
    from ghibli_site.render import render_index_page, render_film_page

    html = render_index_page(dataset)
    film_html = render_film_page(dataset.films[0], dataset)
"""

import html
from typing import Optional

from .config import DEFAULT_IMAGE_HOST
from .models import (
    Dataset,
    Film,
    Person,
    Species,
    INDEX_FILENAME,
    film_filename,
    species_filename,
)
from .references import (
    find_by_film,
    find_by_reference,
    resolve_references,
    unique_species_refs,
)
from .templates import base_template, index_template, species_template

NONE_TAG = '<div class="info-tag">None</div>'
EMPTY_NOTE = '<p style="text-align: center; grid-column: 1/-1; color: var(--text-dark);">{}</p>'


def escape_html(text):
    """Escape HTML entities."""
    return html.escape(str(text)) if text else ""


def capitalize(text):
    """Capitalize each word ("BLACK hair" -> "Black Hair"); n/a markers pass through."""
    if not text or text in ("n/a", "NA"):
        return text
    return " ".join(word[:1].upper() + word[1:].lower() for word in text.split(" "))


def initials(name):
    """Avatar initials: first and last word initials, or the first two characters."""
    if not name:
        return "?"
    parts = name.split(" ")
    if len(parts) >= 2 and parts[0] and parts[-1]:
        return (parts[0][0] + parts[-1][0]).upper()
    return name[:2].upper()


def avatar_class(gender):
    if not gender:
        return "avatar-neutral"
    gender = gender.lower()
    if gender == "female":
        return "avatar-female"
    if gender == "male":
        return "avatar-male"
    return "avatar-neutral"


def species_hero_class(classification):
    """Hero colour bucket for a species classification."""
    if not classification:
        return "species-hero-default"
    c = classification.lower()
    if "mammal" in c:
        return "species-hero-mammal"
    if "spirit" in c or "god" in c:
        return "species-hero-spirit"
    if "bird" in c or "avian" in c:
        return "species-hero-bird"
    return "species-hero-default"


def _detail_row(label, value):
    if not value:
        return ""
    return f"""
                    <div class="character-detail-item">
                        <span class="detail-label">{label}:</span>
                        <span class="detail-value">{value}</span>
                    </div>"""


def character_card(person: Person, species: Optional[Species] = None) -> str:
    """
    Card for one character.

    Empty fields leave their row out. When species is given (film pages),
    a species row links to that species' page.
    """
    rows = [
        _detail_row("Gender", escape_html(capitalize(person.gender))),
        _detail_row("Age", escape_html(person.age)),
        _detail_row("Eye Color", escape_html(capitalize(person.eye_color))),
        _detail_row("Hair Color", escape_html(capitalize(person.hair_color))),
    ]
    if species is not None and species.name:
        link = (f'<a href="{escape_html(species_filename(species.id))}" class="species-link">'
                f'{escape_html(species.name)}</a>')
        rows.append(_detail_row("Species", link))

    return f"""
            <div class="character-card">
                <div class="character-avatar {avatar_class(person.gender)}">
                    {escape_html(initials(person.name))}
                </div>
                <h4>{escape_html(person.name)}</h4>
                <div class="character-details">{''.join(rows)}
                </div>
            </div>
        """


def _tag(label):
    return f'<div class="info-tag">{escape_html(label)}</div>'


def _link_tag(href, label):
    return (f'<a href="{escape_html(href)}" class="info-tag" '
            f'style="text-decoration: none; cursor: pointer;">{escape_html(label)}</a>')


def _sort_key(film: Film):
    year = film.release_year
    return (year is None, year or 0)


def render_index_page(dataset: Dataset, image_host: str = DEFAULT_IMAGE_HOST) -> str:
    """Front page: one card per film, oldest first (ties keep fetch order)."""
    films = sorted(dataset.collection("films"), key=_sort_key)

    cards = []
    for film in films:
        image_url = film.image_url(image_host)
        cards.append(f"""
            <a href="{escape_html(film_filename(film.id))}" class="film-card" style="text-decoration: none; color: inherit; cursor: pointer;">
                <img src="{escape_html(image_url)}" alt="{escape_html(film.title)}" class="film-image" loading="lazy">
                <div class="film-content">
                    <div class="release-year">{escape_html(film.release_date)}</div>
                    <h2>{escape_html(film.title)}</h2>
                    <div class="original-title">{escape_html(film.original_title)}</div>
                    <div class="film-info">
                        <div class="info-item">
                            <span class="info-label">Director:</span>
                            <span>{escape_html(film.director)}</span>
                        </div>
                        <div class="info-item">
                            <span class="info-label">Producer:</span>
                            <span>{escape_html(film.producer)}</span>
                        </div>
                        <div class="info-item">
                            <span class="info-label">Runtime:</span>
                            <span>{escape_html(film.running_time)} mins</span>
                        </div>
                        <div class="info-item">
                            <span class="rt-score">⭐ {escape_html(film.rt_score)}%</span>
                        </div>
                    </div>
                    <div class="description">
                        {escape_html(film.description)}
                    </div>
                </div>
            </a>
        """)

    content = f"""
    <header>
        <div class="container">
            <h1 class="logo">STUDIO GHIBLI</h1>
            <p class="tagline">Explore the Magical World of Ghibli</p>
        </div>
    </header>

    <main class="container">
        <div id="films-grid" class="films-grid">
            {''.join(cards)}
        </div>
    </main>
    """

    return index_template(content, "Studio Ghibli Films")


def render_film_page(film: Film, dataset: Dataset,
                     image_host: str = DEFAULT_IMAGE_HOST, exact: bool = False) -> str:
    """Detail page for one film."""
    locations = find_by_film(film.id, dataset.locations, exact=exact)
    people = find_by_film(film.id, dataset.people, exact=exact)
    vehicles = find_by_film(film.id, dataset.vehicles, exact=exact)
    species_refs = unique_species_refs(people)

    banner_url = film.banner_url(image_host)

    characters_html = "".join(
        character_card(person, find_by_reference(person.species, dataset.species))
        for person in people
    ) or EMPTY_NOTE.format("No character information available.")

    locations_html = "".join(_tag(loc.name) for loc in locations) if locations else NONE_TAG
    vehicles_html = "".join(_tag(v.name) for v in vehicles) if vehicles else NONE_TAG

    # Unresolvable species references count in the header but get no tag
    if species_refs:
        species_html = "".join(
            _link_tag(species_filename(sp.id), sp.name)
            for sp in (find_by_reference(ref, dataset.species) for ref in species_refs)
            if sp is not None
        )
    else:
        species_html = NONE_TAG

    title = escape_html(film.title)
    content = f"""
    <header>
        <div class="container">
            <h1 class="logo">STUDIO GHIBLI</h1>
            <a href="{INDEX_FILENAME}" class="back-btn">← Back to All Films</a>
        </div>
    </header>

    <main class="container">
        <div id="film-detail" class="film-detail">
            <div class="detail-hero">
                <img src="{escape_html(banner_url)}" alt="{title}" class="detail-banner" onerror="this.style.display='none'">
            </div>

            <div class="detail-header">
                <h2>{title}</h2>
                <div class="detail-original-title">{escape_html(film.original_title)} ({escape_html(film.original_title_romanised)})</div>

                <div class="info-grid">
                    <div class="info-box">
                        <div class="info-box-label">Release Year</div>
                        <div class="info-box-value">{escape_html(film.release_date)}</div>
                    </div>
                    <div class="info-box">
                        <div class="info-box-label">Director</div>
                        <div class="info-box-value">{escape_html(film.director)}</div>
                    </div>
                    <div class="info-box">
                        <div class="info-box-label">Producer</div>
                        <div class="info-box-value">{escape_html(film.producer)}</div>
                    </div>
                    <div class="info-box">
                        <div class="info-box-label">Running Time</div>
                        <div class="info-box-value">{escape_html(film.running_time)} mins</div>
                    </div>
                    <div class="info-box">
                        <div class="info-box-label">RT Score</div>
                        <div class="info-box-value">⭐ {escape_html(film.rt_score)}%</div>
                    </div>
                </div>

                <div class="detail-description">
                    {escape_html(film.description)}
                </div>
            </div>

            <div class="characters-section">
                <h3 class="section-title">Characters ({len(people)})</h3>
                <div id="characters-grid" class="characters-grid">
                    {characters_html}
                </div>
            </div>

            <div class="additional-section">
                <h3 class="section-title">Additional Information</h3>

                <div class="info-section">
                    <h4>Locations ({len(locations)})</h4>
                    <div class="info-list" id="locations-list">
                        {locations_html}
                    </div>
                </div>

                <div class="info-section">
                    <h4>Species ({len(species_refs)})</h4>
                    <div class="info-list" id="species-list">
                        {species_html}
                    </div>
                </div>

                <div class="info-section">
                    <h4>Vehicles ({len(vehicles)})</h4>
                    <div class="info-list" id="vehicles-list">
                        {vehicles_html}
                    </div>
                </div>
            </div>
        </div>
    </main>
    """

    return base_template(content, f"{title} - Studio Ghibli")


def render_species_page(species: Species, dataset: Dataset) -> str:
    """Detail page for one species."""
    people = resolve_references(species.people, dataset.people)
    films = resolve_references(species.films, dataset.films)

    people_html = "".join(character_card(person) for person in people) or EMPTY_NOTE.format(
        "No characters data available.")
    films_html = ("".join(_link_tag(film_filename(f.id), f.title) for f in films)
                  if films else NONE_TAG)

    name = escape_html(species.name)
    content = f"""
    <header>
        <div class="container">
            <h1 class="logo">STUDIO GHIBLI</h1>
            <div style="display: flex; gap: 15px; justify-content: center; flex-wrap: wrap;">
                <a href="{INDEX_FILENAME}" class="back-btn">← All Films</a>
                <a href="javascript:history.back()" class="back-btn">← Back</a>
            </div>
        </div>
    </header>

    <main class="container">
        <div id="species-detail" class="species-detail">
            <div class="species-hero {species_hero_class(species.classification)}">
                <div class="species-hero-content">
                    <h2 class="species-hero-title">{name}</h2>
                    <p class="species-hero-subtitle">{escape_html(species.classification) or 'Unknown Classification'}</p>
                </div>
            </div>

            <div class="detail-header">
                <h2>{name}</h2>

                <div class="info-grid">
                    <div class="info-box">
                        <div class="info-box-label">Classification</div>
                        <div class="info-box-value">{escape_html(species.classification) or 'Unknown'}</div>
                    </div>
                    <div class="info-box">
                        <div class="info-box-label">Eye Colors</div>
                        <div class="info-box-value">{escape_html(species.eye_colors) or 'Unknown'}</div>
                    </div>
                    <div class="info-box">
                        <div class="info-box-label">Hair Colors</div>
                        <div class="info-box-value">{escape_html(species.hair_colors) or 'Unknown'}</div>
                    </div>
                </div>
            </div>

            <div class="characters-section">
                <h3 class="section-title">Characters of this Species ({len(people)})</h3>
                <div id="people-grid" class="characters-grid">
                    {people_html}
                </div>
            </div>

            <div class="additional-section">
                <h3 class="section-title">Films Featuring this Species</h3>
                <div id="films-list" class="info-list">
                    {films_html}
                </div>
            </div>
        </div>
    </main>
    """

    return species_template(content, f"{name} - Studio Ghibli")
