"""
Ghibli Site - Static HTML pages from the Studio Ghibli API.

Fetches films, people, species, locations and vehicles, cross-references
them, and writes an index page, one page per film and one page per species.

Usage:
    from ghibli_site import Settings, SiteGenerator

    result = SiteGenerator.from_settings(Settings.from_env()).run()
    print(result.summary())

Rendering only (no network):
    from ghibli_site import Dataset, render_film_page

    dataset = Dataset.from_collections(raw_collections)
    html = render_film_page(dataset.films[0], dataset)
"""

from .config import Settings
from .models import (
    Dataset,
    Film,
    Location,
    Person,
    Reference,
    Species,
    Vehicle,
    COLLECTIONS,
    REQUIRED_COLLECTIONS,
    film_filename,
    species_filename,
)
from .api_client import GhibliClient, fetch_all_collections, fetch_collection
from .references import (
    find_by_film,
    find_entity_by_id,
    resolve_reference_url,
    resolve_references,
    unique_species_refs,
)
from .render import render_film_page, render_index_page, render_species_page
from .minify import HtmlMinifier, NullMinifier, select_minifier
from .writer import SiteWriter
from .soot import ExplosionSettings, SootSprite, render_soot_script, spawn_particles
from .generator import GenerationResult, GenerationState, MissingDataError, SiteGenerator

__version__ = "1.0.0"
__all__ = [
    # Config
    "Settings",
    # Models
    "Dataset",
    "Film",
    "Location",
    "Person",
    "Reference",
    "Species",
    "Vehicle",
    "COLLECTIONS",
    "REQUIRED_COLLECTIONS",
    "film_filename",
    "species_filename",
    # API client
    "GhibliClient",
    "fetch_all_collections",
    "fetch_collection",
    # Cross-references
    "find_by_film",
    "find_entity_by_id",
    "resolve_reference_url",
    "resolve_references",
    "unique_species_refs",
    # Rendering
    "render_film_page",
    "render_index_page",
    "render_species_page",
    # Output
    "HtmlMinifier",
    "NullMinifier",
    "select_minifier",
    "SiteWriter",
    # Soot sprites
    "ExplosionSettings",
    "SootSprite",
    "render_soot_script",
    "spawn_particles",
    # Pipeline
    "GenerationResult",
    "GenerationState",
    "MissingDataError",
    "SiteGenerator",
]
