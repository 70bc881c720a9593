"""
Site generation pipeline.

One run moves through FETCHING -> VALIDATING -> RENDERING and ends in DONE
or FAILED:

1. FETCHING: the five API collections are fetched concurrently
2. VALIDATING: films, people and species must be present; missing
   locations or vehicles only degrade the pages that list them
3. RENDERING: index, film and species pages are rendered, minified and
   written, followed by the soot sprite script

Errors are raised, not swallowed; the CLI turns them into an exit status.

Usage:
    from ghibli_site.generator import SiteGenerator

    result = SiteGenerator.from_settings(Settings.from_env()).run()
    print(result.summary())
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from .api_client import GhibliClient
from .config import Settings
from .minify import NullMinifier, select_minifier
from .models import (
    COLLECTIONS,
    REQUIRED_COLLECTIONS,
    INDEX_FILENAME,
    Dataset,
    film_filename,
    species_filename,
)
from .render import render_film_page, render_index_page, render_species_page
from .soot import SCRIPT_FILENAME, render_soot_script
from .writer import SiteWriter

logger = logging.getLogger(__name__)


class GenerationState(Enum):
    FETCHING = "fetching"
    VALIDATING = "validating"
    RENDERING = "rendering"
    DONE = "done"
    FAILED = "failed"


class MissingDataError(RuntimeError):
    """A required collection could not be fetched."""

    def __init__(self, missing: List[str]):
        self.missing = list(missing)
        super().__init__(f"Failed to fetch required data: {', '.join(self.missing)}")


@dataclass
class GenerationResult:
    """What one successful run produced."""
    output_dir: Path
    index_pages: int = 0
    film_pages: int = 0
    species_pages: int = 0
    files: List[Path] = field(default_factory=list)

    def summary(self) -> str:
        return "\n".join([
            f"Generation complete! Generated files in {self.output_dir}/:",
            f"  - {INDEX_FILENAME}",
            f"  - film_[id].html ({self.film_pages} files)",
            f"  - species_[id].html ({self.species_pages} files)",
        ])


class SiteGenerator:
    """Runs the fetch -> validate -> render pipeline once."""

    def __init__(self, client: GhibliClient, writer: SiteWriter, minifier=None,
                 settings: Optional[Settings] = None):
        self.client = client
        self.writer = writer
        self.minifier = minifier or NullMinifier()
        self.settings = settings or Settings()
        self.state: Optional[GenerationState] = None
        self.dataset: Optional[Dataset] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "SiteGenerator":
        """Wire a generator with the real client, writer and minifier."""
        return cls(
            client=GhibliClient(settings.api_base),
            writer=SiteWriter(settings.output_dir),
            minifier=select_minifier(settings.minify),
            settings=settings,
        )

    def _enter(self, state: GenerationState):
        self.state = state
        logger.info(f"State -> {state.value}")

    def run(self) -> GenerationResult:
        """Generate the whole site; raises on failure (state is then FAILED)."""
        try:
            self._enter(GenerationState.FETCHING)
            dataset = Dataset.from_collections(self.client.fetch_all_collections())

            self._enter(GenerationState.VALIDATING)
            self.validate(dataset)
            self.dataset = dataset

            self._enter(GenerationState.RENDERING)
            result = self.render_all(dataset)
        except Exception:
            self._enter(GenerationState.FAILED)
            raise

        self._enter(GenerationState.DONE)
        return result

    def validate(self, dataset: Dataset):
        """Raise MissingDataError unless films, people and species loaded."""
        missing = dataset.missing(REQUIRED_COLLECTIONS)
        if missing:
            raise MissingDataError(missing)

        counts = dataset.counts()
        for name in COLLECTIONS:
            if counts[name] is None:
                logger.warning(f"No {name} data; pages will list none")
            else:
                logger.info(f"Loaded {counts[name]} {name}")

    def _write(self, filename: str, html: str) -> Path:
        return self.writer.write(filename, self.minifier.minify(html))

    def render_all(self, dataset: Dataset) -> GenerationResult:
        settings = self.settings
        result = GenerationResult(output_dir=self.writer.output_dir)
        self.writer.ensure_dir()

        logger.info(f"Generating {INDEX_FILENAME}...")
        result.files.append(self._write(
            INDEX_FILENAME, render_index_page(dataset, image_host=settings.image_host)))
        result.index_pages = 1

        logger.info("Generating film pages...")
        for film in tqdm(dataset.films, desc="Films", disable=not settings.show_progress):
            html = render_film_page(film, dataset, image_host=settings.image_host,
                                    exact=settings.exact_references)
            result.files.append(self._write(film_filename(film.id), html))
            result.film_pages += 1
        logger.info(f"{result.film_pages} film pages generated")

        logger.info("Generating species pages...")
        for species in tqdm(dataset.species, desc="Species", disable=not settings.show_progress):
            html = render_species_page(species, dataset)
            result.files.append(self._write(species_filename(species.id), html))
            result.species_pages += 1
        logger.info(f"{result.species_pages} species pages generated")

        result.files.append(self.writer.write(SCRIPT_FILENAME, render_soot_script()))
        return result
