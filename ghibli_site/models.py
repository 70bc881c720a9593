"""
Data models for the Studio Ghibli API collections.

All records are frozen dataclasses built once from the API's JSON and held
read-only for a single generation run. Relationships between records are
kept as typed References parsed at ingestion time; associations are derived
on demand and never written back onto the records.

Usage:
    from ghibli_site.models import Dataset

    dataset = Dataset.from_collections(fetch_all_collections())
    for film in dataset.films:
        print(film.title, film.release_year)
"""

import re
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Tuple

from .config import DEFAULT_IMAGE_HOST

# Collection names, in the order the API client requests them
COLLECTIONS = ("films", "locations", "vehicles", "people", "species")
REQUIRED_COLLECTIONS = ("films", "people", "species")
OPTIONAL_COLLECTIONS = ("locations", "vehicles")

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

# Page filenames; links between pages are built with the same helpers
INDEX_FILENAME = "index.html"


def film_filename(film_id: str) -> str:
    return f"film_{film_id}.html"


def species_filename(species_id: str) -> str:
    return f"species_{species_id}.html"


def resolve_reference_url(url_or_id: Optional[str]) -> Optional[str]:
    """Trailing path segment of a URL, or the input itself if it has no '/'."""
    if not url_or_id:
        return None
    if "/" not in url_or_id:
        return url_or_id
    return url_or_id.split("/")[-1]


def _text(value: Any) -> Optional[str]:
    """Normalize a scalar API field to a string (None stays None)."""
    if value is None:
        return None
    return str(value)


@dataclass(frozen=True)
class Reference:
    """
    A reference from one record to another, as found in the API data.

    The API expresses relationships as URLs whose trailing path segment is
    the referenced record's id (e.g. ".../films/<id>"). A bare id with no
    "/" is its own id.
    """
    raw: str
    id: str
    collection: Optional[str] = None  # "films", "people", ... when recognizable

    @classmethod
    def parse(cls, value: Any) -> Optional["Reference"]:
        """Parse a URL or bare id; non-string or empty values give None."""
        if not isinstance(value, str) or not value:
            return None
        parts = value.split("/")
        collection = parts[-2] if len(parts) >= 2 and parts[-2] in COLLECTIONS else None
        return cls(raw=value, id=resolve_reference_url(value), collection=collection)

    @property
    def tail(self) -> str:
        """Last non-empty path segment."""
        parts = [p for p in self.raw.split("/") if p]
        return parts[-1] if parts else ""

    @property
    def is_collection_url(self) -> bool:
        """True for degenerate references pointing at a whole collection."""
        return self.tail in COLLECTIONS


def _references(values: Any) -> Tuple[Reference, ...]:
    if not isinstance(values, (list, tuple)):
        return ()
    refs = (Reference.parse(v) for v in values)
    return tuple(r for r in refs if r is not None)


@dataclass(frozen=True)
class Film:
    id: str
    title: Optional[str] = None
    original_title: Optional[str] = None
    original_title_romanised: Optional[str] = None
    director: Optional[str] = None
    producer: Optional[str] = None
    release_date: Optional[str] = None
    running_time: Optional[str] = None
    rt_score: Optional[str] = None
    description: Optional[str] = None

    @property
    def image_key(self) -> str:
        """Image identifier: the film id with dashes replaced by underscores."""
        return self.id.replace("-", "_")

    def image_url(self, image_host: str = DEFAULT_IMAGE_HOST) -> str:
        """Poster image shown on the index card."""
        return f"{image_host}/films_{self.image_key}.webp"

    def banner_url(self, image_host: str = DEFAULT_IMAGE_HOST) -> str:
        """Wide banner shown on the film page."""
        return f"{image_host}/banner_{self.image_key}.webp"

    @property
    def release_year(self) -> Optional[int]:
        """Leading integer of release_date, or None when it has none."""
        if not self.release_date:
            return None
        m = _LEADING_INT.match(self.release_date)
        return int(m.group(1)) if m else None

    @classmethod
    def from_dict(cls, data: dict) -> "Film":
        return cls(
            id=str(data.get("id", "")),
            title=_text(data.get("title")),
            original_title=_text(data.get("original_title")),
            original_title_romanised=_text(data.get("original_title_romanised")),
            director=_text(data.get("director")),
            producer=_text(data.get("producer")),
            release_date=_text(data.get("release_date")),
            running_time=_text(data.get("running_time")),
            rt_score=_text(data.get("rt_score")),
            description=_text(data.get("description")),
        )


@dataclass(frozen=True)
class Person:
    id: str
    name: Optional[str] = None
    gender: Optional[str] = None
    age: Optional[str] = None
    eye_color: Optional[str] = None
    hair_color: Optional[str] = None
    species: Optional[Reference] = None
    films: Tuple[Reference, ...] = ()

    @classmethod
    def from_dict(cls, data: dict) -> "Person":
        return cls(
            id=str(data.get("id", "")),
            name=_text(data.get("name")),
            gender=_text(data.get("gender")),
            age=_text(data.get("age")),
            eye_color=_text(data.get("eye_color")),
            hair_color=_text(data.get("hair_color")),
            species=Reference.parse(data.get("species")),
            films=_references(data.get("films")),
        )


@dataclass(frozen=True)
class Species:
    id: str
    name: Optional[str] = None
    classification: Optional[str] = None
    eye_colors: Optional[str] = None
    hair_colors: Optional[str] = None
    people: Tuple[Reference, ...] = ()
    films: Tuple[Reference, ...] = ()

    @classmethod
    def from_dict(cls, data: dict) -> "Species":
        return cls(
            id=str(data.get("id", "")),
            name=_text(data.get("name")),
            classification=_text(data.get("classification")),
            eye_colors=_text(data.get("eye_colors")),
            hair_colors=_text(data.get("hair_colors")),
            people=_references(data.get("people")),
            films=_references(data.get("films")),
        )


@dataclass(frozen=True)
class Location:
    id: str
    name: Optional[str] = None
    films: Tuple[Reference, ...] = ()

    @classmethod
    def from_dict(cls, data: dict) -> "Location":
        return cls(
            id=str(data.get("id", "")),
            name=_text(data.get("name")),
            films=_references(data.get("films")),
        )


@dataclass(frozen=True)
class Vehicle:
    id: str
    name: Optional[str] = None
    films: Tuple[Reference, ...] = ()

    @classmethod
    def from_dict(cls, data: dict) -> "Vehicle":
        return cls(
            id=str(data.get("id", "")),
            name=_text(data.get("name")),
            films=_references(data.get("films")),
        )


_MODELS = {
    "films": Film,
    "locations": Location,
    "vehicles": Vehicle,
    "people": Person,
    "species": Species,
}


def _records(model, raw: Optional[Iterable]) -> Optional[tuple]:
    if raw is None:
        return None
    return tuple(model.from_dict(item) for item in raw if isinstance(item, dict))


@dataclass(frozen=True)
class Dataset:
    """
    The five collections fetched for one generation pass.

    A collection is None when its fetch failed. Locations and vehicles are
    optional: the accessors below treat a missing one as empty.
    """
    films: Optional[Tuple[Film, ...]] = None
    people: Optional[Tuple[Person, ...]] = None
    species: Optional[Tuple[Species, ...]] = None
    locations: Optional[Tuple[Location, ...]] = None
    vehicles: Optional[Tuple[Vehicle, ...]] = None

    @classmethod
    def from_collections(cls, collections: Dict[str, Optional[list]]) -> "Dataset":
        """Build a Dataset from raw API output (collection name -> list or None)."""
        return cls(**{
            name: _records(model, collections.get(name))
            for name, model in _MODELS.items()
        })

    def missing(self, names: Iterable[str] = REQUIRED_COLLECTIONS) -> list:
        """Names of the given collections that failed to load."""
        return [name for name in names if getattr(self, name) is None]

    def collection(self, name: str) -> tuple:
        """A collection by name, empty when it failed to load."""
        records = getattr(self, name)
        return records if records is not None else ()

    def counts(self) -> Dict[str, Optional[int]]:
        """Record count per collection (None for failed fetches)."""
        return {
            name: (len(getattr(self, name)) if getattr(self, name) is not None else None)
            for name in COLLECTIONS
        }
