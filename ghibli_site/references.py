"""
Cross-reference resolution between API collections.

The API links records through URL lists (a person's "films", a species'
"people", ...). These helpers derive associations from those references.
They never modify the records and always return matches in the
collection's original order.

Film membership uses substring containment of the film id in the raw
reference URL unless exact=True. Substring matching is inherited from the
site's original generator: an id contained in another id would over-match.
The ids served by the API are UUIDs, so in practice both modes agree.
"""

from typing import Iterable, List, Optional, Sequence, TypeVar

from .models import Person, Reference, resolve_reference_url

T = TypeVar("T")


def references_film(refs: Iterable[Reference], film_id: str, exact: bool = False) -> bool:
    """True when any reference points at film_id."""
    if not film_id:
        return False
    if exact:
        return any(ref.id == film_id for ref in refs)
    return any(film_id in ref.raw for ref in refs)


def find_by_film(film_id: str, collection: Optional[Sequence[T]], exact: bool = False) -> List[T]:
    """Records of collection whose film references include film_id."""
    if not collection:
        return []
    return [record for record in collection
            if references_film(getattr(record, "films", ()), film_id, exact=exact)]


def find_entity_by_id(entity_id: Optional[str], collection: Optional[Sequence[T]]) -> Optional[T]:
    """First record with the given id, or None."""
    if not entity_id or not collection:
        return None
    return next((record for record in collection if record.id == entity_id), None)


def find_by_reference(ref: Optional[Reference], collection: Optional[Sequence[T]]) -> Optional[T]:
    """Record a reference points at, or None when it dangles."""
    if ref is None:
        return None
    return find_entity_by_id(ref.id, collection)


def unique_species_refs(people: Iterable[Person]) -> List[Reference]:
    """
    Species references of people, deduplicated by raw string.

    Two different spellings of the same species URL stay distinct.
    """
    seen = set()
    refs = []
    for person in people:
        ref = person.species
        if ref is None or ref.raw in seen:
            continue
        seen.add(ref.raw)
        refs.append(ref)
    return refs


def resolve_references(refs: Iterable[Reference], collection: Optional[Sequence[T]]) -> List[T]:
    """
    Resolve a reference list against a collection.

    References that point at a whole collection (".../people/") are
    malformed and skipped, as are references with no matching record.
    """
    resolved = []
    for ref in refs:
        if ref.is_collection_url:
            continue
        record = find_by_reference(ref, collection)
        if record is not None:
            resolved.append(record)
    return resolved
