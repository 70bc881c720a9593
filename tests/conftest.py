import copy

import pytest

from ghibli_site.models import Dataset

API = "https://ghibliapi.vercel.app"

TOTORO = "58611129-2dbc-4a81-a72f-77ddfc1b1b49"
KIKI = "ea660b10-85c4-4ae3-8a5f-41cea3648e3e"
MONONOKE = "0440483e-ca0e-4120-8c50-4c8cd9b965d6"

HUMAN = "af3910a6-429f-4c74-9ad5-dfe1c4aa04f2"
TOTORO_SPECIES = "603428ba-8a86-4b0b-a9f1-65df6abef3d3"
CAT = "74b7f547-1577-4430-806c-c358c8b6bcf5"

RAW = {
    "films": [
        {
            "id": KIKI,
            "title": "Kiki's Delivery Service",
            "original_title": "魔女の宅急便",
            "original_title_romanised": "Majo no takkyūbin",
            "director": "Hayao Miyazaki",
            "producer": "Hayao Miyazaki",
            "release_date": "1989",
            "running_time": "102",
            "rt_score": "96",
            "description": "A young witch moves to a seaside town.",
        },
        {
            "id": TOTORO,
            "title": "My Neighbor Totoro",
            "original_title": "となりのトトロ",
            "original_title_romanised": "Tonari no Totoro",
            "director": "Hayao Miyazaki",
            "producer": "Hayao Miyazaki",
            "release_date": "1988",
            "running_time": "86",
            "rt_score": "93",
            "description": "Two sisters move to the countryside.",
        },
        {
            "id": MONONOKE,
            "title": "Princess Mononoke",
            "original_title": "もののけ姫",
            "original_title_romanised": "Mononoke hime",
            "director": "Hayao Miyazaki",
            "producer": "Toshio Suzuki",
            "release_date": "1997",
            "running_time": "134",
            "rt_score": "92",
            "description": "A prince is cursed by a boar god.",
        },
    ],
    "people": [
        {
            "id": "986faac6-67e3-4fb8-a9ee-bad077c2e7fe",
            "name": "Satsuki Kusakabe",
            "gender": "Female",
            "age": "11",
            "eye_color": "Dark Brown/Black",
            "hair_color": "Dark Brown",
            "species": f"{API}/species/{HUMAN}",
            "films": [f"{API}/films/{TOTORO}"],
        },
        {
            "id": "d5df3c04-f355-4038-833c-83bd3502b6b9",
            "name": "Mei Kusakabe",
            "gender": "Female",
            "age": "4",
            "eye_color": "Brown",
            "hair_color": "Light Brown",
            "species": f"{API}/species/{HUMAN}",
            "films": [f"{API}/films/{TOTORO}"],
        },
        {
            "id": "08ffbce4-7f94-476a-95bc-76d3c3969c19",
            "name": "Totoro",
            "gender": "NA",
            "age": "1300",
            "eye_color": "Grey",
            "hair_color": "Grey",
            "species": f"{API}/species/{TOTORO_SPECIES}",
            "films": [f"{API}/films/{TOTORO}"],
        },
        {
            "id": "7151abc6-1a9e-4e6a-9711-ddb50ea572ec",
            "name": "Jiji",
            "gender": "Male",
            "age": "",
            "eye_color": "Black",
            "hair_color": "Black",
            "species": f"{API}/species/{CAT}",
            "films": [f"{API}/films/{KIKI}"],
        },
    ],
    "species": [
        {
            "id": HUMAN,
            "name": "Human",
            "classification": "Mammal",
            "eye_colors": "Black, Blue, Brown, Grey, Green, Hazel",
            "hair_colors": "Black, Blonde, Brown, Grey, White",
            "people": [
                f"{API}/people/986faac6-67e3-4fb8-a9ee-bad077c2e7fe",
                f"{API}/people/d5df3c04-f355-4038-833c-83bd3502b6b9",
            ],
            "films": [f"{API}/films/{TOTORO}"],
        },
        {
            "id": TOTORO_SPECIES,
            "name": "Totoro",
            "classification": "Spirit",
            "eye_colors": "Black",
            "hair_colors": "Grey, Brown, White",
            "people": [f"{API}/people/08ffbce4-7f94-476a-95bc-76d3c3969c19"],
            "films": [f"{API}/films/{TOTORO}"],
        },
        {
            "id": CAT,
            "name": "Cat",
            "classification": "Mammal",
            "eye_colors": "Black",
            "hair_colors": "Black",
            "people": [f"{API}/people/7151abc6-1a9e-4e6a-9711-ddb50ea572ec"],
            "films": [f"{API}/films/{KIKI}"],
        },
    ],
    "locations": [
        {
            "id": "a8bd9c03-7c80-4c9d-9d2c-1fe0b5b2ec86",
            "name": "Matsuko's House",
            "films": [f"{API}/films/{TOTORO}"],
        },
        {
            "id": "6fc21d53-fb4b-4a6b-bc3e-cbc14e11f2ef",
            "name": "Koriko",
            "films": [f"{API}/films/{KIKI}"],
        },
    ],
    "vehicles": [
        {
            "id": "d8f893b5-1dd9-41a1-9918-0099c1aa2de8",
            "name": "Catbus",
            "films": [f"{API}/films/{TOTORO}"],
        },
    ],
}


@pytest.fixture
def raw_collections():
    return copy.deepcopy(RAW)


@pytest.fixture
def dataset(raw_collections):
    return Dataset.from_collections(raw_collections)


@pytest.fixture
def minimal_collections():
    """One film, one person, nothing else."""
    return {
        "films": [{"id": "f1", "title": "Film One", "release_date": "1988"}],
        "people": [{
            "id": "p1",
            "name": "Person One",
            "gender": "Male",
            "films": ["https://api/films/f1"],
        }],
        "species": [],
        "locations": None,
        "vehicles": None,
    }


class FakeClient:
    """Stands in for GhibliClient; returns canned collections."""

    def __init__(self, collections):
        self.collections = collections
        self.calls = 0

    def fetch_all_collections(self):
        self.calls += 1
        return copy.deepcopy(self.collections)


@pytest.fixture
def fake_client_factory():
    return FakeClient
