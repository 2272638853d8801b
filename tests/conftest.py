import pytest

from domain.models import ApplicantDraft
from services.navigation import Navigator
from services.store.applicants import ApplicantStore
from services.validation.rules import to_fields


def make_draft(**overrides) -> ApplicantDraft:
    data = {
        "name": "Jo",
        "age": 25,
        "email": "a@b.com",
        "gender": "male",
        "techStack": ["react"],
        "hobbies": "chess",
    }
    data.update(overrides)
    return ApplicantDraft(**data)


def make_fields(**overrides):
    return to_fields(make_draft(**overrides))


@pytest.fixture
def store() -> ApplicantStore:
    return ApplicantStore()


@pytest.fixture
def navigator() -> Navigator:
    return Navigator()


@pytest.fixture
def seeded_store(store):
    for name in ("Ada", "Bob", "Cy"):
        store.add(make_fields(name=name))
    return store
