import pytest
from pydantic import ValidationError

from domain.models import Applicant, ApplicantDraft, ApplicantFields, Gender, TechStack, coerce_age


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("25", 25),
        (" 42 years", 42),
        ("", None),
        ("abc", None),
        ("0", None),
        (0, None),
        (None, None),
        (30, 30),
        (30.9, 30),
        (float("nan"), None),
    ],
)
def test_coerce_age(raw, expected):
    assert coerce_age(raw) == expected


def test_draft_accepts_external_field_names():
    draft = ApplicantDraft(techStack=["react"], age="31")
    assert draft.tech_stack == ["react"]
    assert draft.age == 31


def test_draft_accepts_python_field_names_and_enums():
    draft = ApplicantDraft(tech_stack=[TechStack.VUE], gender=Gender.FEMALE)
    assert draft.tech_stack == ["vue"]
    assert draft.gender == "female"


def test_draft_defaults_are_empty():
    draft = ApplicantDraft()
    assert draft.name == ""
    assert draft.age is None
    assert draft.gender is None
    assert draft.tech_stack == []


def test_applicant_row_and_fields():
    applicant = Applicant(
        id=3,
        name="Ada",
        age=36,
        email="ada@x.org",
        gender=Gender.FEMALE,
        tech_stack=(TechStack.TYPESCRIPT, TechStack.ANGULAR),
        hobbies="maths",
    )
    assert applicant.to_row()["techStack"] == "typescript, angular"
    assert "id" not in applicant.fields.model_dump()
    assert applicant.model_dump(by_alias=True)["techStack"] == (TechStack.TYPESCRIPT, TechStack.ANGULAR)


def test_fields_reject_values_that_fail_the_rules():
    with pytest.raises(ValidationError) as exc:
        ApplicantFields(name="", age=3, email="x", gender="male", tech_stack=(), hobbies="")
    message = str(exc.value)
    for code in ("NameTooShort", "AgeOutOfRange", "InvalidEmail", "TechStackRequired", "HobbiesRequired"):
        assert code in message


def test_invalid_fields_never_reach_the_store(store):
    with pytest.raises(ValidationError):
        store.add(
            ApplicantFields(
                name="J", age=25, email="a@b.com", gender="male", tech_stack=("react",), hobbies="chess"
            )
        )
    assert len(store) == 0


def test_valid_fields_construct():
    fields = ApplicantFields(
        name="Jo", age=25, email="a@b.com", gender="male", techStack=["react"], hobbies="chess"
    )
    assert fields.tech_stack == (TechStack.REACT,)
