from __future__ import annotations

import re
from collections.abc import Callable

from core.config import settings
from domain.models import ApplicantDraft, ApplicantFields, Gender, TechStack
from domain.value_objects import FieldError

NAME_RE = re.compile(r"^[A-Za-z ]{2,}$")
EMAIL_RE = re.compile(r"^[\w.-]+@([\w-]+\.)+[\w-]{2,4}$", re.ASCII)

NAME_TOO_SHORT = "NameTooShort"
AGE_OUT_OF_RANGE = "AgeOutOfRange"
INVALID_EMAIL = "InvalidEmail"
GENDER_REQUIRED = "GenderRequired"
INVALID_GENDER = "InvalidGender"
HOBBIES_REQUIRED = "HobbiesRequired"
TECH_STACK_REQUIRED = "TechStackRequired"
UNKNOWN_TECHNOLOGY = "UnknownTechnology"

_GENDERS = {g.value for g in Gender}
_TECHNOLOGIES = {t.value for t in TechStack}


def _name(draft: ApplicantDraft) -> FieldError | None:
    name = draft.name.strip()
    if len(name) < 2 or not NAME_RE.match(name):
        return FieldError(NAME_TOO_SHORT, "Name must be at least 2 characters.")
    return None


def _age(draft: ApplicantDraft) -> FieldError | None:
    age = draft.age
    if age is None or age < settings.AGE_MIN or age > settings.AGE_MAX:
        return FieldError(
            AGE_OUT_OF_RANGE,
            f"Age must be a number between {settings.AGE_MIN} and {settings.AGE_MAX}.",
        )
    return None


def _email(draft: ApplicantDraft) -> FieldError | None:
    email = draft.email.strip()
    if not email or not EMAIL_RE.match(email):
        return FieldError(INVALID_EMAIL, "Invalid email address.")
    return None


def _gender(draft: ApplicantDraft) -> FieldError | None:
    if not draft.gender:
        return FieldError(GENDER_REQUIRED, "Gender is required.")
    if draft.gender not in _GENDERS:
        return FieldError(INVALID_GENDER, "Gender must be male, female or other.")
    return None


def _hobbies(draft: ApplicantDraft) -> FieldError | None:
    if not draft.hobbies.strip():
        return FieldError(HOBBIES_REQUIRED, "Hobbies are required.")
    return None


def _tech_stack(draft: ApplicantDraft) -> FieldError | None:
    if not draft.tech_stack:
        return FieldError(TECH_STACK_REQUIRED, "At least one technology must be selected.")
    unknown = [t for t in draft.tech_stack if t not in _TECHNOLOGIES]
    if unknown:
        return FieldError(UNKNOWN_TECHNOLOGY, f"Unknown technology: {', '.join(unknown)}.")
    return None


# field -> rule; order matches the form layout
RULES: dict[str, Callable[[ApplicantDraft], FieldError | None]] = {
    "name": _name,
    "age": _age,
    "email": _email,
    "gender": _gender,
    "tech_stack": _tech_stack,
    "hobbies": _hobbies,
}


def validate(draft: ApplicantDraft) -> dict[str, FieldError]:
    """Run every rule (no short-circuit). Empty mapping means the draft is valid."""
    errors: dict[str, FieldError] = {}
    for field, rule in RULES.items():
        err = rule(draft)
        if err is not None:
            errors[field] = err
    return errors


def to_fields(draft: ApplicantDraft) -> ApplicantFields:
    """Normalize a draft that passed `validate` into storable fields."""
    errors = validate(draft)
    if errors:
        raise ValueError(f"draft does not validate: {sorted(errors)}")
    return ApplicantFields(
        name=draft.name.strip(),
        age=draft.age,
        email=draft.email.strip(),
        gender=Gender(draft.gender),
        tech_stack=tuple(TechStack(t) for t in dict.fromkeys(draft.tech_stack)),
        hobbies=draft.hobbies.strip(),
    )
