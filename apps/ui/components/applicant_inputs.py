from __future__ import annotations

from typing import Optional

import streamlit as st
from streamlit.delta_generator import DeltaGenerator

from domain.models import TECH_STACK_LABELS, ApplicantDraft, ApplicantFields, Gender, TechStack
from domain.value_objects import FieldError

GENDER_OPTIONS = [g.value for g in Gender]
TECH_OPTIONS = [t.value for t in TechStack]


def _tech_label(value: str) -> str:
    return TECH_STACK_LABELS[TechStack(value)]


def applicant_inputs(
    key: str, initial: Optional[ApplicantFields] = None
) -> tuple[ApplicantDraft, dict[str, DeltaGenerator]]:
    """
    Render the applicant widgets (meant to sit inside an `st.form`).

    Returns the draft read from the widgets and one empty slot per field,
    placed right under its widget, for inline error messages.
    """
    slots: dict[str, DeltaGenerator] = {}

    name = st.text_input(
        "Name",
        value=initial.name if initial else "",
        placeholder="Enter your name",
        key=f"{key}_name",
    )
    slots["name"] = st.empty()

    age = st.number_input(
        "Age",
        value=initial.age if initial else None,
        step=1,
        placeholder="Enter your age",
        key=f"{key}_age",
    )
    slots["age"] = st.empty()

    email = st.text_input(
        "Email",
        value=initial.email if initial else "",
        placeholder="Enter your email",
        key=f"{key}_email",
    )
    slots["email"] = st.empty()

    gender = st.radio(
        "Gender",
        options=GENDER_OPTIONS,
        index=GENDER_OPTIONS.index(initial.gender.value) if initial else 0,
        format_func=str.capitalize,
        horizontal=True,
        key=f"{key}_gender",
    )
    slots["gender"] = st.empty()

    tech_stack = st.multiselect(
        "Tech Stack",
        options=TECH_OPTIONS,
        default=[t.value for t in initial.tech_stack] if initial else [],
        format_func=_tech_label,
        key=f"{key}_tech_stack",
    )
    slots["tech_stack"] = st.empty()

    hobbies = st.text_area(
        "Hobbies",
        value=initial.hobbies if initial else "",
        placeholder="Enter your hobbies",
        key=f"{key}_hobbies",
    )
    slots["hobbies"] = st.empty()

    draft = ApplicantDraft(
        name=name,
        age=age,
        email=email,
        gender=gender,
        tech_stack=tech_stack,
        hobbies=hobbies,
    )
    return draft, slots


def show_errors(slots: dict[str, DeltaGenerator], errors: dict[str, FieldError]) -> None:
    for field, err in errors.items():
        slot = slots.get(field)
        if slot is None:
            st.error(err.message)
        else:
            slot.error(err.message)
