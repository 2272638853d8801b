from __future__ import annotations

import logging

import pandas as pd
import streamlit as st

from apps.ui.components.applicant_inputs import applicant_inputs, show_errors
from domain.models import Applicant
from services.intake.submission import save_applicant
from services.store.applicants import ApplicantNotFound, ApplicantStore
from services.store.commands import DeleteApplicant, dispatch

logger = logging.getLogger(__name__)

COLUMNS = ["name", "age", "email", "gender", "techStack", "hobbies"]


def applicants_frame(applicants: tuple[Applicant, ...]) -> pd.DataFrame:
    """One row per applicant, indexed by id, in store order."""
    if not applicants:
        return pd.DataFrame(columns=COLUMNS)
    df = pd.DataFrame([a.to_row() for a in applicants]).set_index("id")
    return df[COLUMNS]


def _edit_row(store: ApplicantStore, applicant: Applicant) -> None:
    key = f"edit_{applicant.id}"
    with st.form(key):
        draft, slots = applicant_inputs(key, initial=applicant.fields)
        saved = st.form_submit_button("Save")

    if saved:
        try:
            result = save_applicant(store, applicant.id, draft)
        except ApplicantNotFound:
            logger.exception("edit targeted a stale row")
            st.error("This applicant no longer exists.")
            return
        if not result.ok:
            show_errors(slots, result.errors)
            return
        st.toast(f"Saved {result.applicant.name}")
        st.rerun()

    if st.button("Delete", key=f"delete_{applicant.id}"):
        try:
            dispatch(store, DeleteApplicant(applicant.id))
        except ApplicantNotFound:
            logger.exception("delete targeted a stale row")
            st.error("This applicant no longer exists.")
            return
        st.toast(f"Deleted {applicant.name}")
        st.rerun()


def render_table(store: ApplicantStore) -> None:
    st.header("Applicants")

    applicants = store.list()
    if not applicants:
        st.info("No applicants yet. Use the form to add one.")
        return

    st.dataframe(applicants_frame(applicants))

    for applicant in applicants:
        with st.expander(f"{applicant.name} (#{applicant.id})"):
            _edit_row(store, applicant)
