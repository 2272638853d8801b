from __future__ import annotations

from collections.abc import Callable
from typing import Optional

import streamlit as st

from apps.ui.components.applicant_inputs import applicant_inputs, show_errors
from domain.models import Applicant
from services.intake.submission import SubmissionResult, submit_applicant
from services.navigation import Navigator
from services.store.applicants import ApplicantStore

FORM_KEY = "applicant_form"


def render_form(
    store: ApplicantStore,
    navigator: Navigator,
    on_added: Callable[[Applicant], None],
) -> Optional[SubmissionResult]:
    st.header("Applicant Form")

    with st.form(FORM_KEY):
        draft, slots = applicant_inputs(FORM_KEY)
        submitted = st.form_submit_button("Add Applicant", type="primary")

    if not submitted:
        return None

    result = submit_applicant(store, navigator, draft)
    if not result.ok:
        show_errors(slots, result.errors)
        return result

    on_added(result.applicant)
    return result
