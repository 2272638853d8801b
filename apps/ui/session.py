"""
Per-session ownership of the applicant store and the navigator.

Each browser session gets its own store; views receive it explicitly instead
of reaching for module-level state.
"""

from __future__ import annotations

import logging

import streamlit as st

from services.navigation import Navigator
from services.store.applicants import ApplicantStore

logger = logging.getLogger(__name__)

STORE_KEY = "applicant_store"
NAVIGATOR_KEY = "navigator"


def _log_changes(snapshot) -> None:
    logger.info("applicants changed: %d record(s)", len(snapshot))


def get_store() -> ApplicantStore:
    if STORE_KEY not in st.session_state:
        store = ApplicantStore()
        store.subscribe(_log_changes)
        st.session_state[STORE_KEY] = store
    return st.session_state[STORE_KEY]


def get_navigator() -> Navigator:
    if NAVIGATOR_KEY not in st.session_state:
        st.session_state[NAVIGATOR_KEY] = Navigator()
    return st.session_state[NAVIGATOR_KEY]
