from __future__ import annotations

import sys
from pathlib import Path

# Ensure repo root is on sys.path so "import services...." works in Streamlit
ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import streamlit as st

from apps.ui.session import get_navigator, get_store
from apps.ui.views.form import render_form
from apps.ui.views.table import render_table
from core.config import settings
from core.logging import configure_logging
from services.navigation import Page

configure_logging()

st.set_page_config(page_title=settings.APP_TITLE, layout="wide")

store = get_store()
navigator = get_navigator()


def form_page() -> None:
    navigator.go_to(Page.FORM)
    render_form(store, navigator, on_added=lambda _applicant: st.switch_page(pages[navigator.current]))


def table_page() -> None:
    navigator.go_to(Page.TABLE)
    render_table(store)


pages = {
    Page.FORM: st.Page(form_page, title=Page.FORM.label, url_path=Page.FORM.url_path, default=True),
    Page.TABLE: st.Page(table_page, title=Page.TABLE.label, url_path=Page.TABLE.url_path),
}

st.navigation(list(pages.values())).run()
