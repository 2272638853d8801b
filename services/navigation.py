from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from core.config import settings

logger = logging.getLogger(__name__)


class Page(str, Enum):
    FORM = "form"
    TABLE = "table"

    @property
    def url_path(self) -> str:
        return "" if self is Page.FORM else settings.TABLE_URL_PATH

    @property
    def label(self) -> str:
        return "Applicant Form" if self is Page.FORM else "Applicants"


@dataclass
class Navigator:
    """Two pages, no history. Starts on the form."""

    current: Page = Page.FORM

    def applicant_added(self) -> Page:
        if self.current is Page.FORM:
            logger.info("navigate %s -> %s after add", self.current.value, Page.TABLE.value)
        self.current = Page.TABLE
        return self.current

    def go_to(self, page: Page) -> Page:
        self.current = Page(page)
        return self.current
