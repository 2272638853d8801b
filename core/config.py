from __future__ import annotations

import os

from pydantic import BaseModel


class Settings(BaseModel):
    APP_TITLE: str = os.getenv("APP_TITLE", "Applicant Registry")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # age window enforced by the validation rules
    AGE_MIN: int = int(os.getenv("AGE_MIN", "18"))
    AGE_MAX: int = int(os.getenv("AGE_MAX", "120"))

    TABLE_URL_PATH: str = os.getenv("TABLE_URL_PATH", "table")


settings = Settings()
