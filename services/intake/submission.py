from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from domain.models import Applicant, ApplicantDraft
from domain.value_objects import FieldError
from services.navigation import Navigator
from services.store.applicants import ApplicantStore
from services.store.commands import AddApplicant, UpdateApplicant, dispatch
from services.validation.rules import to_fields, validate

logger = logging.getLogger(__name__)


@dataclass
class SubmissionResult:
    errors: dict[str, FieldError] = field(default_factory=dict)
    applicant: Optional[Applicant] = None

    @property
    def ok(self) -> bool:
        return not self.errors


def submit_applicant(
    store: ApplicantStore, navigator: Navigator, draft: ApplicantDraft
) -> SubmissionResult:
    """Form submit: validate -> add -> move to the table page."""
    errors = validate(draft)
    if errors:
        logger.info("submission rejected: %s", ", ".join(e.code for e in errors.values()))
        return SubmissionResult(errors=errors)

    applicant = dispatch(store, AddApplicant(to_fields(draft)))
    navigator.applicant_added()
    return SubmissionResult(applicant=applicant)


def save_applicant(store: ApplicantStore, applicant_id: int, draft: ApplicantDraft) -> SubmissionResult:
    """Table edit: same rules as a new entry, id kept."""
    errors = validate(draft)
    if errors:
        logger.info(
            "edit of applicant id=%s rejected: %s",
            applicant_id,
            ", ".join(e.code for e in errors.values()),
        )
        return SubmissionResult(errors=errors)

    dispatch(store, UpdateApplicant(applicant_id, to_fields(draft)))
    return SubmissionResult(applicant=store.get(applicant_id))
