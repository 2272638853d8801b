"""
Commands the views send to the store. Each one is applied synchronously by
`dispatch`, so the session's script run is the only writer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from domain.models import Applicant, ApplicantFields
from services.store.applicants import ApplicantStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AddApplicant:
    fields: ApplicantFields


@dataclass(frozen=True)
class UpdateApplicant:
    id: int
    fields: ApplicantFields


@dataclass(frozen=True)
class DeleteApplicant:
    id: int


Command = Union[AddApplicant, UpdateApplicant, DeleteApplicant]


def dispatch(store: ApplicantStore, command: Command) -> Applicant | None:
    logger.debug("dispatch %s", type(command).__name__)
    if isinstance(command, AddApplicant):
        return store.add(command.fields)
    if isinstance(command, UpdateApplicant):
        store.update(command.id, command.fields)
        return None
    if isinstance(command, DeleteApplicant):
        store.delete(command.id)
        return None
    raise TypeError(f"unknown command: {command!r}")
