from __future__ import annotations

import logging
from collections.abc import Callable

from domain.models import Applicant, ApplicantFields

logger = logging.getLogger(__name__)

Listener = Callable[[tuple[Applicant, ...]], None]


class ApplicantNotFound(LookupError):
    def __init__(self, applicant_id: int) -> None:
        super().__init__(f"applicant not found: {applicant_id}")
        self.applicant_id = applicant_id


class ApplicantStore:
    """
    The single in-memory collection of applicants.

    Ids come from a counter that only moves forward, so an id freed by a
    delete is never handed out again. Callers validate before `add`/`update`;
    the store only guards id invariants.
    """

    def __init__(self) -> None:
        self._records: list[Applicant] = []
        self._next_id = 1
        self._listeners: list[Listener] = []

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, applicant_id: object) -> bool:
        return any(a.id == applicant_id for a in self._records)

    def _index(self, applicant_id: int) -> int:
        for i, a in enumerate(self._records):
            if a.id == applicant_id:
                return i
        raise ApplicantNotFound(applicant_id)

    def list(self) -> tuple[Applicant, ...]:
        return tuple(self._records)

    def get(self, applicant_id: int) -> Applicant:
        return self._records[self._index(applicant_id)]

    def add(self, fields: ApplicantFields) -> Applicant:
        applicant = Applicant(id=self._next_id, **fields.model_dump())
        self._next_id += 1
        self._records.append(applicant)
        logger.info("added applicant id=%s", applicant.id)
        self._notify()
        return applicant

    def update(self, applicant_id: int, fields: ApplicantFields) -> None:
        i = self._index(applicant_id)
        self._records[i] = Applicant(id=applicant_id, **fields.model_dump())
        logger.info("updated applicant id=%s", applicant_id)
        self._notify()

    def delete(self, applicant_id: int) -> None:
        i = self._index(applicant_id)
        del self._records[i]
        logger.info("deleted applicant id=%s", applicant_id)
        self._notify()

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call `listener(snapshot)` after every change. Returns an unsubscribe handle."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        snapshot = self.list()
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                # the mutation already happened; keep the remaining listeners going
                logger.exception("applicant store listener failed")
