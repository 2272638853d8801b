from dataclasses import dataclass


@dataclass(frozen=True)
class FieldError:
    code: str  # e.g. "NameTooShort"
    message: str
