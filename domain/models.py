from __future__ import annotations

import re
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class TechStack(str, Enum):
    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"
    REACT = "react"
    ANGULAR = "angular"
    VUE = "vue"
    OTHER = "other"


TECH_STACK_LABELS = {
    TechStack.JAVASCRIPT: "JavaScript",
    TechStack.TYPESCRIPT: "TypeScript",
    TechStack.REACT: "React",
    TechStack.ANGULAR: "Angular",
    TechStack.VUE: "Vue",
    TechStack.OTHER: "Other",
}


def coerce_age(value: Any) -> Optional[int]:
    """
    Read an age the way a number input does: take the leading integer of a
    string, and treat blank, unparseable or zero input as missing.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value or None
    if isinstance(value, float):
        if value != value:  # NaN
            return None
        return int(value) or None
    m = _LEADING_INT.match(str(value))
    if not m:
        return None
    return int(m.group(1)) or None


class ApplicantDraft(BaseModel):
    """Raw form input. Nothing here is trusted until validation passes."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    age: Optional[int] = None
    email: str = ""
    gender: Optional[str] = None
    tech_stack: List[str] = Field(default_factory=list, alias="techStack")
    hobbies: str = ""

    @field_validator("age", mode="before")
    @classmethod
    def _age(cls, v: Any) -> Optional[int]:
        return coerce_age(v)

    @field_validator("name", "email", "hobbies", mode="before")
    @classmethod
    def _text(cls, v: Any) -> str:
        return "" if v is None else str(v)

    @field_validator("gender", mode="before")
    @classmethod
    def _gender(cls, v: Any) -> Optional[str]:
        if isinstance(v, Gender):
            return v.value
        return str(v) if v else None

    @field_validator("tech_stack", mode="before")
    @classmethod
    def _tech_stack(cls, v: Any) -> List[str]:
        if v is None:
            return []
        if isinstance(v, (str, TechStack)):
            v = [v]
        return [t.value if isinstance(t, TechStack) else str(t) for t in v]


class ApplicantFields(BaseModel):
    """Every applicant field except the id. Construction runs the validation rules."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    age: int
    email: str
    gender: Gender
    tech_stack: tuple[TechStack, ...] = Field(alias="techStack")
    hobbies: str

    @model_validator(mode="after")
    def _passes_rules(self) -> ApplicantFields:
        # imported here: the rules module imports this one
        from services.validation.rules import validate

        errors = validate(
            ApplicantDraft(
                name=self.name,
                age=self.age,
                email=self.email,
                gender=self.gender,
                tech_stack=self.tech_stack,
                hobbies=self.hobbies,
            )
        )
        if errors:
            raise ValueError(
                "applicant fails validation: "
                + ", ".join(f"{field}={err.code}" for field, err in errors.items())
            )
        return self


class Applicant(ApplicantFields):
    id: int

    @property
    def fields(self) -> ApplicantFields:
        return ApplicantFields(**self.model_dump(exclude={"id"}))

    def to_row(self) -> dict[str, Any]:
        """Table row in the external field naming."""
        return {
            "id": self.id,
            "name": self.name,
            "age": self.age,
            "email": self.email,
            "gender": self.gender.value,
            "techStack": ", ".join(t.value for t in self.tech_stack),
            "hobbies": self.hobbies,
        }
