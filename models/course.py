"""Datenmodell für einen gespeicherten Kurs (Pydantic v2).

Ein Course existiert nur in gültigem Zustand: jede Regelverletzung bricht
die Konstruktion mit InvalidCourse ab. Instanzen sind unveränderlich.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, StrictInt, ValidationError, field_validator


class InvalidCourse(ValueError):
    """Ein Kurs verletzt mindestens eine Validierungsregel."""

    def __init__(self, violations: list[str]):
        self.violations = violations
        super().__init__("Ungültiger Kurs: " + "; ".join(violations))


def _describe(error: ValidationError) -> list[str]:
    violations = []
    for err in error.errors():
        field = ".".join(str(part) for part in err["loc"]) or "course"
        msg = err["msg"].removeprefix("Value error, ")
        violations.append(f"{field}: {msg}")
    return violations


def _as_invalid_course(error: ValidationError) -> InvalidCourse:
    # model_validate ruft __init__ auf und verpackt dessen InvalidCourse erneut
    for err in error.errors():
        original = err.get("ctx", {}).get("error")
        if isinstance(original, InvalidCourse):
            return InvalidCourse(list(original.violations))
    return InvalidCourse(_describe(error))


class Course(BaseModel):
    """Repräsentiert einen persistierten Kurs."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    length: StrictInt              # Dauer in ganzen Minuten, kein bool/str
    url: str                       # Vollständige Zugriffs-URL
    notes: Optional[str] = None

    def __init__(self, **data):
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise _as_invalid_course(e) from e

    @classmethod
    def model_validate(cls, obj, **kwargs) -> "Course":
        try:
            return super().model_validate(obj, **kwargs)
        except ValidationError as e:
            raise _as_invalid_course(e) from e

    @classmethod
    def model_validate_json(cls, json_data, **kwargs) -> "Course":
        try:
            return super().model_validate_json(json_data, **kwargs)
        except ValidationError as e:
            raise _as_invalid_course(e) from e

    @field_validator("id", "name", "url")
    @classmethod
    def _not_blank(cls, v: str, info) -> str:
        if not v.strip():
            raise ValueError(f"{info.field_name} darf nicht leer sein")
        return v

    @field_validator("length")
    @classmethod
    def _positive_length(cls, v: int) -> int:
        if v <= 0:
            raise ValueError(f"length muss > 0 sein (ist {v})")
        return v

    @field_validator("notes")
    @classmethod
    def _notes_not_blank(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            raise ValueError("notes darf nicht leer sein, wenn angegeben")
        return v
