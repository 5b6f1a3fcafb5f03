"""Lookup entities: Tribunal, Phase and Status share one shape."""

from dataclasses import dataclass

from casetrack.domain.exceptions import ValidationException
from casetrack.shared.utils.text import name_key


@dataclass
class LookupEntity:
    """A named label that cases reference by name (not by id).

    Renaming a lookup does not touch cases that already carry the old name.
    """

    id: int
    name: str

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationException("Name is required", field="name")

    @property
    def name_key(self) -> str:
        return name_key(self.name)
