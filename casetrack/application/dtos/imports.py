"""DTOs for case import (no dependency on persistence)."""

from dataclasses import dataclass, field

from casetrack.domain.entities import CaseEntity


@dataclass(frozen=True)
class ImportReport:
    """Outcome of reconciling one batch of incoming rows.

    Rejected lists hold trimmed process numbers in input order.
    """

    accepted: list[CaseEntity] = field(default_factory=list)
    rejected_duplicate_in_system: list[str] = field(default_factory=list)
    rejected_duplicate_in_file: list[str] = field(default_factory=list)
    skipped_without_number: int = 0

    @property
    def accepted_count(self) -> int:
        return len(self.accepted)

    def summary(self) -> str:
        """Multi-line report for display after an import."""
        lines = [f"{self.accepted_count} case(s) imported."]
        if self.rejected_duplicate_in_system:
            lines.append("Already in the system, not imported:")
            lines.extend(f"- {number}" for number in self.rejected_duplicate_in_system)
        if self.rejected_duplicate_in_file:
            lines.append("Repeated in the file, only the first occurrence was imported:")
            lines.extend(f"- {number}" for number in self.rejected_duplicate_in_file)
        return "\n".join(lines)
