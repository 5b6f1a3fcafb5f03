"""Application interfaces (ports).

No runtime imports from casetrack.infrastructure.
"""

from casetrack.application.interfaces.storage import ISnapshotCodec, ISnapshotGateway

__all__ = ["ISnapshotCodec", "ISnapshotGateway"]
