"""Attachment encoding: size check first, then data-URL encoding."""

import base64

from casetrack.domain.entities import Attachment
from casetrack.domain.exceptions import (
    AttachmentReadException,
    AttachmentTooLargeException,
)
from casetrack.shared.utils.datetime import utc_now_iso
from casetrack.shared.utils.generators import generate_cuid

DEFAULT_CONTENT_TYPE = "application/octet-stream"


def check_attachment_size(file_name: str, size: int | None, max_bytes: int) -> None:
    """Raise AttachmentTooLargeException when a known size exceeds max_bytes."""
    if size is not None and size > max_bytes:
        raise AttachmentTooLargeException(file_name, size, max_bytes)


def encode_attachment(
    file_name: str,
    file_type: str | None,
    data: bytes,
    uploaded_by: str,
    max_bytes: int,
) -> Attachment:
    """Build an Attachment whose content is a base64 data URL.

    The size limit is enforced before any encoding work.

    Raises:
        AttachmentTooLargeException: data is larger than max_bytes.
        AttachmentReadException: data is empty or could not be encoded.
    """
    check_attachment_size(file_name, len(data), max_bytes)
    if not data:
        raise AttachmentReadException(file_name, "file is empty")
    content_type = file_type or DEFAULT_CONTENT_TYPE
    try:
        payload = base64.b64encode(data).decode("ascii")
    except (TypeError, ValueError) as e:
        raise AttachmentReadException(file_name, str(e)) from e
    return Attachment(
        id=generate_cuid(),
        file_name=file_name,
        file_type=content_type,
        file_size=len(data),
        content=f"data:{content_type};base64,{payload}",
        uploaded_by=uploaded_by,
        timestamp=utc_now_iso(),
    )
