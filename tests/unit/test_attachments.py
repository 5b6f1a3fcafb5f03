"""Tests for attachment size checks and data-URL encoding."""

import pytest

from casetrack.application.services.attachments import (
    check_attachment_size,
    encode_attachment,
)
from casetrack.domain.exceptions import AttachmentReadException, AttachmentTooLargeException


def test_encodes_data_url() -> None:
    attachment = encode_attachment("nota.txt", "text/plain", b"abc", "Bruno Silva", 10)
    assert attachment.content == "data:text/plain;base64,YWJj"
    assert attachment.file_size == 3
    assert attachment.uploaded_by == "Bruno Silva"
    assert attachment.id


def test_missing_type_defaults_to_octet_stream() -> None:
    attachment = encode_attachment("blob", None, b"x", "Ana", 10)
    assert attachment.file_type == "application/octet-stream"


def test_size_limit_is_enforced() -> None:
    with pytest.raises(AttachmentTooLargeException):
        encode_attachment("big.bin", "application/octet-stream", b"x" * 11, "Ana", 10)
    with pytest.raises(AttachmentTooLargeException):
        check_attachment_size("big.bin", 11, 10)
    check_attachment_size("unknown.bin", None, 10)


def test_empty_file_is_rejected() -> None:
    with pytest.raises(AttachmentReadException):
        encode_attachment("empty.txt", "text/plain", b"", "Ana", 10)
