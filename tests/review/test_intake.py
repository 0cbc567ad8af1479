"""Tests for submission intake validation."""

from __future__ import annotations

import pytest

from codereview.errors import ValidationError
from codereview.review.intake import (
    MAX_UPLOAD_BYTES,
    ReviewSubmission,
    submission_from_text,
    submission_from_upload,
    validate_upload,
)


class TestTextSubmission:
    def test_accepts_code(self) -> None:
        sub = submission_from_text("print(1)", "python")
        assert sub == ReviewSubmission(code="print(1)", language="python")

    def test_code_not_trimmed(self) -> None:
        assert submission_from_text("  x = 1\n", "python").code == "  x = 1\n"

    def test_blank_language_becomes_auto(self) -> None:
        assert submission_from_text("x", None).language == "auto"
        assert submission_from_text("x", "").language == "auto"

    @pytest.mark.parametrize("code", ["", "   ", "\n\t\n", None])
    def test_empty_code_rejected(self, code: str | None) -> None:
        with pytest.raises(ValidationError, match="No code provided"):
            submission_from_text(code, "python")


class TestUploadValidation:
    @pytest.mark.parametrize("filename", ["tool.exe", "image.png", "README", "a.txt"])
    def test_disallowed_extension(self, filename: str) -> None:
        with pytest.raises(ValidationError, match="is not supported"):
            validate_upload(filename, 10)

    def test_extension_named_in_message(self) -> None:
        with pytest.raises(ValidationError, match=r"\.exe"):
            validate_upload("setup.EXE", 10)

    def test_size_limit_inclusive(self) -> None:
        validate_upload("main.py", MAX_UPLOAD_BYTES)
        with pytest.raises(ValidationError, match="File too large"):
            validate_upload("main.py", MAX_UPLOAD_BYTES + 1)

    @pytest.mark.parametrize("filename", ["config.yaml", "lib.hpp", "Main.PY"])
    def test_allowed_extensions(self, filename: str) -> None:
        validate_upload(filename, 1)


class TestUploadSubmission:
    def test_language_inferred_from_filename(self) -> None:
        sub = submission_from_upload("main.go", b"package main\n", "auto")
        assert sub.language == "go"
        assert sub.filename == "main.go"
        assert sub.code == "package main\n"

    def test_explicit_language_wins(self) -> None:
        sub = submission_from_upload("main.go", b"x", "rust")
        assert sub.language == "rust"

    def test_unmapped_allowed_extension_stays_auto(self) -> None:
        assert submission_from_upload("data.json", b"{}", None).language == "auto"

    def test_invalid_utf8_replaced(self) -> None:
        sub = submission_from_upload("a.py", b"x = '\xff'", None)
        assert "\ufffd" in sub.code

    def test_empty_file_rejected(self) -> None:
        with pytest.raises(ValidationError, match="No code provided"):
            submission_from_upload("a.py", b"  \n", None)

    def test_oversized_rejected_before_decoding(self) -> None:
        with pytest.raises(ValidationError, match="File too large"):
            submission_from_upload("a.py", b"x" * (MAX_UPLOAD_BYTES + 1), None)
