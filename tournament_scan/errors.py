"""
Scanner Errors - Failure kinds surfaced by the scan entry points

Only the OCR boundary and the multi-photograph orchestration raise these.
Extraction stages never raise; unusable rows are skipped.
"""
from typing import Optional


class ScannerError(Exception):
    """Base class for all scan failures."""

    message = "Could not scan the tournament listing."

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.message
        super().__init__(self.message)


class InvalidImage(ScannerError):
    message = "Could not process the image."


class OcrFailed(ScannerError):
    """Wraps an opaque failure raised by the OCR collaborator."""

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(f"OCR failed: {cause}")


class NoTextFound(ScannerError):
    message = "No text found in the image."


class ParsingFailed(ScannerError):
    # Reserved for structural validation; the pipeline does not raise it yet
    message = "Could not parse poker tournament data from this image."
