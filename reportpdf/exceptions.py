"""Custom exceptions for reportpdf."""

from typing import Optional


class ReportPdfError(Exception):
    """Base exception for reportpdf errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class DocumentFinalizedError(ReportPdfError):
    """Exception raised when a builder is used after ``to_buffer()``."""

    pass


class SerializationError(ReportPdfError):
    """Exception raised while serializing a document to PDF bytes."""

    pass
