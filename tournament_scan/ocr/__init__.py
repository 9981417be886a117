"""
OCR Module - Adapter for the external OCR microservice

Exports:
- TournamentOCRClient: HTTP client returning TextFragments
- TextRecognizer: Interface any recognizer must satisfy
- OcrServiceError: Client-side OCR failure
- get_ocr_client: Singleton accessor
"""

from .ocr_client import TournamentOCRClient, TextRecognizer, OcrServiceError, get_ocr_client

__all__ = [
    'TournamentOCRClient',
    'TextRecognizer',
    'OcrServiceError',
    'get_ocr_client'
]
