#!/usr/bin/env python3
"""
OCR Client - Listing Photograph Recognition via Microservice

Connects to the OCR microservice (doctr) to:
- Send a listing photograph (JPG, PNG, HEIC converted upstream)
- Receive recognized words with normalized bounding boxes
- Return TextFragments in the scanner's coordinate convention

The service reports boxes with a top-left origin (y grows downward). The
scanner expects a bottom-left origin, so every box is flipped on the way in.

Usage:
    from tournament_scan.ocr import get_ocr_client

    client = get_ocr_client()
    fragments = client.recognize(image_bytes, "listing.jpg")
"""

import os
import re
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol, Sequence

import requests
import yaml

from ..config import get_scanner_config
from ..models import FragmentBox, TextFragment

logger = logging.getLogger(__name__)


class OcrServiceError(RuntimeError):
    """The OCR service was unreachable, timed out or answered with garbage."""


class TextRecognizer(Protocol):
    """Anything that turns image bytes into positioned text fragments."""

    def recognize(self, image_bytes: bytes, filename: str = "listing.png") -> List[TextFragment]:
        ...


class TournamentOCRClient:
    """
    OCR client for tournament listing photographs.

    Connects to the doctr microservice on a configurable URL.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[int] = None
    ):
        """
        Initialize OCR client.

        Args:
            base_url: Base URL of OCR service (default from env or config)
            timeout: Request timeout in seconds (default from config)
        """
        config = get_scanner_config()
        if base_url is None:
            base_url = os.getenv('TOURNAMENT_OCR_URL') or os.getenv('OCR_SERVICE_URL') or config.ocr_url

        self.base_url = base_url.rstrip('/')
        self.timeout = timeout if timeout is not None else config.ocr_timeout
        self.process_endpoint = "/process"
        self.health_endpoint = "/health"

        logger.info(f"✅ TournamentOCRClient initialized: {self.base_url}")

    def health_check(self) -> bool:
        """Check if OCR service is healthy."""
        try:
            resp = requests.get(f"{self.base_url}{self.health_endpoint}", timeout=10)
            return resp.status_code == 200
        except requests.RequestException as e:
            logger.warning(f"OCR health check failed: {e}")
            return False

    def recognize(self, image_bytes: bytes, filename: str = "listing.png") -> List[TextFragment]:
        """
        Recognize text in a listing photograph.

        Args:
            image_bytes: Encoded image
            filename: Filename for the image (used for the MIME type)

        Returns:
            TextFragments with bottom-left-origin normalized boxes
        """
        files = {
            'file': (filename, image_bytes, self._get_mime_type(filename))
        }

        try:
            logger.info(f"📤 Sending image to OCR: {filename} ({len(image_bytes)} bytes)")
            resp = requests.post(
                f"{self.base_url}{self.process_endpoint}",
                files=files,
                timeout=self.timeout
            )
            resp.raise_for_status()
        except requests.Timeout as e:
            logger.error("OCR request timed out")
            raise OcrServiceError("OCR service timeout") from e
        except requests.RequestException as e:
            logger.error(f"OCR request failed: {e}")
            raise OcrServiceError(f"OCR service error: {e}") from e

        payload = self._parse_payload(resp)
        fragments = self.parse_fragments(payload)
        logger.info(f"✅ OCR complete: {len(fragments)} fragments")
        return fragments

    def _parse_payload(self, resp: requests.Response) -> Any:
        """The service answers in YAML; fall back to JSON when YAML parsing fails."""
        try:
            result = yaml.safe_load(self._fix_malformed_yaml(resp.text))
        except yaml.YAMLError as yaml_err:
            logger.warning(f"YAML parsing failed, trying JSON: {yaml_err}")
            try:
                result = resp.json()
            except ValueError as json_err:
                raise OcrServiceError(
                    f"OCR service returned invalid response format. Status: {resp.status_code}"
                ) from json_err

        if result is None:
            raise OcrServiceError("Failed to parse OCR response")
        return result

    def _fix_malformed_yaml(self, yaml_text: str) -> str:
        """
        Quote text values that start with YAML special characters.

        Listing screens are full of '*' and '@' glyphs; an unquoted
        '- text: *' line would otherwise be read as an alias. Bare words
        like 'No' (a re-entry value) would be read as booleans.
        """
        special_chars = set('*@`|>&!%#{}[],?:')
        yaml_bool_words = {'yes', 'no', 'on', 'off', 'true', 'false', 'null', '~'}
        fixed_lines = []

        for line in yaml_text.split('\n'):
            match = re.match(r'^(\s*-?\s*text:\s*)([^"\'\n]+?)(\s*)$', line)
            if match:
                prefix, value, trailing = match.group(1), match.group(2).strip(), match.group(3)
                if value and (value[0] in special_chars or ':' in value or value.lower() in yaml_bool_words):
                    escaped = value.replace('"', '\\"')
                    line = f'{prefix}"{escaped}"{trailing}'
            fixed_lines.append(line)

        return '\n'.join(fixed_lines)

    def parse_fragments(self, response: Any) -> List[TextFragment]:
        """
        Convert an OCR response into TextFragments.

        Two response shapes are supported:
        {"words": [{"text": "...", "bbox": [x0, y0, x1, y1]}]}
        {"pages": [{"words": [{"value": "...", "geometry": [[x0, y0], [x1, y1]]}]}]}
        """
        if not isinstance(response, dict):
            return []

        raw_words: List[Dict[str, Any]] = []
        if response.get('pages'):
            for page in response['pages']:
                words = page.get('words') or [
                    word for line in page.get('lines', []) for word in line.get('words', [])
                ]
                raw_words.extend(words)
        else:
            raw_words = [w for w in response.get('words', []) if isinstance(w, dict)]

        fragments = []
        for word in raw_words:
            text = str(word.get('text', word.get('value', '')) or '')
            bbox = word.get('bbox', word.get('bbox_normalized', word.get('geometry')))
            box = self._to_fragment_box(bbox)
            if text.strip() and box is not None:
                fragments.append(TextFragment(text=text, box=box))
        return fragments

    def _to_fragment_box(self, bbox: Any) -> Optional[FragmentBox]:
        """Flip a top-left-origin bbox (flat or point list) into a bottom-left-origin box."""
        if not bbox:
            return None
        try:
            if len(bbox) == 4 and isinstance(bbox[0], (int, float)):
                x0, y0, x1, y1 = (float(v) for v in bbox)
            elif isinstance(bbox[0], (list, tuple)):
                xs = [float(p[0]) for p in bbox]
                ys = [float(p[1]) for p in bbox]
                x0, y0, x1, y1 = min(xs), min(ys), max(xs), max(ys)
            else:
                return None
        except (IndexError, TypeError, ValueError):
            return None

        return FragmentBox(x=x0, y=1.0 - y1, w=x1 - x0, h=y1 - y0)

    def _get_mime_type(self, filename: str) -> str:
        """Get MIME type from filename."""
        ext = Path(filename).suffix.lower()
        mime_types = {
            '.jpg': 'image/jpeg',
            '.jpeg': 'image/jpeg',
            '.png': 'image/png',
            '.gif': 'image/gif',
            '.tiff': 'image/tiff',
            '.tif': 'image/tiff',
            '.webp': 'image/webp'
        }
        return mime_types.get(ext, 'application/octet-stream')


# Singleton instance
_ocr_client_instance = None


def get_ocr_client(base_url: Optional[str] = None) -> TournamentOCRClient:
    """Get or create singleton OCR client instance."""
    global _ocr_client_instance

    if _ocr_client_instance is None:
        _ocr_client_instance = TournamentOCRClient(base_url=base_url)

    return _ocr_client_instance
