#!/usr/bin/env python3
"""
Tournament Scanner - End-to-End Listing Photograph Processing

Complete pipeline from photograph to structured tournament descriptor:
1. Image validation (Pillow)
2. OCR via the recognizer collaborator
3. Line reconstruction
4. Field extraction and metadata resolution
5. Blind schedule interpretation
6. Capture merging across photographs

Multi-photograph scans are sequential and fail-fast: the first error aborts
the whole scan and no partial descriptor is returned.

Usage:
    from tournament_scan.orchestration import get_tournament_scanner

    scanner = get_tournament_scanner()
    descriptor = scanner.scan_images([first_bytes, second_bytes])
"""

import io
import logging
from dataclasses import replace
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from PIL import Image, UnidentifiedImageError

from ..config import ScannerConfig, get_scanner_config
from ..errors import InvalidImage, NoTextFound, OcrFailed, ScannerError
from ..extraction import BlindScheduleInterpreter, FieldExtractor, MetadataResolver
from ..merging import merge_captures
from ..models import TextFragment, TournamentDescriptor
from ..ocr import TextRecognizer, get_ocr_client
from ..reconstruction import reconstruct_lines

logger = logging.getLogger(__name__)

ImageInput = Union[bytes, str, Path]


def fill_starting_blinds(descriptor: TournamentDescriptor) -> TournamentDescriptor:
    """
    Default missing starting blinds to the first playing level.

    Applied once to the merged descriptor, after every capture is resolved.
    """
    first_level = descriptor.first_playing_level
    if descriptor.starting_small_blind is not None or first_level is None:
        return descriptor
    return replace(
        descriptor,
        starting_small_blind=first_level.small_blind,
        starting_big_blind=first_level.big_blind,
    )


class TournamentScanner:
    """
    Scans tournament listing photographs into TournamentDescriptors.

    Orchestrates the full flow:
    Image → OCR → Lines → Fields → Metadata + Schedule → Merge
    """

    def __init__(self,
                 recognizer: Optional[TextRecognizer] = None,
                 config: Optional[ScannerConfig] = None):
        """
        Args:
            recognizer: OCR collaborator; the HTTP OCR client is used when omitted
            config: Scanner configuration; the cached process config when omitted
        """
        self.config = config or get_scanner_config()
        self._recognizer = recognizer
        self.field_extractor = FieldExtractor()
        self.metadata_resolver = MetadataResolver(min_name_length=self.config.min_name_length)
        self.schedule_interpreter = BlindScheduleInterpreter(
            default_break_minutes=self.config.default_break_minutes,
            default_level_minutes=self.config.default_level_minutes,
            max_level_minutes=self.config.max_level_minutes,
        )
        logger.info("TournamentScanner initialized")

    @property
    def recognizer(self) -> TextRecognizer:
        if self._recognizer is None:
            self._recognizer = get_ocr_client()
        return self._recognizer

    # ------------------------------------------------------------------
    # Fragment entry points (no OCR)
    # ------------------------------------------------------------------

    def scan_fragments(self, fragments: Iterable[TextFragment]) -> TournamentDescriptor:
        """
        Resolve one photograph's OCR fragments into a descriptor.

        Raises:
            NoTextFound: No usable fragment was supplied
        """
        return fill_starting_blinds(self._resolve_capture(fragments))

    def scan_fragment_sets(self, captures: Sequence[Iterable[TextFragment]]) -> TournamentDescriptor:
        """Resolve several photographs' fragments, fail-fast, then merge."""
        if not captures:
            raise InvalidImage()
        merged = merge_captures([self._resolve_capture(fragments) for fragments in captures])
        return fill_starting_blinds(merged)

    def _resolve_capture(self, fragments: Iterable[TextFragment]) -> TournamentDescriptor:
        """One photograph's descriptor, before any cross-capture defaults."""
        fragments = list(fragments)
        lines = reconstruct_lines(fragments, self.config.row_tolerance, debug=self.config.debug_output)
        if not lines:
            raise NoTextFound()

        fields = self.field_extractor.extract(lines)
        descriptor = self.metadata_resolver.resolve(lines, fields)
        levels = self.schedule_interpreter.interpret(lines)

        logger.info(f"Scanned capture: {len(fragments)} fragments, {len(lines)} lines, "
                    f"{len(fields)} fields, {len(levels)} levels")
        return replace(descriptor, levels=levels)

    # ------------------------------------------------------------------
    # Image entry points
    # ------------------------------------------------------------------

    def scan_image(self, image: ImageInput, filename: str = "listing.png") -> TournamentDescriptor:
        """
        Scan one photograph.

        Args:
            image: Image as bytes or file path
            filename: Filename for the image when bytes are supplied

        Raises:
            InvalidImage: The input is not a decodable image
            OcrFailed: The recognizer failed
            NoTextFound: The recognizer returned no text
        """
        return fill_starting_blinds(self._resolve_capture(self._recognize(image, filename)))

    def scan_images(self, images: Sequence[ImageInput]) -> TournamentDescriptor:
        """Scan photographs of one listing in order, fail-fast, then merge."""
        if not images:
            raise InvalidImage()

        captures: List[TournamentDescriptor] = []
        for index, image in enumerate(images, start=1):
            fragments = self._recognize(image, f"listing_{index}.png")
            captures.append(self._resolve_capture(fragments))
        return fill_starting_blinds(merge_captures(captures))

    def _recognize(self, image: ImageInput, filename: str) -> List[TextFragment]:
        image_bytes, filename = self._load_image(image, filename)

        try:
            fragments = self.recognizer.recognize(image_bytes, filename)
        except ScannerError:
            raise
        except Exception as e:
            logger.error(f"OCR failed for {filename}: {e}")
            raise OcrFailed(e) from e

        if not fragments:
            raise NoTextFound()
        return fragments

    def _load_image(self, image: ImageInput, filename: str):
        """Read and validate image input, returning (bytes, filename)."""
        if isinstance(image, (str, Path)):
            path = Path(image)
            if not path.is_file():
                raise InvalidImage(f"Image file not found: {path}")
            image_bytes = path.read_bytes()
            filename = path.name
        elif isinstance(image, (bytes, bytearray)):
            image_bytes = bytes(image)
        else:
            raise InvalidImage()

        if not image_bytes:
            raise InvalidImage()

        try:
            with Image.open(io.BytesIO(image_bytes)) as img:
                img.verify()
        except (UnidentifiedImageError, OSError, SyntaxError) as e:
            raise InvalidImage() from e

        return image_bytes, filename


# Singleton instance
_scanner_instance = None


def get_tournament_scanner() -> TournamentScanner:
    """Get or create singleton scanner instance."""
    global _scanner_instance

    if _scanner_instance is None:
        _scanner_instance = TournamentScanner()

    return _scanner_instance
