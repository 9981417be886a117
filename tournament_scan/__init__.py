"""
Tournament Scan - Poker Tournament Listing Scanner

Turns OCR output from photographs of tournament listings into structured
tournament data. Organized into functional components:

📂 orchestration/ - Main API entry points
   ├─ TournamentScanner: Photograph / fragment scanning
   └─ get_tournament_scanner: Singleton accessor

📂 reconstruction/ - Text order reconstruction
   └─ reconstruct_lines: Fragments to reading-order lines

📂 extraction/ - Extract tournament data
   ├─ FieldExtractor: Labeled listing fields
   ├─ MetadataResolver: Buy-in, chips, guarantee, game type, ...
   ├─ BlindScheduleInterpreter: Levels and breaks
   └─ Scalar parsers: integers, dollars, chip counts

📂 merging/ - Multi-photograph merging
   └─ merge_captures: First-non-null scalars, deduplicated levels

📂 ocr/ - OCR microservice client
   └─ TournamentOCRClient: Image bytes to TextFragments

📂 export/ - Blind structure tables (pandas)

📂 api/ - FastAPI service (/parse, /scan, /health)

QUICK START:
    from tournament_scan import get_tournament_scanner

    scanner = get_tournament_scanner()
    descriptor = scanner.scan_images(["listing_1.jpg", "listing_2.jpg"])
    print(descriptor.to_dict())
"""

# Import main orchestrator
from .orchestration import (
    TournamentScanner,
    get_tournament_scanner
)

# Import data models
from .models import (
    FragmentBox,
    TextFragment,
    Line,
    GameType,
    ReentryPolicy,
    BlindLevelRecord,
    TournamentDescriptor
)

# Import errors
from .errors import (
    ScannerError,
    InvalidImage,
    OcrFailed,
    NoTextFound,
    ParsingFailed
)

# Import pipeline stages
from .reconstruction import reconstruct_lines
from .extraction import (
    FieldLabel,
    FieldExtractor,
    MetadataResolver,
    BlindScheduleInterpreter
)
from .merging import merge_captures

# Import export helpers
from .export import levels_frame, export_structure_csv

__all__ = [
    # Orchestration
    'TournamentScanner',
    'get_tournament_scanner',

    # Models
    'FragmentBox',
    'TextFragment',
    'Line',
    'GameType',
    'ReentryPolicy',
    'BlindLevelRecord',
    'TournamentDescriptor',

    # Errors
    'ScannerError',
    'InvalidImage',
    'OcrFailed',
    'NoTextFound',
    'ParsingFailed',

    # Stages
    'reconstruct_lines',
    'FieldLabel',
    'FieldExtractor',
    'MetadataResolver',
    'BlindScheduleInterpreter',
    'merge_captures',

    # Export
    'levels_frame',
    'export_structure_csv'
]
