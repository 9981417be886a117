from fastapi import FastAPI, HTTPException, Depends, File, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
from typing import List, Dict, Any
import logging

from ..errors import InvalidImage, NoTextFound, OcrFailed, ScannerError
from ..models import TextFragment
from ..orchestration import TournamentScanner, get_tournament_scanner

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Tournament Listing Scanner API",
    description="API for turning photographs of poker tournament listings into structured tournament data.",
    version="1.0.0"
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

ERROR_STATUS = (
    (InvalidImage, 400),
    (NoTextFound, 422),
    (OcrFailed, 502),
)


# Pydantic models
class BoxModel(BaseModel):
    x: float = Field(..., description="Left edge, normalized to page width")
    y: float = Field(..., description="Bottom edge, normalized to page height (origin bottom-left)")
    w: float = Field(..., description="Width, normalized")
    h: float = Field(..., description="Height, normalized")


class FragmentModel(BaseModel):
    text: str
    box: BoxModel


class ParseRequest(BaseModel):
    captures: List[List[FragmentModel]] = Field(
        ..., description="OCR fragments per photograph, in capture order"
    )


def get_scanner() -> TournamentScanner:
    return get_tournament_scanner()


def to_http_error(error: ScannerError) -> HTTPException:
    status_code = next((code for kind, code in ERROR_STATUS if isinstance(error, kind)), 500)
    return HTTPException(status_code=status_code, detail=str(error))


@app.on_event("startup")
async def startup_event():
    """Initialize scanner on startup."""
    try:
        get_tournament_scanner()
        logger.info("Tournament scanner initialized successfully")
    except Exception as e:
        logger.error(f"Failed to initialize tournament scanner: {e}")


@app.post("/parse", response_model=Dict[str, Any])
def parse_fragments(request: ParseRequest, scanner: TournamentScanner = Depends(get_scanner)):
    """
    Resolve already-recognized OCR fragments into a tournament descriptor.
    Several captures of the same listing are merged in order.
    """
    captures = [
        [TextFragment.from_dict(fragment.model_dump()) for fragment in capture]
        for capture in request.captures
    ]

    try:
        descriptor = scanner.scan_fragment_sets(captures)
    except ScannerError as e:
        logger.error(f"Parse failed: {e}")
        raise to_http_error(e)

    return descriptor.to_dict()


@app.post("/scan", response_model=Dict[str, Any])
def scan_photographs(files: List[UploadFile] = File(...),
                     scanner: TournamentScanner = Depends(get_scanner)):
    """
    Scan one or more photographs of a listing and return the merged descriptor.
    """
    images = [upload.file.read() for upload in files]

    try:
        descriptor = scanner.scan_images(images)
    except ScannerError as e:
        logger.error(f"Scan failed: {e}")
        raise to_http_error(e)

    return descriptor.to_dict()


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "tournament-scan-api", "version": "1.0.0"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("tournament_scan.api.main:app", host="0.0.0.0", port=8000, reload=False)
