"""FastAPI application for word-finder."""

import asyncio
import logging
import uuid

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from .models import ScanConfig, ScanRequest, ScanResponse
from .reporter import render
from .scanner import ScanError, run
from .traversal import discover

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Word Finder",
    description="Reports every line in the given files that contains any of the target words",
    version="0.1.0",
)

# CORS - allow common development origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:5173",
        "http://localhost:3000",
        "http://localhost:8000",
    ],
    allow_methods=["POST", "GET"],
    allow_headers=["*"],
)


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "ok"}


def _scan(request: ScanRequest) -> ScanResponse:
    config = ScanConfig(
        case_sensitive=request.case_sensitive,
        escape_marker=request.escape_marker,
        targets=tuple(request.targets),
        paths=tuple(request.paths),
        max_depth=request.max_depth,
    )
    files = discover(config.paths, max_depth=config.max_depth)
    occurrences = run(files, config.targets, config)
    lines, exit_code = render(occurrences, highlight_start="", highlight_end="")
    return ScanResponse(
        scan_id=str(uuid.uuid4()),
        occurrences=occurrences,
        lines=lines,
        files_scanned=len(files),
        found=bool(occurrences),
        exit_code=exit_code,
    )


@app.post("/scan", response_model=ScanResponse)
async def scan(request: ScanRequest) -> ScanResponse:
    """
    Scan files and directories for target words.

    - **paths**: Files or directories to scan (directories are walked recursively)
    - **targets**: Literal words to search for
    - **case_sensitive**: Match letter case exactly (default false)
    - **escape_marker**: Lines containing this marker are skipped
    - **max_depth**: Optional directory recursion limit
    """
    logger.info(f"Scanning {len(request.paths)} path(s) for {len(request.targets)} target(s)")
    try:
        return await asyncio.to_thread(_scan, request)
    except ScanError as e:
        logger.error(f"Scan failed: {e}")
        raise HTTPException(status_code=500, detail=f"Scan failed: {str(e)}")
