"""Pydantic models for word-finder."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .config import DEFAULT_ESCAPE_MARKER


class Occurrence(BaseModel):
    """One line of one file that contains a target."""

    model_config = ConfigDict(frozen=True)

    file_path: str = Field(description="Path of the scanned file, as discovered")
    line_number: int = Field(ge=1, description="1-based line number")
    target: str = Field(description="Target string that matched, original casing")
    line_text: str = Field(description="Full line content without the line terminator")


class ScanConfig(BaseModel):
    """Read-only settings for one scan run."""

    model_config = ConfigDict(frozen=True)

    case_sensitive: bool = False
    escape_marker: str = Field(default=DEFAULT_ESCAPE_MARKER, min_length=1)
    targets: tuple[str, ...] = ()
    paths: tuple[str, ...] = ()
    max_workers: Optional[int] = Field(default=None, ge=1)
    max_depth: Optional[int] = Field(default=None, ge=0)

    @field_validator("targets")
    @classmethod
    def _targets_not_empty(cls, targets: tuple[str, ...]) -> tuple[str, ...]:
        if any(not target for target in targets):
            raise ValueError("targets must be non-empty strings")
        return targets


class ScanRequest(BaseModel):
    """Request body for POST /scan."""

    paths: list[str] = Field(min_length=1, description="Files or directories to scan")
    targets: list[str] = Field(min_length=1, description="Literal strings to search for")
    case_sensitive: bool = Field(default=False, description="Match letter case exactly")
    escape_marker: str = Field(
        default=DEFAULT_ESCAPE_MARKER,
        min_length=1,
        description="Lines containing this marker are skipped",
    )
    max_depth: Optional[int] = Field(default=None, ge=0, description="Directory recursion limit")

    @field_validator("targets")
    @classmethod
    def _targets_not_empty(cls, targets: list[str]) -> list[str]:
        if any(not target for target in targets):
            raise ValueError("targets must be non-empty strings")
        return targets


class ScanResponse(BaseModel):
    """Result of a scan run."""

    scan_id: str
    occurrences: list[Occurrence]
    lines: list[str] = Field(description="Formatted report lines without terminal markup")
    files_scanned: int
    found: bool
    exit_code: int
