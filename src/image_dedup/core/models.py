"""Data records shared by the duplicate detection pipeline."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple

# 64-bit perceptual fingerprint, least significant byte first
Fingerprint = int


@dataclass(frozen=True)
class ImageRecord:
    """A successfully decoded and hashed image."""

    path: Path
    size: int
    fingerprint: Fingerprint


DuplicateGroups = Dict[Fingerprint, List[ImageRecord]]


@dataclass(frozen=True)
class FileIssue:
    """A non-fatal problem with a single file.

    Attributes:
        path: File the problem concerns
        stage: Pipeline stage that hit it ("hash", "move" or "cleanup")
        cause: Underlying exception
    """

    path: Path
    stage: str
    cause: BaseException

    def describe(self) -> str:
        """Human readable one-line description."""
        return f"{self.stage} failed for {self.path}: {self.cause}"


@dataclass
class RelocationReport:
    """Outcome of moving duplicate sets into a quarantine directory."""

    quarantine_dir: Path
    moved: List[Tuple[Path, Path]] = field(default_factory=list)
    issues: List[FileIssue] = field(default_factory=list)
    quarantine_removed: bool = False


@dataclass
class RunResult:
    """Per-directory outcome of a deduplication run.

    ``error`` is None when the directory was processed to completion, even
    if individual files produced issues along the way.
    """

    directory: Path
    scanned: int = 0
    hashed: int = 0
    duplicate_groups: int = 0
    moved: List[Tuple[Path, Path]] = field(default_factory=list)
    issues: List[FileIssue] = field(default_factory=list)
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        """True if no directory-level failure occurred."""
        return self.error is None

    @property
    def duplicates_found(self) -> bool:
        """True if at least one file was moved into quarantine."""
        return bool(self.moved)

    def to_dict(self) -> Dict[str, object]:
        """Serializable summary of the run."""
        return {
            "directory": str(self.directory),
            "status": "ok" if self.ok else "failed",
            "error": str(self.error) if self.error is not None else None,
            "scanned": self.scanned,
            "hashed": self.hashed,
            "duplicate_groups": self.duplicate_groups,
            "moved": [
                {"source": str(src), "destination": str(dst)}
                for src, dst in self.moved
            ],
            "issues": [
                {"path": str(issue.path), "stage": issue.stage, "cause": str(issue.cause)}
                for issue in self.issues
            ],
        }
