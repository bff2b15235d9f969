"""Relocation of duplicate images into a per-directory quarantine folder."""

import errno
from pathlib import Path

from image_dedup.core.errors import QuarantineError
from image_dedup.core.grouping import duplicate_sets
from image_dedup.core.models import DuplicateGroups, FileIssue, RelocationReport
from image_dedup.utils.config import Config
from image_dedup.utils.logger import setup_logger

logger = setup_logger(__name__)


class QuarantineRelocator:
    """Moves every member of a duplicate set into ``<directory>/duplicates``."""

    def __init__(self, config: Config):
        """
        Initialize the relocator.

        Args:
            config: Configuration instance
        """
        self.config = config
        self.quarantine_dir_name = config.get("quarantine_dir_name", "duplicates")

    def quarantine_path(self, directory: Path) -> Path:
        """Get the quarantine directory for a scanned directory."""
        return directory / self.quarantine_dir_name

    def relocate(self, groups: DuplicateGroups, directory: Path) -> RelocationReport:
        """
        Move duplicate sets into the directory's quarantine folder.

        Files in single-member groups stay where they are. A file whose
        name is already taken inside the quarantine folder is left in
        place and reported; nothing is ever overwritten.

        Args:
            groups: Fingerprint groups for the directory
            directory: Directory that was scanned

        Returns:
            Report of moved files and per-file issues

        Raises:
            QuarantineError: If the quarantine directory cannot be created
        """
        quarantine_dir = self.quarantine_path(directory)
        try:
            quarantine_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise QuarantineError(
                f"Cannot create quarantine directory {quarantine_dir}: {e}"
            ) from e

        report = RelocationReport(quarantine_dir=quarantine_dir)

        for members in duplicate_sets(groups):
            for record in members:
                destination = quarantine_dir / record.path.name
                try:
                    self._move(record.path, destination)
                except OSError as e:
                    logger.warning(f"Failed moving file {record.path}: {e}")
                    report.issues.append(FileIssue(record.path, "move", e))
                    continue

                report.moved.append((record.path, destination))
                logger.debug(f"Moved: {record.path} -> {destination}")

        self._remove_if_empty(report)

        if report.moved:
            logger.info(f"Moved {len(report.moved)} duplicates into {quarantine_dir}")
        return report

    @staticmethod
    def _move(source: Path, destination: Path) -> None:
        """
        Rename ``source`` to ``destination`` without overwriting.

        Raises:
            FileExistsError: If the destination is already occupied
            OSError: If the rename fails (permissions, cross-device, ...)
        """
        if destination.exists() or destination.is_symlink():
            raise FileExistsError(
                errno.EEXIST, "Destination already exists", str(destination)
            )
        source.rename(destination)

    def _remove_if_empty(self, report: RelocationReport) -> None:
        quarantine_dir = report.quarantine_dir
        try:
            if any(quarantine_dir.iterdir()):
                return
            quarantine_dir.rmdir()
        except OSError as e:
            logger.warning(f"Failed removing {quarantine_dir}: {e}")
            report.issues.append(FileIssue(quarantine_dir, "cleanup", e))
            return

        report.quarantine_removed = True
        logger.debug(f"Removed empty quarantine directory {quarantine_dir}")
