"""File scanner for discovering candidate images in a directory."""

from pathlib import Path
from typing import FrozenSet, List

from image_dedup.core.errors import DirectoryScanError
from image_dedup.utils.logger import setup_logger

logger = setup_logger(__name__)


class ImageScanner:
    """Lists the images sitting directly inside a directory."""

    # Compared case-sensitively, without the leading dot
    IMAGE_EXTENSIONS: FrozenSet[str] = frozenset({"png", "jpeg", "jpg", "gif"})

    def scan_directory(self, directory: Path) -> List[Path]:
        """
        Scan a directory for image files.

        Only immediate children are considered; sub-directories (including
        a previous run's quarantine directory) are never descended into.

        Args:
            directory: Directory path to scan

        Returns:
            Image file paths sorted by path

        Raises:
            DirectoryScanError: If the directory is missing or cannot be listed
        """
        logger.debug(f"Scanning directory: {directory}")

        try:
            entries = list(directory.iterdir())
        except OSError as e:
            raise DirectoryScanError(f"Cannot list directory {directory}: {e}") from e

        image_files = sorted(
            entry for entry in entries if self._is_image_file(entry)
        )

        logger.info(f"Found {len(image_files)} candidate images in {directory}")
        return image_files

    def _is_image_file(self, file_path: Path) -> bool:
        """
        Check if a path is a regular file with a supported extension.

        Args:
            file_path: File path to check

        Returns:
            True if file is a supported image
        """
        suffix = file_path.suffix
        if not suffix or suffix[1:] not in self.IMAGE_EXTENSIONS:
            return False

        try:
            return file_path.is_file()
        except OSError:
            return False
