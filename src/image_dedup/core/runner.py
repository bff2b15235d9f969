"""Runs the deduplication pipeline over several directories in parallel."""

import os
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable, List, Optional, Union

from image_dedup.core.detector import HashExtractor
from image_dedup.core.errors import DedupError, UsageError
from image_dedup.core.grouping import duplicate_sets, group_by_fingerprint
from image_dedup.core.models import RunResult
from image_dedup.core.scanner import ImageScanner
from image_dedup.core.staging import QuarantineRelocator
from image_dedup.utils.config import Config
from image_dedup.utils.logger import setup_logger

logger = setup_logger(__name__)


class DuplicateRunner:
    """Scans, hashes, groups and quarantines, one task per directory."""

    def __init__(self, config: Optional[Config] = None, show_progress: Optional[bool] = None):
        """
        Initialize the runner.

        Args:
            config: Configuration instance (defaults to built-in settings)
            show_progress: Show progress bars (default: from config)
        """
        self.config = config or Config()
        if show_progress is None:
            show_progress = bool(self.config.get("show_progress", True))

        self.scanner = ImageScanner()
        self.extractor = HashExtractor(self.config, show_progress=show_progress)
        self.relocator = QuarantineRelocator(self.config)

    def run(self, directories: Iterable[Union[str, Path]]) -> List[RunResult]:
        """
        Process every directory independently.

        Args:
            directories: Directories to deduplicate

        Returns:
            One result per directory, in the order given

        Raises:
            UsageError: If no directories are given
        """
        dirs = [Path(d) for d in directories]
        if not dirs:
            raise UsageError("Missing argument: directory")

        max_workers = self.config.get("max_workers") or os.cpu_count() or 1
        max_workers = min(max_workers, len(dirs))

        logger.debug(f"Processing {len(dirs)} directories with {max_workers} workers")
        with ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="dedup"
        ) as executor:
            results = list(executor.map(self.process_directory, dirs))

        failed = [r for r in results if not r.ok]
        if failed:
            logger.debug(f"{len(failed)}/{len(results)} directories failed")
        return results

    def process_directory(self, directory: Path) -> RunResult:
        """
        Run the whole pipeline for one directory.

        Never raises: directory-level failures end up in ``RunResult.error``.

        Args:
            directory: Directory to deduplicate

        Returns:
            Outcome of the run
        """
        result = RunResult(directory=directory)

        try:
            candidates = self.scanner.scan_directory(directory)
            result.scanned = len(candidates)

            records, issues = self.extractor.extract(candidates)
            result.hashed = len(records)
            result.issues.extend(issues)

            groups = group_by_fingerprint(records)
            result.duplicate_groups = sum(1 for _ in duplicate_sets(groups))

            report = self.relocator.relocate(groups, directory)
            result.moved.extend(report.moved)
            result.issues.extend(report.issues)

        except DedupError as e:
            logger.error(f"Error processing {directory}: {e}")
            result.error = e
            return result
        except Exception as e:
            logger.exception(f"Unexpected error processing {directory}: {e}")
            result.error = e
            return result

        if not result.duplicates_found:
            logger.info(f"No duplicates found in {directory}")
        return result


def find_duplicates(
    directories: Iterable[Union[str, Path]],
    config: Optional[Config] = None,
    show_progress: Optional[bool] = None,
) -> List[RunResult]:
    """
    Deduplicate several directories with a fresh runner.

    Args:
        directories: Directories to deduplicate
        config: Optional configuration
        show_progress: Show progress bars (default: from config)

    Returns:
        One result per directory, in the order given
    """
    return DuplicateRunner(config, show_progress=show_progress).run(directories)
