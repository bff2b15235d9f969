"""Core functionality for image duplicate detection and quarantine."""

from image_dedup.core.detector import HashExtractor
from image_dedup.core.grouping import group_by_fingerprint
from image_dedup.core.runner import DuplicateRunner, find_duplicates
from image_dedup.core.scanner import ImageScanner
from image_dedup.core.staging import QuarantineRelocator

__all__ = [
    "DuplicateRunner",
    "HashExtractor",
    "ImageScanner",
    "QuarantineRelocator",
    "find_duplicates",
    "group_by_fingerprint",
]
