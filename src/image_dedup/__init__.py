"""
Image Dedup - perceptual duplicate image detection with quarantine.

This package scans photo directories, groups visually identical images by
perceptual fingerprint and moves every duplicate into a ``duplicates``
folder next to them so they can be reviewed before anything is deleted.
"""

__version__ = "0.1.0"
__author__ = "Image Dedup Contributors"

from image_dedup.core.runner import DuplicateRunner, find_duplicates
from image_dedup.core.scanner import ImageScanner
from image_dedup.core.staging import QuarantineRelocator

__all__ = [
    "DuplicateRunner",
    "ImageScanner",
    "QuarantineRelocator",
    "__version__",
    "find_duplicates",
]
