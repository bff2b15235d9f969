"""Perceptual fingerprint extraction using the imagededup hashers."""

import os
from pathlib import Path
from typing import Iterable, List, Tuple

import numpy as np
from imagededup.methods import AHash, DHash, PHash, WHash
from PIL import Image
from tqdm import tqdm

from image_dedup.core.errors import HashComputationError
from image_dedup.core.models import FileIssue, Fingerprint, ImageRecord
from image_dedup.utils.config import Config
from image_dedup.utils.logger import setup_logger

logger = setup_logger(__name__)

HASH_METHODS = {
    "dhash": DHash,  # gradient comparison
    "phash": PHash,
    "ahash": AHash,
    "whash": WHash,
}

RESIZE_FILTERS = {
    "nearest": Image.Resampling.NEAREST,
    "triangle": Image.Resampling.BILINEAR,
    "catmullrom": Image.Resampling.BICUBIC,
    "lanczos3": Image.Resampling.LANCZOS,
}


def fold_digest(digest: bytes, width: int = 8) -> Fingerprint:
    """
    Fold a hash digest into an unsigned integer, byte 0 least significant.

    Args:
        digest: Raw hash bytes
        width: Expected digest length in bytes

    Returns:
        Integer with byte i at bit offset 8*i

    Raises:
        HashComputationError: If the digest is not exactly ``width`` bytes
    """
    if len(digest) != width:
        raise HashComputationError(
            f"Expected a {width}-byte hash, got {len(digest)} bytes"
        )

    value = 0
    for idx, byte in enumerate(digest):
        value |= byte << (8 * idx)
    return value


class HashExtractor:
    """Decodes candidate images and computes their perceptual fingerprints."""

    def __init__(self, config: Config, show_progress: bool = True):
        """
        Initialize the hash extractor.

        Args:
            config: Configuration instance
            show_progress: Show progress bar while hashing
        """
        self.config = config
        self.show_progress = show_progress
        self.hash_method = config.get("hash.algorithm", "dhash")
        self.hash_bytes = config.get("hash.hash_bytes", 8)
        self.resize_filter = self._get_resize_filter(
            config.get("hash.resize_filter", "triangle")
        )

        # Initialize the appropriate hasher
        self.hasher = self._get_hasher()

    def _get_hasher(self) -> object:
        """
        Get the imagededup hasher selected by the configuration.

        Returns:
            Hasher instance
        """
        hasher_class = HASH_METHODS.get(str(self.hash_method).lower())
        if not hasher_class:
            logger.warning(f"Unknown hash method '{self.hash_method}', using DHash")
            hasher_class = DHash

        logger.debug(f"Using {hasher_class.__name__} for fingerprinting")
        return hasher_class(verbose=False)

    @staticmethod
    def _get_resize_filter(name: str) -> Image.Resampling:
        resample = RESIZE_FILTERS.get(str(name).lower())
        if resample is None:
            logger.warning(f"Unknown resize filter '{name}', using triangle")
            resample = RESIZE_FILTERS["triangle"]
        return resample

    def compute_fingerprint(self, image_path: Path) -> Fingerprint:
        """
        Compute the perceptual fingerprint of a single image.

        The image is shrunk to the hasher's working size here, so the
        configured resize filter is the one that shapes the hash.

        Args:
            image_path: Path to image file

        Returns:
            64-bit fingerprint

        Raises:
            HashComputationError: If the image cannot be decoded or hashed
        """
        try:
            with Image.open(image_path) as img:
                prepared = img.convert("L").resize(
                    self.hasher.target_size, resample=self.resize_filter
                )
            hash_hex = self.hasher.encode_image(image_array=np.asarray(prepared))
        except Exception as e:
            raise HashComputationError(f"Cannot hash {image_path}: {e}") from e

        if not hash_hex:
            raise HashComputationError(f"No hash produced for {image_path}")

        return fold_digest(bytes.fromhex(hash_hex), self.hash_bytes)

    def extract(self, image_paths: Iterable[Path]) -> Tuple[List[ImageRecord], List[FileIssue]]:
        """
        Fingerprint every candidate, skipping the ones that fail.

        Args:
            image_paths: Candidate image paths in scan order

        Returns:
            Records in scan order and the per-file issues encountered
        """
        records: List[ImageRecord] = []
        issues: List[FileIssue] = []

        paths = list(image_paths)
        for image_path in tqdm(
            paths,
            desc="Hashing images",
            unit="img",
            disable=not self.show_progress,
            leave=False,
        ):
            try:
                fingerprint = self.compute_fingerprint(image_path)
            except HashComputationError as e:
                logger.warning(f"Skipping {image_path}: {e.__cause__ or e}")
                issues.append(FileIssue(image_path, "hash", e))
                continue

            records.append(
                ImageRecord(
                    path=image_path.absolute(),
                    size=self._file_size(image_path),
                    fingerprint=fingerprint,
                )
            )

        logger.debug(f"Hashed {len(records)}/{len(paths)} images")
        return records, issues

    @staticmethod
    def _file_size(image_path: Path) -> int:
        try:
            return os.path.getsize(image_path)
        except OSError:
            return 0
