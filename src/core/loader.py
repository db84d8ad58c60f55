"""Listing provider: load JobListing records from YAML."""

import logging
from pathlib import Path
from typing import Any

import yaml

from src.core.schemas import JobListing

logger = logging.getLogger(__name__)


def load_listings(path: str | Path) -> list[JobListing]:
    """Load job listings from a YAML file.

    The file holds either a top-level list of listings or a mapping with a
    ``listings`` key.
    """
    path = Path(path)
    if not path.exists():
        msg = f"Listings file not found: {path}"
        raise FileNotFoundError(msg)
    raw: Any = yaml.safe_load(path.read_text()) or []
    if isinstance(raw, dict):
        raw = raw.get("listings", [])
    if not isinstance(raw, list):
        msg = f"Listings file must contain a list of listings: {path}"
        raise ValueError(msg)
    listings = [JobListing.model_validate(item) for item in raw]
    logger.debug("Loaded %d listings from %s", len(listings), path)
    return listings
