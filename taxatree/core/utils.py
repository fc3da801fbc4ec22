"""Utility functions for Taxatree."""

import logging

from taxatree.models.taxonomic import Rank, fold as fold_name

# Static global variables
RANK_LABELS = [rank.label for rank in Rank]
LINK_MARKER = "{W}"

def setup_logging(verbose: bool = False, default_level: int = logging.INFO) -> logging.Logger:
    """
    Configure logging for the Taxatree application.

    Args:
        verbose: Whether to enable verbose (DEBUG) logging
        default_level: Level used when verbose is off

    Returns:
        Logger instance
    """
    level = logging.DEBUG if verbose else default_level
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    logger = logging.getLogger('taxatree')
    logger.setLevel(level)
    return logger

def names_match(left: str, right: str) -> bool:
    """Case-insensitive name equality; empty names never match."""
    folded = fold_name(left)
    return bool(folded) and folded == fold_name(right)
