"""Built-in example species loaded at startup."""

import logging
from typing import List, Tuple

from taxatree.core.tree import TaxonomyTree
from taxatree.models.taxonomic import TaxonomicPath

logger = logging.getLogger(__name__)

EXAMPLE_SPECIES: List[Tuple[TaxonomicPath, str, str]] = [
    (
        TaxonomicPath("Chondrichthyes", "Lamniformes", "Lamnidae", "Carcharodon", "carcharias"),
        "Great White Shark",
        "https://en.wikipedia.org/wiki/Great_white_shark",
    ),
    (
        TaxonomicPath("Chondrichthyes", "Carcharhiniformes", "Carcharhinidae", "Galeocerdo", "cuvier"),
        "Tiger Shark",
        "https://en.wikipedia.org/wiki/Tiger_shark",
    ),
]

def seed_examples(tree: TaxonomyTree) -> TaxonomyTree:
    """Insert the example species into tree and return it."""
    for path, common_name, link in EXAMPLE_SPECIES:
        tree.insert_path(path, common_name, link)
    logger.info(f"{len(EXAMPLE_SPECIES)} example shark species have been pre-inserted")
    return tree
