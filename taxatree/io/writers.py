"""Text and table renderings of the taxonomy tree."""

import logging
from typing import List, Optional, Iterable

import pandas as pd

from taxatree.core.tree import TaxonomyTree
from taxatree.core.traversal import walk_with_parents
from taxatree.core.utils import LINK_MARKER
from taxatree.models.taxonomic import Rank, TaxonNode

logger = logging.getLogger(__name__)

LINEAGE_COLUMNS = [rank.name.lower() for rank in Rank] + ['common_name', 'reference_link']

def format_node(node: TaxonNode) -> str:
    """One-line label: '(Rank) name', plus common name and link marker for species."""
    line = f"({node.level}) {node.name}"
    if node.is_species:
        if node.common_name:
            line += f" [{node.common_name}]"
        if node.reference_link:
            line += f" {LINK_MARKER}"
    return line

def indent(depth: int) -> str:
    if depth <= 0:
        return ""
    return "  |  " * (depth - 1) + "  |--"

def render_tree(root: Optional[TaxonNode]) -> str:
    """
    Render a subtree in pre-order with depth-proportional indentation.

    Args:
        root: Subtree root, may be None

    Returns:
        Newline-terminated text, or an empty string for an empty tree
    """
    lines = [indent(depth) + format_node(node) for node, _, depth in walk_with_parents(root)]
    return "".join(line + "\n" for line in lines)

def format_traversal(nodes: Iterable[TaxonNode]) -> str:
    """One '(Rank) name' line per visited node."""
    return "".join(f"{format_node(node)}\n" for node in nodes)

def describe_node(node: TaxonNode) -> str:
    """Multi-line detail report for a search hit."""
    lines = [
        f"Level: {node.level}",
        f"Taxonomic Name: {node.name}",
    ]
    if node.common_name:
        lines.append(f"Common Name: {node.common_name}")
    if node.reference_link:
        lines.append(f"Reference Link: {node.reference_link}")
    elif node.is_species:
        lines.append("No reference link recorded for this species.")
    lines.append(f"Children Count: {len(node.children)}")
    return "\n".join(lines) + "\n"

def lineage_dataframe(tree: TaxonomyTree) -> pd.DataFrame:
    """
    Tabulate every species with its full lineage.

    Args:
        tree: Taxonomy tree to tabulate

    Returns:
        DataFrame with one row per species in pre-order and LINEAGE_COLUMNS
    """
    rows: List[dict] = []
    lineage: List[str] = []
    for node, _, depth in walk_with_parents(tree.root):
        del lineage[depth:]
        lineage.append(node.name)
        if node.is_species:
            rows.append(dict(zip(LINEAGE_COLUMNS, lineage + [node.common_name, node.reference_link])))
    return pd.DataFrame(rows, columns=LINEAGE_COLUMNS)

def count_by_rank(tree: TaxonomyTree, rank: str) -> pd.DataFrame:
    """
    Count species grouped by the names at a given rank.

    Args:
        tree: Taxonomy tree to summarise
        rank: Rank label, e.g. 'family'

    Returns:
        DataFrame with columns [rank, 'species_count'], sorted by rank name

    Raises:
        ValidationError: If rank is not one of the five taxonomic ranks
    """
    column = Rank.from_label(rank).name.lower()
    df_lineage = lineage_dataframe(tree)
    if df_lineage.empty:
        return pd.DataFrame(columns=[column, 'species_count'])
    counts = (
        df_lineage.groupby(column, sort=True)['species']
        .count()
        .rename('species_count')
        .reset_index()
    )
    logger.debug(f"Grouped {len(df_lineage)} species into {len(counts)} {column} groups")
    return counts
