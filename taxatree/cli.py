#!/usr/bin/env python3
"""Command-line interface for Taxatree."""

import sys
import argparse
import logging
from typing import Optional, List

from taxatree import __version__
from taxatree.core.seed import seed_examples
from taxatree.core.tree import TaxonomyTree
from taxatree.core.utils import setup_logging, RANK_LABELS
from taxatree.models.config import TaxaTreeConfig
from taxatree.models.errors import TaxaTreeError

logger = logging.getLogger(__name__)

def create_parser() -> argparse.ArgumentParser:
    """
    Create and return the main argument parser for Taxatree.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Taxatree: interactive catalog of Class > Order > Family > Genus > Species paths",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument(
        '--version', '-v',
        action='version',
        version=f'%(prog)s v{__version__}'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose logging'
    )
    parser.add_argument(
        '--no-seed',
        action='store_true',
        help='start with an empty tree instead of the example species'
    )
    parser.add_argument(
        '--browser',
        type=str,
        default=None,
        help='browser used to open reference links (default: system browser)'
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help='Taxatree commands'
    )

    subparsers.add_parser(
        "menu",
        help="Run the interactive menu (default)",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )

    subparsers.add_parser(
        "show",
        help="Print the full taxonomy tree",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )

    search_parser = subparsers.add_parser(
        "search",
        help="Search a taxonomic or common name",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    search_parser.add_argument(
        'name',
        type=str,
        help='taxonomic or common name, case-insensitive'
    )

    traverse_parser = subparsers.add_parser(
        "traverse",
        help="Print the nodes in a traversal order",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    traverse_parser.add_argument(
        'order',
        choices=['pre', 'post', 'level'],
        help='pre-order, post-order or level-order (breadth first)'
    )

    species_parser = subparsers.add_parser(
        "species",
        help="Print the species lineage table",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    species_parser.add_argument(
        '--rank',
        type=str,
        default=None,
        help=f'also count species per name at this rank, one of {RANK_LABELS[:-1]}'
    )

    return parser

def build_tree(config: TaxaTreeConfig) -> TaxonomyTree:
    tree = TaxonomyTree()
    if config.seed_examples:
        seed_examples(tree)
    return tree

def run_menu(config: TaxaTreeConfig, tree: TaxonomyTree) -> None:
    """
    Run the interactive menu.

    Args:
        config: Configuration for the menu command
        tree: Tree the menu operates on
    """
    from taxatree.menu import TaxonomyMenu

    TaxonomyMenu(tree, browser=config.browser).run()

def run_show(config: TaxaTreeConfig, tree: TaxonomyTree) -> None:
    from taxatree.io.writers import render_tree

    if tree.is_empty:
        print("The tree is currently empty.")
    else:
        print(render_tree(tree.root), end="")

def run_search(config: TaxaTreeConfig, tree: TaxonomyTree) -> None:
    """
    Run the search command.

    Args:
        config: Configuration for the search command
        tree: Tree to search
    """
    from taxatree.io.writers import describe_node

    found = tree.find_by_name(config.name)
    if found is None:
        print(f"'{config.name}' not found.")
        return
    print(describe_node(found), end="")

def run_traverse(config: TaxaTreeConfig, tree: TaxonomyTree) -> None:
    from taxatree.core.traversal import traverse
    from taxatree.io.writers import format_traversal

    print(format_traversal(traverse(tree.root, config.order)), end="")

def run_species(config: TaxaTreeConfig, tree: TaxonomyTree) -> None:
    """
    Run the species command.

    Args:
        config: Configuration for the species command
        tree: Tree to tabulate
    """
    from taxatree.io.writers import lineage_dataframe, count_by_rank

    df_lineage = lineage_dataframe(tree)
    print(df_lineage.to_string(index=False))
    if config.rank:
        print()
        print(count_by_rank(tree, config.rank).to_string(index=False))

COMMANDS = {
    'menu': run_menu,
    'show': run_show,
    'search': run_search,
    'traverse': run_traverse,
    'species': run_species,
}

def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for Taxatree command-line interface.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    # Setup logging; the menu keeps its own output and only shows warnings
    default_level = logging.WARNING if (args.command or 'menu') == 'menu' else logging.INFO
    logger = setup_logging(args.verbose, default_level)

    try:
        # Create configuration
        config = TaxaTreeConfig(args)

        handler = COMMANDS.get(config.command)
        if handler is None:
            logger.error(f"Unknown command: {config.command}")
            return 1

        tree = build_tree(config)
        try:
            handler(config, tree)
        finally:
            tree.clear()
        return 0

    except TaxaTreeError as e:
        logger.error(f"Error: {str(e)}")
        return 1
    except Exception as e:
        logger.exception(f"Unexpected error: {str(e)}")
        return 1

if __name__ == "__main__":
    sys.exit(main())
