"""The taxonomy tree and its create/read/update/delete operations."""

import logging
from typing import List, Optional, Sequence, Tuple

from taxatree.models.errors import ValidationError, ConflictError, InvalidTargetError
from taxatree.models.taxonomic import Rank, TaxonNode, TaxonomicPath
from taxatree.core.traversal import walk_with_parents, post_order, traverse
from taxatree.core.utils import fold_name, names_match

logger = logging.getLogger(__name__)

def node_matches(node: TaxonNode, name: str) -> bool:
    """True if name equals the node's taxonomic name or, for species, its common name."""
    if names_match(node.name, name):
        return True
    return node.is_species and names_match(node.common_name, name)

class TaxonomyTree:
    """
    Rooted tree of exactly five rank levels holding the species of one Class.

    The root, when present, is the Class node; every species sits at depth 4
    below its Order, Family and Genus.
    """

    def __init__(self):
        self.root: Optional[TaxonNode] = None

    def __len__(self) -> int:
        return sum(1 for _ in walk_with_parents(self.root))

    @property
    def is_empty(self) -> bool:
        return self.root is None

    def insert_path(
        self,
        path: Sequence[str],
        common_name: str = "",
        reference_link: str = ""
    ) -> TaxonNode:
        """
        Insert a full Class-to-Species path, creating missing ranks on demand.

        An existing species is updated in place with the supplied annotations.

        Args:
            path: Five names, Class to Species
            common_name: Common name stored on the species node
            reference_link: Optional link stored on the species node

        Returns:
            The tree root

        Raises:
            ValidationError: If the path is not five non-empty names
            ConflictError: If path[0] differs from the existing Class
        """
        # TaxonomicPath fields can be reassigned after construction
        lineage = TaxonomicPath.from_sequence(path.as_tuple() if isinstance(path, TaxonomicPath) else path)
        names = lineage.as_tuple()
        common_name = (common_name or "").strip()
        reference_link = (reference_link or "").strip()

        if self.root is not None and fold_name(self.root.name) != fold_name(names[0]):
            raise ConflictError(
                f"The tree already has a Class: {self.root.name}. "
                f"All species must belong to the same Class, got '{names[0]}'"
            )

        if self.root is None:
            self.root = TaxonNode(name=names[0], rank=Rank.CLASS)
            logger.info(f"Inserting new {Rank.CLASS.label}: {names[0]}")

        current = self.root
        for rank, name in zip(list(Rank)[1:], names[1:]):
            child = current.find_child(name)
            if child is None:
                child = TaxonNode(name=name, rank=rank)
                current.children.append(child)
                if rank is Rank.SPECIES:
                    logger.info(f"Added new species: {common_name} ({name})")
                else:
                    logger.info(f"Inserting new {rank.label}: {name}")
            elif rank is Rank.SPECIES:
                if child.common_name == common_name and child.reference_link == reference_link:
                    logger.info(f"Species '{name}' already exists with the same details")
                else:
                    logger.info(f"Species '{name}' already exists. Updating common name/link")
            current = child

        current.common_name = common_name
        current.reference_link = reference_link
        return self.root

    def find_by_name(self, name: str) -> Optional[TaxonNode]:
        """
        Find the first node, in pre-order, whose name or common name matches.

        Args:
            name: Taxonomic or common name, compared case-insensitively

        Returns:
            The matching node, or None if nothing matches
        """
        found = self._locate(name)
        return found[0] if found else None

    def _locate(self, name: str) -> Optional[Tuple[TaxonNode, Optional[TaxonNode]]]:
        for node, parent, _ in walk_with_parents(self.root):
            if node_matches(node, name):
                return node, parent
        return None

    def update_species(
        self,
        node: Optional[TaxonNode],
        new_common_name: str,
        new_reference_link: str = ""
    ) -> bool:
        """
        Overwrite the common name and reference link of a species.

        Args:
            node: Species node to update
            new_common_name: Replacement common name, must not be empty
            new_reference_link: Replacement link; empty clears it

        Returns:
            True once the node has been updated

        Raises:
            InvalidTargetError: If node is None or not a species
            ValidationError: If new_common_name is empty
        """
        if node is None or not node.is_species:
            raise InvalidTargetError("Cannot update: node is missing or not a Species")
        new_common_name = (new_common_name or "").strip()
        if not new_common_name:
            raise ValidationError("Common name cannot be updated to empty")

        node.common_name = new_common_name
        node.reference_link = (new_reference_link or "").strip()
        logger.info(f"Species '{node.name}' details updated")
        return True

    def delete_species(self, species_name: str) -> Optional[TaxonNode]:
        """
        Remove one species node from its genus, leaving all ancestors in place.

        Args:
            species_name: Taxonomic or common name of the species

        Returns:
            The tree root, unchanged when nothing was deleted
        """
        if self.root is None:
            logger.info("Tree is empty")
            return None

        found = self._locate(species_name)
        if found is None:
            logger.debug(f"No node named '{species_name}' to delete")
            return self.root
        target, parent = found
        if not target.is_species or parent is None:
            logger.debug(f"'{species_name}' is a {target.level}, not a Species; nothing deleted")
            return self.root

        # Identity, not equality: sibling names are unique but nodes are the key
        parent.children = [child for child in parent.children if child is not target]
        _release(target)
        logger.info(f"Species '{species_name}' deleted successfully")
        return self.root

    def parent_of(self, node: TaxonNode) -> Optional[TaxonNode]:
        """Return the parent of node, or None for the root or a foreign node."""
        for candidate, parent, _ in walk_with_parents(self.root):
            if candidate is node:
                return parent
        return None

    def lineage_of(self, node: TaxonNode) -> List[TaxonNode]:
        """Return the chain of nodes from the root down to node inclusive."""
        chain: List[TaxonNode] = []
        current: Optional[TaxonNode] = node
        while current is not None:
            chain.append(current)
            current = self.parent_of(current)
        return list(reversed(chain)) if chain and chain[-1] is self.root else []

    def species(self) -> List[TaxonNode]:
        """All species nodes in pre-order."""
        return [node for node in traverse(self.root, 'pre') if node.is_species]

    def clear(self) -> None:
        """Tear down the whole tree, children before parents."""
        if self.root is None:
            return
        count = _release(self.root)
        self.root = None
        logger.debug(f"Released {count} nodes")

    delete_tree = clear

def _release(subtree: TaxonNode) -> int:
    """Detach every node of a subtree post-order; returns the node count."""
    count = 0
    for node in list(post_order(subtree)):
        node.children = []
        count += 1
    return count
