"""Data models for the taxonomy tree."""

from enum import Enum
from typing import List, Tuple, Optional, Sequence
from dataclasses import dataclass, astuple

from taxatree.models.errors import ValidationError

def fold(name: str) -> str:
    """Case-insensitive comparison key; surrounding whitespace is ignored."""
    return (name or "").strip().lower()

class Rank(Enum):
    """The five fixed taxonomic levels, ordered from root to leaf."""
    CLASS = 0
    ORDER = 1
    FAMILY = 2
    GENUS = 3
    SPECIES = 4

    @property
    def label(self) -> str:
        """Display label, e.g. 'Genus'."""
        return self.name.capitalize()

    @property
    def depth(self) -> int:
        return self.value

    @classmethod
    def from_label(cls, label: str) -> 'Rank':
        """Look up a rank by its label, ignoring case."""
        try:
            return cls[label.strip().upper()]
        except KeyError:
            raise ValidationError(f"Unknown rank '{label}'. Acceptable ranks: {[r.label for r in cls]}")

class TraversalOrder(Enum):
    PRE_ORDER = "pre"
    POST_ORDER = "post"
    LEVEL_ORDER = "level"

    @classmethod
    def parse(cls, value: str) -> 'TraversalOrder':
        """Accept 'pre', 'post', 'level' or the member names, any case."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        for order in cls:
            if key in (order.value, order.name.lower(), order.name.lower().replace('_', '-')):
                return order
        raise ValidationError(f"Unknown traversal order '{value}'. Choose from: {[o.value for o in cls]}")

class TaxonNode:
    """One taxonomic unit in the tree.

    The rank is fixed when the node is created. Nodes compare by identity;
    two distinct nodes with the same name are different units.
    """

    def __init__(
        self,
        name: str,
        rank: Rank,
        common_name: str = "",
        reference_link: str = ""
    ):
        self.name = name
        self._rank = rank
        self.common_name = common_name
        self.reference_link = reference_link
        self.children: List['TaxonNode'] = []

    def __repr__(self) -> str:
        return f"TaxonNode(name={self.name!r}, rank={self._rank.label}, common_name={self.common_name!r})"

    @property
    def rank(self) -> Rank:
        return self._rank

    @property
    def is_species(self) -> bool:
        return self._rank is Rank.SPECIES

    @property
    def level(self) -> str:
        return self._rank.label

    def find_child(self, name: str) -> Optional['TaxonNode']:
        """Return the child whose name matches case-insensitively, if any."""
        folded = fold(name)
        for child in self.children:
            if fold(child.name) == folded:
                return child
        return None

@dataclass
class TaxonomicPath:
    """A species lineage: one name per rank, Class first.

    Names are stripped on construction; an empty name raises ValidationError.
    """
    class_: str
    order: str
    family: str
    genus: str
    species: str

    def __post_init__(self):
        for rank, attr in zip(Rank, ('class_', 'order', 'family', 'genus', 'species')):
            name = (getattr(self, attr) or "").strip()
            if not name:
                raise ValidationError(f"{rank.label} name cannot be empty")
            setattr(self, attr, name)

    def as_tuple(self) -> Tuple[str, str, str, str, str]:
        return astuple(self)

    @classmethod
    def from_sequence(cls, names: Sequence[str]) -> 'TaxonomicPath':
        """
        Build a path from an ordered sequence of names.

        Args:
            names: Exactly one name per rank, Class to Species

        Returns:
            TaxonomicPath with surrounding whitespace stripped from each name

        Raises:
            ValidationError: If the length is wrong or a name is empty
        """
        if isinstance(names, str) or len(names) != len(Rank):
            raise ValidationError(
                f"A taxonomic path needs exactly {len(Rank)} names "
                f"({', '.join(r.label for r in Rank)}), got {0 if isinstance(names, str) else len(names)}"
            )
        return cls(*names)
