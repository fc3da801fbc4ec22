import pytest

from taxatree.core.seed import seed_examples
from taxatree.core.tree import TaxonomyTree

LION = ["Mammalia", "Carnivora", "Felidae", "Panthera", "leo"]
TIGER = ["Mammalia", "Carnivora", "Felidae", "Panthera", "tigris"]
WOLF = ["Mammalia", "Carnivora", "Canidae", "Canis", "lupus"]
MOUSE = ["Mammalia", "Rodentia", "Muridae", "Mus", "musculus"]


@pytest.fixture
def empty_tree():
    return TaxonomyTree()


@pytest.fixture
def shark_tree():
    return seed_examples(TaxonomyTree())


@pytest.fixture
def mammal_tree():
    tree = TaxonomyTree()
    tree.insert_path(LION, "Lion", "https://en.wikipedia.org/wiki/Lion")
    tree.insert_path(TIGER, "Tiger", "")
    tree.insert_path(WOLF, "Grey Wolf", "https://en.wikipedia.org/wiki/Wolf")
    tree.insert_path(MOUSE, "House Mouse", "")
    return tree
