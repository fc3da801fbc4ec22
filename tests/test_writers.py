"""Tests for tree rendering and lineage tables."""
import pytest

from taxatree.io.writers import (
    render_tree, format_node, format_traversal, describe_node,
    lineage_dataframe, count_by_rank, LINEAGE_COLUMNS,
)
from taxatree.models.errors import ValidationError


def test_render_tree(shark_tree):
    assert render_tree(shark_tree.root) == (
        "(Class) Chondrichthyes\n"
        "  |--(Order) Lamniformes\n"
        "  |    |--(Family) Lamnidae\n"
        "  |    |    |--(Genus) Carcharodon\n"
        "  |    |    |    |--(Species) carcharias [Great White Shark] {W}\n"
        "  |--(Order) Carcharhiniformes\n"
        "  |    |--(Family) Carcharhinidae\n"
        "  |    |    |--(Genus) Galeocerdo\n"
        "  |    |    |    |--(Species) cuvier [Tiger Shark] {W}\n"
    )


def test_render_empty_tree():
    assert render_tree(None) == ""


def test_species_without_link_has_no_marker(mammal_tree):
    assert format_node(mammal_tree.find_by_name("tigris")) == "(Species) tigris [Tiger]"
    assert format_node(mammal_tree.find_by_name("leo")) == "(Species) leo [Lion] {W}"
    assert format_node(mammal_tree.root) == "(Class) Mammalia"


def test_format_traversal(mammal_tree):
    text = format_traversal([mammal_tree.root, mammal_tree.find_by_name("leo")])
    assert text == "(Class) Mammalia\n(Species) leo [Lion] {W}\n"


def test_describe_species(shark_tree):
    report = describe_node(shark_tree.find_by_name("tiger shark"))
    assert "Level: Species" in report
    assert "Taxonomic Name: cuvier" in report
    assert "Common Name: Tiger Shark" in report
    assert "Reference Link: https://en.wikipedia.org/wiki/Tiger_shark" in report
    assert report.endswith("Children Count: 0\n")


def test_describe_species_without_link(mammal_tree):
    report = describe_node(mammal_tree.find_by_name("Tiger"))
    assert "No reference link recorded for this species." in report


def test_describe_intermediate_rank(mammal_tree):
    report = describe_node(mammal_tree.find_by_name("Carnivora"))
    assert "Level: Order" in report
    assert "Common Name" not in report
    assert "Children Count: 2" in report


def test_lineage_dataframe(mammal_tree):
    df = lineage_dataframe(mammal_tree)
    assert list(df.columns) == LINEAGE_COLUMNS
    assert df['species'].tolist() == ["leo", "tigris", "lupus", "musculus"]
    wolf = df[df['species'] == "lupus"].iloc[0]
    assert wolf['family'] == "Canidae"
    assert wolf['genus'] == "Canis"
    assert wolf['common_name'] == "Grey Wolf"


def test_lineage_dataframe_skips_empty_genus(mammal_tree):
    mammal_tree.delete_species("musculus")
    df = lineage_dataframe(mammal_tree)
    assert "Mus" not in df['genus'].tolist()
    assert len(df) == 3


def test_lineage_dataframe_empty(empty_tree):
    df = lineage_dataframe(empty_tree)
    assert df.empty
    assert list(df.columns) == LINEAGE_COLUMNS


def test_count_by_rank(mammal_tree):
    counts = count_by_rank(mammal_tree, "Order")
    assert counts.columns.tolist() == ["order", "species_count"]
    assert dict(zip(counts['order'], counts['species_count'])) == {"Carnivora": 3, "Rodentia": 1}


def test_count_by_rank_empty(empty_tree):
    assert count_by_rank(empty_tree, "genus").empty


def test_count_by_unknown_rank(mammal_tree):
    with pytest.raises(ValidationError):
        count_by_rank(mammal_tree, "phylum")
