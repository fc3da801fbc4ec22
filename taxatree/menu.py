"""Interactive menu driving the taxonomy tree."""

import sys
import logging
from typing import Callable, List, Optional, TextIO

from taxatree.core.tree import TaxonomyTree
from taxatree.core.traversal import traverse
from taxatree.models.taxonomic import TraversalOrder
from taxatree.core.utils import RANK_LABELS
from taxatree.io.browser import open_reference_link
from taxatree.io.writers import render_tree, format_traversal, describe_node
from taxatree.models.errors import TaxaTreeError

logger = logging.getLogger(__name__)

MAIN_MENU = """
===== TAXONOMY TREE =====
1. Add New Species Path (C)
2. Search Taxonomic or Common Name (R)
3. Display Full Taxonomy Tree (R)
4. Traversal Menu (R)
5. Update Species Details (U)
6. Delete Species (D)
7. Exit"""

TRAVERSAL_MENU = """
--- Traversal Menu ---
1. Pre-order Traversal (Root, Children)
2. Post-order Traversal (Children, Root)
3. Level-order Traversal (Breadth First)"""

TRAVERSAL_CHOICES = {
    '1': TraversalOrder.PRE_ORDER,
    '2': TraversalOrder.POST_ORDER,
    '3': TraversalOrder.LEVEL_ORDER,
}

EXIT_CHOICE = '7'

class EndOfInput(Exception):
    """Input stream closed while the menu was waiting for an answer."""
    pass

class TaxonomyMenu:
    """
    Text menu over a TaxonomyTree.

    Input and output are injectable so the loop can be driven by scripts
    and tests; by default it reads stdin and writes stdout.
    """

    def __init__(
        self,
        tree: TaxonomyTree,
        input_fn: Callable[[str], str] = input,
        output: Optional[TextIO] = None,
        browser: Optional[str] = None,
        opener: Callable[..., bool] = open_reference_link
    ):
        self.tree = tree
        self.input_fn = input_fn
        self.output = output or sys.stdout
        self.browser = browser
        self.opener = opener
        self.actions = {
            '1': self.add_species,
            '2': self.search,
            '3': self.display,
            '4': self.traversal,
            '5': self.update_species,
            '6': self.delete_species,
        }

    def say(self, text: str = "") -> None:
        self.output.write(text + "\n")

    def ask(self, prompt: str) -> str:
        try:
            return self.input_fn(prompt).strip()
        except EOFError:
            raise EndOfInput()

    def confirm(self, prompt: str) -> bool:
        return self.ask(prompt).lower() == 'y'

    def run(self) -> None:
        """Loop until Exit is chosen or input runs out, then tear the tree down."""
        try:
            while True:
                self.say(MAIN_MENU)
                choice = self.ask("Choose a menu option: ")
                if choice == EXIT_CHOICE:
                    self.say("Exiting. Cleaning up memory...")
                    break
                action = self.actions.get(choice)
                if action is None:
                    self.say("Invalid choice. Please try again.")
                    continue
                try:
                    action()
                except TaxaTreeError as e:
                    logger.debug(f"Menu action {choice} failed: {str(e)}")
                    self.say(f"[ERROR] {str(e)}")
        except EndOfInput:
            self.say("")
            logger.debug("Input closed, leaving menu")
        finally:
            self.tree.clear()

    def add_species(self) -> None:
        self.say("\n--- Add New Species ---")
        path: List[str] = []
        for level in RANK_LABELS:
            name = self.ask(f"Enter {level} name: ")
            if not name:
                self.say("[ERROR] Name cannot be empty. Insertion aborted.")
                return
            path.append(name)

        common_name = self.ask("Enter Common Name: ")
        if not common_name:
            self.say("[ERROR] Common name cannot be empty. Insertion aborted.")
            return
        link = self.ask("Enter Reference Link (URL, optional): ")

        self.tree.insert_path(path, common_name, link)
        self.say(f"[SUCCESS] Species '{common_name}' ({path[-1]}) stored.")

    def search(self) -> None:
        self.say("\n--- Search Name ---")
        name = self.ask("Enter the name to search (Taxonomic name OR Common name): ")
        if not name:
            self.say("[INFO] Search name cannot be empty.")
            return

        found = self.tree.find_by_name(name)
        if found is None:
            self.say(f"[INFO] '{name}' not found.")
            return

        self.say(f"\n[SUCCESS] '{name}' found.")
        self.output.write(describe_node(found))
        if found.reference_link and self.confirm("Want to open the link now? (y/n): "):
            self.opener(found.reference_link, self.browser)

    def display(self) -> None:
        self.say("\n--- Full Taxonomy Tree ---")
        if self.tree.is_empty:
            self.say("The tree is currently empty.")
            return
        self.output.write(render_tree(self.tree.root))

    def traversal(self) -> None:
        if self.tree.is_empty:
            self.say("[INFO] Tree is empty. Cannot traverse.")
            return
        self.say(TRAVERSAL_MENU)
        order = TRAVERSAL_CHOICES.get(self.ask("Choose traversal type: "))
        if order is None:
            self.say("Invalid traversal choice.")
            return
        self.say("\n[Traversal Result]")
        self.output.write(format_traversal(traverse(self.tree.root, order)))

    def update_species(self) -> None:
        self.say("\n--- Update Species Details ---")
        name = self.ask("Enter the Taxonomic or Common Name of the SPECIES to update: ")
        if not name:
            self.say("[INFO] Name cannot be empty.")
            return

        node = self.tree.find_by_name(name)
        if node is None:
            self.say(f"[INFO] Species '{name}' not found.")
            return
        if not node.is_species:
            self.say(f"[ERROR] Found '{name}' but it is a {node.level}. Only SPECIES can be updated.")
            return

        self.say(f"\n[FOUND] Species: {node.common_name} ({node.name})")
        common_name = self.ask(f"Enter NEW Common Name (Current: {node.common_name}): ")
        link = self.ask(f"Enter NEW Reference Link (Current: {node.reference_link}): ")
        if not common_name:
            self.say("[ERROR] Common Name cannot be empty. Update aborted.")
            return

        self.tree.update_species(node, common_name, link)
        self.say(f"[SUCCESS] Species '{node.name}' details updated.")

    def delete_species(self) -> None:
        self.say("\n--- Delete Species ---")
        name = self.ask("Enter the Taxonomic or Common Name of the SPECIES to delete: ")
        if not name:
            self.say("[INFO] Name cannot be empty. Deletion aborted.")
            return

        node = self.tree.find_by_name(name)
        if node is None:
            self.say(f"[INFO] Species '{name}' not found.")
            return
        if not node.is_species:
            self.say(f"[ERROR] Found '{name}' but it is a {node.level}. Only SPECIES can be deleted.")
            return

        if not self.confirm(f"Are you sure you want to delete species '{node.common_name} ({node.name})'? (y/n): "):
            self.say("[INFO] Deletion cancelled.")
            return
        self.tree.delete_species(name)
        self.say(f"[SUCCESS] Species '{name}' deleted successfully.")
