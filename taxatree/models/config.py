"""Configuration management for Taxatree."""

import os
from typing import Any, Optional

from taxatree.models.errors import TaxaTreeError, ValidationError
from taxatree.models.taxonomic import Rank, TraversalOrder

class ConfigError(TaxaTreeError):
    """Raised when there's an issue with configuration."""
    pass

TRUE_VALUES = ('1', 'true', 'yes', 'on')

def env_flag(name: str) -> bool:
    return os.environ.get(name, '').strip().lower() in TRUE_VALUES

class TaxaTreeConfig:
    """Centralized configuration for Taxatree."""

    def __init__(self, args: Optional[Any] = None):
        """
        Initialize configuration from args and environment.

        Args:
            args: Arguments from argparse

        Raises:
            ConfigError: If an option has an unusable value
        """
        self.command = getattr(args, 'command', None) or 'menu'

        # Common configuration
        self.verbose = getattr(args, 'verbose', False)
        self.seed_examples = not (getattr(args, 'no_seed', False) or env_flag("TAXATREE_NO_SEED"))
        self.browser = getattr(args, 'browser', None) or os.environ.get("TAXATREE_BROWSER") or None

        if self.command == 'search':
            self.name = (getattr(args, 'name', '') or '').strip()
            if not self.name:
                raise ConfigError("Search name cannot be empty.")

        elif self.command == 'traverse':
            try:
                self.order = TraversalOrder.parse(getattr(args, 'order', 'pre'))
            except ValidationError as e:
                raise ConfigError(str(e))

        elif self.command == 'species':
            self.rank = getattr(args, 'rank', None)
            if self.rank:
                try:
                    Rank.from_label(self.rank)
                except ValidationError as e:
                    raise ConfigError(str(e))
