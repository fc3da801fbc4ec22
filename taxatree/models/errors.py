"""Error classes for Taxatree."""

class TaxaTreeError(Exception):
    """Base class for Taxatree exceptions."""
    pass

class ValidationError(TaxaTreeError):
    """Raised when a path, name or annotation is malformed or empty."""
    pass

class ConflictError(TaxaTreeError):
    """Raised when a path names a different Class than the tree root."""
    pass

class InvalidTargetError(TaxaTreeError):
    """Raised when an update or delete targets a missing or non-Species node."""
    pass
