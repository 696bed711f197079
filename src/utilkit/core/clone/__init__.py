"""Deep cloning: value classification and the clone operation."""

from utilkit.core.clone.core import clone_temporal, deep_clone
from utilkit.core.clone.models import CloneDepthError, ValueKind, kind_of

__all__ = [
    # Models
    "ValueKind",
    "kind_of",
    "CloneDepthError",
    # Core
    "deep_clone",
    "clone_temporal",
]
