from .sequence import sequence, traverse
from .validate import sequence_accumulating, traverse_accumulating, validate

__all__ = (
    # Short-circuit
    "sequence",
    "traverse",
    # Accumulating
    "sequence_accumulating",
    "traverse_accumulating",
    "validate",
)
