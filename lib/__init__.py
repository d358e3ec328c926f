# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - validation.py: Hint generation helpers (shape diff, string similarity)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.validation import (
    calculate_similarity,
    generate_hints,
    json_type_name,
    levenshtein_distance,
)

__all__ = [
    "calculate_similarity",
    "generate_hints",
    "json_type_name",
    "levenshtein_distance",
]
