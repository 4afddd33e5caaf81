"""gridareas: CSS Grid named-area utilities from a compact layout language."""

from gridareas.domain.grammar import MalformedLayout
from gridareas.domain.utilities import UtilitySet, generate_utilities, register_utilities

__version__ = "0.3.0"

__all__ = [
    "MalformedLayout",
    "UtilitySet",
    "__version__",
    "generate_utilities",
    "register_utilities",
]
