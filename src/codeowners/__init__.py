from .codeowners_file import from_path, load_codeowners, locate, parse
from .owner import Owner, OwnerKind, classify_owner
from .ownership import Match, Owners, Rule
from .patterns import Pattern, compile_pattern
from .version import __version__

__all__ = [
    "Match",
    "Owner",
    "OwnerKind",
    "Owners",
    "Pattern",
    "Rule",
    "__version__",
    "classify_owner",
    "compile_pattern",
    "from_path",
    "load_codeowners",
    "locate",
    "parse",
]
