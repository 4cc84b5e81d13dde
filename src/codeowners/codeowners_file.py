from __future__ import annotations

import logging
from pathlib import Path

from .errors import SourceError, SourceNotFoundError
from .owner import classify_owner
from .ownership import Owners, Rule
from .patterns import compile_pattern

logger = logging.getLogger(__name__)

# Where GitHub looks for the file, in its lookup order.
CODEOWNERS_LOCATIONS = ("CODEOWNERS", ".github/CODEOWNERS", "docs/CODEOWNERS")


def _split_rule(line: str) -> tuple[str, list[str]]:
    pattern, *tokens = line.split()
    owners: list[str] = []
    for tok in tokens:
        # Inline comment: "*.js  @js-team  # frontend"
        if tok.startswith("#"):
            break
        owners.append(tok)
    return pattern, owners


def parse(text: str, source: str = "CODEOWNERS") -> Owners:
    """Parse CODEOWNERS text into an ``Owners`` resolver.

    Never raises on content: a pattern with no owners becomes a rule with an
    empty owner list, and unrecognized owner tokens are kept as usernames.
    """
    rules: list[Rule] = []
    # Rules end at "\n" only; form feeds and other separators stay in the line.
    for idx, raw in enumerate(text.split("\n"), start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue

        pat, tokens = _split_rule(line)
        owners = tuple(classify_owner(t) for t in tokens)
        if not owners:
            logger.debug("%s:%d: '%s' has no owners (explicitly unowned)", source, idx, pat)

        rules.append(Rule(pattern=compile_pattern(pat), owners=owners, line=idx, source=source))

    logger.debug("%s: parsed %d rule(s)", source, len(rules))
    return Owners(rules)


def locate(root: str | Path = ".") -> Path | None:
    """Find a CODEOWNERS file in the standard locations under ``root``."""
    base = Path(root)
    for rel in CODEOWNERS_LOCATIONS:
        p = base / rel
        if p.is_file():
            logger.debug("using %s", p)
            return p
    return None


def load_codeowners(path: str | Path) -> Owners:
    p = Path(path)
    if not p.is_file():
        raise SourceNotFoundError(f"CODEOWNERS file not found: {p}")
    try:
        txt = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceError(f"Failed to read CODEOWNERS: {p}: {e}") from e
    return parse(txt, source=str(p))


from_path = load_codeowners
