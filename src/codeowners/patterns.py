from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache

from .paths import split_path, to_posix


class SegmentKind(Enum):
    LITERAL = "literal"
    STAR = "star"  # '*' alone: any single path component
    DOUBLE_STAR = "double_star"  # '**' alone: zero or more components
    MIXED = "mixed"  # literal text with embedded '*'


@dataclass(frozen=True)
class Segment:
    kind: SegmentKind
    text: str
    regex: re.Pattern[str] | None = field(default=None, compare=False, repr=False)

    def matches(self, name: str) -> bool:
        if self.kind is SegmentKind.LITERAL:
            return name == self.text
        if self.regex is not None:
            return self.regex.fullmatch(name) is not None
        return True


@dataclass(frozen=True)
class Pattern:
    raw: str
    anchored: bool
    directory_only: bool
    segments: tuple[Segment, ...]

    def matches(self, path: str) -> bool:
        parts, is_dir = split_path(path)
        if not parts:
            return False
        align = _Aligner(self, parts, is_dir)
        if self.anchored:
            return align.at(0, 0)
        return any(align.at(start, 0) for start in range(len(parts)))


class _Aligner:
    """Backtracking alignment of pattern segments against path components.

    Results are memoized per (component index, segment index), so trying
    every start offset of an unanchored pattern stays linear in practice.
    """

    def __init__(self, pattern: Pattern, parts: tuple[str, ...], is_dir: bool):
        self.segments = pattern.segments
        self.directory_only = pattern.directory_only
        self.anchored = pattern.anchored
        self.parts = parts
        self.is_dir = is_dir
        self._memo: dict[tuple[int, int], bool] = {}

    def at(self, i: int, j: int) -> bool:
        key = (i, j)
        hit = self._memo.get(key)
        if hit is None:
            hit = self._memo[key] = self._step(i, j)
        return hit

    def _step(self, i: int, j: int) -> bool:
        segs = self.segments
        n = len(self.parts)

        if j == len(segs):
            # Whatever is left lives under the matched directory. A
            # directory-only pattern needs proof that it matched a directory.
            if self.directory_only:
                return i < n or self.is_dir
            if i == n or not segs or not self.anchored:
                return True
            # "docs/*" owns the files in docs, not the ones nested deeper.
            return segs[-1].kind in (SegmentKind.LITERAL, SegmentKind.DOUBLE_STAR)

        seg = segs[j]
        if seg.kind is SegmentKind.DOUBLE_STAR:
            # A trailing '**' means "everything inside", never the dir itself.
            lo = i + 1 if j == len(segs) - 1 else i
            return any(self.at(k, j + 1) for k in range(lo, n + 1))

        if i >= n or not seg.matches(self.parts[i]):
            return False
        return self.at(i + 1, j + 1)


def _compile_segment(text: str) -> Segment:
    if set(text) == {"*"}:
        kind = SegmentKind.STAR if len(text) == 1 else SegmentKind.DOUBLE_STAR
        return Segment(kind=kind, text=text)
    if "*" not in text:
        return Segment(kind=SegmentKind.LITERAL, text=text)

    # Only '*' is special; any run of stars stays inside the component.
    body = "[^/]*".join(re.escape(piece) for piece in re.split(r"\*+", text))
    return Segment(kind=SegmentKind.MIXED, text=text, regex=re.compile(body, re.DOTALL))


@lru_cache(maxsize=4096)
def compile_pattern(pattern: str) -> Pattern:
    """Compile one CODEOWNERS path pattern (gitignore syntax).

    - A leading '/' or any '/' other than a trailing one anchors the
      pattern to the repository root; otherwise it matches at any depth.
    - A trailing '/' makes the pattern match directories only.
    - '*' matches within one path component, '**' spans components.
    """
    raw = pattern
    text = to_posix(pattern.strip())

    # Strip leading ./ (common when pasting file paths)
    while text.startswith("./"):
        text = text[2:]

    directory_only = text.endswith("/")
    body = text.rstrip("/")
    anchored = text.startswith("/") or "/" in body

    segments: list[Segment] = []
    for part in body.split("/"):
        if not part:
            continue
        seg = _compile_segment(part)
        if (
            seg.kind is SegmentKind.DOUBLE_STAR
            and segments
            and segments[-1].kind is SegmentKind.DOUBLE_STAR
        ):
            continue
        segments.append(seg)

    return Pattern(
        raw=raw,
        anchored=anchored,
        directory_only=directory_only,
        segments=tuple(segments),
    )
