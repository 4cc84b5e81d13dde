from __future__ import annotations


class CodeownersError(Exception):
    """Base exception for codeowners."""


class SourceError(CodeownersError):
    """A CODEOWNERS file could not be read."""


class SourceNotFoundError(SourceError):
    """No CODEOWNERS file at the given (or any standard) location."""


class GitError(CodeownersError):
    """Git invocation failed."""


class UsageError(CodeownersError):
    """Invalid CLI usage (user error)."""
