from __future__ import annotations

from dataclasses import dataclass

from .owner import is_recognized
from .ownership import Owners, Rule


@dataclass(frozen=True)
class Issue:
    severity: str  # "ERROR" | "WARN"
    code: str
    message: str
    file: str | None = None
    line: int | None = None
    hint: str | None = None

    def to_dict(self) -> dict[str, object]:
        return {
            "severity": self.severity,
            "code": self.code,
            "message": self.message,
            "file": self.file,
            "line": self.line,
            "hint": self.hint,
        }


@dataclass(frozen=True)
class LintResult:
    issues: list[Issue]

    @property
    def has_errors(self) -> bool:
        return any(i.severity == "ERROR" for i in self.issues)

    @property
    def has_warnings(self) -> bool:
        return any(i.severity == "WARN" for i in self.issues)


def lint_rules(owners: Owners, *, strict: bool = False) -> LintResult:
    """Lint parsed CODEOWNERS rules.

    Checks only what the file itself says; nothing here looks at the
    repository tree or resolves identities. Strict mode turns warnings into
    errors for "enforce in CI" use-cases.
    """
    level = "ERROR" if strict else "WARN"
    issues: list[Issue] = []

    seen: dict[str, Rule] = {}
    for r in owners.rules:
        text = r.pattern_text

        if not r.owners:
            issues.append(
                Issue(
                    severity=level,
                    code="NO_OWNERS",
                    message=f"Pattern '{text}' has no owners; matching paths are explicitly unowned.",
                    file=r.source,
                    line=r.line,
                    hint="Fine if intended (e.g. to carve out generated files).",
                )
            )

        for o in r.owners:
            if not is_recognized(o.value):
                issues.append(
                    Issue(
                        severity=level,
                        code="UNRECOGNIZED_OWNER",
                        message=f"Owner '{o.value}' is not an @user, @org/team or email address.",
                        file=r.source,
                        line=r.line,
                        hint="Prefix usernames with '@'.",
                    )
                )

        prev = seen.get(text)
        if prev is not None and prev.owners != r.owners:
            issues.append(
                Issue(
                    severity=level,
                    code="DUPLICATE_PATTERN",
                    message=(
                        f"Pattern '{text}' is defined multiple times (last-match wins). "
                        f"Line {prev.line} is shadowed by line {r.line}."
                    ),
                    file=r.source,
                    line=r.line,
                    hint="Remove duplicates or make precedence explicit.",
                )
            )
        seen[text] = r

    return LintResult(issues=issues)
