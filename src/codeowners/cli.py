from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .codeowners_file import CODEOWNERS_LOCATIONS, load_codeowners, locate
from .errors import GitError, SourceError, UsageError
from .gitutils import find_repo_root
from .lint import lint_rules
from .ownership import Owners, Rule
from .paths import normalize_repo_path
from .version import __version__


def _repo_root(args_repo_root: str | None) -> Path:
    if args_repo_root:
        return Path(args_repo_root).resolve()
    try:
        return find_repo_root()
    except GitError:
        return Path.cwd()


def _load(repo_root: Path, codeowners: str | None) -> Owners:
    if codeowners:
        return load_codeowners(Path(codeowners))
    found = locate(repo_root)
    if found is None:
        where = ", ".join(CODEOWNERS_LOCATIONS)
        raise UsageError(f"no CODEOWNERS file in {repo_root} ({where}); use --codeowners PATH")
    return load_codeowners(found)


def _rule_obj(r: Rule) -> dict[str, object]:
    return {
        "pattern": r.pattern_text,
        "owners": [o.value for o in r.owners],
        "line": r.line,
        "source": r.source,
    }


def _describe(r: Rule) -> str:
    owners = " ".join(o.value for o in r.owners) or "(no owners)"
    return f"- {r.pattern_text} -> {owners} ({r.source}:{r.line})"


def cmd_who_owns(args: argparse.Namespace) -> int:
    repo_root = _repo_root(args.repo_root)
    owners = _load(repo_root, args.codeowners)

    path = normalize_repo_path(args.path, repo_root=repo_root)
    if path in ("", "."):
        raise UsageError(f"not a path inside the repository: {args.path!r}")
    m = owners.match(path)
    found = m.owners
    unowned = not found

    if args.format == "json":
        payload = {
            "path": path,
            "owners": [o.to_dict() for o in found] if found is not None else None,
            "chosen_rule": _rule_obj(m.chosen) if m.chosen else None,
            "matches": [_rule_obj(r) for r in m.matches],
            "version": __version__,
        }
        print(json.dumps(payload, indent=2))
        return 3 if args.fail_on_unowned and unowned else 0

    if found is None:
        print(f"{path} is up for adoption")
    elif not found:
        print(f"{path}: (explicitly unowned)")
    else:
        print(f"{path}: {' '.join(o.value for o in found)}")

    if args.explain:
        print("")
        if not m.matches:
            print("No matching rules.")
        else:
            print("Matched rules (last-match wins):")
            for r in m.matches:
                chosen = "  <== chosen" if r is m.chosen else ""
                print(f"{_describe(r)}{chosen}")

    return 3 if args.fail_on_unowned and unowned else 0


def cmd_lint(args: argparse.Namespace) -> int:
    repo_root = _repo_root(args.repo_root)
    owners = _load(repo_root, args.codeowners)

    res = lint_rules(owners, strict=args.strict)

    if args.format == "json":
        payload = {"issues": [i.to_dict() for i in res.issues], "version": __version__}
        print(json.dumps(payload, indent=2))
    elif not res.issues:
        print(f"{len(owners)} rule(s), no issues.")
    else:
        for i in res.issues:
            loc = f"{i.file}:{i.line}: " if i.file else ""
            print(f"{loc}{i.severity} {i.code}: {i.message}")
            if i.hint:
                print(f"  hint: {i.hint}")

    if res.has_errors:
        return 2
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="codeowners", description="Query GitHub-style CODEOWNERS files")
    p.add_argument(
        "-c",
        "--codeowners",
        default=None,
        help="Path to CODEOWNERS (default: search " + ", ".join(CODEOWNERS_LOCATIONS) + " under the repo root)",
    )
    p.add_argument("--repo-root", default=None, help="Repository root (default: auto-detect with git)")
    p.add_argument("-v", "--verbose", action="store_true", help="Log parsing details to stderr")
    p.add_argument("--version", action="version", version=f"codeowners {__version__}")

    sub = p.add_subparsers(dest="cmd", required=True)

    w = sub.add_parser("who-owns", aliases=["who", "owner"], help="Find the owners of a path")
    w.add_argument("path", help="Path of a file or directory (relative or absolute, gitignore format)")
    w.add_argument("--format", choices=["text", "json"], default="text")
    w.add_argument("--explain", action="store_true", help="Show the matching rules and precedence")
    w.add_argument("--fail-on-unowned", action="store_true", help="Exit 3 if the path has no owners")
    w.set_defaults(func=cmd_who_owns)

    l = sub.add_parser("lint", help="Lint the CODEOWNERS file")
    l.add_argument("--format", choices=["text", "json"], default="text")
    l.add_argument("--strict", action="store_true", help="Treat warnings as errors")
    l.set_defaults(func=cmd_lint)

    return p


def main(argv: list[str] | None = None) -> None:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()

    try:
        args = parser.parse_args(argv)
        logging.basicConfig(
            level=logging.DEBUG if args.verbose else logging.WARNING,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )
        rc = args.func(args)
    except UsageError as e:
        print(f"error: {e}", file=sys.stderr)
        rc = 2
    except SourceError as e:
        print(f"error: {e}", file=sys.stderr)
        rc = 2
    except KeyboardInterrupt:
        rc = 130

    raise SystemExit(rc)
