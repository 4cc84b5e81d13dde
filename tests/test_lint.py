from codeowners.codeowners_file import parse
from codeowners.lint import lint_rules


def test_lint_duplicate_pattern_warns():
    owners = parse(
        """

        src/** @api
        src/** @web
        """
    )
    res = lint_rules(owners)
    assert any(i.code == "DUPLICATE_PATTERN" and i.line == 4 for i in res.issues)
    assert res.has_warnings
    assert not res.has_errors


def test_lint_same_owners_twice_is_not_a_duplicate():
    res = lint_rules(parse("src/** @api\nsrc/** @api\n"))
    assert res.issues == []


def test_lint_no_owners_and_unrecognized_owner():
    res = lint_rules(parse("/generated/\n*.py pythonistas\n"))
    assert [i.code for i in res.issues] == ["NO_OWNERS", "UNRECOGNIZED_OWNER"]


def test_lint_strict_turns_warnings_into_errors():
    res = lint_rules(parse("/generated/\n"), strict=True)
    assert res.has_errors
