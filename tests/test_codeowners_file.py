import pytest

from codeowners.codeowners_file import load_codeowners, locate, parse
from codeowners.errors import SourceNotFoundError
from codeowners.owner import OwnerKind


def test_parse_keeps_file_order_and_line_numbers():
    owners = parse(
        """
        *.js    @js-team
        /build/ @infra-owner
        docs/** @docs-team user@example.com
        """,
        source="CODEOWNERS",
    )
    rules = owners.rules
    assert [r.pattern_text for r in rules] == ["*.js", "/build/", "docs/**"]
    assert [r.line for r in rules] == [2, 3, 4]
    assert [o.kind for o in rules[2].owners] == [OwnerKind.USERNAME, OwnerKind.EMAIL]


def test_inline_comment_ends_owner_list():
    owners = parse("*.js @js-team # frontend folks\n")
    assert [o.value for o in owners.rules[0].owners] == ["@js-team"]


def test_duplicate_owners_are_preserved():
    owners = parse("* @a @a\n")
    assert [o.value for o in owners.of("x")] == ["@a", "@a"]


def test_malformed_tokens_do_not_fail():
    owners = parse("* not-an-owner @ok\n")
    assert [o.kind for o in owners.of("x")] == [OwnerKind.USERNAME, OwnerKind.USERNAME]


def test_windows_line_endings():
    owners = parse("*.py @py\r\n*.md @docs\r\n")
    assert [o.value for o in owners.of("a/b.md")] == ["@docs"]


def test_locate_prefers_root_then_github_then_docs(tmp_path):
    assert locate(tmp_path) is None

    (tmp_path / "docs").mkdir()
    (tmp_path / "docs" / "CODEOWNERS").write_text("* @docs\n", encoding="utf-8")
    assert locate(tmp_path) == tmp_path / "docs" / "CODEOWNERS"

    (tmp_path / ".github").mkdir()
    (tmp_path / ".github" / "CODEOWNERS").write_text("* @gh\n", encoding="utf-8")
    assert locate(tmp_path) == tmp_path / ".github" / "CODEOWNERS"

    (tmp_path / "CODEOWNERS").write_text("* @root\n", encoding="utf-8")
    assert locate(tmp_path) == tmp_path / "CODEOWNERS"


def test_load_codeowners_reads_file(tmp_path):
    f = tmp_path / "CODEOWNERS"
    f.write_text("*.rs @rustacean\n", encoding="utf-8")
    owners = load_codeowners(f)
    assert [o.value for o in owners.of("src/lib.rs")] == ["@rustacean"]
    assert owners.rules[0].source == str(f)


def test_load_missing_file_is_a_distinct_error(tmp_path):
    with pytest.raises(SourceNotFoundError):
        load_codeowners(tmp_path / "CODEOWNERS")


def test_form_feed_does_not_shift_line_numbers():
    owners = parse("a @x\x0cb @y\nc @z\n")
    assert [r.line for r in owners.rules] == [1, 2]
    assert owners.rules[1].pattern_text == "c"
