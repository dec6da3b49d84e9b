"""Tests for the CODEOWNERS and OWNERS formatters."""

import io

from codeowners_gen.formatters import (
    CodeownersFormatter,
    OwnersFormatter,
    get_formatter,
)
from codeowners_gen.models import AttributionConfig, AuthorStat


class TestGetFormatter:
    def test_codeowners_by_default(self):
        assert isinstance(get_formatter(False), CodeownersFormatter)

    def test_owners_style(self):
        assert isinstance(get_formatter(True), OwnersFormatter)

    def test_max_contributors_passed_through(self):
        assert get_formatter(True, max_contributors=2).max_contributors == 2


class TestCodeownersFormatter:
    def test_single_owner_line(self):
        config = AttributionConfig.from_mapping({"alice": ["a@x.com"]})
        out = io.StringIO()
        aliases = CodeownersFormatter().write_chunk(
            [AuthorStat(email="a@x.com", lines=10)], config, out, "src/a.go"
        )
        assert out.getvalue() == "src/a.go @alice\n"
        assert aliases == ["alice"]

    def test_multiple_owners_in_rank_order(self, alice, bob, carol, dave, team_config):
        out = io.StringIO()
        CodeownersFormatter().write_chunk([dave, carol, bob, alice], team_config, out, "lib/x.py")
        assert out.getvalue() == "lib/x.py @alice @bob @carol\n"

    def test_fallback_owner(self):
        config = AttributionConfig.from_mapping({}, fallback=["team-default"])
        out = io.StringIO()
        CodeownersFormatter().write_chunk(
            [AuthorStat(email="nobody@x.com", lines=1)], config, out, "path"
        )
        assert out.getvalue() == "path @team-default\n"

    def test_no_owners_writes_bare_path(self):
        out = io.StringIO()
        aliases = CodeownersFormatter().write_chunk(
            [AuthorStat(email="nobody@x.com", lines=1)], AttributionConfig(), out, "src/a.go"
        )
        assert out.getvalue() == "src/a.go\n"
        assert aliases == []

    def test_path_is_cleaned(self, alice, team_config):
        out = io.StringIO()
        CodeownersFormatter().write_chunk([alice], team_config, out, "docs/[draft].md old.md")
        assert out.getvalue() == "docs/\\[draft\\].md @alice\n"


class TestOwnersFormatter:
    def test_block_without_name(self):
        config = AttributionConfig.from_mapping({"alice": ["a@x.com"]})
        out = io.StringIO()
        OwnersFormatter().write_chunk([AuthorStat(email="a@x.com", lines=10)], config, out, "src/a.go")
        assert out.getvalue().splitlines() == ["src/a.go", "  - ", "    - a@x.com"]

    def test_block_with_names(self, alice, bob, team_config):
        out = io.StringIO()
        aliases = OwnersFormatter().write_chunk([bob, alice], team_config, out, "src/a.go")
        assert out.getvalue() == (
            "src/a.go\n"
            "  - Alice\n"
            "    - alice@example.com\n"
            "  - Bob\n"
            "    - bob@example.com\n"
        )
        assert aliases == ["alice", "bob"]

    def test_at_most_three_blocks(self, alice):
        config = AttributionConfig.from_mapping(
            {alias: ["alice@example.com"] for alias in ("a1", "a2", "a3", "a4")}
        )
        out = io.StringIO()
        OwnersFormatter().write_chunk([alice], config, out, "f")
        lines = out.getvalue().splitlines()
        assert lines[0] == "f"
        assert len(lines) == 1 + 3 * 2

    def test_fallback_renders_empty_entries(self):
        config = AttributionConfig.from_mapping({}, fallback=["team-default"])
        out = io.StringIO()
        OwnersFormatter().write_chunk([AuthorStat(email="nobody@x.com")], config, out, "f")
        assert out.getvalue() == "f\n  - \n    - \n"

    def test_path_is_not_cleaned(self, alice, team_config):
        out = io.StringIO()
        OwnersFormatter().write_chunk([alice], team_config, out, "docs/[draft].md")
        assert out.getvalue().splitlines()[0] == "docs/[draft].md"
