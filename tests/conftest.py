"""Shared test fixtures for codeowners-gen tests."""

import logging

import pytest

from codeowners_gen.models import AttributionConfig, AuthorStat, OutputOptions


@pytest.fixture
def alice():
    return AuthorStat(name="Alice", email="alice@example.com", lines=50)


@pytest.fixture
def bob():
    return AuthorStat(name="Bob", email="bob@example.com", lines=30)


@pytest.fixture
def carol():
    return AuthorStat(name="Carol", email="carol@example.com", lines=20)


@pytest.fixture
def dave():
    return AuthorStat(name="Dave", email="dave@example.com", lines=10)


@pytest.fixture
def team_config():
    """Aliases for alice, bob, carol and dave, with a team fallback."""
    return AttributionConfig.from_mapping(
        {
            "alice": ["alice@example.com"],
            "bob": ["bob@example.com", "bob@users.noreply.github.com"],
            "carol": ["carol@example.com"],
            "dave": ["dave@example.com"],
        },
        fallback=["team-default"],
    )


@pytest.fixture
def make_options(tmp_path):
    """Build OutputOptions rooted at a scanned ``repo`` directory."""

    def _make(config, owners_style_file=False):
        return OutputOptions(
            path=tmp_path / "repo",
            config=config,
            owners_style_file=owners_style_file,
        )

    return _make


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Keep a developer's ~/.codeowners-gen.toml and env out of tests."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("CODEOWNERS_GEN_FALLBACK", raising=False)
    return home


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers the CLI installs so log files are closed between tests."""
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    logging.getLogger("codeowners_gen").setLevel(logging.NOTSET)
