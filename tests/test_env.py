"""Tests for colormatch.core.env — .env loading, walk-up logic and Settings."""

import os
from pathlib import Path

import pytest
from colormatch.core.env import Settings, _find_dotenv, _parse_dotenv, load_env, load_settings, settings_from_env


class TestParseDotenv:
    def test_simple_key_value(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('FOO=bar\n')
        assert _parse_dotenv(f) == {'FOO': 'bar'}

    def test_quoted_values(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('KEY="hello world"\nKEY2=\'single\'\n')
        assert _parse_dotenv(f) == {'KEY': 'hello world', 'KEY2': 'single'}

    def test_export_prefix(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('export COLORMATCH_COUNT=3\n')
        assert _parse_dotenv(f) == {'COLORMATCH_COUNT': '3'}

    def test_comments_and_blanks_ignored(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('# comment\n\nFOO=bar\n\n')
        assert _parse_dotenv(f) == {'FOO': 'bar'}

    def test_no_value(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('NOEQUALS\nFOO=bar\n')
        assert _parse_dotenv(f) == {'FOO': 'bar'}


class TestFindDotenv:
    def test_finds_in_cwd(self, tmp_path: Path) -> None:
        dotenv = tmp_path / '.env'
        dotenv.write_text('X=1\n')
        assert _find_dotenv(tmp_path) == dotenv

    def test_finds_in_parent(self, tmp_path: Path) -> None:
        subdir = tmp_path / 'sub'
        subdir.mkdir()
        dotenv = tmp_path / '.env'
        dotenv.write_text('X=1\n')
        assert _find_dotenv(subdir) == dotenv

    def test_stops_at_git_dir(self, tmp_path: Path) -> None:
        # .env is above .git — should not be found
        repo = tmp_path / 'repo'
        repo.mkdir()
        (tmp_path / '.env').write_text('X=1\n')
        (repo / '.git').mkdir()
        subdir = repo / 'src'
        subdir.mkdir()
        assert _find_dotenv(subdir) is None

    def test_stops_at_git_file(self, tmp_path: Path) -> None:
        # .git as a file (worktree)
        repo = tmp_path / 'repo'
        repo.mkdir()
        (tmp_path / '.env').write_text('X=1\n')
        (repo / '.git').write_text('gitdir: ../somewhere\n')
        subdir = repo / 'src'
        subdir.mkdir()
        assert _find_dotenv(subdir) is None

    def test_env_beside_git_is_found(self, tmp_path: Path) -> None:
        (tmp_path / '.git').mkdir()
        dotenv = tmp_path / '.env'
        dotenv.write_text('X=1\n')
        assert _find_dotenv(tmp_path) == dotenv


@pytest.fixture
def environ(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """A private copy of os.environ so .env loading cannot leak between tests."""
    env = {k: v for k, v in os.environ.items() if not k.startswith('COLORMATCH_')}
    monkeypatch.setattr(os, 'environ', env)
    return env


class TestLoadEnv:
    def test_sets_missing_vars(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, environ: dict) -> None:
        (tmp_path / '.git').mkdir()
        (tmp_path / '.env').write_text('TEST_COLORMATCH_KEY=secret\n')
        monkeypatch.chdir(tmp_path)
        load_env()
        assert environ['TEST_COLORMATCH_KEY'] == 'secret'

    def test_does_not_overwrite_existing(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, environ: dict) -> None:
        environ['TEST_COLORMATCH_KEY2'] = 'original'
        (tmp_path / '.git').mkdir()
        (tmp_path / '.env').write_text('TEST_COLORMATCH_KEY2=fromfile\n')
        monkeypatch.chdir(tmp_path)
        load_env()
        assert environ['TEST_COLORMATCH_KEY2'] == 'original'

    def test_explicit_env_file(self, tmp_path: Path, environ: dict) -> None:
        dotenv = tmp_path / 'custom.env'
        dotenv.write_text('TEST_COLORMATCH_KEY3=custom\n')
        assert load_env(env_file=str(dotenv)) == dotenv
        assert environ['TEST_COLORMATCH_KEY3'] == 'custom'

    def test_missing_explicit_file(self, tmp_path: Path) -> None:
        assert load_env(env_file=str(tmp_path / 'nope.env')) is None

    def test_returns_none_when_no_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        # tmp_path has no .env, and we fake a .git so it stops
        (tmp_path / '.git').mkdir()
        monkeypatch.chdir(tmp_path)
        assert load_env() is None


class TestSettings:
    def test_defaults(self):
        assert settings_from_env({}) == Settings(count=5, palette_path=None)

    def test_count(self):
        assert settings_from_env({'COLORMATCH_COUNT': ' 3 '}).count == 3

    def test_zero_count_allowed(self):
        assert settings_from_env({'COLORMATCH_COUNT': '0'}).count == 0

    def test_bad_count(self):
        with pytest.raises(ValueError, match='integer'):
            settings_from_env({'COLORMATCH_COUNT': 'five'})

    def test_negative_count(self):
        with pytest.raises(ValueError, match='>= 0'):
            settings_from_env({'COLORMATCH_COUNT': '-1'})

    def test_palette_path(self):
        assert settings_from_env({'COLORMATCH_PALETTE': '/tmp/p.json'}).palette_path == '/tmp/p.json'

    def test_blank_palette_path_ignored(self):
        assert settings_from_env({'COLORMATCH_PALETTE': '  '}).palette_path is None

    def test_load_settings_reads_dotenv(self, tmp_path: Path, environ: dict) -> None:
        dotenv = tmp_path / 'c.env'
        dotenv.write_text('COLORMATCH_COUNT=2\n')
        settings = load_settings(env_file=str(dotenv))
        assert settings.count == 2
        assert settings.env_path == dotenv
