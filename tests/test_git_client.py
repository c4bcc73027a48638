"""Tests for GitClient."""

import subprocess
import pytest
from datetime import datetime
from unittest.mock import MagicMock, patch

from gitminer.exit_codes import GIT_ERROR, GitCommandError
from gitminer.infra import GitClient, PRETTY_FORMAT


@pytest.fixture
def repo(tmp_path):
    """A directory that looks like a git repository."""
    (tmp_path / '.git').mkdir()
    return tmp_path


def _completed(stdout='', stderr='', returncode=0):
    result = MagicMock()
    result.stdout = stdout
    result.stderr = stderr
    result.returncode = returncode
    return result


class TestLogCommand:
    """Test git log command construction."""

    def test_default_command(self):
        """Test the default flags."""
        cmd = GitClient().log_command()
        assert cmd[:2] == ['git', 'log']
        assert '--all' in cmd
        assert '--numstat' in cmd
        assert '--date=short' in cmd
        assert f'--pretty=format:{PRETTY_FORMAT}' in cmd
        assert '--no-renames' in cmd

    def test_options_disabled(self):
        """Test optional flags can be switched off."""
        cmd = GitClient(all_branches=False, no_renames=False, date_format='iso').log_command()
        assert '--all' not in cmd
        assert '--no-renames' not in cmd
        assert '--date=iso' in cmd

    def test_since_until(self):
        """Test date filters accept strings and datetimes."""
        cmd = GitClient().log_command(since='2024-01-01', until=datetime(2024, 2, 1))
        assert '--since=2024-01-01' in cmd
        assert '--until=2024-02-01T00:00:00' in cmd

    def test_pretty_format_matches_parser(self):
        """Test the header format opens with the parser's marker."""
        assert PRETTY_FORMAT.startswith("'--")


class TestNumstatLog:
    """Test running git log."""

    def test_returns_stdout(self, repo):
        """Test successful output is returned unchanged."""
        text = "'--abc--2024-01-01--Alice'\n1\t2\tfile.py\n"
        with patch('gitminer.infra.git_client.subprocess.run', return_value=_completed(text)) as run:
            assert GitClient(timeout=5).numstat_log(repo) == text

        args, kwargs = run.call_args
        assert args[0][:2] == ['git', 'log']
        assert kwargs['cwd'] == str(repo)
        assert kwargs['timeout'] == 5

    def test_not_a_repo(self, tmp_path):
        """Test a plain directory is rejected before running git."""
        with patch('gitminer.infra.git_client.subprocess.run') as run:
            with pytest.raises(GitCommandError):
                GitClient().numstat_log(tmp_path)
        run.assert_not_called()

    def test_nonzero_exit(self, repo):
        """Test git failures raise with stderr in the message."""
        failed = _completed(stderr='fatal: bad revision', returncode=128)
        with patch('gitminer.infra.git_client.subprocess.run', return_value=failed):
            with pytest.raises(GitCommandError) as exc_info:
                GitClient().numstat_log(repo)
        assert 'bad revision' in str(exc_info.value)
        assert exc_info.value.returncode == 128
        assert exc_info.value.exit_code == GIT_ERROR

    def test_timeout(self, repo):
        """Test timeouts are reported as GitCommandError."""
        with patch('gitminer.infra.git_client.subprocess.run',
                   side_effect=subprocess.TimeoutExpired(cmd='git', timeout=1)):
            with pytest.raises(GitCommandError, match='timed out'):
                GitClient(timeout=1).numstat_log(repo)

    def test_git_missing(self, repo):
        """Test a missing git binary is reported as GitCommandError."""
        with patch('gitminer.infra.git_client.subprocess.run',
                   side_effect=FileNotFoundError('git')):
            with pytest.raises(GitCommandError):
                GitClient().numstat_log(repo)
