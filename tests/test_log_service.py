"""Tests for LogService."""

import pytest
from unittest.mock import MagicMock

from gitminer.config import get_default_config
from gitminer.errors import AmbiguousBlock, MalformedChange
from gitminer.services import LogService


LOG = (
    "'--a1--2024-01-01--Alice'\n"
    "3\t1\tfoo.txt\n"
    "\n"
    "'--b2--2024-01-02--Bob'\n"
    "'--c3--2024-01-03--Carol'\n"
    "2\t0\tfoo.txt\n"
    "1\t1\tbar.txt\n"
)


class TestLogService:
    """Tests for the log service."""

    def test_load_file(self, tmp_path):
        """Test reading and parsing an exported log."""
        path = tmp_path / 'logfile.log'
        path.write_text(LOG, encoding='utf-8')

        entries = LogService().load(path)
        assert [e.id.value for e in entries] == ['a1', 'b2', 'c3']

    def test_load_missing_file(self, tmp_path):
        """Test a missing file raises OSError."""
        with pytest.raises(FileNotFoundError):
            LogService().load(tmp_path / 'missing.log')

    def test_load_malformed(self, tmp_path):
        """Test parse errors propagate."""
        path = tmp_path / 'bad.log'
        path.write_text("'--a--2024-01-01--x'\n5\tfoo.txt\n")
        with pytest.raises(MalformedChange):
            LogService().load(path)

    def test_summary_and_revisions(self):
        """Test analyses go through the service."""
        service = LogService()
        entries = service.parse(LOG)

        summary = service.summary(entries)
        assert summary.commits_count == 3
        assert summary.authors_count == 3
        assert summary.distinct_files_count == 2
        assert summary.total_changed_files_count == 5

        revisions = service.revisions(entries, top=1)
        assert revisions[0].path.value == 'foo.txt'
        assert revisions[0].revisions == 3

    def test_from_config_strict(self):
        """Test parser.strict_headers is honored."""
        config = get_default_config()
        config['parser']['strict_headers'] = True
        service = LogService.from_config(config)
        with pytest.raises(AmbiguousBlock):
            service.parse(LOG)

    def test_from_config_strict_override(self):
        """Test an explicit strict argument wins over config."""
        config = get_default_config()
        config['parser']['strict_headers'] = True
        service = LogService.from_config(config, strict=False)
        assert len(service.parse(LOG)) == 3

    def test_from_config_git_settings(self):
        """Test git settings reach the client."""
        config = get_default_config()
        config['git']['timeout_seconds'] = 9
        config['git']['date_format'] = 'iso'
        service = LogService.from_config(config)
        assert service.git.timeout == 9
        assert service.git.date_format == 'iso'

    def test_empty_marker_falls_back(self):
        """Test an empty marker does not turn every line into a header."""
        assert LogService(header_marker='').header_marker == "'"

    def test_from_repo(self):
        """Test the git client output is parsed."""
        git = MagicMock()
        git.numstat_log.return_value = LOG
        service = LogService(git_client=git)

        entries = service.from_repo('/repo', since='2024-01-01')
        assert len(entries) == 3
        git.numstat_log.assert_called_once_with('/repo', since='2024-01-01', until=None)
