"""
Log service for gitminer.

Ties the pure parser to its collaborators: reading exported log files,
asking git for a log, and computing analyses with the configured settings.
"""

from pathlib import Path
from typing import List, Optional, Union
import logging

from .. import analysis
from ..domain import FileRevisions, LogEntry, Summary
from ..infra import GitClient
from ..parser import DEFAULT_HEADER_MARKER, parse

logger = logging.getLogger(__name__)


class LogService:
    """
    Service for loading and analysing git logs.

    Example:
        service = LogService.from_config(load_config())

        entries = service.load("logfile.log")
        print(service.summary(entries).to_dict())

        for item in service.revisions(entries, top=5):
            print(item.path, item.revisions)
    """

    def __init__(
        self,
        header_marker: str = DEFAULT_HEADER_MARKER,
        strict: bool = False,
        encoding: str = "utf-8",
        git_client: Optional[GitClient] = None
    ):
        """
        Initialize LogService.

        Args:
            header_marker: Prefix identifying header lines
            strict: Reject blocks with more than one header line
            encoding: Encoding of exported log files
            git_client: Git client instance (creates default if None)
        """
        self.header_marker = header_marker or DEFAULT_HEADER_MARKER
        self.strict = strict
        self.encoding = encoding
        self.git = git_client or GitClient()

    @classmethod
    def from_config(cls, config: dict, strict: Optional[bool] = None) -> 'LogService':
        """
        Build a service from a loaded configuration.

        Args:
            config: Configuration from load_config()
            strict: Overrides parser.strict_headers when not None
        """
        parser_cfg = config.get('parser', {})
        git_cfg = config.get('git', {})

        git_client = GitClient(
            timeout=git_cfg.get('timeout_seconds', 120),
            all_branches=git_cfg.get('all_branches', True),
            no_renames=git_cfg.get('no_renames', True),
            date_format=git_cfg.get('date_format', 'short'),
        )
        return cls(
            header_marker=parser_cfg.get('header_marker', DEFAULT_HEADER_MARKER),
            strict=parser_cfg.get('strict_headers', False) if strict is None else strict,
            encoding=parser_cfg.get('encoding', 'utf-8'),
            git_client=git_client,
        )

    def read(self, path: Union[str, Path]) -> str:
        """Read an exported log file."""
        return Path(path).read_text(encoding=self.encoding)

    def parse(self, text: str) -> List[LogEntry]:
        """Parse log text with this service's settings."""
        return parse(text, header_marker=self.header_marker, strict=self.strict)

    def load(self, path: Union[str, Path]) -> List[LogEntry]:
        """
        Read and parse an exported log file.

        Raises:
            OSError: If the file cannot be read
            ParseError: If the log is malformed
        """
        logger.debug(f"Loading git log from {path}")
        return self.parse(self.read(path))

    def from_repo(self, repo_path: Union[str, Path], since=None, until=None) -> List[LogEntry]:
        """
        Run git log in a repository and parse the result.

        Raises:
            GitCommandError: If git fails
            ParseError: If the log is malformed
        """
        return self.parse(self.git.numstat_log(repo_path, since=since, until=until))

    def summary(self, entries: List[LogEntry]) -> Summary:
        return analysis.summarize(entries)

    def revisions(self, entries: List[LogEntry], top: Optional[int] = None) -> List[FileRevisions]:
        return analysis.file_revisions(entries, top=top)
