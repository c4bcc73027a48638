"""
Git client infrastructure for gitminer.

Produces log text in the format the parser expects. All git invocations go
through this client, making them:
- Easy to mock for testing
- Consistent in error handling
- Isolated from parsing logic
"""

import subprocess
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Union
import logging

from ..exit_codes import GitCommandError

logger = logging.getLogger(__name__)

# Header format understood by gitminer.parser
PRETTY_FORMAT = "'--%h--%ad--%aN'"


class GitClient:
    """
    Abstraction over git commands.

    Example:
        client = GitClient()
        text = client.numstat_log("/path/to/repo")
        entries = gitminer.parse(text)
    """

    def __init__(
        self,
        timeout: int = 120,
        all_branches: bool = True,
        no_renames: bool = True,
        date_format: str = "short"
    ):
        """
        Initialize GitClient.

        Args:
            timeout: Command timeout in seconds
            all_branches: Pass --all to git log
            no_renames: Pass --no-renames so renames show as delete + add
            date_format: Value for git's --date option
        """
        self.timeout = timeout
        self.all_branches = all_branches
        self.no_renames = no_renames
        self.date_format = date_format

    def _run(self, args: List[str], cwd: str) -> str:
        """
        Run a git command and return its stdout.

        Raises:
            GitCommandError: On timeout, missing git, or non-zero exit
        """
        logger.debug(f"Running {' '.join(args)} in {cwd}")
        try:
            result = subprocess.run(
                args,
                cwd=cwd,
                capture_output=True,
                text=True,
                encoding='utf-8',
                errors='replace',
                timeout=self.timeout
            )
        except subprocess.TimeoutExpired as e:
            raise GitCommandError(f"Git command timed out after {self.timeout}s: {' '.join(args)}") from e
        except OSError as e:
            raise GitCommandError(f"Could not run git: {e}") from e

        if result.returncode != 0:
            raise GitCommandError(
                f"Git command failed: {' '.join(args)}: {result.stderr.strip()}",
                returncode=result.returncode
            )
        return result.stdout

    def is_git_repo(self, path: Union[str, Path]) -> bool:
        """Check if path is a git repository."""
        return (Path(path) / ".git").exists()

    def log_command(
        self,
        since: Optional[Union[datetime, str]] = None,
        until: Optional[Union[datetime, str]] = None
    ) -> List[str]:
        """Build the git log command line."""
        cmd = ['git', 'log']
        if self.all_branches:
            cmd.append('--all')
        cmd += ['--numstat', f'--date={self.date_format}', f'--pretty=format:{PRETTY_FORMAT}']
        if self.no_renames:
            cmd.append('--no-renames')
        if since:
            cmd.append(f'--since={_format_time(since)}')
        if until:
            cmd.append(f'--until={_format_time(until)}')
        return cmd

    def numstat_log(
        self,
        path: Union[str, Path],
        since: Optional[Union[datetime, str]] = None,
        until: Optional[Union[datetime, str]] = None
    ) -> str:
        """
        Get the numstat log of a repository.

        Args:
            path: Path to git repository
            since: Only commits after this time
            until: Only commits before this time

        Returns:
            Log text ready for gitminer.parse

        Raises:
            GitCommandError: If path is not a repository or git fails
        """
        if not self.is_git_repo(path):
            raise GitCommandError(f"Not a git repository: {path}")
        return self._run(self.log_command(since, until), cwd=str(path))


def _format_time(value: Union[datetime, str]) -> str:
    if isinstance(value, datetime):
        return value.isoformat()
    return value
