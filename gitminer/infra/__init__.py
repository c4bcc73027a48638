"""
Infrastructure layer for gitminer.

Contains abstractions for external systems:
- GitClient: Git command execution

These provide clean interfaces that can be mocked for testing.
"""

from .git_client import GitClient, PRETTY_FORMAT

__all__ = [
    'GitClient',
    'PRETTY_FORMAT',
]
