"""
Service layer for gitminer.

Contains the logic that coordinates the parser with infrastructure:
- LogService: Loading logs from files or repositories and analysing them

Services are the primary API for commands to use.
"""

from .log_service import LogService

__all__ = [
    'LogService',
]
