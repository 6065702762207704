"""
Shared data models for the everyonenorth tool.
"""

from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class AuthorRecord:
    """One author line from the shortlog summary."""
    name: str
    commit_count: str  # kept verbatim from git output
    repo_name: Optional[str] = None
    search_url: Optional[str] = None
    
    def with_link(self, repo_name: str, search_url: str) -> "AuthorRecord":
        """Return a copy with the repository name and search URL filled in."""
        return replace(self, repo_name=repo_name, search_url=search_url)


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one external command invocation."""
    output: str
    exit_code: int
    
    @property
    def ok(self) -> bool:
        return self.exit_code == 0
