"""
Commit history summary via ``git shortlog``.
Runs the summary command for one branch and parses its per-author lines.
"""

from typing import List

from rich.console import Console
from rich.markup import escape

from .command import check_command
from .models import AuthorRecord

console = Console()


class ShortlogSummarizer:
    """Produces the per-author commit count summary for a branch."""
    
    def __init__(self, cwd: str = '.', verbose: bool = False):
        self.cwd = cwd
        self.verbose = verbose
    
    def build_command(self, branch: str) -> List[str]:
        # Empty core.excludesFile keeps local ignore rules out of the summary
        return [
            'git', '-C', self.cwd,
            '-c', 'core.excludesFile=',
            'shortlog', '--summary', '--numbered',
            branch,
        ]
    
    def summarize(self, branch: str) -> str:
        """
        Return the raw shortlog output for ``branch``.
        
        Raises:
            ExecutionError: if git exits non-zero or cannot be started
        """
        if self.verbose:
            console.print(f"[blue]📋 Summarizing commits on {escape(branch)}[/blue]")
        return check_command(self.build_command(branch), verbose=self.verbose)


def parse_shortlog(output: str) -> List[AuthorRecord]:
    """
    Parse ``<count>\\t<name>`` lines into partial author records.
    
    Lines with fewer than two whitespace separated tokens are skipped.
    Multi-word names are rejoined with single spaces. Order is preserved.
    """
    authors = []
    for line in output.splitlines():
        fields = line.split()
        if len(fields) < 2:
            continue
        authors.append(AuthorRecord(name=' '.join(fields[1:]), commit_count=fields[0]))
    return authors
