"""
Repository identity and branch resolution.
Reads the origin remote and the checked-out branch of a local git repository.
"""

import re
from typing import List
from urllib.parse import urlparse

from rich.console import Console
from rich.markup import escape

from .command import run_command
from .errors import ExecutionError, ResolutionError

console = Console()


# scp-like SSH remotes, e.g. "git@github.com:owner/repo.git"
SSH_URL_PATTERN = re.compile(r'^[^/@:\s]+@[^/:\s]+:')


def is_ssh_url(repo_url: str) -> bool:
    """Return True for scp-like remotes (user@host:path) that have no URL scheme."""
    return '://' not in repo_url and bool(SSH_URL_PATTERN.match(repo_url))


def extract_repo_name(repo_path: str) -> str:
    """Return the last path segment with any ".git" suffix removed."""
    last_segment = repo_path.rstrip('/').split('/')[-1]
    if last_segment.endswith('.git'):
        last_segment = last_segment[:-len('.git')]
    return last_segment


def repo_name_from_url(repo_url: str) -> str:
    """
    Derive the short repository name from a remote URL.
    
    Supports:
    - SSH remotes: git@github.com:owner/repo.git
    - Standard URLs: https://github.com/owner/repo.git, ssh://host/owner/repo
    
    Raises:
        ResolutionError: if the URL cannot be parsed or yields no name
    """
    repo_url = repo_url.strip()
    if not repo_url:
        raise ResolutionError("remote URL is empty")
    
    if is_ssh_url(repo_url):
        repo_path = repo_url.split(':', 1)[1]
    else:
        try:
            repo_path = urlparse(repo_url).path
        except ValueError as e:
            raise ResolutionError(f"failed to parse repository URL {repo_url!r}: {e}") from e
    
    repo_name = extract_repo_name(repo_path)
    if not repo_name:
        raise ResolutionError(f"no repository name in remote URL: {repo_url}")
    return repo_name


class RepositoryResolver:
    """Resolves the name and current branch of the repository at ``cwd``."""
    
    def __init__(self, cwd: str = '.', verbose: bool = False):
        self.cwd = cwd
        self.verbose = verbose
    
    def _git(self, *args: str) -> List[str]:
        return ['git', '-C', self.cwd, *args]
    
    def get_repo_url(self) -> str:
        """Return the configured URL of the origin remote."""
        command = self._git('config', '--get', 'remote.origin.url')
        try:
            result = run_command(command, verbose=self.verbose)
        except ExecutionError as e:
            raise ResolutionError(f"failed to get repository URL: {e}") from e
        
        if not result.ok:
            if result.exit_code == 1 and not result.output.strip():
                # git config exits 1 with no output when the key is unset
                raise ResolutionError("no URL configured for remote 'origin'")
            error = ExecutionError(command, result.exit_code, result.output)
            raise ResolutionError(f"failed to get repository URL: {error}") from error
        
        return result.output.strip()
    
    def get_repo_name(self) -> str:
        """Return the short repository name taken from the remote URL."""
        repo_url = self.get_repo_url()
        repo_name = repo_name_from_url(repo_url)
        
        if self.verbose:
            kind = 'SSH' if is_ssh_url(repo_url) else 'URL'
            console.print(f"[green]✅ Repository '{repo_name}' ({kind} remote {escape(repo_url)})[/green]")
        
        return repo_name
    
    def get_current_branch(self) -> str:
        """
        Return the name of the checked-out branch.
        
        A detached HEAD is reported literally as "HEAD".
        """
        command = self._git('rev-parse', '--abbrev-ref', 'HEAD')
        try:
            result = run_command(command, verbose=self.verbose)
        except ExecutionError as e:
            raise ResolutionError(f"failed to get current branch: {e}") from e
        
        if not result.ok:
            error = ExecutionError(command, result.exit_code, result.output)
            raise ResolutionError(f"failed to get current branch: {error}") from error
        
        branch = result.output.strip()
        if self.verbose:
            console.print(f"[green]✅ Current branch: {escape(branch)}[/green]")
        return branch
