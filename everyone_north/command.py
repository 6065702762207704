"""
External command execution.

Every git call in the pipeline goes through run_command so the rest of
the code sees one result shape: combined output plus exit code.
"""

import subprocess
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from .errors import ExecutionError
from .models import CommandResult

console = Console()


def run_command(args: List[str], cwd: Optional[str] = None, verbose: bool = False) -> CommandResult:
    """
    Run a command and capture its output.
    
    Output is decoded as UTF-8; bytes git passes through from
    legacy-encoded commits become U+FFFD.
    
    On a non-zero exit the returned output is stdout followed by stderr,
    so callers have the full diagnostic text. On success it is stdout only.
    
    Raises:
        ExecutionError: if the process could not be started at all
    """
    if verbose:
        console.print(f"[blue]$ {escape(' '.join(args))}[/blue]")
    
    try:
        proc = subprocess.run(
            args,
            cwd=cwd or None,
            stdin=subprocess.DEVNULL,
            capture_output=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except OSError as e:
        raise ExecutionError(args, None, "", reason=str(e)) from e
    
    output = proc.stdout
    if proc.returncode != 0:
        output += "\n" + proc.stderr
    return CommandResult(output=output, exit_code=proc.returncode)


def check_command(args: List[str], cwd: Optional[str] = None, verbose: bool = False) -> str:
    """Run a command and return its stdout, raising ExecutionError on non-zero exit."""
    result = run_command(args, cwd=cwd, verbose=verbose)
    if not result.ok:
        raise ExecutionError(args, result.exit_code, result.output)
    return result.output
