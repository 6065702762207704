"""
Exceptions raised by the everyonenorth pipeline.
"""

from typing import List, Optional


class EveryoneNorthError(Exception):
    """Base class for every failure the pipeline reports."""
    
    stage: Optional[str] = None
    
    def describe(self) -> str:
        """Return the user facing message, prefixed with the failed stage."""
        if self.stage:
            return f"Error {self.stage}: {self}"
        return str(self)


class ResolutionError(EveryoneNorthError):
    """The repository name or current branch could not be determined."""


class ExecutionError(EveryoneNorthError):
    """An external command exited non-zero or could not be started."""
    
    def __init__(self, command: List[str], exit_code: Optional[int], output: str, reason: str = ""):
        self.command = list(command)
        self.exit_code = exit_code
        self.output = output
        self.reason = reason
        super().__init__(self._format())
    
    def _format(self) -> str:
        message = f"command failed: {' '.join(self.command)}"
        if self.reason:
            message += f" ({self.reason})"
        message += f"\nExit code: {self.exit_code if self.exit_code is not None else 'n/a'}"
        if self.output.strip():
            message += f"\nOutput: {self.output.strip()}"
        return message


class ParseError(EveryoneNorthError):
    """Reserved for stricter summary parsing. The default parser skips bad lines."""


class ReportError(EveryoneNorthError):
    """Base class for failures while producing the markdown report."""


class TemplateError(ReportError):
    """The author template could not be loaded or compiled."""


class ReportIOError(ReportError, OSError):
    """The output file could not be created."""


class WriteError(ReportError):
    """Rendering or writing an entry failed after the file was opened."""
