"""
The authors report pipeline.

Resolve repository and branch, summarize history, parse, attach links,
write the report. Each step aborts the run on failure; the raised
error is tagged with the step that failed.
"""

from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional, Union

from .errors import EveryoneNorthError
from .links import generate_search_urls
from .models import AuthorRecord
from .report import DEFAULT_OUTPUT, ReportWriter, load_template
from .repository import RepositoryResolver
from .shortlog import ShortlogSummarizer, parse_shortlog


@contextmanager
def stage(name: str) -> Iterator[None]:
    """Tag any pipeline error raised inside the block with ``name``."""
    try:
        yield
    except EveryoneNorthError as e:
        if e.stage is None:
            e.stage = name
        raise


def generate_authors_report(
    cwd: str = '.',
    output_path: Union[str, Path] = DEFAULT_OUTPUT,
    template_path: Optional[Union[str, Path]] = None,
    verbose: bool = False,
) -> List[AuthorRecord]:
    """
    Write the authors markdown file for the repository at ``cwd``.
    
    Returns:
        The records written, in shortlog order
        
    Raises:
        EveryoneNorthError: on the first failing step, with ``stage`` set
    """
    resolver = RepositoryResolver(cwd, verbose=verbose)
    summarizer = ShortlogSummarizer(cwd, verbose=verbose)
    
    with stage("loading template"):
        template = load_template(template_path)
    
    with stage("getting repository name"):
        repo_name = resolver.get_repo_name()
    
    with stage("getting current branch"):
        branch = resolver.get_current_branch()
    
    with stage("executing git shortlog"):
        output = summarizer.summarize(branch)
    
    with stage("parsing log output"):
        authors = parse_shortlog(output)
    
    authors = generate_search_urls(authors, repo_name)
    
    with stage("writing markdown file"):
        ReportWriter(template, verbose=verbose).write(authors, output_path)
    
    return authors
