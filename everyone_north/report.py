"""
Markdown report rendering.
Loads the per-author Jinja2 template and writes one rendered line per author.
"""

from pathlib import Path
from typing import Iterable, Optional, Union

import jinja2
from rich.console import Console

from .errors import ReportIOError, TemplateError, WriteError
from .models import AuthorRecord

console = Console()

TEMPLATES_DIR = Path(__file__).parent / 'templates'
DEFAULT_TEMPLATE = 'author.md.j2'
DEFAULT_OUTPUT = 'authors.md'


def load_template(template_path: Optional[Union[str, Path]] = None) -> jinja2.Template:
    """
    Load the per-author template.
    
    Args:
        template_path: Jinja2 file to use instead of the packaged template
        
    Raises:
        TemplateError: if the file is missing or does not compile
    """
    if template_path is None:
        search_dir, name = TEMPLATES_DIR, DEFAULT_TEMPLATE
    else:
        template_path = Path(template_path)
        search_dir, name = template_path.parent, template_path.name
    
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(search_dir)),
        undefined=jinja2.StrictUndefined,
        autoescape=False,
        keep_trailing_newline=False,
    )
    try:
        return env.get_template(name)
    except jinja2.TemplateNotFound as e:
        raise TemplateError(f"template not found: {search_dir / name}") from e
    except (jinja2.TemplateError, OSError, UnicodeDecodeError) as e:
        raise TemplateError(f"error parsing template {name}: {e}") from e


class ReportWriter:
    """Writes author records to a markdown file through a template."""
    
    def __init__(self, template: jinja2.Template, verbose: bool = False):
        self.template = template
        self.verbose = verbose
    
    def render(self, author: AuthorRecord) -> str:
        """Render one author fragment, without the trailing newline."""
        try:
            return self.template.render(
                name=author.name,
                commit_count=author.commit_count,
                repo_name=author.repo_name,
                search_url=author.search_url,
            )
        except Exception as e:
            raise WriteError(f"error executing template for {author.name}: {e}") from e
    
    def write(self, authors: Iterable[AuthorRecord], output_path: Union[str, Path] = DEFAULT_OUTPUT) -> int:
        """
        Overwrite ``output_path`` with one rendered line per author.
        
        Entries are written as they are rendered, so a failure part way
        leaves the earlier lines on disk.
        
        Returns:
            Number of entries written
        """
        output_path = Path(output_path)
        try:
            handle = open(output_path, 'w', encoding='utf-8')
        except OSError as e:
            raise ReportIOError(f"error creating file {output_path}: {e}") from e
        
        count = 0
        try:
            with handle:
                for author in authors:
                    handle.write(self.render(author))
                    handle.write('\n')
                    count += 1
        except OSError as e:
            raise WriteError(f"can't write entry to {output_path}: {e}") from e
        
        if self.verbose:
            console.print(f"[green]✅ Wrote {count} entries to {output_path}[/green]")
        return count
