#!/usr/bin/env python3
"""
Main CLI entry point for the everyonenorth tool.
"""

import sys

import click
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .errors import EveryoneNorthError
from .pipeline import generate_authors_report
from .report import DEFAULT_OUTPUT

# Load environment variables from .env file
load_dotenv()

console = Console()


def _show_authors(authors):
    table = Table(title="Authors")
    table.add_column("Commits", style="yellow", justify="right")
    table.add_column("Author", style="green")
    table.add_column("Search URL", style="blue", overflow="fold")

    for author in authors:
        table.add_row(author.commit_count, author.name, author.search_url)

    console.print(table)


@click.command()
@click.argument('path', default='.', type=click.Path(exists=True, file_okay=False))
@click.option('--output', '-o', default=DEFAULT_OUTPUT, envvar='EVERYONENORTH_OUTPUT', show_default=True,
              type=click.Path(dir_okay=False), help='Markdown file to write (overwritten)')
@click.option('--template', '-t', default=None, envvar='EVERYONENORTH_TEMPLATE',
              type=click.Path(exists=True, dir_okay=False), help='Jinja2 template for one author line')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
@click.version_option(package_name='everyonenorth')
def cli(path, output, template, verbose):
    """
    List the authors of a git repository with image search links.

    PATH: git working tree to inspect (default: current directory)

    Counts commits per author on the checked-out branch and writes one
    markdown line per author to OUTPUT.

    Examples:
      everyonenorth
      everyonenorth ../widget -o widget-authors.md
    """
    if verbose:
        console.print(Panel(
            f"Repository path: {path}\n"
            f"Output: {output}\n"
            f"Template: {template or 'built-in'}",
            title="Configuration",
            border_style="blue"
        ))

    try:
        authors = generate_authors_report(
            cwd=path,
            output_path=output,
            template_path=template,
            verbose=verbose
        )
    except KeyboardInterrupt:
        console.print("\n[yellow]❌ Operation cancelled by user[/yellow]")
        sys.exit(0)
    except EveryoneNorthError as e:
        console.print(Panel(
            f"[red]{escape(e.describe())}[/red]",
            title="Error",
            border_style="red"
        ))
        if verbose:
            console.print_exception()
        sys.exit(1)
    except Exception as e:
        console.print(Panel(
            f"[red]Unexpected error:[/red] {escape(str(e))}",
            title="Error",
            border_style="red"
        ))
        if verbose:
            console.print_exception()
        sys.exit(1)

    if verbose:
        _show_authors(authors)

    console.print("[green]Markdown file generated successfully.[/green]")


if __name__ == "__main__":
    cli()
