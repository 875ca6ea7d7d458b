"""
docmerge CLI - Component Documentation Merge Tool

A command-line tool for consolidating component library documentation by:
1. Optionally cloning the component library repository
2. Finding each component's documentation file
3. Inlining every referenced demo source into the documentation
4. Writing one Markdown file per component plus an index
"""

import logging
from pathlib import Path
from typing import List, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from docmerge import __version__
from docmerge.config import TEMP_DIR_NAME, load_settings
from docmerge.exceptions import DocMergeError
from docmerge.pipeline import DocumentMergePipeline, has_components_dir
from docmerge.repository import RepositoryFetcher
from docmerge.schemas import MergeReport

app = typer.Typer(
    name="docmerge",
    help="Merge component documentation with its demo sources",
    add_completion=False,
)

console = Console()


class TyperPrompter:
    """Ask for overwrite confirmation on the terminal."""

    def confirm(self, message: str) -> bool:
        return typer.confirm(message, default=False)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _parse_doc_paths(path: Optional[str]) -> List[str]:
    if not path:
        return []
    return [p.strip() for p in path.split(",") if p.strip()]


def _print_missing_components_hint() -> None:
    console.print("[yellow]⚠️  No components directory found in the project directory![/yellow]")
    console.print("[yellow]This may not be a component library project.[/yellow]")
    console.print("\nFetch the code from a remote repository instead:")
    console.print("[green]  docmerge merge -d                # default GitHub repository[/green]")
    console.print("[green]  docmerge merge -d -r <repo-url>  # specific repository[/green]")
    console.print("\nOr pass documentation paths explicitly:")
    console.print(
        "[green]  docmerge merge -p components/button/index.zh-CN.md,components/input/index.zh-CN.md[/green]"
    )


def _print_report(report: MergeReport) -> None:
    summary_table = Table(show_header=True, header_style="bold cyan")
    summary_table.add_column("Metric")
    summary_table.add_column("Value", justify="right")

    summary_table.add_row("Documents found", str(report.documents_found))
    summary_table.add_row("Components written", str(len(report.written)))
    summary_table.add_row("Documents skipped", str(len(report.skipped)))
    summary_table.add_row("Unresolved demos", str(report.unresolved_demos))
    summary_table.add_row("Name collisions", str(len(report.collisions)))

    console.print(summary_table)

    if report.index_path:
        console.print(f"\n📄 Index: [cyan]{report.index_path}[/cyan]")
    console.print(f"📁 Output: [cyan]{report.output_dir}[/cyan]")


@app.command()
def merge(
    path: Optional[str] = typer.Option(
        None,
        "--path",
        "-p",
        help="Comma-separated documentation paths (default: scan the project)",
    ),
    project: Optional[str] = typer.Option(
        None,
        "--project",
        "-P",
        help="Project root containing the documentation (default: current directory)",
    ),
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output directory (default: ./merged-docs)",
    ),
    yes: bool = typer.Option(False, "--yes", "-y", help="Overwrite the output directory without asking"),
    download: bool = typer.Option(False, "--download", "-d", help="Clone the repository before merging"),
    branch: Optional[str] = typer.Option(None, "--branch", "-b", help="Branch to clone (default: master)"),
    keep_temp: bool = typer.Option(False, "--keep-temp", "-k", help="Keep the cloned repository"),
    repo: Optional[str] = typer.Option(
        None,
        "--repo",
        "-r",
        help="Repository URL (default: https://github.com/ant-design/ant-design)",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
):
    """
    Merge component documentation with its demo sources.

    Each component's documentation is written to
    <output>/components/<ComponentName>.md with every <code src="..."> demo
    reference replaced by the demo source; <output>/index.md links them all.

    Example (local checkout):
        cd ant-design && docmerge merge -y

    Example (clone first):
        docmerge merge -d -r https://github.com/ant-design/ant-design-mobile -b master
    """
    try:
        settings = load_settings()
    except ValidationError as e:
        console.print(f"[red]❌ Invalid DOCMERGE_* setting: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    _configure_logging("DEBUG" if verbose else settings.log_level)

    repo_url = repo or settings.repo_url
    # Accept "--repo=<url>" written as "-r=<url>"
    if repo_url.startswith("="):
        repo_url = repo_url[1:]
    branch = branch or settings.branch

    current_dir = Path.cwd()
    project_path = Path(project).resolve() if project else current_dir
    output_dir = Path(output or settings.output_dir)
    if not output_dir.is_absolute():
        output_dir = current_dir / output_dir

    doc_paths = _parse_doc_paths(path)

    if doc_paths and not download:
        for doc_path in doc_paths:
            full_path = Path(doc_path) if Path(doc_path).is_absolute() else project_path / doc_path
            if not full_path.exists():
                console.print(f"[red]❌ Documentation path does not exist: {full_path}[/red]")
                raise typer.Exit(1)
        console.print(f"[green]Using {len(doc_paths)} documentation path(s)[/green]")
    elif not doc_paths and not download and not has_components_dir(project_path):
        _print_missing_components_hint()
        return

    console.print(Panel.fit(
        "[bold cyan]Component Documentation Merge[/bold cyan]\n\n"
        f"Repository: [yellow]{repo_url}[/yellow]\n"
        f"Branch: [yellow]{branch if download else '-'}[/yellow]\n"
        f"Project: [yellow]{project_path if not download else current_dir / TEMP_DIR_NAME}[/yellow]\n"
        f"Output: [yellow]{output_dir}[/yellow]",
        border_style="cyan"
    ))

    fetcher: Optional[RepositoryFetcher] = None
    try:
        if download:
            fetcher = RepositoryFetcher(current_dir / TEMP_DIR_NAME)
            with console.status(f"[bold green]Cloning {repo_url}..."):
                project_path = fetcher.fetch(repo_url, branch)
            console.print(f"[green]✅ Repository downloaded to: {project_path}[/green]")

        pipeline = DocumentMergePipeline(
            project_path=project_path,
            output_dir=output_dir,
            repo_url=repo_url,
            doc_paths=doc_paths or None,
            auto_confirm=yes,
            prompter=TyperPrompter(),
        )
        report = pipeline.run()

        if report.cancelled:
            console.print("[blue]Operation cancelled[/blue]")
            return

        if not report.documents_found:
            console.print("[yellow]⚠️  No component documentation found[/yellow]")
            return

        console.print("\n[bold green]✅ Merge Complete![/bold green]\n")
        _print_report(report)

    except KeyboardInterrupt:
        console.print("\n[yellow]⚠️  Merge interrupted by user[/yellow]")
        raise typer.Exit(1)
    except DocMergeError as e:
        console.print(f"\n[red]❌ Error: {e}[/red]")
        if download:
            console.print("[yellow]Check your network connection, try -b main, "
                          "or clone manually and run docmerge inside the checkout.[/yellow]")
        raise typer.Exit(1)
    finally:
        if fetcher is not None and not keep_temp:
            fetcher.cleanup()


@app.command()
def version():
    """Show the version of docmerge."""
    console.print(f"[bold cyan]docmerge[/bold cyan] v{__version__}")
    console.print("Component Documentation Merge Tool")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
