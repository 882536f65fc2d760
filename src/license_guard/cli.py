"""Command-line interface for license_guard.

Provides the main entry point and subcommands for checking a Go module's
dependencies for restrictive license imports and reporting their licenses.
"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn

from license_guard.checker import DEFAULT_RESTRICTIVE_MARKER, CompatibilityChecker
from license_guard.errors import DependencyListError
from license_guard.models import CheckResult, PackageRegistry
from license_guard.reporters import MarkdownReporter, TextReporter
from license_guard.resolvers import WaterfallResolver
from license_guard.scanners import get_scanner

app = typer.Typer(
    name="license-guard",
    help="Check Go module dependencies for restrictive license imports.",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)

# Exit code when the dependency list cannot be built
EXIT_ERROR = 2

# Configure logging
logging.basicConfig(
    level=logging.WARNING,
    format="%(levelname)s: %(message)s",
)
logger = logging.getLogger("license_guard")

ModuleDirOption = Annotated[
    Optional[Path],
    typer.Option(
        "--dir",
        "-C",
        help="Go module directory to run 'go list' in (default: current directory)",
        exists=True,
        file_okay=False,
    ),
]
InputOption = Annotated[
    Optional[Path],
    typer.Option(
        "--input",
        "-i",
        help="Read saved 'go list -deps -json' output instead of running go",
        exists=True,
        dir_okay=False,
        readable=True,
    ),
]
MarkerOption = Annotated[
    str,
    typer.Option(
        "--marker",
        "-m",
        help="Substring identifying restrictive license identifiers",
    ),
]
ReportUnresolvedOption = Annotated[
    bool,
    typer.Option(
        "--report-unresolved",
        help="List packages whose license could not be determined",
    ),
]
VerboseOption = Annotated[
    bool,
    typer.Option(
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
]


def _setup_logging(verbose: bool) -> None:
    """Configure logging level based on verbosity flag."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.getLogger("license_guard").setLevel(level)


def _load_registry(
    input_path: Optional[Path],
    module_dir: Optional[Path],
    verbose: bool,
) -> PackageRegistry:
    """Scan the dependency list and index it by import path.

    Raises:
        DependencyListError: If the dependency list cannot be produced.
    """
    scanner = get_scanner(input_path=input_path, module_dir=module_dir)
    if verbose:
        console.print(f"[dim]Using scanner: {scanner.source_name}[/dim]")

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=err_console,
        transient=True,
    ) as progress:
        progress.add_task("Listing dependencies...", total=None)
        packages = scanner.scan()

    return PackageRegistry.from_packages(packages)


def _print_unresolved(result: CheckResult) -> None:
    """Print packages whose license could not be determined."""
    if not result.unresolved:
        return
    err_console.print(f"[yellow]Unknown licenses ({len(result.unresolved)}):[/yellow]")
    for item in result.unresolved:
        err_console.print(f"  - {item.key}", markup=False, highlight=False)


@app.command()
def check(
    module_dir: ModuleDirOption = None,
    input_path: InputOption = None,
    marker: MarkerOption = DEFAULT_RESTRICTIVE_MARKER,
    report_unresolved: ReportUnresolvedOption = False,
    verbose: VerboseOption = False,
) -> None:
    """Check direct imports for restrictively licensed packages.

    Prints one paragraph per package that imports a package whose license
    contains the restrictive marker without carrying that license itself.

    Exit codes:
        0 - No violations
        1 - Violations found
        2 - The dependency list could not be built
    """
    _setup_logging(verbose)

    try:
        registry = _load_registry(input_path, module_dir, verbose)
    except DependencyListError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=EXIT_ERROR)

    resolver = WaterfallResolver()
    checker = CompatibilityChecker(
        resolver,
        restrictive_marker=marker,
        treat_unresolved_as_non_restrictive=not report_unresolved,
    )
    result = checker.check(registry)

    output = TextReporter().render(registry, result)
    if output:
        console.print(output, end="", markup=False, highlight=False, soft_wrap=True)

    if report_unresolved:
        _print_unresolved(result)

    if verbose:
        info = resolver.cache.info()
        console.print(
            f"[dim]Checked {len(registry)} packages, "
            f"scanned {info['count']} license files[/dim]"
        )

    raise typer.Exit(code=1 if result.count else 0)


@app.command()
def report(
    module_dir: ModuleDirOption = None,
    input_path: InputOption = None,
    output: Annotated[
        Path,
        typer.Option(
            "--output",
            "-o",
            help="Output file path",
        ),
    ] = Path("licenses.md"),
    template: Annotated[
        Optional[Path],
        typer.Option(
            "--template",
            "-t",
            help="Custom Jinja2 template file",
            exists=True,
            readable=True,
        ),
    ] = None,
    marker: MarkerOption = DEFAULT_RESTRICTIVE_MARKER,
    report_unresolved: ReportUnresolvedOption = False,
    verbose: VerboseOption = False,
) -> None:
    """Generate a Markdown inventory of dependency licenses.

    Resolves the license of every package, runs the compatibility check
    and writes both to a Markdown document. With --report-unresolved the
    document also lists packages whose license could not be determined.
    """
    _setup_logging(verbose)

    try:
        registry = _load_registry(input_path, module_dir, verbose)
    except DependencyListError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=EXIT_ERROR)

    if not registry:
        console.print("[yellow]No packages found[/yellow]")
        raise typer.Exit(code=0)

    console.print(f"Found [bold]{len(registry)}[/bold] packages")

    resolver = WaterfallResolver()
    licenses = resolver.resolve_all(registry)
    checker = CompatibilityChecker(
        resolver,
        restrictive_marker=marker,
        treat_unresolved_as_non_restrictive=not report_unresolved,
    )
    result = checker.check(registry)

    resolved_count = sum(1 for license_id in licenses.values() if license_id)
    console.print(
        f"Resolved licenses for [bold]{resolved_count}[/bold]/{len(registry)} packages"
    )
    if report_unresolved:
        _print_unresolved(result)

    reporter = MarkdownReporter(template_path=template)
    try:
        reporter.write(registry, result, output, licenses=licenses)
    except OSError as e:
        err_console.print(f"[red]Error writing output:[/red] {e}")
        raise typer.Exit(code=EXIT_ERROR)

    console.print(f"[green]Generated:[/green] {output}")
    raise typer.Exit(code=0)


if __name__ == "__main__":
    app()
