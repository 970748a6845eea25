"""
CLI for keysweep.

Provides command-line interface for auditing directories for exposed
mnemonic phrases and private keys.
"""

from pathlib import Path
from typing import Optional

import typer
from dotenv import find_dotenv, load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from keysweep.core.config import KeysweepConfig, load_config
from keysweep.core.dictionary import EXPECTED_WORD_COUNT, load_dictionary
from keysweep.core.errors import DictionaryError
from keysweep.core.extraction import DocumentExtractor, check_ocr_availability
from keysweep.core.log_setup import setup_logging
from keysweep.services import ScanService, create_services

# Initialize Rich Console
console = Console()

app = typer.Typer(
    name="keysweep",
    help="keysweep - Audit local files for exposed wallet mnemonics and private keys",
    add_completion=False,
)


@app.callback()
def main() -> None:
    """Load .env from the working directory before any command runs."""
    load_dotenv(find_dotenv(usecwd=True))


def _load_config_or_exit(config_path: Optional[Path]) -> KeysweepConfig:
    try:
        return load_config(config_path)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


@app.command()
def scan(
    roots: Optional[list[Path]] = typer.Argument(
        None, help="Directories to scan (defaults to configured roots, then the home directory)"
    ),
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to a YAML or JSON configuration file"
    ),
    findings: Optional[Path] = typer.Option(
        None, "--findings", "-o", help="Findings report to append to"
    ),
    no_ocr: bool = typer.Option(False, "--no-ocr", help="Skip image files instead of running OCR"),
    no_priority: bool = typer.Option(
        False, "--no-priority", help="Do not scan Desktop/Documents/Downloads/Pictures first"
    ),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level"),
):
    """Scan directories for mnemonic phrases and private keys."""
    cfg = _load_config_or_exit(config_path)

    if findings is not None:
        cfg.output.findings_path = str(findings)
    if no_ocr:
        cfg.extraction.ocr_enabled = False
    if no_priority:
        cfg.scan.priority_folders = []
    if log_level:
        cfg.logging.level = log_level

    log_file = setup_logging(cfg.logging)

    context = create_services(cfg, log_file=log_file)
    service = ScanService(context)

    scan_roots = service.resolve_roots(roots or None)
    console.print(f"[bold blue]Scanning[/bold blue] {len(scan_roots)} root(s)...")
    with console.status("Scanning files...", spinner="dots"):
        summary = service.run(scan_roots)

    table = Table.grid(padding=1)
    table.add_column(style="bold")
    table.add_column()
    table.add_row("Roots:", escape("\n".join(summary.roots)) or "-")
    table.add_row("Files Visited:", str(summary.files_seen))
    table.add_row("Files Scanned:", str(summary.files_scanned))
    table.add_row("Files Skipped:", str(summary.files_skipped + summary.files_excluded))
    if summary.failed_files:
        table.add_row("Failed Files:", f"[red]{len(summary.failed_files)}[/red]")
    if summary.failed_roots:
        table.add_row("Failed Roots:", f"[red]{len(summary.failed_roots)}[/red]")
    findings_style = "bold red" if summary.findings else "green"
    table.add_row("Findings:", f"[{findings_style}]{summary.findings}[/{findings_style}]")
    table.add_row("Duration:", f"{summary.duration_seconds:.2f}s")
    table.add_row("Report:", escape(context.config.output.findings_path))

    console.print(
        Panel(
            table,
            title="[bold green]Scan Complete[/bold green]",
            border_style="green",
            expand=False,
        )
    )

    if summary.files_with_findings:
        console.print("[bold red]Files with findings:[/bold red]")
        for path in summary.files_with_findings:
            console.print(f"  {path}", markup=False, highlight=False, soft_wrap=True)


@app.command()
def check(
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to a YAML or JSON configuration file"
    ),
):
    """Check the dictionary, the OCR engine and the document converters."""
    cfg = _load_config_or_exit(config_path)
    all_ok = True

    table = Table(title="Environment Check")
    table.add_column("Component", style="bold")
    table.add_column("Status")
    table.add_column("Details")

    try:
        dictionary = load_dictionary(cfg.dictionary.wordlist_path, cfg.dictionary.language)
        if dictionary.is_complete:
            table.add_row("Dictionary", "[green]OK[/green]", f"{len(dictionary)} words ({dictionary.source})")
        else:
            table.add_row(
                "Dictionary",
                "[yellow]INCOMPLETE[/yellow]",
                f"{len(dictionary)} words, expected {EXPECTED_WORD_COUNT}",
            )
    except DictionaryError as e:
        table.add_row("Dictionary", "[red]MISSING[/red]", str(e))
        all_ok = False

    ocr = check_ocr_availability(cfg.extraction.ocr_language, cfg.extraction.tesseract_cmd)
    if ocr.available:
        table.add_row("OCR", "[green]OK[/green]", f"tesseract {ocr.version}, language {cfg.extraction.ocr_language}")
    else:
        table.add_row("OCR", "[yellow]UNAVAILABLE[/yellow]", ocr.reason or "")

    extractor = DocumentExtractor(cfg.extraction.document_commands)
    status_by_ext = extractor.converter_status()
    for ext, command in sorted(extractor.commands.items()):
        found = status_by_ext[ext]
        status = "[green]OK[/green]" if found else "[yellow]NOT FOUND[/yellow]"
        table.add_row(f"Converter {ext}", status, " ".join(command))

    console.print(table)
    if not all_ok:
        raise typer.Exit(1)


@app.command("config")
def show_config(
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to a YAML or JSON configuration file"
    ),
):
    """Print the effective configuration as YAML."""
    cfg = _load_config_or_exit(config_path)
    console.print(cfg.to_yaml(), markup=False, highlight=False, soft_wrap=True)


if __name__ == "__main__":
    app()
