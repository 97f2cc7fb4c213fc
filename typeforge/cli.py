"""TypeForge CLI - entity/relationship extraction from type descriptors.

Usage:
    typeforge module ./models.py --heuristics
    typeforge namespace myapp.models --strict --json
    typeforge schema ./schema.yaml --output graph.json
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from typeforge.app.config import ConfigError, TypeForgeConfig, set_config
from typeforge.core.models.entity import TYPE_KEY, VALUES_KEY
from typeforge.export.export_service import ExportService
from typeforge.extraction.orchestrator import ExtractionOrchestrator, ExtractionResult
from typeforge.providers.base import DescriptorProvider, DescriptorSourceError
from typeforge.providers.introspection import ModuleDescriptorProvider, NamespaceDescriptorProvider
from typeforge.providers.schema_file import SchemaFileDescriptorProvider
from typeforge.utils.logging import get_logger, setup_logging

# Load .env early so TYPEFORGE_* overrides apply
load_dotenv()

app = typer.Typer(
    name="typeforge",
    help="Extract entities and relationships from classes and enums.",
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)
logger = get_logger("cli")


# --- Shared option types ---
HeuristicsOpt = Annotated[
    Optional[bool],
    typer.Option("--heuristics/--no-heuristics", help="Infer references from foreign-key-like property names"),
]
SuffixOpt = Annotated[Optional[str], typer.Option("--fk-suffix", help="Foreign key property suffix")]
PrimaryKeyOpt = Annotated[Optional[str], typer.Option("--pk-name", help="Primary key property name")]
OutputOpt = Annotated[Optional[Path], typer.Option("--output", "-o", help="Write the result to a JSON file")]
JsonOpt = Annotated[bool, typer.Option("--json", help="Print JSON to stdout instead of tables")]
ConfigOpt = Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to a typeforge_config.json")]
VerboseOpt = Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")]


def _load_config(
    config_path: Path | None,
    heuristics: bool | None,
    fk_suffix: str | None,
    pk_name: str | None,
    verbose: bool,
) -> TypeForgeConfig:
    try:
        config = TypeForgeConfig.load(config_path)
    except ConfigError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if heuristics is not None:
        config.extraction.use_naming_heuristics = heuristics
    if fk_suffix is not None:
        config.extraction.foreign_key_suffix = fk_suffix
    if pk_name is not None:
        config.extraction.primary_key_name = pk_name
    if verbose:
        config.log_level = "DEBUG"

    setup_logging(
        level=config.log_level,
        log_dir=config.log_dir,
        console_output=True,
        file_output=config.log_dir is not None,
    )
    set_config(config)
    return config


def _attribute_summary(attributes: dict) -> str:
    if VALUES_KEY in attributes and isinstance(attributes[VALUES_KEY], list):
        return ", ".join(attributes[VALUES_KEY])
    return ", ".join(
        f"{name}: {attr.get(TYPE_KEY, '?')}" if isinstance(attr, dict) else name
        for name, attr in attributes.items()
    )


def _print_tables(result: ExtractionResult, title: str) -> None:
    entity_table = Table(title=f"Entities ({len(result.entities)})", border_style="blue")
    entity_table.add_column("Name", style="bold")
    entity_table.add_column("Kind")
    entity_table.add_column("Attributes")
    for entity in result.entities:
        entity_table.add_row(entity.name, entity.kind.value, _attribute_summary(entity.attributes))

    rel_table = Table(title=f"Relationships ({len(result.relationships)})", border_style="green")
    rel_table.add_column("From", style="bold")
    rel_table.add_column("Key", style="cyan")
    rel_table.add_column("To", style="bold")
    for rel in result.relationships:
        rel_table.add_row(rel.from_entity, rel.key.value, rel.to_entity)

    console.print(Panel(title, title="TypeForge", border_style="blue"))
    console.print(entity_table)
    console.print(rel_table)


def _run(
    provider: DescriptorProvider,
    title: str,
    config: TypeForgeConfig,
    output: Path | None,
    as_json: bool,
) -> None:
    try:
        descriptors = provider.get_descriptors()
    except DescriptorSourceError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    result = ExtractionOrchestrator(config.extraction.to_options()).run(descriptors)
    exporter = ExportService()

    if output is not None:
        exporter.export_json(result, output)

    if as_json:
        typer.echo(exporter.to_json(result))
        return

    _print_tables(result, title)
    if output is not None:
        console.print(f"[green]Saved:[/green] {output}")


@app.command("module")
def analyze_module(
    path: Annotated[Path, typer.Argument(help="Python module file or package directory")],
    heuristics: HeuristicsOpt = None,
    fk_suffix: SuffixOpt = None,
    pk_name: PrimaryKeyOpt = None,
    output: OutputOpt = None,
    as_json: JsonOpt = False,
    config_path: ConfigOpt = None,
    verbose: VerboseOpt = False,
) -> None:
    """Analyze the classes defined in a Python module loaded from disk."""
    config = _load_config(config_path, heuristics, fk_suffix, pk_name, verbose)
    _run(ModuleDescriptorProvider(path), f"[bold]Module:[/bold] {path}", config, output, as_json)


@app.command("namespace")
def analyze_namespace(
    namespace: Annotated[str, typer.Argument(help="Dotted module namespace, e.g. myapp.models")],
    strict: Annotated[bool, typer.Option("--strict", help="Fail when the namespace yields no types")] = False,
    submodules: Annotated[bool, typer.Option("--submodules", help="Include sub-namespaces")] = False,
    heuristics: HeuristicsOpt = None,
    fk_suffix: SuffixOpt = None,
    pk_name: PrimaryKeyOpt = None,
    output: OutputOpt = None,
    as_json: JsonOpt = False,
    config_path: ConfigOpt = None,
    verbose: VerboseOpt = False,
) -> None:
    """Analyze the classes of an importable module namespace."""
    config = _load_config(config_path, heuristics, fk_suffix, pk_name, verbose)
    provider = NamespaceDescriptorProvider(
        namespace,
        import_missing=True,
        strict=strict,
        include_submodules=submodules,
    )
    _run(provider, f"[bold]Namespace:[/bold] {namespace}", config, output, as_json)


@app.command("schema")
def analyze_schema(
    path: Annotated[Path, typer.Argument(help="YAML or JSON schema file")],
    heuristics: HeuristicsOpt = None,
    fk_suffix: SuffixOpt = None,
    pk_name: PrimaryKeyOpt = None,
    output: OutputOpt = None,
    as_json: JsonOpt = False,
    config_path: ConfigOpt = None,
    verbose: VerboseOpt = False,
) -> None:
    """Analyze the type descriptors of a static schema file."""
    config = _load_config(config_path, heuristics, fk_suffix, pk_name, verbose)
    _run(SchemaFileDescriptorProvider(path), f"[bold]Schema:[/bold] {path}", config, output, as_json)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
