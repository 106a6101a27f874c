# scaffold/cli.py
import logging

import typer

from model_structure.loader import InvalidStructureError, load_structure
from model_structure.meta_models import ModelStructure
from scaffold.adapters import (
    DryRunFileWriter,
    LocalFileWriter,
    SqlAlchemySchemaInspector,
    StaticSchemaInspector,
)
from scaffold.generator import GeneratorConfig, SchemaGenerator
from scaffold.settings import create_db_engine, get_settings, sqlite_database_path

app = typer.Typer(help="Generate Laravel models, migrations and pivot models from model_structure.json")

logger = logging.getLogger("scaffold.cli")

# ---------------------------
# Core utilities
# ---------------------------
@app.callback()
def _configure_logging():
    settings = get_settings()
    logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL, logging.INFO))

def _require_valid_structure() -> ModelStructure:
    path = get_settings().STRUCTURE_PATH
    try:
        return load_structure(str(path))
    except InvalidStructureError as e:
        typer.echo(f"❌ {e}")
        raise typer.Exit(code=1)

def _schema_inspector(settings, dry_run: bool, no_db: bool):
    if no_db:
        return StaticSchemaInspector()
    if dry_run:
        db_file = sqlite_database_path(settings)
        if db_file is not None and not db_file.exists():
            logger.info("SQLite database %s does not exist; planning against an empty schema", db_file)
            return StaticSchemaInspector()
    return SqlAlchemySchemaInspector(create_db_engine(settings, read_only=dry_run))

# ---------------------------
# Commands
# ---------------------------
@app.command(help="Validate model_structure.json without generating anything.")
def validate():
    structure = _require_valid_structure()
    typer.echo(
        f"✅ {get_settings().STRUCTURE_PATH} is valid "
        f"({len(structure.models)} models, {len(structure.relations.belongs_to_many)} many-to-many relations)."
    )

@app.command("from-json", help="Generate models, migrations, and pivot models from model_structure.json.")
def from_json(
    dry_run: bool = typer.Option(False, "--dry-run", help="Print planned writes and deletes; touch no files."),
    no_db: bool = typer.Option(False, "--no-db", help="Do not connect to the database; treat the schema as empty."),
):
    settings = get_settings()
    structure = _require_valid_structure()

    inspector = _schema_inspector(settings, dry_run, no_db)
    writer = DryRunFileWriter() if dry_run else LocalFileWriter()

    generator = SchemaGenerator(
        inspector=inspector,
        writer=writer,
        config=GeneratorConfig.from_settings(settings),
        echo=typer.echo,
    )
    report = generator.run(structure)

    if dry_run:
        typer.echo("\n=== DRY RUN PLAN ===")
        for op in writer.operations:
            typer.echo(f"  {op.action:<6} {op.path}")
        typer.echo("No files were changed.")
        return

    typer.echo("")
    typer.echo(report.format_summary())
    typer.echo("✅ All files generated successfully.")

if __name__ == "__main__":
    app()
