# scaffold/generator.py
from __future__ import annotations
import logging
import random
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from pathlib import Path
from typing import Callable, List, Optional

from model_structure.meta_models import ModelDefinition, ModelStructure, Relations
from scaffold.documents import ClassDocument, MigrationDocument
from scaffold.migration_emitter import plan_migration
from scaffold.model_emitter import DEFAULT_NAMESPACE, build_model_class
from scaffold.naming import table_name
from scaffold.pivot_emitter import PivotIdentity, pivot_migration, pivot_model, unique_pivots
from scaffold.ports import FileWriter, SchemaInspector
from scaffold.render import render_class, render_migration
from scaffold.settings import Settings, WritePolicy

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y_%m_%d_%H%M%S"
PIVOT_JITTER_SECONDS = (1, 60)

@dataclass
class GeneratorConfig:
    models_dir: Path
    migrations_dir: Path
    namespace: str = DEFAULT_NAMESPACE
    model_policy: WritePolicy = WritePolicy.OVERWRITE
    pivot_model_policy: WritePolicy = WritePolicy.SKIP_EXISTING

    @classmethod
    def from_settings(cls, settings: Settings) -> "GeneratorConfig":
        return cls(
            models_dir=settings.MODELS_DIR,
            migrations_dir=settings.MIGRATIONS_DIR,
            namespace=settings.MODELS_NAMESPACE,
            model_policy=settings.MODEL_WRITE_POLICY,
            pivot_model_policy=settings.PIVOT_MODEL_WRITE_POLICY,
        )

@dataclass
class GenerationReport:
    models: List[Path] = field(default_factory=list)
    migrations: List[Path] = field(default_factory=list)
    pivot_migrations: List[Path] = field(default_factory=list)
    pivot_models: List[Path] = field(default_factory=list)
    deleted: List[Path] = field(default_factory=list)
    skipped: List[Path] = field(default_factory=list)
    up_to_date: List[str] = field(default_factory=list)

    @property
    def written(self) -> List[Path]:
        return self.models + self.migrations + self.pivot_migrations + self.pivot_models

    def format_summary(self) -> str:
        lines: List[str] = []
        sections = [
            ("Models", self.models),
            ("Migrations", self.migrations),
            ("Pivot migrations", self.pivot_migrations),
            ("Pivot models", self.pivot_models),
            ("Deleted", self.deleted),
            ("Skipped (already exist)", self.skipped),
        ]
        for title, paths in sections:
            if paths:
                lines.append(f"{title}:")
                lines.extend(f"  - {p}" for p in paths)
        if self.up_to_date:
            lines.append("Tables already up to date: " + ", ".join(self.up_to_date))
        return "\n".join(lines) if lines else "Nothing generated."

class SchemaGenerator:
    """
    Runs the whole pipeline for one model structure:
      per model: class file + create/add migration,
      then pivot migrations, then pivot models.
    Every write is independent; a failure partway leaves earlier files in place.
    """

    def __init__(
        self,
        inspector: SchemaInspector,
        writer: FileWriter,
        config: GeneratorConfig,
        clock: Callable[[], datetime] = datetime.now,
        rng: Optional[random.Random] = None,
        echo: Optional[Callable[[str], None]] = None,
    ):
        self.inspector = inspector
        self.writer = writer
        self.config = config
        self.clock = clock
        self.rng = rng or random.Random()
        self.echo = echo or (lambda message: None)

    # ---- public entry --------------------------------------------------------

    def run(self, structure: ModelStructure) -> GenerationReport:
        report = GenerationReport()
        started = self.clock()
        sequence = 0

        for model in structure.models:
            self.generate_model(model, structure.relations, report)

            migration = plan_migration(model, self.inspector)
            if migration is None:
                report.up_to_date.append(table_name(model.name))
                continue
            # one second apart so migrate runs them in emission order
            stamp = started + timedelta(seconds=sequence)
            sequence += 1
            report.migrations.append(self._write_migration(migration, stamp, report))

        pivots = unique_pivots(structure.relations.belongs_to_many)
        pivot_base = started + timedelta(seconds=max(sequence - 1, 0))
        for pivot in pivots:
            self.generate_pivot_table(pivot, pivot_base, report)
        for pivot in pivots:
            self.generate_pivot_model(pivot, report)

        logger.info(
            "Generation finished: %d written, %d deleted, %d skipped",
            len(report.written), len(report.deleted), len(report.skipped),
        )
        return report

    # ---- steps -----------------------------------------------------------------

    def generate_model(self, model: ModelDefinition, relations: Relations, report: GenerationReport) -> None:
        document = build_model_class(model, relations, namespace=self.config.namespace)
        path = self._write_class(document, self.config.model_policy, report)
        if path is not None:
            report.models.append(path)

    def generate_pivot_table(self, pivot: PivotIdentity, base: datetime, report: GenerationReport) -> None:
        self._remove_migrations(pivot.migration_name, report)
        if self.inspector.has_table(pivot.table):
            logger.info("Pivot table %s already exists", pivot.table)
            report.up_to_date.append(pivot.table)
            return
        stamp = base + timedelta(seconds=self.rng.randint(*PIVOT_JITTER_SECONDS))
        report.pivot_migrations.append(self._write_migration(pivot_migration(pivot), stamp, report, clean=False))

    def generate_pivot_model(self, pivot: PivotIdentity, report: GenerationReport) -> None:
        document = pivot_model(pivot, namespace=self.config.namespace)
        path = self._write_class(document, self.config.pivot_model_policy, report)
        if path is not None:
            report.pivot_models.append(path)

    # ---- file helpers ----------------------------------------------------------

    def _remove_migrations(self, name: str, report: GenerationReport) -> None:
        for path in self.writer.list_files(self.config.migrations_dir):
            if name in path.name:
                logger.warning("Deleting previous migration %s", path)
                self.writer.delete(path)
                report.deleted.append(path)
                self.echo(f"Deleted {path}")

    def _write_migration(
        self,
        document: MigrationDocument,
        stamp: datetime,
        report: GenerationReport,
        clean: bool = True,
    ) -> Path:
        if clean:
            self._remove_migrations(document.name, report)
        path = self.config.migrations_dir / document.filename(stamp.strftime(TIMESTAMP_FORMAT))
        self.writer.write(path, render_migration(document))
        logger.info("Wrote migration %s", path)
        self.echo(f"Migration {document.name} -> {path}")
        return path

    def _write_class(self, document: ClassDocument, policy: WritePolicy, report: GenerationReport) -> Optional[Path]:
        path = self.config.models_dir / document.filename
        if self.writer.exists(path):
            if policy is WritePolicy.SKIP_EXISTING:
                logger.info("Keeping existing %s", path)
                report.skipped.append(path)
                self.echo(f"Skipped {document.name} (exists at {path})")
                return None
            logger.warning("Overwriting %s", path)
        self.writer.write(path, render_class(document))
        logger.info("Wrote class %s", path)
        self.echo(f"Model {document.name} -> {path}")
        return path
