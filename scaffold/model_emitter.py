# scaffold/model_emitter.py
from __future__ import annotations

from model_structure.meta_models import ModelDefinition, Relations
from scaffold.documents import ClassDocument
from scaffold.naming import studly
from scaffold.relationships import resolve_relations

ELOQUENT_MODEL = "Illuminate\\Database\\Eloquent\\Model"
DEFAULT_NAMESPACE = "App\\Models"

def build_model_class(
    model: ModelDefinition,
    relations: Relations,
    namespace: str = DEFAULT_NAMESPACE,
) -> ClassDocument:
    """Eloquent model: fillable = declared field names, plus one method per relation."""
    return ClassDocument(
        name=studly(model.name),
        namespace=namespace,
        parent="Model",
        imports=[ELOQUENT_MODEL],
        fillable=model.field_names,
        methods=resolve_relations(model.name, relations),
    )
