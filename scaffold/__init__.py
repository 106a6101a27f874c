from scaffold.generator import GenerationReport, GeneratorConfig, SchemaGenerator
from scaffold.settings import Settings, WritePolicy, get_settings

__all__ = [
    "GenerationReport",
    "GeneratorConfig",
    "SchemaGenerator",
    "Settings",
    "WritePolicy",
    "get_settings",
]
