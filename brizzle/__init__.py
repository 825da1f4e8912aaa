"""
Brizzle - Rails-like generators for Next.js + Drizzle

Parses compact field definitions (``title:string``, ``status:enum:a,b``,
``authorId:references:user``) and turns them into Drizzle table blocks,
server actions, REST routes and CRUD pages.
"""

__version__ = "0.1.0"

from brizzle.config import ProjectConfig, detect_project_config
from brizzle.dialects import Dialect
from brizzle.errors import BrizzleError, ErrorKind, ValidationError
from brizzle.fields import Field, parse_field, parse_fields, validate_model_name
from brizzle.options import GeneratorOptions
from brizzle.schema import apply_model, remove_model

__all__ = [
    "BrizzleError",
    "Dialect",
    "ErrorKind",
    "Field",
    "GeneratorOptions",
    "ProjectConfig",
    "ValidationError",
    "apply_model",
    "detect_project_config",
    "parse_field",
    "parse_fields",
    "remove_model",
    "validate_model_name",
]
