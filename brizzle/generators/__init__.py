"""
Brizzle Generators - File generators behind the CLI commands
"""

from brizzle.generators.actions import generate_actions
from brizzle.generators.api import generate_api
from brizzle.generators.destroy import DestroyOutcome, DestroyType, destroy
from brizzle.generators.model import generate_model
from brizzle.generators.resource import generate_resource
from brizzle.generators.scaffold import generate_scaffold

__all__ = [
    "DestroyOutcome",
    "DestroyType",
    "destroy",
    "generate_actions",
    "generate_api",
    "generate_model",
    "generate_resource",
    "generate_scaffold",
]
