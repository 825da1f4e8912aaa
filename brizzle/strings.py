"""
Brizzle Strings - Case conversion, inflection and model naming

Every generator derives its names from a single ModelContext so that paths,
table names and identifiers always agree with each other.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache

import inflection


# ═══════════════════════════════════════════════════════════════════════════
# CASE CONVERSION
# ═══════════════════════════════════════════════════════════════════════════


def pascal_case(s: str) -> str:
    """Convert to PascalCase. Accepts camel, snake and kebab input."""
    s = re.sub(r"[-_](\w)", lambda m: m.group(1).upper(), s)
    return s[:1].upper() + s[1:]


def camel_case(s: str) -> str:
    """Convert to camelCase."""
    pascal = pascal_case(s)
    return pascal[:1].lower() + pascal[1:]


def snake_case(s: str) -> str:
    """Convert to snake_case."""
    s = re.sub(r"([A-Z])", r"_\1", s).lower()
    return s[1:] if s.startswith("_") else s


def kebab_case(s: str) -> str:
    """Convert to kebab-case."""
    return snake_case(s).replace("_", "-")


def escape_string(s: str) -> str:
    """Escape a value for use inside a double-quoted TypeScript string."""
    return s.replace("\\", "\\\\").replace('"', '\\"')


# ═══════════════════════════════════════════════════════════════════════════
# INFLECTION
# ═══════════════════════════════════════════════════════════════════════════


def plural(s: str) -> str:
    """English pluralization, irregular and uncountable words included."""
    return inflection.pluralize(s)


def singular(s: str) -> str:
    """English singularization (``statuses`` -> ``status``, ``people`` -> ``person``)."""
    return inflection.singularize(s)


# ═══════════════════════════════════════════════════════════════════════════
# MODEL CONTEXT
# ═══════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class ModelContext:
    """All naming variants of one model, derived from its singular form."""

    name: str
    singular_name: str
    plural_name: str
    pascal_name: str
    pascal_plural: str
    camel_name: str
    camel_plural: str
    snake_name: str
    snake_plural: str
    kebab_name: str
    kebab_plural: str
    table_name: str


@lru_cache(maxsize=None)
def create_model_context(name: str) -> ModelContext:
    """Build the naming bundle for a model. Singular or plural input is accepted."""
    singular_name = singular(name)
    plural_name = plural(singular_name)

    return ModelContext(
        name=name,
        singular_name=singular_name,
        plural_name=plural_name,
        pascal_name=pascal_case(singular_name),
        pascal_plural=pascal_case(plural_name),
        camel_name=camel_case(singular_name),
        camel_plural=camel_case(plural_name),
        snake_name=snake_case(singular_name),
        snake_plural=snake_case(plural_name),
        kebab_name=kebab_case(singular_name),
        kebab_plural=kebab_case(plural_name),
        table_name=plural(snake_case(singular_name)),
    )


def table_name_for(model_name: str) -> str:
    """SQL table name a model of this name is stored in."""
    return create_model_context(model_name).table_name
