"""Prometheus exposition text rendering.

Only double quotes in label values are escaped. Backslashes and newlines in
label values and help text are written as-is.
"""
from typing import Any, Iterator, List, Optional, Set, Tuple

from .exceptions import ValidationError
from .models import Labels, MetricDefinition


def format_value(value: Any) -> str:
    # booleans as exposition-style lower case
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def escape_label_value(value: Any) -> str:
    return format_value(value).replace('"', '\\"')


def iter_labels(labels: Optional[Labels]) -> Iterator[Tuple[str, Any]]:
    """Yield (key, value) pairs in input order, skipping None values.

    Raises ValidationError if a key repeats in a pair sequence.
    """
    if not labels:
        return
    pairs = labels.items() if hasattr(labels, "items") else labels
    seen: Set[str] = set()
    for key, value in pairs:
        if key in seen:
            raise ValidationError(f"Duplicate label key: {key}")
        seen.add(key)
        if value is None:
            continue
        yield key, value


def format_labels(labels: Optional[Labels]) -> str:
    """Render ``{k="v",...}``, or an empty string when no labels remain."""
    pairs = [f'{key}="{escape_label_value(value)}"' for key, value in iter_labels(labels)]
    if not pairs:
        return ""
    return "{" + ",".join(pairs) + "}"


def format_sample_line(name: str, labels: Optional[Labels], value: Any) -> str:
    return f"{name}{format_labels(labels)} {format_value(value)}"


def format_header_lines(definition: MetricDefinition) -> List[str]:
    return [
        f"# HELP {definition.name} {definition.help}",
        f"# TYPE {definition.name} {definition.type.value}",
    ]
