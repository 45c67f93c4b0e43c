"""Debug views of parsed templates and laid-out rows."""
from __future__ import annotations

from typing import Optional, Sequence

from rich.table import Table
from rich.text import Text

from .template.models import Template


def template_table(template: Template, widths: Optional[Sequence[int]] = None) -> Table:
    """
    Build a rich table describing every node of ``template``.

    Field keys are shown in the field's own style so colors and emphasis can
    be checked at a glance. When ``widths`` is given (for example
    ``Row.widths``) an extra column shows the allocated width of each node.
    """
    table = Table(title=repr(template.source) if template.source else None)
    table.add_column("#", justify="right")
    table.add_column("kind")
    table.add_column("value")
    table.add_column("width", justify="right")
    if widths is not None:
        table.add_column("allocated", justify="right")
    table.add_column("format")

    for index, node in enumerate(template):
        if node.is_field:
            formatting = node.formatting
            value = Text(node.value, style=formatting.rich_style() if formatting else "")
            width = str(node.width) if node.width else "auto"
            tags = ", ".join(formatting.tags()) if formatting else ""
            kind = "field"
        else:
            value = Text(repr(node.value))
            width = str(node.fixed_width)
            tags = ""
            kind = "literal"
        cells = [str(index), kind, value, width]
        if widths is not None:
            cells.append(str(widths[index]))
        cells.append(tags)
        table.add_row(*cells)
    return table


__all__ = ["template_table"]
