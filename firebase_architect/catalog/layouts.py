"""Layout registry.

Layouts are pure structure.  Each one names its content slots and points at
a Jinja2 skeleton under ``scaffolder/templates/layouts/``.
"""

from __future__ import annotations

from typing import Optional

from firebase_architect.registry import Registry

from .models import Layout, NavigationStyle

DEFAULT_LAYOUT_ID = "dashboardGrid"

LAYOUTS: Registry[Layout] = Registry(
    [
        Layout(
            id="dashboardGrid",
            name="Dashboard Grid",
            description=(
                "Traditional dashboard with metrics, charts, and tables in a grid layout"
            ),
            category="dashboard",
            preview="Grid layout with stats cards, charts, and data tables",
            slots=("navigation", "header", "metrics", "charts", "table", "sidebar"),
            template="layouts/dashboard_grid.html.j2",
            default_navigation_style=NavigationStyle.SIDE,
            side_navigation_styles=frozenset(
                {NavigationStyle.SIDE, NavigationStyle.SIDE_TOP, NavigationStyle.COMPACT}
            ),
            top_navigation_styles=frozenset({NavigationStyle.TOP, NavigationStyle.SIDE_TOP}),
        ),
        Layout(
            id="spreadsheet",
            name="Spreadsheet",
            description="Dense table-focused layout similar to Airtable or Google Sheets",
            category="data",
            preview="Dense data table with sticky headers and horizontal scrolling",
            slots=("navigation", "toolbar", "table"),
            template="layouts/spreadsheet.html.j2",
            default_navigation_style=NavigationStyle.COMPACT,
        ),
        Layout(
            id="kanban",
            name="Kanban Board",
            description="Vertical columns layout for project management and task tracking",
            category="project",
            preview="Horizontal scrolling columns with cards (Trello-style)",
            slots=("navigation", "header", "columns"),
            template="layouts/kanban.html.j2",
            default_navigation_style=NavigationStyle.SIDE,
        ),
    ],
    default_id=DEFAULT_LAYOUT_ID,
    kind="layout",
)


def get_layout(layout_id: Optional[str]) -> Layout:
    """Return the layout for *layout_id* (``dashboardGrid`` if unknown)."""
    return LAYOUTS.get(layout_id)


def list_layouts() -> list[Layout]:
    return LAYOUTS.list()
