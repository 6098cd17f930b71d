"""Maven model: coordinates, repositories, filters, project and dependency tree."""

__all__ = [
    "coordinates",
    "layout",
    "repository",
    "filters",
    "project",
    "settings",
    "tree",
    "manifest",
]
