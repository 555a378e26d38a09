"""WorkBoard: a Kanban board API and drag-and-drop board client."""

__version__ = "1.0.0"
