"""snapstat: structural summaries (degree, second-degree, closeness) of a directed edge-list snapshot."""

__version__ = "0.1.0"
