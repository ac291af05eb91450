"""markview: local Markdown preview with Mermaid diagrams and a synced outline sidebar."""

__version__ = "0.1.0"
