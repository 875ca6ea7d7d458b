"""Documentation file discovery."""

from .document_scanner import DocumentScanner, default_exclude, find_component_docs

__all__ = [
    "DocumentScanner",
    "default_exclude",
    "find_component_docs",
]
