"""
kba_plugin.observability

Observability package.

Responsibilities:
- Structured logging configuration shared by the kernel and CLI tools.
"""

# Package marker.
