"""
kba_plugin.entity

Entity declaration layer.

Responsibilities:
- Field description API, definition registry and typed collections.
- The KBAData definition and collection.
"""

# Package marker; import from submodules.
