"""
kba_plugin.ci

CI tooling.

Responsibilities:
- Build the plugin/app test matrix consumed by the CI workflow.
"""

# Package marker.
