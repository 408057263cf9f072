"""
kba_plugin.ci.__main__

Entrypoint for `python -m kba_plugin.ci`.
"""

from __future__ import annotations

from kba_plugin.ci.matrix import main

if __name__ == "__main__":
    raise SystemExit(main())
