"""Allow ``python -m oll_cli`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m oll_cli`` behaves identically to the ``oll-cli`` console
script.
"""

from __future__ import annotations

from oll_cli.cli.app import cli

if __name__ == "__main__":
    cli()
