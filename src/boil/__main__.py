"""Allow ``python -m boil`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m boil`` behaves identically to the ``boil`` console script.
"""

from __future__ import annotations

from boil.cli.app import cli

if __name__ == "__main__":
    cli()
