"""boil — locate, list, and generate boilerplate files and directories.

Built as a small layered CLI: pure parsing in ``core``, filesystem and
subprocess work in ``infra``, rendering and the error boundary in ``cli``.
"""

from boil.version import __version__

__all__: list[str] = ["__version__"]
