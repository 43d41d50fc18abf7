"""Infrastructure: boilerplates directory resolution.

Resolution tiers (checked in order):

1. ENV_OVERRIDE   -- ``$BOILERPLATES_PATH`` (used as-is, not checked)
2. PROJECT_HIDDEN -- ``./.boilerplates/``
3. PROJECT        -- ``./boilerplates/``
4. HOME_HIDDEN    -- ``~/.boilerplates/``
5. HOME           -- ``~/boilerplates/``

Tiers 2-5 only match when the candidate is an existing directory.  The
resolver never raises; ``None`` means no tier matched.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

logger = logging.getLogger(__name__)

ENV_VAR: str = "BOILERPLATES_PATH"
DIRECTORY_NAMES: tuple[str, str] = (".boilerplates", "boilerplates")


# ---------------------------------------------------------------------------
# Public data types
# ---------------------------------------------------------------------------

class LocationTier(Enum):
    ENV_OVERRIDE = "environment override"
    PROJECT_HIDDEN = "project (hidden)"
    PROJECT = "project"
    HOME_HIDDEN = "home (hidden)"
    HOME = "home"


@dataclass(frozen=True, slots=True)
class ResolvedLocation:
    path: Path
    tier: LocationTier


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _home_directory() -> Path | None:
    try:
        return Path.home()
    except RuntimeError:
        # Cannot determine home directory -- skip the home tiers
        return None


def _candidates(cwd: Path, home: Path | None) -> list[tuple[Path, LocationTier]]:
    hidden, plain = DIRECTORY_NAMES
    candidates = [
        (cwd / hidden, LocationTier.PROJECT_HIDDEN),
        (cwd / plain, LocationTier.PROJECT),
    ]
    if home is not None:
        candidates += [
            (home / hidden, LocationTier.HOME_HIDDEN),
            (home / plain, LocationTier.HOME),
        ]
    return candidates


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def locate_boilerplates(
    *,
    environ: Mapping[str, str] | None = None,
    cwd: Path | None = None,
    home: Path | None = None,
) -> ResolvedLocation | None:
    """Return the winning location and its tier, or ``None``.

    Args:
        environ: Environment mapping; defaults to ``os.environ``.
        cwd: Directory for the project tiers; defaults to ``Path.cwd()``.
        home: Directory for the home tiers; defaults to ``Path.home()``.
    """
    env = os.environ if environ is None else environ

    if override := env.get(ENV_VAR):
        location = ResolvedLocation(path=Path(override), tier=LocationTier.ENV_OVERRIDE)
        logger.debug("Boilerplates path from $%s: %s", ENV_VAR, location.path)
        return location

    base = Path.cwd() if cwd is None else cwd
    home_dir = _home_directory() if home is None else home

    for candidate, tier in _candidates(base, home_dir):
        if candidate.is_dir():
            logger.debug("Boilerplates path (%s): %s", tier.value, candidate)
            return ResolvedLocation(path=candidate, tier=tier)
        logger.debug("No boilerplates at %s", candidate)

    return None


def resolve_boilerplates_path(
    *,
    environ: Mapping[str, str] | None = None,
    cwd: Path | None = None,
    home: Path | None = None,
) -> Path | None:
    """Return the boilerplates directory path, or ``None`` if none applies."""
    location = locate_boilerplates(environ=environ, cwd=cwd, home=home)
    return location.path if location is not None else None
