"""Global configuration: constants and environment-driven settings."""

from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)

# Member name under which the impact result is attached to each element
RESULT_MEMBER = "LCA"
RESULT_STAGE_ABC = "StageABC"
RESULT_STAGE_D = "StageD"

# Quantity members, canonical first, then the legacy spreadsheet names
MASS_KEYS = ("mass", "Weight")
VOLUME_KEYS = ("volume", "Volume")

# Material members read for the two-level taxonomy, in priority order
FAMILY_KEYS = ("family", "materialType")
GRADE_KEYS = ("grade", "name")

# Unit spellings accepted in the reference table (compared lower-cased)
MASS_UNITS = ("mass", "kg")
VOLUME_UNITS = ("volume", "m3", "m³", "m^3")

# Minimum number of positional cells in a reference row:
# family, grade, stage ABC, stage D, unit
REFERENCE_ROW_WIDTH = 5

# Members holding the reference rows for each payload shape, plain name first
# and the detached (@-prefixed) name second
REFERENCE_TABLE_MEMBERS = ("data", "@data")
REFERENCE_BAG_MEMBERS = ("LCA", "@LCA")

# Speckle type names (last segment of the type chain)
LINEAR_ELEMENT_TYPE = "Element1D"
PLANAR_ELEMENT_TYPE = "Element2D"
STRUCTURAL_MODEL_TYPE = "Objects.Structural.Analysis.Model"

# Objects kit MaterialType enum, by integer value
MATERIAL_TYPES = (
    "Concrete",
    "Steel",
    "Timber",
    "Aluminium",
    "Masonry",
    "FRP",
    "Glass",
    "Fabric",
    "Rebar",
    "Tendon",
    "ColdFormed",
    "Other",
)

# All known configuration keys with defaults
_DEFAULTS: dict[str, str] = {
    "STRUCTLCA_ENV": "production",
    "STRUCTLCA_LOG_LEVEL": "INFO",
    # appended to the source model name for the published model
    "STRUCTLCA_RESULT_MODEL_SUFFIX": " LCA Results",
}

_PROFILES: dict[str, dict[str, str]] = {
    "development": {
        "STRUCTLCA_ENV": "development",
        "STRUCTLCA_LOG_LEVEL": "DEBUG",
    },
    "production": {
        "STRUCTLCA_ENV": "production",
        "STRUCTLCA_LOG_LEVEL": "INFO",
    },
    "testing": {
        "STRUCTLCA_ENV": "testing",
        "STRUCTLCA_LOG_LEVEL": "DEBUG",
    },
}


def load_config(environ: dict[str, str] | None = None) -> dict[str, str]:
    """Load merged config: defaults -> profile -> environment variables.

    Parameters
    ----------
    environ:
        Mapping to read variables from.  Defaults to ``os.environ``.

    Returns a flat dict of configuration values.
    """
    env = os.environ if environ is None else environ
    config = dict(_DEFAULTS)

    env_name = env.get("STRUCTLCA_ENV", config["STRUCTLCA_ENV"])
    profile = _PROFILES.get(env_name)
    if profile is None:
        logger.warning("Unknown environment profile %r, using defaults", env_name)
    else:
        config.update(profile)

    for key in _DEFAULTS:
        env_val = env.get(key)
        if env_val is not None:
            config[key] = env_val

    return config
