"""Recipe file discovery and aisle/inflection config loading."""

from cooklist.catalog.aisle import AisleMap, ConfigParseError, parse_config
from cooklist.catalog.config_files import find_config_file, load_config
from cooklist.catalog.files import RECIPE_SUFFIX, build_catalog, resolve

__all__ = [
    "RECIPE_SUFFIX",
    "AisleMap",
    "ConfigParseError",
    "build_catalog",
    "find_config_file",
    "load_config",
    "parse_config",
    "resolve",
]
