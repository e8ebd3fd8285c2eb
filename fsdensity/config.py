"""
Configuration reader for fresh snow density options.

Options are addressed as ``section:key``, e.g. ``fresh_snow_density:which_fsd``.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

logger = logging.getLogger(__name__)


class ConfigurationError(ValueError):
    """Invalid or missing configuration option."""

    def __init__(self, option: str, value: Any = None, message: Optional[str] = None):
        self.option = option
        self.value = value
        if message is None:
            message = f"unknown value: {value} for config option {option}"
        super().__init__(message)


class Config:
    """
    Flat store of configuration options with bounded typed getters.

    Parameters
    ----------
    options : mapping, optional
        Values keyed by ``section:key``.

    Examples
    --------
    >>> cfg = Config({'fresh_snow_density:which_fsd': 3})
    >>> cfg.get_int('fresh_snow_density:which_fsd', False, 0, 6, 1)
    3
    """

    def __init__(self, options: Optional[Mapping[str, Any]] = None):
        self._options: Dict[str, Any] = dict(options) if options else {}

    @classmethod
    def from_dict(cls, sections: Mapping[str, Mapping[str, Any]]) -> 'Config':
        """Build from a nested ``{section: {key: value}}`` mapping."""
        options = {}
        for section, values in sections.items():
            for key, value in values.items():
                options[f"{section}:{key}"] = value
        return cls(options)

    @classmethod
    def from_file(cls, path) -> 'Config':
        """
        Read a YAML file of ``section: {key: value}`` mappings.

        Parameters
        ----------
        path : str or Path
            YAML file, e.g.::

                fresh_snow_density:
                  which_fsd: 0
                  density: 300.0

        Raises
        ------
        ConfigurationError
            If the top level or a section is not a mapping
        yaml.YAMLError
            If YAML parsing fails
        """
        path = Path(path)
        with path.open("r", encoding="utf-8") as f:
            sections = yaml.safe_load(f) or {}
        logger.debug("Read configuration from %s", path)

        if not isinstance(sections, dict):
            raise ConfigurationError(str(path), message=f"{path}: expected a mapping of sections")
        for section, values in sections.items():
            if not isinstance(values, dict):
                raise ConfigurationError(
                    str(section), message=f"{path}: section {section} is not a mapping"
                )
        return cls.from_dict(sections)

    def __contains__(self, name):
        return name in self._options

    def set(self, name: str, value: Any):
        self._options[name] = value

    def get_int(self, name: str, required: bool, vmin: int, vmax: int, default: int) -> int:
        """
        Read an integer option within inclusive bounds.

        Raises
        ------
        ConfigurationError
            If the option is required but missing, not an integer, or out of bounds.
        """
        return self._get(name, required, vmin, vmax, default, _to_int)

    def get_double(self, name: str, required: bool, vmin: float, vmax: float,
                   default: float) -> float:
        """
        Read a float option within inclusive bounds.

        Raises
        ------
        ConfigurationError
            If the option is required but missing, not a number, or out of bounds.
        """
        return self._get(name, required, vmin, vmax, default, _to_float)

    def _get(self, name, required, vmin, vmax, default, convert):
        if name not in self._options:
            if required:
                raise ConfigurationError(name, message=f"required config option {name} is missing")
            return default

        raw = self._options[name]
        try:
            value = convert(raw)
        except (TypeError, ValueError):
            raise ConfigurationError(name, raw, f"cannot parse {raw!r} for config option {name}")

        if not vmin <= value <= vmax:
            raise ConfigurationError(
                name, value, f"value {value} for config option {name} outside [{vmin}, {vmax}]"
            )
        return value


def _to_float(raw):
    if isinstance(raw, bool):
        raise TypeError("bool is not a float option")
    return float(raw)


def _to_int(raw):
    # Whole floats only; '3.5' and 3.5 are rejected
    if isinstance(raw, bool):
        raise TypeError("bool is not an int option")
    if isinstance(raw, float):
        if not raw.is_integer():
            raise ValueError(f"{raw} is not an integer")
        return int(raw)
    return int(raw)
