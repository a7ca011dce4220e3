"""
Configuration schema for the regionbox command line.

Defines session settings (logging, numeric locale, demo toggles) and the
region/point description used by the non-interactive ``check`` command.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

import yaml

from regionbox_geometry import Region, RegionKind, build_region


VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR"}


def load_yaml_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load YAML configuration file.

    Args:
        config_path: Path to YAML file

    Returns:
        Dictionary with configuration (empty for an empty file)

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If YAML is invalid or not a mapping
    """
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {config_path}: {e}")

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping at top level of {config_path}")
    return data


@dataclass(frozen=True)
class SessionConfig:
    """
    Interactive session settings.

    Attributes:
        log_level: Structured log level written to stderr
        locale: LC_NUMERIC locale for the fallback number parser
                ("" follows the environment, "C" disables locale parsing)
        show_sample_point: Run the Point2D sample check after the main query
    """

    log_level: str = "WARNING"
    locale: str = ""
    show_sample_point: bool = True

    def __post_init__(self):
        """Validate session configuration."""
        level = str(self.log_level).upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log_level: {self.log_level}. "
                f"Must be one of {sorted(VALID_LOG_LEVELS)}"
            )
        object.__setattr__(self, 'log_level', level)

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SessionConfig":
        """Create from dictionary, ignoring keys that are not settings."""
        return cls(
            log_level=data.get("log_level", "WARNING"),
            locale=data.get("locale", "") or "",
            show_sample_point=bool(data.get("show_sample_point", True)),
        )

    @classmethod
    def from_yaml(cls, yaml_path: Union[str, Path]) -> "SessionConfig":
        """
        Load session settings from YAML file.

        Example YAML:
            log_level: "INFO"
            locale: "de_DE.UTF-8"
            show_sample_point: false
        """
        return cls.from_dict(load_yaml_config(yaml_path))


@dataclass(frozen=True)
class RegionConfig:
    """Region description: variant name plus flat bound list."""

    kind: str
    bounds: List[float]

    def __post_init__(self):
        """Validate region configuration."""
        try:
            kind = RegionKind(self.kind)
        except ValueError:
            raise ValueError(
                f"Invalid region kind: {self.kind}. "
                f"Must be one of {[k.value for k in RegionKind]}"
            )

        if len(self.bounds) != kind.bound_count:
            raise ValueError(
                f"{kind.value} region needs {kind.bound_count} bounds, "
                f"got {len(self.bounds)}"
            )

    def build(self) -> Region:
        """
        Build the region.

        Raises:
            InvalidBound: If any bound is NaN or infinite
        """
        return build_region(self.kind, self.bounds)


@dataclass(frozen=True)
class CheckConfig:
    """Region plus the points to test against it."""

    region: RegionConfig
    points: List[Tuple[float, ...]] = field(default_factory=list)

    def __post_init__(self):
        """Validate points."""
        for point in self.points:
            if len(point) < 2:
                raise ValueError(
                    f"Each point needs at least 2 coordinates, got {list(point)}"
                )

    @classmethod
    def from_yaml(cls, yaml_path: Union[str, Path]) -> "CheckConfig":
        """
        Load a check description from YAML file.

        Example YAML:
            region:
              kind: "parallelepiped"
              bounds: [0, 10, 0, 5, 0, 2]

            points:
              - [5, 2, 1]
              - [5, 2]
        """
        data = load_yaml_config(yaml_path)

        if "region" not in data:
            raise ValueError(f"Missing 'region' section in {yaml_path}")

        region_data = data["region"]
        try:
            region = RegionConfig(
                kind=region_data["kind"],
                bounds=[float(b) for b in region_data["bounds"]],
            )
        except KeyError as e:
            raise ValueError(f"Missing required region field: {e}")
        except TypeError as e:
            raise ValueError(f"Invalid region data: {e}")

        try:
            points = [
                tuple(float(c) for c in point)
                for point in data.get("points", []) or []
            ]
        except TypeError as e:
            raise ValueError(f"Invalid point data: {e}")

        return cls(region=region, points=points)
