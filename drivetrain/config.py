"""
YAML configuration loading
"""

import logging
import os
from dataclasses import fields
from typing import Any, Dict

import yaml

from drivetrain.params import DrivetrainParams

logger = logging.getLogger(__name__)


def params_from_dict(config: Dict[str, Any]) -> DrivetrainParams:
    """
    Build DrivetrainParams from the 'drivetrain' section of a config mapping

    Keys that are not DrivetrainParams fields are ignored with a warning;
    missing keys keep their defaults.
    """
    section = config.get("drivetrain", {}) or {}
    known = {f.name for f in fields(DrivetrainParams) if f.name != "half_track_width"}

    overrides = {}
    for key, value in section.items():
        if key in known:
            overrides[key] = value
        else:
            logger.warning(f"Ignoring unknown drivetrain parameter: {key}")

    return DrivetrainParams(**overrides)


def load_params(config_path: str) -> DrivetrainParams:
    """
    Load drivetrain parameters from a YAML file

    Args:
        config_path: Path to the configuration file

    Returns:
        DrivetrainParams with the file's values applied over the defaults

    Raises:
        FileNotFoundError: If the file does not exist
    """
    if not os.path.exists(config_path):
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, "r") as f:
        config = yaml.safe_load(f) or {}

    params = params_from_dict(config)
    logger.info(f"Loaded drivetrain parameters from {config_path}")
    return params
