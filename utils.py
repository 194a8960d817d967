# utils.py
"""
Utility functions for the simulation framework.

This module provides helper functions, such as logging setup and config
loading, that are used across different parts of the application but do not
belong to a specific domain like physics or rendering.
"""
import logging
import logging.handlers
import json
import math
import os
from typing import Dict, Any

from constants import DEFAULT_EMITTER_SPREAD, FPS, MAX_TIME_SCALE

# --- Data Contracts ---
#
# setup_logging(config: Dict[str, Any]) -> None:
#   - Inputs:
#     - config: A dictionary containing a "logging" key with "level",
#       "format", and "log_file" sub-keys.
#   - Outputs: None
#   - Side Effects: Configures the root Python logger. Creates a log
#     directory if it doesn't exist. Sets up a console handler and a
#     rotating file handler.
#   - Invariants: After this function runs, the logging system is
#     initialized and ready for use throughout the application.
#
# validate_simulation_parameters(params: Dict[str, Any]) -> Dict[str, Any]:
#   - Inputs: The "simulation_parameters" section (may be empty).
#   - Outputs: A new dictionary with every default filled in.
#   - Side Effects: Logs at CRITICAL and raises ValueError on invalid values.

DEFAULT_SIMULATION_PARAMETERS: Dict[str, Any] = {
    "seed": None,
    "max_particles": 10000,
    "emission_rate": 10,
    "default_mass": 200.0,
    "mass_step": 100.0,
    "emitter_speed": 2.0,
    "emitter_spread": DEFAULT_EMITTER_SPREAD,
    "emitter_offset_x": -150.0,
    "min_field_distance": 1.0,
    "delta_time": 1.0,
}


def setup_logging(config: Dict[str, Any]) -> None:
    """
    Configures the logging system from a configuration dictionary.

    Sets up logging to both the console and a rotating file.
    """
    log_config = config.get('logging', {})
    log_level = log_config.get('level', 'INFO').upper()
    log_format = log_config.get('format', '%(asctime)s - %(levelname)s - %(message)s')
    log_file_path = log_config.get('log_file', 'logs/simulation.log')

    # Ensure the log directory exists
    log_dir = os.path.dirname(log_file_path)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    logger = logging.getLogger()
    logger.setLevel(log_level)

    # Clear existing handlers to avoid duplication
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(log_format)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # Rotates when the log reaches 1MB, keeps 5 backup logs.
    file_handler = logging.handlers.RotatingFileHandler(
        log_file_path, maxBytes=1024*1024, backupCount=5
    )
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    logging.info("Logging system initialized.")
    logging.debug(f"Log level set to {log_level}.")
    logging.debug(f"Log file path: {log_file_path}")


def load_config(path: str) -> Dict[str, Any]:
    """Loads a JSON configuration file."""
    logging.info(f"Loading configuration from {path}...")
    try:
        with open(path, 'r') as f:
            config = json.load(f)
        logging.info("Configuration loaded successfully.")
        return config
    except FileNotFoundError:
        logging.error(f"Configuration file not found at {path}.")
        raise
    except json.JSONDecodeError:
        logging.error(f"Error decoding JSON from {path}.")
        raise


def _config_error(msg: str) -> ValueError:
    logging.critical(msg)
    return ValueError(msg)


def validate_simulation_parameters(params: Dict[str, Any]) -> Dict[str, Any]:
    """
    Fills in defaults for the simulation section and checks its values.

    Missing or null keys take their default. Negative capacities or rates,
    and non-positive distance clamps or time steps, are rejected.
    """
    merged = dict(DEFAULT_SIMULATION_PARAMETERS)
    merged.update({k: v for k, v in params.items() if v is not None})

    if merged['max_particles'] < 0:
        raise _config_error(
            f"Configuration error: max_particles must be >= 0, got {merged['max_particles']}."
        )
    if merged['emission_rate'] < 0:
        raise _config_error(
            f"Configuration error: emission_rate must be >= 0, got {merged['emission_rate']}."
        )
    if not merged['min_field_distance'] > 0:
        raise _config_error(
            f"Configuration error: min_field_distance must be > 0, got {merged['min_field_distance']}."
        )
    if not merged['delta_time'] > 0:
        raise _config_error(
            f"Configuration error: delta_time must be > 0, got {merged['delta_time']}."
        )
    if not math.isfinite(merged['default_mass']):
        raise _config_error(
            f"Configuration error: default_mass must be finite, got {merged['default_mass']}."
        )

    unknown = set(params) - set(DEFAULT_SIMULATION_PARAMETERS)
    if unknown:
        logging.warning(f"Ignoring unknown simulation parameters: {sorted(unknown)}")

    return merged


def frame_time_scale(elapsed_ms: float, fps: float = FPS, max_scale: float = MAX_TIME_SCALE) -> float:
    """
    Converts the time since the previous frame into a step multiplier.

    A frame at the nominal rate maps to 1.0. Non-positive elapsed times map
    to 1.0 and long frames are capped at `max_scale`.
    """
    if elapsed_ms <= 0:
        return 1.0
    return min(elapsed_ms / (1000.0 / fps), max_scale)
