"""
Reconstruction configuration utilities.

This module provides configuration management and validation for the
trajectory reconstruction engine.
"""

import logging
from dataclasses import asdict, dataclass, field
from typing import Any, Dict

logger = logging.getLogger(__name__)

FIT_METHODS = ("cubic_spline", "bspline")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ReconstructionConfig:
    """
    Configuration for trajectory gap reconstruction.

    Holds the gap sampling interval, the curve-fitting strategy and the
    plausibility threshold, plus settings for logging and plotting.
    """

    # Gap sampling
    sampling_step: float = 0.5  # Time units between gap query timestamps

    # Curve fitting
    fit_method: str = "cubic_spline"  # "cubic_spline" or "bspline"
    bspline_degree: int = 3
    bspline_samples: int = 100  # Parameter count for fixed-count resampling

    # Plausibility check
    z_floor: float = 0.0  # Points below this height are flagged

    # Logging settings
    log_level: str = "INFO"

    # Plot settings
    plot: Dict[str, Any] = field(default_factory=lambda: {
        "colorscale": "viridis",
        "marker_size": 3,
        "title": "Reconstructed trajectory",
        "height": 5.0
    })

    def __post_init__(self):
        """Validate configuration after initialization."""
        self.validate()

    def validate(self) -> bool:
        """
        Validate configuration parameters.

        Returns:
            bool: True if configuration is valid

        Raises:
            ValueError: If configuration is invalid
        """
        if not self.sampling_step > 0:
            raise ValueError(f"Invalid sampling step: {self.sampling_step}")

        if self.fit_method not in FIT_METHODS:
            raise ValueError(f"Unsupported fit method: {self.fit_method}")

        # Only cubic B-splines are supported
        if self.bspline_degree != 3:
            raise ValueError(f"Unsupported B-spline degree: {self.bspline_degree}")

        if self.bspline_samples < 2:
            raise ValueError(f"Invalid B-spline sample count: {self.bspline_samples}")

        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {self.log_level}")

        logger.debug("Configuration validation passed")
        return True

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert configuration to dictionary.

        Returns:
            Dict containing all configuration parameters
        """
        return asdict(self)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'ReconstructionConfig':
        """
        Create configuration from dictionary.

        Args:
            config_dict: Dictionary containing configuration parameters

        Returns:
            ReconstructionConfig instance
        """
        return cls(**(config_dict or {}))

    @classmethod
    def from_yaml(cls, yaml_path: str) -> 'ReconstructionConfig':
        """
        Load configuration from YAML file.

        Args:
            yaml_path: Path to YAML configuration file

        Returns:
            ReconstructionConfig instance
        """
        import yaml

        try:
            with open(yaml_path, 'r') as f:
                config_dict = yaml.safe_load(f)

            return cls.from_dict(config_dict)

        except Exception as e:
            logger.error(f"Failed to load configuration from {yaml_path}: {e}")
            raise

    def save_yaml(self, yaml_path: str):
        """
        Save configuration to YAML file.

        Args:
            yaml_path: Path to save YAML configuration file
        """
        import yaml

        try:
            with open(yaml_path, 'w') as f:
                yaml.dump(self.to_dict(), f, default_flow_style=False, indent=2)

            logger.info(f"Configuration saved to {yaml_path}")

        except Exception as e:
            logger.error(f"Failed to save configuration to {yaml_path}: {e}")
            raise


def create_default_config() -> ReconstructionConfig:
    """Create default configuration (natural cubic spline)."""
    return ReconstructionConfig()


def create_bspline_config() -> ReconstructionConfig:
    """Create configuration using the uniform cubic B-spline strategy."""
    return ReconstructionConfig(fit_method="bspline")
