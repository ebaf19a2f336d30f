"""
Config directory resolution and YAML loading.

YAML configs live in the package's bundled vitae/config/ directory unless
VITAE_CONFIG_PATH points elsewhere.
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from omegaconf import OmegaConf

load_dotenv()
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[1] / "config"
CONFIG_PATH = Path(os.getenv("VITAE_CONFIG_PATH", str(DEFAULT_CONFIG_PATH)))


def load_yaml_config(filename: str, config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load a YAML config file from the config directory as a plain dict.

    Args:
        filename: File name within the config directory (e.g., "timeline.yaml")
        config_path: Config directory (defaults to VITAE_CONFIG_PATH)

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    yaml_path = (config_path or CONFIG_PATH) / filename
    if not yaml_path.exists():
        raise FileNotFoundError(f"Config not found at {yaml_path}")

    return OmegaConf.to_container(OmegaConf.load(yaml_path), resolve=True)
