import os
import yaml
import logging
from pathlib import Path
from typing import Any, Dict, Optional
from dotenv import load_dotenv

DOTENV_PATH = Path(__file__).resolve().parent.parent.parent / ".env"
CONFIG_PATH = Path(__file__).parent.parent / "config.yaml"
ENV_PREFIX = "NEWSDIGEST_"

DEFAULT_CONFIG: Dict[str, Any] = {
    "debug": False,
    "fetch_delay_seconds": 0.3,
    "request_timeout": None,
    "user_agent": (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/120.0.0.0 Safari/537.36"
    ),
    "accept": (
        "text/html,application/xhtml+xml,"
        "application/xml;q=0.9,*/*;q=0.8"
    ),
}


def setup_logging(debug: bool = False):
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    # requests/urllib3 log every connection at DEBUG
    urllib3_logger = logging.getLogger("urllib3")
    urllib3_logger.setLevel(logging.DEBUG if debug else logging.WARNING)


def apply_env_overrides(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Override top-level keys with NEWSDIGEST_<KEY> environment variables.
    Values are parsed as YAML scalars so "true", "0.5" or "null" keep
    their types.
    """
    overridden = dict(config)
    for key in config:
        env_val = os.getenv(f"{ENV_PREFIX}{key.upper()}")
        if env_val is not None:
            overridden[key] = yaml.safe_load(env_val)
    return overridden


def load_config(config_path: Optional[str] = None, configure_logging: bool = True):
    """
    Load config.yaml merged over the defaults, apply environment overrides
    and set up logging.
    """
    load_dotenv(DOTENV_PATH)

    path = Path(config_path) if config_path else CONFIG_PATH
    yaml_config = {}
    if path.exists():
        with open(path, "r") as f:
            yaml_config = yaml.safe_load(f) or {}

    config = {**DEFAULT_CONFIG, **yaml_config}
    config = apply_env_overrides(config)

    if configure_logging:
        setup_logging(debug=bool(config.get("debug", False)))

    return config
