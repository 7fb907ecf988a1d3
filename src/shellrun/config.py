"""Load and persist interpreter settings for shellrun."""

import json
import logging
import os
from pathlib import Path

from pydantic import ValidationError

from shellrun.models import RunnerConfig
from shellrun.platform_defaults import default_config

log = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".shellrun"
CONFIG_FILE = CONFIG_DIR / "config.json"

ENV_EXECUTABLE = "SHELLRUN_EXECUTABLE"
ENV_ARGUMENTS = "SHELLRUN_ARGUMENTS"


def _read_config_file(path: Path) -> dict:
    """Return the stored settings, or an empty dict when absent or unreadable."""
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        log.warning("ignoring unreadable config %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        log.warning("ignoring config %s: expected a JSON object", path)
        return {}
    return data


def load_config(path: Path = CONFIG_FILE) -> RunnerConfig:
    """Return platform defaults overlaid with the config file and environment."""
    config = default_config()

    stored = _read_config_file(path)
    if stored:
        try:
            config = RunnerConfig.model_validate({**config.model_dump(), **stored})
            log.debug("loaded config from %s", path)
        except ValidationError as e:
            log.warning("ignoring invalid config %s: %s", path, e)

    overrides = {}
    executable = os.environ.get(ENV_EXECUTABLE, "").strip()
    if executable:
        overrides["executable"] = executable
    arguments = os.environ.get(ENV_ARGUMENTS)
    if arguments:
        overrides["argument_template"] = arguments
    if overrides:
        log.debug("environment overrides: %s", sorted(overrides))
        config = config.model_copy(update=overrides)
    return config


def save_config(config: RunnerConfig, path: Path = CONFIG_FILE) -> None:
    """Write settings to disk as JSON."""
    os.makedirs(path.parent, mode=0o700, exist_ok=True)
    path.write_text(json.dumps(config.model_dump(), indent=2) + "\n", encoding="utf-8")
    log.debug("saved config to %s", path)
