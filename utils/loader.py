import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Type, TypeVar
from dotenv import load_dotenv
from pydantic import BaseModel, ValidationError
from exceptions.custom_errors import ConfigFileError, InvalidConfigError
from schemas.schedule.shifts import ShiftProblem
from schemas.schedule.timetable import TimetableConfig
from utils.constants import ENV_PREFIX

logger = logging.getLogger(__name__)

ConfigT = TypeVar("ConfigT", bound=BaseModel)


def env_key_to_field(key: str) -> str:
    """`BLOCKS_PER_DAY` -> `blocksPerDay`."""
    head, *rest = key.lower().split("_")
    return head + "".join(part.capitalize() for part in rest)


def parse_env_value(field: str, raw: str) -> Any:
    """Parse an environment value as JSON, falling back to a comma list for `days` and to the raw string otherwise."""
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        if field == "days":
            return [d.strip() for d in raw.split(",") if d.strip()]
        return raw


def read_env_overrides(
    model_cls: Type[BaseModel],
    environ: Mapping[str, str],
    prefix: str = ENV_PREFIX,
) -> Dict[str, Any]:
    """Collect `PREFIX_FIELD_NAME` variables that name a field of `model_cls`."""
    overrides = {}
    for key, raw in environ.items():
        if not key.startswith(prefix):
            continue
        field = env_key_to_field(key[len(prefix):])
        if field in model_cls.model_fields:
            overrides[field] = parse_env_value(field, raw)
    return overrides


def read_config_file(path: Path | str) -> Dict[str, Any]:
    """Read a JSON configuration object from disk."""
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise ConfigFileError(f"❌ Configuration file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise ConfigFileError(f"❌ Configuration file {path} is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ConfigFileError(f"❌ Configuration file {path} must hold a JSON object.")
    return data


def normalize_teachers(data: Dict[str, Any]) -> Dict[str, Any]:
    """Accept plain teacher names as well as `{"name": ...}` objects."""
    teachers = data.get("teachers")
    if isinstance(teachers, list):
        data["teachers"] = [{"name": t} if isinstance(t, str) else t for t in teachers]
    return data


def resolve_config(
    model_cls: Type[ConfigT],
    config_path: Optional[Path | str] = None,
    cli_overrides: Optional[Dict[str, Any]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> ConfigT:
    """
    Resolve a configuration from its sources, later sources overriding earlier ones:
    built-in defaults, environment variables with the `PLANNER_` prefix (a `.env` file is
    loaded first), the JSON file at `config_path`, then command-line values that are not None.

    Raises:
        ConfigFileError: If the JSON file is missing or malformed.
        InvalidConfigError: If the merged values do not form a valid configuration.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    data: Dict[str, Any] = {}
    data.update(read_env_overrides(model_cls, environ))
    if config_path is not None:
        data.update(read_config_file(config_path))
        logger.info(f"📄 Loaded configuration from {config_path}")
    data.update({k: v for k, v in (cli_overrides or {}).items() if v is not None})

    try:
        return model_cls.model_validate(normalize_teachers(data))
    except ValidationError as e:
        raise InvalidConfigError(f"❌ Invalid configuration:\n{e}") from e


def load_timetable_config(
    config_path: Optional[Path | str] = None,
    cli_overrides: Optional[Dict[str, Any]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> TimetableConfig:
    return resolve_config(TimetableConfig, config_path, cli_overrides, environ)


def load_shift_problem(
    config_path: Optional[Path | str] = None,
    cli_overrides: Optional[Dict[str, Any]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> ShiftProblem:
    return resolve_config(ShiftProblem, config_path, cli_overrides, environ)
