from pathlib import Path
from typing import Any, Literal, Optional
import logging

import yaml
from pydantic import BaseModel, ValidationError

from jsonstorage.errors import ConfigError
from jsonstorage.storage import KeyValueStorage, create_storage

logger = logging.getLogger(__name__)


class StorageConfig(BaseModel):
    data_dir: str = "./data"
    backend: Literal["file", "memory"] = "file"
    serializer: Literal["json", "yaml"] = "json"
    log_level: str = "WARNING"


def load_config(path: Optional[Path] = None) -> StorageConfig:
    """Load a StorageConfig from a YAML file.

    A missing file yields the defaults. Unparseable YAML, a document that
    is not a mapping, or invalid field values raise `ConfigError`.
    """
    cfg_path = Path(path) if path is not None else Path('data/config/storage_config.yml')
    if not cfg_path.exists():
        logger.debug('No storage config at %s, using defaults', cfg_path)
        return StorageConfig()
    try:
        with cfg_path.open('r', encoding='utf-8') as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid config format in {cfg_path}: parse error") from e
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"invalid config format in {cfg_path}: expected mapping")
    try:
        cfg = StorageConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(f"invalid config values in {cfg_path}: {e}") from e
    logger.info('Loaded storage config from %s (backend=%s, serializer=%s)', cfg_path, cfg.backend, cfg.serializer)
    return cfg


def storage_from_config(config: StorageConfig, value_type: Any = Any) -> KeyValueStorage:
    return create_storage(
        backend=config.backend,
        serializer=config.serializer,
        data_dir=config.data_dir,
        value_type=value_type,
    )
