"""
    DESCRIPTION
    -----------
    config_loader reads the packaging YAML config and returns a validated PackagingConfig.

Sources, later wins:
- DEFAULT_CONFIG
- the file named by $PACKAGER_CONFIG
- the file passed explicitly (CLI --config)
    """

from __future__ import annotations

import copy
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Mapping, MutableMapping, Optional, Tuple, Union

import yaml

from packager.errors import ConfigError
from packager.validator.config_schema import PACKAGING_CONFIG_SCHEMA
from packager.validator.schema_validator import validate_schema

ENV_CONFIG_VARIABLE = "PACKAGER_CONFIG"

DEFAULT_EXCLUDED_DIRS: Tuple[str, ...] = ("node_modules", ".git", "dist", "build")

DEFAULT_CONFIG: Dict[str, Any] = {
    "excluded_dirs": list(DEFAULT_EXCLUDED_DIRS),
    "archiver": {"strategy": "7z", "executable": None},
    "digest": {"algorithm": "sha256", "filename": "checksum.txt"},
    "normalize_mtime": True,
    "logging": {"level": "INFO", "file": None},
}


#note: Immutable view of the merged config handed to the pipeline.
@dataclass(frozen=True)
class PackagingConfig:
    excluded_dirs: Tuple[str, ...] = DEFAULT_EXCLUDED_DIRS
    archiver_strategy: str = "7z"
    archiver_executable: Optional[str] = None
    digest_algorithm: str = "sha256"
    digest_filename: str = "checksum.txt"
    normalize_mtime: bool = True
    log_level: Union[str, int] = "INFO"
    log_file: Optional[Path] = None
    sources: Tuple[str, ...] = ()


#note: Load a YAML mapping; a missing file means "no overrides".
def _load_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, MutableMapping):
        raise ConfigError(f"Config file {path} must contain a mapping")
    return dict(data)


def _deep_merge(base: Dict[str, Any], overlay: Mapping[str, Any]) -> Dict[str, Any]:
    result: Dict[str, Any] = dict(base)
    for key, value in overlay.items():
        if key in result and isinstance(result[key], Mapping) and isinstance(value, Mapping):
            result[key] = _deep_merge(dict(result[key]), value)
        else:
            result[key] = value
    return result


def _config_paths(path: Optional[Path], env: Mapping[str, str]) -> List[Path]:
    paths: List[Path] = []
    env_path = str(env.get(ENV_CONFIG_VARIABLE, "")).strip()
    if env_path:
        paths.append(Path(env_path).expanduser())
    if path is not None:
        explicit = Path(path).expanduser()
        #note: An explicitly requested file must exist; the env file is best-effort.
        if not explicit.exists():
            raise ConfigError(f"Config file not found: {explicit}")
        paths.append(explicit)
    return paths


def load_packaging_config(
    path: Optional[Path] = None,
    env: Optional[Mapping[str, str]] = None,
) -> PackagingConfig:
    source_env = env if env is not None else os.environ
    raw = copy.deepcopy(DEFAULT_CONFIG)
    sources: List[str] = []
    for cfg_path in _config_paths(path, source_env):
        overrides = _load_yaml(cfg_path)
        if overrides:
            raw = _deep_merge(raw, overrides)
            sources.append(str(cfg_path.resolve()))
    return build_config(raw, sources=tuple(sources))


#note: Validate a merged raw mapping and convert it into a PackagingConfig.
def build_config(raw: Dict[str, Any], *, sources: Tuple[str, ...] = ()) -> PackagingConfig:
    issues = validate_schema(raw, PACKAGING_CONFIG_SCHEMA)
    if issues:
        details = "; ".join(issue.format() for issue in issues)
        raise ConfigError(f"Invalid packaging config: {details}")

    archiver = raw["archiver"]
    digest = raw["digest"]
    logging_cfg = raw.get("logging") or {}
    log_file = logging_cfg.get("file")
    return PackagingConfig(
        excluded_dirs=tuple(raw["excluded_dirs"]),
        archiver_strategy=archiver["strategy"],
        archiver_executable=archiver.get("executable") or None,
        digest_algorithm=digest["algorithm"],
        digest_filename=digest["filename"],
        normalize_mtime=bool(raw["normalize_mtime"]),
        log_level=logging_cfg.get("level", "INFO"),
        log_file=Path(log_file) if log_file else None,
        sources=sources,
    )
