"""
Configuration -- Scan options and their sources

Config hierarchy (highest to lowest priority):
  1. Explicit overrides (CLI flags)
  2. Environment variables (URLDETECT_*)
  3. Project config (.urldetect.yaml)
  4. User config (~/.urldetect/config.yaml)
  5. Defaults

Invalid values raise ConfigurationError at construction; nothing is
silently defaulted.
"""

import logging
import os
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

import yaml

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

VALID_FORMATS = ("table", "json", "csv")


@dataclass(frozen=True)
class ScanConfig:
    """
    Options consumed by the scan engine.

    Attributes:
        concurrency: Files in flight at once (>= 1)
        pool_size: Parsers kept per language (>= 1)
        include_comments: Treat comments as URL candidates
        include_non_fqdn: Accept single-label hosts such as localhost
        fallback_regex: Regex-scan files with no usable grammar
        force_fallback: Languages always scanned with the regex fallback
        context_lines: Lines of context around each match (>= 0)
        fail_on_error: Abort the batch on the first per-file failure
        ignore_domains: Hosts (and their subdomains) to drop
        keep_empty_files: Keep files with zero matches in the results
        schemes: URL schemes to recognize
        max_file_size: Skip files larger than this many bytes (0 = no limit)
    """
    concurrency: int = 10
    pool_size: int = 10
    include_comments: bool = False
    include_non_fqdn: bool = False
    fallback_regex: bool = True
    force_fallback: Tuple[str, ...] = ()
    context_lines: int = 0
    fail_on_error: bool = False
    ignore_domains: Tuple[str, ...] = ()
    keep_empty_files: bool = True
    schemes: Tuple[str, ...] = ("http", "https")
    max_file_size: int = 0

    def __post_init__(self):
        for name in ("force_fallback", "ignore_domains", "schemes"):
            value = getattr(self, name)
            object.__setattr__(self, name, tuple(parse_array_option(value)))
        self.validate()

    def validate(self) -> None:
        """
        Validate option values.

        Raises:
            ConfigurationError: On the first invalid option
        """
        if not isinstance(self.concurrency, int) or self.concurrency < 1:
            raise ConfigurationError("Concurrency must be >= 1")
        if not isinstance(self.pool_size, int) or self.pool_size < 1:
            raise ConfigurationError("Pool size must be >= 1")
        if not isinstance(self.context_lines, int) or self.context_lines < 0:
            raise ConfigurationError("Context lines must be >= 0")
        if not isinstance(self.max_file_size, int) or self.max_file_size < 0:
            raise ConfigurationError("Max file size must be >= 0")
        if not self.schemes:
            raise ConfigurationError("At least one URL scheme is required")
        for scheme in self.schemes:
            if not scheme.replace("+", "").replace("-", "").replace(".", "").isalnum():
                raise ConfigurationError(f"Invalid URL scheme: {scheme}")

    def with_overrides(self, **overrides: Any) -> "ScanConfig":
        """Copy with some options replaced (None values are ignored)."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for display/logging."""
        data = {}
        for f in fields(self):
            value = getattr(self, f.name)
            data[f.name] = list(value) if isinstance(value, tuple) else value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScanConfig":
        """
        Create from a dict, rejecting unknown keys.

        Raises:
            ConfigurationError: On unknown keys or invalid values
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(f"Unknown scan option(s): {', '.join(unknown)}")
        return cls(**data)


@dataclass(frozen=True)
class OutputConfig:
    """Report rendering preferences."""
    format: str = "table"
    with_line_numbers: bool = True
    only_urls: bool = False

    def __post_init__(self):
        if self.format not in VALID_FORMATS:
            raise ConfigurationError(
                f"Invalid output format: {self.format}. Valid formats: {', '.join(VALID_FORMATS)}"
            )


@dataclass(frozen=True)
class Config:
    """Application configuration."""
    scan: ScanConfig = field(default_factory=ScanConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        output_data = data.get("output") or {}
        try:
            output = OutputConfig(**output_data)
        except TypeError as e:
            raise ConfigurationError(f"Invalid output options: {e}") from e
        return cls(
            scan=ScanConfig.from_dict(data.get("scan") or {}),
            output=output,
        )


# =============================================================================
# Loading
# =============================================================================

# Environment variable -> (section, key, parser)
_ENV_OPTIONS = {
    "URLDETECT_CONCURRENCY": ("scan", "concurrency", "int"),
    "URLDETECT_POOL_SIZE": ("scan", "pool_size", "int"),
    "URLDETECT_CONTEXT": ("scan", "context_lines", "int"),
    "URLDETECT_MAX_FILE_SIZE": ("scan", "max_file_size", "int"),
    "URLDETECT_INCLUDE_COMMENTS": ("scan", "include_comments", "bool"),
    "URLDETECT_INCLUDE_NON_FQDN": ("scan", "include_non_fqdn", "bool"),
    "URLDETECT_FALLBACK_REGEX": ("scan", "fallback_regex", "bool"),
    "URLDETECT_FAIL_ON_ERROR": ("scan", "fail_on_error", "bool"),
    "URLDETECT_IGNORE_DOMAINS": ("scan", "ignore_domains", "list"),
    "URLDETECT_FORMAT": ("output", "format", "str"),
}


class ConfigManager:
    """
    Loads configuration from files and environment.

    Hierarchy:
      1. Environment (URLDETECT_*)
      2. Project config (.urldetect.yaml)
      3. User config (~/.urldetect/config.yaml)
      4. Defaults
    """

    USER_CONFIG_DIR = Path.home() / ".urldetect"
    USER_CONFIG_FILE = USER_CONFIG_DIR / "config.yaml"
    PROJECT_CONFIG_FILE = ".urldetect.yaml"

    def __init__(self, project_dir: Optional[Path] = None, environ: Optional[Dict[str, str]] = None):
        self.project_dir = Path(project_dir) if project_dir else Path.cwd()
        self.environ = os.environ if environ is None else environ
        self._config: Optional[Config] = None

    @property
    def project_config_path(self) -> Path:
        return self.project_dir / self.PROJECT_CONFIG_FILE

    @property
    def user_config_path(self) -> Path:
        return self.USER_CONFIG_FILE

    def load(self) -> Config:
        """
        Load configuration from all sources.

        Unreadable or malformed config files are reported and skipped;
        invalid values raise ConfigurationError.
        """
        if self._config is not None:
            return self._config

        config_data: Dict[str, Any] = {}

        # Layer 1: User config
        config_data = self._merge(config_data, self._read_yaml(self.user_config_path))

        # Layer 2: Project config (higher priority)
        config_data = self._merge(config_data, self._read_yaml(self.project_config_path))

        # Layer 3: Environment overrides
        for env_key, (section, key, kind) in _ENV_OPTIONS.items():
            raw = self.environ.get(env_key)
            if raw:
                config_data.setdefault(section, {})[key] = _parse_env_value(env_key, raw, kind)

        self._config = Config.from_dict(config_data)
        return self._config

    def _read_yaml(self, path: Path) -> Dict[str, Any]:
        if not path.exists():
            return {}
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Ignoring unreadable config %s: %s", path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring config %s: expected a mapping", path)
            return {}
        return data

    def _merge(self, base: Dict, override: Dict) -> Dict:
        """Deep merge two dicts, override wins."""
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge(result[key], value)
            else:
                result[key] = value
        return result


def _parse_env_value(key: str, raw: str, kind: str) -> Any:
    """Parse an environment value, raising on malformed input."""
    if kind == "int":
        try:
            return int(raw)
        except ValueError:
            raise ConfigurationError(f"{key} must be an integer, got {raw!r}") from None
    if kind == "bool":
        value = raw.strip().lower()
        if value in ("true", "1", "yes", "on"):
            return True
        if value in ("false", "0", "no", "off"):
            return False
        raise ConfigurationError(f"{key} must be a boolean, got {raw!r}")
    if kind == "list":
        return parse_array_option(raw)
    return raw


# =============================================================================
# Option Helpers
# =============================================================================

def parse_array_option(value: Union[None, str, List[str], Tuple[str, ...]]) -> List[str]:
    """
    Normalize a list-valued option.

    - list/tuple: returned as a list, unchanged
    - "a, b,,c": split on commas, trimmed, empty items dropped
    - None or "": empty list

    Example:
        parse_array_option("  item1  , item2 ,,")  # ["item1", "item2"]
    """
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [item.strip() for item in str(value).split(",") if item.strip()]


def load_patterns_from_file(path: Union[str, Path]) -> List[str]:
    """
    Read one pattern per line, skipping blanks and "#" comments.

    Raises:
        OSError: If the file cannot be read
    """
    with open(path, encoding="utf-8") as f:
        content = f.read()
    return [
        line.strip()
        for line in content.splitlines()
        if line.strip() and not line.strip().startswith("#")
    ]
