"""Configuration loading and management for Codebase Audit.

This module provides configuration discovery and validation. Configuration
sources are merged in priority order:
    1. Defaults (defined in AuditConfig)
    2. Global config (~/.codebase-audit.toml)
    3. Project config (./codebase-audit.toml)
    4. Explicit config file
    5. Environment variables (AUDIT_* prefix)
    6. Keyword overrides (typically CLI flags)

Example:
    >>> config = load_config(output_dir="./reports", formats=["json"])
    >>> config.formats
    ['json']
    >>> config.scoring.passed_threshold
    80
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]
StatusRule = Literal["score_bands", "severity"]

REPORT_FORMATS = ("html", "json", "console")
STATUS_RULES = ("score_bands", "severity")


@dataclass(frozen=True)
class ScanConfig:
    """Where to look for source files and which of them to consider.

    Attributes:
        scan_paths: Root sub-paths (relative to ``base_path``) to walk
        extensions: File suffixes to include, with the leading dot
        exclude_patterns: Glob patterns (``**``, ``*``, ``?``) to drop
        framework_modules: Module specifiers whose import marks a UI file
    """

    scan_paths: list[str] = field(
        default_factory=lambda: [
            "src/components",
            "src/app",
            "src/lib",
            "src/hooks",
        ]
    )
    extensions: list[str] = field(default_factory=lambda: [".ts", ".tsx", ".js", ".jsx"])
    exclude_patterns: list[str] = field(
        default_factory=lambda: [
            "**/__tests__/**",
            "**/*.test.ts",
            "**/*.test.tsx",
            "**/node_modules/**",
            "**/*.d.ts",
            "**/dist/**",
            "**/.next/**",
        ]
    )
    framework_modules: list[str] = field(default_factory=lambda: ["react"])

    def __post_init__(self) -> None:
        for ext in self.extensions:
            if not ext.startswith("."):
                raise InvalidConfigError("scan.extensions", ext, "extensions must start with '.'")
        if not self.framework_modules:
            raise InvalidConfigError(
                "scan.framework_modules", self.framework_modules, "at least one module is required"
            )


@dataclass(frozen=True)
class ScoringConfig:
    """Category thresholds, coverage targets and overall-score penalties.

    Attributes:
        passed_threshold: Score at or above which a category passes (score bands)
        warning_threshold: Score at or above which a category warns (score bands)
        failing_threshold: Score below which a category fails (severity rule)
        test_coverage_target: Fraction of components that must have tests
        doc_coverage_target: Fraction of components that must have docs
        acceptable_score: Overall score below which a full run fails
        critical_penalty: Points deducted per critical/high issue
        warning_penalty: Points deducted per medium/low issue
        status_rule: Which status derivation to use for scored categories
        complex_categories: Categories whose recommendations are always large effort
    """

    passed_threshold: int = 80
    warning_threshold: int = 60
    failing_threshold: int = 50
    test_coverage_target: float = 0.80
    doc_coverage_target: float = 0.70
    acceptable_score: int = 60
    critical_penalty: int = 5
    warning_penalty: int = 2
    status_rule: StatusRule = "score_bands"
    complex_categories: list[str] = field(
        default_factory=lambda: ["collaboration", "offline", "ai", "components", "security"]
    )

    def __post_init__(self) -> None:
        for name in ("passed_threshold", "warning_threshold", "failing_threshold", "acceptable_score"):
            value = getattr(self, name)
            if not 0 <= value <= 100:
                raise InvalidConfigError(f"scoring.{name}", value, "must be between 0 and 100")

        if self.warning_threshold > self.passed_threshold:
            raise InvalidConfigError(
                "scoring.warning_threshold",
                self.warning_threshold,
                "must not exceed passed_threshold",
            )

        for name in ("test_coverage_target", "doc_coverage_target"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise InvalidConfigError(f"scoring.{name}", value, "must be between 0.0 and 1.0")

        if self.critical_penalty < 0 or self.warning_penalty < 0:
            raise InvalidConfigError(
                "scoring.penalties",
                (self.critical_penalty, self.warning_penalty),
                "penalties must be non-negative",
            )

        if self.status_rule not in STATUS_RULES:
            raise InvalidConfigError(
                "scoring.status_rule",
                self.status_rule,
                f"expected one of {', '.join(STATUS_RULES)}",
            )


@dataclass(frozen=True)
class PageConfig:
    """Expected routes for the page validation category.

    Attributes:
        app_dir: Route directory (relative to ``base_path``)
        expected_routes: Routes that must resolve to a page file
        page_filename: File name that defines a route's page
    """

    app_dir: str = "src/app"
    expected_routes: list[str] = field(default_factory=lambda: ["/"])
    page_filename: str = "page.tsx"

    def __post_init__(self) -> None:
        for route in self.expected_routes:
            if not route.startswith("/"):
                raise InvalidConfigError("pages.expected_routes", route, "routes must start with '/'")


@dataclass(frozen=True)
class AuditConfig:
    """Configuration for an audit run.

    All fields have sensible defaults. Users typically override only a few
    fields via CLI flags or a config file.

    Attributes:
        Project:
            base_path: Project root every scan path is resolved against
            environment: Free-form label recorded in report metadata

        Reporting:
            output_dir: Directory for persisted report artifacts
            formats: Output formats (html, json, console)
            always_generate_report: Swallow persistence failures instead of raising

        Execution:
            run_categories: Categories to run (empty = all registered)
            skip_categories: Categories never run
            verbosity: Logging verbosity level

        Nested:
            scan: File discovery settings
            scoring: Thresholds and penalties
            pages: Page validation settings
    """

    base_path: str = "."
    environment: str = "development"

    output_dir: str = "./audit-reports"
    formats: list[str] = field(default_factory=lambda: list(REPORT_FORMATS))
    always_generate_report: bool = True

    run_categories: list[str] = field(default_factory=list)
    skip_categories: list[str] = field(default_factory=list)
    verbosity: Verbosity = "normal"

    scan: ScanConfig = field(default_factory=ScanConfig)
    scoring: ScoringConfig = field(default_factory=ScoringConfig)
    pages: PageConfig = field(default_factory=PageConfig)

    def __post_init__(self) -> None:
        for fmt in self.formats:
            if fmt not in REPORT_FORMATS:
                raise InvalidConfigError(
                    "formats", fmt, f"expected one of {', '.join(REPORT_FORMATS)}"
                )
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError("verbosity", self.verbosity, "expected quiet/normal/verbose")

    @property
    def base_dir(self) -> Path:
        """Resolved project root."""
        return Path(self.base_path).resolve()

    @property
    def output_path(self) -> Path:
        """Report directory, resolved against the project root when relative."""
        out = Path(self.output_dir)
        if out.is_absolute():
            return out
        return self.base_dir / out


_NESTED_SECTIONS = {
    "scan": ScanConfig,
    "scoring": ScoringConfig,
    "pages": PageConfig,
}


def load_config(config_file: Optional[Path] = None, **overrides) -> AuditConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so CLI options can be passed through as-is.

    Returns:
        Validated AuditConfig instance

    Raises:
        ConfigurationError: If a config file is invalid or missing
    """
    merged: dict = {}

    global_config = Path.home() / ".codebase-audit.toml"
    if global_config.exists():
        _merge(merged, _load_toml_checked(global_config, "global"))

    project_config = Path.cwd() / "codebase-audit.toml"
    if project_config.exists():
        _merge(merged, _load_toml_checked(project_config, "project"))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        _merge(merged, _load_toml_checked(config_file, "explicit"))

    _merge(merged, _load_env_vars())

    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    _merge(merged, {k: v for k, v in overrides.items() if v is not None})

    for section, cls in _NESTED_SECTIONS.items():
        value = merged.pop(section, None)
        if value is None:
            continue
        if isinstance(value, cls):
            merged[section] = value
        elif isinstance(value, dict):
            try:
                merged[section] = cls(**value)
            except TypeError as e:
                raise ConfigurationError(f"Invalid [{section}] config: {e}")
        else:
            raise InvalidConfigError(section, value, "expected a table")

    try:
        return AuditConfig(**merged)
    except TypeError as e:
        raise ConfigurationError(f"Invalid configuration: {e}")


def _merge(target: dict, source: dict) -> None:
    """Merge ``source`` into ``target``; nested section tables are merged key by key."""
    for key, value in source.items():
        if key in _NESTED_SECTIONS and isinstance(value, dict) and isinstance(target.get(key), dict):
            target[key] = {**target[key], **value}
        else:
            target[key] = value


def _load_toml_checked(path: Path, label: str) -> dict:
    try:
        return _load_toml_file(path)
    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigurationError(f"Invalid {label} config '{path}': {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from AUDIT_* environment variables.

    Only top-level scalar fields are read:
        AUDIT_BASE_PATH: str
        AUDIT_ENVIRONMENT: str
        AUDIT_OUTPUT_DIR: str
        AUDIT_ALWAYS_GENERATE_REPORT: bool (true/false/1/0)
        AUDIT_VERBOSITY: quiet/normal/verbose

    Returns:
        Dict of field_name -> parsed_value for any AUDIT_* vars found.
    """
    type_hints = get_type_hints(AuditConfig)

    result: dict[str, Any] = {}

    for field_name in AuditConfig.__dataclass_fields__:
        env_key = f"AUDIT_{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
            if parsed is not None:
                result[field_name] = parsed
        except ValueError as e:
            raise ConfigurationError(f"Invalid {env_key}: {e}")

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the correct type.

    Returns None for types that cannot be expressed as a single string
    (lists and nested sections).

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]
            origin = getattr(type_hint, "__origin__", None)

    if origin is list or type_hint is list:
        return None

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is float:
        return float(value)

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        ConfigurationError: If no TOML parser is available
        Exception: If TOML parsing fails
    """
    try:
        import tomllib
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ConfigurationError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        return tomllib.load(f)
