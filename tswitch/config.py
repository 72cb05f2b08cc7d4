"""Loading of the themes and application-rule documents."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

import yaml

from tswitch.errors import ConfigParseError, ConfigReadError
from tswitch.logger import get_logger
from tswitch.paths import expand_path, get_rules_path, get_themes_path

logger = get_logger(__name__)

PropertyMap = Mapping[str, str]
ThemeTable = Mapping[str, PropertyMap]


@dataclass(frozen=True)
class ReplacementRule:
    """One regex find/replace tied to a theme property key.

    Attributes:
        key: Property to look up in the chosen theme.
        regex: Pattern matched against the target file's text.
        replace: Template whose first ``{}`` stands for the theme value.
    """

    key: str
    regex: str
    replace: str = ""


@dataclass(frozen=True)
class AppRule:
    """Rewrite instructions for one target application."""

    name: str
    path: str
    replacements: tuple[ReplacementRule, ...] = ()
    cmd: str | None = None


RuleSet = Mapping[str, AppRule]


@dataclass(frozen=True)
class Config:
    """Everything loaded from disk at startup."""

    themes: ThemeTable = field(default_factory=lambda: MappingProxyType({}))
    apps: RuleSet = field(default_factory=lambda: MappingProxyType({}))


def theme_names(themes: ThemeTable) -> list[str]:
    """Return theme names in ascending order.

    Args:
        themes: The loaded theme table.

    Returns:
        Sorted list of theme names.
    """
    return sorted(themes)


def load_config(themes_source: str | None = None, rules_source: str | None = None) -> Config:
    """Load both configuration documents.

    Args:
        themes_source: Path to the themes document (defaults to the config dir).
        rules_source: Path to the rules document (defaults to the config dir).

    Returns:
        The loaded configuration.

    Raises:
        ConfigReadError: If either file cannot be read.
        ConfigParseError: If either file is malformed.
        PathExpansionError: If a path cannot be expanded.
    """
    themes = load_themes(themes_source or get_themes_path())
    apps = load_rules(rules_source or get_rules_path())
    logger.info(f"Loaded {len(themes)} themes and {len(apps)} application rules")
    return Config(themes=themes, apps=apps)


def load_themes(source: str) -> ThemeTable:
    """Load the themes document.

    Args:
        source: Path to the themes document.

    Returns:
        Read-only mapping of theme name to property map.

    Raises:
        ConfigReadError: If the file cannot be read.
        ConfigParseError: If the document is not a mapping of mappings.
    """
    path, raw = _read_document(source)
    if not isinstance(raw, dict):
        raise ConfigParseError(f"error parsing {path.name}: expected a mapping of theme names")

    themes: dict[str, PropertyMap] = {}
    for name, properties in raw.items():
        if properties is None:
            properties = {}
        if not isinstance(properties, dict):
            raise ConfigParseError(f"error parsing {path.name}: theme {name!r} is not a mapping")

        values: dict[str, str] = {}
        for key, value in properties.items():
            coerced = "" if value is None else _coerce_scalar(value)
            if coerced is None:
                raise ConfigParseError(f"error parsing {path.name}: value of {key!r} in theme {name!r} is not a scalar")
            values[_unique_name(key, values, f"key in theme {name!r}", path.name)] = coerced
        themes[_unique_name(name, themes, "theme", path.name)] = MappingProxyType(values)

    logger.debug(f"Parsed {len(themes)} themes from {path}")
    return MappingProxyType(themes)


def load_rules(source: str) -> RuleSet:
    """Load the application-rule document.

    Args:
        source: Path to the rules document.

    Returns:
        Read-only mapping of application name to rule.

    Raises:
        ConfigReadError: If the file cannot be read.
        ConfigParseError: If the document is structurally invalid.
    """
    path, raw = _read_document(source)
    if not isinstance(raw, dict):
        raise ConfigParseError(f"error parsing {path.name}: expected a mapping of application names")

    apps: dict[str, AppRule] = {}
    for name, entry in raw.items():
        app_name = _unique_name(name, apps, "app", path.name)
        apps[app_name] = _parse_app_rule(app_name, entry, path.name)

    logger.debug(f"Parsed {len(apps)} application rules from {path}")
    return MappingProxyType(apps)


def _read_document(source: str) -> tuple[Path, object]:
    """Read and parse a YAML document.

    An empty document is treated as an empty mapping.

    Args:
        source: Path to the document, possibly starting with ``~``.

    Returns:
        Tuple of (expanded path, parsed document).
    """
    path = Path(expand_path(source))
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigReadError(f"error reading {path.name}: {exc}") from exc

    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigParseError(f"error parsing {path.name}: {exc}") from exc

    return path, {} if raw is None else raw


def _parse_app_rule(app_name: str, entry: object, filename: str) -> AppRule:
    """Build an AppRule from its raw mapping.

    Args:
        app_name: Name of the application.
        entry: Raw value from the document.
        filename: Document name used in error messages.

    Returns:
        The parsed rule.
    """
    if not isinstance(entry, dict):
        raise ConfigParseError(f"error parsing {filename}: app {app_name!r} is not a mapping")

    path = _coerce_scalar(entry.get("path"))
    if not path:
        raise ConfigParseError(f"error parsing {filename}: app {app_name!r} has no path")

    raw_replacements = entry.get("replacements") or []
    if not isinstance(raw_replacements, list):
        raise ConfigParseError(f"error parsing {filename}: replacements of app {app_name!r} must be a list")

    replacements: list[ReplacementRule] = []
    for index, item in enumerate(raw_replacements):
        if not isinstance(item, dict):
            raise ConfigParseError(f"error parsing {filename}: replacement #{index} of app {app_name!r} is not a mapping")
        replacements.append(
            ReplacementRule(
                key=_coerce_scalar(item.get("key")) or "",
                regex=_coerce_scalar(item.get("regex")) or "",
                replace=_coerce_scalar(item.get("replace")) or "",
            )
        )

    cmd = _coerce_scalar(entry.get("cmd")) or None

    return AppRule(name=app_name, path=path, replacements=tuple(replacements), cmd=cmd)


def _unique_name(name: object, seen: Mapping[str, object], kind: str, filename: str) -> str:
    """Convert a YAML key to a string, rejecting keys that collide once converted.

    YAML keeps `1` and `"1"` apart; both become "1" here.

    Args:
        name: Raw mapping key.
        seen: Entries already parsed at the same level.
        kind: What the key names, for the error message.
        filename: Document name used in error messages.

    Returns:
        The key as a string.
    """
    key = str(name)
    if key in seen:
        raise ConfigParseError(f"error parsing {filename}: duplicate {kind} {key!r}")
    return key


def _coerce_scalar(value: object) -> str | None:
    """Coerce a YAML scalar into a string.

    Args:
        value: Raw value to coerce.

    Returns:
        String value, or None for missing values and containers.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int | float):
        return str(value)
    return None
