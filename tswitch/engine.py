"""Theme application: rewrite target files and trigger reload commands."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable
from types import MappingProxyType

from tswitch.commands import run_command
from tswitch.config import AppRule, PropertyMap, ReplacementRule, RuleSet, ThemeTable
from tswitch.errors import FileIOError, InvalidRegexError
from tswitch.logger import get_logger
from tswitch.paths import expand_path

logger = get_logger(__name__)

PLACEHOLDER = "{}"

# rw-r--r-- for files created by the write
FILE_MODE = 0o644


def build_substitution(template: str, value: str) -> str:
    """Fill the first placeholder of a replacement template.

    Args:
        template: Replacement template, e.g. ``"color: {}"``.
        value: Resolved theme value.

    Returns:
        The template with its first ``{}`` replaced by ``value``.
    """
    return template.replace(PLACEHOLDER, value, 1)


def rewrite_text(
    text: str,
    replacements: Iterable[ReplacementRule],
    theme_values: PropertyMap,
    theme_name: str,
    app_name: str,
) -> str:
    """Apply replacement rules in order, each one feeding the next.

    Args:
        text: Current contents of the target file.
        replacements: Rules to apply.
        theme_values: Property map of the chosen theme.
        theme_name: Name of the chosen theme (for warnings).
        app_name: Application being processed (for errors).

    Returns:
        The rewritten text.

    Raises:
        InvalidRegexError: If a rule's pattern does not compile.
    """
    for rule in replacements:
        if rule.key not in theme_values:
            logger.warning(f"key '{rule.key}' not found in theme '{theme_name}'")
            continue

        try:
            pattern = re.compile(rule.regex)
        except re.error as exc:
            raise InvalidRegexError(rule.key, app_name, str(exc)) from exc

        # Backslashes in the value are literal; group references belong to the template
        value = theme_values[rule.key].replace("\\", "\\\\")
        substitution = build_substitution(rule.replace, value)
        try:
            text, count = pattern.subn(substitution, text)
        except re.error as exc:
            raise InvalidRegexError(rule.key, app_name, f"bad replacement {rule.replace!r}: {exc}") from exc
        logger.debug(f"{app_name}: {count} match(es) for key '{rule.key}'")

    return text


def _read_target(path: str, app_name: str) -> str:
    try:
        with open(path, encoding="utf-8", errors="surrogateescape", newline="") as handle:
            return handle.read()
    except OSError as exc:
        raise FileIOError("read", path, app_name, str(exc)) from exc


def _write_target(path: str, content: str, app_name: str) -> None:
    try:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
        with open(fd, "w", encoding="utf-8", errors="surrogateescape", newline="") as handle:
            handle.write(content)
    except OSError as exc:
        raise FileIOError("write", path, app_name, str(exc)) from exc


def apply_rule_to_app(app_name: str, rule: AppRule, theme_values: PropertyMap, theme_name: str) -> None:
    """Rewrite one application's target file and run its command.

    Args:
        app_name: Name of the application.
        rule: The application's rewrite rule.
        theme_values: Property map of the chosen theme.
        theme_name: Name of the chosen theme.

    Raises:
        PathExpansionError: If the target path cannot be expanded.
        FileIOError: If the target file cannot be read or written.
        InvalidRegexError: If a replacement pattern does not compile.
    """
    file_path = expand_path(rule.path)
    content = _read_target(file_path, app_name)

    modified = rewrite_text(content, rule.replacements, theme_values, theme_name, app_name)

    _write_target(file_path, modified, app_name)
    logger.info(f"Applied theme '{theme_name}' to {app_name} ({file_path})")

    if rule.cmd:
        run_command(rule.cmd, app_name)


def apply_theme(theme_name: str, themes: ThemeTable, apps: RuleSet) -> None:
    """Apply a theme to every configured application.

    Processing stops at the first fatal error; applications handled before it
    keep their rewritten files.

    Args:
        theme_name: Name of the chosen theme.
        themes: The loaded theme table.
        apps: The loaded application rules.

    Raises:
        PathExpansionError: If a target path cannot be expanded.
        FileIOError: If a target file cannot be read or written.
        InvalidRegexError: If a replacement pattern does not compile.
    """
    theme_values = themes.get(theme_name)
    if theme_values is None:
        logger.warning(f"theme '{theme_name}' not found, every key will be missing")
        theme_values = MappingProxyType({})

    logger.info(f"Applying theme '{theme_name}' to {len(apps)} application(s)")
    for app_name, rule in apps.items():
        apply_rule_to_app(app_name, rule, theme_values, theme_name)
