from typing import List

import pathspec

from plengi_installer.exceptions import ConfigError


def build_ignore_patterns(skip_dirs: List[str], bundle_suffixes: List[str]) -> List[str]:
    """
    Translate directory exclusions into gitignore-style directory patterns.

    skip_dirs are matched by exact name (".git" -> ".git/"), bundle suffixes by
    ending (".xcodeproj" -> "*.xcodeproj/"), at any depth.
    """
    validate_skip_dirs(skip_dirs)
    validate_bundle_suffixes(bundle_suffixes)
    patterns = [f"{name.strip('/')}/" for name in skip_dirs]
    patterns.extend(f"*{suffix}/" for suffix in bundle_suffixes)
    return patterns


def build_ignore_spec(skip_dirs: List[str], bundle_suffixes: List[str]) -> pathspec.PathSpec:
    return pathspec.PathSpec.from_lines("gitignore", build_ignore_patterns(skip_dirs, bundle_suffixes))


def validate_skip_dirs(skip_dirs: List[str]) -> None:
    """
    Validate directory names excluded from the walk.

    Raises:
        ConfigError: If names are invalid or malformed.
    """
    if not isinstance(skip_dirs, list):
        raise ConfigError("Skip directories must be a list of strings")

    for name in skip_dirs:
        if not isinstance(name, str):
            raise ConfigError(f"Invalid skip directory: {name} (must be a string)")
        if not name.strip():
            raise ConfigError("Skip directories cannot be empty or whitespace-only")


def validate_bundle_suffixes(suffixes: List[str]) -> None:
    """
    Validate project bundle suffixes (e.g., ['.xcodeproj', '.xcworkspace']).

    Raises:
        ConfigError: If suffixes are invalid.
    """
    if not isinstance(suffixes, list):
        raise ConfigError("Bundle suffixes must be a list of strings")

    for suffix in suffixes:
        if not isinstance(suffix, str):
            raise ConfigError(f"Invalid bundle suffix: {suffix} (must be a string)")
        if not suffix.startswith('.'):
            raise ConfigError(f"Bundle suffix '{suffix}' must start with a dot (e.g., '.xcodeproj')")
        if len(suffix) < 2:
            raise ConfigError(f"Bundle suffix '{suffix}' is too short (minimum: 2 characters)")
