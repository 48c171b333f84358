"""
Godot version descriptor.

Godot publishes releases as ``major.minor[.patch][-label]`` (for example
``4.2``, ``4.2.1``, ``4.3-rc1`` or ``4.1-dev.2``). The descriptor keeps every
field as a normalized string because the values are only ever pasted into
download URLs, archive filenames and folder names.

Usage:
    from godotenv.core.version import parse_version

    version = parse_version("4.2.1-rc.1")
    print(version.label)          # 'rc.1'
    print(version.label_no_dots)  # 'rc1'
"""

import re
from dataclasses import dataclass

from godotenv.core.exceptions import InvalidVersionError

# "4", "4.2", "4.2.1", "4.2.1-rc1", "4.2.1.stable", "v4.2-dev.2"
_VERSION_PATTERN = re.compile(
    r"""
    ^v?
    (?P<major>\d+)
    (?:\.(?P<minor>\d+))?
    (?:\.(?P<patch>\d+))?
    (?:[-.](?P<label>[A-Za-z][A-Za-z0-9.]*))?
    $
    """,
    re.VERBOSE,
)

STABLE_LABEL = "stable"


def _normalize_number(value: str) -> str:
    """Strip leading zeros ('01' -> '1') while keeping a lone '0'."""
    return str(int(value)) if value else ""


@dataclass(frozen=True)
class GodotVersion:
    """
    Immutable Godot version.

    Attributes:
        major: Major version number, always present (e.g. '4')
        minor: Minor version number or '' (e.g. '2')
        patch: Patch version number or '' (e.g. '1')
        label: Pre-release label or '' for stable releases (e.g. 'rc.1')
    """

    major: str
    minor: str = ""
    patch: str = ""
    label: str = ""

    @property
    def label_no_dots(self) -> str:
        """Label without dots, as used in download URLs and filenames."""
        return self.label.replace(".", "")

    @property
    def has_patch(self) -> bool:
        """True if the patch segment should appear in paths and URLs."""
        return self.patch not in ("", "0")

    @property
    def is_stable(self) -> bool:
        return self.label == ""

    def __str__(self) -> str:
        text = self.major
        if self.minor:
            text += f".{self.minor}"
        if self.patch:
            text += f".{self.patch}"
        if self.label:
            text += f"-{self.label}"
        return text


def parse_version(text: str) -> GodotVersion:
    """
    Parse a Godot version string.

    Args:
        text: Version string (e.g. '4.2.1', 'v4.3-rc1', '3.5.2.stable')

    Returns:
        GodotVersion instance

    Raises:
        InvalidVersionError: If the text is not a Godot version

    Example:
        >>> parse_version("4.2-stable")
        GodotVersion(major='4', minor='2', patch='', label='')
    """
    match = _VERSION_PATTERN.match(text.strip()) if text else None
    if match is None:
        raise InvalidVersionError(text)

    label = match.group("label") or ""
    if label.lower() == STABLE_LABEL:
        label = ""

    return GodotVersion(
        major=_normalize_number(match.group("major")),
        minor=_normalize_number(match.group("minor") or ""),
        patch=_normalize_number(match.group("patch") or ""),
        label=label,
    )


__all__ = ["GodotVersion", "parse_version", "STABLE_LABEL"]
