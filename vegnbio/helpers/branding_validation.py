"""Build-time checks for a branding descriptor.

The descriptor models already reject malformed literals when they are
built from data. These checks run again over finished descriptors (which
may come from ``model_construct`` or another source) and add the rule
the model cannot know about: every icon must exist in the asset bundle
as a readable image.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path, PurePosixPath
from typing import Any

from PIL import Image, UnidentifiedImageError
from pydantic import ValidationError

from vegnbio.helpers.branding import (
    HEX_COLOR_PATTERN,
    SEMVER_PATTERN,
    BrandingDescriptor,
    DisplayMode,
    Orientation,
)

logger = logging.getLogger(__name__)

_HEX_RE = re.compile(HEX_COLOR_PATTERN)
_SEMVER_RE = re.compile(SEMVER_PATTERN)


class BrandingValidationError(ValueError):
    def __init__(self, problems: list[str]):
        self.problems = list(problems)
        super().__init__(
            f"{len(self.problems)} branding problem(s): " + "; ".join(self.problems)
        )


def is_hex_color(value: Any) -> bool:
    return isinstance(value, str) and _HEX_RE.match(value) is not None


def _check_icon_path(role: str, filename: Any, assets_dir: Path | None) -> list[str]:
    if not isinstance(filename, str) or not filename.strip():
        return [f"icons.{role}: missing filename"]

    path = PurePosixPath(filename)
    if path.is_absolute() or ".." in path.parts:
        return [f"icons.{role}: '{filename}' must be a relative path inside the assets"]

    if assets_dir is None:
        return []

    full_path = assets_dir / path
    if not full_path.is_file():
        return [f"icons.{role}: '{filename}' not found in {assets_dir}"]

    if full_path.suffix.lower() != ".svg":
        try:
            with Image.open(full_path):
                pass
        except (UnidentifiedImageError, OSError):
            return [f"icons.{role}: '{filename}' is not a readable image"]
    return []


def _check_enum(label: str, value: Any, enum: type) -> list[str]:
    try:
        enum(value)
    except ValueError:
        allowed = ", ".join(member.value for member in enum)
        return [f"{label}: '{value}' is not one of {allowed}"]
    return []


def validate_descriptor(
    descriptor: BrandingDescriptor, assets_dir: str | Path | None = None
) -> list[str]:
    """Return a list of problems with ``descriptor``; empty when it is valid.

    When ``assets_dir`` is given, each icon path must resolve to a file
    under it.
    """
    problems: list[str] = []
    assets = Path(assets_dir) if assets_dir is not None else None

    for label, value in (
        ("appName", descriptor.app_name),
        ("appDescription", descriptor.app_description),
    ):
        if not isinstance(value, str) or not value.strip():
            problems.append(f"{label}: must be a non-empty string")

    if not isinstance(descriptor.app_version, str) or not _SEMVER_RE.match(
        descriptor.app_version
    ):
        problems.append(
            f"appVersion: '{descriptor.app_version}' is not a semantic version"
        )

    for role, filename in descriptor.icons.roles():
        problems.extend(_check_icon_path(role, filename, assets))

    for role, color in descriptor.colors.roles():
        if not is_hex_color(color):
            problems.append(f"colors.{role}: '{color}' is not a #RRGGBB color")

    manifest = descriptor.manifest
    for field in ("background_color", "theme_color"):
        color = getattr(manifest, field, None)
        if not is_hex_color(color):
            problems.append(f"manifest.{field}: '{color}' is not a #RRGGBB color")

    problems.extend(
        _check_enum(
            "manifest.display", getattr(manifest, "display", None), DisplayMode
        )
    )
    problems.extend(
        _check_enum(
            "manifest.orientation", getattr(manifest, "orientation", None), Orientation
        )
    )
    if not isinstance(getattr(manifest, "prefer_related_applications", None), bool):
        problems.append("manifest.prefer_related_applications: must be a boolean")

    for problem in problems:
        logger.warning("Branding check failed: %s", problem)
    return problems


def validate_data(
    data: dict[str, Any], assets_dir: str | Path | None = None
) -> list[str]:
    """Validate a raw descriptor mapping (e.g. parsed from JSON)."""
    try:
        descriptor = BrandingDescriptor.from_dict(data)
    except ValidationError as e:
        problems = []
        for error in e.errors():
            loc = ".".join(str(part) for part in error["loc"])
            problems.append(f"{loc}: {error['msg']}")
        for problem in problems:
            logger.warning("Branding check failed: %s", problem)
        return problems
    return validate_descriptor(descriptor, assets_dir)


def ensure_valid(
    descriptor: BrandingDescriptor, assets_dir: str | Path | None = None
) -> None:
    """Raise BrandingValidationError if ``descriptor`` has any problem."""
    problems = validate_descriptor(descriptor, assets_dir)
    if problems:
        raise BrandingValidationError(problems)
