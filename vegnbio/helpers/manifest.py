"""Web App Manifest generation from the branding descriptor.

Produces the ``manifest.json`` document browsers read to install the app
on a home screen, plus JSON (de)serialization of the descriptor itself.
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any

from PIL import Image, UnidentifiedImageError

from vegnbio.helpers.branding import BrandingDescriptor

logger = logging.getLogger(__name__)

# Roles that belong in the manifest "icons" array. Favicons are linked
# from the HTML head instead.
MANIFEST_ICON_ROLES = ("android", "apple_touch", "web")

MIME_TYPES = {
    ".png": "image/png",
    ".ico": "image/x-icon",
    ".svg": "image/svg+xml",
    ".webp": "image/webp",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
}

_WXH_RE = re.compile(r"(\d+)x(\d+)$", re.IGNORECASE)
_SQUARE_RE = re.compile(r"[-_](\d+)$")


def icon_mime_type(filename: str) -> str:
    return MIME_TYPES.get(Path(filename).suffix.lower(), "application/octet-stream")


def icon_sizes(filename: str, assets_dir: str | Path | None = None) -> str | None:
    """Return the manifest ``sizes`` value ("WxH") for an icon file.

    Reads the real dimensions when the file is in ``assets_dir``, otherwise
    infers them from the file name (``Icon-192.png``, ``logo_64x64.png``).
    """
    if assets_dir is not None:
        path = Path(assets_dir) / filename
        if path.is_file() and path.suffix.lower() != ".svg":
            try:
                with Image.open(path) as img:
                    width, height = img.size
                return f"{width}x{height}"
            except (UnidentifiedImageError, OSError):
                logger.debug("Cannot read %s, inferring size from its name", path)

    stem = Path(filename).stem
    match = _WXH_RE.search(stem)
    if match:
        return f"{int(match.group(1))}x{int(match.group(2))}"
    match = _SQUARE_RE.search(stem)
    if match:
        size = int(match.group(1))
        return f"{size}x{size}"

    logger.debug("No size known for icon %s", filename)
    return None


def _manifest_icons(
    descriptor: BrandingDescriptor,
    icon_base_url: str,
    assets_dir: str | Path | None,
) -> list[dict[str, str]]:
    icons = []
    seen = set()
    for role in MANIFEST_ICON_ROLES:
        filename = getattr(descriptor.icons, role)
        if filename in seen:
            continue
        seen.add(filename)

        entry = {"src": f"{icon_base_url}{filename}"}
        sizes = icon_sizes(filename, assets_dir)
        if sizes:
            entry["sizes"] = sizes
        entry["type"] = icon_mime_type(filename)
        icons.append(entry)
    return icons


def build_manifest(
    descriptor: BrandingDescriptor,
    icon_base_url: str = "",
    assets_dir: str | Path | None = None,
) -> dict[str, Any]:
    """Build the web-app-manifest dict for ``descriptor``.

    ``icon_base_url`` is prepended to each icon file name in ``src``.
    """
    manifest = descriptor.manifest.model_dump(mode="json")
    manifest["icons"] = _manifest_icons(descriptor, icon_base_url, assets_dir)
    return manifest


def manifest_json(
    descriptor: BrandingDescriptor,
    icon_base_url: str = "",
    assets_dir: str | Path | None = None,
) -> str:
    return json.dumps(
        build_manifest(descriptor, icon_base_url, assets_dir),
        indent=2,
        ensure_ascii=False,
    )


def write_manifest(
    descriptor: BrandingDescriptor,
    output_path: str | Path,
    icon_base_url: str = "",
    assets_dir: str | Path | None = None,
) -> Path:
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        manifest_json(descriptor, icon_base_url, assets_dir) + "\n", encoding="utf-8"
    )
    logger.info("Wrote web manifest to %s", path)
    return path


def descriptor_to_json(descriptor: BrandingDescriptor) -> str:
    return json.dumps(descriptor.to_dict(), indent=2, ensure_ascii=False)


def descriptor_from_json(text: str) -> BrandingDescriptor:
    return BrandingDescriptor.from_dict(json.loads(text))
