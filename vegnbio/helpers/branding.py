"""
Centralized branding configuration.

All user-visible brand identity (application name, icon files, color
palette and web-manifest fields) is declared once here as the frozen
``ICON_CONFIG`` descriptor. Build tooling and the web UI read it; nothing
writes to it.

Serialized form uses the camelCase field names of the web client
(``appName``, ``faviconIco``, ``appleTouch`` ...). Manifest fields keep the
snake_case names of the web-app-manifest standard.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

__all__ = [
    "ICON_CONFIG",
    "BrandingDescriptor",
    "ColorPalette",
    "DisplayMode",
    "HEX_COLOR_PATTERN",
    "IconSet",
    "ManifestConfig",
    "Orientation",
    "SEMVER_PATTERN",
]

HEX_COLOR_PATTERN = r"^#[0-9A-Fa-f]{6}$"
SEMVER_PATTERN = r"^\d+\.\d+\.\d+(?:-[0-9A-Za-z.-]+)?(?:\+[0-9A-Za-z.-]+)?$"

HexColor = Annotated[str, StringConstraints(pattern=HEX_COLOR_PATTERN)]
NonEmptyStr = Annotated[str, StringConstraints(min_length=1)]
SemVer = Annotated[str, StringConstraints(pattern=SEMVER_PATTERN)]


class DisplayMode(StrEnum):
    FULLSCREEN = "fullscreen"
    STANDALONE = "standalone"
    MINIMAL_UI = "minimal-ui"
    BROWSER = "browser"


class Orientation(StrEnum):
    """W3C screen orientation values accepted by the manifest."""

    ANY = "any"
    NATURAL = "natural"
    LANDSCAPE = "landscape"
    LANDSCAPE_PRIMARY = "landscape-primary"
    LANDSCAPE_SECONDARY = "landscape-secondary"
    PORTRAIT = "portrait"
    PORTRAIT_PRIMARY = "portrait-primary"
    PORTRAIT_SECONDARY = "portrait-secondary"


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")


class IconSet(_Frozen):
    """Icon file paths, relative to the asset bundle, keyed by role."""

    favicon: NonEmptyStr
    favicon_ico: NonEmptyStr = Field(alias="faviconIco")
    apple_touch: NonEmptyStr = Field(alias="appleTouch")
    android: NonEmptyStr
    web: NonEmptyStr

    def roles(self) -> list[tuple[str, str]]:
        """(role, filename) pairs in declaration order, camelCase role names."""
        return [
            (field.alias or name, getattr(self, name, None))
            for name, field in type(self).model_fields.items()
        ]


class ColorPalette(_Frozen):
    primary: HexColor
    accent: HexColor
    background: HexColor
    theme: HexColor

    def roles(self) -> list[tuple[str, str]]:
        return [(name, getattr(self, name, None)) for name in type(self).model_fields]


class ManifestConfig(_Frozen):
    """Fields copied verbatim into the generated manifest.json."""

    name: NonEmptyStr
    short_name: NonEmptyStr
    description: str = ""
    start_url: str = "."
    display: DisplayMode = DisplayMode.STANDALONE
    background_color: HexColor
    theme_color: HexColor
    orientation: Orientation = Orientation.ANY
    prefer_related_applications: bool = False


class BrandingDescriptor(_Frozen):
    app_name: NonEmptyStr = Field(alias="appName")
    app_description: NonEmptyStr = Field(alias="appDescription")
    app_version: SemVer = Field(alias="appVersion")
    icons: IconSet
    colors: ColorPalette
    manifest: ManifestConfig

    def to_dict(self) -> dict[str, Any]:
        """JSON-compatible dict with the client-side (camelCase) field names."""
        return self.model_dump(mode="json", by_alias=True)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BrandingDescriptor:
        """Build a descriptor from camelCase or snake_case keys.

        Raises pydantic.ValidationError on malformed data.
        """
        return cls.model_validate(data)


_APP_DESCRIPTION = "Application Veg'N Bio pour la restauration bio et végétarienne"

ICON_CONFIG: BrandingDescriptor = BrandingDescriptor(
    app_name="Veg'N Bio",
    app_description=_APP_DESCRIPTION,
    app_version="1.0.0",
    icons=IconSet(
        favicon="favicon.png",
        favicon_ico="favicon.ico",
        apple_touch="Icon-192.png",
        android="Icon-192.png",
        web="Icon-512.png",
    ),
    colors=ColorPalette(
        primary="#4CAF50",
        accent="#81C784",
        background="#FFFFFF",
        theme="#4CAF50",
    ),
    manifest=ManifestConfig(
        name="Veg'N Bio",
        short_name="VegnBio",
        description=_APP_DESCRIPTION,
        start_url=".",
        display=DisplayMode.STANDALONE,
        background_color="#4CAF50",
        theme_color="#4CAF50",
        orientation=Orientation.PORTRAIT_PRIMARY,
        prefer_related_applications=False,
    ),
)
