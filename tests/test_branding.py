"""Tests for the branding descriptor."""

import re

import pytest
from pydantic import ValidationError

HEX = re.compile(r"^#[0-9A-Fa-f]{6}$")


class TestIconConfig:
    def test_app_identity(self):
        from vegnbio.helpers.branding import ICON_CONFIG

        assert ICON_CONFIG.app_name == "Veg'N Bio"
        assert ICON_CONFIG.app_version == "1.0.0"
        assert "restauration bio" in ICON_CONFIG.app_description

    def test_web_icon_and_theme_color(self):
        from vegnbio.helpers.branding import ICON_CONFIG

        assert ICON_CONFIG.icons.web == "Icon-512.png"
        assert ICON_CONFIG.manifest.theme_color == "#4CAF50"

    def test_all_colors_are_hex(self):
        from vegnbio.helpers.branding import ICON_CONFIG

        colors = [color for _, color in ICON_CONFIG.colors.roles()]
        colors += [
            ICON_CONFIG.manifest.background_color,
            ICON_CONFIG.manifest.theme_color,
        ]
        assert len(colors) == 6
        assert all(HEX.match(color) for color in colors)

    def test_all_icon_roles_present(self):
        from vegnbio.helpers.branding import ICON_CONFIG

        roles = dict(ICON_CONFIG.icons.roles())
        assert set(roles) == {"favicon", "faviconIco", "appleTouch", "android", "web"}
        assert all(roles.values())

    def test_display_and_orientation(self):
        from vegnbio.helpers.branding import ICON_CONFIG

        assert ICON_CONFIG.manifest.display in {
            "standalone",
            "fullscreen",
            "minimal-ui",
            "browser",
        }
        assert ICON_CONFIG.manifest.orientation == "portrait-primary"
        assert ICON_CONFIG.manifest.prefer_related_applications is False

    def test_exported(self):
        from vegnbio.helpers import branding

        assert "ICON_CONFIG" in branding.__all__


class TestImmutability:
    def test_top_level_assignment_rejected(self):
        from vegnbio.helpers.branding import ICON_CONFIG

        with pytest.raises(ValidationError):
            ICON_CONFIG.app_name = "Other"

    def test_nested_assignment_rejected(self):
        from vegnbio.helpers.branding import ICON_CONFIG

        with pytest.raises(ValidationError):
            ICON_CONFIG.colors.primary = "#000000"
        assert ICON_CONFIG.colors.primary == "#4CAF50"


class TestSerialization:
    def test_to_dict_uses_client_field_names(self):
        from vegnbio.helpers.branding import ICON_CONFIG

        data = ICON_CONFIG.to_dict()
        assert data["appName"] == "Veg'N Bio"
        assert data["icons"] == {
            "favicon": "favicon.png",
            "faviconIco": "favicon.ico",
            "appleTouch": "Icon-192.png",
            "android": "Icon-192.png",
            "web": "Icon-512.png",
        }
        assert data["colors"] == {
            "primary": "#4CAF50",
            "accent": "#81C784",
            "background": "#FFFFFF",
            "theme": "#4CAF50",
        }
        assert data["manifest"]["display"] == "standalone"
        assert data["manifest"]["short_name"] == "VegnBio"

    def test_from_dict_round_trip(self):
        from vegnbio.helpers.branding import ICON_CONFIG, BrandingDescriptor

        assert BrandingDescriptor.from_dict(ICON_CONFIG.to_dict()) == ICON_CONFIG

    def test_from_dict_accepts_snake_case(self):
        from vegnbio.helpers.branding import ICON_CONFIG, BrandingDescriptor

        data = ICON_CONFIG.model_dump()
        assert "app_name" in data
        assert BrandingDescriptor.from_dict(data) == ICON_CONFIG


class TestMalformedData:
    def _data(self):
        from vegnbio.helpers.branding import ICON_CONFIG

        return ICON_CONFIG.to_dict()

    def test_bad_hex_color(self):
        from vegnbio.helpers.branding import BrandingDescriptor

        data = self._data()
        data["colors"]["accent"] = "#81C78"
        with pytest.raises(ValidationError):
            BrandingDescriptor.from_dict(data)

    def test_unknown_display_mode(self):
        from vegnbio.helpers.branding import BrandingDescriptor

        data = self._data()
        data["manifest"]["display"] = "windowed"
        with pytest.raises(ValidationError):
            BrandingDescriptor.from_dict(data)

    def test_unknown_orientation(self):
        from vegnbio.helpers.branding import BrandingDescriptor

        data = self._data()
        data["manifest"]["orientation"] = "upside-down"
        with pytest.raises(ValidationError):
            BrandingDescriptor.from_dict(data)

    def test_missing_icon_role(self):
        from vegnbio.helpers.branding import BrandingDescriptor

        data = self._data()
        del data["icons"]["appleTouch"]
        with pytest.raises(ValidationError):
            BrandingDescriptor.from_dict(data)

    def test_empty_app_name(self):
        from vegnbio.helpers.branding import BrandingDescriptor

        data = self._data()
        data["appName"] = ""
        with pytest.raises(ValidationError):
            BrandingDescriptor.from_dict(data)

    def test_version_must_be_semver(self):
        from vegnbio.helpers.branding import BrandingDescriptor

        data = self._data()
        data["appVersion"] = "v1"
        with pytest.raises(ValidationError):
            BrandingDescriptor.from_dict(data)

        data["appVersion"] = "2.1.0-beta.1"
        assert BrandingDescriptor.from_dict(data).app_version == "2.1.0-beta.1"

    def test_unknown_field_rejected(self):
        from vegnbio.helpers.branding import BrandingDescriptor

        data = self._data()
        data["colors"]["secondary"] = "#000000"
        with pytest.raises(ValidationError):
            BrandingDescriptor.from_dict(data)
