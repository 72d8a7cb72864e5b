"""Shared pytest fixtures for the test suite."""

import pytest
from PIL import Image


@pytest.fixture
def assets_dir(tmp_path):
    """Asset bundle holding every icon the branding descriptor references."""
    icons = tmp_path / "icons"
    icons.mkdir()
    Image.new("RGBA", (32, 32), "#4CAF50").save(icons / "favicon.png")
    Image.new("RGBA", (32, 32), "#4CAF50").save(icons / "favicon.ico", format="ICO")
    Image.new("RGBA", (192, 192), "#4CAF50").save(icons / "Icon-192.png")
    Image.new("RGBA", (512, 512), "#4CAF50").save(icons / "Icon-512.png")
    return icons
