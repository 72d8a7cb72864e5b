from vegnbio.helpers.api import ApiHandler, Input, Output, Request
from vegnbio.helpers.branding import ICON_CONFIG


class BrandingGet(ApiHandler):
    """Return branding configuration for the frontend."""

    @classmethod
    def get_methods(cls) -> list[str]:
        return ["GET"]

    async def process(self, input: Input, request: Request) -> Output:
        data = ICON_CONFIG.to_dict()
        return {
            "name": data["appName"],
            "description": data["appDescription"],
            "version": data["appVersion"],
            "icons": data["icons"],
            "colors": data["colors"],
        }
