import json
import logging
import os
import threading

import uvicorn
from flask import Flask, Response, request, send_from_directory
from uvicorn.middleware.wsgi import WSGIMiddleware
from werkzeug.wrappers.response import Response as BaseResponse

from vegnbio.api.branding_get import BrandingGet
from vegnbio.helpers import dotenv
from vegnbio.helpers.api import ApiHandler
from vegnbio.helpers.branding import ICON_CONFIG
from vegnbio.helpers.manifest import build_manifest

logging.getLogger().setLevel(logging.WARNING)
logger = logging.getLogger(__name__)

dotenv.load_dotenv()

ASSETS_DIR = os.path.abspath(dotenv.get_dotenv_value("BRAND_ASSETS_DIR"))
ICON_URL_PREFIX = "/icons/"

webapp = Flask("app")
webapp.json.sort_keys = False

lock = threading.RLock()

API_HANDLERS: list[type[ApiHandler]] = [BrandingGet]


@webapp.after_request
def add_security_headers(response):
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    return response


@webapp.route("/manifest.json")
async def manifest_json():
    manifest = build_manifest(
        ICON_CONFIG, icon_base_url=ICON_URL_PREFIX, assets_dir=ASSETS_DIR
    )
    return Response(
        json.dumps(manifest, indent=2, ensure_ascii=False),
        mimetype="application/manifest+json",
    )


@webapp.route("/icons/<path:filename>")
def serve_icon(filename):
    return send_from_directory(ASSETS_DIR, filename)


@webapp.route("/health")
def health():
    return {"status": "ok"}


def register_api_handler(app, handler: type[ApiHandler]):
    name = handler.__module__.split(".")[-1]
    instance = handler(app, lock)

    async def handler_wrap() -> BaseResponse:
        return await instance.handle_request(request=request)

    app.add_url_rule(
        f"/{name}",
        f"/{name}",
        handler_wrap,
        methods=handler.get_methods(),
    )


for _handler in API_HANDLERS:
    register_api_handler(webapp, _handler)


def run():
    host = dotenv.get_dotenv_value("WEB_UI_HOST")
    port = int(dotenv.get_dotenv_value("WEB_UI_PORT"))

    logger.warning("Serving %s on http://%s:%s", ICON_CONFIG.app_name, host, port)
    config = uvicorn.Config(
        WSGIMiddleware(webapp),
        host=host,
        port=port,
        log_level="info",
    )
    uvicorn.Server(config).run()


# run the internal server
if __name__ == "__main__":
    run()
