import logging
from typing import Optional

from flask import Flask, current_app, jsonify, render_template_string

from . import __version__
from .providers import InstanceMetadataProvider, create_provider
from .views import build_view_model

logger = logging.getLogger("web")

EXTENSION_NAME = "instancemeta"

INDEX_TEMPLATE = """<!DOCTYPE html>
<html>
<head><title>Instance</title></head>
<body>
<h2>Instance</h2>
<table>
<tr><th>Instance type</th><td>{{ ec2InstanceType }}</td></tr>
<tr><th>Architecture</th><td>{{ osArch }}</td></tr>
<tr><th>Graviton</th><td>{% if isGravitonInstance %}yes{% else %}no{% endif %}</td></tr>
</table>
</body>
</html>
"""


def get_provider() -> InstanceMetadataProvider:
    return current_app.extensions[EXTENSION_NAME]


def register_instance_metadata(app: Flask, provider: InstanceMetadataProvider) -> None:
    """Make the provider values available to every template rendered by the app"""
    app.extensions[EXTENSION_NAME] = provider

    @app.context_processor
    def inject_instance_metadata() -> dict:
        return build_view_model(get_provider()).as_template_context()


def index():
    return render_template_string(INDEX_TEMPLATE)


def health():
    view_model = build_view_model(get_provider())
    return jsonify({"status": "ok", "version": __version__, **view_model._asdict()})


def create_app(provider: Optional[InstanceMetadataProvider] = None) -> Flask:
    """
    Build the Flask application.

    The provider is created once here (from settings unless given) and shared by all requests.
    """
    app = Flask(__name__)
    if provider is None:
        provider = create_provider()
    register_instance_metadata(app, provider)
    app.add_url_rule("/", "index", index)
    app.add_url_rule("/health", "health", health)
    return app
