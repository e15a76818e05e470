import logging
import sys

from . import __version__, settings
from .exceptions import MetadataFetchError
from .providers import InstanceMetadataProvider, create_provider
from .sources import INSTANCE_TYPE_SOURCES
from .web import create_app

LOG_LEVEL = settings.LOG_LEVEL
if hasattr(logging, LOG_LEVEL):
    log_level = getattr(logging, LOG_LEVEL)
else:
    log_level = logging.INFO

logging.basicConfig(stream=sys.stdout, level=log_level, format="%(asctime)s [%(levelname)s] (%(name)s) %(funcName)s: %(message)s")

# reduce logging output from noisy packages
logging.getLogger("requests").setLevel(logging.WARNING)
logging.getLogger("urllib3").setLevel(logging.WARNING)

logger = logging.getLogger("cli")


def log_startup(provider: InstanceMetadataProvider) -> None:
    """Log the host metadata, an unavailable instance type is looked up again on page render"""
    logger.info(f"instancemeta version: {__version__}")
    try:
        logger.info(f"instance_type: {provider.get_instance_type()}")
    except MetadataFetchError as e:
        logger.warning(f"instance type not available at start-up: {e}")
    logger.info(f"architecture: {provider.get_architecture()} (graviton={provider.is_graviton_instance()})")


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Serve pages showing the host instance metadata")
    parser.add_argument("--host", dest="host", default="127.0.0.1", help="Address to bind [DEFAULT=127.0.0.1]")
    parser.add_argument("--port", dest="port", type=int, default=8080, help="Port to bind [DEFAULT=8080]")
    parser.add_argument(
        "-s",
        "--source",
        dest="source",
        default=settings.INSTANCE_TYPE_SOURCE,
        choices=[k for k in INSTANCE_TYPE_SOURCES.keys()],
        help=f"Instance type source [DEFAULT={settings.INSTANCE_TYPE_SOURCE}]",
    )
    parser.add_argument("--debug", dest="debug", action="store_true")
    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    provider = create_provider(args.source)
    log_startup(provider)

    app = create_app(provider)
    app.run(host=args.host, port=args.port, debug=args.debug)
