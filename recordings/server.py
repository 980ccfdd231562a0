import logging
import os
import sys

from gevent import pywsgi
from sqlalchemy.exc import SQLAlchemyError

from . import config
from .albums import Albums
from .app import create_app
from .database import Database

L = logging.getLogger("recordings.server")


def config_paths():
    if os.environ.get('RECORDINGS_CONFIG'):
        return [os.environ['RECORDINGS_CONFIG']]
    return config.DEFAULT_PATHS


def main(paths=None):
    cfg = config.read(paths or config_paths())
    config.setup_logging(cfg.log_level)

    try:
        db = Database(cfg.database_url)
        db.ping()
    except (SQLAlchemyError, ImportError) as e:
        L.critical(f"Database connectivity check failed, not starting: {e}")
        sys.exit(1)
    L.info("Connected!")

    app = create_app(Albums(db))
    app.debug = os.environ.get('FLASK_DEBUG', '0') == '1'
    server = pywsgi.WSGIServer((cfg.http_host, cfg.http_port), app)
    L.info(f"Listening on {cfg.http_host}:{cfg.http_port}")
    server.serve_forever()
