import configparser
import logging
from typing import NamedTuple, Union

import sqlalchemy as sa

DEFAULT_PATHS = ['/etc/recordings/api.conf', 'recordings-api.conf']

DEFAULTS = {
    'database': {
        'url': '',
        'driver': 'postgresql+psycopg2',
        'host': '127.0.0.1',
        'port': '5432',
        'user': 'postgres',
        'password': '',
        'database': 'recordings',
    },
    'http': {
        'host': 'localhost',
        'port': '8080',
    },
    'logging': {
        'level': 'INFO',
    },
}

fmt = logging.Formatter("[%(asctime)s] %(levelname)s: %(filename)s:%(funcName)s(%(lineno)s): %(message)s")


class Config(NamedTuple):
    database_url: Union[str, sa.engine.URL]
    http_host: str
    http_port: int
    log_level: str


def read(paths=DEFAULT_PATHS) -> Config:
    """
    Reads the INI files in `paths`; files that don't exist are skipped and
    missing options fall back to DEFAULTS.
    """
    config = configparser.ConfigParser(interpolation=None)
    config.read_dict(DEFAULTS)
    config.read(paths)

    cfg_db: configparser.SectionProxy = config['database']
    database_url = cfg_db['url']
    if not database_url:
        database_url = sa.engine.URL.create(
            drivername=cfg_db['driver'],
            username=cfg_db['user'] or None,
            password=cfg_db['password'] or None,
            host=cfg_db['host'],
            port=int(cfg_db['port']),
            database=cfg_db['database'],
        )

    cfg_http: configparser.SectionProxy = config['http']
    return Config(
        database_url=database_url,
        http_host=cfg_http['host'],
        http_port=int(cfg_http['port']),
        log_level=config['logging']['level'].upper(),
    )


def setup_logging(level='INFO'):
    logger = logging.getLogger("recordings")
    logger.setLevel(level)
    if not logger.handlers:
        # stderr logging
        sh = logging.StreamHandler()
        sh.setFormatter(fmt)
        logger.addHandler(sh)
    for handler in logger.handlers:
        handler.setLevel(level)
    return logger
