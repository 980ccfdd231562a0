import logging

import pytest
import sqlalchemy as sa

from . import config


def test_defaults(tmp_path):
    cfg = config.read([str(tmp_path / "missing.conf")])
    assert isinstance(cfg.database_url, sa.engine.URL)
    assert cfg.database_url.drivername == "postgresql+psycopg2"
    assert cfg.database_url.host == "127.0.0.1"
    assert cfg.database_url.port == 5432
    assert cfg.database_url.username == "postgres"
    assert cfg.database_url.password is None
    assert cfg.database_url.database == "recordings"
    assert (cfg.http_host, cfg.http_port) == ("localhost", 8080)
    assert cfg.log_level == "INFO"


def test_fields(tmp_path):
    path = tmp_path / "api.conf"
    path.write_text(
        "[database]\n"
        "driver = mysql+pymysql\n"
        "host = db.example\n"
        "port = 3306\n"
        "user = root\n"
        "password = p@ss%word\n"
        "\n"
        "[http]\n"
        "host = 0.0.0.0\n"
        "port = 9000\n"
        "\n"
        "[logging]\n"
        "level = debug\n"
    )
    cfg = config.read([str(path)])
    assert cfg.database_url.drivername == "mysql+pymysql"
    assert cfg.database_url.host == "db.example"
    assert cfg.database_url.port == 3306
    assert cfg.database_url.username == "root"
    assert cfg.database_url.password == "p@ss%word"
    assert cfg.database_url.database == "recordings"
    assert (cfg.http_host, cfg.http_port) == ("0.0.0.0", 9000)
    assert cfg.log_level == "DEBUG"


def test_url_overrides_fields(tmp_path):
    path = tmp_path / "api.conf"
    path.write_text("[database]\nurl = sqlite:///albums.db\nhost = ignored\n")
    assert config.read([str(path)]).database_url == "sqlite:///albums.db"


def test_bad_port(tmp_path):
    path = tmp_path / "api.conf"
    path.write_text("[http]\nport = eighty\n")
    with pytest.raises(ValueError):
        config.read([str(path)])


def test_setup_logging_is_idempotent():
    logger = config.setup_logging("WARNING")
    handlers = list(logger.handlers)
    assert config.setup_logging("DEBUG") is logger
    assert logger.handlers == handlers
    assert logger.level == logging.DEBUG
    assert all(h.level == logging.DEBUG for h in logger.handlers)
