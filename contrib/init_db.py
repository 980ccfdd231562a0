#!/usr/bin/env python3
"""
Creates the album table on the configured database. With --seed, also
inserts the sample albums.
"""
import argparse

from recordings import config
from recordings.albums import Albums
from recordings.database import Base, Database
from recordings.server import config_paths
from recordings.types import Album

SAMPLE_ALBUMS = (
    ('Blue Train', 'John Coltrane', 56.99),
    ('Giant Steps', 'John Coltrane', 63.99),
    ('Jeru', 'Gerry Mulligan', 17.99),
    ('Sarah Vaughan', 'Sarah Vaughan', 34.98),
)

parser = argparse.ArgumentParser(description=__doc__)
parser.add_argument('--seed', action='store_true', help='insert the sample albums')
parser.add_argument('--echo', action='store_true', help='log the emitted SQL')
args = parser.parse_args()

cfg = config.read(config_paths())
config.setup_logging(cfg.log_level)
db = Database(cfg.database_url)
db.engine.echo = args.echo
Base.metadata.create_all(bind=db.engine)

if args.seed:
    albums = Albums(db)
    for title, artist, price in SAMPLE_ALBUMS:
        albums.add(Album(title=title, artist=artist, price=price))
