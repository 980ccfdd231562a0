import logging
import math
from decimal import Decimal

import sqlalchemy as sa
from sqlalchemy.exc import SQLAlchemyError

from .errors import QueryError, RowScanError, NotFound, InsertError
from .types import Album

L = logging.getLogger("recordings.albums")

ALL_ALBUMS = sa.text("SELECT id, title, artist, price FROM album")
ALBUMS_BY_ARTIST = sa.text("SELECT id, title, artist, price FROM album WHERE artist = :artist")
ALBUM_BY_ID = sa.text("SELECT id, title, artist, price FROM album WHERE id = :id")


def _number(value):
    if isinstance(value, bool):
        raise TypeError(f"expected a number, got {value!r}")
    if isinstance(value, (int, float, Decimal, str)):
        number = float(value)
        if not math.isfinite(number):
            raise ValueError(f"expected a finite number, got {value!r}")
        return number
    raise TypeError(f"expected a number, got {value!r}")


def scan(row, operation):
    """
    Decodes an (id, title, artist, price) row into an Album.
    """
    try:
        id, title, artist, price = row
        if isinstance(id, bool) or not isinstance(id, int):
            raise TypeError(f"expected an integer id, got {id!r}")
        for value in (title, artist):
            if not isinstance(value, str):
                raise TypeError(f"expected text, got {value!r}")
        return Album(id=id, title=title, artist=artist, price=_number(price))
    except (TypeError, ValueError, OverflowError) as e:
        raise RowScanError(operation, e) from e


class Albums:
    """
    Data access for the album table. All statements use bound parameters.
    """

    def __init__(self, db):
        self.db = db

    def _scan_all(self, operation, statement, **params):
        with self.db.session() as session:
            try:
                result = session.execute(statement, params)
            except SQLAlchemyError as e:
                raise QueryError(operation, e) from e
            albums = []
            try:
                for row in result:
                    albums.append(scan(row, operation))
            except SQLAlchemyError as e:
                # fetching failed partway through, the rows we have are incomplete
                raise QueryError(f"{operation} rows", e) from e
            finally:
                result.close()
        return albums

    def all(self):
        return self._scan_all("all_albums", ALL_ALBUMS)

    def by_artist(self, name):
        return self._scan_all(f"albums_by_artist {name!r}", ALBUMS_BY_ARTIST, artist=name)

    def by_id(self, id):
        operation = f"album_by_id {id}"
        with self.db.session() as session:
            try:
                row = session.execute(ALBUM_BY_ID, {"id": id}).first()
            except SQLAlchemyError as e:
                raise QueryError(operation, e) from e
        if row is None:
            raise NotFound(operation, "no such album")
        return scan(row, operation)

    def add(self, album):
        """
        Inserts title, artist and price of `album` and returns the id the
        database assigned. Any id already set on `album` is ignored.
        """
        operation = "add_album"
        statement = sa.insert(Album.__table__).values(
            title=album.title,
            artist=album.artist,
            price=album.price,
        )
        try:
            with self.db.session() as session:
                key = session.execute(statement).inserted_primary_key
        except SQLAlchemyError as e:
            raise InsertError(operation, e) from e
        if not key or key[0] is None:
            raise InsertError(operation, "no id was generated")
        L.info(f"Added album {key[0]}: {album}")
        return key[0]
