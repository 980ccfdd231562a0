import logging
import math

import flask
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from .errors import AlbumError, NotFound, InputParseError
from .misc import json_api, json_response, with_albums, parse_id
from .types import Album

L = logging.getLogger("recordings.app")

api = flask.Blueprint("albums", __name__)


def create_app(albums):
    app = flask.Flask(__name__)
    app.config['ALBUMS'] = albums
    app.register_blueprint(api)
    app.before_request(request_logger)
    app.register_error_handler(Exception, error_handler)
    return app


def request_logger():
    L.info("Request: {} {}".format(flask.request.method, flask.request.path))


def error_handler(e):
    if isinstance(e, HTTPException):
        if e.code is None or e.code < 400:
            return e
        return json_response({"message": e.name.lower()}, e.code)
    L.error("Unhandled exception", exc_info=e)
    return json_response({"message": "internal error"}, 500)


def parse_album(body):
    """
    Builds an Album from a decoded request body. Missing or null fields
    default to empty strings and a zero price, any id is dropped.
    """
    def malformed(reason):
        return InputParseError("parse_album", reason, message="malformed album")

    if not isinstance(body, dict):
        raise malformed("body is not a JSON object")
    title = body.get("title")
    artist = body.get("artist")
    price = body.get("price")
    if title is None:
        title = ""
    if artist is None:
        artist = ""
    if price is None:
        price = 0
    if not isinstance(title, str) or not isinstance(artist, str):
        raise malformed("title and artist must be strings")
    if isinstance(price, bool) or not isinstance(price, (int, float)):
        raise malformed("price must be a number")
    if isinstance(price, float) and not math.isfinite(price):
        raise malformed("price must be a finite number")
    return Album(title=title, artist=artist, price=price)


@api.route("/albums")
@json_api
@with_albums
def list_albums(albums):
    artist = flask.request.args.get("artist")
    try:
        if artist is None:
            found = albums.all()
        else:
            found = albums.by_artist(artist)
    except AlbumError as e:
        L.exception(f"Listing albums failed: {e}")
        return e.json(), e.status
    return [album.json() for album in found]


@api.route("/albums/<id>")
@json_api
@with_albums
def get_album(id, albums):
    try:
        album_id = parse_id(id)
    except InputParseError as e:
        L.info(f"Rejected album id: {e}")
        return e.json(), e.status
    try:
        album = albums.by_id(album_id)
    except NotFound as e:
        return e.json(), e.status
    except AlbumError as e:
        L.exception(f"Looking up album failed: {e}")
        return e.json(), e.status
    return album.json()


@api.route("/albums", methods=["POST"])
@json_api
@with_albums
def create_album(albums):
    try:
        album = parse_album(flask.request.get_json(force=True, silent=True))
    except InputParseError as e:
        L.info(f"Rejected album: {e}")
        return e.json(), e.status
    try:
        album_id = albums.add(album)
    except AlbumError as e:
        L.exception(f"Adding album failed: {e}")
        return e.json(), e.status
    return album_id, 201


@api.route("/status")
@json_api
@with_albums
def status(albums):
    database = False
    try:
        database = albums.db.ping()
    except SQLAlchemyError:
        L.exception("Database check failed")
    return dict(database=database)
