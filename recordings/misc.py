import json
import re
from functools import wraps

import flask

from .errors import InputParseError

INT64_MIN = -2 ** 63
INT64_MAX = 2 ** 63 - 1
_integer = re.compile(r"[+-]?[0-9]+")


def json_response(ret, status=None):
    return flask.Response(
        json.dumps(ret, ensure_ascii=False, allow_nan=False, separators=(',', ':')),
        status=status,
        headers={
            "Content-Type": "application/json; charset=utf-8",
        }
    )


def json_api(fn):
    @wraps(fn)
    def wrapper(*args, **kwargs):
        ret = fn(*args, **kwargs)
        status = None
        if isinstance(ret, flask.Response):
            return ret
        if isinstance(ret, tuple):
            status = ret[1]
            ret = ret[0]
        return json_response(ret, status)

    return wrapper


def with_albums(fn):
    """
	Injects an argument `albums` holding the data access object the current app was created with.
	"""

    @wraps(fn)
    def wrapper(*args, **kwargs):
        if "albums" in kwargs:
            raise RuntimeError("An albums argument already exists!")
        kwargs["albums"] = flask.current_app.config["ALBUMS"]
        return fn(*args, **kwargs)

    return wrapper


def parse_id(raw):
    """
    Parses a base-10 signed 64-bit integer, rejecting whitespace, underscores and non-ASCII digits.
    """
    if not _integer.fullmatch(raw):
        raise InputParseError(f"parse_id {raw!r}", "not a base-10 integer", message="invalid album id")
    value = int(raw, 10)
    if not INT64_MIN <= value <= INT64_MAX:
        raise InputParseError(f"parse_id {raw!r}", "out of range", message="invalid album id")
    return value
