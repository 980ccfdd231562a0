from .album import Album
