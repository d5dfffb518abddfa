"""
Resource-name tokens derived from class names.
"""
import re

_UPPER_NOT_FIRST = re.compile(r'(?<!^)([A-Z])')


def resource_name(type_name: str) -> str:
    """
    Convert an UpperCamelCase type name to its resource token.

    An underscore goes before every uppercase letter except a leading one,
    then the whole name is lowercased::

        Song      -> song
        SongAlbum -> song_album
        ASong     -> a_song
    """
    return _UPPER_NOT_FIRST.sub(r'_\1', type_name).lower()
