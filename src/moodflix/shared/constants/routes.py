"""
Addressable View Constants

Paths and query parameter names of the list and detail views.
"""


class RoutePaths:
    """View paths."""

    LIST = "/"
    DETAIL = "/movie_info"


class QueryParams:
    """Query parameter names."""

    MOOD = "mood"
    MOVIE_ID = "id"
