"""Services module for Moodflix.

This module contains the HTTP client for the recommendation service, the
search/pagination coordinator, the navigation state bridge and the detail
view loader.
"""

from .api import RecommendationApi
from .details import DetailLoader
from .health import HealthProbe
from .http_client import HttpClient, HttpResponse, decode_error_response
from .navigation import NavigationStateBridge, ScrollableView
from .page_cache import PageCache
from .routes import Navigator, Route, detail_url, list_url, parse_url
from .search import MountSource, SearchCoordinator, SearchStatus

__all__ = [
    "DetailLoader",
    "HealthProbe",
    "HttpClient",
    "HttpResponse",
    "MountSource",
    "Navigator",
    "NavigationStateBridge",
    "PageCache",
    "RecommendationApi",
    "Route",
    "ScrollableView",
    "SearchCoordinator",
    "SearchStatus",
    "decode_error_response",
    "detail_url",
    "list_url",
    "parse_url",
]
