"""
Recommendation Service API Constants

Endpoints, timeouts and image sizes used when talking to the external
mood-to-movie recommendation service and the TMDB image CDN.
"""


class APIConfig:
    """Recommendation service connection defaults."""

    DEFAULT_BASE_URL = "http://127.0.0.1:8000"
    DEFAULT_TIMEOUT_MS = 8000
    USER_AGENT = "Moodflix/0.1.0"


class Endpoints:
    """Service endpoint paths."""

    HEALTH = "/health"
    RECOMMENDATIONS = "/recommendations/"
    MOVIE_DETAILS = "/movie/{movie_id}"


class ImageConfig:
    """TMDB image CDN configuration."""

    DEFAULT_BASE_URL = "https://image.tmdb.org/t/p"
    POSTER_SIZE = "w500"
    BACKDROP_SIZE = "original"
    PROFILE_SIZE = "w185"


class VideoConfig:
    """Trailer/teaser link configuration."""

    YOUTUBE_WATCH_URL = "https://www.youtube.com/watch?v={key}"


class ErrorBodyFields:
    """Field names of structured error bodies returned by the service."""

    ERROR = "error"
    MESSAGE = "message"
    STATUS = "status"
    DETAIL = "detail"
