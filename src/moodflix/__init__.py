"""
Moodflix - mood-based movie recommendation client

Searches a remote recommendation service by mood, accumulates paginated
results with a persistent page cache, and shows movie details, with list
state restored when navigating back from a detail view.
"""

__version__ = "0.1.0"
