"""HTTP adapter – REST remote collection on an async httpx client."""
from paged_cursor.adapters.http.client import HttpClient, HttpxHttpClient
from paged_cursor.adapters.http.collection import HttpRemoteCollection

__all__ = ["HttpClient", "HttpRemoteCollection", "HttpxHttpClient"]
