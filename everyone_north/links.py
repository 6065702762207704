"""
Image search links for authors.
"""

from typing import Iterable, List
from urllib.parse import urlencode

from .models import AuthorRecord

SEARCH_BASE_URL = "https://www.google.com/search"
IMAGE_SEARCH_MODE = "isch"


def build_search_url(query: str) -> str:
    """Return an image search URL for ``query`` with parameters sorted by key."""
    params = {'tbm': IMAGE_SEARCH_MODE, 'q': query}
    return f"{SEARCH_BASE_URL}?{urlencode(sorted(params.items()))}"


def generate_search_urls(authors: Iterable[AuthorRecord], repo_name: str) -> List[AuthorRecord]:
    """Return complete copies of ``authors`` carrying ``repo_name`` and a search URL."""
    linked = []
    for author in authors:
        search_url = build_search_url(f"{author.name} {repo_name}")
        linked.append(author.with_link(repo_name, search_url))
    return linked
