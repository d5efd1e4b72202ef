"""
Upstream text retrieval.

Provides the HTTP fetcher shared by every extraction pass and the URLs of
the Roslyn sources and compiler-message documentation it reads.
"""

from fetching.client import SourceTextFetcher, TextSource
from fetching.config import doc_link_for_code, doc_page_url, doc_toc_url

__all__ = [
    "SourceTextFetcher",
    "TextSource",
    "doc_link_for_code",
    "doc_page_url",
    "doc_toc_url",
]
