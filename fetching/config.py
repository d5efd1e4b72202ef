"""
Configuration for upstream source retrieval.

Defines the Roslyn source URLs, the compiler-message documentation
locations, and transport/concurrency settings. Every value can be
overridden through the environment; a .env file is loaded at module import
time via python-dotenv.
"""

import os

from dotenv import load_dotenv

# ---------------------------------------------------------------------------
# Load .env file (idempotent; does nothing if already loaded or missing)
# ---------------------------------------------------------------------------
load_dotenv()


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


# ---------------------------------------------------------------------------
# Roslyn sources
# ---------------------------------------------------------------------------
_ROSLYN_RAW_BASE: str = (
    "https://raw.githubusercontent.com/dotnet/roslyn/main/src/Compilers/CSharp/Portable"
)

ERROR_CODES_URL: str = os.getenv(
    "CATALOG_ERROR_CODES_URL", f"{_ROSLYN_RAW_BASE}/Errors/ErrorCode.cs"
)
ERROR_FACTS_URL: str = os.getenv(
    "CATALOG_ERROR_FACTS_URL", f"{_ROSLYN_RAW_BASE}/Errors/ErrorFacts.cs"
)
RESOURCES_URL: str = os.getenv(
    "CATALOG_RESOURCES_URL", f"{_ROSLYN_RAW_BASE}/CSharpResources.resx"
)

# ---------------------------------------------------------------------------
# Compiler-message documentation
# ---------------------------------------------------------------------------
# Raw markdown folder: holds toc.yml and one cs{code:04d}.md page per code
DOC_BASE_URL: str = os.getenv(
    "CATALOG_DOC_BASE_URL",
    "https://raw.githubusercontent.com/dotnet/docs/main/docs/csharp/"
    "language-reference/compiler-messages",
).rstrip("/")

# Public page linked from the report; formatted with code=<int>
DOC_URL_TEMPLATE: str = os.getenv(
    "CATALOG_DOC_URL_TEMPLATE",
    "https://learn.microsoft.com/en-us/dotnet/csharp/language-reference/"
    "compiler-messages/cs{code:04d}",
)

# ---------------------------------------------------------------------------
# Transport and concurrency
# ---------------------------------------------------------------------------
HTTP_TIMEOUT: float = float(os.getenv("CATALOG_HTTP_TIMEOUT", "30"))
MAX_WORKERS: int = max(1, int(os.getenv("CATALOG_MAX_WORKERS", "4")))
USER_AGENT: str = "diagnostic-catalog/0.1"

# ---------------------------------------------------------------------------
# Feature defaults (command-line flags override)
# ---------------------------------------------------------------------------
INCLUDE_LINKS: bool = _env_flag("CATALOG_INCLUDE_LINKS")
INCLUDE_DETAILS: bool = _env_flag("CATALOG_INCLUDE_DETAILS")


def doc_toc_url(base_url: str = DOC_BASE_URL) -> str:
    """Return the URL of the documentation table of contents."""
    return f"{base_url}/toc.yml"


def doc_page_url(code: int, base_url: str = DOC_BASE_URL) -> str:
    """Return the raw markdown URL of the documentation page for ``code``."""
    return f"{base_url}/cs{code:04d}.md"


def doc_link_for_code(code: int, template: str = DOC_URL_TEMPLATE) -> str:
    """Fill the public documentation link template with ``code``."""
    return template.format(code=code)
