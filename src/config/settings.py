# src/config/settings.py

"""Central configuration for the storefront catalog browser."""

import os
from pathlib import Path

from curl_cffi.requests import BrowserTypeLiteral
from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Central configuration for the storefront catalog browser."""

    # --- Product API ---
    API_BASE_URL: str = os.getenv(
        "STOREFRONT_API_BASE_URL", "https://dummyjson.com"
    ).rstrip("/")
    CATEGORIES_PATH: str = "/products/categories"
    SEARCH_PATH: str = "/products/search"
    SEARCH_LIMIT: int = 100             # Server-side result cap per search

    # --- Requests ---
    # None means no timeout: a hung request leaves stale data on screen
    REQUEST_TIMEOUT: float | None = None
    IMPERSONATE_BROWSER: BrowserTypeLiteral = "chrome131"
    DEFAULT_HEADERS: dict[str, str] = {
        "Accept": "application/json",
        "Accept-Language": "en-US,en;q=0.9",
    }

    # --- Catalog view ---
    PAGE_SIZE: int = 12                 # Products per grid page
    MAX_CATEGORIES: int = 10            # Category tabs shown
    BRANDS: list[str] = [
        "Apple",
        "Samsung",
        "Huawei",
        "OPPO",
        "Microsoft",
    ]
    RATINGS: list[int] = [5, 4, 3, 2, 1]

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    LOGS_DIR: Path = BASE_DIR / "logs"
