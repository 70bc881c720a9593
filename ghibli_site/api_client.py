"""
Client for the Studio Ghibli API.

Each collection is fetched with a single GET request. A failed request is
logged and yields None for that collection only; the other collections are
unaffected. There is no retry and no backoff.

Usage:
    from ghibli_site.api_client import GhibliClient

    client = GhibliClient("https://ghibliapi.vercel.app")
    data = client.fetch_all_collections()
    print(len(data["films"] or []))
"""

import concurrent.futures
import logging
from typing import Dict, List, Optional

import requests

from .config import DEFAULT_API_BASE
from .models import COLLECTIONS

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 30  # seconds, per request
UA = "ghibli-site/1.0 (+https://ghibliapi.vercel.app)"


class GhibliClient:
    """Fetches the five API collections over one shared requests.Session."""

    def __init__(self, base_url: str = DEFAULT_API_BASE, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        if session is None:
            session = requests.Session()
            session.headers.update({"User-Agent": UA, "Accept": "application/json"})
        self.session = session

    def url_for(self, name: str) -> str:
        return f"{self.base_url}/{name}"

    def fetch_collection(self, name: str) -> Optional[List[dict]]:
        """
        Fetch one collection.

        Returns the decoded list, or None on a non-success status, a
        transport error, or a body that is not a JSON list.
        """
        url = self.url_for(name)
        try:
            resp = self.session.get(url, timeout=REQUEST_TIMEOUT)
            resp.raise_for_status()
            data = resp.json()
        except requests.RequestException as e:
            logger.error(f"Error fetching /{name}: {e}")
            return None
        except ValueError as e:
            logger.error(f"Error decoding /{name}: {e}")
            return None

        if not isinstance(data, list):
            logger.error(f"Error fetching /{name}: expected a list, got {type(data).__name__}")
            return None
        logger.debug(f"Fetched {len(data)} records from /{name}")
        return data

    def fetch_all_collections(self) -> Dict[str, Optional[List[dict]]]:
        """
        Fetch all five collections concurrently.

        Waits until every request has settled; each entry of the result is
        independently a list or None.
        """
        logger.info("Fetching data from Ghibli API...")
        results: Dict[str, Optional[List[dict]]] = {}
        with concurrent.futures.ThreadPoolExecutor(max_workers=len(COLLECTIONS)) as ex:
            futures = {ex.submit(self.fetch_collection, name): name for name in COLLECTIONS}
            for f in concurrent.futures.as_completed(futures):
                results[futures[f]] = f.result()

        failed = [name for name in COLLECTIONS if results.get(name) is None]
        if failed:
            logger.warning(f"Fetch finished with failures: {', '.join(failed)}")
        else:
            logger.info("Data fetched successfully")
        # Stable key order regardless of completion order
        return {name: results.get(name) for name in COLLECTIONS}


def fetch_collection(name: str, base_url: str = DEFAULT_API_BASE) -> Optional[List[dict]]:
    """Fetch one collection with a throwaway client."""
    return GhibliClient(base_url).fetch_collection(name)


def fetch_all_collections(base_url: str = DEFAULT_API_BASE) -> Dict[str, Optional[List[dict]]]:
    """Fetch all collections with a throwaway client."""
    return GhibliClient(base_url).fetch_all_collections()
