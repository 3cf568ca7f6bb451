"""Schema providers for content type definitions.

This module fetches the content type listing from the Delivery API, or
loads a saved copy of it from disk, with proper error handling and
validation.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional
from urllib.parse import urlparse

import requests

from .codegen.core.errors import SchemaProviderError
from .codegen.core.schema import ContentType, parse_content_types
from .logging_config import get_logger

logger = get_logger(__name__)

DELIVERY_URL = "https://deliver.kenticocloud.com"
PREVIEW_DELIVERY_URL = "https://preview-deliver.kenticocloud.com"


class DeliveryClient:
    """Minimal Delivery API client for the content type listing."""

    def __init__(
        self,
        project_id: str,
        base_url: Optional[str] = None,
        preview_api_key: Optional[str] = None,
        timeout: int = 30,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialize the client.

        Args:
            project_id: Project identifier from the content management account.
            base_url: Delivery endpoint, defaults to the public (or preview) API.
            preview_api_key: Key for the preview API, sent as a bearer token.
            timeout: Request timeout in seconds.
            session: Requests session to use, mainly for tests.
        """
        if not project_id:
            raise SchemaProviderError("A project id is required")

        self.project_id = project_id
        self.preview_api_key = preview_api_key
        self.base_url = (
            base_url or (PREVIEW_DELIVERY_URL if preview_api_key else DELIVERY_URL)
        ).rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

        parsed_url = urlparse(self.base_url)
        if not all([parsed_url.scheme, parsed_url.netloc]):
            raise SchemaProviderError(f"Invalid URL: {self.base_url}")

    @property
    def types_url(self) -> str:
        return f"{self.base_url}/{self.project_id}/types"

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.preview_api_key:
            headers["Authorization"] = f"Bearer {self.preview_api_key}"
        return headers

    def _get_json(self, url: str) -> Any:
        logger.debug(f"Requesting {url}")
        try:
            response = self.session.get(url, headers=self._headers(), timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except requests.exceptions.Timeout as e:
            logger.error(f"Request timeout for URL: {url}")
            raise SchemaProviderError(f"Request timeout for URL: {url}") from e
        except requests.exceptions.ConnectionError as e:
            logger.error(f"Connection error for URL {url}: {e}")
            raise SchemaProviderError(f"Connection error for URL: {url}") from e
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else "unknown"
            logger.error(f"HTTP error {status} for URL: {url}")
            raise SchemaProviderError(f"HTTP error {status} for URL: {url}") from e
        except requests.exceptions.JSONDecodeError as e:
            logger.error(f"Invalid JSON response from URL {url}: {e}", exc_info=True)
            raise SchemaProviderError(f"Invalid JSON response from URL {url}: {e}") from e
        except requests.exceptions.RequestException as e:
            logger.error(f"Request error for URL {url}: {e}", exc_info=True)
            raise SchemaProviderError(f"Request error for URL {url}: {e}") from e
        except ValueError as e:
            logger.error(f"Invalid JSON response from URL {url}: {e}", exc_info=True)
            raise SchemaProviderError(f"Invalid JSON response from URL {url}: {e}") from e

    def fetch_content_types(self) -> List[ContentType]:
        """Fetch every content type, following pagination.

        Returns:
            Content types in the order the API lists them.

        Raises:
            SchemaProviderError: If a request fails or a response is malformed.
        """
        content_types: List[ContentType] = []
        url: Optional[str] = self.types_url
        seen_urls = set()

        while url:
            if url in seen_urls:
                raise SchemaProviderError(f"Pagination loops back to {url}")
            seen_urls.add(url)

            payload = self._get_json(url)
            content_types.extend(parse_content_types(payload))

            pagination = payload.get("pagination") if isinstance(payload, dict) else None
            pagination = pagination or {}
            url = pagination.get("next_page") or None

        logger.info(
            f"Fetched {len(content_types)} content types for project {self.project_id}"
        )
        return content_types


class FileSchemaProvider:
    """Provider that reads a saved ``/types`` response."""

    def __init__(self, file_path: str | Path) -> None:
        self.file_path = Path(file_path)

    def fetch_content_types(self) -> List[ContentType]:
        return load_content_types(self.file_path)


def load_content_types(file_path: str | Path) -> List[ContentType]:
    """Load content types from a saved ``/types`` JSON document.

    Args:
        file_path: Path to the JSON file.

    Returns:
        Parsed content types in file order.

    Raises:
        SchemaProviderError: If the file is missing, unreadable or malformed.
    """
    file_path = Path(file_path)
    logger.debug(f"Attempting to load content types from file: {file_path}")

    if not file_path.exists():
        logger.error(f"File not found: {file_path}")
        raise SchemaProviderError(f"File not found: {file_path}")

    try:
        with file_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in file {file_path}: {e}", exc_info=True)
        raise SchemaProviderError(f"Invalid JSON in file {file_path}: {e}") from e
    except OSError as e:
        logger.error(f"Error reading file {file_path}: {e}", exc_info=True)
        raise SchemaProviderError(f"Error reading file {file_path}: {e}") from e

    content_types = parse_content_types(data)
    logger.info(f"Loaded {len(content_types)} content types from {file_path}")
    return content_types
