import copy
import json
from pathlib import Path

import pytest
import requests

from content_codegen.codegen.core.errors import SchemaError, SchemaProviderError
from content_codegen.provider import (
    DELIVERY_URL,
    PREVIEW_DELIVERY_URL,
    DeliveryClient,
    FileSchemaProvider,
    load_content_types,
)


class FakeResponse:
    def __init__(self, payload=None, status_code=200, text=None):
        self.payload = payload
        self.status_code = status_code
        self.text = text

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code}", response=self)

    def json(self):
        if self.text is not None:
            return json.loads(self.text)
        return self.payload


class FakeSession:
    """Replays responses per URL and records the requests made."""

    def __init__(self, responses):
        self.responses = responses
        self.requests = []

    def get(self, url, headers=None, timeout=None):
        self.requests.append((url, headers, timeout))
        response = self.responses[url]
        if isinstance(response, Exception):
            raise response
        return response


PROJECT_ID = "975bf280-fd91-488c-994c-2f04416e5ee3"
TYPES_URL = f"{DELIVERY_URL}/{PROJECT_ID}/types"


def test_fetch_single_page(types_response) -> None:
    session = FakeSession({TYPES_URL: FakeResponse(types_response)})
    client = DeliveryClient(PROJECT_ID, session=session)

    content_types = client.fetch_content_types()

    assert [t.codename for t in content_types] == ["article", "coffee"]
    assert list(content_types[0].elements)[:2] == ["title", "post_date"]
    url, headers, timeout = session.requests[0]
    assert url == TYPES_URL
    assert headers == {"Accept": "application/json"}
    assert timeout == 30


def test_fetch_follows_pagination(types_response) -> None:
    next_url = f"{TYPES_URL}?skip=1"
    first = copy.deepcopy(types_response)
    first["types"] = first["types"][:1]
    first["pagination"]["next_page"] = next_url
    second = copy.deepcopy(types_response)
    second["types"] = second["types"][1:]

    session = FakeSession({TYPES_URL: FakeResponse(first), next_url: FakeResponse(second)})
    content_types = DeliveryClient(PROJECT_ID, session=session).fetch_content_types()

    assert [t.codename for t in content_types] == ["article", "coffee"]
    assert [r[0] for r in session.requests] == [TYPES_URL, next_url]


def test_pagination_loop_is_an_error(types_response) -> None:
    looping = copy.deepcopy(types_response)
    looping["pagination"]["next_page"] = TYPES_URL
    session = FakeSession({TYPES_URL: FakeResponse(looping)})

    with pytest.raises(SchemaProviderError, match="loops back"):
        DeliveryClient(PROJECT_ID, session=session).fetch_content_types()


def test_preview_key_selects_preview_api(types_response) -> None:
    preview_url = f"{PREVIEW_DELIVERY_URL}/{PROJECT_ID}/types"
    session = FakeSession({preview_url: FakeResponse(types_response)})
    client = DeliveryClient(PROJECT_ID, preview_api_key="secret", session=session)

    client.fetch_content_types()

    assert session.requests[0][1]["Authorization"] == "Bearer secret"


@pytest.mark.parametrize(
    "response, message",
    [
        (FakeResponse(status_code=404), "HTTP error 404"),
        (requests.exceptions.Timeout(), "timeout"),
        (requests.exceptions.ConnectionError(), "Connection error"),
        (FakeResponse(text="<html>"), "Invalid JSON"),
    ],
)
def test_request_failures(response, message) -> None:
    client = DeliveryClient(PROJECT_ID, session=FakeSession({TYPES_URL: response}))

    with pytest.raises(SchemaProviderError, match=message):
        client.fetch_content_types()


def test_malformed_payload() -> None:
    session = FakeSession({TYPES_URL: FakeResponse({"items": []})})

    with pytest.raises(SchemaError):
        DeliveryClient(PROJECT_ID, session=session).fetch_content_types()


def test_client_validation() -> None:
    with pytest.raises(SchemaProviderError):
        DeliveryClient("")
    with pytest.raises(SchemaProviderError, match="Invalid URL"):
        DeliveryClient(PROJECT_ID, base_url="not a url")


def test_load_content_types(tmp_path: Path, types_response) -> None:
    path = tmp_path / "types.json"
    path.write_text(json.dumps(types_response), encoding="utf-8")

    content_types = FileSchemaProvider(path).fetch_content_types()

    assert [t.codename for t in content_types] == ["article", "coffee"]
    coffee = content_types[1]
    assert coffee.name == "Coffee"
    assert coffee.elements["processing"].type_tag == "multiple_choice"


def test_load_content_types_errors(tmp_path: Path) -> None:
    with pytest.raises(SchemaProviderError, match="File not found"):
        load_content_types(tmp_path / "missing.json")

    broken = tmp_path / "broken.json"
    broken.write_text("{", encoding="utf-8")
    with pytest.raises(SchemaProviderError, match="Invalid JSON"):
        load_content_types(broken)

    no_system = tmp_path / "no_system.json"
    no_system.write_text(json.dumps([{"elements": {}}]), encoding="utf-8")
    with pytest.raises(SchemaError, match="system.codename"):
        load_content_types(no_system)
