"""Pytest configuration and shared fixtures."""

import json
import uuid

import httpx
import pytest

from bincli.core.api_client import BinClient
from bincli.core.config import CLIConfig
from bincli.core.storage import MemoryStorage

MASTER_KEY = "$2a$10$test-master-key"
BASE_URL = "https://api.jsonbin.io/v3"


class FakeJsonBin:
    """In-process stand-in for the JSONBin.io v3 bin endpoints."""

    def __init__(self, master_key: str = MASTER_KEY):
        self.master_key = master_key
        self.bins: dict[str, bytes] = {}
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if request.headers.get("X-Master-Key") != self.master_key:
            return httpx.Response(401, json={"message": "Invalid X-Master-Key provided"})

        parts = request.url.path.strip("/").split("/")
        if parts[:2] != ["v3", "b"]:
            return httpx.Response(404, json={"message": "Route not found!"})

        if request.method == "POST" and len(parts) == 2:
            try:
                record = json.loads(request.content)
            except ValueError:
                return httpx.Response(400, json={"message": "Invalid JSON"})
            bin_id = uuid.uuid4().hex[:24]
            self.bins[bin_id] = request.content
            return httpx.Response(200, json={
                "record": record,
                "metadata": {
                    "id": bin_id,
                    "name": request.headers.get("X-Bin-Name", ""),
                    "private": True,
                    "createdAt": "2025-01-01T00:00:00.000Z",
                },
            })

        if len(parts) != 3:
            return httpx.Response(404, json={"message": "Route not found!"})

        bin_id = parts[2]
        if bin_id not in self.bins:
            return httpx.Response(404, json={"message": "Bin not found or it doesn't belong to your account"})

        if request.method == "GET":
            return httpx.Response(200, json={
                "record": json.loads(self.bins[bin_id]),
                "metadata": {"id": bin_id, "private": True},
            })
        if request.method == "PUT":
            self.bins[bin_id] = request.content
            return httpx.Response(200, json={
                "record": json.loads(request.content),
                "metadata": {"parentId": bin_id, "private": True},
            })
        if request.method == "DELETE":
            del self.bins[bin_id]
            return httpx.Response(200, json={
                "metadata": {"id": bin_id, "versionsDeleted": 0},
                "message": "Bin deleted successfully",
            })

        return httpx.Response(405, json={"message": "Method not allowed"})


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Keep the real environment and any .env file out of tests."""
    for name in ("JSONBIN_KEY", "JSONBIN_BASE_URL", "JSONBIN_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def sample_document():
    """The single-bin document used throughout the tests."""
    return {
        "bins": [
            {
                "id": "test-1",
                "name": "First Bin",
                "is_private": False,
                "created_at": "2025-01-01T00:00:00Z",
            }
        ]
    }


@pytest.fixture
def storage(sample_document):
    """Memory storage holding sample.json and a non-json file."""
    return MemoryStorage({
        "sample.json": json.dumps(sample_document).encode("utf-8"),
        "notes.txt": b"not json",
    })


@pytest.fixture
def fake_service():
    return FakeJsonBin()


@pytest.fixture
def config():
    return CLIConfig(master_key=MASTER_KEY, base_url=BASE_URL)


@pytest.fixture
def client(config, storage, fake_service):
    """BinClient wired to the fake service and memory storage."""
    with BinClient(config, storage=storage, transport=httpx.MockTransport(fake_service.handler)) as api:
        yield api
