"""Shared fakes for unit tests.

The fakes keep everything in memory and record the calls made on them so
tests can assert on side effects and their order.
"""

import asyncio
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import pytest

from pkg.logger.logger import Logger, LoggerConfig
from pkg.minio.minio import MinioAdapterError, MinioObjectNotFoundError
from pkg.outfit_api.type import OutfitApiError, OutfitData
from pkg.outfit_image.constant import RenderStatus
from pkg.outfit_image.type import RenderResult
from pkg.tracing.tracing import InMemorySpanRecorder


@dataclass
class StoredObject:
    body: bytes
    tags: Dict[str, str] = field(default_factory=dict)
    storage_class: str = "STANDARD"
    acl: Optional[str] = None


class FakeObjectStorage:
    """In-memory stand-in for MinioAdapter."""

    def __init__(self, objects: Optional[Dict[str, StoredObject]] = None):
        self.objects: Dict[str, StoredObject] = dict(objects or {})
        self.calls: List[tuple] = []
        # (operation, key) -> number of upcoming calls that fail
        self.failures: Dict[tuple, int] = {}
        self.list_failures = 0

    def add(self, key: str, body: bytes, tags: Optional[Dict[str, str]] = None) -> None:
        self.objects[key] = StoredObject(body=body, tags=dict(tags or {}))

    def fail(self, operation: str, key: str, times: int = 1) -> None:
        self.failures[(operation, key)] = times

    def writes(self) -> List[tuple]:
        return [c for c in self.calls if c[0] in ("put_object", "copy_object", "delete_tags")]

    def _maybe_fail(self, operation: str, key: str) -> None:
        remaining = self.failures.get((operation, key), 0)
        if remaining:
            self.failures[(operation, key)] = remaining - 1
            raise MinioAdapterError(f"injected {operation} failure for {key}")

    def _get(self, key: str) -> StoredObject:
        if key not in self.objects:
            raise MinioObjectNotFoundError(f"Object not found: {key}")
        return self.objects[key]

    async def list_keys(self, prefix: str, start_after: Optional[str], max_keys: int = 1000) -> List[str]:
        self.calls.append(("list_keys", start_after))
        if self.list_failures:
            self.list_failures -= 1
            raise MinioAdapterError("injected list failure")
        keys = sorted(k for k in self.objects if k.startswith(prefix))
        if start_after:
            keys = [k for k in keys if k > start_after]
        return keys[:max_keys]

    async def get_object(self, key: str) -> bytes:
        self.calls.append(("get_object", key))
        self._maybe_fail("get_object", key)
        return self._get(key).body

    async def get_tags(self, key: str) -> Dict[str, str]:
        self.calls.append(("get_tags", key))
        self._maybe_fail("get_tags", key)
        return dict(self._get(key).tags)

    async def put_object(self, key, data, tags, storage_class, acl=None, content_type="image/png") -> None:
        self.calls.append(("put_object", key))
        self._maybe_fail("put_object", key)
        self.objects[key] = StoredObject(
            body=data, tags=dict(tags), storage_class=storage_class, acl=acl
        )

    async def copy_object(self, source_key, dest_key, tags, storage_class, acl=None) -> None:
        self.calls.append(("copy_object", dest_key))
        self._maybe_fail("copy_object", dest_key)
        source = self._get(source_key)
        self.objects[dest_key] = StoredObject(
            body=source.body, tags=dict(tags), storage_class=storage_class, acl=acl
        )

    async def put_tags(self, key: str, tags: Dict[str, str]) -> None:
        self.calls.append(("put_tags", key))
        self._get(key).tags = dict(tags)

    async def delete_tags(self, key: str) -> None:
        self.calls.append(("delete_tags", key))
        self._maybe_fail("delete_tags", key)
        self._get(key).tags = {}


class FakeOutfitApi:
    """Returns canned outfit data and counts fetches per outfit."""

    def __init__(self, delay: float = 0.0):
        self.outfits: Dict[str, OutfitData] = {}
        self.errors: Dict[str, List[str]] = {}
        self.fetches: Dict[str, int] = {}
        self.delay = delay

    def add(self, outfit_id: str, layers: int = 2) -> None:
        self.outfits[outfit_id] = make_outfit(outfit_id, layers)

    async def fetch_outfit(self, outfit_id: str) -> OutfitData:
        self.fetches[outfit_id] = self.fetches.get(outfit_id, 0) + 1
        if self.delay:
            await asyncio.sleep(self.delay)
        if outfit_id in self.errors:
            raise OutfitApiError(outfit_id, self.errors[outfit_id])
        if outfit_id not in self.outfits:
            raise OutfitApiError(outfit_id, [f"outfit {outfit_id} not found"])
        return self.outfits[outfit_id]


class FakeRenderer:
    """Renders fixed-size byte strings instead of real images."""

    def __init__(self, compressed_size: int = 10, status: RenderStatus = RenderStatus.SUCCESS):
        self.compressed_size = compressed_size
        self.status = status
        self.renders: List[tuple] = []

    async def render(self, outfit: OutfitData, size: int) -> RenderResult:
        self.renders.append((outfit.id, size))
        total = len(outfit.visible_layers())
        loaded = total if self.status == RenderStatus.SUCCESS else max(total - 1, 0)
        return RenderResult(
            image=b"r" * size,
            status=self.status,
            layers_total=total,
            layers_loaded=loaded,
        )

    async def compress(self, image: bytes) -> bytes:
        return b"c" * self.compressed_size


def make_outfit(outfit_id: str, layers: int = 2) -> OutfitData:
    return OutfitData.model_validate(
        {
            "id": outfit_id,
            "petAppearance": {
                "id": "pet",
                "layers": [
                    {
                        "id": f"layer-{i}",
                        "zone": {"id": str(i), "depth": i},
                        "imageUrl600": f"https://images.example/{i}/600.png",
                        "imageUrl300": f"https://images.example/{i}/300.png",
                        "imageUrl150": f"https://images.example/{i}/150.png",
                    }
                    for i in range(layers)
                ],
            },
            "itemAppearances": [],
        }
    )


@pytest.fixture
def logger():
    return Logger(LoggerConfig(level="DEBUG", enable_console=False))


@pytest.fixture
def storage():
    return FakeObjectStorage()


@pytest.fixture
def outfit_api():
    return FakeOutfitApi()


@pytest.fixture
def renderer():
    return FakeRenderer()


@pytest.fixture
def span_recorder():
    return InMemorySpanRecorder()


@pytest.fixture
def outfit_factory():
    return make_outfit
