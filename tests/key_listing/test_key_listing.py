"""Unit tests for paginated key listing."""

import asyncio

import pytest

from internal.key_listing import Config, ErrListKeys, NewKeyLister, classify_keys


def fill(storage, count: int) -> list:
    keys = [f"outfits/000/{i // 1000:03d}/{i % 1000:03d}/preview.png" for i in range(count)]
    for key in keys:
        storage.add(key, b"x")
    return keys


class TestConfig:
    def test_page_size_bounds(self):
        with pytest.raises(ValueError):
            Config(page_size=0)
        with pytest.raises(ValueError):
            Config(page_size=1001)


class TestNextPage:
    def test_pages_until_exhausted(self, storage, logger):
        keys = fill(storage, 5)
        lister = NewKeyLister(Config(page_size=2), storage, logger=logger)

        async def walk():
            pages, cursor = [], None
            while True:
                page = await lister.next_page(cursor)
                if page.exhausted:
                    return pages, page
                pages.append(page)
                cursor = page.cursor

        pages, last = asyncio.run(walk())

        assert [p.keys for p in pages] == [keys[0:2], keys[2:4], keys[4:5]]
        assert [p.index for p in pages] == [1, 2, 3]
        assert last.keys == []
        assert last.cursor == keys[4]

    def test_resumes_strictly_after_cursor(self, storage):
        keys = fill(storage, 4)
        lister = NewKeyLister(Config(page_size=10), storage)

        page = asyncio.run(lister.next_page(keys[1]))

        assert page.keys == keys[2:]
        assert page.cursor == keys[-1]

    def test_only_lists_under_prefix(self, storage):
        storage.add("other/thing.png", b"x")
        keys = fill(storage, 1)

        page = asyncio.run(NewKeyLister(Config(), storage).next_page(None))

        assert page.keys == keys

    def test_storage_failure_is_wrapped(self, storage):
        storage.list_failures = 1
        lister = NewKeyLister(Config(), storage)

        with pytest.raises(ErrListKeys) as exc_info:
            asyncio.run(lister.next_page("outfits/000"))

        assert exc_info.value.cursor == "outfits/000"
        assert lister.pages_listed == 0


class TestClassifyKeys:
    def test_splits_by_suffix(self):
        groups = classify_keys(
            [
                "outfits/000/000/001/preview.png",
                "outfits/000/000/001/preview.png.bkup",
                "outfits/000/000/001/notes.txt",
                "outfits/000/000/002/small_preview.png",
            ]
        )

        assert groups.image_keys == [
            "outfits/000/000/001/preview.png",
            "outfits/000/000/002/small_preview.png",
        ]
        assert groups.backup_keys == ["outfits/000/000/001/preview.png.bkup"]
        assert groups.other_keys == ["outfits/000/000/001/notes.txt"]
