"""Tests for the batch driver.

Tests cover:
- Page loop, counters and cursor
- Failed keys recorded without stopping the run
- Listing retries and enumeration failure
- Resumption from a cursor
"""

import asyncio

import pytest

from pkg.retry.retry import RetryExecutor
from internal.batch import BatchSummary, Config, ErrEnumeration, KeyFailure, NewBatchRunner, format_summary
from internal.key_listing import Config as ListingConfig, NewKeyLister


def fill(storage, image_count: int, backups: int = 0, others: int = 0) -> list:
    keys = []
    for i in range(image_count):
        key = f"outfits/000/000/{i:03d}/preview.png"
        storage.add(key, b"x")
        keys.append(key)
    for i in range(backups):
        storage.add(f"outfits/000/000/{i:03d}/preview.png.bkup", b"x")
    for i in range(others):
        storage.add(f"outfits/000/000/{i:03d}/notes.txt", b"x")
    return keys


class RecordingHandler:
    def __init__(self, fail_keys=(), no_op_keys=(), flaky_keys=()):
        self.fail_keys = set(fail_keys)
        self.no_op_keys = set(no_op_keys)
        self.flaky_keys = set(flaky_keys)
        self.calls = []

    async def __call__(self, item):
        self.calls.append(item.key)
        await asyncio.sleep(0)
        if item.key in self.fail_keys:
            raise RuntimeError(f"cannot process {item.key}")
        if item.key in self.flaky_keys:
            self.flaky_keys.discard(item.key)
            raise RuntimeError("transient")
        return item.key not in self.no_op_keys


@pytest.fixture
def make_runner(storage, logger):
    def _make(page_size=3, **config):
        config.setdefault("concurrency", 4)
        lister = NewKeyLister(ListingConfig(page_size=page_size), storage, logger=logger)
        retry = RetryExecutor(on_retry=lambda attempt, err: None)
        return NewBatchRunner(Config(**config), lister, logger, retry=retry)

    return _make


class TestConfig:
    def test_rejects_bad_values(self):
        with pytest.raises(ValueError):
            Config(concurrency=0)
        with pytest.raises(ValueError):
            Config(key_retries=-1)
        with pytest.raises(ValueError):
            Config(key_timeout_seconds=0)


class TestRun:
    def test_counts_and_cursor(self, storage, make_runner):
        keys = fill(storage, 7, backups=2, others=1)
        handler = RecordingHandler(no_op_keys=[keys[0]], fail_keys=[keys[3]])

        summary = asyncio.run(make_runner(key_retries=1).run(handler))

        assert summary.total_keys == 10
        assert summary.image_keys == 7
        assert summary.in_scope_keys == 7
        assert summary.backup_keys == 2
        assert summary.other_keys == 1
        assert summary.successes == 5
        assert summary.no_ops == 1
        assert [f.key for f in summary.failures] == [keys[3]]
        assert "gave up after 1 retries" in summary.failures[0].message
        assert summary.pages == 4
        assert summary.cursor == max(storage.objects)

    def test_every_image_key_handled_once_when_successful(self, storage, make_runner):
        keys = fill(storage, 10)
        handler = RecordingHandler()

        asyncio.run(make_runner().run(handler))

        assert sorted(handler.calls) == keys

    def test_transient_key_failure_is_retried(self, storage, make_runner):
        keys = fill(storage, 2)
        handler = RecordingHandler(flaky_keys=[keys[1]])

        summary = asyncio.run(make_runner().run(handler))

        assert summary.failures == []
        assert summary.successes == 2
        assert handler.calls.count(keys[1]) == 2

    def test_backup_keys_in_scope_when_configured(self, storage, make_runner):
        fill(storage, 2, backups=2)
        handler = RecordingHandler()

        summary = asyncio.run(make_runner(include_backup_keys=True).run(handler))

        assert summary.in_scope_keys == 4
        assert len(handler.calls) == 4

    def test_custom_selector(self, storage, make_runner):
        fill(storage, 3, others=3)
        handler = RecordingHandler()

        summary = asyncio.run(
            make_runner().run(handler, select_keys=lambda groups: groups.other_keys)
        )

        assert all(key.endswith(".txt") for key in handler.calls)
        assert summary.in_scope_keys == 3

    def test_resumes_after_cursor(self, storage, make_runner):
        keys = fill(storage, 6)
        handler = RecordingHandler()

        summary = asyncio.run(make_runner().run(handler, start_after=keys[2]))

        assert sorted(handler.calls) == keys[3:]
        assert summary.total_keys == 3

    def test_empty_bucket(self, storage, make_runner):
        summary = asyncio.run(make_runner().run(RecordingHandler()))
        assert summary.pages == 0
        assert summary.cursor is None


class TestEnumerationFailure:
    def test_listing_is_retried(self, storage, make_runner):
        fill(storage, 2)
        storage.list_failures = 2

        summary = asyncio.run(make_runner(list_retries=3).run(RecordingHandler()))

        assert summary.successes == 2

    def test_exhausted_listing_raises_with_cursor(self, storage, make_runner):
        keys = fill(storage, 5)
        handler = RecordingHandler()
        runner = make_runner(page_size=3, list_retries=1)

        original_list = storage.list_keys

        async def failing_after_first_page(prefix, start_after, max_keys=1000):
            if start_after is not None:
                storage.list_failures = 1
            return await original_list(prefix, start_after, max_keys)

        storage.list_keys = failing_after_first_page

        with pytest.raises(ErrEnumeration) as exc_info:
            asyncio.run(runner.run(handler))

        assert exc_info.value.cursor == keys[2]
        assert exc_info.value.summary.successes == 3
        assert "StartAfter=" in str(exc_info.value)


class TestFormatSummary:
    def test_report_lists_failures_and_counts(self):
        summary = BatchSummary(
            total_keys=10,
            in_scope_keys=7,
            image_keys=7,
            backup_keys=2,
            other_keys=1,
            successes=5,
            no_ops=1,
            failures=[KeyFailure(key="outfits/a.png", message="boom")],
            cursor="outfits/z.png",
        )

        report = format_summary(summary)

        assert "Failed keys (count: 1):" in report
        assert "- outfits/a.png (boom)" in report
        assert "- 7 image keys (backed up!)" in report
        assert "5 successes, 1 no-ops, 1 failures" in report
        assert "- 2 backup image keys (skipped!)" in report
        assert "- 7 keys in scope" in report
        assert "- 10 total" in report
