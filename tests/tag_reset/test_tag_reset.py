"""Tests for the tag reset job."""

import asyncio

from pkg.retry.retry import RetryExecutor
from internal.batch import NewBatchRunner
from internal.key_listing import Config as ListingConfig, NewKeyLister, WorkItem
from internal.tag_reset import Config, NewTagResetUseCase

TAG = "DTI-Outfit-Image-Kind"


class TestConfig:
    def test_defaults(self):
        batch = Config().batch_config()
        assert batch.concurrency == 30
        assert batch.key_timeout_seconds == 10.0
        assert batch.key_retries == 5
        assert batch.list_timeout_seconds == 5.0
        assert batch.list_retries == 10
        assert batch.include_backup_keys


class TestTagReset:
    def test_handle_deletes_tags(self, storage, logger):
        storage.add("outfits/000/000/001/preview.png", b"x", {TAG: "compressed"})
        usecase = NewTagResetUseCase(storage, logger)

        assert asyncio.run(usecase.handle(WorkItem(key="outfits/000/000/001/preview.png")))
        assert storage.objects["outfits/000/000/001/preview.png"].tags == {}

    def test_run_resets_images_and_backups_only(self, storage, logger):
        storage.add("outfits/000/000/001/preview.png", b"x", {TAG: "compressed"})
        storage.add("outfits/000/000/001/preview.png.bkup", b"x", {TAG: "backup"})
        storage.add("outfits/000/000/001/notes.txt", b"x", {"keep": "me"})
        storage.fail("delete_tags", "outfits/000/000/001/preview.png", times=2)

        runner = NewBatchRunner(
            Config(concurrency=2).batch_config(),
            NewKeyLister(ListingConfig(), storage),
            logger,
            retry=RetryExecutor(on_retry=lambda attempt, err: None),
        )
        summary = asyncio.run(runner.run(NewTagResetUseCase(storage, logger).handle))

        assert summary.successes == 2
        assert summary.failures == []
        assert storage.objects["outfits/000/000/001/preview.png"].tags == {}
        assert storage.objects["outfits/000/000/001/preview.png.bkup"].tags == {}
        assert storage.objects["outfits/000/000/001/notes.txt"].tags == {"keep": "me"}
