from pkg.retry.retry import RetryExecutor
from internal.batch import Config as BatchConfig, IBatchRunner, NewBatchRunner
from internal.image_backup import (
    Config as ImageBackupConfig,
    IImageBackupUseCase,
    NewImageBackupUseCase,
)
from internal.key_listing import Config as KeyListingConfig, IKeyLister, NewKeyLister
from internal.tag_reset import (
    Config as TagResetConfig,
    ITagResetUseCase,
    NewTagResetUseCase,
)
from .type import Dependencies


class ArchiverRegistry:
    """Builds the use cases of each command from shared dependencies."""

    def __init__(self, deps: Dependencies):
        self.deps = deps
        self.logger = deps.logger
        self.config = deps.config

    def image_backup(self, force: bool = False) -> IImageBackupUseCase:
        usecase = NewImageBackupUseCase(
            config=ImageBackupConfig(
                force=force,
                backup_storage_class=self.config.backup.backup_storage_class,
                compressed_storage_class=self.config.backup.compressed_storage_class,
                acl=self.config.backup.acl or None,
            ),
            storage=self.deps.storage,
            outfit_api=self.deps.outfit_api,
            renderer=self.deps.renderer,
            fetch_cache=self.deps.fetch_cache,
            logger=self.logger,
            span_recorder=self.deps.span_recorder,
        )
        self.logger.info(f"Image backup use case initialized (force={force})")
        return usecase

    def key_lister(self) -> IKeyLister:
        return NewKeyLister(KeyListingConfig(), self.deps.storage, logger=self.logger)

    def backup_runner(self) -> IBatchRunner:
        backup = self.config.backup
        return NewBatchRunner(
            BatchConfig(
                concurrency=backup.concurrency,
                list_retries=backup.list_retries,
                list_timeout_seconds=backup.list_timeout_seconds,
                key_retries=backup.key_retries,
                key_timeout_seconds=backup.key_timeout_seconds,
            ),
            self.key_lister(),
            self.logger,
            retry=RetryExecutor(),
        )

    def tag_reset(self) -> ITagResetUseCase:
        return NewTagResetUseCase(self.deps.storage, self.logger)

    def reset_runner(self) -> IBatchRunner:
        reset = self.config.reset
        config = TagResetConfig(
            concurrency=reset.concurrency,
            key_timeout_seconds=reset.key_timeout_seconds,
            key_retries=reset.key_retries,
            list_timeout_seconds=reset.list_timeout_seconds,
            list_retries=reset.list_retries,
        )
        return NewBatchRunner(
            config.batch_config(), self.key_lister(), self.logger, retry=RetryExecutor()
        )


__all__ = ["ArchiverRegistry"]
