from typing import List, Optional

from pkg.logger.logger import Logger
from pkg.pool.pool import BoundedConcurrencyPool
from pkg.pool.type import PoolConfig
from pkg.retry.interface import IRetryExecutor
from pkg.retry.retry import RetryExecutor
from pkg.retry.type import RetryConfig, RetryExhaustedError
from internal.key_listing.interface import IKeyLister
from internal.key_listing.type import KeyGroups, Page, WorkItem
from internal.key_listing.usecase.helpers import classify_keys
from internal.batch.errors import ErrEnumeration
from internal.batch.interface import IBatchRunner, KeyHandler, KeySelector
from internal.batch.type import BatchSummary, Config, KeyFailure


class BatchRunner(IBatchRunner):
    """Drives a handler over every key in the bucket, one page at a time.

    Each page is listed with retries, its selected keys are processed by a
    bounded worker pool with per-key retries, and only once every key of the
    page has settled does the cursor move to the page's last key. A failed
    key is recorded and the run continues; a listing that fails for good
    stops the run with ErrEnumeration carrying the cursor to resume from.
    """

    def __init__(
        self,
        config: Config,
        lister: IKeyLister,
        logger: Logger,
        retry: Optional[IRetryExecutor] = None,
    ):
        self.config = config
        self.lister = lister
        self.logger = logger
        self.retry = retry or RetryExecutor(RetryConfig())
        self.pool = BoundedConcurrencyPool(PoolConfig(concurrency=config.concurrency))

    def select_default(self, groups: KeyGroups) -> List[str]:
        if self.config.include_backup_keys:
            return groups.image_keys + groups.backup_keys
        return list(groups.image_keys)

    async def run(
        self,
        handler: KeyHandler,
        select_keys: Optional[KeySelector] = None,
        start_after: Optional[str] = None,
    ) -> BatchSummary:
        """Process every selected key after ``start_after``.

        Args:
            handler: Called once per key; returns whether it changed anything
            select_keys: Picks the keys to process from a page; defaults to
                image keys, plus backup keys when configured
            start_after: Resume cursor; None starts from the beginning

        Returns:
            BatchSummary of the whole run

        Raises:
            ErrEnumeration: If a page could not be listed after all retries
        """
        select = select_keys or self.select_default
        summary = BatchSummary(
            cursor=start_after,
            backup_keys_included=self.config.include_backup_keys,
            action=self.config.action,
        )

        while True:
            page = await self._list_page(summary)
            if page.exhausted:
                break

            groups = classify_keys(page.keys)
            selected = select(groups)
            summary.pages += 1
            summary.total_keys += len(page.keys)
            summary.image_keys += len(groups.image_keys)
            summary.backup_keys += len(groups.backup_keys)
            summary.other_keys += len(groups.other_keys)
            summary.in_scope_keys += len(selected)

            await self._run_page(handler, page, selected, summary)
            summary.cursor = page.cursor

        return summary

    async def _list_page(self, summary: BatchSummary) -> Page:
        cursor = summary.cursor

        def on_retry(attempt: int, error: BaseException) -> None:
            self.logger.warning(
                f"Error loading keys from S3, retrying (StartAfter={cursor}, retry={attempt}): {error}"
            )

        try:
            return await self.retry.run(
                lambda: self.lister.next_page(cursor),
                max_retries=self.config.list_retries,
                timeout=self.config.list_timeout_seconds,
                on_retry=on_retry,
            )
        except RetryExhaustedError as exc:
            self.logger.error(
                f"Error loading keys from S3, giving up (StartAfter={cursor}): {exc.last_error}"
            )
            raise ErrEnumeration(cursor, summary, str(exc.last_error)) from exc

    async def _run_page(
        self,
        handler: KeyHandler,
        page: Page,
        keys: List[str],
        summary: BatchSummary,
    ) -> None:
        items = [WorkItem(key=key, page_index=page.index) for key in keys]

        async def run_item(item: WorkItem) -> bool:
            def on_retry(attempt: int, error: BaseException) -> None:
                self.logger.error(f"Error processing {item.key} (retry={attempt}): {error}")

            return await self.retry.run(
                lambda: handler(item),
                max_retries=self.config.key_retries,
                timeout=self.config.key_timeout_seconds,
                on_retry=on_retry,
            )

        outcome = await self.pool.run(items, run_item)

        for success in outcome.results:
            if success.result:
                summary.successes += 1
            else:
                summary.no_ops += 1
        for failure in outcome.failures:
            self.logger.error(f"Error processing {failure.item.key}, giving up: {failure.error}")
            summary.failures.append(KeyFailure(key=failure.item.key, message=str(failure.error)))


__all__ = ["BatchRunner"]
