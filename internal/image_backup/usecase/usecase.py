"""Per-key backup and compression workflow.

For one outfit preview key the workflow:

1. reads the original's tags (the key must exist),
2. snapshots the original to ``<key>.bkup`` unless a backup already exists,
3. re-renders the outfit from upstream layer data, compresses it, and
   replaces the original only if the result is no larger.

Each stage checks the reserved ``DTI-Outfit-Image-Kind`` tag first, so
running the workflow again on a finished key writes nothing. The replace
stage never runs unless the snapshot stage either wrote the backup or found
one already in place.
"""

from typing import Optional

from pkg.fetch_cache.interface import IFetchCache
from pkg.logger.logger import Logger
from pkg.minio.interface import IObjectStorage
from pkg.minio.minio import MinioObjectNotFoundError
from pkg.outfit_api.interface import IOutfitApi
from pkg.outfit_api.type import OutfitApiError, OutfitData
from pkg.outfit_image.constant import RenderStatus
from pkg.outfit_image.interface import IOutfitRenderer
from pkg.tracing.interface import ISpanRecorder
from internal.key_listing.type import WorkItem
from internal.metadata_gate.constant import (
    TAG_VALUE_BACKUP,
    TAG_VALUE_COMPRESSED,
    TAG_VALUE_COMPRESSION_FAILED,
)
from internal.metadata_gate.errors import ErrUnexpectedTag
from internal.metadata_gate.interface import IMetadataGate
from internal.metadata_gate.type import ClassificationTag, Stage, TagState, Transition
from internal.image_backup.errors import *
from internal.image_backup.interface import IImageBackupUseCase
from internal.image_backup.type import *
from internal.image_backup.constant import *
from .helpers import backup_key_for, human_file_size, parse_image_key


class ImageBackupUseCase(IImageBackupUseCase):
    def __init__(
        self,
        config: Config,
        storage: IObjectStorage,
        outfit_api: IOutfitApi,
        renderer: IOutfitRenderer,
        fetch_cache: IFetchCache,
        gate: IMetadataGate,
        logger: Logger,
        span_recorder: ISpanRecorder,
    ):
        """Initialize the workflow.

        Args:
            config: Workflow configuration
            storage: Bucket holding the outfit images
            outfit_api: Upstream source of outfit layer data
            renderer: Compositor and compressor
            fetch_cache: Shares outfit data between sibling size keys
            gate: Tag-based stage gate
            logger: Logger; each key runs in its own trace context
            span_recorder: Receives one span per stage
        """
        self.config = config
        self.storage = storage
        self.outfit_api = outfit_api
        self.renderer = renderer
        self.fetch_cache = fetch_cache
        self.gate = gate
        self.logger = logger
        self.span_recorder = span_recorder

    async def handle(self, item: WorkItem) -> bool:
        output = await self.process(item.key)
        return output.made_change

    async def process(self, key: str) -> ProcessOutput:
        """Run both stages for ``key``.

        Raises:
            ErrObjectNotFound: The original does not exist
            ErrInvalidKey: The key is not an outfit preview key
            ErrUpstreamData: Outfit layer data could not be fetched
            ErrPartialRender: Some layers failed to load
            MinioAdapterError: A storage call failed
        """
        with self.logger.trace_context(trace_id=key):
            with self.span_recorder.span(SPAN_PROCESS, key=key) as span:
                output = ProcessOutput(key=key)
                original = await self._load_original(key)

                try:
                    output.snapshot = await self._snapshot(original)
                except ErrUnexpectedTag:
                    output.snapshot = Transition.SKIP_UNEXPECTED_TAG
                    span["made_change"] = False
                    return output
                if output.snapshot == Transition.PROCEED:
                    output.made_change = True

                output.replace, output.replace_outcome = await self._replace(original)
                if output.replace_outcome is not None:
                    output.made_change = True

                span["made_change"] = output.made_change
                return output

    async def _load_original(self, key: str) -> ObjectRecord:
        try:
            tags = await self.storage.get_tags(key)
        except MinioObjectNotFoundError as exc:
            raise ErrObjectNotFound(key) from exc

        async def load_body() -> bytes:
            try:
                return await self.storage.get_object(key)
            except MinioObjectNotFoundError as exc:
                raise ErrObjectNotFound(key) from exc

        return ObjectRecord(key=key, state=TagState.from_tags(tags), loader=load_body)

    async def _load_backup_state(self, backup_key: str) -> TagState:
        try:
            tags = await self.storage.get_tags(backup_key)
        except MinioObjectNotFoundError:
            return TagState(ClassificationTag.NONE)

        state = TagState.from_tags(tags)
        if state.tag == ClassificationTag.NONE:
            # A backup object we did not write; never overwrite it
            return TagState.untagged_existing()
        return state

    async def _snapshot(self, original: ObjectRecord) -> Transition:
        key = original.key
        backup_key = backup_key_for(key)

        with self.span_recorder.span(SPAN_SNAPSHOT, key=key) as span:
            state = await self._load_backup_state(backup_key)
            # A finished backup holds the only pristine copy; force never replaces it
            force = self.config.force and state.tag != ClassificationTag.BACKUP

            transition = self.gate.evaluate(key, state, Stage.SNAPSHOT, force)
            span["transition"] = transition.value

            if transition == Transition.SKIP_UNEXPECTED_TAG:
                raise ErrUnexpectedTag(backup_key, state.raw_value)
            if transition == Transition.SKIP_ALREADY_DONE:
                self.logger.info(f"[{LOG_BACKUP}, {key}] Backup already exists, skipping")
                return transition

            await self.storage.copy_object(
                key,
                backup_key,
                tags={IMAGE_KIND_TAG: TAG_VALUE_BACKUP},
                storage_class=self.config.backup_storage_class,
            )
            self.logger.info(f"[{LOG_BACKUP}, {key}] Saved backup to {backup_key}")
            return transition

    async def _replace(self, original: ObjectRecord):
        key = original.key
        transition = self.gate.evaluate(
            key, original.state, Stage.REPLACE, self.config.force
        )
        if transition == Transition.SKIP_ALREADY_DONE:
            self.logger.info(f"[{LOG_COMPRESS}, {key}] Original is already compressed, skipping")
        elif transition == Transition.SKIP_PRIOR_FAILURE:
            self.logger.info(
                f"[{LOG_COMPRESS}, {key}] Compression did not help on an earlier run, skipping"
            )
        if transition != Transition.PROCEED:
            return transition, None

        image_key = parse_image_key(key)
        outfit = await self._load_outfit(image_key.outfit_id)

        with self.span_recorder.span(SPAN_RENDER, key=key, size=image_key.size) as span:
            rendered = await self.renderer.render(outfit, image_key.size)
            span["layers"] = f"{rendered.layers_loaded}/{rendered.layers_total}"
            if rendered.status == RenderStatus.PARTIAL_FAILURE:
                raise ErrPartialRender(key, rendered.layers_loaded, rendered.layers_total)
            compressed = await self.renderer.compress(rendered.image)

        with self.span_recorder.span(SPAN_REPLACE, key=key) as span:
            original_body = await original.body()
            self._log_size_change(key, len(original_body), len(compressed))

            if len(compressed) <= len(original_body):
                await self.storage.put_object(
                    key,
                    compressed,
                    tags={IMAGE_KIND_TAG: TAG_VALUE_COMPRESSED},
                    storage_class=self.config.compressed_storage_class,
                    acl=self.config.acl,
                )
                self.logger.info(f"[{LOG_SAVE}, {key}] Saved compressed image to {key}")
                outcome = ReplaceOutcome.COMPRESSED
            else:
                # Keep the original bytes; only the tags and storage class change
                await self.storage.copy_object(
                    key,
                    key,
                    tags={IMAGE_KIND_TAG: TAG_VALUE_COMPRESSION_FAILED},
                    storage_class=self.config.compressed_storage_class,
                    acl=self.config.acl,
                )
                self.logger.info(
                    f"[{LOG_SAVE}, {key}] Compressed image was larger, "
                    f"marked original as {TAG_VALUE_COMPRESSION_FAILED}"
                )
                outcome = ReplaceOutcome.COMPRESSION_FAILED

            span["outcome"] = outcome.value
            return transition, outcome

    async def _load_outfit(self, outfit_id: str) -> OutfitData:
        async def fetch() -> OutfitData:
            try:
                return await self.outfit_api.fetch_outfit(outfit_id)
            except OutfitApiError as exc:
                raise ErrUpstreamData(outfit_id, exc.errors) from exc

        with self.span_recorder.span(SPAN_FETCH, outfit_id=outfit_id):
            return await self.fetch_cache.get_or_fetch(outfit_id, fetch)

    def _log_size_change(self, key: str, original_size: int, compressed_size: int) -> None:
        percent = round(compressed_size / original_size * 100) if original_size else 0
        self.logger.info(
            f"[{LOG_COMPRESS}, {key}] Compressed image: "
            f"{human_file_size(original_size)} -> {human_file_size(compressed_size)} "
            f"({percent}% of original)"
        )


__all__ = ["ImageBackupUseCase"]
