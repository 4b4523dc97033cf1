"""
Module: slicing.write_queue

Purpose:
    Async cell writing queue so the cells of one image can be encoded
    and saved in parallel.

Key Classes:
    - WriteQueue: Thread pool-based write queue

Dependencies:
    - concurrent.futures: Thread pool execution
    - splix.slicing.writer: write_cell()

Used By:
    - splix.pipeline: Writes every cell of an image through a WriteQueue
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, Future
from pathlib import Path
from typing import List, Optional

from PIL import Image

from splix.errors import ImageWriteError

from .writer import write_cell

logger = logging.getLogger(__name__)


class WriteQueue:
    """
    Thread pool-based write queue for sliced cells.

    With max_workers == 1 the queue writes synchronously, so callers can
    use the same code path for sequential and parallel writing.

    Usage:
        with WriteQueue(max_workers=4) as queue:
            try:
                for cell, tile in slice_grid(image, grid):
                    queue.queue_write(tile, path_for(cell), image_format="PNG")
                written = queue.wait_all()  # raises ImageWriteError on failure
            except ImageWriteError:
                queue.rollback()  # remove the cells already written
                raise

    Attributes:
        max_workers: Maximum concurrent write threads.
    """

    def __init__(self, max_workers: int = 4, *, overwrite: bool = True):
        """
        Initialize write queue.

        Args:
            max_workers: Maximum concurrent write threads.
            overwrite: Passed through to write_cell().
        """
        self.max_workers = max_workers
        self._overwrite = overwrite
        self._executor: Optional[ThreadPoolExecutor] = None
        if max_workers > 1:
            self._executor = ThreadPoolExecutor(max_workers=max_workers)
        self._futures: List[Future] = []
        self._written: List[Path] = []

    def queue_write(
        self,
        image: Image.Image,
        path: Path,
        *,
        image_format: str,
    ) -> Optional[Future]:
        """
        Queue a cell write.

        Args:
            image: Cropped cell image.
            path: Target path for the image.
            image_format: PIL format name.

        Returns:
            Future if queued on the pool, None if written synchronously.

        Raises:
            ImageWriteError: Only in synchronous mode, when the write fails.
        """
        if self._executor is None:
            self._written.append(
                write_cell(image, path, image_format=image_format, overwrite=self._overwrite)
            )
            return None

        future = self._executor.submit(
            write_cell, image, path, image_format=image_format, overwrite=self._overwrite
        )
        self._futures.append(future)
        return future

    def wait_all(self, timeout: Optional[float] = None) -> List[Path]:
        """
        Wait for all queued writes to complete.

        Every pending write is allowed to finish before an error is raised.

        Args:
            timeout: Max seconds to wait per write (None = indefinite).

        Returns:
            Paths written so far, in queue order.

        Raises:
            ImageWriteError: If any queued write failed.
        """
        errors: List[Exception] = []
        for future in self._futures:
            try:
                self._written.append(future.result(timeout=timeout))
            except ImageWriteError as e:
                logger.error(f"Write failed: {e}")
                errors.append(e)
        self._futures.clear()
        if errors:
            raise ImageWriteError(
                f"{len(errors)} cell write(s) failed; first: {errors[0]}"
            ) from errors[0]
        return list(self._written)

    def rollback(self) -> None:
        """
        Delete every file this queue has written.

        Pending writes are waited for first, so no file appears after the
        rollback. Failed writes are ignored here; wait_all() reports them.
        """
        for future in self._futures:
            if future.exception() is None:
                self._written.append(future.result())
        self._futures.clear()
        for path in self._written:
            path.unlink(missing_ok=True)
            logger.debug(f"Removed {path.name}")
        self._written.clear()

    def shutdown(self) -> None:
        """Shutdown the thread pool without raising write errors."""
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None

    def __enter__(self) -> "WriteQueue":
        return self

    def __exit__(self, *args) -> None:
        self.shutdown()
