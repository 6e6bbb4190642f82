"""
Request batching for write operations with a per-request size limit.

Some endpoints accept at most a fixed number of identifiers per call. The
helpers here split a caller's list into consecutive chunks and submit one
request per chunk, strictly one after another and in input order. The first
failing chunk aborts the run: its error propagates to the caller, chunks
already sent stay sent and nothing is retried.
"""

from __future__ import annotations
import logging
from typing import Callable, Iterator, List, Sequence, TypeVar

from .runtime.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


def chunked(items: Sequence[T], size: int) -> Iterator[List[T]]:
    """
    Split a sequence into consecutive chunks of at most ``size`` items.

    For ``len(items) == L`` this yields ``ceil(L / size)`` chunks; chunk ``i``
    covers positions ``[i * size, min((i + 1) * size, L))``. Only the last
    chunk may be shorter than ``size``.

    Raises:
        InvalidArgumentError: If ``size`` is not positive
    """
    if size <= 0:
        raise InvalidArgumentError(f"Batch size must be positive, got {size}")
    for start in range(0, len(items), size):
        yield list(items[start:start + size])


class BatchSubmitter:
    """
    Sequential chunk submitter.

    Example:
        ```python
        submitter = BatchSubmitter(max_batch_size=50)
        submitter.submit(ids, lambda chunk: api.send(post("/things/run", chunk)))
        ```
    """

    def __init__(self, max_batch_size: int):
        if max_batch_size <= 0:
            raise InvalidArgumentError(f"Batch size must be positive, got {max_batch_size}")
        self.max_batch_size = max_batch_size

    def split(self, items: Sequence[T]) -> List[List[T]]:
        return list(chunked(items, self.max_batch_size))

    def submit(self, items: Sequence[T], send: Callable[[List[T]], R]) -> List[R]:
        """
        Send ``items`` in chunks, waiting for each chunk before the next.

        Args:
            items: Identifiers to submit, in order
            send: Issues the request for one chunk

        Returns:
            The result of ``send`` for every chunk, in chunk order

        Raises:
            Whatever ``send`` raises for the first failing chunk; later chunks
            are not sent
        """
        chunks = self.split(items)
        results: List[R] = []
        total = len(chunks)
        for number, chunk in enumerate(chunks, start=1):
            logger.debug(f"Submitting chunk {number}/{total} ({len(chunk)} items)")
            try:
                results.append(send(chunk))
            except Exception:
                logger.warning(
                    f"Chunk {number}/{total} failed; "
                    f"{total - number} chunk(s) not submitted"
                )
                raise
        return results


__all__ = [
    "chunked",
    "BatchSubmitter",
]
