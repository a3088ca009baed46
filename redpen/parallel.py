"""
Parallel scanning of large texts.

Large inputs are cut into contiguous chunks, one per worker. A chunk
boundary is moved right until it no longer falls inside a word, so every
word is scanned by exactly one worker. Each worker scans and classifies its
chunk independently; the per-chunk token lists are then concatenated in
chunk order, which yields exactly the token sequence of a single scan over
the whole text.

Small inputs, or a single worker, skip the pool entirely.
"""

from __future__ import annotations

import logging
import os
import time
from concurrent.futures import Executor, ProcessPoolExecutor, ThreadPoolExecutor
from functools import partial
from typing import Literal

from redpen.config import DEFAULT_PARALLEL_THRESHOLD
from redpen.dictionary import Dictionary
from redpen.models import CheckStats, Chunk, Token
from redpen.scanner import is_word_char, scan_tokens

logger = logging.getLogger(__name__)

# Used when the CPU count cannot be determined
FALLBACK_WORKER_COUNT = 4

ExecutorKind = Literal["thread", "process"]


def get_worker_count(workers: int | None = None) -> int:
    """
    Resolve the number of workers to use.

    Args:
        workers: Requested count, or None for one per CPU.

    Returns:
        Worker count, at least 1.
    """
    if workers is None:
        workers = os.cpu_count() or FALLBACK_WORKER_COUNT
    return max(1, workers)


# =============================================================================
# CHUNKING
# =============================================================================


def split_chunks(text: str, count: int) -> list[Chunk]:
    """
    Divide text into `count` contiguous chunks that never split a word.

    Chunks are roughly `len(text) // count` characters long. A boundary that
    lands on a word character is pushed right until it reaches a non-word
    character or the end of the text; the next chunk starts wherever the
    previous one ended. The last chunk always ends at the end of the text.
    A chunk may end up empty when its predecessor absorbed it.

    Args:
        text: The full text.
        count: Number of chunks, at least 1.

    Returns:
        Chunks in text order, covering the text without gaps or overlap.

    Example:
        >>> [(c.start, c.end) for c in split_chunks("alpha beta", 2)]
        [(0, 5), (5, 10)]
    """
    if count < 1:
        raise ValueError(f"count must be >= 1, got {count}")

    length = len(text)
    chunk_size = length // count
    chunks = []
    start = 0

    for index in range(count):
        if index == count - 1:
            end = length
        else:
            end = max((index + 1) * chunk_size, start)
            while end < length and is_word_char(text[end]):
                end += 1
        chunks.append(Chunk(index=index, start=start, end=end))
        start = end

    return chunks


def plan_chunks(
    text: str,
    workers: int,
    threshold: int = DEFAULT_PARALLEL_THRESHOLD,
) -> list[Chunk]:
    """
    Decide how a text is split for scanning.

    Returns a single chunk spanning the whole text when the text is shorter
    than `threshold` or only one worker is available.
    """
    if len(text) < threshold or workers == 1:
        return [Chunk(index=0, start=0, end=len(text))]
    return split_chunks(text, workers)


# =============================================================================
# WORKERS
# =============================================================================


def _scan_chunk(text: str, dictionary: Dictionary, chunk: Chunk) -> list[Token]:
    return scan_tokens(text[chunk.start : chunk.end], dictionary, base_offset=chunk.start)


# Set once per worker process by the pool initializer; read-only afterwards
_process_dictionary: Dictionary | None = None


def _init_process_worker(dictionary: Dictionary) -> None:
    global _process_dictionary
    _process_dictionary = dictionary


def _scan_chunk_in_process(chunk_text: str, base_offset: int) -> list[Token]:
    if _process_dictionary is None:
        raise RuntimeError("Worker process started without a dictionary")
    return scan_tokens(chunk_text, _process_dictionary, base_offset=base_offset)


def _run_pool(
    text: str,
    dictionary: Dictionary,
    chunks: list[Chunk],
    executor: ExecutorKind,
) -> list[list[Token]]:
    """Scan chunks on a pool and return their results in chunk order."""
    pool: Executor

    if executor == "process":
        pool = ProcessPoolExecutor(
            max_workers=len(chunks),
            initializer=_init_process_worker,
            initargs=(dictionary,),
        )
        with pool:
            # map() yields in submission order, whatever order workers finish in
            return list(
                pool.map(
                    _scan_chunk_in_process,
                    [text[c.start : c.end] for c in chunks],
                    [c.start for c in chunks],
                )
            )

    pool = ThreadPoolExecutor(max_workers=len(chunks), thread_name_prefix="redpen")
    with pool:
        return list(pool.map(partial(_scan_chunk, text, dictionary), chunks))


# =============================================================================
# PUBLIC API
# =============================================================================


def check_tokens_with_stats(
    text: str,
    dictionary: Dictionary,
    workers: int | None = None,
    threshold: int = DEFAULT_PARALLEL_THRESHOLD,
    executor: ExecutorKind = "thread",
) -> tuple[list[Token], CheckStats]:
    """
    Scan and classify a text, in parallel when it is large enough.

    Args:
        text: Text to check.
        dictionary: Known words, shared read-only by all workers.
        workers: Worker count, or None for one per CPU.
        threshold: Texts shorter than this are scanned on one worker.
        executor: "thread" or "process" pool.

    Returns:
        Tuple of (tokens ordered by offset, statistics).
    """
    start_time = time.time()
    worker_count = get_worker_count(workers)
    chunks = plan_chunks(text, worker_count, threshold)
    logger.info("Using %d workers", worker_count)

    if len(chunks) == 1:
        logger.info("Processing with single worker...")
        tokens = _scan_chunk(text, dictionary, chunks[0])
    else:
        logger.info("Processing %d chunks with %s pool...", len(chunks), executor)
        results = _run_pool(text, dictionary, chunks, executor)
        tokens = [token for chunk_tokens in results for token in chunk_tokens]

    stats = CheckStats(
        words_checked=len(tokens),
        errors_detected=sum(1 for t in tokens if not t.is_valid),
        chunks=len(chunks),
        workers=1 if len(chunks) == 1 else worker_count,
        processing_time_ms=(time.time() - start_time) * 1000,
    )
    logger.debug(
        "Checked %d words in %d chunks: %d errors",
        stats.words_checked,
        stats.chunks,
        stats.errors_detected,
    )
    return tokens, stats


def check_tokens(
    text: str,
    dictionary: Dictionary,
    workers: int | None = None,
    threshold: int = DEFAULT_PARALLEL_THRESHOLD,
    executor: ExecutorKind = "thread",
) -> list[Token]:
    """
    Scan and classify a text, in parallel when it is large enough.

    The result is identical to a single-threaded scan regardless of the
    number of workers.

    Example:
        >>> d = Dictionary.from_words(["cat"])
        >>> check_tokens("cat dg", d)
        [Token(start=0, length=3, is_valid=True), Token(start=4, length=2, is_valid=False)]
    """
    tokens, _ = check_tokens_with_stats(text, dictionary, workers, threshold, executor)
    return tokens
