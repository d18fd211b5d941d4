# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Walk whole documents, rendering every figure block."""

from __future__ import annotations

import os
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from functools import partial

import panflute as pf

from ..config.models import Configuration
from ..parsing import plot_toolkit
from ..toolkits import Toolkit
from .orchestrator import RenderContext, make


@dataclass(frozen=True, slots=True)
class Candidate:
    """Code block naming a toolkit, in document order."""

    order: int
    toolkit: Toolkit
    block: pf.Element


def collect_candidates(doc: pf.Doc) -> list[Candidate]:
    """Return every code block of ``doc`` that names a toolkit, in document order."""

    found: list[Candidate] = []

    def _collect(elem: pf.Element, _doc: pf.Doc) -> None:
        toolkit = plot_toolkit(elem)
        if toolkit is not None:
            found.append(Candidate(order=len(found), toolkit=toolkit, block=elem))

    doc.walk(_collect)
    return found


def worker_count(config: Configuration, candidates: int, max_workers: int | None = None) -> int:
    """Return how many workers render ``candidates`` blocks.

    One worker means sequential, in-order rendering.
    """

    if not config.parallel or candidates <= 1:
        return 1
    available = max_workers if max_workers is not None else (os.cpu_count() or 1)
    return max(1, min(available, candidates))


def partition(candidates: Sequence[Candidate], workers: int) -> list[list[Candidate]]:
    """Split ``candidates`` into ``workers`` contiguous, nearly equal chunks."""

    size, remainder = divmod(len(candidates), workers)
    chunks: list[list[Candidate]] = []
    start = 0
    for index in range(workers):
        stop = start + size + (1 if index < remainder else 0)
        if stop > start:
            chunks.append(list(candidates[start:stop]))
        start = stop
    return chunks


def plot_transform(
    config: Configuration,
    doc: pf.Doc,
    *,
    context: RenderContext | None = None,
    max_workers: int | None = None,
) -> pf.Doc:
    """Replace every figure block of ``doc`` by the figure it produces.

    When ``config.parallel`` is set, blocks are rendered by a thread pool of
    ``min(cpu count, block count)`` workers, each handling a contiguous
    chunk. Blocks that fail to render are left unchanged and the failure is
    logged; the document order is preserved either way.

    Args:
        config: Configuration for default values.
        doc: Document modified in place and returned.
        context: Collaborators used for rendering.
        max_workers: Upper bound replacing the cpu count.

    Returns:
        pf.Doc: The transformed document.
    """

    ctx = context if context is not None else RenderContext.for_config(config)
    candidates = collect_candidates(doc)
    if not candidates:
        return doc

    workers = worker_count(config, len(candidates), max_workers)
    render_chunk = partial(_render_chunk, config=config, context=ctx)
    if workers == 1:
        results = render_chunk(candidates)
    else:
        ctx.logger.debug(f"Rendering {len(candidates)} figures with {workers} workers.")
        chunks = partition(candidates, workers)
        by_chunk: dict[int, list[pf.Element]] = {}
        with ThreadPoolExecutor(max_workers=workers) as executor:
            future_map = {executor.submit(render_chunk, chunk): index for index, chunk in enumerate(chunks)}
            for future in as_completed(future_map):
                by_chunk[future_map[future]] = future.result()
        results = [element for index in sorted(by_chunk) for element in by_chunk[index]]

    replacements = {
        id(candidate.block): result
        for candidate, result in zip(candidates, results, strict=True)
        if result is not candidate.block
    }
    if replacements:
        doc.walk(lambda elem, _doc: replacements.get(id(elem)))
    return doc


def _render_chunk(
    chunk: Sequence[Candidate],
    *,
    config: Configuration,
    context: RenderContext,
) -> list[pf.Element]:
    return [make(candidate.toolkit, config, candidate.block, context=context) for candidate in chunk]


__all__ = ["Candidate", "collect_candidates", "partition", "plot_transform", "worker_count"]
