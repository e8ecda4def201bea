# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""File-keyed store holding the authoritative diagnostics of the latest pass."""

from __future__ import annotations

import itertools
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from threading import Lock
from typing import Protocol, runtime_checkable

from ..core.models import Diagnostic, DiagnosticSet

LOGGER = logging.getLogger(__name__)


def group_by_file(diagnostics: Iterable[Diagnostic]) -> DiagnosticSet:
    """Group ``diagnostics`` by file path.

    Args:
        diagnostics: Diagnostics in discovery order.

    Returns:
        DiagnosticSet: Mapping keyed by file path in first-seen order; each
        file keeps its diagnostics in discovery order.
    """

    grouped: dict[str, list[Diagnostic]] = {}
    for diagnostic in diagnostics:
        grouped.setdefault(diagnostic.file_path, []).append(diagnostic)
    return DiagnosticSet(files={path: tuple(entries) for path, entries in grouped.items()})


@dataclass(frozen=True, slots=True)
class IndexUpdate:
    """Outcome of handing a pass result to the index.

    Attributes:
        applied: ``False`` when the result was older than the current state and ignored.
        sequence: Sequence number of the submitted pass, ``None`` when unsequenced.
        diagnostics: Authoritative diagnostics after the update.
        updated: Files carrying diagnostics in the new state.
        cleared: Files that had diagnostics before and now have none.
    """

    applied: bool
    sequence: int | None
    diagnostics: DiagnosticSet
    updated: tuple[str, ...] = ()
    cleared: tuple[str, ...] = ()


@runtime_checkable
class DiagnosticConsumer(Protocol):
    """Presentation layer notified whenever the index contents are replaced."""

    def publish(self, update: IndexUpdate) -> None:
        """Replace any prior rendering with ``update.diagnostics`` and clear ``update.cleared``."""
        ...


class FileDiagnosticIndex:
    """Hold the diagnostics of the most recent pass.

    Passes may finish out of order when several tool invocations overlap. Each
    invocation draws a sequence number from :meth:`begin_pass`; results carrying
    a number older than the last applied one are rejected so that a slow pass
    never overwrites a newer result.
    """

    def __init__(self, consumers: Iterable[DiagnosticConsumer] = ()) -> None:
        self._lock = Lock()
        self._publish_lock = Lock()
        self._sequence = itertools.count(1)
        self._current = DiagnosticSet()
        self._applied_sequence = 0
        self._shown_paths: tuple[str, ...] = ()
        self._consumers: list[DiagnosticConsumer] = list(consumers)

    @property
    def current(self) -> DiagnosticSet:
        """Return the authoritative diagnostics."""

        with self._lock:
            return self._current

    def subscribe(self, consumer: DiagnosticConsumer) -> None:
        """Register ``consumer`` for future updates."""

        with self._lock:
            self._consumers.append(consumer)

    def begin_pass(self) -> int:
        """Return the next monotonic pass sequence number."""

        with self._lock:
            return next(self._sequence)

    def _superseded(self, sequence: int | None) -> bool:
        return sequence is not None and sequence < self._applied_sequence

    def replace(self, diagnostics: DiagnosticSet, *, sequence: int | None = None) -> IndexUpdate:
        """Discard the current state and adopt ``diagnostics`` wholesale.

        Consumers are notified one update at a time. An update overtaken by a
        newer pass before its turn to publish is not delivered, so consumers
        never finish on an older pass than the index holds.

        Args:
            diagnostics: Complete result of one pass.
            sequence: Number obtained from :meth:`begin_pass`; ``None`` applies unconditionally.

        Returns:
            IndexUpdate: Description of the change, including files that are now empty.
        """

        with self._lock:
            if self._superseded(sequence):
                LOGGER.debug("ignoring stale pass %d (current %d)", sequence, self._applied_sequence)
                return IndexUpdate(applied=False, sequence=sequence, diagnostics=self._current)
            previous = self._current
            self._current = diagnostics
            if sequence is not None:
                self._applied_sequence = sequence
        with self._publish_lock:
            # A skipped or interrupted update may leave files on screen that the
            # replaced state no longer lists.
            shown = dict.fromkeys((*previous.paths(), *self._shown_paths))
            update = IndexUpdate(
                applied=True,
                sequence=sequence,
                diagnostics=diagnostics,
                updated=diagnostics.paths(),
                cleared=tuple(path for path in shown if path not in diagnostics.files),
            )
            with self._lock:
                consumers = tuple(self._consumers)
            delivered = 0
            for consumer in consumers:
                with self._lock:
                    if self._superseded(sequence):
                        LOGGER.debug("pass %d superseded while publishing", sequence)
                        break
                consumer.publish(update)
                delivered += 1
            if delivered == len(consumers):
                self._shown_paths = diagnostics.paths()
            elif delivered:
                self._shown_paths = tuple(dict.fromkeys((*self._shown_paths, *diagnostics.paths())))
        return update

    def clear(self) -> IndexUpdate:
        """Drop every diagnostic and report all previously known files as cleared."""

        return self.replace(DiagnosticSet())


__all__ = ["DiagnosticConsumer", "FileDiagnosticIndex", "IndexUpdate", "group_by_file"]
