#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/ast/walk.py
"""Depth-first traversal of the document tree with enter/leave events.

Every stage and the HTML renderer are built on :func:`walk`. A walker
receives ``on_enter(node)`` before a node's children and ``on_leave(node)``
after them, and steers the traversal through the returned
:class:`WalkStatus`:

- ``CONTINUE`` proceeds normally.
- ``SKIP_CHILDREN`` (from ``on_enter``) prunes descent into the node's
  children; the node's leave event is still delivered.
- ``STOP`` aborts the whole traversal immediately. No further events are
  delivered, including the leave events of the stopping node and of its
  ancestors.

Exceptions raised by a callback propagate out of :func:`walk` unchanged.

The walker itself never mutates the tree. Each child sequence is read as a
snapshot when a node is entered, so a callback that edits the tree does not
disturb the iteration in progress.

Examples
--------
Collect heading levels in document order:

    >>> from md2html.ast.walk import WalkStatus, walk_nodes
    >>> levels = []
    >>> def on_enter(node):
    ...     if node.kind == "heading":
    ...         levels.append(node.level)
    ...     return WalkStatus.CONTINUE
    >>> walk_nodes(document, on_enter)

"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Iterator, Optional, Protocol

from md2html.ast.nodes import Node


class WalkStatus(Enum):
    """Control value returned by walker callbacks."""

    CONTINUE = "continue"
    SKIP_CHILDREN = "skip_children"
    STOP = "stop"


class Walker(Protocol):
    """Protocol for objects driven by :func:`walk`."""

    def on_enter(self, node: Node) -> WalkStatus:
        """Handle a node before its children are visited."""
        ...

    def on_leave(self, node: Node) -> WalkStatus:
        """Handle a node after its children were visited."""
        ...


class BaseWalker:
    """Walker with no-op callbacks, meant for subclassing."""

    def on_enter(self, node: Node) -> WalkStatus:
        """Continue into every node."""
        return WalkStatus.CONTINUE

    def on_leave(self, node: Node) -> WalkStatus:
        """Continue after every node."""
        return WalkStatus.CONTINUE


def _walk(node: Node, walker: Walker) -> WalkStatus:
    status = walker.on_enter(node)
    if status is WalkStatus.STOP:
        return WalkStatus.STOP

    if status is not WalkStatus.SKIP_CHILDREN:
        for child in node.child_nodes():
            if _walk(child, walker) is WalkStatus.STOP:
                return WalkStatus.STOP

    if walker.on_leave(node) is WalkStatus.STOP:
        return WalkStatus.STOP
    return WalkStatus.CONTINUE


def walk(root: Node, walker: Walker) -> WalkStatus:
    """Traverse ``root`` depth-first, delivering enter and leave events.

    Parameters
    ----------
    root : Node
        Node to start from (usually a Document)
    walker : Walker
        Object providing ``on_enter`` and ``on_leave``

    Returns
    -------
    WalkStatus
        ``STOP`` if a callback stopped the traversal, ``CONTINUE`` otherwise

    """
    return _walk(root, walker)


class _CallbackWalker:
    def __init__(
        self,
        on_enter: Callable[[Node], Optional[WalkStatus]],
        on_leave: Optional[Callable[[Node], Optional[WalkStatus]]] = None,
    ) -> None:
        self._on_enter = on_enter
        self._on_leave = on_leave

    def on_enter(self, node: Node) -> WalkStatus:
        return self._on_enter(node) or WalkStatus.CONTINUE

    def on_leave(self, node: Node) -> WalkStatus:
        if self._on_leave is None:
            return WalkStatus.CONTINUE
        return self._on_leave(node) or WalkStatus.CONTINUE


def walk_nodes(
    root: Node,
    on_enter: Callable[[Node], Optional[WalkStatus]],
    on_leave: Optional[Callable[[Node], Optional[WalkStatus]]] = None,
) -> WalkStatus:
    """Traverse ``root`` with plain callables instead of a walker object.

    A callable returning None is treated as returning ``CONTINUE``.

    Parameters
    ----------
    root : Node
        Node to start from
    on_enter : callable
        Called with each node before its children
    on_leave : callable, optional
        Called with each node after its children

    Returns
    -------
    WalkStatus
        Final traversal status

    """
    return walk(root, _CallbackWalker(on_enter, on_leave))


def iter_events(root: Node) -> Iterator[tuple[Node, bool]]:
    """Yield ``(node, entering)`` pairs in traversal order.

    Stopping early is done by breaking out of the loop; pruning is not
    available in this form.
    """
    yield root, True
    for child in root.child_nodes():
        yield from iter_events(child)
    yield root, False


__all__ = [
    "BaseWalker",
    "Walker",
    "WalkStatus",
    "iter_events",
    "walk",
    "walk_nodes",
]
