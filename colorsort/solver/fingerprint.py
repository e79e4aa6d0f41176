"""
Fingerprint Module - Order-independent digest of a layout for visited-state tracking.

Two layouts that differ only by a permutation of their containers produce
the same fingerprint. Equal digests are treated as equal states; the search
does not fall back to a full comparison on a hash collision.
"""

import hashlib
from typing import Iterable, TYPE_CHECKING

from .container import Container

if TYPE_CHECKING:
    from .layout import Layout


def canonical_form(containers: Iterable[Container]) -> str:
    """
    Render containers as sorted, newline-joined comma lists.

    Layers are rendered with repr(), so colors that print alike but
    compare unequal (1 and "1") stay distinct.

    Args:
        containers: Containers of one layout

    Returns:
        Canonical string, identical for any container ordering
    """
    return "\n".join(sorted(
        ",".join(repr(layer) for layer in container.layers)
        for container in containers
    ))


def fingerprint(layout: "Layout") -> str:
    """
    Compute a 128-bit digest of the layout's canonical form.

    Args:
        layout: Layout to fingerprint

    Returns:
        MD5 hex digest
    """
    return hashlib.md5(layout.canonical_form().encode("utf-8")).hexdigest()
