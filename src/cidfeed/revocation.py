"""Revocation queue flush stub.

There is no revocation protocol behind this: ids are partitioned by
string rules only so the UI retry flow can be exercised.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from cidfeed._constants import FAIL_PREFIX
from cidfeed.models.security import FlushRevocationResult

_logger = logging.getLogger(__name__)


def flush_revocation_queue(revocation_ids: Iterable[str]) -> FlushRevocationResult:
    """Partition *revocation_ids* into flushed and failed ids.

    An id fails when it is empty after trimming, repeats an id seen
    earlier in the same batch, or starts with ``"fail-"``.  Order is
    preserved in both lists and ids are reported trimmed.
    """
    flushed: list[str] = []
    failed: list[str] = []
    seen: set[str] = set()

    for raw_id in revocation_ids:
        revocation_id = raw_id.strip()
        if not revocation_id or revocation_id in seen:
            failed.append(revocation_id)
            continue
        seen.add(revocation_id)
        if revocation_id.startswith(FAIL_PREFIX):
            failed.append(revocation_id)
        else:
            flushed.append(revocation_id)

    _logger.debug("Revocation flush flushed=%d failed=%d", len(flushed), len(failed))
    return FlushRevocationResult(flushed_ids=flushed, failed_ids=failed)
