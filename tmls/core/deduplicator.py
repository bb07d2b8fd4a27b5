"""Suppression of unchanged consecutive snapshot listings."""

from typing import Dict, FrozenSet, Hashable, Iterable


class ChangeDeduplicator:
    """Remembers the last reported listing of each (volume, location) stream."""

    def __init__(self):
        self._last: Dict[Hashable, FrozenSet[str]] = {}

    def should_emit(self, stream_key: Hashable, listing: Iterable[str]) -> bool:
        """Decide whether a listing is a change worth reporting.

        Listings are compared as sets of names, so a different order alone
        is not a change. The first listing of a stream is always reported.

        Args:
            stream_key: Identifies the stream, usually (volume, location).
            listing: Entry names found in the snapshot.

        Returns:
            True if the listing should be reported.
        """
        names = frozenset(listing)
        if stream_key in self._last and self._last[stream_key] == names:
            return False
        self._last[stream_key] = names
        return True

    def reset(self, stream_key: Hashable = None):
        """Forget one stream, or every stream when no key is given."""
        if stream_key is None:
            self._last.clear()
        else:
            self._last.pop(stream_key, None)
