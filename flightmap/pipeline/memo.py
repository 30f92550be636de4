"""Single-slot memoization keyed on an explicit input key."""


class Memo:
    """Caches one computed value until the key it was computed for changes."""

    _MISSING = object()

    def __init__(self, compute):
        self._compute = compute
        self._key = self._MISSING
        self._value = None
        self.misses = 0

    def get(self, key, *args):
        if self._key is self._MISSING or key != self._key:
            self._value = self._compute(*args)
            self._key = key
            self.misses += 1
        return self._value

    def invalidate(self):
        self._key = self._MISSING
        self._value = None
