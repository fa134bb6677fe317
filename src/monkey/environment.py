# environment.py

_MISSING = object()


class Environment:
    """A lexical scope: local bindings plus an optional enclosing scope.

    Closures hold a reference to the Environment they were defined in, so a
    scope is shared, never copied. ``set`` only ever writes to the local store.
    """

    def __init__(self, outer=None):
        self.store = {}
        self.outer = outer

    @classmethod
    def child_of(cls, outer):
        """Create an empty scope enclosed by ``outer`` (one per function call)."""
        return cls(outer=outer)

    # ---- Mapping protocol helpers -------------------------------------------------

    def __contains__(self, name):
        if name in self.store:
            return True
        if self.outer is not None:
            return name in self.outer
        return False

    def __getitem__(self, name):
        value = self.get(name, _MISSING)
        if value is _MISSING:
            raise KeyError(name)
        return value

    def __setitem__(self, name, value):
        self.set(name, value)

    def __iter__(self):
        return iter(self.store)

    def __len__(self):
        return len(self.store)

    def keys(self):
        return self.store.keys()

    def items(self):
        return self.store.items()

    # ---- Core environment operations ---------------------------------------------

    def get(self, name, default=None):
        """Get a value, searching this scope then each enclosing scope."""
        env = self
        while env is not None:
            if name in env.store:
                return env.store[name]
            env = env.outer
        return default

    def set(self, name, value):
        """Bind in this scope only; enclosing scopes are never touched."""
        self.store[name] = value
        return value

    def depth(self):
        """Number of enclosing scopes above this one (0 for a global scope)."""
        count = 0
        env = self.outer
        while env is not None:
            count += 1
            env = env.outer
        return count

    def __repr__(self):
        return f"Environment(names={sorted(self.store)}, depth={self.depth()})"
