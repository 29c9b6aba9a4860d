"""Runtime environment for Schemer.

An Environment is a persistent chain of frames. Each frame maps symbolic names
to evaluated values; frames are searched innermost first. Extending an
environment never touches the existing chain: it returns a new Environment whose
`outer` link points at the old one, so a Closure that captured an environment
keeps seeing exactly the bindings that existed when it was made.
"""

from __future__ import annotations

from io import StringIO
from types import MappingProxyType
from typing import Iterator, Mapping, Optional

from schemer import Expression
from schemer.errors import InvalidSymbol, UnboundIdentifier


class Environment:
    """Immutable, structurally shared chain of name -> value frames."""

    __slots__ = ("vars", "outer", "_depth")

    _EMPTY: Optional[Environment] = None

    def __init__(
        self,
        frame: Mapping[str, Expression] | None = None,
        outer: Optional[Environment] = None,
    ):
        bindings = dict(frame or {})
        for name in bindings:
            if not isinstance(name, str):
                raise InvalidSymbol(f"Cannot bind {name!r} as a symbol", name)
        # Read-only view; the dict itself never escapes
        self.vars: Mapping[str, Expression] = MappingProxyType(bindings)
        self.outer: Environment | None = outer
        self._depth: int = (0 if outer is None else len(outer)) + 1

    @classmethod
    def empty(cls) -> Environment:
        """The shared top-level environment with no frames."""
        if cls._EMPTY is None:
            cls._EMPTY = _EmptyEnvironment()
        return cls._EMPTY

    def extend(self, frame: Mapping[str, Expression]) -> Environment:
        """Return a new environment with `frame` as its innermost scope."""
        return Environment(frame, outer=self)

    def frames(self) -> Iterator[Mapping[str, Expression]]:
        """Yield each frame, innermost first."""
        env: Optional[Environment] = self
        while env is not None:
            if env._depth:
                yield env.vars
            env = env.outer

    def find(self, name: str) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: str) -> Expression:
        """Look up the value bound to `name`.

        Raises UnboundIdentifier if no frame binds it.
        """
        env = self.find(name)
        if env is None:
            raise UnboundIdentifier(f"Cannot lookup unbound identifier {name}", name)
        return env.vars[name]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.find(name) is not None

    def __len__(self) -> int:
        """Number of frames in the chain."""
        return self._depth

    def _write_vars(self, buffer: StringIO, frame: Mapping[str, Expression]) -> None:
        """Write a frame's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in frame.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable innermost frame with an indicator for outer frames."""
        with StringIO() as buffer:
            self._write_vars(buffer, self.vars)
            if self._depth > 1:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            chain = []
            for frame in self.frames():
                env_buf = StringIO()
                self._write_vars(env_buf, frame)
                chain.append(env_buf.getvalue())
            buffer.write(" -> ".join(chain) if chain else "empty")
            buffer.write(">")
            return buffer.getvalue()


class _EmptyEnvironment(Environment):
    """The root of every chain: no frame at all."""

    __slots__ = ()

    def __init__(self):
        super().__init__(None, None)
        self._depth = 0
