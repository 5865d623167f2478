"""Element arithmetic used by the determinant engine.

The engine never touches element values with operators directly; it goes
through a ``Field``. ``NativeField`` is the default and simply forwards to
Python operators and ``abs``, which covers int/float/complex, ``Fraction``,
``Decimal`` and NumPy scalars. Element types without usable operators or
without a magnitude ordering plug in their own ``Field`` (see ``PrimeField``).
"""

from __future__ import annotations

import abc
import math
from typing import Any


def _is_prime(n: int) -> bool:
    if n < 2:
        return False
    if n % 2 == 0:
        return n == 2
    k = 3
    while k * k <= n:
        if n % k == 0:
            return False
        k += 2
    return True


class Field(abc.ABC):
    """Capability set the engine requires from an element type.

    ``magnitude`` only needs to return values that compare with ``>``; the
    engine uses it to choose the pivot with the largest magnitude.
    """

    name: str = "field"

    def coerce(self, value: Any) -> Any:
        return value

    def promote(self, value: Any) -> Any:
        """Form of an entry used once elimination starts dividing rows."""
        return value

    @abc.abstractmethod
    def one(self) -> Any: ...

    @abc.abstractmethod
    def sub(self, a: Any, b: Any) -> Any: ...

    @abc.abstractmethod
    def mul(self, a: Any, b: Any) -> Any: ...

    @abc.abstractmethod
    def div(self, a: Any, b: Any) -> Any: ...

    @abc.abstractmethod
    def neg(self, a: Any) -> Any: ...

    @abc.abstractmethod
    def magnitude(self, a: Any) -> Any: ...

    @abc.abstractmethod
    def is_zero(self, a: Any) -> bool: ...

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.name}>"


class NativeField(Field):
    name = "native"

    def promote(self, value: Any) -> Any:
        # Ints beyond float range become +-inf.
        if isinstance(value, int):
            try:
                return float(value)
            except OverflowError:
                return math.inf if value > 0 else -math.inf
        return value

    def one(self) -> Any:
        return 1

    def sub(self, a: Any, b: Any) -> Any:
        return a - b

    def mul(self, a: Any, b: Any) -> Any:
        return a * b

    def div(self, a: Any, b: Any) -> Any:
        return a / b

    def neg(self, a: Any) -> Any:
        return -a

    def magnitude(self, a: Any) -> Any:
        return abs(a)

    def is_zero(self, a: Any) -> bool:
        # Exact comparison; no tolerance is applied.
        return not a


class PrimeField(Field):
    """Integers modulo a prime ``p``.

    Residues have no meaningful magnitude, so every nonzero residue ranks
    equally and the first nonzero entry in a column becomes the pivot.
    """

    def __init__(self, p: int):
        if isinstance(p, bool) or not isinstance(p, int):
            raise TypeError(f"PrimeField modulus must be an int, got {type(p).__name__}")
        if not _is_prime(p):
            raise ValueError(f"PrimeField modulus must be prime, got {p}")
        self.p = p
        self.name = f"GF({p})"

    def coerce(self, value: Any) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            # NumPy integer scalars expose __index__.
            index = getattr(value, "__index__", None)
            if index is None:
                raise TypeError(f"{self.name} elements must be integers, got {type(value).__name__}")
            value = index()
        return value % self.p

    def one(self) -> int:
        return 1 % self.p

    def sub(self, a: int, b: int) -> int:
        return (a - b) % self.p

    def mul(self, a: int, b: int) -> int:
        return (a * b) % self.p

    def div(self, a: int, b: int) -> int:
        return (a * pow(b, -1, self.p)) % self.p

    def neg(self, a: int) -> int:
        return (-a) % self.p

    def magnitude(self, a: int) -> int:
        return 0 if a % self.p == 0 else 1

    def is_zero(self, a: int) -> bool:
        return a % self.p == 0

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, PrimeField) and other.p == self.p

    def __hash__(self) -> int:
        return hash((PrimeField, self.p))


NATIVE_FIELD = NativeField()
