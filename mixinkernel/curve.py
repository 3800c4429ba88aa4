"""Edwards25519 scalars and points."""

from __future__ import annotations

from typing import Iterable

_P = 2**255 - 19
_L = 2**252 + 27742317777372353535851937790883648493
_D = -121665 * pow(121666, -1, _P) % _P
_SQRT_M1 = pow(2, (_P - 1) // 4, _P)


class Scalar:
    """An integer modulo the group order."""

    __slots__ = ("value",)

    def __init__(self, value: int = 0):
        self.value = value % _L

    @classmethod
    def from_uniform_bytes(cls, data: bytes) -> Scalar:
        """Reduce 64 little-endian bytes modulo the group order."""
        if len(data) != 64:
            raise ValueError("edwards25519: invalid uniform bytes length")
        return cls(int.from_bytes(data, "little"))

    @classmethod
    def from_canonical_bytes(cls, data: bytes) -> Scalar:
        """Decode a 32-byte little-endian scalar that must be reduced."""
        value = int.from_bytes(data, "little")
        if len(data) != 32 or value >= _L:
            raise ValueError("edwards25519: invalid scalar encoding")
        return cls(value)

    @classmethod
    def zero(cls) -> Scalar:
        return cls(0)

    def to_bytes(self) -> bytes:
        return self.value.to_bytes(32, "little")

    def multiply_add(self, other: Scalar, addend: Scalar) -> Scalar:
        """Return self * other + addend."""
        return Scalar(self.value * other.value + addend.value)

    def __add__(self, other: Scalar) -> Scalar:
        return Scalar(self.value + other.value)

    def __sub__(self, other: Scalar) -> Scalar:
        return Scalar(self.value - other.value)

    def __mul__(self, other: Scalar) -> Scalar:
        return Scalar(self.value * other.value)

    def __neg__(self) -> Scalar:
        return Scalar(-self.value)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Scalar) and self.value == other.value

    __hash__ = None


class Point:
    """A point on the curve in extended coordinates."""

    __slots__ = ("x", "y", "z", "t")

    def __init__(self, x: int, y: int, z: int, t: int):
        self.x, self.y, self.z, self.t = x % _P, y % _P, z % _P, t % _P

    @classmethod
    def identity(cls) -> Point:
        return cls(0, 1, 1, 0)

    @classmethod
    def generator(cls) -> Point:
        return _BASE

    @classmethod
    def from_bytes(cls, data: bytes) -> Point:
        """Decode a 32-byte point, accepting non-canonical encodings."""
        if len(data) != 32:
            raise ValueError("edwards25519: invalid point encoding length")
        encoded = int.from_bytes(data, "little")
        y = (encoded & ((1 << 255) - 1)) % _P
        yy = y * y % _P
        x2 = (yy - 1) * pow(_D * yy + 1, -1, _P) % _P
        x = pow(x2, (_P + 3) // 8, _P)
        if (x * x - x2) % _P:
            x = x * _SQRT_M1 % _P
            if (x * x - x2) % _P:
                raise ValueError("edwards25519: invalid point encoding")
        if x & 1 != encoded >> 255:
            x = -x % _P
        return cls(x, y, 1, x * y)

    def to_bytes(self) -> bytes:
        zinv = pow(self.z, -1, _P)
        x, y = self.x * zinv % _P, self.y * zinv % _P
        return (y | ((x & 1) << 255)).to_bytes(32, "little")

    def __add__(self, other: Point) -> Point:
        a = (self.y - self.x) * (other.y - other.x)
        b = (self.y + self.x) * (other.y + other.x)
        c = self.t * 2 * _D * other.t
        d = self.z * 2 * other.z
        e, f, g, h = b - a, d - c, d + c, b + a
        return Point(e * f, g * h, f * g, e * h)

    def __neg__(self) -> Point:
        return Point(-self.x, self.y, self.z, -self.t)

    def __sub__(self, other: Point) -> Point:
        return self + (-other)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Point) and not (
            (self.x * other.z - other.x * self.z) % _P
            or (self.y * other.z - other.y * self.z) % _P
        )

    __hash__ = None

    def scalar_mult(self, scalar: Scalar) -> Point:
        result = Point.identity()
        for bit in format(scalar.value, "b"):
            result = result + result
            if bit == "1":
                result = result + self
        return result

    @classmethod
    def scalar_base_mult(cls, scalar: Scalar) -> Point:
        return _BASE.scalar_mult(scalar)

    def mul_by_cofactor(self) -> Point:
        return self.scalar_mult(Scalar(8))

    @classmethod
    def double_scalar_base_mult(cls, a: Scalar, point: Point, b: Scalar) -> Point:
        """Return a * point + b * generator."""
        return point.scalar_mult(a) + cls.scalar_base_mult(b)


def multi_scalar_mult(scalars: Iterable[Scalar], points: Iterable[Point]) -> Point:
    """Sum of scalar multiples of points."""
    scalars, points = list(scalars), list(points)
    if len(scalars) != len(points):
        raise ValueError("scalars and points differ in number")
    result = Point.identity()
    for scalar, point in zip(scalars, points):
        result = result + point.scalar_mult(scalar)
    return result


_BASE = Point.from_bytes(bytes.fromhex("58" + "66" * 31))