"""Square matrices and affine transform builders.

Matrices are immutable and backed by a float64 NumPy array. The determinant
and inverse are computed by cofactor expansion and the adjugate, and the
inverse is cached on first use since every object, pattern and camera
consults its inverse transform on the hot path.

Transform builders return 4x4 matrices:

    translation(x, y, z)      scaling(x, y, z)
    rotation_x(r)             rotation_y(r)             rotation_z(r)
    shearing(xy, xz, yx, yz, zx, zy)
    view_transform(from_, to, up)

The fluent methods (``translate``, ``scale``, ``rotate_x`` ...) premultiply
the new transform, so chained calls apply in the order they are written:

    >>> from whitted.core.matrix import Matrix
    >>> m = Matrix.identity().rotate_x(1.5708).scale(5, 5, 5).translate(10, 5, 7)
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import overload

import numpy as np
import numpy.typing as npt

from whitted.core.tuples import EPSILON, Point, Vector


class SingularMatrixError(ValueError):
    """Raised when inverting a matrix whose determinant is (almost) zero."""


class Matrix:
    """An immutable n x n matrix of floats.

    Attributes:
        size: The number of rows (and columns).
    """

    __slots__ = ("_data", "_rows", "_inverse")

    def __init__(self, rows: Sequence[Sequence[float]] | npt.NDArray[np.float64]) -> None:
        data = np.array(rows, dtype=np.float64)
        if data.ndim != 2 or data.shape[0] != data.shape[1]:
            raise ValueError(f"Matrix must be square, got shape {data.shape}")
        data.setflags(write=False)
        self._data = data
        self._rows: tuple[tuple[float, ...], ...] = tuple(
            tuple(row) for row in data.tolist()
        )
        self._inverse: Matrix | None = None

    @classmethod
    def identity(cls, size: int = 4) -> Matrix:
        """Return the multiplicative identity of the given size."""
        return cls(np.identity(size))

    @property
    def size(self) -> int:
        return self._data.shape[0]

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, col = index
        return self._rows[row][col]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self._data.shape != other._data.shape:
            return False
        return bool(np.allclose(self._data, other._data, rtol=0.0, atol=EPSILON))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix({self._data.tolist()!r})"

    def __getstate__(self) -> tuple[npt.NDArray[np.float64], Matrix | None]:
        return (np.array(self._data), self._inverse)

    def __setstate__(self, state: tuple[npt.NDArray[np.float64], Matrix | None]) -> None:
        data, inverse = state
        Matrix.__init__(self, data)
        self._inverse = inverse

    def to_numpy(self) -> npt.NDArray[np.float64]:
        """Return a writable copy of the matrix data."""
        return np.array(self._data)

    # =========================================================================
    # Products
    # =========================================================================

    @overload
    def __matmul__(self, other: Matrix) -> Matrix: ...

    @overload
    def __matmul__(self, other: Point) -> Point: ...

    @overload
    def __matmul__(self, other: Vector) -> Vector: ...

    def __matmul__(self, other):
        if isinstance(other, Matrix):
            if other.size != self.size:
                raise ValueError(
                    f"Cannot multiply {self.size}x{self.size} by {other.size}x{other.size}"
                )
            return Matrix(self._data @ other._data)
        if isinstance(other, Point):
            x, y, z = self._transform(other.x, other.y, other.z, 1.0)
            return Point(x, y, z)
        if isinstance(other, Vector):
            x, y, z = self._transform(other.x, other.y, other.z, 0.0)
            return Vector(x, y, z)
        return NotImplemented

    def _transform(self, x: float, y: float, z: float, w: float) -> tuple[float, float, float]:
        r0, r1, r2 = self._rows[0], self._rows[1], self._rows[2]
        return (
            r0[0] * x + r0[1] * y + r0[2] * z + r0[3] * w,
            r1[0] * x + r1[1] * y + r1[2] * z + r1[3] * w,
            r2[0] * x + r2[1] * y + r2[2] * z + r2[3] * w,
        )

    # =========================================================================
    # Inversion
    # =========================================================================

    def transpose(self) -> Matrix:
        """Return the transposed matrix."""
        return Matrix(self._data.T)

    def submatrix(self, row: int, col: int) -> Matrix:
        """Return a copy with the given row and column removed."""
        data = np.delete(np.delete(self._data, row, axis=0), col, axis=1)
        return Matrix(data)

    def minor(self, row: int, col: int) -> float:
        """Return the determinant of the submatrix at (row, col)."""
        return self.submatrix(row, col).determinant()

    def cofactor(self, row: int, col: int) -> float:
        """Return the signed minor at (row, col)."""
        minor = self.minor(row, col)
        return -minor if (row + col) % 2 else minor

    def determinant(self) -> float:
        """Compute the determinant by cofactor expansion along the first row."""
        if self.size == 1:
            return self._rows[0][0]
        if self.size == 2:
            (a, b), (c, d) = self._rows
            return a * d - b * c
        return sum(self._rows[0][col] * self.cofactor(0, col) for col in range(self.size))

    def is_invertible(self) -> bool:
        return abs(self.determinant()) >= EPSILON

    def inverse(self) -> Matrix:
        """Return the inverse matrix via the adjugate.

        Raises:
            SingularMatrixError: If the determinant is approximately zero.
        """
        if self._inverse is not None:
            return self._inverse

        det = self.determinant()
        if abs(det) < EPSILON:
            raise SingularMatrixError(
                f"Matrix is not invertible (determinant {det!r}): {self._data.tolist()}"
            )

        n = self.size
        adjugate = np.empty((n, n), dtype=np.float64)
        for row in range(n):
            for col in range(n):
                # Transposed placement builds the adjugate directly
                adjugate[col, row] = self.cofactor(row, col)
        self._inverse = Matrix(adjugate / det)
        return self._inverse

    # =========================================================================
    # Fluent transform helpers
    # =========================================================================

    def translate(self, x: float, y: float, z: float) -> Matrix:
        return translation(x, y, z) @ self

    def scale(self, x: float, y: float, z: float) -> Matrix:
        return scaling(x, y, z) @ self

    def rotate_x(self, radians: float) -> Matrix:
        return rotation_x(radians) @ self

    def rotate_y(self, radians: float) -> Matrix:
        return rotation_y(radians) @ self

    def rotate_z(self, radians: float) -> Matrix:
        return rotation_z(radians) @ self

    def shear(self, xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
        return shearing(xy, xz, yx, yz, zx, zy) @ self


IDENTITY = Matrix.identity()


# =============================================================================
# Transform Builders
# =============================================================================


def translation(x: float, y: float, z: float) -> Matrix:
    """Move points by (x, y, z). Vectors are unaffected."""
    return Matrix(
        [
            [1.0, 0.0, 0.0, x],
            [0.0, 1.0, 0.0, y],
            [0.0, 0.0, 1.0, z],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def scaling(x: float, y: float, z: float) -> Matrix:
    """Scale about the origin. Negative factors reflect."""
    return Matrix(
        [
            [x, 0.0, 0.0, 0.0],
            [0.0, y, 0.0, 0.0],
            [0.0, 0.0, z, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_x(radians: float) -> Matrix:
    """Rotate about the x axis following the right-hand rule."""
    c, s = math.cos(radians), math.sin(radians)
    return Matrix(
        [
            [1.0, 0.0, 0.0, 0.0],
            [0.0, c, -s, 0.0],
            [0.0, s, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_y(radians: float) -> Matrix:
    """Rotate about the y axis."""
    c, s = math.cos(radians), math.sin(radians)
    return Matrix(
        [
            [c, 0.0, s, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [-s, 0.0, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_z(radians: float) -> Matrix:
    """Rotate about the z axis."""
    c, s = math.cos(radians), math.sin(radians)
    return Matrix(
        [
            [c, -s, 0.0, 0.0],
            [s, c, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
    """Shear each component in proportion to the other two.

    Args:
        xy: x moved in proportion to y.
        xz: x moved in proportion to z.
        yx: y moved in proportion to x.
        yz: y moved in proportion to z.
        zx: z moved in proportion to x.
        zy: z moved in proportion to y.
    """
    return Matrix(
        [
            [1.0, xy, xz, 0.0],
            [yx, 1.0, yz, 0.0],
            [zx, zy, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def view_transform(from_: Point, to: Point, up: Vector) -> Matrix:
    """Build the world-to-eye transform for a camera.

    The basis is built from the forward direction, then ``left`` from
    ``forward x up`` and the true up from ``left x forward``, so ``up`` only
    needs to be approximately perpendicular to the line of sight.

    Args:
        from_: The eye position.
        to: The point the eye looks at.
        up: Approximate up direction.

    Returns:
        The orientation matrix composed with a translation moving ``from_``
        to the origin.
    """
    forward = (to - from_).normalize()
    left = forward.cross(up.normalize())
    true_up = left.cross(forward)
    orientation = Matrix(
        [
            [left.x, left.y, left.z, 0.0],
            [true_up.x, true_up.y, true_up.z, 0.0],
            [-forward.x, -forward.y, -forward.z, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )
    return orientation @ translation(-from_.x, -from_.y, -from_.z)
