# qregsim/complex_math.py
"""Scalar complex helpers used by rendering and the metrics code.

Values are plain Python ``complex``; every helper returns a new value.
"""
import cmath


def create(real: float, imag: float = 0.0) -> complex:
    return complex(real, imag)

def add(a: complex, b: complex) -> complex:
    return complex(a) + complex(b)

def subtract(a: complex, b: complex) -> complex:
    return complex(a) - complex(b)

def multiply(a: complex, b: complex) -> complex:
    return complex(a) * complex(b)

def conjugate(c: complex) -> complex:
    return complex(c).conjugate()

def scale(c: complex, scalar: float) -> complex:
    return complex(c) * scalar

def magnitude(c: complex) -> float:
    return abs(complex(c))

def magnitude_squared(c: complex) -> float:
    """|c|^2 without the square root (probability of an amplitude)."""
    c = complex(c)
    return c.real * c.real + c.imag * c.imag

def phase(c: complex) -> float:
    return cmath.phase(complex(c))

def from_polar(mag: float, angle: float) -> complex:
    return cmath.rect(mag, angle)

def isclose(a: complex, b: complex, tol: float = 1e-9) -> bool:
    return abs(complex(a) - complex(b)) <= tol

def to_string(c: complex, precision: int = 4) -> str:
    """Format as ``'a + bi'`` / ``'a - bi'`` with fixed precision."""
    c = complex(c)
    real = 0.0 if c.real == 0 else c.real  # drop the sign of -0.0
    sign = "+" if c.imag >= 0 else "-"
    return f"{real:.{precision}f} {sign} {abs(c.imag):.{precision}f}i"
