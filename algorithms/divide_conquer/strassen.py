"""
strassen.py — Strassen Matrix Multiplication
=============================================
Square matrices whose size is a power of two.  Each level splits A and
B into quadrants and forms the seven products

    M1 = (A11 + A22)(B11 + B22)    M5 = (A11 + A12) B22
    M2 = (A21 + A22) B11           M6 = (A21 - A11)(B11 + B12)
    M3 = A11 (B12 - B22)           M7 = (A12 - A22)(B21 + B22)
    M4 = A22 (B21 - B11)

then combines them into the four quadrants of C.  1×1 blocks are
multiplied directly.
"""

from typing import List, Optional

from algorithms.step import Tracer
from algorithms.validate import InvalidInput, require_grid

Matrix = List[List[float]]

PSEUDOCODE: List[str] = [
    "def strassen(A, B):",                                 # 0
    "    if n = 1: return A·B",                            # 1
    "    split A, B into quadrants",                       # 2
    "    M1 … M7 ← seven recursive products",              # 3
    "    C11 ← M1 + M4 - M5 + M7",                         # 4
    "    C12 ← M3 + M5",                                   # 5
    "    C21 ← M2 + M4",                                   # 6
    "    C22 ← M1 - M2 + M3 + M6",                         # 7
    "    return C",                                        # 8
]

BLANK = {"matrix_a": [], "matrix_b": []}

FORMULAS = [
    ("M1", "(A11 + A22)(B11 + B22)"),
    ("M2", "(A21 + A22) B11"),
    ("M3", "A11 (B12 - B22)"),
    ("M4", "A22 (B21 - B11)"),
    ("M5", "(A11 + A12) B22"),
    ("M6", "(A21 - A11)(B11 + B12)"),
    ("M7", "(A12 - A22)(B21 + B22)"),
]


def build_initial_state(seed: Optional[int] = None) -> dict:
    return {"matrix_a": [[2, 3], [4, 1]], "matrix_b": [[5, 7], [6, 8]]}


def _add(x: Matrix, y: Matrix) -> Matrix:
    return [[a + b for a, b in zip(rx, ry)] for rx, ry in zip(x, y)]


def _sub(x: Matrix, y: Matrix) -> Matrix:
    return [[a - b for a, b in zip(rx, ry)] for rx, ry in zip(x, y)]


def _split(m: Matrix):
    h = len(m) // 2
    return ([r[:h] for r in m[:h]], [r[h:] for r in m[:h]],
            [r[:h] for r in m[h:]], [r[h:] for r in m[h:]])


def strassen(t: Tracer) -> None:
    a = require_grid(t.state, "matrix_a", BLANK, square=True)
    b = require_grid(t.state, "matrix_b", BLANK, square=True)
    n = len(a)
    if len(b) != n or n & (n - 1) or n > 8:
        raise InvalidInput("Matrices must be the same size, a power of two, at most 8×8.", BLANK)

    t.emit(f"Multiply two {n}×{n} matrices with Strassen's algorithm.", 0)

    t.emit("Start the recursion.", 0, products={}, result=None, depth=0, current=None)
    c = _multiply(t, a, b, 0)
    t.finish(f"Product: {_show(c)}.", 8, result=c, depth=0, current=None)


def _multiply(t: Tracer, a: Matrix, b: Matrix, depth: int) -> Matrix:
    n = len(a)
    if n == 1:
        return [[a[0][0] * b[0][0]]]

    a11, a12, a21, a22 = _split(a)
    b11, b12, b21, b22 = _split(b)
    t.emit(f"Level {depth}: split both {n}×{n} matrices into {n // 2}×{n // 2} quadrants.", 2, depth=depth)

    operands = [
        (_add(a11, a22), _add(b11, b22)),
        (_add(a21, a22), b11),
        (a11, _sub(b12, b22)),
        (a22, _sub(b21, b11)),
        (_add(a11, a12), b22),
        (_sub(a21, a11), _add(b11, b12)),
        (_sub(a12, a22), _add(b21, b22)),
    ]
    m: List[Matrix] = []
    for (name, formula), (x, y) in zip(FORMULAS, operands):
        product = _multiply(t, x, y, depth + 1)
        m.append(product)
        if depth == 0:
            t.state["products"][name] = product
        t.emit(f"Level {depth}: {name} = {formula} = {_show(product)}.", 3, depth=depth, current=name)

    m1, m2, m3, m4, m5, m6, m7 = m
    c11 = _add(_sub(_add(m1, m4), m5), m7)
    c12 = _add(m3, m5)
    c21 = _add(m2, m4)
    c22 = _add(_add(_sub(m1, m2), m3), m6)
    for quadrant, line, value in (("C11", 4, c11), ("C12", 5, c12), ("C21", 6, c21), ("C22", 7, c22)):
        t.emit(f"Level {depth}: {quadrant} = {_show(value)}.", line, depth=depth, current=quadrant)

    return [r1 + r2 for r1, r2 in zip(c11, c12)] + [r1 + r2 for r1, r2 in zip(c21, c22)]


def _show(m: Matrix) -> str:
    if len(m) == 1:
        return str(m[0][0])
    return "[" + "; ".join(" ".join(str(v) for v in row) for row in m) + "]"
