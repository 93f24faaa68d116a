"""
fft.py — Fast Fourier Transform (radix-2 Cooley–Tukey)
=======================================================
Iterative form: permute the samples into bit-reversed order, then run
log2(n) stages of butterflies.  Stage s combines pairs of transforms of
size len/2 into transforms of size len = 2^s:

    u ← A[i + k];  v ← w^k · A[i + k + len/2]
    A[i + k] ← u + v;  A[i + k + len/2] ← u - v

with w = e^(-2πi / len).  Every butterfly is one step.

State:
  • values     – working array, each entry {"real", "imag"}
  • stage      – current stage (1 … log2 n)
  • butterfly  – [top, bottom] indices being combined
  • twiddle    – w^k for the current butterfly
  • magnitudes – |X[k]| once the transform is done
"""

import cmath
import math
import random
from typing import Any, Dict, List, Optional

from algorithms.formatting import fmt
from algorithms.step import Tracer
from algorithms.validate import InvalidInput, require_numbers


PSEUDOCODE: List[str] = [
    "def FFT(a):  # |a| = n = 2^k",                         # 0
    "    reorder a by bit-reversed index",                  # 1
    "    for len in 2, 4, …, n:",                           # 2
    "        w ← e^(-2πi / len)",                           # 3
    "        for each block i, for k in 0 … len/2-1:",      # 4
    "            u ← a[i+k]; v ← w^k · a[i+k+len/2]",       # 5
    "            a[i+k] ← u + v; a[i+k+len/2] ← u - v",     # 6
    "    return a",                                         # 7
]

BLANK = {"samples": []}

MAX_SAMPLES = 64
PRECISION   = 4


def build_initial_state(seed: Optional[int] = None) -> dict:
    n = 8
    if seed is not None:
        rng = random.Random(seed)
        return {"samples": [rng.randint(-5, 5) for _ in range(n)]}
    samples = [
        2 + 3 * math.cos(2 * math.pi * i / n) + 1.5 * math.sin(4 * math.pi * i / n)
        for i in range(n)
    ]
    return {"samples": [round(v, PRECISION) for v in samples]}


def _c(z: complex) -> Dict[str, float]:
    # round(-0.0) stays -0.0; adding 0.0 normalises it
    return {"real": round(z.real, PRECISION) + 0.0, "imag": round(z.imag, PRECISION) + 0.0}


def _show(z: complex) -> str:
    re, im = round(z.real, 3) + 0.0, round(z.imag, 3) + 0.0
    if im == 0:
        return fmt(re)
    return f"{fmt(re)}{'+' if im > 0 else '-'}{fmt(abs(im))}i"


def fft(t: Tracer) -> None:
    samples = require_numbers(t.state, "samples", BLANK)
    n = len(samples)
    if n > MAX_SAMPLES or n & (n - 1):
        raise InvalidInput(f"Sample count must be a power of two up to {MAX_SAMPLES}.", BLANK)

    t.emit(f"FFT of {n} samples.", 0)

    bits = n.bit_length() - 1
    order = [int(format(i, f"0{bits}b")[::-1], 2) if bits else 0 for i in range(n)]
    a: List[complex] = [complex(samples[order[i]]) for i in range(n)]
    t.emit("Reorder the samples by bit-reversed index: " + ", ".join(map(str, order)) + ".", 1,
           title="Bit reversal", order=order, values=[_c(z) for z in a], stage=0,
           butterfly=[], twiddle=None, magnitudes=[])

    length, stage = 2, 1
    while length <= n:
        half = length // 2
        w = cmath.exp(-2j * math.pi / length)
        t.emit(f"Stage {stage}: combine pairs of size-{half} transforms; w = e^(-2πi/{length}).", 3,
               title=f"Stage {stage}", stage=stage, butterfly=[], twiddle=_c(w))
        for i in range(0, n, length):
            for k in range(half):
                top, bottom = i + k, i + k + half
                wk = w ** k
                u, v = a[top], wk * a[bottom]
                a[top], a[bottom] = u + v, u - v
                t.emit(f"Butterfly ({top}, {bottom}) with w^{k} = {_show(wk)}: "
                       f"{_show(u)} ± {_show(v)} → {_show(a[top])}, {_show(a[bottom])}.", 6,
                       values=[_c(z) for z in a], butterfly=[top, bottom], twiddle=_c(wk))
        length *= 2
        stage += 1

    mags = [round(abs(z), PRECISION) for z in a]
    t.finish("Spectrum: " + ", ".join(f"X[{k}] = {_show(z)}" for k, z in enumerate(a)) + ".", 7,
             butterfly=[], twiddle=None, magnitudes=mags)


def spectrum(state: Dict[str, Any]) -> List[complex]:
    """Complex values stored in a state back as Python complex numbers."""
    return [complex(v["real"], v["imag"]) for v in state.get("values", [])]
