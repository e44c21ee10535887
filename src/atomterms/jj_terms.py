r"""jj 耦合等价电子的总角动量
==============================

对相对论轨道 :math:`n\ell_j^w`，枚举所有允许的总角动量 :math:`J`（含重复）。

思路：:math:`w` 个费米子的乘积态（Slater 行列式）即 :math:`\{-j,\dots,j\}` 中
:math:`w` 个不同 :math:`m` 的组合，每个组合都是 :math:`J_z` 本征态，本征值
:math:`M = \sum m`。每个耦合后的 :math:`J` 贡献 :math:`M \in \{-J,\dots,J\}`，
因此对 :math:`M` 的直方图从最大 :math:`M` 向内做相邻差分，即得到各 :math:`J`
的出现次数。
"""

from __future__ import annotations

from itertools import combinations

import numpy as np
import sympy as sp

from .orbitals import RelativisticOrbital
from .utils import DomainError, half

__all__ = [
    "jj_terms",
    "m_histogram",
]


def m_histogram(j, w: int) -> np.ndarray:
    r"""统计 :math:`j^w` 全部行列式的总投影 :math:`M` 分布。

    Parameters
    ----------
    j : half-integer
        单粒子总角动量。
    w : int
        粒子数，:math:`1 \leq w \leq 2j+1`。

    Returns
    -------
    numpy.ndarray
        长度 :math:`2J_{\max}+1` 的整数数组（:math:`J_{\max} = jw`），第 ``i`` 个
        元素对应 :math:`M = -J_{\max} + i`。
    """
    two_j = int(2 * j)
    if two_j < 0:
        raise DomainError(f"j 必须非负: j={j}")
    if not 1 <= w <= two_j + 1:
        raise DomainError(f"w 必须满足 1 <= w <= 2j+1 (={two_j + 1})，实际 w={w}")
    two_jmax = two_j * w
    hist = np.zeros(two_jmax + 1, dtype=np.int64)
    # 全部使用加倍投影 2m，保证整数运算
    for c in combinations(range(-two_j, two_j + 1, 2), w):
        hist[(sum(c) + two_jmax) // 2] += 1
    return hist


def _terms_jw(j, w: int) -> list[sp.Rational]:
    """按降序返回 :math:`J` 值列表。"""
    hist = m_histogram(j, w)
    if not np.array_equal(hist, hist[::-1]):
        raise RuntimeError(f"M 直方图不对称（j={j}, w={w}）")
    nbins = hist.size
    mid = nbins // 2 + nbins % 2
    two_jmax = nbins - 1
    # 相邻差分：在 M 处新出现的 J=M 态的个数
    counts = np.diff(hist[:mid], prepend=0)
    if np.any(counts < 0):
        raise RuntimeError(f"M 直方图非单调（j={j}, w={w}）")
    jvalues: list[sp.Rational] = []
    for i, c in enumerate(counts):
        jvalues.extend([half(two_jmax - 2 * i)] * int(c))
    return jvalues


def jj_terms(orb: RelativisticOrbital, w: int = 1) -> list[sp.Rational]:
    r"""相对论轨道 :math:`w` 个等价粒子的全部 :math:`J` 值（升序，含重复）。

    Parameters
    ----------
    orb : RelativisticOrbital
        相对论轨道。
    w : int, optional
        占据数，:math:`0 \leq w \leq 2j+1`。

    Returns
    -------
    list[sympy.Rational]
        升序排列的 :math:`J`；同一 :math:`J` 出现多次表示简并。

    Notes
    -----
    当 :math:`2w \geq 2j+1` 时改用空穴数 :math:`2j+1-w` 计算。

    Examples
    --------
    >>> from atomterms.orbitals import orbital_from_string
    >>> [str(J) for J in jj_terms(orbital_from_string("3d", relativistic=True), 3)]
    ['3/2', '5/2', '9/2']
    """
    j = orb.j
    g = orb.degeneracy
    if not 0 <= w <= g:
        raise DomainError(f"w 必须满足 0 <= w <= 2j+1 (={g})，j={j}，实际 w={w}")
    if 2 * w >= g:
        w = g - w
    if w == 0:
        return [sp.Integer(0)]
    if w == 1:
        return [j]
    return list(reversed(_terms_jw(j, w)))
