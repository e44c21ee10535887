r"""Xu–Dai 谱项多重度算法
==========================

对 :math:`w` 个等价 :math:`\ell` 电子，计算总自旋 :math:`S` 与总轨道角动量
:math:`L` 的谱项出现次数 :math:`X(w, \ell, S', L)`，其中 :math:`S' = 2S`
（加倍自旋，保证全程整数运算）。

算法
====

1. :math:`f(n, \ell, M)`：从 :math:`\{-\ell, \dots, \ell\}` 中取 :math:`n` 个不同
   :math:`m_\ell` 使其和为 :math:`M` 的方式数（同自旋电子的 Pauli 约束）。
2. :math:`A(w, \ell, S', M_L)`：满足 :math:`2M_S = S'` 与给定 :math:`M_L` 的
   Slater 行列式数。自旋向上/向下电子数为
   :math:`n_\uparrow = (w+S')/2`，:math:`n_\downarrow = (w-S')/2`，

   .. math::

       A(w, \ell, S', M_L) = \sum_{M} f(n_\uparrow, \ell, M)\, f(n_\downarrow, \ell, M_L - M)

3. 对 :math:`M_S` 与 :math:`M_L` 分别做相邻差分：

   .. math::

       X(w, \ell, S', L) = A(S', L) - A(S'+2, L) - A(S', L+1) + A(S'+2, L+1)

Xu–Dai 原文把相邻差分写进递推函数 :math:`f` 中；这里 :math:`f` 只做投影子集计数，
差分集中在 :func:`X` 一步完成。两种写法逐项相等，:math:`w = 0`、:math:`w = 1`
与满壳层也无需单独处理。

References
----------
.. [Xu2006] Xu, R., & Dai, Z. (2006)
   "Alternative mathematical technique to determine LS spectral terms"
   J. Phys. B: At. Mol. Opt. Phys. 39(16), 3221–3239
"""

from __future__ import annotations

from functools import lru_cache

from .utils import DomainError

__all__ = [
    "f",
    "A",
    "X",
]


@lru_cache(maxsize=None)
def _subset_sums(n: int, top: int, m: int) -> int:
    """从 {0, 1, ..., top} 中取 n 个不同整数使其和为 m 的方式数。"""
    if n == 0:
        return 1 if m == 0 else 0
    if m < 0 or top < 0 or n > top + 1:
        return 0
    # 最大可能和: top + (top-1) + ... + (top-n+1)
    if m > n * top - n * (n - 1) // 2:
        return 0
    return _subset_sums(n, top - 1, m) + _subset_sums(n - 1, top - 1, m - top)


def f(n: int, l: int, M: int) -> int:
    r"""从 :math:`\{-\ell,\dots,\ell\}` 中取 :math:`n` 个不同投影且和为 :math:`M` 的方式数。

    平移 :math:`m \to m + \ell` 后等价于 :math:`\{0,\dots,2\ell\}` 上和为
    :math:`M + n\ell` 的子集计数。

    Examples
    --------
    >>> f(2, 1, 0)  # {-1, 1}
    1
    >>> f(0, 2, 0)
    1
    """
    if n < 0 or l < 0:
        return 0
    return _subset_sums(n, 2 * l, M + n * l)


def A(w: int, l: int, S_prime: int, M_L: int) -> int:
    r"""满足 :math:`2M_S = S'`、给定 :math:`M_L` 的 :math:`\ell^w` 微观态数。

    Parameters
    ----------
    w : int
        电子数。
    l : int
        轨道角动量 :math:`\ell`。
    S_prime : int
        加倍自旋投影 :math:`2M_S`。
    M_L : int
        轨道角动量投影。

    Returns
    -------
    int
        微观态数；奇偶不匹配或超出范围时为 0。
    """
    if (w + S_prime) % 2 != 0:
        return 0
    n_up = (w + S_prime) // 2
    n_dn = (w - S_prime) // 2
    nmax = 2 * l + 1
    if not (0 <= n_up <= nmax and 0 <= n_dn <= nmax):
        return 0
    # n 个 m 的投影和位于 [-n*l, n*l]
    lo = max(-n_up * l, M_L - n_dn * l)
    hi = min(n_up * l, M_L + n_dn * l)
    return sum(f(n_up, l, M) * f(n_dn, l, M_L - M) for M in range(lo, hi + 1))


def X(w: int, l: int, S_prime: int, L: int) -> int:
    r"""等价电子组态 :math:`\ell^w` 中谱项 :math:`{}^{S'+1}L` 的出现次数。

    Parameters
    ----------
    w : int
        电子数，:math:`0 \leq w \leq 2(2\ell+1)`。
    l : int
        轨道角动量，:math:`\ell \geq 0`。
    S_prime : int
        加倍总自旋 :math:`S' = 2S`。
    L : int
        总轨道角动量。

    Returns
    -------
    int
        谱项出现次数；物理上不可能的 :math:`(S', L)` 返回 0。

    Raises
    ------
    DomainError
        :math:`\ell < 0` 或 :math:`w` 超出 :math:`[0, 2(2\ell+1)]`。

    Examples
    --------
    >>> X(2, 1, 0, 0)  # p² ¹S
    1
    >>> X(3, 2, 1, 2)  # d³ ²D 出现两次
    2
    """
    if l < 0:
        raise DomainError(f"角动量量子数必须非负: l={l}")
    if not 0 <= w <= 2 * (2 * l + 1):
        raise DomainError(f"占据数 w={w} 超出 [0, {2 * (2 * l + 1)}]（l={l}）")
    if S_prime < 0 or L < 0:
        return 0
    return (
        A(w, l, S_prime, L)
        - A(w, l, S_prime + 2, L)
        - A(w, l, S_prime, L + 1)
        + A(w, l, S_prime + 2, L + 1)
    )
