r"""支壳层与组态的谱项生成
========================

- :func:`terms`：支壳层 :math:`n\ell^w` 的全部 LS 谱项（含重复），相对论轨道
  给出 :math:`J` 值，组态给出从左到右耦合后的最终谱项；
- :func:`count_terms`：某谱项的出现次数，与 :func:`terms` 严格一致；
- :func:`intermediate_terms`：附带 seniority 的中间谱项。

满壳层超过一半时利用粒子–空穴等价 :math:`w \to g - w` 计算，宇称仍按
实际电子数 :math:`P^w` 给出。
"""

from __future__ import annotations

import warnings
from collections import Counter

from .configurations import Configuration
from .coupling import final_terms
from .jj_terms import jj_terms
from .orbitals import Orbital, Parity, RelativisticOrbital
from .term_symbols import IntermediateTerm, Term, parse_term
from .utils import DomainError, as_halfint, half
from .xu import X

__all__ = [
    "SeniorityAmbiguityWarning",
    "xu_terms",
    "terms",
    "count_terms",
    "intermediate_terms",
]


class SeniorityAmbiguityWarning(UserWarning):
    """同一 (谱项, seniority) 出现多次，seniority 不足以区分这些态。"""


def xu_terms(l: int, w: int, p: Parity) -> list[Term]:
    r"""用 Xu–Dai 算法给出 :math:`\ell^w` 的全部谱项（宇称为 ``p``）。

    依次遍历 :math:`S' = w \bmod 2, \dots, w`（步长 2）与 :math:`L = 0, \dots, w\ell`，
    每个谱项重复 :func:`~atomterms.xu.X` 次。
    """
    return [
        Term(L, half(S_prime), p)
        for S_prime in range(w % 2, w + 1, 2)
        for L in range(w * l + 1)
        for _ in range(X(w, l, S_prime, L))
    ]


def _check_occupancy(orb, w: int) -> None:
    g = orb.degeneracy
    if not 0 <= w <= g:
        raise DomainError(f"轨道 {orb} 的占据数 {w} 非法（简并度 {g}）")


def _hole_equivalent(w: int, g: int) -> int:
    # 超过半满（且非满壳层）时改算 g-w 个空穴
    if w > g / 2 and w != g:
        return g - w
    return w


def _ls_terms(orb: Orbital, w: int) -> list[Term]:
    _check_occupancy(orb, w)
    p = orb.parity ** w
    l, g = orb.l, orb.degeneracy
    w = _hole_equivalent(w, g)
    if w == 1:
        return [Term(l, half(1), p)]
    if (l == 0 and w == 2) or w == g or w == 0:
        return [Term.zero()]
    return xu_terms(l, w, p)


def terms(obj, w: int = 1) -> list:
    r"""谱项生成的统一入口。

    Parameters
    ----------
    obj : Orbital | RelativisticOrbital | Configuration
        支壳层轨道或完整组态。
    w : int, optional
        占据数（仅对单个轨道有效），:math:`0 \leq w \leq g`。

    Returns
    -------
    list
        - ``Orbital``：全部 :class:`Term`，不排序、不去重；
        - ``RelativisticOrbital``：升序 :math:`J` 值，含重复；
        - ``Configuration``：各支壳层从左到右耦合后不重复的谱项，升序。

    Raises
    ------
    DomainError
        占据数超出范围。
    TypeError
        参数类型不支持。

    Examples
    --------
    >>> from atomterms.orbitals import Orbital
    >>> [t.label for t in terms(Orbital(3, 2), 3)]
    ['2P', '2D', '2D', '2F', '2G', '2H', '4P', '4F']
    """
    if isinstance(obj, Configuration):
        return final_terms([terms(orb, occ) for orb, occ in obj])
    if isinstance(obj, RelativisticOrbital):
        return jj_terms(obj, w)
    if isinstance(obj, Orbital):
        return _ls_terms(obj, w)
    raise TypeError(f"不支持的参数类型: {type(obj).__name__}")


def count_terms(orb, w: int, term) -> int:
    r"""谱项 ``term`` 在 :math:`n\ell^w` 中的出现次数。

    Parameters
    ----------
    orb : Orbital | RelativisticOrbital
        支壳层轨道。
    w : int
        占据数。
    term : Term | str | half-integer
        LS 谱项（或其字符串记号）；相对论轨道为 :math:`J` 值。

    Returns
    -------
    int
        与 ``terms(orb, w).count(term)`` 相等。

    Examples
    --------
    >>> from atomterms.orbitals import Orbital
    >>> count_terms(Orbital(1, 0), 2, "1S")
    1
    >>> count_terms(Orbital(4, 3), 3, "2Do")
    2
    """
    if isinstance(orb, RelativisticOrbital):
        return jj_terms(orb, w).count(as_halfint(term))
    if not isinstance(orb, Orbital):
        raise TypeError(f"不支持的参数类型: {type(orb).__name__}")
    term = parse_term(term)
    _check_occupancy(orb, w)
    p = orb.parity ** w
    l, g = orb.l, orb.degeneracy
    w = _hole_equivalent(w, g)
    if w == 1:
        return int(term == Term(l, half(1), p))
    if (l == 0 and w == 2) or w == g or w == 0:
        return int(term == Term.zero())
    if term.parity is not p or term.L.q != 1:
        return 0
    return X(w, l, int(2 * term.S), int(term.L))


def _seniority_terms(orb: Orbital, w: int) -> list[IntermediateTerm]:
    ts = _ls_terms(orb, w)
    # seniority 不超过空穴等价的占据数
    w_max = min(w, orb.degeneracy - w)
    its: list[IntermediateTerm] = []
    for t in dict.fromkeys(ts):
        previously_seen = 0
        # seniority ν 为该谱项首次出现的最小占据数；奇数 w 从 1 开始，偶数从 0 开始，
        # 例如 ²D 首次出现于 d¹，在 d³ 中出现两次，分别记为 ₁²D 与 ₃²D
        for nu in range(w % 2, w_max + 1, 2):
            nn = count_terms(orb, nu, t) - previously_seen
            previously_seen += nn
            its.extend([IntermediateTerm(t, nu)] * nn)
    its.sort()

    ambiguous = sorted({it for it, n in Counter(its).items() if n > 1})
    if ambiguous:
        warnings.warn(
            f"{orb}{w}: seniority 无法区分以下谱项的全部态: " + ", ".join(map(str, ambiguous)),
            SeniorityAmbiguityWarning,
            stacklevel=3,
        )
    return its


def intermediate_terms(obj, w: int = 1) -> list:
    r"""给出附带 seniority 的中间谱项。

    Parameters
    ----------
    obj : Orbital | RelativisticOrbital | Configuration
        支壳层轨道或组态。
    w : int, optional
        占据数（仅对单个轨道有效）。

    Returns
    -------
    list
        - ``Orbital``：按 (seniority, 谱项) 排序的 :class:`IntermediateTerm`；
        - ``RelativisticOrbital``：尚未实现 seniority，返回 :func:`terms` 的 :math:`J` 值；
        - ``Configuration``：每个支壳层一个列表，顺序与组态一致。

    Warns
    -----
    SeniorityAmbiguityWarning
        某个 (谱项, seniority) 出现多次（如 f³ 的 ²D），此时 seniority 不足以
        区分全部态，结果按原样返回。

    Examples
    --------
    >>> from atomterms.orbitals import Orbital
    >>> [str(it) for it in intermediate_terms(Orbital(2, 1), 2)]
    ['₀¹S', '₂¹D', '₂³P']
    """
    if isinstance(obj, Configuration):
        return [intermediate_terms(orb, occ) for orb, occ in obj]
    if isinstance(obj, RelativisticOrbital):
        return jj_terms(obj, w)
    if isinstance(obj, Orbital):
        return _seniority_terms(obj, w)
    raise TypeError(f"不支持的参数类型: {type(obj).__name__}")
