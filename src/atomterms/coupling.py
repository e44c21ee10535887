r"""谱项的矢量耦合
=================

按矢量模型将两个（或多个）支壳层的谱项耦合为组态的谱项。

选择规则
========

对 :math:`T_1 = {}^{2S_1+1}L_1` 与 :math:`T_2 = {}^{2S_2+1}L_2`：

1. **三角条件**: :math:`|L_1 - L_2| \leq L \leq L_1 + L_2`，
   :math:`|S_1 - S_2| \leq S \leq S_1 + S_2`
2. **宇称**: :math:`P = P_1 \cdot P_2`

jj 耦合下对 :math:`J` 值只应用三角条件。多个支壳层严格从左到右耦合。
"""

from __future__ import annotations

from fractions import Fraction
from functools import reduce

import sympy as sp

from .configurations import Configuration
from .term_symbols import IntermediateTerm, Term, parse_term
from .utils import as_halfint, halfint_range

__all__ = [
    "couple_terms",
    "final_terms",
    "intermediate_couplings",
]


def _as_coupling_operand(t):
    """将 IntermediateTerm/字符串/数值统一为 Term 或半整数 J。"""
    if isinstance(t, IntermediateTerm):
        return t.term
    if isinstance(t, (Term, str)):
        return parse_term(t)
    if isinstance(t, (int, Fraction, sp.Rational)):
        return as_halfint(t)
    raise TypeError(f"无法耦合的对象类型: {type(t).__name__}")


def couple_terms(t1, t2) -> list:
    r"""两个谱项（或谱项列表）的全部耦合结果。

    Parameters
    ----------
    t1, t2 : Term | IntermediateTerm | str | half-integer | sequence
        待耦合的谱项。半整数表示 jj 耦合的 :math:`J`；若任一参数为列表/元组，
        则对两侧做笛卡尔积（``t1`` 在外层），并拼接全部结果。

    Returns
    -------
    list
        对两个 Term：按 :math:`L` 升序（外层）、:math:`S` 升序（内层）排列，
        保留重复；对两个 :math:`J`：:math:`|J_1-J_2|, \dots, J_1+J_2`。

    Raises
    ------
    TypeError
        参数类型不支持，或混合了 Term 与 :math:`J`。

    Examples
    --------
    >>> [t.label for t in couple_terms("3P", "2S")]
    ['2P', '4P']
    >>> [str(J) for J in couple_terms(sp.Rational(3, 2), 1)]
    ['1/2', '3/2', '5/2']
    """
    if isinstance(t1, (list, tuple)) or isinstance(t2, (list, tuple)):
        t1s = list(t1) if isinstance(t1, (list, tuple)) else [t1]
        t2s = list(t2) if isinstance(t2, (list, tuple)) else [t2]
        return [t for a in t1s for b in t2s for t in couple_terms(a, b)]

    a = _as_coupling_operand(t1)
    b = _as_coupling_operand(t2)
    a_is_term = isinstance(a, Term)
    if a_is_term != isinstance(b, Term):
        raise TypeError(f"不能将 LS 谱项与 J 值耦合: {t1!r}, {t2!r}")
    if not a_is_term:
        return halfint_range(abs(a - b), a + b)

    parity = a.parity * b.parity
    return [
        Term(L, S, parity)
        for L in halfint_range(abs(a.L - b.L), a.L + b.L)
        for S in halfint_range(abs(a.S - b.S), a.S + b.S)
    ]


def final_terms(ts) -> list:
    """从左到右依次耦合各支壳层的谱项列表，返回不重复的最终谱项（已排序）。

    Parameters
    ----------
    ts : sequence of sequence
        每个支壳层的谱项列表（LS 的 Term 或 jj 的 :math:`J`）。

    Returns
    -------
    list
        组态的全部不同谱项，升序。

    Examples
    --------
    >>> [t.label for t in final_terms([[parse_term("2S")], [parse_term("2Po")]])]
    ['1Po', '3Po']
    """
    ts = [list(t) for t in ts]
    if not ts:
        raise ValueError("至少需要一个支壳层的谱项列表")
    # 每一步耦合后即去重，最终谱项集合不变
    return reduce(lambda a, b: sorted(set(couple_terms(a, b))), ts[1:], sorted(set(ts[0])))


def _is_ls(its) -> bool:
    for group in its:
        for it in group:
            return isinstance(it, (Term, IntermediateTerm, str))
    return True


def intermediate_couplings(its, t0=None) -> list[list]:
    r"""枚举全部中间耦合链（每条链对应一个组态态函数 CSF）。

    Parameters
    ----------
    its : sequence of sequence | Configuration
        每个支壳层的中间谱项（:class:`IntermediateTerm` 或 jj 的 :math:`J`）。
        若为 :class:`~atomterms.configurations.Configuration`，先调用
        :func:`~atomterms.terms.intermediate_terms`。
    t0 : Term | half-integer, optional
        耦合起点；LS 情形默认为 ¹S，jj 情形默认为 0。

    Returns
    -------
    list[list]
        每条链 ``[t0, c1, c2, ...]``，长度为支壳层数 + 1，其中 ``c1`` 来自
        ``t0`` 与第一个支壳层的耦合，``c(i+1)`` 来自 ``ci`` 与下一支壳层的耦合。

    Examples
    --------
    >>> from atomterms.terms import intermediate_terms
    >>> from atomterms.configurations import parse_configuration
    >>> chains = intermediate_couplings(intermediate_terms(parse_configuration("1s 2p")))
    >>> [[t.label for t in c] for c in chains]
    [['1S', '2S', '1Po'], ['1S', '2S', '3Po']]
    """
    if isinstance(its, Configuration):
        from .terms import intermediate_terms

        its = intermediate_terms(its)
    its = [list(group) for group in its]
    if t0 is None:
        t0 = Term.zero() if _is_ls(its) else sp.Integer(0)
    else:
        t0 = _as_coupling_operand(t0)
    if not its:
        return [[t0]]
    return _couplings_from(its, t0)


def _couplings_from(its: list[list], t0) -> list[list]:
    chains = []
    for it in its[0]:
        for t in couple_terms(t0, it):
            if len(its) == 1:
                chains.append([t0, t])
            else:
                for tail in _couplings_from(its[1:], t):
                    chains.append([t0, *tail])
    return chains
