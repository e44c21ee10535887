r"""LS 耦合谱项符号
=================

:class:`Term` 表示带宇称的谱项 :math:`{}^{2S+1}L`，:class:`IntermediateTerm`
在其上附加 seniority 量子数 :math:`\nu`（Racah 记号 :math:`{}_\nu{}^{2S+1}L`）。

字符串记号
==========

``多重度 + 大写光谱字母（或半整数 [n/d]） + 可选的 o（奇宇称）``，例如
``"1S"``、``"4Po"``、``"2[3/2]o"``（jK 耦合，常见于稀有气体）。
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import total_ordering

import sympy as sp

from .orbitals import Parity
from .utils import DomainError, SPECTROSCOPIC, as_halfint, to_subscript, to_superscript

__all__ = [
    "Term",
    "IntermediateTerm",
    "parse_term",
]


@total_ordering
@dataclass(frozen=True)
class Term:
    r"""LS 耦合谱项。

    Attributes
    ----------
    L : sympy.Rational
        总轨道角动量（非负整数或半整数）。
    S : sympy.Rational
        总自旋（非负整数或半整数）。
    parity : Parity
        宇称；构造时也接受 ``±1`` 或 ``"even"/"odd"``。

    Notes
    -----
    排序依次比较 :math:`S`、:math:`L`、宇称（ODD < EVEN）。
    """

    L: sp.Rational
    S: sp.Rational
    parity: Parity = Parity.EVEN

    def __post_init__(self):
        L = as_halfint(self.L)
        S = as_halfint(self.S)
        if L < 0:
            raise DomainError(f"谱项的 L 不能为负: L={L}")
        if S < 0:
            raise DomainError(f"谱项的 S 不能为负: S={S}")
        object.__setattr__(self, "L", L)
        object.__setattr__(self, "S", S)
        object.__setattr__(self, "parity", Parity.from_value(self.parity))

    @classmethod
    def zero(cls) -> "Term":
        """¹S（偶宇称），耦合的单位元。"""
        return cls(0, 0, Parity.EVEN)

    def _key(self):
        return (self.S, self.L, self.parity)

    def __lt__(self, other: "Term") -> bool:
        if not isinstance(other, Term):
            return NotImplemented
        return self._key() < other._key()

    @property
    def multiplicity(self) -> int:
        return int(2 * self.S + 1)

    @property
    def weight(self) -> int:
        r"""统计权重 :math:`(2L+1)(2S+1)`。"""
        return int(2 * self.L + 1) * self.multiplicity

    def _L_label(self) -> str:
        if self.L.q == 1:
            l = int(self.L)
            return SPECTROSCOPIC[l].upper() if l < len(SPECTROSCOPIC) else f"[{l}]"
        return f"[{self.L.p}/{self.L.q}]"

    @property
    def label(self) -> str:
        """ASCII 记号，可被 :func:`parse_term` 还原，如 ``"4Po"``。"""
        return f"{self.multiplicity}{self._L_label()}" + ("o" if self.parity is Parity.ODD else "")

    def __str__(self) -> str:
        return to_superscript(self.multiplicity) + self._L_label() + self.parity.superscript


_TERM_RE = re.compile(r"^([0-9]+)([A-Z]|\[[0-9/]+\])([oe]?)$")


def parse_term(s: str) -> Term:
    """由字符串记号构造 :class:`Term`。

    Examples
    --------
    >>> parse_term("4Po").label
    '4Po'
    >>> parse_term("2[3/2]o").L
    3/2
    """
    if isinstance(s, Term):
        return s
    m = _TERM_RE.match(s.strip())
    if m is None:
        raise ValueError(f"非法的谱项字符串: {s!r}")
    Lstr = m.group(2)
    if Lstr.startswith("["):
        body = Lstr[1:-1]
        if "/" in body:
            num, _, den = body.partition("/")
            if not num or not den or "/" in den or int(den) == 0:
                raise ValueError(f"非法的谱项字符串: {s!r}")
            L = sp.Rational(int(num), int(den))
        else:
            L = sp.Integer(int(body))
    else:
        idx = SPECTROSCOPIC.find(Lstr.lower())
        if idx < 0:
            raise ValueError(f"未知的光谱字母 {Lstr!r}: {s!r}")
        L = sp.Integer(idx)
    if L.q not in (1, 2):
        raise ValueError(f"L 必须为整数或半整数: {s!r}")
    S = sp.Rational(int(m.group(1)) - 1, 2)
    return Term(L, S, Parity.ODD if m.group(3) == "o" else Parity.EVEN)


@total_ordering
@dataclass(frozen=True)
class IntermediateTerm:
    r"""带 seniority 的谱项。

    seniority :math:`\nu` 是该谱项首次出现时的占据数；其奇偶性必须与
    :math:`2S` 相同（即多重度为偶数时 :math:`\nu` 为奇数）。

    Attributes
    ----------
    term : Term
        谱项；构造时也接受字符串记号。
    seniority : int
        seniority 量子数 :math:`\nu \geq 0`。
    """

    term: Term
    seniority: int

    def __post_init__(self):
        term = parse_term(self.term)
        object.__setattr__(self, "term", term)
        if self.seniority < 0:
            raise DomainError(f"seniority 不能为负: {self.seniority}")
        if (term.multiplicity % 2 == 0) == (self.seniority % 2 == 0):
            raise ValueError(f"谱项 {term} 不可能具有 seniority {self.seniority}")

    def __lt__(self, other: "IntermediateTerm") -> bool:
        if not isinstance(other, IntermediateTerm):
            return NotImplemented
        return (self.seniority, self.term) < (other.seniority, other.term)

    def __str__(self) -> str:
        # Racah (1943) 记号：seniority 写作前置下标
        return to_subscript(self.seniority) + str(self.term)
