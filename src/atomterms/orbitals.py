from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import Tuple, Union

import sympy as sp

from .utils import DomainError, SPECTROSCOPIC, as_halfint, half, halfint_range, spectroscopic_label, to_subscript

__all__ = [
    "Parity",
    "Orbital",
    "RelativisticOrbital",
    "SpinOrbital",
    "AnyOrbital",
    "kappa_to_l",
    "kappa_to_j",
    "lj_to_kappa",
    "flip_j",
    "nonrelorbital",
    "orbital_from_string",
    "spin_orbitals",
]


@total_ordering
class Parity(Enum):
    """宇称：偶 (+1) 或奇 (−1)。

    乘法对应奇偶性的异或，整数幂对应 :math:`p^w`；排序约定 ODD < EVEN。
    """

    EVEN = 1
    ODD = -1

    @classmethod
    def from_value(cls, p) -> "Parity":
        """由 ``Parity``、``±1`` 或字符串 ``"even"/"odd"`` 构造。"""
        if isinstance(p, Parity):
            return p
        if isinstance(p, str):
            key = p.strip().lower()
            if key in ("even", "e", "+"):
                return cls.EVEN
            if key in ("odd", "o", "-"):
                return cls.ODD
            raise ValueError(f"无法识别的宇称: {p!r}")
        if p in (1, -1):
            return cls(int(p))
        raise ValueError(f"宇称必须为 ±1，实际: {p!r}")

    def __mul__(self, other: "Parity") -> "Parity":
        if not isinstance(other, Parity):
            return NotImplemented
        return Parity(self.value * other.value)

    def __pow__(self, w: int) -> "Parity":
        if self is Parity.ODD and w % 2 == 1:
            return Parity.ODD
        return Parity.EVEN

    def __lt__(self, other: "Parity") -> bool:
        if not isinstance(other, Parity):
            return NotImplemented
        return self.value < other.value

    @property
    def superscript(self) -> str:
        return "ᵒ" if self is Parity.ODD else ""

    def __str__(self) -> str:
        return "even" if self is Parity.EVEN else "odd"


def kappa_to_l(kappa: int) -> int:
    r""":math:`\kappa` 量子数对应的轨道角动量 :math:`\ell`。"""
    if kappa == 0:
        raise DomainError("κ 不能为 0")
    return -(kappa + 1) if kappa < 0 else kappa


def kappa_to_j(kappa: int) -> sp.Rational:
    r""":math:`\kappa` 量子数对应的总角动量 :math:`j = |\kappa| - 1/2`。"""
    if kappa == 0:
        raise DomainError("κ 不能为 0")
    return half(2 * abs(kappa) - 1)


def lj_to_kappa(l: int, j) -> int:
    r"""由合法的 :math:`(\ell, j)` 组合求 :math:`\kappa`。

    对 :math:`j = \ell \pm 1/2`，有 :math:`\kappa = \mp(j + 1/2)`。
    """
    j = as_halfint(j)
    if not (l == j + half(1) or l == j - half(1)):
        raise ValueError(f"非法的 (ℓ, j) = ({l}, {j})，要求 j = ℓ ± 1/2")
    return l if j < l else -(l + 1)


@dataclass(frozen=True)
class Orbital:
    r"""非相对论轨道标签 :math:`n\ell`。

    Attributes
    ----------
    n : int
        主量子数，:math:`n \geq 1`。
    l : int
        轨道角动量，:math:`0 \leq \ell < n`。
    """

    n: int
    l: int

    def __post_init__(self):
        if self.n < 1:
            raise DomainError(f"主量子数必须 >= 1: n={self.n}")
        if not 0 <= self.l < self.n:
            raise DomainError(f"n={self.n} 时角动量需满足 0 <= l < n，实际 l={self.l}")

    @property
    def degeneracy(self) -> int:
        return 2 * (2 * self.l + 1)

    @property
    def parity(self) -> Parity:
        return Parity.ODD ** self.l

    def __str__(self) -> str:
        return f"{self.n}{spectroscopic_label(self.l)}"


@dataclass(frozen=True)
class RelativisticOrbital:
    r"""相对论轨道标签 :math:`n\ell_j`，内部以 :math:`\kappa` 表示。

    字符串形式 ``2p-`` 表示 :math:`j=\ell-1/2`，``2p`` 表示 :math:`j=\ell+1/2`。

    Attributes
    ----------
    n : int
        主量子数。
    kappa : int
        相对论角量子数 :math:`\kappa \neq 0`。
    """

    n: int
    kappa: int

    def __post_init__(self):
        if self.n < 1:
            raise DomainError(f"主量子数必须 >= 1: n={self.n}")
        l = kappa_to_l(self.kappa)
        if not l < self.n:
            raise DomainError(f"n={self.n} 时角动量需满足 0 <= l < n，实际 l={l}")

    @classmethod
    def from_lj(cls, n: int, l: int, j) -> "RelativisticOrbital":
        return cls(n, lj_to_kappa(l, j))

    @property
    def l(self) -> int:
        return kappa_to_l(self.kappa)

    @property
    def j(self) -> sp.Rational:
        return kappa_to_j(self.kappa)

    @property
    def degeneracy(self) -> int:
        # 2j + 1 = 2|κ|
        return 2 * abs(self.kappa)

    @property
    def parity(self) -> Parity:
        return Parity.ODD ** self.l

    def __str__(self) -> str:
        return f"{self.n}{spectroscopic_label(self.l)}" + ("-" if self.kappa > 0 else "")


AnyOrbital = Union[Orbital, RelativisticOrbital]


def flip_j(orb: RelativisticOrbital) -> RelativisticOrbital:
    """返回同一 :math:`\\ell` 下另一 :math:`j` 分支的轨道（s 轨道保持不变）。"""
    if orb.kappa == -1:
        return orb
    kappa = abs(orb.kappa) - 1 if orb.kappa < 0 else -(orb.kappa + 1)
    return RelativisticOrbital(orb.n, kappa)


def nonrelorbital(orb: AnyOrbital) -> Orbital:
    """相对论轨道对应的非相对论轨道。"""
    if isinstance(orb, Orbital):
        return orb
    return Orbital(orb.n, orb.l)


_ORBITAL_RE = re.compile(r"^([0-9]+)([a-z]|\[[0-9]+\])(-?)$")


def orbital_from_string(s: str, relativistic: bool = False) -> AnyOrbital:
    """解析轨道字符串，如 ``"3d"``、``"2p-"``（相对论）。

    Parameters
    ----------
    s : str
        轨道标签；角动量可用字母或 ``[ℓ]`` 形式给出。
    relativistic : bool, optional
        若为 ``True``，返回 :class:`RelativisticOrbital`。
    """
    m = _ORBITAL_RE.match(s.strip())
    if m is None:
        raise ValueError(f"非法的轨道字符串: {s!r}")
    n = int(m.group(1))
    lstr = m.group(2)
    if lstr.startswith("["):
        l = int(lstr[1:-1])
    else:
        l = SPECTROSCOPIC.index(lstr) if lstr in SPECTROSCOPIC else -1
        if l < 0:
            raise ValueError(f"未知的光谱字母 {lstr!r}: {s!r}")
    if not relativistic:
        if m.group(3):
            raise ValueError(f"非相对论轨道不能带 '-' 后缀: {s!r}")
        return Orbital(n, l)
    j = l + half(-1 if m.group(3) else 1)
    if j < 0:
        raise ValueError(f"非法的相对论轨道: {s!r}")
    return RelativisticOrbital(n, lj_to_kappa(l, j))


@dataclass(frozen=True)
class SpinOrbital:
    r"""角动量投影完全确定的自旋轨道。

    非相对论轨道的投影为 :math:`(m_\ell, m_s)`，相对论轨道为 :math:`(m_j,)`。
    """

    orb: AnyOrbital
    m: Tuple

    def __post_init__(self):
        if isinstance(self.orb, Orbital):
            if len(self.m) != 2:
                raise ValueError(f"需要 2 个投影量子数，实际 {len(self.m)}")
            ml, ms = self.m
            if not (-self.orb.l <= ml <= self.orb.l) or abs(as_halfint(ms)) != half(1):
                raise ValueError(f"投影 {self.m} 不在 {self.orb} 的合法范围内")
        else:
            if len(self.m) != 1:
                raise ValueError(f"需要 1 个投影量子数，实际 {len(self.m)}")
            if as_halfint(self.m[0]) not in halfint_range(-self.orb.j, self.orb.j):
                raise ValueError(f"投影 {self.m} 不在 {self.orb} 的合法范围内")

    def __str__(self) -> str:
        if isinstance(self.orb, Orbital):
            ml, ms = self.m
            return f"{self.orb}{to_subscript(ml)}" + ("α" if ms > 0 else "β")
        return f"{self.orb}({self.m[0]})"


def spin_orbitals(orb: AnyOrbital) -> list[SpinOrbital]:
    """枚举轨道的全部自旋轨道。

    按投影升序排列，非相对论情形下同一 :math:`m_\\ell` 的 α 在 β 之前，
    例如 2p → 2p₋₁α, 2p₋₁β, 2p₀α, ...
    """
    if isinstance(orb, Orbital):
        return [
            SpinOrbital(orb, (ml, ms))
            for ml in range(-orb.l, orb.l + 1)
            for ms in (half(1), half(-1))
        ]
    return [SpinOrbital(orb, (mj,)) for mj in halfint_range(-orb.j, orb.j)]
