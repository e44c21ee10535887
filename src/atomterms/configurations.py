from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, Tuple

from .orbitals import AnyOrbital, Orbital, Parity, RelativisticOrbital, orbital_from_string
from .utils import DomainError

__all__ = [
    "Configuration",
    "NOBLE_GAS_CORES",
    "parse_configuration",
]


# 稀有气体原子实（非相对论记号）
NOBLE_GAS_CORES = {
    "He": "1s2",
    "Ne": "[He] 2s2 2p6",
    "Ar": "[Ne] 3s2 3p6",
    "Kr": "[Ar] 3d10 4s2 4p6",
    "Xe": "[Kr] 4d10 5s2 5p6",
    "Rn": "[Xe] 4f14 5d10 6s2 6p6",
}

_SUPERSCRIPT_DIGITS = str.maketrans("⁰¹²³⁴⁵⁶⁷⁸⁹", "0123456789")
_SUBSHELL_RE = re.compile(r"^([0-9]+(?:[a-z]|\[[0-9]+\])-?)([0-9]*)$")


@dataclass(frozen=True)
class Configuration:
    r"""电子组态：有序的 (轨道, 占据数) 序列。

    Attributes
    ----------
    subshells : tuple[tuple[Orbital | RelativisticOrbital, int], ...]
        各支壳层及其占据数 :math:`w`，要求 :math:`0 \leq w \leq g`。

    Notes
    -----
    - 同一组态内的轨道必须同为非相对论或同为相对论类型；
    - 不允许重复轨道；
    - 顺序即耦合顺序（从左到右）。
    """

    subshells: Tuple[Tuple[AnyOrbital, int], ...]

    def __post_init__(self):
        subshells = tuple((orb, int(w)) for orb, w in self.subshells)
        object.__setattr__(self, "subshells", subshells)
        kinds = {type(orb) for orb, _ in subshells}
        if len(kinds) > 1:
            raise ValueError("组态中不能混用相对论与非相对论轨道")
        seen = set()
        for orb, w in subshells:
            if orb in seen:
                raise ValueError(f"组态中轨道 {orb} 重复出现")
            seen.add(orb)
            if not 0 <= w <= orb.degeneracy:
                raise DomainError(f"轨道 {orb} 的占据数 {w} 非法（简并度 {orb.degeneracy}）")

    def __iter__(self) -> Iterator[Tuple[AnyOrbital, int]]:
        return iter(self.subshells)

    def __len__(self) -> int:
        return len(self.subshells)

    def __getitem__(self, i):
        return self.subshells[i]

    @property
    def relativistic(self) -> bool:
        return any(isinstance(orb, RelativisticOrbital) for orb, _ in self.subshells)

    @property
    def num_electrons(self) -> int:
        return sum(w for _, w in self.subshells)

    @property
    def parity(self) -> Parity:
        p = Parity.EVEN
        for orb, w in self.subshells:
            p = p * orb.parity ** w
        return p

    def __str__(self) -> str:
        return " ".join(f"{orb}{w}" if w != 1 else f"{orb}" for orb, w in self.subshells)


def _split_closed_shell(orb: Orbital, w: int) -> list[tuple[RelativisticOrbital, int]]:
    """将满壳层 nℓ 拆分为 nℓ- 与 nℓ 两个相对论支壳层。"""
    if w != orb.degeneracy:
        raise ValueError(f"原子实中 {orb}{w} 不是满壳层，无法拆分为相对论支壳层")
    parts = []
    if orb.l > 0:
        parts.append((RelativisticOrbital(orb.n, orb.l), 2 * orb.l))
    parts.append((RelativisticOrbital(orb.n, -(orb.l + 1)), 2 * orb.l + 2))
    return parts


def _parse_tokens(s: str, relativistic: bool) -> list[tuple[AnyOrbital, int]]:
    subshells: list[tuple[AnyOrbital, int]] = []
    for token in s.translate(_SUPERSCRIPT_DIGITS).split():
        if token.startswith("[") and token.endswith("]") and token[1:-1] in NOBLE_GAS_CORES:
            core = _parse_tokens(NOBLE_GAS_CORES[token[1:-1]], relativistic=False)
            if relativistic:
                for orb, w in core:
                    subshells.extend(_split_closed_shell(orb, w))
            else:
                subshells.extend(core)
            continue
        m = _SUBSHELL_RE.match(token)
        if m is None:
            raise ValueError(f"非法的支壳层记号: {token!r}")
        orb = orbital_from_string(m.group(1), relativistic=relativistic)
        w = int(m.group(2)) if m.group(2) else 1
        subshells.append((orb, w))
    return subshells


def parse_configuration(s: str, relativistic: bool = False) -> Configuration:
    """解析组态字符串。

    Parameters
    ----------
    s : str
        空格分隔的支壳层，如 ``"1s2 2p3"``、``"3p² 4s 5p²"``、``"[Ne] 3d3"``；
        相对论模式下如 ``"2p-2 2p3"``。
    relativistic : bool, optional
        是否按 jj 耦合的相对论轨道解析。

    Returns
    -------
    Configuration

    Examples
    --------
    >>> str(parse_configuration("[He] 2s2 2p"))
    '1s2 2s2 2p'
    >>> str(parse_configuration("[He]", relativistic=True))
    '1s2'
    """
    subshells = _parse_tokens(s, relativistic)
    if not subshells:
        raise ValueError(f"空的组态字符串: {s!r}")
    return Configuration(tuple(subshells))
