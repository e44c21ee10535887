from __future__ import annotations

import sympy as sp

__all__ = [
    "DomainError",
    "SPECTROSCOPIC",
    "as_halfint",
    "half",
    "halfint_range",
    "spectroscopic_label",
    "to_superscript",
    "to_subscript",
]


class DomainError(ValueError):
    """量子数或占据数超出物理允许范围时抛出。"""


SPECTROSCOPIC = "spdfghiklmnoqrtuvwxyz"

_SUPERSCRIPTS = str.maketrans("0123456789-+/", "⁰¹²³⁴⁵⁶⁷⁸⁹⁻⁺ᐟ")
_SUBSCRIPTS = str.maketrans("0123456789-+", "₀₁₂₃₄₅₆₇₈₉₋₊")


def as_halfint(x) -> sp.Rational:
    r"""将输入转换为精确的半整数 :class:`sympy.Rational`。

    Parameters
    ----------
    x : int | str | fractions.Fraction | sympy.Rational | float
        待转换的数值；浮点数必须可精确表示（如 ``1.5``）。

    Returns
    -------
    sympy.Rational
        分母为 1 或 2 的有理数。

    Examples
    --------
    >>> as_halfint("3/2")
    3/2
    >>> as_halfint(2)
    2
    """
    try:
        r = sp.Rational(x)
    except (TypeError, ValueError, ZeroDivisionError) as exc:
        raise ValueError(f"无法转换为半整数: {x!r}") from exc
    if not r.is_Rational:
        raise ValueError(f"无法转换为半整数: {x!r}")
    if r.q not in (1, 2):
        raise ValueError(f"数值必须为整数或半整数，实际: {x!r}")
    return r


def half(n: int) -> sp.Rational:
    """返回 ``n/2``。"""
    return sp.Rational(n, 2)


def halfint_range(a, b) -> list[sp.Rational]:
    r"""返回 :math:`a, a+1, \dots, b` （步长为 1，闭区间）。

    ``b - a`` 必须为非负整数，否则返回空列表。
    """
    a, b = as_halfint(a), as_halfint(b)
    span = b - a
    if span < 0 or span.q != 1:
        return []
    return [a + k for k in range(int(span) + 1)]


def spectroscopic_label(l: int) -> str:
    """角动量 :math:`\\ell` 对应的小写光谱字母（s, p, d, ...）。"""
    if l < 0:
        raise DomainError(f"角动量量子数必须非负: l={l}")
    if l >= len(SPECTROSCOPIC):
        return f"[{l}]"
    return SPECTROSCOPIC[l]


def to_superscript(x) -> str:
    """上标形式的文本（用于多重度，如 ``²``）。"""
    return str(x).translate(_SUPERSCRIPTS)


def to_subscript(x) -> str:
    """下标形式的文本（用于 seniority，如 ``₃``）。"""
    return str(x).translate(_SUBSCRIPTS)
