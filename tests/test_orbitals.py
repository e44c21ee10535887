"""轨道标签、宇称与自旋轨道单元测试"""

import pytest
import sympy as sp

from atomterms.orbitals import (
    Orbital,
    Parity,
    RelativisticOrbital,
    SpinOrbital,
    flip_j,
    kappa_to_j,
    kappa_to_l,
    lj_to_kappa,
    nonrelorbital,
    orbital_from_string,
    spin_orbitals,
)
from atomterms.utils import DomainError, as_halfint, halfint_range, to_subscript, to_superscript


@pytest.mark.quick
def test_parity_algebra():
    """宇称乘法、幂与排序。"""
    assert Parity.ODD * Parity.ODD is Parity.EVEN
    assert Parity.ODD * Parity.EVEN is Parity.ODD
    assert Parity.ODD ** 3 is Parity.ODD
    assert Parity.ODD ** 0 is Parity.EVEN
    assert Parity.EVEN ** 5 is Parity.EVEN
    assert sorted([Parity.EVEN, Parity.ODD]) == [Parity.ODD, Parity.EVEN]
    assert Parity.from_value(-1) is Parity.ODD
    assert Parity.from_value("even") is Parity.EVEN
    with pytest.raises(ValueError):
        Parity.from_value(0)
    with pytest.raises(ValueError):
        Parity.from_value("up")


@pytest.mark.quick
def test_orbital_properties():
    """非相对论轨道的简并度、宇称与字符串。"""
    d = Orbital(3, 2)
    assert d.degeneracy == 10
    assert d.parity is Parity.EVEN
    assert str(d) == "3d"
    assert Orbital(2, 1).parity is Parity.ODD
    assert orbital_from_string("4f") == Orbital(4, 3)
    assert orbital_from_string("12[10]") == Orbital(12, 10)


def test_orbital_domain():
    """非法量子数抛出 DomainError。"""
    with pytest.raises(DomainError):
        Orbital(2, 2)
    with pytest.raises(DomainError):
        Orbital(0, 0)
    with pytest.raises(DomainError):
        RelativisticOrbital(2, 0)
    with pytest.raises(DomainError):
        RelativisticOrbital(2, 2)  # d- 要求 n >= 3


@pytest.mark.quick
def test_relativistic_orbital_properties():
    """相对论轨道的 κ、ℓ、j 与简并度。"""
    p_minus = orbital_from_string("2p-", relativistic=True)
    assert p_minus.kappa == 1
    assert p_minus.l == 1
    assert p_minus.j == sp.Rational(1, 2)
    assert p_minus.degeneracy == 2
    assert str(p_minus) == "2p-"

    p_plus = orbital_from_string("2p", relativistic=True)
    assert p_plus.kappa == -2
    assert p_plus.j == sp.Rational(3, 2)
    assert p_plus.degeneracy == 4
    assert p_plus.parity is Parity.ODD
    assert str(p_plus) == "2p"
    assert RelativisticOrbital.from_lj(5, 4, sp.Rational(7, 2)) == orbital_from_string("5g-", relativistic=True)


def test_kappa_conversions():
    """κ 与 (ℓ, j) 的互相转换。"""
    assert [kappa_to_l(k) for k in (-1, 1, -2, 2, -3)] == [0, 1, 1, 2, 2]
    assert kappa_to_j(-3) == sp.Rational(5, 2)
    assert lj_to_kappa(1, sp.Rational(1, 2)) == 1
    assert lj_to_kappa(1, "3/2") == -2
    with pytest.raises(DomainError):
        kappa_to_l(0)
    with pytest.raises(ValueError):
        lj_to_kappa(1, sp.Rational(5, 2))


def test_flip_j_and_nonrelorbital():
    """翻转 j 分支，以及对应的非相对论轨道。"""
    ro = lambda s: orbital_from_string(s, relativistic=True)  # noqa: E731
    assert flip_j(ro("2p-")) == ro("2p")
    assert flip_j(ro("2p")) == ro("2p-")
    assert flip_j(ro("1s")) == ro("1s")
    assert nonrelorbital(ro("2p-")) == Orbital(2, 1)
    assert nonrelorbital(Orbital(3, 2)) == Orbital(3, 2)


@pytest.mark.parametrize("bad", ["2x", "d3", "3d-", "", "2j"])
def test_orbital_from_string_invalid(bad):
    """非法轨道字符串。"""
    with pytest.raises(ValueError):
        orbital_from_string(bad)


def test_relativistic_s_minus_invalid():
    """s 轨道没有 j = ℓ - 1/2 分支。"""
    with pytest.raises(ValueError):
        orbital_from_string("2s-", relativistic=True)


@pytest.mark.quick
def test_spin_orbitals_nonrelativistic():
    """2p 的 6 个自旋轨道，同一 mℓ 下 α 在 β 之前。"""
    sos = spin_orbitals(Orbital(2, 1))
    assert [str(so) for so in sos] == ["2p₋₁α", "2p₋₁β", "2p₀α", "2p₀β", "2p₁α", "2p₁β"]


def test_spin_orbitals_relativistic():
    """2p- 与 2p 的自旋轨道。"""
    ro = lambda s: orbital_from_string(s, relativistic=True)  # noqa: E731
    assert [str(so) for so in spin_orbitals(ro("2p-"))] == ["2p-(-1/2)", "2p-(1/2)"]
    assert len(spin_orbitals(ro("2p"))) == 4
    assert all(len(spin_orbitals(ro(s))) == ro(s).degeneracy for s in ["3d-", "3d", "4f"])


def test_spin_orbital_validation():
    """投影超出范围时报错。"""
    with pytest.raises(ValueError):
        SpinOrbital(Orbital(2, 1), (2, sp.Rational(1, 2)))
    with pytest.raises(ValueError):
        SpinOrbital(Orbital(2, 1), (0,))
    with pytest.raises(ValueError):
        SpinOrbital(orbital_from_string("2p-", relativistic=True), (sp.Rational(3, 2),))


def test_halfint_helpers():
    """半整数工具函数。"""
    assert as_halfint("3/2") == sp.Rational(3, 2)
    assert as_halfint(1.5) == sp.Rational(3, 2)
    with pytest.raises(ValueError):
        as_halfint("1/3")
    with pytest.raises(ValueError):
        as_halfint("abc")
    with pytest.raises(ValueError):
        as_halfint("1/0")
    assert halfint_range(sp.Rational(1, 2), sp.Rational(5, 2)) == [sp.Rational(1, 2), sp.Rational(3, 2), sp.Rational(5, 2)]
    assert halfint_range(2, 1) == []
    assert to_superscript(12) == "¹²"
    assert to_subscript(-1) == "₋₁"
