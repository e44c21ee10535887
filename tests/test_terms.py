"""支壳层与组态谱项单元测试

测试 terms.py 中 terms、count_terms 以及组态谱项的正确性。
"""

from collections import Counter
from math import comb

import pytest

from atomterms.configurations import parse_configuration
from atomterms.orbitals import Orbital, Parity
from atomterms.term_symbols import Term, parse_term
from atomterms.terms import count_terms, terms
from atomterms.utils import DomainError

ORBITALS = [Orbital(1, 0), Orbital(2, 1), Orbital(3, 2), Orbital(4, 3)]


def labels(ts):
    return [t.label for t in ts]


@pytest.mark.terms
@pytest.mark.quick
def test_terms_d3():
    """d³ 的全部谱项（含重复的 ²D）。"""
    assert labels(terms(Orbital(3, 2), 3)) == ["2P", "2D", "2D", "2F", "2G", "2H", "4P", "4F"]


@pytest.mark.terms
@pytest.mark.quick
def test_terms_p3_odd_parity():
    """p³ 为奇宇称：²Pᵒ、²Dᵒ、⁴Sᵒ。"""
    assert labels(terms(Orbital(2, 1), 3)) == ["2Po", "2Do", "4So"]


@pytest.mark.terms
def test_terms_special_cases():
    """单电子、空壳层、满壳层与 s² 的特殊情形。"""
    assert terms(Orbital(2, 1), 1) == [Term(1, "1/2", Parity.ODD)]
    assert terms(Orbital(3, 2), 0) == [Term.zero()]
    assert terms(Orbital(3, 2), 10) == [Term.zero()]
    assert terms(Orbital(1, 0), 2) == [Term.zero()]
    # p⁵ 等价于单个空穴
    assert labels(terms(Orbital(2, 1), 5)) == ["2Po"]


@pytest.mark.terms
@pytest.mark.parametrize("orb", ORBITALS, ids=str)
def test_terms_state_count(orb):
    """全部谱项的统计权重之和等于 C(g, w)。"""
    g = orb.degeneracy
    for w in range(g + 1):
        total = sum(t.weight for t in terms(orb, w))
        assert total == comb(g, w), f"{orb}{w}: {total} != {comb(g, w)}"


@pytest.mark.terms
@pytest.mark.parametrize("orb", ORBITALS, ids=str)
def test_terms_hole_particle_symmetry(orb):
    """w 个粒子与 g-w 个粒子的谱项相同。"""
    g = orb.degeneracy
    for w in range(g + 1):
        assert Counter(terms(orb, w)) == Counter(terms(orb, g - w)), f"{orb}{w}"


@pytest.mark.terms
@pytest.mark.parametrize("orb", ORBITALS[1:], ids=str)
def test_count_terms_consistent_with_terms(orb):
    """count_terms 与 terms 中的出现次数严格一致。"""
    g = orb.degeneracy
    for w in range(g + 1):
        ts = terms(orb, w)
        counts = Counter(ts)
        for t, n in counts.items():
            assert count_terms(orb, w, t) == n, f"{orb}{w} {t}"
        # 宇称相反的谱项不出现
        for t in counts:
            flipped = Term(t.L, t.S, t.parity * Parity.ODD)
            assert count_terms(orb, w, flipped) == counts.get(flipped, 0)


@pytest.mark.terms
@pytest.mark.quick
def test_count_terms_known_values():
    """若干已知计数。"""
    assert count_terms(Orbital(1, 0), 2, "1S") == 1
    assert count_terms(Orbital(4, 3), 3, "2Do") == 2
    assert count_terms(Orbital(4, 3), 5, "2Do") == 5
    assert count_terms(Orbital(4, 3), 3, "2D") == 0
    assert count_terms(Orbital(2, 1), 1, "2P") == 0
    assert count_terms(Orbital(2, 1), 2, "2[3/2]") == 0


@pytest.mark.terms
def test_terms_domain_errors():
    """占据数超出 [0, g] 时抛出 DomainError。"""
    with pytest.raises(DomainError):
        terms(Orbital(2, 1), 7)
    with pytest.raises(DomainError):
        terms(Orbital(2, 1), -1)
    with pytest.raises(DomainError):
        count_terms(Orbital(2, 1), 7, "1S")


@pytest.mark.terms
def test_terms_unsupported_type():
    """不支持的参数类型抛出 TypeError。"""
    with pytest.raises(TypeError):
        terms("3d", 3)


@pytest.mark.terms
@pytest.mark.quick
def test_configuration_terms_3p2_4s_5p2():
    """3p² 4s 5p² 的 12 个最终谱项。"""
    ts = terms(parse_configuration("3p2 4s 5p2"))
    assert labels(ts) == ["2S", "2P", "2D", "2F", "2G", "4S", "4P", "4D", "4F", "6S", "6P", "6D"]


@pytest.mark.terms
def test_configuration_terms_examples():
    """若干组态的最终谱项。"""
    assert labels(terms(parse_configuration("1s"))) == ["2S"]
    assert labels(terms(parse_configuration("1s 2p"))) == ["1Po", "3Po"]
    assert labels(terms(parse_configuration("[Ne] 3d3"))) == ["2P", "2D", "2F", "2G", "2H", "4P", "4F"]


@pytest.mark.terms
def test_configuration_terms_parity():
    """组态谱项的宇称等于各支壳层宇称之积。"""
    config = parse_configuration("2p 3d")
    ts = terms(config)
    assert all(t.parity is config.parity for t in ts)
    assert parse_term("3Fo") in ts
