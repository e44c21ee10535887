"""atomterms 包
=================

原子电子组态的角动量谱项组合学：LS 耦合谱项、seniority、多支壳层矢量耦合
与 jj 耦合的 :math:`J` 值枚举。

本包提供：

- 等价电子谱项多重度（Xu–Dai 算法，全整数运算）
- 粒子–空穴等价、seniority 指认
- 从左到右的谱项耦合与中间耦合链（CSF）枚举
- 相对论轨道（jj 耦合）的 :math:`J` 值枚举

注：本项目所有文档与注释均使用中文，Docstring 采用 Sphinx + NumPy 风格，公式使用 ``:math:`` 标记。
"""

from atomterms.configurations import Configuration, parse_configuration
from atomterms.coupling import couple_terms, final_terms, intermediate_couplings
from atomterms.orbitals import Orbital, Parity, RelativisticOrbital, orbital_from_string, spin_orbitals
from atomterms.term_symbols import IntermediateTerm, Term, parse_term
from atomterms.terms import SeniorityAmbiguityWarning, count_terms, intermediate_terms, terms
from atomterms.utils import DomainError

__all__ = [
    "Configuration",
    "parse_configuration",
    "couple_terms",
    "final_terms",
    "intermediate_couplings",
    "Orbital",
    "Parity",
    "RelativisticOrbital",
    "orbital_from_string",
    "spin_orbitals",
    "IntermediateTerm",
    "Term",
    "parse_term",
    "SeniorityAmbiguityWarning",
    "count_terms",
    "intermediate_terms",
    "terms",
    "DomainError",
]

__version__ = "0.1.0"
