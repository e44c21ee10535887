from __future__ import annotations

import json
from pathlib import Path
from typing import List, Sequence

from .term_symbols import IntermediateTerm, Term

__all__ = [
    "export_terms_csv",
    "export_terms_json",
    "export_couplings_json",
    "term_to_dict",
]


def term_to_dict(t) -> dict:
    """将谱项（或 :math:`J` 值）转换为可 JSON 序列化的字典。"""
    if isinstance(t, IntermediateTerm):
        d = term_to_dict(t.term)
        d["seniority"] = t.seniority
        return d
    if isinstance(t, Term):
        return {
            "term": t.label,
            "L": str(t.L),
            "S": str(t.S),
            "parity": str(t.parity),
            "multiplicity": t.multiplicity,
            "weight": t.weight,
        }
    return {"J": str(t)}


def export_terms_csv(out_path: str | Path, terms: Sequence) -> None:
    """导出谱项表为 CSV：列为 `term,L,S,parity,multiplicity,weight`。

    若为 jj 耦合的 :math:`J` 列表，则只有一列 `J`；中间谱项额外写入 `seniority` 列。
    """
    p = Path(out_path)
    p.parent.mkdir(parents=True, exist_ok=True)

    rows = [term_to_dict(t) for t in terms]
    if rows and "J" in rows[0]:
        columns = ["J"]
    else:
        columns = ["term", "L", "S", "parity", "multiplicity", "weight"]
        if rows and "seniority" in rows[0]:
            columns.append("seniority")

    with p.open("w", encoding="utf-8") as f:
        f.write(",".join(columns) + "\n")
        for row in rows:
            f.write(",".join(str(row[c]) for c in columns) + "\n")


def export_terms_json(out_path: str | Path, payload: dict) -> None:
    """导出结果为 JSON；``payload`` 中的谱项列表会被逐项转换。"""
    p = Path(out_path)
    p.parent.mkdir(parents=True, exist_ok=True)

    def convert(v):
        if isinstance(v, (list, tuple)):
            return [convert(x) for x in v]
        if isinstance(v, dict):
            return {k: convert(x) for k, x in v.items()}
        if isinstance(v, (str, int, float, bool)) or v is None:
            return v
        return term_to_dict(v)

    with p.open("w", encoding="utf-8") as f:
        json.dump(convert(payload), f, indent=2, ensure_ascii=False)


def export_couplings_json(out_path: str | Path, chains: List[list], configuration: str | None = None) -> None:
    """导出中间耦合链为 JSON，每条链写为谱项标签列表。"""
    labels = [[t.label if isinstance(t, Term) else str(t) for t in chain] for chain in chains]
    export_terms_json(out_path, {"configuration": configuration, "n_csfs": len(chains), "chains": labels})
