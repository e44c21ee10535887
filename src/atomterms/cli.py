"""谱项计算命令行入口。

示例::

    atomterms "3p2 4s 5p2"
    atomterms "[Ne] 3d3" --mode intermediate
    atomterms "3d2 5g3" --relativistic --mode intermediate
    atomterms "1s 2p" --mode couplings --export-json out/csfs.json
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import List

from .configurations import Configuration, parse_configuration
from .coupling import intermediate_couplings
from .io import export_couplings_json, export_terms_csv, export_terms_json
from .terms import intermediate_terms, terms

__all__ = [
    "TermsConfig",
    "build_config",
    "run",
    "main",
]


@dataclass
class TermsConfig:
    r"""命令行计算配置。

    Attributes
    ----------
    configuration : str
        组态字符串，如 ``"[Ne] 3d3"``。
    relativistic : bool
        是否按 jj 耦合（相对论轨道）处理。
    mode : str
        ``"terms"``（最终谱项）、``"intermediate"``（各支壳层中间谱项）或
        ``"couplings"``（中间耦合链）。
    export_json : str | None
        JSON 输出路径。
    export_csv : str | None
        CSV 输出路径（仅 ``mode="terms"``）。
    """

    configuration: str
    relativistic: bool = False
    mode: str = "terms"
    export_json: str | None = None
    export_csv: str | None = None


def build_config(args) -> TermsConfig:
    """根据命令行参数构建 :class:`TermsConfig`。"""
    if args.export_csv and args.mode != "terms":
        raise ValueError("--export-csv 仅支持 --mode terms")
    return TermsConfig(
        configuration=args.configuration,
        relativistic=args.relativistic,
        mode=args.mode,
        export_json=args.export_json,
        export_csv=args.export_csv,
    )


def _fmt(items) -> str:
    return " ".join(str(t) for t in items)


def run(cfg: TermsConfig) -> list:
    """执行计算并打印结果，返回计算得到的列表。"""
    config: Configuration = parse_configuration(cfg.configuration, relativistic=cfg.relativistic)

    print("=" * 70)
    print(f"组态: {config}  ({'jj' if config.relativistic else 'LS'} 耦合, {cfg.mode})")
    print("=" * 70)

    if cfg.mode == "terms":
        result = terms(config)
        print(f"谱项数: {len(result)}")
        print(_fmt(result))
        if cfg.export_csv:
            export_terms_csv(cfg.export_csv, result)
        if cfg.export_json:
            export_terms_json(cfg.export_json, {"configuration": str(config), "terms": result})
    elif cfg.mode == "intermediate":
        result = intermediate_terms(config)
        for (orb, occ), its in zip(config, result):
            print(f"{orb}{occ}: {_fmt(its)}")
        if cfg.export_json:
            export_terms_json(
                cfg.export_json,
                {"configuration": str(config), "subshells": [f"{o}{w}" for o, w in config], "terms": result},
            )
    elif cfg.mode == "couplings":
        result = intermediate_couplings(config)
        print(f"CSF 数: {len(result)}")
        for chain in result:
            print(" → ".join(str(t) for t in chain))
        if cfg.export_json:
            export_couplings_json(cfg.export_json, result, configuration=str(config))
    else:
        raise ValueError(f"不支持的模式: {cfg.mode}")
    return result


def main(argv: List[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="原子组态角动量谱项计算",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("configuration", type=str, help="组态字符串，如 '3p2 4s 5p2' 或 '[Ne] 3d3'")
    parser.add_argument("--relativistic", action="store_true", help="按相对论轨道（jj 耦合）处理")
    parser.add_argument(
        "--mode",
        type=str,
        default="terms",
        choices=["terms", "intermediate", "couplings"],
        help="输出内容：最终谱项 / 中间谱项 / 中间耦合链",
    )
    parser.add_argument("--export-json", type=str, default=None, help="导出 JSON 路径")
    parser.add_argument("--export-csv", type=str, default=None, help="导出 CSV 路径（仅 terms 模式）")

    args = parser.parse_args(argv)
    cfg = build_config(args)
    run(cfg)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
