"""High-level API + CLI for the ForensiX document analysis engine."""

from __future__ import annotations

import argparse
import json
import logging
import time
from pathlib import Path
from typing import Any

import yaml
from tqdm import tqdm

from forensix import AnalysisResult, FileDescriptor, ReportAssembler
from pipeline import ResultsEvaluator, collect_files, describe_file, render_text_report

CONFIG_PATH = Path(__file__).parent / "configs" / "forensix.yaml"

DEFAULT_CONFIG: dict[str, Any] = {
    "analysis": {"simulated_delay_seconds": 0.0},
    "output": {"results_dir": "outputs/results"},
    "logging": {"level": "INFO"},
}

logger = logging.getLogger("forensix.api")
if not logger.handlers:
    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter("[forensix] %(message)s"))
    logger.addHandler(_handler)


def load_config(config_path: Path = CONFIG_PATH) -> dict[str, Any]:
    """Read the YAML config, filling missing sections/keys from DEFAULT_CONFIG."""
    cfg: dict[str, Any] = {}
    if Path(config_path).exists():
        with open(config_path, encoding="utf-8") as f:
            cfg = yaml.safe_load(f) or {}

    merged = {section: dict(values) for section, values in DEFAULT_CONFIG.items()}
    for section, values in cfg.items():
        if isinstance(values, dict):
            merged.setdefault(section, {}).update(values)
        elif values is not None:
            merged[section] = values
    return merged


class ForensixAPI:
    """High-level orchestration API usable from CLI or notebooks."""

    def __init__(self, config_path: Path = CONFIG_PATH, assembler: ReportAssembler | None = None):
        self.config_path = Path(config_path)
        self._cfg = load_config(self.config_path)
        self.assembler = assembler or ReportAssembler()

        self.simulated_delay = float(self._cfg["analysis"].get("simulated_delay_seconds", 0.0))
        self.results_dir = Path(self._cfg["output"].get("results_dir", "outputs/results"))
        logging.getLogger("forensix").setLevel(str(self._cfg["logging"].get("level", "INFO")).upper())

    def analyze_descriptor(self, descriptor: FileDescriptor) -> AnalysisResult:
        # Presentation delay only; it never reaches the scoring engine.
        if self.simulated_delay > 0:
            time.sleep(self.simulated_delay)
        return self.assembler.assemble(descriptor)

    def analyze_file(self, path: str | Path) -> AnalysisResult:
        return self.analyze_descriptor(describe_file(path))

    def analyze_directory(self, root: str | Path, save: bool = True) -> list[AnalysisResult]:
        results = []
        for path in tqdm(collect_files(root), desc="Analyzing", unit="file"):
            result = self.analyze_file(path)
            if save:
                self.save_result(result)
            results.append(result)
        logger.info("Analyzed %d file(s) under %s", len(results), root)
        return results

    def save_result(self, result: AnalysisResult, save_dir: str | Path | None = None) -> Path:
        out_dir = Path(save_dir) if save_dir is not None else self.results_dir
        out_dir.mkdir(parents=True, exist_ok=True)
        out_path = out_dir / f"{result.case_id}.json"
        with open(out_path, "w", encoding="utf-8") as f:
            json.dump(result.to_dict(), f, indent=2, ensure_ascii=False)
        logger.info("Saved %s -> %s", result.case_id, out_path)
        return out_path

    def load_result(self, path: str | Path) -> AnalysisResult:
        p = Path(path)
        if not p.exists():
            candidate = self.results_dir / f"{path}.json"
            if not candidate.exists():
                raise FileNotFoundError(f"No saved result at '{path}' or {candidate}")
            p = candidate
        with open(p, encoding="utf-8") as f:
            return AnalysisResult.from_dict(json.load(f))

    def summarize(self) -> dict[str, Any]:
        evaluator = ResultsEvaluator(self.results_dir)
        evaluator.load_results()
        return evaluator.summary()


# -------------------- CLI commands --------------------

def cmd_analyze(args: argparse.Namespace) -> None:
    api = ForensixAPI(Path(args.config))
    result = api.analyze_file(args.path)
    if args.save:
        api.save_result(result)
    if args.json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    else:
        print(render_text_report(result), end="")


def cmd_batch(args: argparse.Namespace) -> None:
    api = ForensixAPI(Path(args.config))
    results = api.analyze_directory(args.directory)
    forged = sum(1 for r in results if r.verdict == "FORGED")
    print(f"[batch] Analyzed {len(results)} file(s), {forged} FORGED. Results in {api.results_dir}/")


def cmd_summary(args: argparse.Namespace) -> None:
    api = ForensixAPI(Path(args.config))
    print(json.dumps(api.summarize(), indent=2, ensure_ascii=False))


def cmd_report(args: argparse.Namespace) -> None:
    api = ForensixAPI(Path(args.config))
    print(render_text_report(api.load_result(args.case)), end="")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="ForensiX document forgery analysis")
    parser.add_argument("--config", default=str(CONFIG_PATH), help="Path to forensix.yaml")
    sub = parser.add_subparsers(dest="command", required=True)

    analyze_p = sub.add_parser("analyze", help="Analyze a single document")
    analyze_p.add_argument("path", help="Path to the document")
    analyze_p.add_argument("--json", action="store_true", help="Print the raw result record")
    analyze_p.add_argument("--save", action="store_true", help="Save the result to the results dir")

    batch_p = sub.add_parser("batch", help="Analyze every accepted document under a directory")
    batch_p.add_argument("directory", help="Directory to scan")

    sub.add_parser("summary", help="Summarize saved results")

    report_p = sub.add_parser("report", help="Render a text report from a saved result")
    report_p.add_argument("case", help="Case id (e.g. FX-63E4C87C) or path to a result JSON")

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    commands = {
        "analyze": cmd_analyze,
        "batch": cmd_batch,
        "summary": cmd_summary,
        "report": cmd_report,
    }
    commands[args.command](args)


if __name__ == "__main__":
    main()
