"""Tests for intake, the text renderer and the results evaluator."""

import json
from datetime import datetime, timezone
from pathlib import Path

import pytest

from forensix import FileDescriptor, run_analysis
from pipeline.evaluator import ResultsEvaluator
from pipeline.intake import (
    IntakeError,
    collect_files,
    describe_file,
    guess_mime_type,
    is_accepted,
)
from pipeline.renderer import format_size, render_text_report, risk_band


def _clock() -> datetime:
    return datetime(2026, 10, 19, 8, 0, 0, tzinfo=timezone.utc)


# ---------------------------------------------------------------------------
# Intake
# ---------------------------------------------------------------------------

def test_describe_file_reads_name_size_and_type(tmp_path):
    doc = tmp_path / "contract.docx"
    doc.write_bytes(b"x" * 2048)

    d = describe_file(doc)
    assert d == FileDescriptor(
        name="contract.docx",
        size_bytes=2048,
        mime_type="application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    )


def test_describe_file_empty_file(tmp_path):
    empty = tmp_path / "blank.pdf"
    empty.write_bytes(b"")
    assert describe_file(empty).size_bytes == 0


def test_describe_file_missing_raises(tmp_path):
    with pytest.raises(IntakeError, match="File not found"):
        describe_file(tmp_path / "nope.pdf")


def test_describe_file_directory_raises(tmp_path):
    with pytest.raises(IntakeError, match="Not a regular file"):
        describe_file(tmp_path)


def test_intake_error_is_value_error():
    assert issubclass(IntakeError, ValueError)


@pytest.mark.parametrize("name, expected", [
    ("a.pdf", "application/pdf"),
    ("a.PDF", "application/pdf"),
    ("a.doc", "application/msword"),
    ("a.jpeg", "image/jpeg"),
    ("a.jpg", "image/jpeg"),
    ("a.tiff", "image/tiff"),
    ("a.bmp", "image/bmp"),
    ("noext", ""),
])
def test_guess_mime_type(name, expected):
    assert guess_mime_type(name) == expected


def test_is_accepted():
    assert is_accepted("scan.PNG")
    assert not is_accepted("notes.txt")


def test_collect_files_filters_and_sorts(tmp_path):
    (tmp_path / "b.pdf").write_bytes(b"1")
    (tmp_path / "a.png").write_bytes(b"1")
    (tmp_path / "skip.txt").write_bytes(b"1")
    nested = tmp_path / "sub"
    nested.mkdir()
    (nested / "c.docx").write_bytes(b"1")

    files = collect_files(tmp_path)
    assert [p.name for p in files] == ["a.png", "b.pdf", "c.docx"]
    assert [p.name for p in collect_files(tmp_path, recursive=False)] == ["a.png", "b.pdf"]


def test_collect_files_requires_directory(tmp_path):
    with pytest.raises(IntakeError, match="Not a directory"):
        collect_files(tmp_path / "missing")


# ---------------------------------------------------------------------------
# Renderer
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("size, expected", [
    (0, "0 B"),
    (1023, "1023 B"),
    (1024, "1.0 KB"),
    (204800, "200.0 KB"),
    (1048576, "1.0 MB"),
    (5 * 1048576 + 524288, "5.5 MB"),
])
def test_format_size(size, expected):
    assert format_size(size) == expected


def test_risk_band_thresholds():
    assert risk_band(0.61) == "HIGH"
    assert risk_band(0.6) == "MEDIUM"
    assert risk_band(0.35) == "LOW"


def test_render_text_report_contents():
    result = run_analysis(FileDescriptor("report.pdf", 102400, "application/pdf"), clock=_clock)
    text = render_text_report(result)

    assert "Case ID      : FX-63E4C87C" in text
    assert "Verdict      : FORGED" in text
    assert "Confidence   : 61.7%" in text
    assert "Size         : 100.0 KB" in text
    assert "[Metadata Forensics] 85.6% (HIGH)" in text
    assert "Weight: 30% | Weighted contribution: 6.60%" in text
    assert "Similarity index: 43.1%" in text
    assert "5 anomaly point(s) detected" in text
    assert result.explanation in text
    assert text.endswith("\n")


def test_render_text_report_empty_descriptor():
    text = render_text_report(run_analysis(FileDescriptor("", 0, ""), clock=_clock))
    assert "Document     : (unnamed)" in text
    assert "Type         : Unknown type" in text
    assert "Size         : 0 B" in text


# ---------------------------------------------------------------------------
# Evaluator
# ---------------------------------------------------------------------------

def _write_results(results_dir: Path, descriptors) -> list:
    results_dir.mkdir(parents=True, exist_ok=True)
    results = [run_analysis(d, clock=_clock) for d in descriptors]
    for r in results:
        with open(results_dir / f"{r.case_id}.json", "w", encoding="utf-8") as f:
            json.dump(r.to_dict(), f)
    return results


def test_evaluator_summary(tmp_path):
    results_dir = tmp_path / "results"
    _write_results(results_dir, [
        FileDescriptor("report.pdf", 102400, "application/pdf"),
        FileDescriptor("", 0, ""),
        FileDescriptor(
            "contract.docx", 204800,
            "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        ),
    ])

    ev = ResultsEvaluator(results_dir)
    ev.load_results()
    summary = ev.summary()

    assert summary["total_analyzed"] == 3
    assert summary["verdicts"] == {"GENUINE": 2, "FORGED": 1}
    assert summary["forged_rate"] == round(1 / 3, 4)
    assert summary["mean_final_score"] == round((0.6165 + 0.4958 + 0.5387) / 3, 4)
    assert summary["highest_contributors"] == {
        "Metadata Forensics": 2,
        "Signature Authenticity": 1,
    }
    assert summary["highest_risk_cases"][0]["caseId"] == "FX-63E4C87C"


def test_evaluator_empty_dir(tmp_path):
    ev = ResultsEvaluator(tmp_path)
    ev.load_results()
    assert ev.summary()["total_analyzed"] == 0
    assert ev.mean_final_score() == 0.0
    assert ev.highest_risk_cases() == []
