import pytest
from rich.console import Console

from weblog_analyzer import AnalysisConfig, LogAnalyzer, ParseError, ParseErrorKind


def test_load_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        LogAnalyzer().load_file(str(tmp_path / "nope.log"))


def test_analyze_file_sample(log_file):
    ingested, report = LogAnalyzer().analyze_file(str(log_file))
    assert ingested.lines_read == 4
    assert ingested.rejected == 0
    assert report.total_requests == 4


def test_skip_mode_excludes_bad_lines(tmp_path, sample_lines):
    path = tmp_path / "mixed.log"
    path.write_text("".join(sample_lines) + "10.0.0.1,2024-02-01 10:20,/home,OK,x\n\n"
                    + "10.0.0.1,2024-02-01,/home,200\n")

    ingested, report = LogAnalyzer(strict=False).analyze_file(str(path))

    assert ingested.lines_read == 7
    assert [e.kind for e in ingested.errors] == [
        ParseErrorKind.INVALID_STATUS, ParseErrorKind.MALFORMED_LINE
    ]
    assert [e.line_number for e in ingested.errors] == [5, 7]
    assert report.total_requests == 4
    assert report.status_distribution.total() == 4


def test_strict_mode_fails_fast(tmp_path):
    path = tmp_path / "bad.log"
    path.write_text("a,2024-02-01 10:15,/p,200,x\na,2024-02-01 10:15:59,/p,200,x\n")

    with pytest.raises(ParseError) as exc:
        LogAnalyzer(strict=True).analyze_file(str(path))
    assert exc.value.line_number == 2
    assert exc.value.kind is ParseErrorKind.INVALID_TIMESTAMP


def test_ingest_lines_then_analyze(sample_lines):
    analyzer = LogAnalyzer(AnalysisConfig(top_k=1))
    ingested = analyzer.ingest(sample_lines)
    assert len(ingested.records) == 4
    assert analyzer.analyze(ingested.records).top_pages.as_dict() == {"/home": 2}


def test_load_file_with_console(log_file):
    console = Console(record=True, width=100)
    ingested = LogAnalyzer(console=console).load_file(str(log_file))
    assert len(ingested.records) == 4


def test_skip_mode_rejects_undecodable_line(tmp_path):
    path = tmp_path / "binary.log"
    path.write_bytes(b"a,2024-02-01 10:15,/p,200,x\nb,2024-02-01 10:16,/q,200,\xff\xfe\n")

    ingested, report = LogAnalyzer(strict=False).analyze_file(str(path))

    assert ingested.lines_read == 2
    assert [(e.kind, e.line_number) for e in ingested.errors] == [
        (ParseErrorKind.MALFORMED_LINE, 2)
    ]
    assert report.total_requests == 1


def test_strict_mode_aborts_on_undecodable_line(tmp_path):
    path = tmp_path / "binary.log"
    path.write_bytes(b"a,2024-02-01 10:15,/p,200,\xff\n")

    with pytest.raises(ParseError) as exc:
        LogAnalyzer(strict=True).analyze_file(str(path))
    assert exc.value.line_number == 1


def test_crlf_file(tmp_path):
    path = tmp_path / "dos.log"
    path.write_bytes(b"a,2024-02-01 10:15,/p,200,x\r\nb,2024-02-01 10:16,/q,404,y\r\n")

    ingested = LogAnalyzer(strict=True).load_file(str(path))
    assert [r.agent for r in ingested.records] == ["x", "y"]
