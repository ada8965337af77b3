from __future__ import annotations

from pathlib import Path

from click.testing import CliRunner

from pdf_range_splitter.cli import cli


def test_split_writes_both_outputs(tmp_path: Path, ten_page_path: Path, page_ids_of) -> None:
    output_dir = tmp_path / "out"

    result = CliRunner().invoke(
        cli, ["split", str(ten_page_path), "--range", "3-5", "-o", str(output_dir)]
    )

    assert result.exit_code == 0, result.output
    remaining = output_dir / "Report-remaining.pdf"
    extracted = output_dir / "Report-extracted-3-5.pdf"
    assert page_ids_of(remaining.read_bytes()) == [0, 1, 5, 6, 7, 8, 9]
    assert page_ids_of(extracted.read_bytes()) == [2, 3, 4]
    assert "Split Result" in result.output


def test_split_with_bad_range_fails(tmp_path: Path, ten_page_path: Path) -> None:
    output_dir = tmp_path / "out"

    result = CliRunner().invoke(
        cli, ["split", str(ten_page_path), "-r", "4-2", "-o", str(output_dir)]
    )

    assert result.exit_code == 1
    assert "Start page (4) must be <= end page (2)" in result.output
    assert not output_dir.exists()


def test_split_with_invalid_pdf_fails(tmp_path: Path) -> None:
    bogus = tmp_path / "bogus.pdf"
    bogus.write_bytes(b"nope")

    result = CliRunner().invoke(cli, ["split", str(bogus), "-r", "1", "-o", str(tmp_path / "out")])

    assert result.exit_code == 1


def test_check_range_accepts_valid_range() -> None:
    result = CliRunner().invoke(cli, ["check-range", "2-4", "--pages", "10"])

    assert result.exit_code == 0
    assert "Start (Remove pages 2–4)" in result.output
    assert "3 page(s)" in result.output


def test_check_range_reports_error_kind() -> None:
    result = CliRunner().invoke(cli, ["check-range", "3-20", "--pages", "10"])

    assert result.exit_code == 1
    assert "ExceedsDocument" in result.output


def test_check_range_rejects_oversized_numbers() -> None:
    result = CliRunner().invoke(cli, ["check-range", "1-" + "9" * 5000])

    assert result.exit_code == 1
    assert "InvalidFormat" in result.output
    assert result.exception is None or isinstance(result.exception, SystemExit)


def test_info_shows_page_count(ten_page_path: Path) -> None:
    result = CliRunner().invoke(cli, ["info", str(ten_page_path)])

    assert result.exit_code == 0
    assert "Number of Pages" in result.output
    assert "10" in result.output
    assert "Ten Pages" in result.output


def test_interactive_session(tmp_path: Path, ten_page_path: Path, page_ids_of) -> None:
    output_dir = tmp_path / "saved"
    commands = "\n".join(
        [
            "save-remaining",
            "range 2",
            "start",
            "save-remaining",
            f"save-extracted {output_dir / 'pieces'}",
            "bogus",
            "quit",
        ]
    )

    result = CliRunner().invoke(
        cli,
        ["interactive", str(ten_page_path), "-o", str(output_dir)],
        input=commands + "\n",
    )

    assert result.exit_code == 0, result.output
    assert "Nothing to download yet" in result.output
    assert "Start (Remove page 2)" in result.output
    assert page_ids_of((output_dir / "Report-remaining.pdf").read_bytes()) == [0] + list(range(2, 10))
    assert page_ids_of((output_dir / "pieces" / "Report-extracted-2-2.pdf").read_bytes()) == [1]
    assert "Commands:" in result.output
