from __future__ import annotations

import pytest

from facturacsv.filters import explain_rejections, filter_invoices
from facturacsv.parser import parse, render
from facturacsv.pipeline import filter_text, run_pipeline
from facturacsv.validator import InvalidHeader, validate


def _filter(text: str) -> str:
    return render(filter_invoices(validate(parse(text))))


def test_header_only_is_kept(header):
    assert _filter(header) == header


def test_valid_invoices_are_kept(export_text, invoice_line):
    text = export_text(
        invoice_line(),
        invoice_line(
            num_factura=2,
            fecha="03/08/2019",
            bruto="2160",
            neto="2000",
            iva="",
            igic="8",
            concepto="MacBook Pro",
            cif_cliente="",
            nif_cliente="78544372A",
        ),
    )

    assert _filter(text) == text


def test_repeated_invoice_numbers_are_all_dropped(export_text, invoice_line):
    text = export_text(
        invoice_line(),
        invoice_line(num_factura=2),
        invoice_line(num_factura=2),
    )

    assert _filter(text) == export_text(invoice_line())


def test_uniqueness_counts_rows_failing_other_rules(export_text, invoice_line):
    # The second copy of number 2 is invalid anyway, yet still counts.
    text = export_text(
        invoice_line(num_factura=2),
        invoice_line(num_factura=2, iva="", igic=""),
    )

    assert _filter(text) == export_text()


@pytest.mark.parametrize(
    "override",
    [
        {"iva": "20", "igic": "10"},
        {"iva": "", "igic": ""},
        {"cif_cliente": "B76430134", "nif_cliente": "78544372A"},
        {"cif_cliente": "", "nif_cliente": ""},
        {"bruto": "1100", "neto": "1000", "iva": "20"},
        {"bruto": "1100", "neto": "1000", "iva": "", "igic": "8"},
    ],
)
def test_rule_violations_are_dropped(export_text, invoice_line, override):
    text = export_text(invoice_line(), invoice_line(num_factura=2, **override))

    assert _filter(text) == export_text(invoice_line())


def test_iva_arithmetic_is_exact(export_text, invoice_line):
    kept = invoice_line(bruto="1200", neto="1000", iva="20")
    dropped = invoice_line(num_factura=2, bruto="1201", neto="1000", iva="20")

    assert _filter(export_text(kept, dropped)) == export_text(kept)


def test_empty_amounts_read_as_zero(export_text, invoice_line):
    line = invoice_line(bruto="", neto="", iva="21")

    assert _filter(export_text(line)) == export_text(line)


def test_missing_identifier_columns_count_as_filled(export_text):
    line = "1,02/05/2019,1200,1000,20,,ACERLaptop"

    assert _filter(export_text(line)) == export_text()
    [rejection] = explain_rejections(parse(export_text(line)))
    assert rejection.codes == ("IDENTIFIER_NOT_UNIQUE",)


def test_all_invalid_leaves_header_only(export_text, invoice_line, header):
    text = export_text(invoice_line(), invoice_line())

    assert _filter(text) == header


def test_output_is_ordered_subsequence(export_text, invoice_line):
    rows = [
        invoice_line(num_factura=5),
        invoice_line(num_factura=3, iva="", igic=""),
        invoice_line(num_factura=9),
        invoice_line(num_factura=1, cif_cliente=""),
        invoice_line(num_factura=4),
    ]
    record_set = validate(parse(export_text(*rows)))

    result = filter_invoices(record_set)

    assert result.header == record_set.header
    assert result.rows == (rows[0], rows[2], rows[4])


def test_filtering_twice_is_stable(export_text, invoice_line):
    text = export_text(
        invoice_line(),
        invoice_line(num_factura=2),
        invoice_line(num_factura=2, bruto="1100"),
        invoice_line(num_factura=3, iva="", igic="7", bruto="1070"),
    )

    once = _filter(text)

    assert _filter(once) == once


def test_explain_rejections_lists_every_failed_rule(export_text, invoice_line):
    text = export_text(
        invoice_line(),
        invoice_line(num_factura=2, iva="20", igic="10", nif_cliente="78544372A"),
        invoice_line(num_factura=2),
    )

    rejections = explain_rejections(parse(text))

    assert [r.line_number for r in rejections] == [3, 4]
    first, second = rejections
    assert first.invoice_number == "2"
    assert first.codes == (
        "DUPLICATE_INVOICE_NUMBER",
        "TAX_CODE_NOT_UNIQUE",
        "IDENTIFIER_NOT_UNIQUE",
        "IGIC_WRONGLY_CALCULATED",
    )
    assert second.codes == ("DUPLICATE_INVOICE_NUMBER",)
    assert second.as_cells()[:3] == ["4", "2", "DUPLICATE_INVOICE_NUMBER"]
    assert "más de una vez" in second.message


def test_explained_rows_are_exactly_the_dropped_ones(export_text, invoice_line):
    rows = [
        invoice_line(),
        invoice_line(num_factura=2, bruto="1"),
        invoice_line(num_factura=3, iva="", igic="8", bruto="1080"),
        invoice_line(num_factura=4, nif_cliente="1A"),
    ]
    record_set = validate(parse(export_text(*rows)))

    kept = set(filter_invoices(record_set).rows)
    rejected = {r.row for r in explain_rejections(record_set)}

    assert kept.isdisjoint(rejected)
    assert kept | rejected == set(rows)


def test_run_pipeline(export_text, invoice_line):
    text = export_text(invoice_line(), invoice_line(num_factura=2, iva=""))

    outcome = run_pipeline(text)

    assert outcome.kept == 1
    assert outcome.to_text() == export_text(invoice_line())
    assert [r.codes for r in outcome.rejections] == [("TAX_CODE_NOT_UNIQUE",)]


def test_filter_text_validates_first():
    with pytest.raises(InvalidHeader):
        filter_text("hello, world")


def test_filter_outcome_is_immutable(export_text, invoice_line):
    text = export_text(invoice_line(), invoice_line(num_factura=2, iva=""))

    outcome = run_pipeline(text)

    assert isinstance(outcome.rejections, tuple)
    with pytest.raises(AttributeError):
        outcome.rejections = ()
