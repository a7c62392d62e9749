import warnings
from datetime import date

from finance_dashboard.models import Category
from finance_dashboard.process_transactions import generate_sample_transactions, parse_csv


def test_parse_csv_skips_short_rows():
    result = parse_csv("2025-01-05,Coffee shop,-4.50\nbadrow")

    assert result.skipped_line_count == 1
    assert len(result.transactions) == 1
    txn = result.transactions[0]
    assert txn.date == date(2025, 1, 5)
    assert txn.description == "Coffee shop"
    assert txn.amount == -4.5
    assert txn.category == Category.DINING


def test_parse_csv_rejects_non_numeric_amounts():
    result = parse_csv("2025-01-05,Lunch,abc\n2025-01-06,Lunch,\n2025-01-07,Lunch,-9")

    assert result.skipped_line_count == 2
    assert [t.amount for t in result.transactions] == [-9]


def test_parse_csv_rejects_bad_dates():
    result = parse_csv("not a date,Lunch,-9\n2025-01-07,Lunch,-9")

    assert result.skipped_line_count == 1
    assert len(result.transactions) == 1


def test_parse_csv_ignores_blank_lines_and_extra_fields():
    text = "\r\n  2025-03-01 , Salary , 3000 , extra\r\n\n2025-03-02,Taxi,-25\n   \n"

    result = parse_csv(text)

    assert result.skipped_line_count == 0
    assert [(t.description, t.amount, t.category) for t in result.transactions] == [
        ("Salary", 3000, Category.INCOME),
        ("Taxi", -25, Category.TRANSPORT),
    ]


def test_parse_csv_empty_text():
    result = parse_csv("")
    assert result.transactions == []
    assert result.skipped_line_count == 0


def test_parse_csv_assigns_unique_ids():
    result = parse_csv("2025-01-01,a,-1\n2025-01-01,a,-1")
    assert len({t.id for t in result.transactions}) == 2


def test_sample_is_deterministic_with_seed():
    today = date(2025, 6, 30)

    first = generate_sample_transactions(20, seed=7, today=today)
    second = generate_sample_transactions(20, seed=7, today=today)

    assert first == second


def test_sample_shape():
    today = date(2025, 6, 30)

    sample = generate_sample_transactions(50, seed=1, today=today)

    assert len(sample) == 51
    expenses, income = sample[:-1], sample[-1]
    assert all(-205 <= t.amount <= -5 for t in expenses)
    assert all((today - t.date).days < 365 for t in expenses)
    assert all(t.description.startswith(t.category.value) for t in expenses)
    assert income.id == "i1"
    assert income.amount == 3000
    assert income.category == Category.INCOME
    assert income.date == today


def test_parse_csv_bad_dates_do_not_warn():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        result = parse_csv("someday,Lunch,-9\nnot a date,Lunch,-9\n2025-01-07,Lunch,-9")

    assert result.skipped_line_count == 2
    assert len(result.transactions) == 1
