"""Tests for the savings projector."""

import pytest

from hanvitt.financial.calculators.savings import project_savings


def _closed_form(initial, monthly, annual_rate_percent, months):
    r = annual_rate_percent / 100 / 12
    growth = (1 + r) ** months
    return initial * growth + monthly * (growth - 1) / r


class TestProjectSavings:
    def test_point_count(self):
        projection = project_savings(10_000, 500, 7, 20)
        assert len(projection.points) == 21
        assert [p.year for p in projection.points] == list(range(21))

    def test_year_zero_is_initial_deposit(self):
        projection = project_savings(10_000, 500, 7, 20)
        first = projection.points[0]
        assert first.balance == 10_000
        assert first.invested == 10_000
        assert first.interest == 0

    def test_final_balance_matches_annuity_formula(self):
        projection = project_savings(10_000, 500, 7, 20)
        expected = _closed_form(10_000, 500, 7, 240)
        assert projection.final_balance == pytest.approx(expected, abs=1)

    def test_total_invested(self):
        projection = project_savings(10_000, 500, 7, 20)
        assert projection.total_invested == 10_000 + 500 * 240
        assert projection.total_interest == projection.final_balance - projection.total_invested

    def test_balance_is_monotonic(self):
        projection = project_savings(10_000, 500, 7, 30)
        balances = [p.balance for p in projection.points]
        assert balances == sorted(balances)

    def test_zero_rate_earns_nothing(self):
        projection = project_savings(1_000, 100, 0, 5)
        for point in projection.points:
            assert point.balance == point.invested
            assert point.interest == 0
        assert projection.final_balance == 1_000 + 100 * 60

    def test_zero_years(self):
        projection = project_savings(5_000, 500, 7, 0)
        assert len(projection.points) == 1
        assert projection.final_balance == 5_000

    def test_to_dict(self):
        data = project_savings(10_000, 500, 7, 2).to_dict()
        assert data["total_invested"] == 22_000
        assert len(data["points"]) == 3
        assert data["points"][0] == {"year": 0, "balance": 10_000, "invested": 10_000, "interest": 0}
