"""Unit tests for dealease_cli.output module."""

from __future__ import annotations

import pytest

from dealease_cli import output
from dealease_demo.schemas.session import DemoStats
from dealease_demo.schemas.settings import DemoSettings, DensityTier

pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def plain_console() -> None:
    output.set_no_color(True)


class TestMessages:
    def test_success(self, capsys: pytest.CaptureFixture[str]) -> None:
        output.success("Demo mode started")
        assert "✓ Demo mode started" in capsys.readouterr().out

    def test_markup_is_escaped(self, capsys: pytest.CaptureFixture[str]) -> None:
        output.error("documents[doc-1].dealId -> 'deal-9' not found")
        assert "documents[doc-1].dealId" in capsys.readouterr().out


class TestPrintStats:
    def test_table_rows(self, capsys: pytest.CaptureFixture[str]) -> None:
        stats = DemoStats(
            total_users=1,
            total_buyers=3,
            total_sellers=3,
            total_matches=2,
            total_deals=1,
            active_deals=1,
            completed_deals=0,
            total_messages=4,
            total_notifications=2,
            total_documents=1,
            ai_analysis_count=1,
        )
        output.print_stats(stats, DemoSettings(data_density=DensityTier.light))

        out = capsys.readouterr().out
        assert "Buyers" in out
        assert "Active deals" in out
        assert "density=light" in out
