"""
Tests for the records-toolkit command line.
"""

import json

import pytest
from click.testing import CliRunner

from records_toolkit.cli import cli


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("RECORDS_TOOLKIT_DB", "RECORDS_TOOLKIT_STORAGE_KEY", "RECORDS_TOOLKIT_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)


class TestCLI:
    @pytest.fixture(autouse=True)
    def _setup(self, tmp_path):
        self.tmp_path = tmp_path
        self.db = f"sqlite:///{tmp_path / 'requests.db'}"
        self.runner = CliRunner()

    def invoke(self, *args, **kwargs):
        return self.runner.invoke(cli, ["--db", self.db, *args], **kwargs)

    def add_request(self, *extra) -> str:
        result = self.invoke(
            "track", "add", "--title", "Budget emails", "--type", "emails",
            "--agency", "City Clerk", "--state", "CA",
            "--description", "All emails about the 2026 budget", *extra,
        )
        assert result.exit_code == 0, result.output
        return result.output.strip().split()[-1]

    # ---- reference commands ----

    def test_version(self):
        result = self.runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "1.0.0" in result.output

    def test_due_date(self):
        result = self.invoke("due-date", "--state", "CA", "--submitted", "2026-03-02")
        assert result.exit_code == 0
        assert "Mar 12, 2026" in result.output
        assert "10 calendar days" in result.output

    def test_due_date_by_name(self):
        result = self.invoke("due-date", "--state", "New York", "--submitted", "2026-03-02")
        assert "Mar 9, 2026" in result.output

    def test_due_date_unknown_state(self):
        result = self.invoke("due-date", "--state", "ZZ")
        assert result.exit_code == 0
        assert "Unknown state" in result.output

    def test_due_date_bad_date(self):
        result = self.invoke("due-date", "--state", "CA", "--submitted", "03/02/2026")
        assert result.exit_code != 0
        assert "Invalid date format" in result.output

    def test_estimate(self):
        result = self.invoke(
            "estimate", "--state", "CA", "--type", "emails", "--pages", "150", "--search-hours", "2"
        )
        assert result.exit_code == 0
        assert "$65.00" in result.output

    def test_estimate_json(self):
        result = self.invoke(
            "estimate", "--state", "NY", "--type", "body-camera",
            "--pages", "10", "--audio-minutes", "20", "--search-hours", "1", "--json-output",
        )
        assert result.exit_code == 0
        assert json.loads(result.output)["total"] == 62.5

    def test_list_states(self):
        result = self.invoke("list-states")
        assert result.exit_code == 0
        assert "California" in result.output
        assert "District of Columbia" in result.output

    def test_list_templates(self):
        result = self.invoke("list-templates")
        assert "body-camera" in result.output
        detail = self.invoke("list-templates", "--type", "emails")
        assert "Email Communications" in detail.output
        assert "keywords" in detail.output

    # ---- letters ----

    def test_letter_to_stdout(self):
        result = self.invoke(
            "letter", "--type", "emails", "--state", "CA", "--agency", "City Clerk",
            "-f", "keywords=budget", "-f", "senders=Mayor",
        )
        assert result.exit_code == 0
        assert "Keywords: budget" in result.output
        assert "Sender(s): Mayor" in result.output
        assert "California Public Records Officer" in result.output

    def test_letter_to_file(self):
        out = self.tmp_path / "letter.txt"
        result = self.invoke("letter", "--type", "general", "--output", str(out))
        assert result.exit_code == 0
        assert "Re: Public Records Request — General Public Records Request" in out.read_text(
            encoding="utf-8"
        )

    def test_letter_bad_field(self):
        result = self.invoke("letter", "--type", "emails", "-f", "keywords")
        assert result.exit_code != 0

    def test_letter_save(self):
        result = self.invoke(
            "letter", "--type", "emails", "--state", "CA", "--agency", "City Clerk",
            "--pages", "150", "--save", "--title", "Budget emails",
        )
        assert result.exit_code == 0
        listing = self.invoke("track", "list")
        assert "Budget emails" in listing.output
        assert "draft" in listing.output

    # ---- tracking ----

    def test_track_list_empty(self):
        result = self.invoke("track", "list")
        assert "No tracked requests." in result.output

    def test_track_lifecycle(self):
        request_id = self.add_request()

        result = self.invoke("track", "submit", request_id, "--on", "2026-03-02")
        assert result.exit_code == 0
        assert "due Mar 12, 2026" in result.output

        result = self.invoke("track", "note", request_id, "Called the clerk", "--channel", "phone")
        assert result.exit_code == 0
        result = self.invoke(
            "track", "doc", request_id, "Acknowledgment", "--type", "acknowledgment"
        )
        assert result.exit_code == 0

        result = self.invoke(
            "track", "status", request_id, "denied", "--on", "2026-03-10",
            "--denial-reason", "Exempt deliberative material",
        )
        assert result.exit_code == 0
        assert "denied" in result.output

        show = self.invoke("track", "show", request_id)
        assert show.exit_code == 0
        assert "Submitted:    Mar 2, 2026" in show.output
        assert "Due:          Mar 12, 2026" in show.output
        assert "Status:       denied" in show.output
        assert "Denial:       Exempt deliberative material" in show.output
        assert "(phone) Called the clerk" in show.output
        assert "(acknowledgment) Acknowledgment" in show.output

    def test_status_sets_lifecycle_date(self):
        request_id = self.add_request()
        self.invoke("track", "status", request_id, "fulfilled", "--on", "2026-03-11",
                    "--actual-cost", "12.5")
        show = self.invoke("track", "show", request_id)
        assert "Fulfilled:    Mar 11, 2026" in show.output
        assert "Actual Cost:  $12.50" in show.output

    def test_overdue_listing(self):
        request_id = self.add_request()
        self.invoke("track", "submit", request_id, "--on", "2020-01-06")
        result = self.invoke("track", "list", "--status", "overdue")
        assert request_id in result.output

    def test_missing_request(self):
        result = self.invoke("track", "show", "missing")
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_delete(self):
        request_id = self.add_request()
        result = self.invoke("track", "delete", request_id, "--yes")
        assert result.exit_code == 0
        assert "No tracked requests." in self.invoke("track", "list").output
        again = self.invoke("track", "delete", request_id, "--yes")
        assert again.exit_code == 1

    def test_stats(self):
        first = self.add_request()
        self.add_request()
        self.invoke("track", "status", first, "fulfilled", "--actual-cost", "20")
        result = self.invoke("stats", "--json-output")
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["total"] == 2
        assert data["fulfillment_rate"] == 50
        assert data["avg_cost"] == 20.0
        assert data["by_state"] == {"CA": 2}

    def test_stats_text(self):
        self.add_request()
        result = self.invoke("stats")
        assert "Total requests:     1" in result.output

    # ---- follow-up / appeal ----

    def test_follow_up(self):
        request_id = self.add_request()
        self.invoke("track", "submit", request_id, "--on", "2020-01-06")
        result = self.invoke("follow-up", request_id)
        assert result.exit_code == 0
        assert "FOLLOW-UP" in result.output
        assert "All emails about the 2026 budget" in result.output

    def test_appeal(self):
        request_id = self.add_request()
        self.invoke("track", "status", request_id, "denied", "--denial-reason", "Too broad")
        out = self.tmp_path / "appeal.txt"
        result = self.invoke(
            "appeal", request_id, "--reason", "improper-denial",
            "-l", "Cal. Gov't Code § 7922.000", "--record-appeal", "--output", str(out),
        )
        assert result.exit_code == 0
        text = out.read_text(encoding="utf-8")
        assert 'stating: "Too broad"' in text
        assert "LEGAL BASIS:" in text
        show = self.invoke("track", "show", request_id)
        assert "Status:       appealed" in show.output

    # ---- configuration ----

    def test_missing_config_file(self):
        result = self.invoke("--config", str(self.tmp_path / "nope.json"), "list-states")
        assert result.exit_code != 0
        assert "Could not load config" in result.output
