"""Tests for group assignment."""

from generator.context_builder import path_to_group


class TestGroupAssignment:
    """Test that API paths map to the correct groups."""

    def test_companies(self):
        assert path_to_group("/companies/{scorecard_identifier}") == "companies"
        assert path_to_group("/companies/{scorecard_identifier}/factors") == "companies"
        assert path_to_group("/companies/{scorecard_identifier}/services") == "companies"

    def test_history_beats_companies(self):
        """The longer /companies/.../history prefix wins."""
        assert path_to_group("/companies/{scorecard_identifier}/history/score") == "history"
        assert path_to_group("/companies/{scorecard_identifier}/history/events") == "history"

    def test_issues(self):
        assert path_to_group("/companies/{scorecard_identifier}/issues/malware_detected") == "issues"
        assert path_to_group("/companies/{scorecard_identifier}/issues/{issue_type}/feedback") == "issues"

    def test_portfolios(self):
        assert path_to_group("/portfolios") == "portfolios"
        assert path_to_group("/portfolios/{portfolio_id}/companies/{domain}") == "portfolios"

    def test_metadata(self):
        assert path_to_group("/metadata/issue-types") == "metadata"

    def test_reports(self):
        assert path_to_group("/reports/summary") == "reports"

    def test_users(self):
        assert path_to_group("/users/by-username/{username}/alerts/grade") == "users"

    def test_default_group(self):
        """Unknown paths should fall back to 'misc'."""
        assert path_to_group("/unknown") == "misc"
