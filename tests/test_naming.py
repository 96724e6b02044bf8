"""Tests for the naming module."""

import pytest

from generator.naming import build_method_name, path_placeholders


class TestBuildMethodName:
    """Test method name generation from HTTP method + path."""

    def test_get_portfolios(self):
        assert build_method_name("get", "/portfolios") == "get_portfolios"

    def test_post_portfolios(self):
        assert build_method_name("post", "/portfolios") == "post_portfolios"

    def test_put_portfolio(self):
        assert build_method_name("put", "/portfolios/{portfolio_id}") == "put_portfolio"

    def test_delete_portfolio(self):
        assert build_method_name("delete", "/portfolios/{portfolio_id}") == "delete_portfolio"

    def test_get_company(self):
        assert build_method_name("get", "/companies/{scorecard_identifier}") == "get_company"

    def test_nested_placeholder_dropped(self):
        name = build_method_name("get", "/companies/{scorecard_identifier}/issues/malware_detected")
        assert name == "get_companies_issues_malware_detected"

    def test_trailing_placeholder_singularises_last_segment(self):
        name = build_method_name("delete", "/portfolios/{portfolio_id}/companies/{domain}")
        assert name == "delete_portfolios_company"

    def test_post_keeps_plural(self):
        """post never singularises, even when the path ends in a placeholder."""
        name = build_method_name("post", "/companies/{scorecard_identifier}/issues/{issue_type}/feedback")
        assert name == "post_companies_issues_feedback"
        assert build_method_name("post", "/portfolios/{portfolio_id}") == "post_portfolios"

    def test_hyphens_folded(self):
        assert build_method_name("get", "/metadata/issue-types") == "get_metadata_issue_types"
        assert build_method_name("get", "/metadata/issue-types/{type}") == "get_metadata_issue_type"

    def test_camel_case_folded(self):
        assert build_method_name("get", "/reports/recentReports") == "get_reports_recent_reports"

    def test_patch(self):
        name = build_method_name("patch", "/users/by-username/{username}/alerts/grade/{alert_id}")
        assert name == "patch_users_by_username_alerts_grade"

    def test_root(self):
        assert build_method_name("get", "/") == "get_root"

    def test_method_case_insensitive(self):
        assert build_method_name("GET", "/portfolios") == "get_portfolios"

    def test_unsupported_method(self):
        with pytest.raises(ValueError):
            build_method_name("options", "/portfolios")

    def test_verb_prefix(self):
        """The name always starts with the HTTP verb."""
        for method in ("get", "post", "put", "patch", "delete"):
            assert build_method_name(method, "/reports/summary").startswith(f"{method}_")

    def test_valid_python_identifier(self):
        name = build_method_name("get", "/companies/{scorecard_identifier}/history/factors/score")
        assert name.isidentifier()


class TestPathPlaceholders:
    """Test placeholder extraction from templated paths."""

    def test_in_order(self):
        path = "/portfolios/{portfolio_id}/companies/{domain}"
        assert path_placeholders(path) == ["portfolio_id", "domain"]

    def test_none(self):
        assert path_placeholders("/portfolios") == []
