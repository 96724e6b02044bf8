"""SecurityScorecard API client, API version 1.0.0.

Generated by ``python -m generator`` from spec/openapi.json. Do not edit.
"""

from __future__ import annotations

from typing import Any

import httpx

from .core import DEFAULT_USER_AGENT, Core, Metadata
from .endpoints import Endpoint
from .responses import Result

API_VERSION = "1.0.0"

API_DEFINITION: dict[str, Any] = {
    "servers": [
        {
            "url": "https://{host}",
            "variables": {
                "host": {
                    "default": "api.securityscorecard.io",
                },
            },
        },
    ],
    "security": [
        {
            "token": [],
        },
    ],
    "components": {
        "securitySchemes": {
            "token": {
                "type": "apiKey",
                "in": "header",
                "name": "Authorization",
                "description": "Pass 'Token <api token>'",
            },
        },
    },
}

_ENDPOINTS = (
    Endpoint(
        "get_company", "GET", "/companies/{scorecard_identifier}",
        accepts_metadata=True, requires_metadata=True, statuses=(200, 404, 429),
    ),
    Endpoint(
        "get_companies_factors", "GET", "/companies/{scorecard_identifier}/factors",
        accepts_metadata=True, requires_metadata=True, statuses=(200, 404),
    ),
    Endpoint(
        "get_companies_history_events", "GET", "/companies/{scorecard_identifier}/history/events",
        accepts_metadata=True, requires_metadata=True, statuses=(200, 404),
    ),
    Endpoint(
        "get_companies_history_factors_score", "GET", "/companies/{scorecard_identifier}/history/factors/score",
        accepts_metadata=True, requires_metadata=True, statuses=(200, 404),
    ),
    Endpoint(
        "get_companies_history_score", "GET", "/companies/{scorecard_identifier}/history/score",
        accepts_metadata=True, requires_metadata=True, statuses=(200, 404),
    ),
    Endpoint(
        "get_companies_issues_csp_no_policy", "GET", "/companies/{scorecard_identifier}/issues/csp_no_policy",
        accepts_metadata=True, requires_metadata=True, statuses=(200, 400, 404),
    ),
    Endpoint(
        "get_companies_issues_malware_detected", "GET", "/companies/{scorecard_identifier}/issues/malware_detected",
        accepts_metadata=True, requires_metadata=True, statuses=(200, 400, 404),
    ),
    Endpoint(
        "get_companies_issues_patching_cadence_high", "GET", "/companies/{scorecard_identifier}/issues/patching_cadence_high",
        accepts_metadata=True, requires_metadata=True, statuses=(200, 400, 404),
    ),
    Endpoint(
        "get_companies_issues_ssh_weak_cipher", "GET", "/companies/{scorecard_identifier}/issues/ssh_weak_cipher",
        accepts_metadata=True, requires_metadata=True, statuses=(200, 400, 404),
    ),
    Endpoint(
        "post_companies_issues_feedback", "POST", "/companies/{scorecard_identifier}/issues/{issue_type}/feedback",
        accepts_body=True, requires_body=True, accepts_metadata=True, requires_metadata=True, statuses=(200, 400, 403),
    ),
    Endpoint(
        "get_companies_services", "GET", "/companies/{scorecard_identifier}/services",
        accepts_metadata=True, requires_metadata=True, statuses=(200, 404),
    ),
    Endpoint(
        "get_metadata_factors", "GET", "/metadata/factors",
        statuses=(200,),
    ),
    Endpoint(
        "get_metadata_issue_types", "GET", "/metadata/issue-types",
        statuses=(200,),
    ),
    Endpoint(
        "get_metadata_issue_type", "GET", "/metadata/issue-types/{type}",
        accepts_metadata=True, requires_metadata=True, statuses=(200, 404),
    ),
    Endpoint(
        "get_portfolios", "GET", "/portfolios",
        statuses=(200, 401, 403),
    ),
    Endpoint(
        "post_portfolios", "POST", "/portfolios",
        accepts_body=True, requires_body=True, statuses=(200, 400, 401),
    ),
    Endpoint(
        "put_portfolio", "PUT", "/portfolios/{portfolio_id}",
        accepts_body=True, requires_body=True, accepts_metadata=True, requires_metadata=True, statuses=(200, 400, 404),
    ),
    Endpoint(
        "delete_portfolio", "DELETE", "/portfolios/{portfolio_id}",
        accepts_metadata=True, requires_metadata=True, statuses=(200, 404),
    ),
    Endpoint(
        "get_portfolios_companies", "GET", "/portfolios/{portfolio_id}/companies",
        accepts_metadata=True, requires_metadata=True, statuses=(200, 404),
    ),
    Endpoint(
        "put_portfolios_company", "PUT", "/portfolios/{portfolio_id}/companies/{domain}",
        accepts_body=True, accepts_metadata=True, requires_metadata=True, statuses=(200, 400, 404),
    ),
    Endpoint(
        "delete_portfolios_company", "DELETE", "/portfolios/{portfolio_id}/companies/{domain}",
        accepts_metadata=True, requires_metadata=True, statuses=(200, 404),
    ),
    Endpoint(
        "post_reports_issues", "POST", "/reports/issues",
        accepts_body=True, requires_body=True, statuses=(200, 400, 429),
    ),
    Endpoint(
        "get_reports_recent", "GET", "/reports/recent",
        statuses=(200, 401),
    ),
    Endpoint(
        "post_reports_summary", "POST", "/reports/summary",
        accepts_body=True, requires_body=True, statuses=(200, 400, 429),
    ),
    Endpoint(
        "get_users_by_username_alerts_grade", "GET", "/users/by-username/{username}/alerts/grade",
        accepts_metadata=True, requires_metadata=True, statuses=(200, 403),
    ),
    Endpoint(
        "post_users_by_username_alerts_grade", "POST", "/users/by-username/{username}/alerts/grade",
        accepts_body=True, requires_body=True, accepts_metadata=True, requires_metadata=True, statuses=(200, 400, 403),
    ),
    Endpoint(
        "delete_users_by_username_alerts_grade", "DELETE", "/users/by-username/{username}/alerts/grade/{alert_id}",
        accepts_metadata=True, requires_metadata=True, statuses=(200, 404),
    ),
    Endpoint(
        "patch_users_by_username_alerts_grade", "PATCH", "/users/by-username/{username}/alerts/grade/{alert_id}",
        accepts_body=True, requires_body=True, accepts_metadata=True, requires_metadata=True, statuses=(200, 400, 404),
    ),
)

ENDPOINTS: dict[str, Endpoint] = {endpoint.id: endpoint for endpoint in _ENDPOINTS}


class ScorecardClient(Core):
    """One coroutine per SecurityScorecard API endpoint.

    Every method forwards to :meth:`Core.call` with its endpoint id.
    """

    endpoints = ENDPOINTS

    def __init__(
        self,
        user_agent: str = DEFAULT_USER_AGENT,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(API_DEFINITION, user_agent, transport=transport)

    # -- companies --

    async def get_company(self, metadata: Metadata) -> Result:
        """Get company information and scorecard summary.

        Metadata:
            scorecard_identifier (str, path, required): Primary domain of the company

        Documented responses: 200, 404, 429.
        """
        return await self.call("get_company", metadata=metadata)

    async def get_companies_factors(self, metadata: Metadata) -> Result:
        """Get company factor scores and issue counts.

        Metadata:
            scorecard_identifier (str, path, required): Primary domain of the company
            severity_in (str, query): Comma separated severities to include

        Returns a list under 'entries'.
        Documented responses: 200, 404.
        """
        return await self.call("get_companies_factors", metadata=metadata)

    async def get_companies_services(self, metadata: Metadata) -> Result:
        """Get services detected for a company.

        Metadata:
            scorecard_identifier (str, path, required): Primary domain of the company

        Returns a list under 'entries'.
        Documented responses: 200, 404.
        """
        return await self.call("get_companies_services", metadata=metadata)

    # -- history --

    async def get_companies_history_events(self, metadata: Metadata) -> Result:
        """Get company score change events.

        Metadata:
            scorecard_identifier (str, path, required): Primary domain of the company
            from (str, query): Start date (YYYY-MM-DD)
            to (str, query): End date (YYYY-MM-DD)

        Returns a list under 'entries'.
        Documented responses: 200, 404.
        """
        return await self.call("get_companies_history_events", metadata=metadata)

    async def get_companies_history_factors_score(self, metadata: Metadata) -> Result:
        """Get company historical factor scores.

        Metadata:
            scorecard_identifier (str, path, required): Primary domain of the company
            from (str, query): Start date (YYYY-MM-DD)
            to (str, query): End date (YYYY-MM-DD)

        Returns a list under 'entries'.
        Documented responses: 200, 404.
        """
        return await self.call("get_companies_history_factors_score", metadata=metadata)

    async def get_companies_history_score(self, metadata: Metadata) -> Result:
        """Get company historical scores.

        Metadata:
            scorecard_identifier (str, path, required): Primary domain of the company
            from (str, query): Start date (YYYY-MM-DD)
            to (str, query): End date (YYYY-MM-DD)
            timing (str, query, default 'daily'): Granularity of the history (values: daily, weekly, monthly)

        Returns a list under 'entries'.
        Documented responses: 200, 404.
        """
        return await self.call("get_companies_history_score", metadata=metadata)

    # -- issues --

    async def get_companies_issues_csp_no_policy(self, metadata: Metadata) -> Result:
        """Get csp_no_policy issues.

        Metadata:
            scorecard_identifier (str, path, required): Primary domain of the company

        Returns a list under 'entries'.
        Documented responses: 200, 400, 404.
        """
        return await self.call("get_companies_issues_csp_no_policy", metadata=metadata)

    async def get_companies_issues_malware_detected(self, metadata: Metadata) -> Result:
        """Get malware_detected issues.

        Metadata:
            scorecard_identifier (str, path, required): Primary domain of the company

        Returns a list under 'entries'.
        Documented responses: 200, 400, 404.
        """
        return await self.call("get_companies_issues_malware_detected", metadata=metadata)

    async def get_companies_issues_patching_cadence_high(self, metadata: Metadata) -> Result:
        """Get patching_cadence_high issues.

        Metadata:
            scorecard_identifier (str, path, required): Primary domain of the company

        Returns a list under 'entries'.
        Documented responses: 200, 400, 404.
        """
        return await self.call("get_companies_issues_patching_cadence_high", metadata=metadata)

    async def get_companies_issues_ssh_weak_cipher(self, metadata: Metadata) -> Result:
        """Get ssh_weak_cipher issues.

        Metadata:
            scorecard_identifier (str, path, required): Primary domain of the company

        Returns a list under 'entries'.
        Documented responses: 200, 400, 404.
        """
        return await self.call("get_companies_issues_ssh_weak_cipher", metadata=metadata)

    async def post_companies_issues_feedback(self, body: Any, metadata: Metadata) -> Result:
        """Submit feedback on issues.

        Dispute or resolve findings of one issue type.

        Body fields:
            feedback_type (str, required): Values: resolved, disputed
            issue_ids (list[str], required)
            comment (str)

        Metadata:
            scorecard_identifier (str, path, required): Primary domain of the company
            issue_type (str, path, required): Issue type key, see get_metadata_issue_types

        Documented responses: 200, 400, 403.
        """
        return await self.call("post_companies_issues_feedback", body, metadata)

    # -- metadata --

    async def get_metadata_factors(self) -> Result:
        """Get all risk factors.

        Returns a list under 'entries'.
        Documented responses: 200.
        """
        return await self.call("get_metadata_factors")

    async def get_metadata_issue_types(self) -> Result:
        """Get all issue types.

        Returns a list under 'entries'.
        Documented responses: 200.
        """
        return await self.call("get_metadata_issue_types")

    async def get_metadata_issue_type(self, metadata: Metadata) -> Result:
        """Get issue type details.

        Metadata:
            type (str, path, required): Issue type key

        Documented responses: 200, 404.
        """
        return await self.call("get_metadata_issue_type", metadata=metadata)

    # -- portfolios --

    async def get_portfolios(self) -> Result:
        """Get portfolios.

        Returns the portfolios the user has access to.

        Returns a list under 'entries'.
        Documented responses: 200, 401, 403.
        """
        return await self.call("get_portfolios")

    async def post_portfolios(self, body: Any) -> Result:
        """Create portfolio.

        Body fields:
            name (str, required)
            description (str)
            privacy (str): Values: private, shared, team

        Documented responses: 200, 400, 401.
        """
        return await self.call("post_portfolios", body)

    async def put_portfolio(self, body: Any, metadata: Metadata) -> Result:
        """Update portfolio.

        Body fields:
            name (str, required)
            description (str)
            privacy (str): Values: private, shared, team

        Metadata:
            portfolio_id (str, path, required): Identifier of the portfolio

        Documented responses: 200, 400, 404.
        """
        return await self.call("put_portfolio", body, metadata)

    async def delete_portfolio(self, metadata: Metadata) -> Result:
        """Delete portfolio.

        Metadata:
            portfolio_id (str, path, required): Identifier of the portfolio

        Documented responses: 200, 404.
        """
        return await self.call("delete_portfolio", metadata=metadata)

    async def get_portfolios_companies(self, metadata: Metadata) -> Result:
        """Get companies in portfolio.

        Lists the companies in a portfolio. Filters are combined with AND.

        Metadata:
            portfolio_id (str, path, required): Identifier of the portfolio
            grade (str, query): Only companies with this letter grade (values: A, B, C, D, F)
            industry (str, query): Only companies in this industry
            issue_type (str, query): Only companies with at least one issue of this type
            had_breach_within_last_days (int, query): Only companies breached within this many days

        Returns a list under 'entries'.
        Documented responses: 200, 404.
        """
        return await self.call("get_portfolios_companies", metadata=metadata)

    async def put_portfolios_company(self, body: Any = None, *, metadata: Metadata) -> Result:
        """Add company to portfolio.

        Body fields:
            tags (list[str])

        Metadata:
            portfolio_id (str, path, required): Identifier of the portfolio
            domain (str, path, required): Domain of the company

        Documented responses: 200, 400, 404.
        """
        return await self.call("put_portfolios_company", body, metadata)

    async def delete_portfolios_company(self, metadata: Metadata) -> Result:
        """Remove company from portfolio.

        Metadata:
            portfolio_id (str, path, required): Identifier of the portfolio
            domain (str, path, required): Domain of the company

        Documented responses: 200, 404.
        """
        return await self.call("delete_portfolios_company", metadata=metadata)

    # -- reports --

    async def post_reports_issues(self, body: Any) -> Result:
        """Generate a detailed issues report.

        Body fields:
            scorecard_identifier (str, required)
            format (str): Values: csv, json, pdf

        Documented responses: 200, 400, 429.
        """
        return await self.call("post_reports_issues", body)

    async def get_reports_recent(self) -> Result:
        """Get recently generated reports.

        Returns a list under 'entries'.
        Documented responses: 200, 401.
        """
        return await self.call("get_reports_recent")

    async def post_reports_summary(self, body: Any) -> Result:
        """Generate a scorecard summary report.

        Body fields:
            scorecard_identifier (str, required)
            branding (str): Values: securityscorecard, company_and_securityscorecard

        Documented responses: 200, 400, 429.
        """
        return await self.call("post_reports_summary", body)

    # -- users --

    async def get_users_by_username_alerts_grade(self, metadata: Metadata) -> Result:
        """Get grade change alert rules.

        Metadata:
            username (str, path, required): Username (email) of the account

        Returns a list under 'entries'.
        Documented responses: 200, 403.
        """
        return await self.call("get_users_by_username_alerts_grade", metadata=metadata)

    async def post_users_by_username_alerts_grade(self, body: Any, metadata: Metadata) -> Result:
        """Create grade change alert rule.

        Body fields:
            change_direction (str): Values: rises, drops
            score_types (list[str])
            target (list[str])

        Metadata:
            username (str, path, required): Username (email) of the account

        Documented responses: 200, 400, 403.
        """
        return await self.call("post_users_by_username_alerts_grade", body, metadata)

    async def delete_users_by_username_alerts_grade(self, metadata: Metadata) -> Result:
        """Delete grade change alert rule.

        Metadata:
            username (str, path, required): Username (email) of the account
            alert_id (str, path, required): Identifier of the alert rule

        Documented responses: 200, 404.
        """
        return await self.call("delete_users_by_username_alerts_grade", metadata=metadata)

    async def patch_users_by_username_alerts_grade(self, body: Any, metadata: Metadata) -> Result:
        """Update grade change alert rule.

        Body fields:
            change_direction (str): Values: rises, drops
            score_types (list[str])
            target (list[str])

        Metadata:
            username (str, path, required): Username (email) of the account
            alert_id (str, path, required): Identifier of the alert rule

        Documented responses: 200, 400, 404.
        """
        return await self.call("patch_users_by_username_alerts_grade", body, metadata)
