"""
OAuth scopes of the CRM platform.

`AVAILABLE_SCOPES` is the set the integration requests and reports;
`CRM_SCOPES` is the full annotated catalog shown when choosing scopes.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional


@dataclass(frozen=True)
class ScopeDefinition:
    """A single OAuth scope with its display metadata."""

    value: str
    label: str
    description: str
    category: str
    # Scopes needing special approval from the platform (SaaS mode, etc.)
    requires_approval: bool = False
    approval_type: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "value": self.value,
            "label": self.label,
            "description": self.description,
            "category": self.category,
            "requiresApproval": self.requires_approval,
            "approvalType": self.approval_type,
        }


# Scopes supported by the integration, with a short description each
AVAILABLE_SCOPES: Dict[str, str] = {
    "conversations.readonly": "Read conversations",
    "conversations.write": "Write conversations",
    "conversations/message.readonly": "Read messages",
    "conversations/message.write": "Send messages",
    "contacts.readonly": "Read contacts",
    "contacts.write": "Create/update contacts",
    "opportunities.readonly": "Read opportunities",
    "opportunities.write": "Create/update opportunities",
    "calendars.readonly": "Read calendars",
    "calendars.write": "Book appointments",
    "locations.readonly": "Read location info",
    "locations.write": "Update location settings",
    "workflows.readonly": "Read workflows",
    "campaigns.readonly": "Read campaigns",
    "customFields.readonly": "Read custom fields",
    "customFields.write": "Update custom fields",
    "users.readonly": "Read users",
    "users.write": "Manage users",
}

# Basic messaging functionality; order is part of the API response
DEFAULT_SCOPES: List[str] = [
    "conversations.readonly",
    "conversations.write",
    "conversations/message.readonly",
    "conversations/message.write",
    "contacts.readonly",
    "contacts.write",
    "locations.readonly",
]

_ADVANCED = "Advanced Features"
_SAAS = "SaaS Mode"
_PAYMENTS = "Payment Processing"

CRM_SCOPES: List[ScopeDefinition] = [
    # Contacts
    ScopeDefinition("contacts.readonly", "Contacts (Read)",
                    "Read contact information, tags, and custom fields", "Contacts"),
    ScopeDefinition("contacts.write", "Contacts (Write)",
                    "Create, update, and delete contacts", "Contacts"),
    ScopeDefinition("contacts/bulkActions.write", "Contact Bulk Actions (Write)",
                    "Perform bulk operations on contacts", "Contacts", True, _ADVANCED),

    # Conversations
    ScopeDefinition("conversations.readonly", "Conversations (Read)",
                    "Read conversations and messages", "Conversations"),
    ScopeDefinition("conversations.write", "Conversations (Write)",
                    "Create and update conversations and messages", "Conversations"),
    ScopeDefinition("conversations/message.readonly", "Messages (Read)",
                    "Read individual messages within conversations", "Conversations"),
    ScopeDefinition("conversations/message.write", "Messages (Write)",
                    "Send and update messages", "Conversations"),
    ScopeDefinition("conversations/reports.readonly", "Conversation Reports (Read)",
                    "Access conversation analytics and reports", "Conversations"),

    # Opportunities
    ScopeDefinition("opportunities.readonly", "Opportunities (Read)",
                    "Read opportunities and pipeline data", "Opportunities"),
    ScopeDefinition("opportunities.write", "Opportunities (Write)",
                    "Create, update, and move opportunities", "Opportunities"),

    # Calendars
    ScopeDefinition("calendars.readonly", "Calendars (Read)",
                    "Read calendar configurations", "Calendars"),
    ScopeDefinition("calendars.write", "Calendars (Write)",
                    "Create and update calendars", "Calendars"),
    ScopeDefinition("calendars/events.readonly", "Calendar Events (Read)",
                    "Read calendar appointments and events", "Calendars"),
    ScopeDefinition("calendars/events.write", "Calendar Events (Write)",
                    "Create, update, and delete appointments", "Calendars"),

    # Campaigns
    ScopeDefinition("campaigns.readonly", "Campaigns (Read)",
                    "Read campaigns and automation workflows", "Campaigns"),

    # Forms
    ScopeDefinition("forms.readonly", "Forms (Read)", "Read form configurations", "Forms"),
    ScopeDefinition("forms.write", "Forms (Write)", "Create and update forms", "Forms"),
    ScopeDefinition("forms/submissions.readonly", "Form Submissions (Read)",
                    "Read form submission data", "Forms", True, _ADVANCED),
    ScopeDefinition("forms/submissions.write", "Form Submissions (Write)",
                    "Create form submissions", "Forms", True, _ADVANCED),

    # Surveys
    ScopeDefinition("surveys.readonly", "Surveys (Read)", "Read survey configurations", "Surveys"),
    ScopeDefinition("surveys/submissions.readonly", "Survey Submissions (Read)",
                    "Read survey submission data", "Surveys", True, _ADVANCED),

    # Links
    ScopeDefinition("links.readonly", "Links (Read)", "Read link tracking data", "Links"),
    ScopeDefinition("links.write", "Links (Write)", "Create and update tracked links", "Links"),

    # Locations (sub-accounts)
    ScopeDefinition("locations.readonly", "Locations (Read)",
                    "Read location/sub-account information", "Locations"),
    ScopeDefinition("locations.write", "Locations (Write)",
                    "Create and update locations/sub-accounts", "Locations", True, _SAAS),
    ScopeDefinition("locations/customValues.readonly", "Location Custom Values (Read)",
                    "Read location custom field values", "Locations"),
    ScopeDefinition("locations/customValues.write", "Location Custom Values (Write)",
                    "Update location custom field values", "Locations"),
    ScopeDefinition("locations/customFields.readonly", "Location Custom Fields (Read)",
                    "Read location custom field definitions", "Locations"),
    ScopeDefinition("locations/customFields.write", "Location Custom Fields (Write)",
                    "Create and update location custom fields", "Locations"),
    ScopeDefinition("locations/tags.readonly", "Location Tags (Read)",
                    "Read location tags", "Locations"),
    ScopeDefinition("locations/tags.write", "Location Tags (Write)",
                    "Create and update location tags", "Locations"),
    ScopeDefinition("locations/tasks.readonly", "Location Tasks (Read)",
                    "Read location tasks", "Locations"),
    ScopeDefinition("locations/tasks.write", "Location Tasks (Write)",
                    "Create and update location tasks", "Locations"),

    # Users
    ScopeDefinition("users.readonly", "Users (Read)",
                    "Read user information and permissions", "Users"),
    ScopeDefinition("users.write", "Users (Write)", "Create and update users", "Users"),

    # Businesses
    ScopeDefinition("businesses.readonly", "Businesses (Read)",
                    "Read business information", "Businesses"),
    ScopeDefinition("businesses.write", "Businesses (Write)",
                    "Create and update business data", "Businesses"),

    # OAuth
    ScopeDefinition("oauth.readonly", "OAuth (Read)",
                    "Read OAuth connection information", "OAuth"),
    ScopeDefinition("oauth.write", "OAuth (Write)", "Manage OAuth connections", "OAuth"),

    # Snapshots
    ScopeDefinition("snapshots.readonly", "Snapshots (Read)",
                    "Read snapshot/funnel information", "Snapshots", True, _SAAS),

    # Social media posting
    ScopeDefinition("social.readonly", "Social Media (Read)",
                    "Read social media post data", "Social Media", True, _ADVANCED),
    ScopeDefinition("social.write", "Social Media (Write)",
                    "Create and schedule social media posts", "Social Media", True, _ADVANCED),

    # Payments
    ScopeDefinition("payments.readonly", "Payments (Read)",
                    "Read payment transactions", "Payments", True, _PAYMENTS),
    ScopeDefinition("payments.write", "Payments (Write)",
                    "Process payments and refunds", "Payments", True, _PAYMENTS),

    # Products
    ScopeDefinition("products.readonly", "Products (Read)", "Read product catalog", "Products"),
    ScopeDefinition("products.write", "Products (Write)",
                    "Create and update products", "Products"),

    # Workflows
    ScopeDefinition("workflows.readonly", "Workflows (Read)",
                    "Read workflow configurations", "Workflows"),

    # Invoices
    ScopeDefinition("invoices.readonly", "Invoices (Read)", "Read invoice data", "Invoices"),
    ScopeDefinition("invoices.write", "Invoices (Write)",
                    "Create and update invoices", "Invoices"),

    # SaaS
    ScopeDefinition("saas/company.readonly", "SaaS Company (Read)",
                    "Read SaaS company information", "SaaS", True, _SAAS),
    ScopeDefinition("saas/company.write", "SaaS Company (Write)",
                    "Update SaaS company settings - Required for creating companies",
                    "SaaS", True, _SAAS),
    ScopeDefinition("saas/location.readonly", "SaaS Location (Read)",
                    "Read SaaS location data", "SaaS", True, _SAAS),
    ScopeDefinition("saas/location.write", "SaaS Location (Write)",
                    "Update SaaS location settings", "SaaS", True, _SAAS),
]


def get_standard_scopes() -> List[ScopeDefinition]:
    """Get only scopes that don't require approval."""
    return [scope for scope in CRM_SCOPES if not scope.requires_approval]


def get_all_scopes_string(include_restricted: bool = True) -> str:
    """
    Get all catalog scope values as a space-separated string.

    Args:
        include_restricted: Include scopes requiring approval

    Returns:
        Space-separated scope values, in catalog order
    """
    scopes = CRM_SCOPES if include_restricted else get_standard_scopes()
    return " ".join(scope.value for scope in scopes)


def get_scopes_by_category() -> Dict[str, List[ScopeDefinition]]:
    """Get catalog scopes grouped by category, preserving catalog order."""
    grouped: Dict[str, List[ScopeDefinition]] = {}
    for scope in CRM_SCOPES:
        grouped.setdefault(scope.category, []).append(scope)
    return grouped


COMMON_SCOPE_SETS: Dict[str, Dict[str, str]] = {
    "basic": {
        "name": "Basic (Read Only)",
        "scopes": "contacts.readonly locations.readonly users.readonly",
    },
    "standard": {
        "name": "Standard (Read/Write Contacts)",
        "scopes": (
            "contacts.readonly contacts.write locations.readonly opportunities.readonly "
            "users.readonly calendars.readonly calendars/events.readonly"
        ),
    },
    "advanced": {
        "name": "Advanced (Full CRM Access)",
        "scopes": (
            "contacts.readonly contacts.write opportunities.readonly opportunities.write "
            "locations.readonly calendars.readonly calendars/events.readonly "
            "calendars/events.write users.readonly conversations.readonly conversations.write "
            "conversations/message.readonly conversations/message.write campaigns.readonly"
        ),
    },
    "agency": {
        "name": "Agency (Exchange Agencies)",
        "scopes": (
            "contacts.readonly contacts.write conversations.readonly conversations.write "
            "conversations/message.readonly conversations/message.write "
            "opportunities.readonly opportunities.write locations.readonly users.readonly"
        ),
    },
    "full": {
        "name": "Full Access (All Scopes)",
        "scopes": get_all_scopes_string(),
    },
}
