"""Architectural boundary tests using pytest-archon.

These tests verify that the codebase follows clean architecture principles:
- Domain layer has no dependencies on adapters or application
- Application services don't depend on adapters
- Adapters don't depend on application services
"""

from pytest_archon import archrule


def test_domain_models_have_no_dependencies() -> None:
    """Domain models should not import any other project layer."""
    (
        archrule("domain models", comment="Domain models should be independent")
        .match("vc_roster.domain.models*")
        .should_not_import("vc_roster.adapters*")
        .should_not_import("vc_roster.application*")
        .should_not_import("vc_roster.domain.contracts*")
        .should_not_import("vc_roster.domain.ports*")
        .may_import("vc_roster.domain.models*")
        .check("vc_roster")
    )


def test_domain_ports_have_no_dependencies() -> None:
    """Domain ports (interfaces) should not import adapters or application."""
    (
        archrule("domain ports", comment="Domain ports should be independent")
        .match("vc_roster.domain.ports*")
        .should_not_import("vc_roster.adapters*")
        .should_not_import("vc_roster.application*")
        .may_import("vc_roster.domain*")
        .check("vc_roster")
    )


def test_domain_contracts_have_no_dependencies() -> None:
    """Domain contracts (protocols) should not import adapters or application."""
    (
        archrule("domain contracts", comment="Domain contracts should be independent")
        .match("vc_roster.domain.contracts*")
        .should_not_import("vc_roster.adapters*")
        .should_not_import("vc_roster.application*")
        .may_import("vc_roster.domain*")
        .check("vc_roster")
    )


def test_application_services_dont_import_adapters() -> None:
    """Application services should not depend on adapters (infrastructure layer)."""
    (
        archrule(
            "application services", comment="Application services should not depend on adapters"
        )
        .match("vc_roster.application*")
        .should_not_import("vc_roster.adapters*")
        .may_import("vc_roster.domain*")
        .may_import("vc_roster.application*")
        .check("vc_roster")
    )


def test_adapters_dont_import_application() -> None:
    """Adapters should not import application services (wiring happens in main)."""
    (
        archrule(
            "adapters independence", comment="Adapters should not depend on application services"
        )
        .match("vc_roster.adapters*")
        .should_not_import("vc_roster.application*")
        .may_import("vc_roster.domain*")
        .may_import("vc_roster.adapters*")
        .check("vc_roster", only_direct_imports=True)
    )
