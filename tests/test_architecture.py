"""Architectural boundary tests using pytest-archon.

These tests verify the ports-and-adapters layering:
- Domain layer has no dependencies on adapters or application
- Application services don't depend on adapters
- Adapters depend on the domain only
"""

from pytest_archon import archrule


def test_domain_models_have_no_dependencies() -> None:
    """Domain models should only import the standard library, pydantic and domain errors."""
    (
        archrule("domain models", comment="Domain models should be independent")
        .match("travel_checkin.domain.models*")
        .should_not_import("travel_checkin.adapters*")
        .should_not_import("travel_checkin.application*")
        .should_not_import("travel_checkin.domain.contracts*")
        .should_not_import("travel_checkin.domain.ports*")
        .may_import("travel_checkin.domain.models*")
        .may_import("travel_checkin.domain.errors")
        .check("travel_checkin")
    )


def test_domain_contracts_have_no_dependencies() -> None:
    """Domain contracts (protocols) should not import adapters or application."""
    (
        archrule("domain contracts", comment="Domain contracts should be independent")
        .match("travel_checkin.domain.contracts*")
        .should_not_import("travel_checkin.adapters*")
        .should_not_import("travel_checkin.application*")
        .may_import("travel_checkin.domain*")
        .check("travel_checkin")
    )


def test_domain_ports_have_no_dependencies() -> None:
    """Domain ports (interfaces) should not import adapters or application."""
    (
        archrule("domain ports", comment="Domain ports should be independent")
        .match("travel_checkin.domain.ports*")
        .should_not_import("travel_checkin.adapters*")
        .should_not_import("travel_checkin.application*")
        .may_import("travel_checkin.domain*")
        .check("travel_checkin")
    )


def test_application_services_dont_import_adapters() -> None:
    """Application services should not depend on adapters (infrastructure layer)."""
    (
        archrule(
            "application services", comment="Application services should not depend on adapters"
        )
        .match("travel_checkin.application*")
        .should_not_import("travel_checkin.adapters*")
        .should_not_import("travel_checkin.cli")
        .may_import("travel_checkin.domain*")
        .may_import("travel_checkin.application*")
        .check("travel_checkin")
    )


def test_adapters_dont_import_application() -> None:
    """Adapters should not import application services (to avoid cycles)."""
    (
        archrule(
            "adapters independence", comment="Adapters should not depend on application services"
        )
        .match("travel_checkin.adapters*")
        .should_not_import("travel_checkin.application*")
        .should_not_import("travel_checkin.cli")
        .may_import("travel_checkin.domain*")
        .may_import("travel_checkin.adapters*")
        .check("travel_checkin", only_direct_imports=True)
    )


def test_no_outward_dependencies_in_domain() -> None:
    """Domain layer should not reach into outer layers, directly or transitively."""
    (
        archrule("domain inward only", comment="Domain must not depend on outer layers")
        .match("travel_checkin.domain*")
        .should_not_import("travel_checkin.adapters*")
        .should_not_import("travel_checkin.application*")
        .should_not_import("travel_checkin.cli")
        .may_import("travel_checkin.domain*")
        .check("travel_checkin", only_direct_imports=True)
    )
