"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_catalog,
    make_request_signals,
    make_resolver_config,
    make_responder,
    make_translator,
)

__all__ = [
    "make_catalog",
    "make_request_signals",
    "make_resolver_config",
    "make_responder",
    "make_translator",
]
