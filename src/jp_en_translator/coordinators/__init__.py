"""Coordinators - Orchestration layer connecting UI with business logic."""

from .translator_coordinator import TranslatorCoordinator

__all__ = ["TranslatorCoordinator"]
