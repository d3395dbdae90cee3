"""Process-wide "current" payroll calculator.

Call sites that do not pass a calculator explicitly use the one bound here.
Binding replaces the calculator wholesale, so a calculation in flight keeps
the configuration it started with.
"""

from __future__ import annotations

import logging
import threading

from workforce_payroll.companies.configuration import CompanyConfiguration
from workforce_payroll.companies.defaults import get_fallback_document

from .calculator import PayrollCalculator

logger = logging.getLogger(__name__)


class PayrollCalculatorRegistry:
    def __init__(self):
        self._lock = threading.Lock()
        self._calculator: PayrollCalculator | None = None
        self._fallback: PayrollCalculator | None = None

    def initialize(self, config: CompanyConfiguration) -> PayrollCalculator:
        calculator = PayrollCalculator(config)
        with self._lock:
            self._calculator = calculator
        logger.info("Payroll calculator bound to %r", config.company_name)
        return calculator

    def current(self) -> PayrollCalculator:
        calculator = self._calculator
        if calculator is not None:
            return calculator
        with self._lock:
            if self._fallback is None:
                logger.warning(
                    "Payroll calculator not initialized, using fallback configuration"
                )
                fallback = CompanyConfiguration.from_document(get_fallback_document())
                self._fallback = PayrollCalculator(fallback)
            return self._fallback

    @property
    def is_initialized(self) -> bool:
        return self._calculator is not None

    def reset(self) -> None:
        with self._lock:
            self._calculator = None
            self._fallback = None


_registry = PayrollCalculatorRegistry()


def initialize_payroll_calculator(config: CompanyConfiguration) -> PayrollCalculator:
    return _registry.initialize(config)


def get_payroll_calculator() -> PayrollCalculator:
    return _registry.current()


def reset_payroll_calculator() -> None:
    """Forget the bound calculator (used by tests)."""

    _registry.reset()


def payroll_calculator_registry() -> PayrollCalculatorRegistry:
    return _registry
