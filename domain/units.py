"""Evaluate mass conversion expressions such as ``"2.25 cup * 120 g/cup"``."""

import logging
import math
import re

import pint


logger = logging.getLogger(__name__)


UNITS = pint.UnitRegistry()

TARGET_UNIT = "gram"

# "1 kg to grams", "16 oz to g"
CONVERSION = re.compile(r"^(?P<expression>.+?)\s+to\s+(?P<unit>[^\s].*)$")


class NotAMass(ValueError):
    pass


def _to_grams(expression: str) -> float:
    expression = expression.strip()
    target = TARGET_UNIT
    if match := CONVERSION.match(expression):
        expression, target = match["expression"], match["unit"]

    quantity = UNITS.parse_expression(expression)
    if not isinstance(quantity, UNITS.Quantity):
        raise NotAMass(f"Expected a quantity with units, got {quantity!r}")

    converted = quantity.to(target)
    grams = float(converted.to(TARGET_UNIT).magnitude)
    if not math.isfinite(grams):
        raise NotAMass(f"Mass out of range: {grams}")
    return grams


def evaluate(expression: str) -> float | None:
    """Mass in grams of `expression`, or None when it cannot be evaluated."""
    try:
        return _to_grams(expression)
    except Exception as e:
        logger.warning("Could not evaluate %r to grams: %r", expression, e)
        return None
