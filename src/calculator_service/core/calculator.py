"""Calculation business logic."""

import logging
import math

from calculator_service.core.arithmetic import ResultOverflowError, add, multiply
from calculator_service.models import CalculationRequest, CalculationResponse

logger = logging.getLogger(__name__)


class Calculator:
    """Business logic for calculation requests.

    Stateless: a single instance is shared by every request. Operands are
    expected to be validated at the HTTP boundary; the arithmetic functions
    still reject missing values on their own.
    """

    def calculate(self, request: CalculationRequest) -> CalculationResponse:
        """Compute the sum and product of the request's operands.

        Args:
            request: Validated calculation request

        Returns:
            Response echoing both operands with their sum and product

        Raises:
            InvalidOperandError: If an operand is missing
            ResultOverflowError: If the sum or product exceeds the double range
        """
        operand1 = request.operand1
        operand2 = request.operand2

        results = {
            "sum": add(operand1, operand2),
            "product": multiply(operand1, operand2),
        }

        overflowed = [name for name, value in results.items() if not math.isfinite(value)]
        if overflowed:
            raise ResultOverflowError(
                f"{' and '.join(overflowed)} of {operand1} and {operand2} "
                "exceeds the range of a double"
            )

        result = CalculationResponse(operand1=operand1, operand2=operand2, **results)

        logger.debug(
            f"Calculated operand1={operand1} operand2={operand2} "
            f"sum={result.sum} product={result.product}"
        )

        return result
