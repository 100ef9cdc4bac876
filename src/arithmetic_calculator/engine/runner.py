"""Evaluate one operation request and report its outcome."""
import math

from arithmetic_calculator.common.errors import CalculatorError
from arithmetic_calculator.common.logger import logger
from arithmetic_calculator.common.operations import OperationRequest, OperationResult
from arithmetic_calculator.engine.calculator import ExpressionCalculator

NAN_MESSAGE = "computation produced NaN"
INFINITY_MESSAGE = "result is infinite (possibly division by a near-zero value)"


def run_operation(request: OperationRequest) -> OperationResult:
    """
    Evaluate the request's expression and wrap the outcome.

    Calculation errors are captured in the result instead of being raised.
    NaN and infinite values count as errors at this level.

    :param OperationRequest request: Expression to evaluate

    :return: Result or error for the request
    :rtype: OperationResult
    """
    logger.info(f"🧮🏁 Evaluating line {request.line}: {request.expression}")

    try:
        value = ExpressionCalculator.evaluate(request.expression)
    except CalculatorError as exc:
        logger.warning(
            f"🧮❌ Failed on line {request.line}: {exc}\n"
            f"Invalid arithmetic expression, could not evaluate: {request.expression!r}"
        )
        return OperationResult(line=request.line, expression=request.expression, error=str(exc))

    if math.isnan(value):
        error = NAN_MESSAGE
    elif math.isinf(value):
        error = INFINITY_MESSAGE
    else:
        logger.info(f"🧮✅ Finished line {request.line}: {value}")
        return OperationResult(line=request.line, expression=request.expression, result=value)

    logger.warning(f"🧮❌ Line {request.line} {error}: {request.expression!r}")
    return OperationResult(line=request.line, expression=request.expression, error=error)
