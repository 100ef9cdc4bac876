"""Interactive read-evaluate-print loop around the expression calculator."""
import sys
from typing import Optional, TextIO

from pydantic import BaseModel, ConfigDict, Field, field_validator

from arithmetic_calculator.common.logger import logger
from arithmetic_calculator.common.operations import OperationRequest
from arithmetic_calculator.engine.calculator import ExpressionCalculator
from arithmetic_calculator.engine.runner import run_operation

EXIT_COMMANDS = frozenset({"exit", "quit"})


class CalculatorSession(BaseModel):
    """
    Interactive calculator session.

    Features:
        - Reads one expression per line until EOF or "exit" / "quit".
        - Substitutes the previous-result variable (``ans``) before evaluating.
        - Keeps the last finite result; errors leave it untouched.
    """

    # Validate assignments so last_result always stays a float
    model_config = ConfigDict(validate_assignment=True)

    prompt: str = Field(default="> ", description="Prompt printed before each input line")
    answer_name: str = Field(default="ans", description="Name of the previous-result variable")
    last_result: float = Field(default=0.0, description="Last successfully computed value")
    line_count: int = Field(default=0, ge=0, description="Number of expressions evaluated so far")

    @field_validator("answer_name")
    def answer_name_must_be_identifier(cls, v: str) -> str:
        """Ensure that the previous-result variable is a plain identifier."""
        if not v.isidentifier():
            raise ValueError(f"Invalid variable name: {v!r}")
        return v

    def banner(self) -> str:
        return (
            "Console Calculator\n"
            f"Supports: + - * / ^ ( ) %  | variable {self.answer_name}  | type 'exit' to quit"
        )

    def handle_line(self, line: str) -> Optional[str]:
        """
        Process a single input line.

        :param str line: Raw user input

        :return: Text to display, or None for blank lines
        :rtype: Optional[str]
        """
        text = line.strip()
        if not text:
            return None

        self.line_count += 1
        expression = ExpressionCalculator.substitute(text, self.last_result, self.answer_name)
        outcome = run_operation(OperationRequest(expression=expression, line=self.line_count))

        if not outcome.ok:
            return f"Error: {outcome.error}"

        self.last_result = outcome.result
        return str(outcome.result)

    def run(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
        """
        Run the loop until end of input or an exit command.

        :param Optional[TextIO] stdin: Stream to read expressions from (default: sys.stdin)
        :param Optional[TextIO] stdout: Stream to write prompts and results to (default: sys.stdout)

        :return: None
        """
        stdin = stdin or sys.stdin
        stdout = stdout or sys.stdout
        logger.info("🖥️ Interactive session started")
        print(self.banner(), file=stdout)

        while True:
            stdout.write(self.prompt)
            stdout.flush()

            line = stdin.readline()
            # readline() returns "" only at end of input
            if not line:
                print(file=stdout)
                break

            if line.strip().lower() in EXIT_COMMANDS:
                print("Bye!", file=stdout)
                break

            output = self.handle_line(line)
            if output is not None:
                print(output, file=stdout)

        logger.info(f"🖥️ Interactive session ended after {self.line_count} expressions")
