"""Evaluate every expression of a text file or archive, one after another."""
from pathlib import Path
import tarfile
import tempfile
from typing import List
import zipfile

import py7zr
from pydantic import BaseModel, ConfigDict, Field, FilePath

from arithmetic_calculator.common.logger import logger
from arithmetic_calculator.common.operations import OperationRequest, OperationResult
from arithmetic_calculator.engine.runner import run_operation


def build_output_path(input_path: Path) -> Path:
    """
    Construct a safe output file path based on the input file.

    - Preserves the original folder
    - Replaces dots in extensions with underscores
    - Appends '_results.txt' at the end

    Examples
    --------
    input: resources/operations_short.7z
    output: resources/operations_short_7z_results.txt

    :param input_path: Path to the input file
    :return: Path to the output file
    """
    suffix_safe = "".join(input_path.suffixes).replace(".", "_")
    # with_name() keeps only the part before the first suffix
    stem = input_path.name[: len(input_path.name) - len("".join(input_path.suffixes))]
    return input_path.with_name(f"{stem}{suffix_safe}_results.txt")


class BatchRunner(BaseModel):
    """
    Sequential batch evaluator.

    The batch runner:
    - reads arithmetic expressions from a plain text file or an archive
    - evaluates each non-blank line in order, independently of the others
    - writes one result or error line per expression into an output file
    """

    # Make the Pydantic instance immutable (read-only): paths must not change mid-run
    model_config = ConfigDict(frozen=True)

    input_file: FilePath = Field(..., description="Text file or archive containing one expression per line")
    output_file: Path = Field(..., description="Path where results will be written")

    def read_expressions(self) -> List[str]:
        """
        Load the input and return its non-blank, stripped lines.

        :return: Expressions in file order
        :rtype: List[str]
        :raises ValueError: If the archive format is unsupported or contains no .txt file
        """
        if self.input_file.suffix == ".txt":
            content = self.input_file.read_text(encoding="utf-8")
        else:
            content = self._extract_archive(self.input_file)
        return [line.strip() for line in content.splitlines() if line.strip()]

    def run(self) -> List[OperationResult]:
        """
        Evaluate all expressions and write the results file.

        Each line is flushed as soon as it is computed so progress survives an interruption.

        :return: Outcomes in input order
        :rtype: List[OperationResult]
        """
        expressions = self.read_expressions()
        logger.info(f"📄 Evaluating {len(expressions)} expressions from {self.input_file}")

        results: List[OperationResult] = []
        with self.output_file.open("w", encoding="utf-8") as f_out:
            for line_number, expr in enumerate(expressions, start=1):
                outcome = run_operation(OperationRequest(expression=expr, line=line_number))
                results.append(outcome)
                f_out.write(outcome.format_line() + "\n")
                f_out.flush()

        failures = sum(1 for outcome in results if not outcome.ok)
        logger.info(f"📄✅ Results written to {self.output_file} ({failures} errors)")
        return results

    def _extract_archive(self, archive_path: Path) -> str:
        """
        Extract the first .txt file found in a supported archive and return its content as a string.

        Supported formats:
        - .zip
        - .tar.xz
        - .7z

        :param Path archive_path: Path to the archive file

        :return: Content of the extracted .txt file
        :rtype: str
        :raises ValueError: If no .txt file is found or format is unsupported
        """
        # Create a temporary directory for safe extraction
        with tempfile.TemporaryDirectory() as tmpdir:
            tmpdir_path = Path(tmpdir)
            if archive_path.suffix == ".zip":
                with zipfile.ZipFile(archive_path, "r") as zf:
                    txt_files = [f for f in zf.namelist() if f.endswith(".txt")]
                    if not txt_files:
                        raise ValueError("📄❌ No .txt file found in zip archive")
                    zf.extract(txt_files[0], path=tmpdir_path)
                    return (tmpdir_path / txt_files[0]).read_text(encoding="utf-8")

            elif archive_path.suffixes[-2:] == [".tar", ".xz"]:
                with tarfile.open(archive_path, "r:xz") as tf:
                    txt_files = [m for m in tf.getmembers() if m.isfile() and m.name.endswith(".txt")]
                    if not txt_files:
                        raise ValueError("📄❌ No .txt file found in tar.xz archive")
                    tf.extract(txt_files[0], path=tmpdir_path, filter="data")
                    return (tmpdir_path / txt_files[0].name).read_text(encoding="utf-8")

            elif archive_path.suffix == ".7z":
                with py7zr.SevenZipFile(archive_path, mode="r") as archive:
                    txt_files = [f for f in archive.getnames() if f.endswith(".txt")]
                    if not txt_files:
                        raise ValueError("📄❌ No .txt file found in 7z archive")
                    archive.extract(path=tmpdir_path, targets=[txt_files[0]])
                    return (tmpdir_path / txt_files[0]).read_text(encoding="utf-8")

            else:
                raise ValueError(f"📄❌ Unsupported archive format: {archive_path.suffix}")
