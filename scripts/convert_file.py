# WORKFLOW: Command-line conversion of local trade documents.
# Used by: Operators, unattended drop-folder runs, development
# Functions:
# 1. collect_files() - Expand file and directory arguments into input files
# 2. convert_files() - Convert each file in turn with ConversionService
# 3. main() - Parse arguments, run, print a summary
#
# CLI flow: paths -> files -> ConversionService.convert(allow_prefix_fallback=True) -> summary
# Runs unattended, so the file name prefix (FG/RM/BM/PI/PE) is used when
# content detection abstains. One failing file never stops the others.

"""
Convert trade documents from the command line.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from core.exceptions import ConversionError  # noqa: E402
from core.logging import configure_logging  # noqa: E402
from services.converter import ConversionResult, ConversionService, ConversionStatus  # noqa: E402

logger = logging.getLogger(__name__)

INPUT_EXTENSIONS = {".xlsx", ".xlsm", ".xls", ".csv", ".txt"}


def collect_files(paths: List[str]) -> List[Path]:
    """Input files named directly or found (non-recursively) in directories."""
    files = []
    for raw in paths:
        path = Path(raw)
        if path.is_dir():
            files.extend(sorted(p for p in path.iterdir() if p.suffix.lower() in INPUT_EXTENSIONS))
        elif path.is_file():
            files.append(path)
        else:
            logger.warning(f"Skipping {raw}: not found")
    return files


def convert_files(
    files: List[Path],
    service: ConversionService,
    output_format: Optional[str] = None,
    document_type: Optional[str] = None,
) -> List[ConversionResult]:
    """
    Convert files sequentially.

    Structural failures are logged and reported as failed results.
    """
    results = []
    for path in files:
        try:
            result = service.convert(
                path.read_bytes(),
                path.name,
                output_format=output_format,
                document_type=document_type,
                allow_prefix_fallback=True,
            )
        except ConversionError as e:
            logger.error(f"{path.name}: {e.error_type}: {e.message}")
            result = ConversionResult(status=ConversionStatus.FAILED, error_message=e.message)
        results.append(result)
        logger.info(f"{path.name}: {result.status.value} ({result.record_count} records)")
    return results


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Convert trade documents to the standardized txt/csv layouts')
    parser.add_argument('paths', nargs='+', help='Input files or directories')
    parser.add_argument('--format', dest='output_format', help='Output format (txt or csv); type default when omitted')
    parser.add_argument('--type', dest='document_type', help='Document type key or prefix (FG, RM, BM, PI, PE)')
    parser.add_argument('--output-dir', help='Directory for converted files')
    parser.add_argument('--error-report-dir', help='Directory for JSON error reports')
    parser.add_argument('--log-level', default=None, help='Log level (default from settings)')

    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    files = collect_files(args.paths)
    if not files:
        logger.error("No input files found")
        return 1

    service = ConversionService(output_dir=args.output_dir, error_report_dir=args.error_report_dir)
    results = convert_files(files, service, args.output_format, args.document_type)

    for path, result in zip(files, results):
        target = result.output_path or result.error_message or "-"
        print(f"{result.status.value:<22} {path.name} -> {target}")

    failed = sum(1 for result in results if result.status == ConversionStatus.FAILED)
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
