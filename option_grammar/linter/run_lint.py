#!/usr/bin/env python3
# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""CLI entry point for linting option catalog files."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from ..config import grammar_config
from . import lint_files
from .file_linter import CATALOG_EXTENSION

logger = logging.getLogger(__name__)


def find_catalog_files(paths: List[str]) -> List[Path]:
    """Find all catalog files in the given paths."""
    catalog_files = []

    for path_str in paths:
        path = Path(path_str)

        if not path.exists():
            logger.warning(f"Path does not exist: {path}")
            continue

        if path.is_file():
            if path.name.endswith(CATALOG_EXTENSION):
                catalog_files.append(path)
            else:
                logger.warning(f"File does not match catalog file pattern: {path}")
        elif path.is_dir():
            catalog_files.extend(path.rglob(f'*{CATALOG_EXTENSION}'))
        else:
            logger.warning(f"Path is neither file nor directory: {path}")

    return sorted(set(catalog_files))


def _print_human(results) -> None:
    for result in results:
        if result.errors or result.warnings:
            print(f"\n{result.file_path}:")
            for error in result.errors:
                line_info = f":{error['line']}" if 'line' in error else ""
                print(f"  ERROR{line_info}: {error['message']}")
            for warning in result.warnings:
                line_info = f":{warning['line']}" if 'line' in warning else ""
                print(f"  WARNING{line_info}: {warning['message']}")


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the linter CLI."""
    parser = argparse.ArgumentParser(
        description='Lint option catalog YAML files',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        'paths',
        nargs='*',
        default=None,
        help='File paths or directories to lint (default: current directory)',
    )
    parser.add_argument(
        '--format',
        choices=['human', 'json', 'github-actions'],
        default='human',
        help='Output format (default: human)',
    )

    args = parser.parse_args(argv)
    grammar_config.set_logging()

    if not args.paths:
        args.paths = ['.']

    catalog_files = find_catalog_files(args.paths)

    if not catalog_files:
        logger.error("No option catalog files found.")
        sys.exit(1)

    results = lint_files(catalog_files)

    if args.format == 'json':
        output = {
            'files': len(results),
            'errors': sum(len(r.errors) for r in results),
            'warnings': sum(len(r.warnings) for r in results),
            'results': [r.to_dict() for r in results],
        }
        print(json.dumps(output, indent=2))
    elif args.format == 'github-actions':
        for result in results:
            for error in result.errors:
                print(f"::error file={result.file_path},line={error.get('line', 1)}::{error['message']}")
            for warning in result.warnings:
                print(f"::warning file={result.file_path},line={warning.get('line', 1)}::{warning['message']}")
    else:
        _print_human(results)

    if any(r.has_errors for r in results):
        sys.exit(1)
    if args.format == 'human':
        print("Lint succeeded with no errors.")
    sys.exit(0)


if __name__ == '__main__':
    main()
