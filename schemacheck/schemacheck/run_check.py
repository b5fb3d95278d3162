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

"""CLI entry point for checking data files against a schema document."""

import argparse
import importlib
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .exceptions import SchemaStructureError, ValidationError
from .loader import load_file, load_schema
from .report import CheckResult, render_results
from .rules import RuleRegistry
from .utils.logging_utils import LOG_LEVELS, configure_cli_logging
from .validator import validate

logger = logging.getLogger(__name__)


def load_registry(module_name: Optional[str]) -> RuleRegistry:
    """Import ``module_name`` and return its ``RULES`` registry."""
    if not module_name:
        return RuleRegistry()
    module = importlib.import_module(module_name)
    registry = getattr(module, "RULES", None)
    if not isinstance(registry, RuleRegistry):
        raise SchemaStructureError(f"Module '{module_name}' does not define a RuleRegistry named 'RULES'")
    logger.debug(f"Loaded {len(registry)} rules from {module_name}")
    return registry


def check_files(schema, data_paths: List[Path]) -> List[CheckResult]:
    """Validate each data file in throwing mode, recording the first error per file."""
    results = []
    for data_path in data_paths:
        result = CheckResult(data_path)
        try:
            data = load_file(data_path)
            validate(schema, data, throw_mode=True)
        except SchemaStructureError as e:
            # Unnamed rules surface here, or the file could not be read.
            result.add_error(str(e))
        except ValidationError as e:
            result.add_error(e.message, path=e.path)
        results.append(result)
    return results


def main(argv: List[str] | None = None) -> None:
    """Main entry point for the checker CLI."""
    parser = argparse.ArgumentParser(
        prog='schemacheck',
        description='Validate YAML/JSON data files against a schemacheck schema document',
    )
    parser.add_argument('schema', help='Schema document (YAML or JSON)')
    parser.add_argument('data', nargs='+', help='Data files to validate (YAML or JSON)')
    parser.add_argument(
        '--format',
        choices=['human', 'json', 'github-actions'],
        default='human',
        help='Output format (default: human)',
    )
    parser.add_argument(
        '--rules',
        metavar='MODULE',
        default=None,
        help="Importable module exposing a RuleRegistry named 'RULES'",
    )
    parser.add_argument(
        '--log-level',
        choices=LOG_LEVELS,
        default='WARNING',
        help='Logging level (default: WARNING)',
    )

    args = parser.parse_args(argv)
    configure_cli_logging(args.log_level)

    try:
        registry = load_registry(args.rules)
        schema = load_schema(args.schema, registry)
    except (ImportError, SchemaStructureError) as e:
        print(f"Failed to load schema: {e}", file=sys.stderr)
        sys.exit(1)

    results = check_files(schema, [Path(p) for p in args.data])
    output = render_results(results, args.format)
    if output:
        print(output)

    if any(not r.passed for r in results):
        sys.exit(1)
    sys.exit(0)


if __name__ == '__main__':
    main()
