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

"""Result reporting for the command line checker."""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence


class CheckResult:
    """Container for the outcome of checking a single data file."""

    def __init__(self, file_path: Path):
        """Initialize check result.

        Args:
            file_path: Path to the data file being checked
        """
        self.file_path = file_path
        self.errors: List[Dict[str, Any]] = []

    @property
    def passed(self) -> bool:
        return not self.errors

    def add_error(self, message: str, path: Optional[Sequence[str]] = None):
        """Add an error message.

        Args:
            message: Error message
            path: Property keys leading to the failing field
        """
        error: Dict[str, Any] = {'message': message}
        if path:
            error['path'] = "/" + "/".join(path)
        self.errors.append(error)


def render_results(results: List[CheckResult], output_format: str) -> str:
    """Render results as 'human', 'json' or 'github-actions' text."""
    if output_format == 'json':
        output = {
            'files': len(results),
            'errors': sum(len(r.errors) for r in results),
            'results': [
                {
                    'file': str(r.file_path),
                    'passed': r.passed,
                    'errors': r.errors,
                }
                for r in results
            ],
        }
        return json.dumps(output, indent=2)

    lines: List[str] = []
    if output_format == 'github-actions':
        for result in results:
            for error in result.errors:
                lines.append(f"::error file={result.file_path}::{error['message']}")
        return "\n".join(lines)

    for result in results:
        if result.passed:
            lines.append(f"{result.file_path}: OK")
            continue
        lines.append(f"{result.file_path}:")
        for error in result.errors:
            path_info = f" ({error['path']})" if 'path' in error else ""
            lines.append(f"  ERROR{path_info}: {error['message']}")
    return "\n".join(lines)
