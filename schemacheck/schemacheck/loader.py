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

"""Schema document loader.

Schema documents are YAML (or JSON) files of the form::

    schemacheck_format: 0.1.0
    name: person
    fields:
      name: {type: string, minLength: 2, pattern: "^[A-Z]"}
      tags: {type: array, typed: string, rules: [not_empty]}
      address:
        type: object
        schema:
          zip: {type: string}

The document shape is checked against the bundled JSON Schema before the
fields are converted. ``pattern`` strings are compiled and ``rules`` names are
resolved through the :class:`RuleRegistry` supplied by the caller.
"""

import json
import logging
import re
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple, Union

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError as JsonSchemaValidationError

from .exceptions import FormatVersionError, SchemaLoadError, SchemaStructureError
from .fields import FieldSpec
from .rules import RuleRegistry
from .structure import normalize_schema

logger = logging.getLogger(__name__)

FORMAT_KEY = "schemacheck_format"
SCHEMA_FORMAT_VERSION = "0.1.0"

_VERSION_RE = re.compile(r"^v?(\d+)\.(\d+)\.(\d+)$")


def get_document_schema_path() -> Path:
    """Get the path to the bundled JSON Schema describing schema documents."""
    return Path(__file__).parent / "schema" / "schema_document.json"


def load_document_schema() -> dict:
    """Load the bundled JSON Schema for schema documents."""
    schema_path = get_document_schema_path()
    with open(schema_path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_file(file_path: Union[str, Path]) -> Any:
    """Read a YAML or JSON file. ``.json`` files are parsed as JSON, anything else as YAML."""
    path = Path(file_path)

    if not path.exists():
        raise SchemaLoadError(f"File not found: {path}")
    if not path.is_file():
        raise SchemaLoadError(f"Path is not a file: {path}")

    logger.debug(f"Loading file: {path}")
    content = path.read_text(encoding="utf-8")
    try:
        if path.suffix == ".json":
            return json.loads(content)
        return yaml.safe_load(content)
    except json.JSONDecodeError as e:
        raise SchemaLoadError(f"Invalid JSON in {path}: {e.msg} (line {e.lineno})") from e
    except yaml.YAMLError as e:
        raise SchemaLoadError(f"Invalid YAML in {path}: {e}") from e


def _major_minor(raw: Any, source: str) -> Tuple[int, int]:
    m = _VERSION_RE.match(raw.strip()) if isinstance(raw, str) else None
    if m is None:
        raise FormatVersionError(f"Invalid '{FORMAT_KEY}' value {raw!r}, expected MAJOR.MINOR.PATCH", source)
    return int(m.group(1)), int(m.group(2))


def check_format_version(raw: Optional[str], source: str = "<document>") -> None:
    """Check a document's ``schemacheck_format`` against :data:`SCHEMA_FORMAT_VERSION`.

    The major version must match. A missing version or a newer minor version
    only logs a warning; patch is ignored.
    """
    if raw is None:
        logger.warning(f"{source}: Missing '{FORMAT_KEY}' field, assuming {SCHEMA_FORMAT_VERSION}")
        return

    major, minor = _major_minor(raw, source)
    supported_major, supported_minor = _major_minor(SCHEMA_FORMAT_VERSION, "schemacheck")
    if major != supported_major:
        raise FormatVersionError(
            f"Incompatible format version {raw}: supported major version is {supported_major}", source
        )
    if minor > supported_minor:
        logger.warning(f"{source}: Format version {raw} is newer than {SCHEMA_FORMAT_VERSION}, some keys may be ignored")


def validate_document(document: Any, source: str = "<document>") -> None:
    """Check a schema document's shape and format version.

    Raises:
        SchemaLoadError: If the document does not match the bundled JSON Schema.
        FormatVersionError: If the declared format version is incompatible.
    """
    if not isinstance(document, dict):
        raise SchemaLoadError("Schema document root must be a mapping", source)

    try:
        jsonschema.validate(instance=document, schema=load_document_schema())
    except JsonSchemaValidationError as e:
        path = "/" + "/".join(str(p) for p in e.absolute_path) if e.absolute_path else "/"
        raise SchemaLoadError(f"{e.message} (yaml_path={path})", source) from e

    check_format_version(document.get(FORMAT_KEY), source)


def _convert_fields(fields: Mapping[str, Any], registry: RuleRegistry, path_label: str) -> Dict[str, Any]:
    converted: Dict[str, Any] = {}
    for key, raw in fields.items():
        spec = dict(raw)
        spec.pop("description", None)

        if "pattern" in spec:
            try:
                spec["pattern"] = re.compile(spec["pattern"])
            except re.error as e:
                raise SchemaLoadError(f"Property '{key}': invalid pattern '{spec['pattern']}': {e}", path_label) from e

        if "rules" in spec:
            try:
                spec["rules"] = tuple(registry.get(name) for name in spec["rules"])
            except SchemaStructureError as e:
                raise SchemaLoadError(f"Property '{key}': {e.detail}", path_label) from e

        if "schema" in spec:
            spec["schema"] = _convert_fields(spec["schema"], registry, f"{path_label}->{key}")

        converted[key] = spec
    return converted


def schema_from_document(
    document: Mapping[str, Any],
    registry: Optional[RuleRegistry] = None,
    source: str = "<document>",
) -> Dict[str, FieldSpec]:
    """Convert a schema document into a normalized schema."""
    validate_document(document, source)
    fields = _convert_fields(document["fields"], registry or RuleRegistry(), source)
    return normalize_schema(fields, source)


def load_schema(file_path: Union[str, Path], registry: Optional[RuleRegistry] = None) -> Dict[str, FieldSpec]:
    """Load a schema document from disk.

    Args:
        file_path: YAML or JSON schema document.
        registry: Rules referenced by name in the document.

    Returns:
        Mapping of property name to field specification, ready for
        :func:`schemacheck.validate`.
    """
    path = Path(file_path)
    document = load_file(path)
    return schema_from_document(document, registry, source=path.name)
