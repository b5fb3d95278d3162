"""Unit tests for field specifications and schema structure checks."""

from __future__ import annotations

import re
import unittest

from schemacheck.exceptions import SchemaStructureError
from schemacheck.fields import (
    ArrayField,
    BooleanField,
    FieldType,
    IntegerField,
    NumberField,
    ObjectField,
    StringField,
    field_from_mapping,
)
from schemacheck.rules import Rule
from schemacheck.structure import check_schema, normalize_schema


class FieldSpecTests(unittest.TestCase):
    def test_type_tags(self) -> None:
        self.assertEqual(
            FieldType.get_all_types(),
            ("string", "integer", "number", "boolean", "array", "object"),
        )
        self.assertEqual(StringField().type, "string")
        self.assertEqual(ObjectField(schema={}).type, "object")

    def test_from_mapping_maps_constraint_keys(self) -> None:
        pattern = re.compile("^a")
        spec = field_from_mapping({"type": "string", "minLength": 1, "maxLength": 3, "pattern": pattern})
        self.assertEqual(spec, StringField(min_length=1, max_length=3, pattern=pattern))

        spec = field_from_mapping({"type": "integer", "minValue": 0, "maxValue": 0})
        self.assertEqual(spec, IntegerField(min_value=0, max_value=0))

        spec = field_from_mapping({"type": "array", "typed": "number", "minLength": 2})
        self.assertEqual(spec, ArrayField(min_length=2, typed="number"))

    def test_from_mapping_ignores_foreign_constraints(self) -> None:
        self.assertEqual(field_from_mapping({"type": "boolean", "minLength": "x"}), BooleanField())
        self.assertEqual(field_from_mapping({"type": "number", "pattern": "x"}), NumberField())

    def test_rules_list_is_stored_as_tuple(self) -> None:
        check = Rule("check", bool)
        spec = field_from_mapping({"type": "number", "rules": [check]})
        self.assertEqual(spec.rules, (check,))

    def test_missing_type(self) -> None:
        with self.assertRaisesRegex(SchemaStructureError, "no type defined"):
            field_from_mapping({"minLength": 1})

    def test_object_requires_schema(self) -> None:
        with self.assertRaisesRegex(SchemaStructureError, "no schema defined"):
            field_from_mapping({"type": "object"})
        with self.assertRaisesRegex(SchemaStructureError, "must be a mapping"):
            ObjectField(schema=["zip"])

    def test_constraint_shapes(self) -> None:
        with self.assertRaisesRegex(SchemaStructureError, "'minLength' must be a number"):
            StringField(min_length="2")
        with self.assertRaisesRegex(SchemaStructureError, "'maxValue' must be a number"):
            IntegerField(max_value=True)
        with self.assertRaisesRegex(SchemaStructureError, "compiled regular expression"):
            StringField(pattern="^a")
        with self.assertRaisesRegex(SchemaStructureError, "compiled str regular expression"):
            StringField(pattern=re.compile(b"^a"))
        with self.assertRaisesRegex(SchemaStructureError, "'rules' must be a sequence"):
            NumberField(rules=Rule("r", bool))
        with self.assertRaisesRegex(SchemaStructureError, "must be Rule instances"):
            ArrayField(rules=[len])
        with self.assertRaisesRegex(SchemaStructureError, "Element type 'date' is not valid"):
            ArrayField(typed="date")


class CheckSchemaTests(unittest.TestCase):
    def test_accepts_well_formed_schema(self) -> None:
        schema = {
            "name": {"type": "string", "minLength": 1, "pattern": re.compile(r"\w")},
            "age": {"type": "integer", "minValue": 0},
            "score": NumberField(max_value=1.0),
            "tags": {"type": "array", "typed": "string"},
            "active": {"type": "boolean"},
            "address": {"type": "object", "schema": {"zip": {"type": "string"}}},
        }
        self.assertIsNone(check_schema(schema))

    def test_rejects_non_mapping_schema(self) -> None:
        with self.assertRaisesRegex(SchemaStructureError, "Schema must be a mapping"):
            check_schema(["name"])

    def test_rejects_non_string_path_label(self) -> None:
        with self.assertRaisesRegex(SchemaStructureError, "Path label must be a string"):
            check_schema({}, 5)

    def test_rejects_bad_property_names(self) -> None:
        with self.assertRaisesRegex(SchemaStructureError, "non-empty strings"):
            check_schema({"": {"type": "string"}})
        with self.assertRaisesRegex(SchemaStructureError, "non-empty strings"):
            check_schema({1: {"type": "string"}})

    def test_rejects_non_mapping_field(self) -> None:
        with self.assertRaisesRegex(SchemaStructureError, "Property 'name' must be a field specification"):
            check_schema({"name": "string"})

    def test_error_names_property_and_path(self) -> None:
        with self.assertRaises(SchemaStructureError) as ctx:
            check_schema({"name": {"type": "string", "maxLength": "10"}}, "person")
        self.assertEqual(ctx.exception.path_label, "person")
        self.assertEqual(str(ctx.exception), "person: Property 'name': 'maxLength' must be a number, got str")

    def test_nested_path_label_is_extended(self) -> None:
        schema = {
            "a": {"type": "object", "schema": {"b": {"type": "object", "schema": {"c": {}}}}},
        }
        with self.assertRaises(SchemaStructureError) as ctx:
            check_schema(schema)
        self.assertEqual(ctx.exception.path_label, "root->a->b")
        self.assertIn("Property 'c'", str(ctx.exception))

    def test_bytes_pattern_rejected_before_validation(self) -> None:
        schema = {"name": {"type": "string", "pattern": re.compile(b"^a")}}
        with self.assertRaisesRegex(SchemaStructureError, r"^root: Property 'name': 'pattern' must be a compiled str"):
            check_schema(schema)

    def test_nested_schema_must_be_mapping(self) -> None:
        with self.assertRaisesRegex(SchemaStructureError, "Nested 'schema' must be a mapping"):
            check_schema({"addr": {"type": "object", "schema": "zip"}})

    def test_normalize_converts_nested_fields(self) -> None:
        normalized = normalize_schema(
            {"addr": ObjectField(schema={"zip": {"type": "string", "maxLength": 5}})}
        )
        self.assertEqual(normalized["addr"], ObjectField(schema={"zip": StringField(max_length=5)}))

    def test_unnamed_rule_not_detected_at_check_time(self) -> None:
        self.assertIsNone(check_schema({"n": {"type": "integer", "rules": [Rule(None, bool)]}}))


if __name__ == "__main__":
    unittest.main()
