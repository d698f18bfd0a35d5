import pytest

from postman2openapi.parser.base import Variable
from postman2openapi.transpiler.variables import (
    VAR_REPLACE_CREDITS,
    VariableResolver,
    build_variable_table,
    to_path_template,
)


def _resolver(**variables) -> VariableResolver:
    return VariableResolver(variables)


class TestBuildVariableTable:
    def test_drops_empty_strings_and_missing_parts(self):
        table = build_variable_table([
            Variable(key="host", value="api.example.com"),
            Variable(key="token", value=""),
            Variable(key="unset"),
            Variable(value="orphan"),
            Variable(key="retries", value=3),
        ])
        assert dict(table) == {"host": "api.example.com", "retries": 3}

    def test_none_gives_empty_table(self):
        assert dict(build_variable_table(None)) == {}

    def test_table_is_read_only(self):
        table = build_variable_table([Variable(key="a", value="1")])
        with pytest.raises(TypeError):
            table["b"] = "2"


class TestResolve:
    def test_substitutes_known_variables(self):
        r = _resolver(host="api.example.com", version="v2")
        assert r.resolve("https://{{host}}/{{version}}/users") == "https://api.example.com/v2/users"

    def test_replaces_every_occurrence_of_a_placeholder(self):
        r = _resolver(id="42")
        assert r.resolve("{{id}}-{{id}}") == "42-42"

    def test_nested_variables(self):
        r = _resolver(url="https://{{host}}", host="api.example.com")
        assert r.resolve("{{url}}/ping") == "https://api.example.com/ping"

    def test_all_known_placeholders_leave_no_braces(self):
        r = _resolver(a="x{{b}}", b="y{{c}}", c="z", d="w")
        result = r.resolve("{{a}}/{{d}}/{{c}}")
        assert "{{" not in result
        assert result == "xyz/w/z"

    def test_unknown_variable_is_left_literal(self):
        r = _resolver(host="api.example.com")
        assert r.resolve("{{scheme}}://api") == "{{scheme}}://api"

    def test_unknown_first_placeholder_stops_resolution(self):
        r = _resolver(host="api.example.com")
        assert r.resolve("{{scheme}}://{{host}}") == "{{scheme}}://{{host}}"

    def test_non_string_value_is_left_literal(self):
        r = _resolver(port=8080)
        assert r.resolve("localhost:{{port}}") == "localhost:{{port}}"

    def test_no_placeholders(self):
        assert _resolver().resolve("plain text") == "plain text"

    def test_value_with_regex_characters(self):
        r = _resolver(price="$1.00 \\1")
        assert r.resolve("cost {{price}}") == "cost $1.00 \\1"


class TestCreditBudget:
    def test_self_reference_terminates(self):
        r = _resolver(a="{{a}}")
        assert r.resolve("{{a}}") == "{{a}}"

    def test_mutual_reference_terminates(self):
        r = _resolver(a="{{b}}", b="{{a}}")
        result = r.resolve("{{a}}")
        assert result in ("{{a}}", "{{b}}")

    def test_growing_self_reference_is_bounded(self):
        r = _resolver(a="x{{a}}")
        result = r.resolve("{{a}}")
        assert result == "x" * VAR_REPLACE_CREDITS + "{{a}}"

    def test_custom_credits(self):
        r = _resolver(a="{{b}}", b="{{c}}", c="done")
        assert r.resolve("{{a}}", credits=2) == "{{c}}"
        assert r.resolve("{{a}}", credits=3) == "done"

    def test_zero_credits_returns_input(self):
        r = _resolver(a="1")
        assert r.resolve("{{a}}", credits=0) == "{{a}}"


class TestPathMode:
    def test_unresolved_become_template_variables(self):
        assert to_path_template("{{userId}}") == "{userId}"

    def test_resolved_segment(self):
        r = _resolver(resource="users")
        assert r.resolve_path_segment("{{resource}}") == "users"

    def test_unresolved_segment(self):
        r = _resolver()
        assert r.resolve_path_segment("{{userId}}") == "{userId}"

    def test_transform_applies_to_final_text_only(self):
        r = _resolver(item="{{itemId}}")
        assert r.resolve_path_segment("{{item}}") == "{itemId}"

    def test_replace_fn_skipped_in_plain_mode(self):
        r = _resolver()
        assert r.resolve("{{userId}}") == "{{userId}}"
