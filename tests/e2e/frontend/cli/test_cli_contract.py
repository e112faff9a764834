"""End-to-end tests for `mixin check` and `mixin inspect`."""

import json

import pytest

from mixin.entrypoints.cli.main import mixin

FIXTURES = "tests.fixtures.contracts"


def test_check_valid_contract(runner):
    result = runner.invoke(mixin, ["check", f"{FIXTURES}:LabelContract"])
    assert result.exit_code == 0
    assert "LabelContract is a valid contract" in result.output
    assert "(2 static, 2 instance members)" in result.output


@pytest.mark.parametrize(
    ("ref", "message"),
    [
        ("NotAContract", "must inherit from Mixin.Super"),
        ("make_record", "must be a constructor"),
    ],
)
def test_check_invalid_contract(runner, ref, message):
    result = runner.invoke(mixin, ["check", f"{FIXTURES}:{ref}"])
    assert result.exit_code == 1
    assert message in result.output


@pytest.mark.parametrize(
    "ref", [f"{FIXTURES}:Missing", "no_such_module_here:Thing", "no-colon"]
)
def test_unresolvable_reference_is_a_usage_error(runner, ref):
    result = runner.invoke(mixin, ["check", ref])
    assert result.exit_code == 2
    assert "Cannot resolve" in result.output


def test_check_warns_about_ambiguous_accessors(runner):
    result = runner.invoke(
        mixin, ["check", f"{FIXTURES}:AmbiguousContract"], env={"MIXIN_AMBIGUOUS_ACCESSORS": "warn"}
    )
    assert result.exit_code == 0
    assert "AmbiguousContract.level has a setter with an optional value" in (
        result.output
    )
    assert "is a valid contract" in result.output


def test_check_fails_on_ambiguous_accessors_under_error_policy(runner):
    result = runner.invoke(
        mixin,
        ["check", f"{FIXTURES}:AmbiguousContract"],
        env={"MIXIN_AMBIGUOUS_ACCESSORS": "error"},
    )
    assert result.exit_code == 1
    assert "optional value" in result.output
    assert "is a valid contract" not in result.output


def test_check_ignores_ambiguous_accessors(runner):
    result = runner.invoke(
        mixin,
        ["check", f"{FIXTURES}:AmbiguousContract"],
        env={"MIXIN_AMBIGUOUS_ACCESSORS": "ignore"},
    )
    assert result.exit_code == 0
    assert "optional value" not in result.output


def test_check_rejects_unknown_policy(runner):
    result = runner.invoke(
        mixin,
        ["check", f"{FIXTURES}:AnswerContract"],
        env={"MIXIN_AMBIGUOUS_ACCESSORS": "loud"},
    )
    assert result.exit_code == 1
    assert "MIXIN_AMBIGUOUS_ACCESSORS" in result.output


def test_inspect_json(runner):
    result = runner.invoke(mixin, ["inspect", f"{FIXTURES}:LabelContract", "--json"])
    assert result.exit_code == 0
    document = json.loads(result.stdout)
    assert document == {
        "contract": f"{FIXTURES}:LabelContract",
        "static": [
            {"name": "describe", "kind": "staticmethod"},
            {"name": "kind", "kind": "classmethod"},
        ],
        "instance": [
            {"name": "label", "kind": "accessor", "ambiguous": False},
            {"name": "echo", "kind": "method", "ambiguous": False},
        ],
    }


def test_inspect_flags_ambiguous_accessors(runner):
    result = runner.invoke(
        mixin, ["inspect", f"{FIXTURES}:AmbiguousContract", "--json"]
    )
    assert result.exit_code == 0
    document = json.loads(result.stdout)
    assert document["instance"] == [
        {"name": "level", "kind": "accessor", "ambiguous": True}
    ]


def test_inspect_text(runner):
    result = runner.invoke(mixin, ["inspect", f"{FIXTURES}:AnswerContract"])
    assert result.exit_code == 0
    assert result.stdout.splitlines() == [
        f"{FIXTURES}:AnswerContract",
        "Static surface:",
        "  <none>",
        "Instance surface:",
        "  the_answer  method",
    ]


def test_inspect_invalid_contract(runner):
    result = runner.invoke(mixin, ["inspect", f"{FIXTURES}:Record"])
    assert result.exit_code == 1
    assert "must inherit from Mixin.Super" in result.output
