from decimal import Decimal

import pytest

from option_grammar import (
    FormatError,
    OptionValidationError,
    Param,
    UnexpectedKeyError,
    customize,
    request_params,
)


def _tuples(params):
    return [p.as_tuple() for p in params]


def test_scalars():
    schema = customize(None, ["Foo", {"Bar": ["integer"]}, {"Flag": ["boolean"]}])
    params = request_params(schema, {"foo": "abc", "bar": 123, "flag": True})
    assert params == [Param("Foo", "abc"), Param("Bar", "123"), Param("Flag", "true")]


def test_false_is_encoded():
    schema = customize(None, [{"DryRun": ["boolean"]}])
    assert _tuples(schema.request_params({"dry_run": False})) == [("DryRun", "false")]


def test_membered_list(describe_instances):
    params = describe_instances.request_params({"instance_id": ["i-1", "i-2"]})
    assert _tuples(params) == [("InstanceId.member.1", "i-1"), ("InstanceId.member.2", "i-2")]


def test_plain_list_join():
    schema = customize(None, [{"Tag": [{"list": ["string"]}]}])
    assert _tuples(schema.request_params({"tag": ["a", "b"]})) == [("Tag.1", "a"), ("Tag.2", "b")]


def test_empty_list_emits_marker(describe_instances):
    assert _tuples(describe_instances.request_params({"instance_id": []})) == [("InstanceId", "")]


def test_list_of_structures(describe_instances):
    params = describe_instances.request_params({
        "filter": [
            {"name": "instance-type", "value": ["t2.micro", "t3.micro"]},
            {"name": "tag:Env"},
        ],
    })
    assert _tuples(params) == [
        ("Filter.member.1.Name", "instance-type"),
        ("Filter.member.1.Value.member.1", "t2.micro"),
        ("Filter.member.1.Value.member.2", "t3.micro"),
        ("Filter.member.2.Name", "tag:Env"),
    ]


def test_nested_empty_list(describe_instances):
    params = describe_instances.request_params({"filter": [{"name": "a", "value": []}]})
    assert _tuples(params) == [("Filter.member.1.Name", "a"), ("Filter.member.1.Value", "")]


def test_list_of_lists():
    schema = customize(None, [{"Matrix": [{"list": [{"list": ["integer"]}]}]}])
    params = schema.request_params({"matrix": [[1, 2], [], [3]]})
    assert _tuples(params) == [
        ("Matrix.1.1", "1"),
        ("Matrix.1.2", "2"),
        ("Matrix.2", ""),
        ("Matrix.3.1", "3"),
    ]


def test_structure_option():
    schema = customize(None, [{"Monitoring": [{"structure": {
        "Enabled": ["boolean", "required"],
        "Period": ["integer"],
    }}]}])
    params = schema.request_params({"monitoring": {"period": 60, "enabled": True}})
    assert _tuples(params) == [("Monitoring.Period", "60"), ("Monitoring.Enabled", "true")]


def test_empty_structure_emits_nothing():
    schema = customize(None, [{"Config": [{"structure": {"Key": ["string"]}}]}])
    assert schema.request_params({"config": {}}) == []


def test_params_follow_caller_order(describe_instances):
    params = describe_instances.request_params({"max_results": 5, "instance_id": ["i-1"], "dry_run": True})
    assert [p.name for p in params] == ["MaxResults", "InstanceId.member.1", "DryRun"]


def test_renamed_option_keeps_wire_name():
    schema = customize(None, [{"DBInstanceIdentifier": [{"rename": "db_id"}]}])
    assert _tuples(schema.request_params({"db_id": "x"})) == [("DBInstanceIdentifier", "x")]


def test_empty_options():
    schema = customize(None, [{"Bucket": ["required"]}, "Key"])
    with pytest.raises(OptionValidationError):
        schema.request_params({})
    assert customize(None, ["Key"]).request_params({}) == []


class TestBlob:
    def test_default_codec(self):
        schema = customize(None, [{"UserData": ["blob"]}])
        assert _tuples(schema.request_params({"user_data": b"hello"})) == [("UserData", "aGVsbG8=")]

    def test_text_is_utf8_encoded(self):
        schema = customize(None, [{"UserData": ["blob"]}])
        assert _tuples(schema.request_params({"user_data": "hello"})) == [("UserData", "aGVsbG8=")]

    def test_long_value_has_no_line_breaks(self):
        schema = customize(None, [{"UserData": ["blob"]}])
        (param,) = schema.request_params({"user_data": b"x" * 200})
        assert "\n" not in param.value

    def test_custom_codec(self):
        schema = customize(None, [{"Body": [{"list": ["blob"]}]}])
        params = schema.request_params({"body": [b"\x01\xff"]}, blob_codec=bytes.hex)
        assert _tuples(params) == [("Body.1", "01ff")]


class TestValidationFirst:
    def test_invalid_input_encodes_nothing(self, describe_instances):
        with pytest.raises(FormatError):
            describe_instances.request_params({"max_results": 1, "instance_id": ["ok", 2]})

    def test_error_matches_validate(self, describe_instances):
        options = {"filter": [{"name": "a", "bad": 1}]}
        with pytest.raises(UnexpectedKeyError) as from_validate:
            describe_instances.validate(options)
        with pytest.raises(UnexpectedKeyError) as from_encode:
            describe_instances.request_params(options)
        assert str(from_validate.value) == str(from_encode.value)

    @pytest.mark.parametrize("options", [
        {"max_results": "1"},
        {"dry_run": 1},
        {"instance_id": "i-1"},
        {"filter": {"name": "a"}},
        {"unknown": 1},
    ])
    def test_encode_fails_iff_validate_fails(self, describe_instances, options):
        with pytest.raises(OptionValidationError):
            describe_instances.validate(options)
        with pytest.raises(OptionValidationError):
            describe_instances.request_params(options)


def test_encoding_is_deterministic(describe_instances):
    options = {"filter": [{"name": "a", "value": ["1", "2"]}], "max_results": 3}
    assert describe_instances.request_params(options) == describe_instances.request_params(options)


def test_tuple_is_accepted_as_list(describe_instances):
    params = describe_instances.request_params({"instance_id": ("i-1",)})
    assert _tuples(params) == [("InstanceId.member.1", "i-1")]


def test_param_str():
    assert str(Param("Filter.member.1.Name", "a")) == "Filter.member.1.Name=a"


def test_lowercase_wire_name():
    schema = customize(None, [{"foo": ["string"]}])
    assert _tuples(schema.request_params({"foo": "bar"})) == [("foo", "bar")]


def test_membered_list_of_tags():
    schema = customize(None, [{"tags": [{"membered_list": ["string"]}]}])
    assert _tuples(schema.request_params({"tags": ["a", "b"]})) == [("tags.member.1", "a"), ("tags.member.2", "b")]
    assert _tuples(schema.request_params({"tags": []})) == [("tags", "")]


def test_non_integral_numbers_are_encoded_as_text():
    schema = customize(None, [{"MaxResults": ["integer"]}])
    assert _tuples(schema.request_params({"max_results": 1.5})) == [("MaxResults", "1.5")]
    assert _tuples(schema.request_params({"max_results": Decimal("10")})) == [("MaxResults", "10")]


def test_unencodable_blob_text_fails_validation():
    schema = customize(None, [{"UserData": ["blob"]}])
    options = {"user_data": "\ud800"}
    with pytest.raises(FormatError, match="expected string value for option user_data"):
        schema.validate(options)
    with pytest.raises(FormatError):
        schema.request_params(options)
