"""Tests for the array wrapper and the items dispatcher."""

import pytest

from valchain import validate
from valchain.exceptions import ConfigurationError, PredicatePathError, ValidationError
from valchain.schema.array import apply_path
from valchain.predicates import compile_path


def _non_negative(value):
    if value < 0:
        raise ValueError("neg")


class TestItemsPathForm:
    """Test items with a dotted predicate path."""

    def test_all_items_pass(self):
        wrapper = validate([1, 2, 3]).array()
        assert wrapper.items("number.integer") is wrapper

    def test_failing_item(self):
        with pytest.raises(ValidationError) as exc_info:
            validate([1, 2.5, 3]).array().items("number.integer")
        error = exc_info.value
        assert error.kind == "items"
        assert error.value == [1, 2.5, 3]
        assert error.context["index"] == 1
        assert isinstance(error.cause, ValidationError)
        assert error.cause.kind == "number.integer"
        assert error.cause.value == 2.5
        assert error.__cause__ is error.cause

    def test_narrowing_failure_inside_path(self):
        with pytest.raises(ValidationError) as exc_info:
            validate([1, "2"]).array().items("number.positive")
        assert exc_info.value.cause.kind == "number"

    def test_alias_segments(self):
        validate(["a", "b"]).array().items("string.notEmpty")
        validate(["a", "b"]).array().items("string.not_empty")
        with pytest.raises(ValidationError) as exc_info:
            validate(["a", ""]).array().items("defined.notNull.string.notEmpty")
        assert exc_info.value.cause.kind == "string.notEmpty"

    def test_nested_arrays(self):
        validate([[1], []]).array().items("array")
        with pytest.raises(ValidationError) as exc_info:
            validate([[1], 2]).array().items("array")
        assert exc_info.value.cause.kind == "array"

    def test_unknown_predicate_is_configuration_error(self):
        with pytest.raises(PredicatePathError) as exc_info:
            validate([1, 2]).array().items("number.nonsense")
        assert isinstance(exc_info.value, ConfigurationError)
        assert not isinstance(exc_info.value, ValidationError)

    def test_unknown_predicate_raised_for_empty_array(self):
        """Test the path is compiled before any element is inspected."""
        with pytest.raises(PredicatePathError):
            validate([]).array().items("number.nonsense")

    def test_empty_path(self):
        with pytest.raises(PredicatePathError):
            validate([1]).array().items("")

    def test_apply_path_returns_last_wrapper(self):
        wrapper = apply_path(compile_path("number.positive"), 4)
        assert wrapper.value == 4
        assert type(wrapper).__name__ == "NumberSchema"


class TestItemsCallableForm:
    """Test items with a callback."""

    def test_all_items_pass(self):
        validate([1, 2, 3]).array().items(_non_negative)

    def test_failing_item(self):
        with pytest.raises(ValidationError) as exc_info:
            validate([1, -2, 3]).array().items(_non_negative)
        error = exc_info.value
        assert error.kind == "items"
        assert error.context["index"] == 1
        assert isinstance(error.cause, ValueError)
        assert str(error.cause) == "neg"

    def test_called_in_order_until_first_failure(self):
        seen = []

        def check(item):
            seen.append(item)
            _non_negative(item)

        with pytest.raises(ValidationError):
            validate([3, 1, -1, 5, -7]).array().items(check)
        assert seen == [3, 1, -1]

    def test_callback_with_nested_chain(self):
        users = [{"name": "ada"}, {"name": ""}]

        def check_user(user):
            validate(user).object()
            validate(user.get("name")).string().not_empty()

        with pytest.raises(ValidationError) as exc_info:
            validate(users).array().items(check_user)
        assert exc_info.value.context["index"] == 1
        assert exc_info.value.cause.kind == "string.notEmpty"

    def test_callback_return_value_ignored(self):
        validate([1, 2]).array().items(lambda item: False)

    def test_path_error_in_callback_propagates(self):
        def check(item):
            validate(item).array().items("number.bogus")

        with pytest.raises(PredicatePathError):
            validate([[1]]).array().items(check)

    def test_tuple_items(self):
        validate((1, 2)).array().items("number")

    def test_item_with_broken_repr(self):
        class BrokenRepr:
            def __repr__(self):
                raise RuntimeError("repr is broken")

        with pytest.raises(ValidationError) as exc_info:
            validate([1, BrokenRepr()]).array().items("number")
        error = exc_info.value
        assert error.kind == "items"
        assert error.context["index"] == 1
        assert error.cause.kind == "number"

    def test_callback_error_with_broken_str(self):
        class BrokenStr(Exception):
            def __str__(self):
                raise RuntimeError("str is broken")

        def check(item):
            raise BrokenStr()

        with pytest.raises(ValidationError) as exc_info:
            validate([1]).array().items(check)
        assert exc_info.value.kind == "items"
        assert "BrokenStr" in exc_info.value.message


class TestItemsInvalidSpec:
    """Test items with neither a callable nor a path."""

    @pytest.mark.parametrize("spec", [None, 3, ["number"], {"kind": "number"}])
    def test_invalid_spec(self, spec):
        with pytest.raises(ValidationError) as exc_info:
            validate([1, 2]).array().items(spec)
        error = exc_info.value
        assert error.kind == "items"
        assert error.value is spec
        assert error.cause is None
        assert "callable or a predicate path" in error.message

    def test_invalid_spec_on_empty_array(self):
        with pytest.raises(ValidationError):
            validate([]).array().items(None)

    def test_empty_array_passes(self):
        validate([]).array().items("number")
        validate([]).array().items(_non_negative)
