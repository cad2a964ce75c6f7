"""Tests for custom exception hierarchy."""

import pytest

from sphinx2md.errors import InvalidInputError, Sphinx2MdError


class TestExceptionHierarchy:
    def test_invalid_input_inherits_from_base(self):
        assert issubclass(InvalidInputError, Sphinx2MdError)

    def test_base_inherits_from_exception(self):
        assert issubclass(Sphinx2MdError, Exception)


class TestSphinx2MdError:
    def test_message(self):
        err = Sphinx2MdError("broken")
        assert err.message == "broken"
        assert str(err) == "broken"

    def test_unknown_keyword_rejected(self):
        with pytest.raises(TypeError):
            Sphinx2MdError("broken", page=3)


class TestInvalidInputError:
    def test_attributes(self):
        err = InvalidInputError("Result 2 has no metadata", index=2, field="meta")
        assert err.index == 2
        assert err.field == "meta"
        assert "no metadata" in str(err)

    def test_defaults(self):
        err = InvalidInputError("test")
        assert err.index is None
        assert err.field is None

    def test_catchable_as_base(self):
        with pytest.raises(Sphinx2MdError):
            raise InvalidInputError("bad")
