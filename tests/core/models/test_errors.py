"""
Unit tests for core.models.errors
"""

from core.models.errors import InvalidFilterValueError, ProductServiceError, StoreError


class TestProductServiceError:
    def test_base_error(self) -> None:
        err = ProductServiceError(
            message="Something went wrong",
            error_code="TEST_ERROR",
            details={"foo": "bar"},
        )

        assert err.message == "Something went wrong"
        assert err.error_code == "TEST_ERROR"
        assert err.details == {"foo": "bar"}
        assert str(err) == "Something went wrong"

    def test_details_default_to_empty(self) -> None:
        err = ProductServiceError(message="x", error_code="Y")

        assert err.details == {}


class TestInvalidFilterValueError:
    def test_message_names_the_field(self) -> None:
        err = InvalidFilterValueError(field="theme")

        assert isinstance(err, ProductServiceError)
        assert err.field == "theme"
        assert err.message == "Invalid theme"
        assert err.error_code == "INVALID_FILTER"
        assert err.details == {"field": "theme"}

    def test_message_override(self) -> None:
        err = InvalidFilterValueError(
            field="price",
            message="Invalid price format",
            details={"min_price": "x"},
        )

        assert err.message == "Invalid price format"
        assert err.details == {"field": "price", "min_price": "x"}


class TestStoreError:
    def test_defaults(self) -> None:
        err = StoreError(message="Unable to read collection 'products'")

        assert isinstance(err, ProductServiceError)
        assert err.error_code == "STORE_READ_FAILED"
        assert str(err) == "Unable to read collection 'products'"
