from calendar_widgets.domain.errors import DomainError, InvalidYearError


def test_invalid_year_error_message_names_bounds_and_value() -> None:
    error = InvalidYearError(1899)

    assert isinstance(error, DomainError)
    assert error.code == "INVALID_YEAR"
    assert str(error) == (
        "The argument passed to `calendar('YYYY')` must be a valid year "
        "between 1900 and 2100. You passed 1899."
    )
    assert error.details == {"year": "1899", "min_year": 1900, "max_year": 2100}


def test_invalid_year_error_uses_given_bounds() -> None:
    error = InvalidYearError("abc", min_year=2000, max_year=2050)

    assert "between 2000 and 2050" in error.message
    assert error.message.endswith("You passed abc.")
