from datetime import date

import pytest

from src.container_payroll.container_payroll.common.validators import (
    require_iso_date,
    require_non_empty,
    require_positive_int,
    require_worker_pair,
)
from src.container_payroll.container_payroll.core.exceptions import ValidationError


def test_require_non_empty_strips():
    assert require_non_empty("  Anna ", "Name") == "Anna"
    with pytest.raises(ValidationError):
        require_non_empty("   ", "Name")
    with pytest.raises(ValidationError):
        require_non_empty(None, "Name")


def test_require_iso_date():
    assert require_iso_date("2024-05-06", "Date") == date(2024, 5, 6)
    with pytest.raises(ValidationError):
        require_iso_date("06.05.2024", "Date")


@pytest.mark.parametrize("value", [0, -5, "abc", None, True, 2.5])
def test_require_positive_int_rejects(value):
    with pytest.raises(ValidationError):
        require_positive_int(value, "Package count")


def test_require_positive_int_accepts_numeric_strings():
    assert require_positive_int("1500", "Package count") == 1500
    assert require_positive_int(3000, "Package count") == 3000


def test_require_worker_pair():
    assert require_worker_pair(["a", "b"]) == ("a", "b")
    with pytest.raises(ValidationError):
        require_worker_pair(["a", "a"])
    with pytest.raises(ValidationError):
        require_worker_pair(["a"])
    with pytest.raises(ValidationError):
        require_worker_pair("ab")

