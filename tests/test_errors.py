import pytest

from chipcore.errors import (
    ChipError,
    EndPointPoolFullError,
    InboundMessageTooBigError,
    IncorrectStateError,
    UnknownInterfaceError,
    WrongAddressTypeError,
)


def test_message_is_kept():
    err = ChipError("bad thing")
    assert err.message == "bad thing"
    assert str(err) == "bad thing"


def test_default_message_comes_from_description():
    err = IncorrectStateError()
    assert err.message == IncorrectStateError.description
    assert str(err) == err.message


@pytest.mark.parametrize(
    "cls",
    [
        IncorrectStateError,
        EndPointPoolFullError,
        InboundMessageTooBigError,
        WrongAddressTypeError,
        UnknownInterfaceError,
    ],
)
def test_all_errors_are_chip_errors(cls):
    err = cls("detail")
    assert err.message == "detail"
    assert str(err) == "detail"
    assert isinstance(err, ChipError)


def test_inet_errors_default_messages():
    assert WrongAddressTypeError().message == WrongAddressTypeError.description
    assert UnknownInterfaceError().message == UnknownInterfaceError.description


def test_distinct_error_classes_do_not_catch_each_other():
    err = EndPointPoolFullError()
    assert err.message == EndPointPoolFullError.description
    assert not isinstance(err, IncorrectStateError)