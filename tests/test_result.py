import pytest

from gltfwriter.result import Result, ResultState


def test_default_is_error():
    result = Result()
    assert result.is_error()
    assert not result.is_ok()
    assert result.message == ""
    assert result.value is None


def test_ok_carries_message_and_value():
    result = Result.ok("done", value=[1, 2, 3])
    assert result.is_ok()
    assert not result.is_error()
    assert result.state is ResultState.OK
    assert result.message == "done"
    assert result.value == [1, 2, 3]


def test_ok_without_arguments():
    result = Result.ok()
    assert result.is_ok()
    assert result.message == ""


def test_error_carries_message():
    result = Result.error("file missing")
    assert result.is_error()
    assert result.state is ResultState.ERROR
    assert result.message == "file missing"
    assert result.value is None


def test_state_names():
    assert Result.ok().state.name == "OK"
    assert Result.error().state.name == "ERROR"
    assert ResultState(ResultState.OK).name == "OK"
    assert ResultState(ResultState.ERROR).name == "ERROR"


def test_result_is_immutable():
    result = Result.ok("x")
    with pytest.raises(AttributeError):
        result.message = "y"
    assert result.message == "x"
    assert result.is_ok()


def test_equal_results_compare_equal():
    assert Result.error("a") == Result(ResultState.ERROR, "a")
    assert Result.ok("a") != Result.error("a")