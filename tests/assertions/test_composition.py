import pytest

from browser_assertions import expect
from browser_assertions.assertions import (
    AssertionTask,
    AssertionWebdriver,
    StepKind,
    driver_command,
    sequence_commands,
    task,
)
from browser_assertions.driver.errors import DriverError
from browser_assertions.expect import Verdict

@pytest.mark.asyncio
async def test_task_returns_verdict():
    """Test a session independent task."""
    async def verdict():
        return Verdict.fail("Too slow")

    step = task("Response time", verdict)

    assert isinstance(step, AssertionTask)
    assert step.kind is StepKind.TASK
    assert step.metadata.name == "Response time"
    result = await step.run(None)
    assert result == Verdict.fail("Too slow")

@pytest.mark.asyncio
async def test_task_can_run_twice():
    """Test that a task step builds a fresh computation on each run."""
    calls = []

    async def verdict():
        calls.append(1)
        return Verdict.pass_()

    step = task("Counter", verdict)
    await step.run(None)
    await step.run(None)
    assert len(calls) == 2

@pytest.mark.asyncio
async def test_driver_command(mock_driver):
    """Test a single custom driver interaction."""
    mock_driver.get_text.return_value = "Welcome back, Jon"
    step = driver_command(
        "Greeting mentions the user",
        lambda driver: driver.get_text("#greeting"),
        expect.contains("Jon")
    )

    assert isinstance(step, AssertionWebdriver)
    assert step.kind is StepKind.WEBDRIVER
    assert (await step.run(mock_driver)).passed
    mock_driver.get_text.assert_awaited_once_with("#greeting")

@pytest.mark.asyncio
async def test_driver_command_error_propagates(mock_driver, mocker):
    mock_driver.get_text.side_effect = DriverError("boom")
    predicate = mocker.Mock()
    step = driver_command("Greeting", lambda driver: driver.get_text("#greeting"), predicate)

    with pytest.raises(DriverError, match="boom"):
        await step.run(mock_driver)
    predicate.assert_not_called()

@pytest.mark.asyncio
async def test_sequence_commands_preserves_order(mock_driver, mocker):
    """Test that values reach the predicate in command order."""
    order = []

    def command(value):
        async def run(driver):
            order.append(value)
            return value
        return run

    predicate = mocker.Mock(return_value=Verdict.pass_())
    step = sequence_commands("x", [command("A"), command("B"), command("C")], predicate)

    verdict = await step.run(mock_driver)

    assert verdict.passed
    assert order == ["A", "B", "C"]
    predicate.assert_called_once_with(["A", "B", "C"])

@pytest.mark.asyncio
async def test_sequence_commands_fails_fast(mock_driver, mocker):
    """Test that the first driver error aborts the batch."""
    error = DriverError("E")
    first = mocker.AsyncMock(return_value="A")
    second = mocker.AsyncMock(side_effect=error)
    third = mocker.AsyncMock(return_value="C")
    predicate = mocker.Mock()

    step = sequence_commands("x", [first, second, third], predicate)

    with pytest.raises(DriverError) as excinfo:
        await step.run(mock_driver)

    assert excinfo.value is error
    first.assert_awaited_once_with(mock_driver)
    second.assert_awaited_once_with(mock_driver)
    third.assert_not_awaited()
    predicate.assert_not_called()

@pytest.mark.asyncio
async def test_sequence_commands_compares_cookies(mock_driver):
    """Test comparing two correlated live values in one step."""
    values = {"user": "jon", "last_user": "jon"}
    mock_driver.get_cookie.side_effect = lambda name: values[name]

    step = sequence_commands(
        "Cookies agree",
        [
            lambda driver: driver.get_cookie("user"),
            lambda driver: driver.get_cookie("last_user"),
        ],
        lambda cookies: expect.check(cookies[0] == cookies[1], "Cookies differ")
    )

    assert (await step.run(mock_driver)).passed

def test_sequence_commands_requires_commands():
    with pytest.raises(ValueError, match="At least one command"):
        sequence_commands("x", [], lambda values: Verdict.pass_())

@pytest.mark.asyncio
async def test_sequence_commands_copy_still_runs(mock_driver, mocker):
    commands = [mocker.AsyncMock(return_value=1)]
    step = sequence_commands("x", commands, expect.equal([1]))
    commands.clear()
    assert (await step.run(mock_driver)).passed

@pytest.mark.parametrize("name", ["", "   "])
def test_custom_steps_require_a_name(name):
    async def verdict():
        return Verdict.pass_()

    with pytest.raises(ValueError, match="Step name cannot be empty"):
        task(name, verdict)
