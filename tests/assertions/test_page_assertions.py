import dataclasses

import pytest

from browser_assertions import expect
from browser_assertions.assertions import (
    AssertionBool,
    AssertionMaybe,
    AssertionString,
    StepKind,
    cookie,
    cookie_exists,
    cookie_not_exists,
    page_source,
    title,
    url,
)
from browser_assertions.driver.errors import DriverError
from browser_assertions.expect import Verdict

@pytest.mark.asyncio
async def test_cookie_value_matches(mock_driver):
    """Test a cookie assertion against a matching cookie value."""
    mock_driver.get_cookie.return_value = "jon snow"
    step = cookie("user", expect.equal("jon snow"))

    verdict = await step.run(mock_driver)

    assert verdict.passed
    mock_driver.get_cookie.assert_awaited_once_with("user")

@pytest.mark.asyncio
async def test_cookie_missing_fails_without_calling_predicate(mock_driver, mocker):
    """Test that a missing cookie fails with the fixed message."""
    mock_driver.get_cookie.return_value = None
    predicate = mocker.Mock(return_value=Verdict.pass_())
    step = cookie("user", predicate)

    verdict = await step.run(mock_driver)

    assert not verdict.passed
    assert verdict.message == "The cookie does not exist"
    predicate.assert_not_called()

@pytest.mark.asyncio
async def test_cookie_value_mismatch_uses_predicate_message(mock_driver):
    """Test that the caller predicate decides when the cookie exists."""
    mock_driver.get_cookie.return_value = "arya"
    step = cookie("user", expect.equal("jon snow"))

    verdict = await step.run(mock_driver)

    assert not verdict.passed
    assert "jon snow" in verdict.message
    assert "arya" in verdict.message

def test_cookie_builds_maybe_step():
    """Test the tag and name of a cookie step."""
    step = cookie("user", expect.equal("jon snow"))
    assert isinstance(step, AssertionMaybe)
    assert step.kind is StepKind.MAYBE
    assert step.metadata.name == "Assert the value of cookie 'user'"

@pytest.mark.asyncio
async def test_cookie_exists(mock_driver):
    """Test the fixed verdicts of cookie_exists."""
    step = cookie_exists("user")
    assert isinstance(step, AssertionBool)

    mock_driver.cookie_exists.return_value = True
    assert (await step.run(mock_driver)).passed

    mock_driver.cookie_exists.return_value = False
    verdict = await step.run(mock_driver)
    assert not verdict.passed
    assert verdict.message == "The cookie 'user' does not exist"

@pytest.mark.asyncio
async def test_cookie_not_exists(mock_driver):
    """Test the fixed verdicts of cookie_not_exists."""
    step = cookie_not_exists("user")

    mock_driver.cookie_not_exists.return_value = True
    assert (await step.run(mock_driver)).passed

    mock_driver.cookie_not_exists.return_value = False
    verdict = await step.run(mock_driver)
    assert not verdict.passed
    assert verdict.message == "The cookie 'user' exists"

@pytest.mark.asyncio
async def test_url_title_and_page_source(mock_driver):
    """Test the string page assertions query the right driver methods."""
    mock_driver.get_url.return_value = "https://example.com/login"
    mock_driver.get_title.return_value = "Example Domain"
    mock_driver.get_page_html.return_value = "<html><h1>Welcome</h1></html>"

    steps = [
        url(expect.contains("/login")),
        title(expect.equal("Example Domain")),
        page_source(expect.contains("<h1>Welcome</h1>")),
    ]

    for step in steps:
        assert isinstance(step, AssertionString)
        assert (await step.run(mock_driver)).passed

    mock_driver.get_url.assert_awaited_once()
    mock_driver.get_title.assert_awaited_once()
    mock_driver.get_page_html.assert_awaited_once()

@pytest.mark.asyncio
async def test_driver_error_propagates(mock_driver):
    """Test that driver errors are not turned into verdicts."""
    mock_driver.get_title.side_effect = DriverError("session lost")
    step = title(expect.equal("Example Domain"))

    with pytest.raises(DriverError, match="session lost"):
        await step.run(mock_driver)

def test_steps_are_immutable():
    """Test that a built step cannot be modified."""
    step = cookie("user", expect.equal("jon snow"))

    with pytest.raises(dataclasses.FrozenInstanceError):
        step.metadata = None
