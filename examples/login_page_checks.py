import asyncio
import logging
import os
import sys

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from browser_assertions import Settings, StepReporter, StepRunner, expect
from browser_assertions.assertions import (
    attribute,
    cookie_not_exists,
    element_count,
    exists,
    sequence_commands,
    title,
    visible,
)
from browser_assertions.driver.session import create_browser_session, open_queries

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)

STEPS = [
    title(expect.contains("The Internet")),
    exists("form#login"),
    visible("form#login button[type=submit]"),
    element_count("form#login input", expect.at_least(2)),
    attribute("#username", "name", expect.equal("username")),
    cookie_not_exists("rack.session"),
    sequence_commands(
        "Username and password fields share a form",
        [
            lambda driver: driver.count_elements("form#login #username"),
            lambda driver: driver.count_elements("form#login #password"),
        ],
        expect.equal([1, 1])
    ),
]

async def main():
    settings = Settings.from_env()
    browser_session = create_browser_session(settings)
    reporter = StepReporter(report_dir=settings.report_dir)

    try:
        await browser_session.start()
        page = await browser_session.get_current_page()
        await page.goto("http://the-internet.herokuapp.com/login")

        runner = StepRunner(open_queries(browser_session, settings), reporter=reporter)
        results = await runner.run_steps(STEPS)
        reporter.generate_report()

        if not all(result.success for result in results):
            sys.exit(1)
    finally:
        try:
            await browser_session.stop()
        except Exception as e:
            logger.error(f"Error during browser cleanup: {str(e)}")

if __name__ == '__main__':
    asyncio.run(main())
