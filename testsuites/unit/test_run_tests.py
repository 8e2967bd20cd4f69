import sys

import run_tests
from run_tests import TestRunner, build_parser

PYTEST_PREFIX = [sys.executable, "-m", "pytest", "testsuites/"]


def test_console_suite_with_tags_builds_marker_expression():
    runner = TestRunner(suite="console", tags=["smoke", "regression"], allure_report=False)

    assert runner.build_pytest_command() == PYTEST_PREFIX + [
        "-m", "console and (smoke or regression)",
        "-q",
    ]


def test_all_suite_with_allure_and_verbose():
    runner = TestRunner(suite="all", allure_report=True, verbose=True)

    assert runner.build_pytest_command() == PYTEST_PREFIX + [
        "--alluredir", str(runner.allure_results),
        "-v",
    ]


def test_tags_without_suite_marker():
    cmd = TestRunner(suite="all", tags=["smoke"], allure_report=False).build_pytest_command()

    options = cmd[len(PYTEST_PREFIX):]
    assert options[options.index("-m") + 1] == "smoke"


def test_parser_defaults_and_flags():
    args = build_parser().parse_args(["--suite", "ui", "--no-allure", "-v"])
    assert args.suite == "ui"
    assert args.no_allure is True
    assert args.verbose is True
    assert build_parser().parse_args([]).suite == "all"


def test_main_configures_logging_before_running(monkeypatch):
    events = []
    monkeypatch.setattr(run_tests, "init_logger", lambda: events.append("init_logger"))
    monkeypatch.setattr(TestRunner, "run", lambda self: events.append(("run", self.suite, self.tags)) or 0)

    assert run_tests.main(["--suite", "console", "--tags", "smoke", "--no-allure"]) == 0
    assert events == ["init_logger", ("run", "console", ["smoke"])]
