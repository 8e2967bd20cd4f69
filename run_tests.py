#!/usr/bin/env python3
# ================================================================================
# Test Runner Script
# ================================================================================
#
# This is the main entry point for executing test suites.
# It provides a unified interface for running the harness test suites
# with various configurations.
#
# Features:
#   - Run console harness, UI wrapper or all tests
#   - Marker filtering
#   - Generate Allure reports
#   - CI/CD pipeline support
#
# Usage:
#   python run_tests.py --suite console
#   python run_tests.py --tags smoke regression
#   python run_tests.py --suite all --no-allure --verbose
#
# ================================================================================

import argparse
import subprocess
import sys
from datetime import datetime
from pathlib import Path
from typing import List

from loguru import logger

from testtools.common import init_logger


SUITE_MARKERS = {
    "console": "console",
    "ui": "ui",
    "unit": "unit",
}


class TestRunner:
    """
    Main test runner class for orchestrating test execution.

    This class handles:
    - Test suite selection and execution
    - Report generation
    """

    __test__ = False  # not a pytest test class

    def __init__(
        self,
        suite: str = "all",
        tags: List[str] = None,
        allure_report: bool = True,
        verbose: bool = False
    ):
        """
        Initialize test runner.

        Args:
            suite: Test suite to run - "console", "ui", "unit", "all"
            tags: List of pytest markers to filter tests
            allure_report: Generate Allure report
            verbose: Enable verbose output
        """
        self.suite = suite
        self.tags = tags or []
        self.allure_report = allure_report
        self.verbose = verbose

        # Paths
        self.root_dir = Path(__file__).parent
        self.reports_dir = self.root_dir / "reports"
        self.allure_results = self.reports_dir / "allure-results"
        self.allure_report_dir = self.reports_dir / "allure-report"

    def run(self) -> int:
        """
        Execute the test run.

        Returns:
            Exit code (0 for success, non-zero for failure)
        """
        logger.info("=" * 60)
        logger.info("Starting Test Execution")
        logger.info("=" * 60)
        logger.info(f"Suite: {self.suite}")
        logger.info(f"Tags: {self.tags or 'All'}")
        logger.info("=" * 60)

        self._prepare_environment()

        cmd = self.build_pytest_command()
        logger.info(f"Executing: {' '.join(cmd)}")

        try:
            result = subprocess.run(cmd, cwd=str(self.root_dir))
            exit_code = result.returncode
        except OSError as e:
            logger.error(f"Test execution failed: {e}")
            exit_code = 1

        if self.allure_report:
            self._generate_allure_report()

        self._print_summary(exit_code)

        return exit_code

    def _prepare_environment(self) -> None:
        """Prepare test environment."""
        self.reports_dir.mkdir(parents=True, exist_ok=True)
        if self.allure_report:
            self.allure_results.mkdir(parents=True, exist_ok=True)
        logger.debug("Environment prepared")

    def build_pytest_command(self) -> List[str]:
        """Build the pytest command with all options."""
        cmd = [sys.executable, "-m", "pytest", "testsuites/"]

        markers = []
        if self.suite in SUITE_MARKERS:
            markers.append(SUITE_MARKERS[self.suite])
        if self.tags:
            tag_expr = " or ".join(self.tags)
            markers.append(f"({tag_expr})" if markers else tag_expr)
        if markers:
            cmd.extend(["-m", " and ".join(markers)])

        if self.allure_report:
            cmd.extend(["--alluredir", str(self.allure_results)])

        cmd.append("-v" if self.verbose else "-q")

        return cmd

    def _generate_allure_report(self) -> None:
        """Generate Allure HTML report."""
        logger.info("Generating Allure report...")

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        report_path = self.reports_dir / f"allure-report-{timestamp}"

        try:
            subprocess.run([
                "allure", "generate",
                str(self.allure_results),
                "-o", str(report_path),
                "--clean"
            ], check=True)
        except FileNotFoundError:
            logger.warning("Allure CLI not found. Please install Allure to generate reports.")
            return
        except subprocess.CalledProcessError as e:
            logger.error(f"Failed to generate Allure report: {e}")
            return

        # Create/update latest symlink
        latest_link = self.allure_report_dir
        if latest_link.is_symlink() or latest_link.is_file():
            latest_link.unlink()
        elif latest_link.exists():
            import shutil
            shutil.rmtree(latest_link)
        latest_link.symlink_to(report_path.name)

        logger.info(f"Report generated: {report_path}")

    def _print_summary(self, exit_code: int) -> None:
        """Print test execution summary."""
        logger.info("=" * 60)
        if exit_code == 0:
            logger.info("✅ TEST EXECUTION COMPLETED SUCCESSFULLY")
        else:
            logger.error(f"❌ TEST EXECUTION FAILED (exit code: {exit_code})")

        if self.allure_report:
            logger.info(f"📊 Report available at: {self.allure_report_dir}")

        logger.info("=" * 60)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Console & Browser Harness Test Runner",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run console harness tests
  python run_tests.py --suite console

  # Run smoke tests only
  python run_tests.py --tags smoke

  # Run everything verbosely without Allure
  python run_tests.py --suite all --verbose --no-allure
        """
    )

    parser.add_argument(
        "--suite",
        choices=["console", "ui", "unit", "all"],
        default="all",
        help="Test suite to run (default: all)"
    )

    parser.add_argument(
        "--tags",
        nargs="+",
        default=[],
        help="Pytest markers to filter tests (e.g., smoke regression)"
    )

    parser.add_argument(
        "--no-allure",
        action="store_true",
        help="Disable Allure report generation"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose output"
    )

    return parser


def main(argv: List[str] = None) -> int:
    """Main entry point."""
    init_logger()

    args = build_parser().parse_args(argv)

    runner = TestRunner(
        suite=args.suite,
        tags=args.tags,
        allure_report=not args.no_allure,
        verbose=args.verbose
    )

    return runner.run()


if __name__ == "__main__":
    sys.exit(main())
