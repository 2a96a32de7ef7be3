from __future__ import annotations

import re
from pathlib import Path
from typing import TYPE_CHECKING

from junitparser import Error, Failure, JUnitXml, TestCase, TestSuite

from uno.reporting.base import Reporter

if TYPE_CHECKING:
    from uno.evaluator import Verdict


def case_identifier(name: str) -> str:
    """Turn a rendered check name into an identifier such as ``test_round_1_5_2``."""
    slug = re.sub(r"\W+", "_", name).strip("_")
    return f"test_{slug}" if slug else "test"


class JUnitReporter(Reporter):
    """Collect verdicts as named JUnit test cases.

    Each verdict is registered under an identifier derived from its rendered
    name; repeated names get a numeric suffix so no case is overwritten.
    """

    def __init__(self, suite_name: str = "Uno"):
        self.suite = TestSuite(suite_name)
        self.cases: dict[str, TestCase] = {}

    def report(self, verdict: Verdict) -> None:
        identifier = case_identifier(verdict.name)
        if identifier in self.cases:
            n = 2
            while f"{identifier}_{n}" in self.cases:
                n += 1
            identifier = f"{identifier}_{n}"

        case = TestCase(identifier)
        case.classname = self.suite.name
        if not verdict.passed:
            # A target that raised is an error; a wrong return value is a failure
            result_cls = Error if verdict.outcome.raised else Failure
            case.result = result_cls(verdict.message.splitlines()[0])
            case.system_out = verdict.message
        self.suite.add_testcase(case)
        self.cases[identifier] = case

    def write(self, path: Path) -> Path:
        """Write the collected cases to *path* as JUnit XML, return path."""
        path.parent.mkdir(parents=True, exist_ok=True)
        xml = JUnitXml()
        xml.append(self.suite)
        xml.write(str(path), pretty=True)
        return path
