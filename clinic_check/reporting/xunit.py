# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""JUnit XML export of case results.

The file follows the standard JUnit XML format:
- Root element: <testsuites> with aggregate statistics
- One <testsuite> per phase, in execution order
- One <testcase> per case; failed cases carry a <failure> element whose
  type attribute is the failure kind
"""

import logging
from pathlib import Path

from lxml import etree as ET

from clinic_check.core.models import CaseResult

logger = logging.getLogger(__name__)

DEFAULT_SUITE_NAME = "clinic-check"


def _group_by_phase(results: list[CaseResult]) -> dict[str, list[CaseResult]]:
    # dicts keep insertion order, which is the phase execution order
    groups: dict[str, list[CaseResult]] = {}
    for result in results:
        groups.setdefault(result.phase or DEFAULT_SUITE_NAME, []).append(result)
    return groups


def _build_testsuite(name: str, results: list[CaseResult]) -> ET._Element:
    failures = sum(1 for r in results if r.failed)
    duration = sum(r.duration or 0.0 for r in results)

    testsuite = ET.Element("testsuite")
    testsuite.set("name", name)
    testsuite.set("tests", str(len(results)))
    testsuite.set("failures", str(failures))
    testsuite.set("errors", "0")
    testsuite.set("skipped", "0")
    testsuite.set("time", f"{duration:.3f}")

    for result in results:
        testcase = ET.SubElement(testsuite, "testcase")
        testcase.set("classname", f"{DEFAULT_SUITE_NAME}.{name}")
        testcase.set("name", result.description)
        testcase.set("time", f"{result.duration or 0.0:.3f}")
        if result.failed:
            failure = ET.SubElement(testcase, "failure")
            failure.set("message", result.error or "")
            if result.kind is not None:
                failure.set("type", result.kind.value)
            failure.text = result.error or ""
    return testsuite


def build_xunit(results: list[CaseResult]) -> ET._Element:
    """Build the <testsuites> tree for a run.

    Args:
        results: Case results in execution order.

    Returns:
        The root element.
    """
    root = ET.Element("testsuites")
    failures = sum(1 for r in results if r.failed)
    root.set("name", DEFAULT_SUITE_NAME)
    root.set("tests", str(len(results)))
    root.set("failures", str(failures))
    root.set("errors", "0")
    root.set("skipped", "0")
    root.set("time", f"{sum(r.duration or 0.0 for r in results):.3f}")

    for name, group in _group_by_phase(results).items():
        root.append(_build_testsuite(name, group))
    return root


def write_xunit(results: list[CaseResult], output_path: Path) -> Path:
    """Write the run's results as a JUnit XML file.

    Raises:
        OSError: If the file cannot be written.
    """
    tree = ET.ElementTree(build_xunit(results))
    ET.indent(tree, space="  ")

    output_path.parent.mkdir(parents=True, exist_ok=True)
    tree.write(str(output_path), encoding="UTF-8", xml_declaration=True)

    logger.info(f"Wrote {len(results)} results to {output_path}")
    return output_path
