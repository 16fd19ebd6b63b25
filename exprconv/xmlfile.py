import logging
import os
from typing import Iterable

from bs4 import BeautifulSoup

from .pipeline import ConversionResult
from .report import format_number

logger = logging.getLogger(__name__)

RECORD_TAG = "elements"
FIELD_TAGS = ["sno", "infix", "prefix", "postfix", "evaluation", "comparison"]


def _fields(result: ConversionResult) -> list[str]:
    return [
        str(result.sno),
        result.infix,
        result.prefix,
        result.postfix,
        format_number(result.prefix_evaluation),
        str(result.match),
    ]


def build_results_document(results: Iterable[ConversionResult]) -> BeautifulSoup:
    """
    Build the results document, one ``<elements>`` block per result.

    ``evaluation`` holds the prefix evaluation and ``comparison`` whether the
    prefix and postfix evaluations matched.
    """
    soup = BeautifulSoup(features="xml")
    root = soup.new_tag("root")
    soup.append(root)

    for result in results:
        root.append("\n  ")
        element = soup.new_tag(RECORD_TAG)
        for tag_name, value in zip(FIELD_TAGS, _fields(result)):
            element.append("\n    ")
            tag = soup.new_tag(tag_name)
            tag.string = value
            element.append(tag)
        element.append("\n  ")
        root.append(element)
    root.append("\n")

    return soup


def write_results_xml(file_path: str, results: Iterable[ConversionResult]):
    results = list(results)
    output_dir = os.path.dirname(file_path)
    if output_dir:
        os.makedirs(output_dir, exist_ok=True)

    with open(file_path, "w", encoding="utf-8") as f:
        f.write(str(build_results_document(results)))
        f.write("\n")

    logger.info("XML file created successfully at: %s", os.path.abspath(file_path))


def read_results_xml(file_path: str) -> list[dict[str, str]]:
    """Load a results file written by ``write_results_xml`` as one dict per record."""
    with open(file_path, "r", encoding="utf-8") as f:
        soup = BeautifulSoup(f.read(), "xml")

    records = []
    for element in soup.find_all(RECORD_TAG):
        record = {}
        for tag_name in FIELD_TAGS:
            tag = element.find(tag_name)
            record[tag_name] = tag.get_text() if tag is not None else ""
        records.append(record)
    return records
