from collections import Counter
from sitebuilder.domain.sections import SECTION_NAMES
from .exceptions import InvariantViolation

def assert_known_sections(section_names):
    unknown = sorted(set(section_names) - set(SECTION_NAMES))
    if unknown:
        raise InvariantViolation(f"Unknown section names: {unknown}")

def assert_one_flag_per_section(rows):
    counts = Counter(row["section_name"] for row in rows)
    duplicated = sorted(name for name, count in counts.items() if count > 1)
    if duplicated:
        raise InvariantViolation(
            f"More than one section flag row for: {duplicated}"
        )
