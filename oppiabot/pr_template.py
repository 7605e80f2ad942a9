"""
Pull request template validation.

The PR body is split into `## <title>` sections and matched against a fixed
table of expected headers and checklist labels. `validate` reports what is
missing and `compose` turns that into the comment posted on the PR.
"""

import re
from enum import Enum


class Section(Enum):
    OVERVIEW = "overview"
    CHECKLIST = "checklist"


class Checkbox(Enum):
    LINT = "lint"
    MAINTAINER_EDITS = "maintainer-edits"


class Deficiency(Enum):
    """Ways a PR body can fail the template, in the order they are checked."""

    MISSING_OVERVIEW = "missing-overview"
    MISSING_DESCRIPTION = "missing-description"
    MISSING_CHECKLIST = "missing-checklist-section"
    UNCHECKED_LINT = "unchecked-lint-checkbox"
    UNCHECKED_MAINTAINER_EDITS = "unchecked-maintainer-edits-checkbox"


SECTION_HEADERS = (
    ("overview", Section.OVERVIEW),
    ("essential checklist", Section.CHECKLIST),
)

CHECKBOX_LABELS = (
    ("linter/karma", Checkbox.LINT),
    ("allow edits from maintainers", Checkbox.MAINTAINER_EDITS),
)

ISSUE_PROMPT = "This PR fixes or fixes part of"
DESCRIPTION_PROMPT = "This PR does the following:"
DESCRIPTION_PLACEHOLDER = "[Explain here what your PR does and why]"

HEADER_PATTERN = re.compile(r"^\s*##\s+(?P<title>.+?)\s*$")
CHECKBOX_PATTERN = re.compile(r"^\s*[-*]\s*\[(?P<mark>[ xX])\]\s*(?P<label>.*)$")

CLAUSES = {
    Deficiency.MISSING_OVERVIEW: (
        "the body of this PR is missing the overview section, "
        "please update it to include the overview."
    ),
    Deficiency.MISSING_DESCRIPTION: (
        "the body of this PR is missing the required description, "
        "please update the body with a description of what this PR does."
    ),
    Deficiency.MISSING_CHECKLIST: (
        "the body of this PR is missing the checklist section, "
        "please update it to include the checklist."
    ),
    Deficiency.UNCHECKED_LINT: (
        "the karma and linter checklist has not been checked, "
        "please make sure to run the frontend tests and lint tests before pushing."
    ),
    Deficiency.UNCHECKED_MAINTAINER_EDITS: (
        "the allow edits from maintainers checklist needs to be ticked so that "
        "maintainers can rerun failed tests. Endeavour to add this by ticking "
        "on the check box."
    ),
}

# Each group becomes one paragraph of the comment.
CLAUSE_GROUPS = (
    (Deficiency.MISSING_OVERVIEW, Deficiency.MISSING_DESCRIPTION),
    (
        Deficiency.MISSING_CHECKLIST,
        Deficiency.UNCHECKED_LINT,
        Deficiency.UNCHECKED_MAINTAINER_EDITS,
    ),
)

GROUP_SEPARATOR = "<br>Also, "
CLOSING = " Thanks!"


def parse_sections(body: str | None) -> dict[Section, list[str]]:
    """
    Split a PR body into the sections we know about.

    Lines before the first header and lines under unknown headers are dropped.
    Only the first occurrence of a section is kept.
    """
    sections: dict[Section, list[str]] = {}
    current: list[str] | None = None
    for line in (body or "").splitlines():
        match = HEADER_PATTERN.match(line)
        if match:
            kind = _section_kind(match.group("title"))
            if kind is None or kind in sections:
                current = None
            else:
                current = sections[kind] = []
        elif current is not None:
            current.append(line)
    return sections


def parse_checkboxes(lines: list[str]) -> dict[Checkbox, bool]:
    """Map each known checklist item found in `lines` to whether it is ticked."""
    boxes: dict[Checkbox, bool] = {}
    for line in lines:
        match = CHECKBOX_PATTERN.match(line)
        if not match:
            continue
        label = match.group("label").lower()
        for text, kind in CHECKBOX_LABELS:
            if text in label and kind not in boxes:
                boxes[kind] = match.group("mark") in "xX"
    return boxes


def extract_description(overview: list[str]) -> str:
    """Return the author's explanation of the PR from the overview lines."""
    for i, line in enumerate(overview):
        _, prompt, rest = line.partition(DESCRIPTION_PROMPT)
        if prompt:
            if rest.strip():
                return rest.strip()
            # Prompt ends its line; the description follows it (e.g. a bullet list).
            following = [text.strip() for text in overview[i + 1 :]]
            return " ".join(text for text in following if text)
    # Template prompts were removed; treat the remaining prose as the description.
    prose = [line.strip() for line in overview if ISSUE_PROMPT not in line]
    return " ".join(text for text in prose if text)


def validate(body: str | None) -> list[Deficiency]:
    """Return the deficiencies of a PR body, in check order. Empty means valid."""
    sections = parse_sections(body)
    outcome = []

    overview = sections.get(Section.OVERVIEW)
    if overview is None:
        outcome.append(Deficiency.MISSING_OVERVIEW)
    else:
        description = extract_description(overview)
        if not description or description == DESCRIPTION_PLACEHOLDER:
            outcome.append(Deficiency.MISSING_DESCRIPTION)

    checklist = sections.get(Section.CHECKLIST)
    if checklist is None:
        outcome.append(Deficiency.MISSING_CHECKLIST)
    else:
        boxes = parse_checkboxes(checklist)
        if not boxes.get(Checkbox.LINT, False):
            outcome.append(Deficiency.UNCHECKED_LINT)
        if not boxes.get(Checkbox.MAINTAINER_EDITS, False):
            outcome.append(Deficiency.UNCHECKED_MAINTAINER_EDITS)

    return outcome


def compose(outcome: list[Deficiency], author_login: str) -> str | None:
    """
    Build the comment for `author_login`, or None if there is nothing to report.

    Clauses of the same group are joined into one paragraph; groups are
    separated by "<br>Also, ".
    """
    paragraphs = []
    for group in CLAUSE_GROUPS:
        clauses = [CLAUSES[d] for d in group if d in outcome]
        if clauses:
            rest = [_capitalize(clause) for clause in clauses[1:]]
            paragraphs.append(" ".join([clauses[0], *rest]))
    if not paragraphs:
        return None
    return f"Hi @{author_login}, " + GROUP_SEPARATOR.join(paragraphs) + CLOSING


def _section_kind(title: str) -> Section | None:
    title = title.strip("# ").lower()
    for text, kind in SECTION_HEADERS:
        if title == text:
            return kind
    return None


def _capitalize(clause: str) -> str:
    return clause[:1].upper() + clause[1:]
