from __future__ import annotations

from pathlib import Path
import sys

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))


@pytest.fixture
def pets_text():
    return (
        "This is sentence one. This is sentence two about cats. Cats are great pets. "
        "Dogs are great too. This is the final sentence."
    )


@pytest.fixture
def long_text():
    topics = [
        "Python packaging uses a pyproject file.",
        "The build backend reads the pyproject file.",
        "Wheels are built from the source tree.",
        "Tests run against the installed wheel.",
        "The wheel contains compiled bytecode.",
        "Releases are tagged after tests pass.",
        "Changelogs list every release.",
        "The source tree holds a tests folder.",
        "Packaging metadata lives in the pyproject file.",
        "Contributors open pull requests.",
        "Reviewers check the tests first.",
        "Documentation explains packaging steps.",
    ]
    return " ".join(topics)


@pytest.fixture
def chat_items():
    return [
        "How do I speed up my database queries?",
        "Add an index on the columns you filter by. Indexes make lookups faster.",
        "Will an index slow down writes?",
        "Yes, every index adds write overhead. Keep only the indexes your queries need.",
        "Thanks, that makes sense!",
    ]
