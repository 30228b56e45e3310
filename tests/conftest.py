import random
import sys
from pathlib import Path

import pytest

# Add src to sys.path so we can import taskset_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from taskset_toolkit.core.models import Assignment, Task


# Common test fixtures
@pytest.fixture
def rng():
    """Seeded random source for reproducible draws."""
    return random.Random(1234)


@pytest.fixture
def sample_assignment() -> Assignment:
    """Three-task assignment mixing range and list expressions."""
    return Assignment(
        title="Opgavesæt",
        tasks=(
            Task(
                title="Opgave 1",
                body="I disse opgaver skal du løse ligninger.",
                questions=(
                    "A) Løs følgende: \\[100..500]\\x + 2 = 5",
                    "B) Redegør for måden du løste delspørgsmål A på",
                ),
            ),
            Task(
                title="Opgave 2",
                body="Brøker og decimaltal.",
                questions=("A) Beregn \\[1,2,3]\\ + \\[NZQ-5..5]\\",),
            ),
            Task(
                title="Opgave 3",
                body="Naturlige tal.",
                questions=("A) Hvad er \\[N0..10]\\ gange 2?",),
            ),
        ),
    )


@pytest.fixture
def sample_assignment_dict(sample_assignment) -> dict:
    """The sample assignment in its JSON input shape."""
    return sample_assignment.to_dict()
