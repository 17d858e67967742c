import io
import random

import pytest

from lessons import LESSONS, Lesson, ProjectionLesson, ScalarTripleLesson


@pytest.mark.parametrize("seed", [0, 1, 2024])
def test_scalar_triple_lesson_passes_every_check(seed):
    out = io.StringIO()
    report = ScalarTripleLesson(random.Random(seed), out=out, trials=10).run()

    # unit cube + 10 heights + 10 shears + 2 permutation checks + batch
    assert report.checks == 24
    assert report.ok, report.failures
    text = out.getvalue()
    assert "The volume of the unit cube is 1." in text
    lines = text.splitlines()
    assert sum(line.startswith("c = ") for line in lines) == 10
    assert sum(line.startswith("cprime = ") for line in lines) == 10


@pytest.mark.parametrize("seed", [0, 7])
def test_projection_lesson_passes_every_check(seed):
    out = io.StringIO()
    report = ProjectionLesson(random.Random(seed), out=out, trials=5).run()

    assert report.ok, report.failures
    assert report.checks > 0
    assert "proj_b(a)" in out.getvalue()


def test_lesson_records_failures():
    lesson = ScalarTripleLesson(random.Random(0), out=io.StringIO())
    assert lesson.check("holds", True)
    assert not lesson.check("broken", False)
    assert lesson.report.checks == 2
    assert lesson.report.failed == 1
    assert lesson.report.failures == ["broken"]
    assert not lesson.report.ok


def test_base_lesson_requires_steps():
    with pytest.raises(NotImplementedError):
        Lesson(random.Random(0), out=io.StringIO()).run()


def test_lesson_rejects_zero_trials():
    with pytest.raises(ValueError):
        ProjectionLesson(random.Random(0), trials=0)


def test_registry_order():
    assert list(LESSONS) == ["scalar-triple", "projection"]


def test_projection_onto_zero_vector_is_reported_as_skipped():
    from core.vector import Vector3

    out = io.StringIO()
    lesson = ProjectionLesson(random.Random(0), out=out)
    lesson.decompose(Vector3(1, 2, 3), Vector3())

    assert lesson.report.skipped == 1
    assert lesson.report.checks == 0
    assert "Skipped: b = (0, 0, 0) has no usable direction" in out.getvalue()
