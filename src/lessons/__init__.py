from lessons.lesson import Lesson, LessonReport
from lessons.projection import ProjectionLesson
from lessons.scalar_triple import ScalarTripleLesson

# Run order of the walkthrough
LESSONS = {
    ScalarTripleLesson.name: ScalarTripleLesson,
    ProjectionLesson.name: ProjectionLesson,
}

__all__ = ["LESSONS", "Lesson", "LessonReport", "ProjectionLesson", "ScalarTripleLesson"]
