# lessons/projection.py
from config import EPSILON, UNIT_RANGE
from core.operations import cross, dot, magnitude, normalize, project, reject
from core.utils import random_vector2, random_vector3, random_vector4
from core.vector import Vector3, format_scalar, nearly_equal
from lessons.lesson import Lesson


class ProjectionLesson(Lesson):
    """
    Splits a vector into the part parallel to another vector (projection)
    and the part perpendicular to it (rejection).
    """
    name = "projection"
    title = "Projection and Rejection"

    def run_steps(self) -> None:
        low, high = UNIT_RANGE
        for _ in range(self.trials):
            self.decompose(random_vector3(self.rng, low, high), random_vector3(self.rng, low, high))
        # The same formulas work in any dimension
        self.decompose(random_vector2(self.rng, low, high), random_vector2(self.rng, low, high))
        self.decompose(random_vector4(self.rng, low, high), random_vector4(self.rng, low, high))

    def decompose(self, a, b) -> None:
        if magnitude(b) < EPSILON:
            self.skip(f"b = {b} has no usable direction to project onto")
            return
        parallel = project(a, b)
        perpendicular = reject(a, b)
        self.say(f"a = {a}, b = {b}")
        self.say(f" proj_b(a) = {parallel}, rej_b(a) = {perpendicular}")

        self.check(f"projection + rejection = a for a = {a}", (parallel + perpendicular).is_close(a))

        if self.check("rejection is orthogonal to b", nearly_equal(dot(perpendicular, b), 0.0)):
            self.say(f" Dot(rej_b(a), b) = {format_scalar(dot(perpendicular, b))}")

        if isinstance(b, Vector3):
            self.check("projection is parallel to b", cross(parallel, b).is_close(Vector3()))

        unit = normalize(b)
        if self.check("normalized b has unit length", nearly_equal(dot(unit, unit), 1.0)):
            self.say(f" |b| = {format_scalar(magnitude(b))}, b / |b| = {unit}")
