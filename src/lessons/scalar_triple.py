# lessons/scalar_triple.py
import numpy as np

from config import BATCH_SAMPLES, HEIGHT_DEMO_RANGE, UNIT_RANGE
from core.batch import batch_scalar_triple
from core.operations import cross, dot, scalar_triple
from core.utils import rand_float, random_vector3
from core.vector import Vector3, format_scalar, nearly_equal
from lessons.lesson import Lesson


class ScalarTripleLesson(Lesson):
    """
    [a, b, c] = Dot(Cross(a, b), c), the signed volume of the parallelepiped
    spanned by a, b and c.
    """
    name = "scalar-triple"
    title = "Scalar Triple Product"

    def run_steps(self) -> None:
        self.unit_cube()
        self.height_only()
        a, b, c, volume = self.arbitrary_volume()
        self.shear_invariance(a, b, c, volume)
        self.permutations(a, b, c)
        self.batch_shear()

    def unit_cube(self) -> None:
        a = Vector3(1, 0, 0)
        b = Vector3(0, 1, 0)
        c = Vector3(0, 0, 1)
        if self.check("unit cube volume", nearly_equal(scalar_triple(a, b, c), 1.0)):
            self.say("The volume of the unit cube is 1.")

    def height_only(self) -> None:
        # Only the height above the a-b plane matters, so any c with z = 1 keeps volume 1
        a = Vector3(1, 0, 0)
        b = Vector3(0, 1, 0)
        low, high = HEIGHT_DEMO_RANGE
        for _ in range(self.trials):
            c = Vector3(rand_float(self.rng, low, high), rand_float(self.rng, low, high), 1)
            if self.check(f"volume with c = {c}", nearly_equal(scalar_triple(a, b, c), 1.0)):
                self.say(f"c = {c}, yet volume is still 1.")

    def arbitrary_volume(self):
        low, high = UNIT_RANGE
        a = random_vector3(self.rng, low, high)
        b = random_vector3(self.rng, low, high)
        c = random_vector3(self.rng, low, high)
        a_cross_b = cross(a, b)
        volume = dot(a_cross_b, c)
        self.say(f"a = {a}, b = {b}, and c = {c}")
        self.say(f" giving Cross(a, b) = {a_cross_b} and volume = {format_scalar(volume)}")
        return a, b, c, volume

    def shear_invariance(self, a: Vector3, b: Vector3, c: Vector3, volume: float) -> None:
        # a and b span the base plane; sliding c within a plane parallel to it keeps the volume
        low, high = UNIT_RANGE
        for _ in range(self.trials):
            s = rand_float(self.rng, low, high)
            t = rand_float(self.rng, low, high)
            c_prime = c + s * a + t * b
            if self.check(f"volume with c' = {c_prime}", nearly_equal(scalar_triple(a, b, c_prime), volume)):
                self.say(f"cprime = {c_prime}, yet volume is still {format_scalar(volume)}.")

    def permutations(self, a: Vector3, b: Vector3, c: Vector3) -> None:
        abc = scalar_triple(a, b, c)
        cyclic = (nearly_equal(abc, scalar_triple(b, c, a))
                  and nearly_equal(abc, scalar_triple(c, a, b)))
        if self.check("cyclic permutations agree", cyclic):
            self.say(f"[a, b, c] = [b, c, a] = [c, a, b] = {format_scalar(abc)}")
        odd = (nearly_equal(-abc, scalar_triple(c, b, a))
               and nearly_equal(-abc, scalar_triple(b, a, c))
               and nearly_equal(-abc, scalar_triple(a, c, b)))
        if self.check("odd permutations negate", odd):
            self.say(f"[c, b, a] = [b, a, c] = [a, c, b] = {format_scalar(-abc)}")

    def batch_shear(self) -> None:
        gen = np.random.default_rng(self.rng.getrandbits(64))
        low, high = UNIT_RANGE
        a = gen.uniform(low, high, size=(BATCH_SAMPLES, 3))
        b = gen.uniform(low, high, size=(BATCH_SAMPLES, 3))
        c = gen.uniform(low, high, size=(BATCH_SAMPLES, 3))
        st = gen.uniform(low, high, size=(BATCH_SAMPLES, 2))
        sheared = c + st[:, :1] * a + st[:, 1:] * b
        agree = np.allclose(batch_scalar_triple(a, b, sheared), batch_scalar_triple(a, b, c), atol=1e-9)
        if self.check(f"shear invariance over {BATCH_SAMPLES} samples", agree):
            self.say(f"Shear invariance held for {BATCH_SAMPLES} random parallelepipeds.")
