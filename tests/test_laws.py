"""Fantasy-Land laws for every algebra Maybe implements."""

import pytest

from python_maybe import Just, Maybe, Nothing, compose_unary, const, identity


def add_two(x):
    return x + 2


def twice(x):
    return x * 2


def extract(m):
    return m.either(const("nothing"), identity)


class TestFunctor:
    @pytest.mark.parametrize("m", [Just([1, 2]), Just("x"), Just({"a": 1}), Nothing()])
    def test_identity(self, m):
        assert m.map(identity).equals(m)

    def test_identity_of_none(self, nothing_value):
        assert Just(None).map(identity).value_or(nothing_value) == nothing_value

    @pytest.mark.parametrize("m", [Just(10), Just([1, 2, 3]), Nothing()])
    def test_composition(self, m):
        assert m.map(compose_unary(add_two, twice)).equals(m.map(twice).map(add_two))


class TestApply:
    def test_composition(self, nothing_value):
        m = Just(identity)
        j = Just(3)
        n = Nothing()

        def compose(f):
            return lambda g: lambda x: f(g(x))

        a = m.map(compose).ap(m).ap(m)
        b = m.ap(m.ap(m))

        assert a.ap(j).value_or(nothing_value) == b.ap(j).value_or(nothing_value) == 3
        assert a.ap(n).value_or(nothing_value) == b.ap(n).value_or(nothing_value)


class TestApplicative:
    def test_identity(self):
        assert Just(identity).ap(Just(3)).value_or("Nothing") == 3

    def test_homomorphism(self):
        assert Just(identity).ap(Maybe.of(3)).equals(Maybe.of(identity(3)))

    def test_interchange(self):
        u = Just(twice)

        def apply_to(x):
            return lambda f: f(x)

        assert u.ap(Maybe.of(3)).equals(Maybe.of(apply_to(3)).ap(u))

    def test_function_may_sit_either_side(self):
        m = Just(identity)
        j = Just(3)

        assert str(j.ap(m)) == "Just 3"
        assert str(m.ap(j)) == "Just 3"
        assert str(j.ap(j)) == "Nothing"


class TestChain:
    @pytest.mark.parametrize("m", [Just(10), Nothing()])
    def test_associativity(self, m):
        def f(x):
            return Maybe.of(x + 2)

        def g(x):
            return Maybe.of(x + 10)

        assert m.chain(f).chain(g).equals(m.chain(lambda y: f(y).chain(g)))

    def test_associativity_with_absence(self):
        def f(x):
            return Nothing() if x > 5 else Just(x)

        def g(x):
            return Just(x * 3)

        for m in (Just(1), Just(10)):
            assert m.chain(f).chain(g).equals(m.chain(lambda y: f(y).chain(g)))


class TestMonad:
    def test_left_identity(self):
        def f(x):
            return Just(x * 4)

        assert Maybe.of(3).chain(f).equals(f(3))

    @pytest.mark.parametrize("m", [Just(3), Just([1]), Nothing()])
    def test_right_identity(self, m):
        assert m.chain(Maybe.of).equals(m)


class TestAlt:
    @pytest.mark.parametrize(
        "a, b, c",
        [
            (Maybe.of("a"), Nothing(), Maybe.of("c")),
            (Nothing(), Nothing(), Maybe.of("c")),
            (Nothing(), Maybe.of("b"), Maybe.of("c")),
            (Nothing(), Nothing(), Nothing()),
        ],
    )
    def test_associativity(self, a, b, c):
        assert a.alt(b).alt(c).equals(a.alt(b.alt(c)))

    def test_distributivity(self):
        a = Maybe.of("a")
        b = Nothing()

        assert extract(a.alt(b).map(identity)) == extract(
            a.map(identity).alt(b.map(identity))
        )


class TestPlus:
    def test_identity(self):
        a = Maybe.of("a")

        assert extract(a.alt(Maybe.zero())) == extract(a)
        assert extract(Maybe.zero().alt(a)) == extract(a)

    def test_annihilation(self):
        assert extract(Maybe.zero().map(identity)) == extract(Maybe.zero())


class TestAlternative:
    def test_distributivity(self):
        x = Maybe.of(11)
        f = Maybe.of(identity)
        g = Maybe.of(lambda v: v * 12)
        n = Nothing()

        assert x.ap(f.alt(g)).equals(x.ap(f).alt(x.ap(g)))
        assert x.ap(n.alt(g)).equals(x.ap(n).alt(x.ap(g)))
        assert x.ap(n.alt(g)) == Just(132)

    def test_annihilation(self):
        assert Maybe.of(11).ap(Maybe.zero()).equals(Maybe.zero())


class TestSemigroup:
    @pytest.mark.parametrize(
        "a, b, c",
        [
            (Just(["a"]), Just(["b"]), Just(["c"])),
            (Just("a"), Nothing(), Just("c")),
            (Just((1,)), Just((2,)), Just((3,))),
            (Just(None), Just([1]), Just([2])),
        ],
    )
    def test_associativity(self, a, b, c):
        assert a.concat(b).concat(c).equals(a.concat(b.concat(c)))

    def test_result_kind(self):
        assert isinstance(extract(Just(["a"]).concat(Just(["b"]))), list)


class TestMonoid:
    @pytest.mark.parametrize("a", [Maybe.of("a"), Just([1]), Nothing()])
    def test_identity(self, a):
        assert a.concat(Maybe.empty()).equals(a)
        assert Maybe.empty().concat(a).equals(a)


class TestSetoid:
    a = Just([1, "joe"])
    b = Just([1, "joe"])
    c = Just(["joe", 1])
    d = Just([1, "joe"])

    def test_reflexivity(self):
        assert self.a.equals(self.a)
        assert Nothing().equals(Nothing())

    def test_reflexivity_holds_for_nan(self):
        m = Just(float("nan"))
        assert m.equals(m)
        assert Just(float("nan")).equals(Just(float("nan")))
        assert Just([float("nan")]).equals(Just([float("nan")]))
        assert hash(Just(float("nan"))) == hash(Just(float("nan")))

    def test_symmetry(self):
        assert self.a.equals(self.b) == self.b.equals(self.a)
        assert self.a.equals(self.c) == self.c.equals(self.a)

    def test_transitivity(self):
        assert self.a.equals(self.b) and self.b.equals(self.d)
        assert self.a.equals(self.d)
