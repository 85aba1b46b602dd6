"""Monic integer polynomials built from their roots."""


def coefficients_from_roots(roots) -> list[int]:
    """Coefficients of prod (x - r) over roots, constant term first.

    Each step multiplies the running polynomial Q by (x - r): the x*Q part
    shifts every coefficient up one index and the -r*Q part scales it in
    place. Returns [1] for no roots.
    """
    coeffs = [1]
    for r in roots:
        new_coeffs = [0] * (len(coeffs) + 1)
        for i, c in enumerate(coeffs):
            new_coeffs[i] += -r * c
            new_coeffs[i + 1] += c
        coeffs = new_coeffs
    return coeffs


class Polynomial:
    """Polynomial over the integers. coeffs[0] = constant term."""

    __slots__ = ('_coeffs',)

    def __init__(self, coeffs):
        self._coeffs = tuple(coeffs)

    @staticmethod
    def from_roots(roots) -> 'Polynomial':
        """Monic polynomial whose roots are exactly `roots` (with multiplicity)."""
        return Polynomial(coefficients_from_roots(roots))

    @property
    def degree(self) -> int:
        return len(self._coeffs) - 1

    @property
    def low_to_high(self) -> tuple[int, ...]:
        return self._coeffs

    @property
    def high_to_low(self) -> tuple[int, ...]:
        return self._coeffs[::-1]

    @property
    def constant(self) -> int:
        return self._coeffs[0]

    @property
    def leading(self) -> int:
        return self._coeffs[-1]

    def __eq__(self, other):
        if isinstance(other, Polynomial):
            return self._coeffs == other._coeffs
        return NotImplemented

    def __hash__(self):
        return hash(self._coeffs)

    def __repr__(self):
        return f"Polynomial({list(self._coeffs)!r})"
