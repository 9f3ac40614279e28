from __future__ import annotations
from typing import Tuple
from comparable import RationalLike


def gcd(m: int, n: int) -> int:
	"""Euclidean gcd. The result takes the sign of n (of m when n is 0),
	so dividing a (num, den) pair by gcd(num, den) leaves den positive.
	gcd(0, 0) is 0; dividing by it is the caller's problem."""
	while n != 0:
		m, n = n, m % n
	return m


class RationalError(ArithmeticError):
	"""Base for rational arithmetic failures.

	`result` holds the degenerate zero value the operation produced."""
	def __init__(self, message: str, result: Rational | None = None) -> None:
		super().__init__(message)
		self.result = result if result is not None else Rational(0, 0)


class DivideByZeroError(RationalError, ZeroDivisionError):
	pass


class InvertZeroError(RationalError, ZeroDivisionError):
	pass


def _check_int(value: object, name: str) -> int:
	if isinstance(value, bool) or not isinstance(value, int):
		raise TypeError(f"{name} must be an int, got {type(value).__name__}")
	return value


class Rational:
	"""Exact fraction numerator/denominator.

	Not reduced on construction and not checked for a zero denominator.
	With a zero denominator, to_float, less_than and is_int raise
	ZeroDivisionError, as does any reduction of 0/0 (gcd(0, 0) is 0).
	add, multiply, to_lowest_terms and equal do not raise: they carry the
	x/0 value along (3/0 reduces to 1/0, and all such values compare equal)."""
	__slots__ = ("_num", "_den")
	def __init__(self, num: int, den: int = 1) -> None:
		self._num = _check_int(num, "numerator")
		self._den = _check_int(den, "denominator")
	@staticmethod
	def _reduced(a: int, b: int) -> Rational:
		g = gcd(a, b)
		return Rational(a // g, b // g)
	def numerator(self) -> int:
		return self._num
	def denominator(self) -> int:
		return self._den
	def split(self) -> Tuple[int, int]:
		return self._num, self._den
	def to_float(self) -> float:
		return self._num / self._den
	def to_string(self) -> str:
		return f"{self._num}/{self._den}"
	def _key(self) -> Tuple[int, int]:
		g = gcd(self._num, self._den)
		return self._num // g, self._den // g
	def equal(self, other: RationalLike) -> bool:
		g = gcd(other.numerator(), other.denominator())
		return self._key() == (other.numerator() // g, other.denominator() // g)
	def less_than(self, other: RationalLike) -> bool:
		# float approximation; exact only once the floats overflow
		try:
			return self.to_float() < other.to_float()
		except OverflowError:
			return self._exact_less(other)
	def _exact_less(self, other: RationalLike) -> bool:
		# reduced pairs have positive denominators
		a, b = self._key()
		g = gcd(other.numerator(), other.denominator())
		c, d = other.numerator() // g, other.denominator() // g
		return a * d < c * b
	def is_int(self) -> bool:
		return self._num % self._den == 0
	def is_zero(self) -> bool:
		return self._num == 0
	def add(self, other: RationalLike) -> Rational:
		n2, d2 = other.split()
		return Rational._reduced(self._num * d2 + n2 * self._den, self._den * d2)
	def multiply(self, other: RationalLike) -> Rational:
		n2, d2 = other.split()
		return Rational._reduced(self._num * n2, self._den * d2)
	def divide(self, other: RationalLike) -> Rational:
		n2, d2 = other.split()
		a, b = self._num * d2, self._den * n2
		if b == 0:
			raise DivideByZeroError("can not divide by zero")
		return Rational._reduced(a, b)
	def invert(self) -> Rational:
		if self._num == 0:
			raise InvertZeroError(f"cannot invert {self.to_string()}")
		return Rational(self._den, self._num)
	def to_lowest_terms(self) -> Rational:
		return Rational(*self._key())
	def __add__(self, other: object) -> Rational:
		if not isinstance(other, Rational):
			return NotImplemented
		return self.add(other)
	def __mul__(self, other: object) -> Rational:
		if not isinstance(other, Rational):
			return NotImplemented
		return self.multiply(other)
	def __truediv__(self, other: object) -> Rational:
		if not isinstance(other, Rational):
			return NotImplemented
		return self.divide(other)
	def __eq__(self, other: object) -> bool:
		if not isinstance(other, Rational):
			return NotImplemented
		return self.equal(other)
	def __hash__(self) -> int:
		return hash(self._key())
	def __lt__(self, other: object) -> bool:
		if not isinstance(other, Rational):
			return NotImplemented
		return self.less_than(other)
	def __le__(self, other: object) -> bool:
		if not isinstance(other, Rational):
			return NotImplemented
		return self.less_than(other) or self.equal(other)
	def __gt__(self, other: object) -> bool:
		if not isinstance(other, Rational):
			return NotImplemented
		return other.less_than(self)
	def __ge__(self, other: object) -> bool:
		if not isinstance(other, Rational):
			return NotImplemented
		return other.less_than(self) or self.equal(other)
	def __float__(self) -> float:
		return self.to_float()
	def __str__(self) -> str:
		return self.to_string()
	def __repr__(self) -> str:
		return f"Rational({self._num}, {self._den})"


def harmonic_sum(n: int) -> Rational:
	if n < 1:
		raise ValueError(f"harmonic sum needs n >= 1, got {n}")
	total = Rational(1, 1)
	for i in range(2, n + 1):
		total = total.add(Rational(1, i))
	return total
