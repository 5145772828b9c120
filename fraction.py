from __future__ import annotations
import logging
import math
from typing import Dict, Type, Union

import numpy as np

logger = logging.getLogger(__name__)

DEFAULT_DTYPE: Type[np.signedinteger] = np.int32

DTYPES: Dict[str, Type[np.signedinteger]] = {
	"int8": np.int8,
	"int16": np.int16,
	"int32": np.int32,
	"int64": np.int64,
}

IntLike = Union[int, np.integer]


def resolve_dtype(dtype: str | type) -> Type[np.signedinteger]:
	"""Map a dtype name or type onto a numpy signed integer scalar type."""
	if isinstance(dtype, str):
		if dtype not in DTYPES:
			raise ValueError(f"Unknown integer type {dtype!r}")
		return DTYPES[dtype]
	if not (isinstance(dtype, type) and issubclass(dtype, np.signedinteger)):
		raise TypeError(f"Signed integer type required, got {dtype!r}")
	return dtype


def gcd(a: np.signedinteger, b: np.signedinteger) -> np.signedinteger:
	"""Euclidean remainder gcd. `a` is expected non-negative and `b` non-zero."""
	r = a % b
	while r:
		a, b = b, r
		r = a % b
	return b


def _is_int(value: object) -> bool:
	# bool is an int subclass but not a fraction operand
	return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


def _fit(value: IntLike, dtype: Type[np.signedinteger]) -> np.signedinteger:
	info = np.iinfo(dtype)
	if not info.min <= int(value) <= info.max:
		raise OverflowError(f"{int(value)} does not fit {dtype.__name__}")
	return dtype(value)


class Fraction:
	"""Exact fraction num/den over a fixed-width signed integer type.

	Finite values are kept reduced with a positive denominator. A zero
	denominator is stored as is: n/0 is infinite and 0/0 is undefined. Those
	states propagate through arithmetic instead of raising.
	"""
	__slots__ = ("_num", "_den", "_dtype")

	def __init__(self, num: IntLike = 0, den: IntLike | None = None, *, dtype: str | type | None = None) -> None:
		if not _is_int(num) or (den is not None and not _is_int(den)):
			raise TypeError("Integer required")
		if isinstance(num, np.unsignedinteger) or isinstance(den, np.unsignedinteger):
			raise TypeError("Signed integer required, got an unsigned numpy scalar")
		if dtype is None:
			scalars = [v for v in (num, den) if isinstance(v, np.signedinteger)]
			dtype = np.result_type(*scalars).type if scalars else DEFAULT_DTYPE
		self._dtype = resolve_dtype(dtype)
		self._num = _fit(num, self._dtype)
		if den is None:
			self._den = self._dtype(1)
			return
		self._den = _fit(den, self._dtype)
		if not self._den > 0:
			# a zero denominator flips the numerator too
			with np.errstate(over="ignore"):
				self._num = -self._num
				self._den = -self._den
		self._reduce()

	@classmethod
	def _raw(cls, num: np.signedinteger, den: np.signedinteger, dtype: Type[np.signedinteger]) -> Fraction:
		f = cls.__new__(cls)
		f._num, f._den, f._dtype = num, den, dtype
		f._reduce()
		return f

	def _reduce(self) -> None:
		if self._den == 0:
			return
		with np.errstate(over="ignore"):
			if self._den < 0:
				self._num = -self._num
				self._den = -self._den
			div = gcd(self._num if self._num >= 0 else -self._num, self._den)
			self._num = self._num // div
			self._den = self._den // div

	def _coerce(self, other: object) -> Fraction | None:
		if isinstance(other, Fraction):
			if other._dtype is not self._dtype:
				raise TypeError(
					f"Cannot mix Fraction[{self._dtype.__name__}] and Fraction[{other._dtype.__name__}]"
				)
			return other
		if _is_int(other):
			return Fraction(other, dtype=self._dtype)
		return None

	def _result(self, num: np.signedinteger, den: np.signedinteger, op: str, other: Fraction) -> Fraction:
		f = Fraction._raw(num, den, self._dtype)
		if den == 0:
			logger.debug("%s %s %s gave degenerate %s", self, op, other, f)
		return f

	# arithmetic

	def __add__(self, other: Fraction | IntLike) -> Fraction:
		o = self._coerce(other)
		if o is None:
			return NotImplemented
		with np.errstate(over="ignore"):
			num = self._num * o._den + o._num * self._den
			den = self._den * o._den
		return self._result(num, den, "+", o)

	def __sub__(self, other: Fraction | IntLike) -> Fraction:
		o = self._coerce(other)
		if o is None:
			return NotImplemented
		with np.errstate(over="ignore"):
			num = self._num * o._den - o._num * self._den
			den = self._den * o._den
		return self._result(num, den, "-", o)

	def __mul__(self, other: Fraction | IntLike) -> Fraction:
		o = self._coerce(other)
		if o is None:
			return NotImplemented
		with np.errstate(over="ignore"):
			num = self._num * o._num
			den = self._den * o._den
		return self._result(num, den, "*", o)

	def __truediv__(self, other: Fraction | IntLike) -> Fraction:
		o = self._coerce(other)
		if o is None:
			return NotImplemented
		# multiply by the reciprocal
		with np.errstate(over="ignore"):
			num = self._num * o._den
			den = self._den * o._num
		return self._result(num, den, "/", o)

	def __radd__(self, other: IntLike) -> Fraction:
		o = self._coerce(other)
		if o is None:
			return NotImplemented
		return o + self

	def __rsub__(self, other: IntLike) -> Fraction:
		o = self._coerce(other)
		if o is None:
			return NotImplemented
		return o - self

	def __rmul__(self, other: IntLike) -> Fraction:
		o = self._coerce(other)
		if o is None:
			return NotImplemented
		return o * self

	def __rtruediv__(self, other: IntLike) -> Fraction:
		o = self._coerce(other)
		if o is None:
			return NotImplemented
		return o / self

	def __neg__(self) -> Fraction:
		with np.errstate(over="ignore"):
			return Fraction._raw(-self._num, self._den, self._dtype)

	# comparison

	def __eq__(self, other: object) -> bool:
		if isinstance(other, Fraction):
			return (int(self._num), int(self._den)) == (int(other._num), int(other._den))
		if _is_int(other):
			return (int(self._num), int(self._den)) == (int(other), 1)
		return False

	def __ne__(self, other: object) -> bool:
		return not self == other

	def __gt__(self, other: Fraction | IntLike) -> bool:
		o = self._coerce(other)
		if o is None:
			return NotImplemented
		# meaningless when either denominator is zero
		with np.errstate(over="ignore"):
			return bool(self._num * o._den > o._num * self._den)

	def __lt__(self, other: Fraction | IntLike) -> bool:
		o = self._coerce(other)
		if o is None:
			return NotImplemented
		return o > self

	def __ge__(self, other: Fraction | IntLike) -> bool:
		o = self._coerce(other)
		if o is None:
			return NotImplemented
		return not o > self

	def __le__(self, other: Fraction | IntLike) -> bool:
		o = self._coerce(other)
		if o is None:
			return NotImplemented
		return not self > o

	def __hash__(self) -> int:
		# integral values hash like the ints they compare equal to
		if self._den == 1:
			return hash(int(self._num))
		return hash((int(self._num), int(self._den)))

	# state

	def is_finite(self) -> bool:
		return bool(self._den != 0)

	def is_infinite(self) -> bool:
		return bool(self._den == 0 and self._num != 0)

	def is_undefined(self) -> bool:
		return bool(self._den == 0 and self._num == 0)

	def is_zero(self) -> bool:
		return bool(self._num == 0 and self._den != 0)

	def is_int(self) -> bool:
		return bool(self._den == 1)

	def numerator(self) -> np.signedinteger:
		return self._num

	def denominator(self) -> np.signedinteger:
		return self._den

	def dtype(self) -> Type[np.signedinteger]:
		return self._dtype

	def to_float(self) -> float:
		if self.is_undefined():
			return math.nan
		if self.is_infinite():
			return math.inf if self._num > 0 else -math.inf
		return int(self._num) / int(self._den)

	def to_string(self) -> str:
		if self.is_undefined():
			return "NaN"
		if self.is_infinite():
			return "Inf"
		return f"{int(self._num)}/{int(self._den)}"

	def __str__(self) -> str:
		return self.to_string()

	def __repr__(self) -> str:
		return f"Fraction({int(self._num)}, {int(self._den)}, dtype={self._dtype.__name__})"
