from typing import NamedTuple

import numpy as np

from lanczos_gamma import gamma


class DomainError(ValueError):
    """Argomento fuori dall'intervallo (0, 1) o parametri di forma non positivi."""


class UndefinedResultError(ArithmeticError):
    """La grandezza richiesta non e' definita per questi parametri (NaN)."""


class ShapeParameters(NamedTuple):
    a: float
    b: float


def _as_output(val):
    return float(val) if np.ndim(val) == 0 else val


def _check_support(x):
    x = np.asarray(x, dtype=float)
    # NaN non supera il confronto, quindi viene rifiutato anche lui
    if not np.all((x > 0) & (x < 1)):
        raise DomainError(f"x must lie in the open interval (0, 1), got {x}")
    return x


class KumaraswamyDist:
    """
    Distribuzione di Kumaraswamy su (0, 1) con parametri di forma a, b > 0.
    f(x) = a*b*x^(a-1) * (1-x^a)^(b-1)
    F(x) = 1 - (1-x^a)^b

    Tutte le funzioni in x accettano scalari o array numpy.
    """

    def __init__(self, a, b):
        # la positivita' di a, b viene controllata da pdf, non qui
        self._params = ShapeParameters(float(a), float(b))

    @property
    def params(self):
        return self._params

    @property
    def a(self):
        return self._params.a

    @property
    def b(self):
        return self._params.b

    def __repr__(self):
        return f"KumaraswamyDist(a={self.a:g}, b={self.b:g})"

    def pdf(self, x):
        """
        Densita' di probabilita'.
        f(x;a,b) = a * b * x^(a-1) * (1-x^a)^(b-1),  x in (0,1), a,b > 0
        """
        x = _check_support(x)
        if not (self.a > 0 and self.b > 0):
            raise DomainError(f"shape parameters must be positive, got a={self.a}, b={self.b}")

        val = self.a * self.b * (x ** (self.a - 1)) * ((1 - x ** self.a) ** (self.b - 1))
        return _as_output(val)

    def cdf(self, x):
        """F(x;a,b) = 1 - (1-x^a)^b"""
        x = _check_support(x)
        return _as_output(1 - (1 - x ** self.a) ** self.b)

    def ppf(self, q):
        """
        Funzione quantile, inversa esatta della CDF.
        F^-1(q;a,b) = (1 - (1-q)^(1/b))^(1/a)
        """
        q = _check_support(q)
        return _as_output((1 - (1 - q) ** (1 / self.b)) ** (1 / self.a))

    def survival(self, x):
        """S(x) = 1 - F(x), probabilita' che la variabile superi x."""
        return _as_output(1 - np.asarray(self.cdf(x)))

    def hazard(self, x):
        """
        Funzione di rischio h(x) = f(x) / S(x).
        Vicino a x=1 la S(x) puo' andare a zero: il risultato e' inf (o nan), senza eccezioni.
        """
        num = np.asarray(self.pdf(x))
        den = np.asarray(self.survival(x))
        with np.errstate(divide='ignore', invalid='ignore'):
            return _as_output(num / den)

    def cumulative_hazard(self, x):
        """H(x) = -ln S(x)"""
        sf = np.asarray(self.survival(x))
        with np.errstate(divide='ignore'):
            return _as_output(-np.log(sf))

    def median(self):
        """md = (1 - 2^(-1/b))^(1/a)"""
        return (1 - 2 ** (-1 / self.b)) ** (1 / self.a)

    def mode(self):
        """
        mode = ((a-1) / (a*b-1))^(1/a)

        - a>1 e b>1: unimodale (moda)
        - a<1 e b<1: uniantimodale (antimoda)
        - altrimenti la distribuzione e' monotona o costante e la moda non esiste
        """
        a, b = self._params
        if not ((a > 1 and b > 1) or (a < 1 and b < 1)):
            raise UndefinedResultError(f"mode is undefined for a={a}, b={b}")

        return ((a - 1) / (a * b - 1)) ** (1 / a)

    def moment(self, n):
        """
        Momento grezzo di ordine n.
        E[X^n] = b * G(1+n/a) * G(b) / G(1+n/a+b)
        """
        a, b = self._params
        return b * gamma(1 + n / a) * gamma(b) / gamma(1 + n / a + b)

    def mean(self):
        return self.moment(1)

    def variance(self):
        """var = m2 - m1^2"""
        return self.moment(2) - self.moment(1) ** 2

    def standard_deviation(self):
        return float(np.sqrt(self.variance()))
