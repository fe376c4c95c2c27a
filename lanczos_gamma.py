import numpy as np

# Coefficienti della serie di Lanczos (g=5, n=6)
LANCZOS_COEFFS = np.array([
    76.18009173,
    -86.50532033,
    24.01409822,
    -1.231739516,
    0.00120858003,
    -0.000005363820,
])

SQRT_2PI = np.sqrt(2 * np.pi)


def _as_output(val):
    # scalare in ingresso -> float in uscita
    return float(val) if np.ndim(val) == 0 else val


def log_gamma(x):
    """
    Logaritmo naturale della funzione Gamma, approssimazione di Lanczos.
    ln G(x) = (x-0.5)*ln(x+4.5) - (x+4.5) + ln(ser*sqrt(2*pi))
    ser = 1 + SOMMA(i=0,...,5){c_i / (x+i)}

    Valida per x > 0. Nessun controllo sul dominio: per x <= 0 si ottengono
    nan/inf dall'aritmetica floating point.
    """
    x = np.asarray(x, dtype=float)

    # x colonna (..., 1) e i riga (6,) per il broadcasting, come per la base di Bernstein
    i = np.arange(len(LANCZOS_COEFFS))
    ser = 1.0 + np.sum(LANCZOS_COEFFS / (x[..., np.newaxis] + i), axis=-1)

    tmp = (x - 0.5) * np.log(x + 4.5) - (x + 4.5)
    return _as_output(tmp + np.log(ser * SQRT_2PI))


def gamma(x):
    """G(x) = exp(ln G(x))"""
    return _as_output(np.exp(log_gamma(x)))
