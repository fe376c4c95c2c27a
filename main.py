import os
from datetime import datetime
import numpy as np
import matplotlib.pyplot as plt
from scipy import special
from scipy.integrate import quad, trapezoid

from KumaraswamyDist import KumaraswamyDist, DomainError, UndefinedResultError
from lanczos_gamma import gamma

# =============================================================================
# 1. CONFIGURATION
# =============================================================================

A_PARAM = 0.5
B_PARAM = 0.5

X_PROBE = 0.5  # punto in cui valutare la ppf
NUM_POINTS = 500  # risoluzione griglia
EPS_GRID = 1e-4  # la griglia resta strettamente dentro (0, 1)
GAMMA_CHECK_POINTS = [0.5, 1.0, 2.5, 5.0, 10.0]

OUTPUT_DIR = "img"

distribuzione = KumaraswamyDist(a=A_PARAM, b=B_PARAM)
nome_dist = f"Kumaraswamy(a={A_PARAM}, b={B_PARAM})"
dist_string = f"kumaraswamy_a{A_PARAM}_b{B_PARAM}".replace(".", "")

# =============================================================================
# 2. STATISTICHE
# =============================================================================

print(f"Analisi Distribuzione: {nome_dist}")
print("-" * 60)

try:
    print(f"ppf({X_PROBE}) = {distribuzione.ppf(X_PROBE):.6f}")
except DomainError as e:
    print(f"ppf({X_PROBE}) non calcolabile: {e}")

print(f"Median:   {distribuzione.median():.6f}")
print(f"Mean:     {distribuzione.mean():.6f}")
print(f"Variance: {distribuzione.variance():.6f}")
print(f"Std Dev:  {distribuzione.standard_deviation():.6f}")

try:
    print(f"Mode:     {distribuzione.mode():.6f}")
except UndefinedResultError as e:
    print(f"Mode:     NaN ({e})")

# --- CONFRONTO CON INTEGRAZIONE NUMERICA (scipy) ---
# E[X^n] = integrale su (0,1) di x^n * f(x)
# quad non valuta gli estremi, quindi la pdf resta nel suo dominio
m1_ref, _ = quad(lambda t: t * distribuzione.pdf(t), 0, 1)
m2_ref, _ = quad(lambda t: t ** 2 * distribuzione.pdf(t), 0, 1)
std_ref = np.sqrt(m2_ref - m1_ref ** 2)

print("-" * 60)
print(f"Mean    (quad): {m1_ref:.6f} | err: {abs(m1_ref - distribuzione.mean()):.2e}")
print(f"Std Dev (quad): {std_ref:.6f} | err: {abs(std_ref - distribuzione.standard_deviation()):.2e}")

# --- CONFRONTO GAMMA LANCZOS vs scipy.special.gamma ---
print("-" * 60)
for x_g in GAMMA_CHECK_POINTS:
    g_lanczos = gamma(x_g)
    g_scipy = special.gamma(x_g)
    print(f"Gamma({x_g:>4}) = {g_lanczos:.10f} | scipy: {g_scipy:.10f} | rel err: {abs(g_lanczos / g_scipy - 1):.2e}")

# =============================================================================
# 3. VISUALIZZAZIONE
# =============================================================================

asse_x = np.linspace(EPS_GRID, 1 - EPS_GRID, NUM_POINTS)

pdf_vals = distribuzione.pdf(asse_x)
cdf_vals = distribuzione.cdf(asse_x)
sf_vals = distribuzione.survival(asse_x)
hf_vals = distribuzione.hazard(asse_x)

# la massa sulla griglia troncata deve essere vicina a 1
print("-" * 60)
print(f"Integrale PDF sulla griglia: {trapezoid(pdf_vals, asse_x):.4f}")

fig = plt.figure(figsize=(14, 10))
fig.suptitle(f"{nome_dist}", fontsize=16)
nrows = 2
ncols = 2

curves = [
    (pdf_vals, "PDF"),
    (cdf_vals, "CDF"),
    (sf_vals, "Survival"),
    (hf_vals, "Hazard"),
]

for index, (y_vals, title) in enumerate(curves, start=1):
    ax = fig.add_subplot(nrows, ncols, index)
    ax.plot(asse_x, y_vals, 'k-', linewidth=2)
    if title == "PDF":
        ax.axvline(distribuzione.median(), color='blue', linestyle='--', linewidth=1.5, alpha=0.8, label='Median')
        ax.axvline(distribuzione.mean(), color='red', linestyle='--', linewidth=1.5, alpha=0.8, label='Mean')
        ax.legend(loc='upper right')
    if title == "Hazard":
        # esplode vicino a x=1
        ax.set_yscale('log')
    ax.set_title(title)
    ax.grid(True, alpha=0.3)
    ax.set_xlabel("x")
    ax.set_xlim(0, 1)

plt.tight_layout()

os.makedirs(OUTPUT_DIR, exist_ok=True)
today_str = datetime.now().strftime("%Y%m%d")
file_name = f"{today_str}_{dist_string}.png"
full_path = os.path.join(OUTPUT_DIR, file_name)
fig.savefig(full_path, dpi=300, bbox_inches='tight')
print(f"Grafico salvato in {full_path}")

plt.show()
plt.close(fig)
