# core/plotting.py
from __future__ import annotations

import numpy as np
import matplotlib.pyplot as plt
from typing import Any, Dict

# ---------- Policy frequency panels: empirical vs exact per state ----------

def plot_frequency_panels(result: Dict[str, Any], save_path: str) -> None:
    """
    One panel per policy; for each state, grouped bars over actions with the
    empirical frequency (filled) next to the exact probability (outlined).
    result is the output of core.runner.run_frequencies.
    """
    names = result["names"]
    empirical = result["empirical"]   # (P, S, A)
    exact = result["exact"]
    P, S, A = empirical.shape

    ncols = 2
    nrows = max(1, int(np.ceil(P / ncols)))
    fig, axes = plt.subplots(nrows, ncols, figsize=(10, 3.5 * nrows), squeeze=False)

    width = 0.8 / A
    x = np.arange(S)
    for idx, name in enumerate(names):
        ax = axes[idx // ncols][idx % ncols]
        for a in range(A):
            offset = (a - (A - 1) / 2.0) * width
            bars = ax.bar(x + offset, empirical[idx, :, a], width=width * 0.9,
                          alpha=0.7, label=f"a={a}")
            c = bars.patches[0].get_facecolor() if bars.patches else None
            ax.bar(x + offset, exact[idx, :, a], width=width * 0.9,
                   fill=False, edgecolor=c, linewidth=1.2)
        ax.set_title(name)
        ax.set_xlabel("State")
        ax.set_ylabel("Selection frequency")
        ax.set_xticks(x)
        ax.set_ylim(0.0, 1.05)
        ax.grid(True, axis="y", alpha=0.3)
        ax.legend(frameon=False, fontsize="small")

    # hide any unused axes
    total = nrows * ncols
    for j in range(P, total):
        axes[j // ncols][j % ncols].axis("off")

    fig.tight_layout()
    fig.savefig(save_path, dpi=200)
    plt.close(fig)
