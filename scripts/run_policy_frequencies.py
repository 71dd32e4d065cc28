# --- Allow running this file directly in VS Code (no terminal needed) ---
import os, sys
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)
# ------------------------------------------------------------------------

# scripts/run_policy_frequencies.py
# Sample every configured policy over a tabular Q and compare empirical action
# frequencies with the exact selection probabilities, from a YAML config.
import datetime
import numpy as np

from core.logging import configure_logging, get_logger
from core.plotting import plot_frequency_panels
from core.runner import load_config, run_frequencies, total_variation

logger = get_logger(__name__)


def main(config_path: str):
    cfg = load_config(config_path)
    configure_logging(cfg.log_level)

    # Timestamped output subfolders to avoid overwriting previous runs
    ts = datetime.datetime.now().strftime('%Y%m%d-%H%M%S')
    _plot_dir = os.path.join(os.path.dirname(cfg.plot_path), ts)
    os.makedirs(_plot_dir, exist_ok=True)
    plot_path_ts = os.path.join(_plot_dir, os.path.basename(cfg.plot_path))
    _prefix = cfg.csv_prefix
    _csv_dir = os.path.join(os.path.dirname(_prefix), ts)
    os.makedirs(_csv_dir, exist_ok=True)
    csv_prefix_ts = os.path.join(_csv_dir, os.path.basename(_prefix))

    logger.info("running %d policies, %d draws per state", len(cfg.policies), cfg.draws)
    out = run_frequencies(cfg)

    plot_frequency_panels(out, plot_path_ts)

    # save CSVs: each row a state, columns per action
    for i, name in enumerate(out["names"]):
        np.savetxt(f"{csv_prefix_ts}_{i}_{name}_empirical.csv", out["empirical"][i], delimiter=",")
        np.savetxt(f"{csv_prefix_ts}_{i}_{name}_exact.csv", out["exact"][i], delimiter=",")
        tv = max(total_variation(p, q) for p, q in zip(out["empirical"][i], out["exact"][i]))
        print(f"{name:>14s}: max total variation {tv:.4f}")
    print(f"Saved figure to {plot_path_ts}")

if __name__ == "__main__":
    # Default to project-relative path when launched in VS Code
    default_cfg = os.path.join(os.path.dirname(__file__), "..", "configs", "policy_frequencies.yaml")
    main(os.path.abspath(sys.argv[1] if len(sys.argv) > 1 else default_cfg))
