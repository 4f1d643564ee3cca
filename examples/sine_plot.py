from __future__ import annotations

import argparse
from pathlib import Path

import numpy as np

from makeplot import make_plot


def main() -> None:
    parser = argparse.ArgumentParser(description="Write a sine wave chart and a square-root chart as PNG files.")
    parser.add_argument("--out-dir", type=Path, default=Path("."))
    args = parser.parse_args()

    xs = np.arange(0.0, 6.4, 0.1)
    table = [{"x": float(x), "y": float(np.sin(x))} for x in xs]
    sine = make_plot(table, title="sine")
    (args.out_dir / "sine.png").write_bytes(sine)

    # Bare numbers plot against their position.
    roots = np.sqrt(np.arange(11, dtype=np.float64))
    (args.out_dir / "sqrt.png").write_bytes(make_plot(roots, width=480, height=320))


if __name__ == "__main__":
    main()
