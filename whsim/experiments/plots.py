from pathlib import Path
import pandas as pd
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt


def plot_occupancy(csv_path: Path, out_png: Path):
    df = pd.read_csv(csv_path)
    plt.figure()
    for sid in df["shelf_id"].unique():
        sub = df[df["shelf_id"] == sid]
        plt.plot(sub["day"], sub["count"], marker="o", label=sid)
    # Terminal: un valor por día
    term = df.groupby("day", as_index=False)["terminal_count"].first()
    plt.plot(term["day"], term["terminal_count"], linestyle="--", label="Terminal")
    plt.xlabel("Día de simulación")
    plt.ylabel("Ítems")
    plt.title("Ocupación diaria por estante")
    plt.legend()
    plt.tight_layout()
    out_png.parent.mkdir(parents=True, exist_ok=True)
    plt.savefig(out_png)
    plt.close()
