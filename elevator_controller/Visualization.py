import os
import pandas as pd
import matplotlib.pyplot as plt

from elevator_controller import config as cfg


def ensure_dir(path):
    # Ensure the output directory exists
    if not os.path.exists(path):
        os.makedirs(path)
    return path


def service_times(logs):
    """
    Pair every 'served' entry with the oldest open 'latched' entry of the
    same floor. Returns a DataFrame with floor, latched, served, service_time.
    """
    df = pd.DataFrame(logs, columns=["tick", "event", "floor"])
    rows = []
    open_since = {}
    for entry in df.itertuples(index=False):
        if entry.event == "reset":
            open_since.clear()
        elif entry.event == "latched":
            open_since[entry.floor] = entry.tick
        elif entry.event == "served" and entry.floor in open_since:
            latched = open_since.pop(entry.floor)
            rows.append(
                {
                    "floor": entry.floor,
                    "latched": latched,
                    "served": entry.tick,
                    "service_time": entry.tick - latched,
                }
            )
    return pd.DataFrame(rows, columns=["floor", "latched", "served", "service_time"])


def plot_floor_trace(trace, run, vis_dir=cfg.VIS_DIR):
    # Plot floor over time, door-open ticks shaded
    vis_dir = ensure_dir(vis_dir)
    filename = os.path.join(vis_dir, f"floor_trace_run{run}.png")
    df = pd.DataFrame(trace)
    fig, ax = plt.subplots()
    ax.step(df["tick"], df["floor"], where="post", label="Floor")
    door = df[df["door_open"]]
    ax.scatter(door["tick"], door["floor"], s=4, color="tab:orange", label="Door open")
    ax.set_xlabel("Tick")
    ax.set_ylabel("Floor")
    ax.set_title(f"Car position (Run {run})")
    ax.legend()
    fig.tight_layout()
    fig.savefig(filename)
    plt.close(fig)
    return filename


def plot_service_times(logs, run, vis_dir=cfg.VIS_DIR):
    # Plot distribution of ticks between latching and serving a request
    vis_dir = ensure_dir(vis_dir)
    filename = os.path.join(vis_dir, f"service_times_run{run}.png")
    df = service_times(logs)
    fig, ax = plt.subplots()
    ax.hist(df["service_time"], bins=20)
    ax.set_xlabel("Service time (ticks)")
    ax.set_ylabel("Number of requests")
    ax.set_title(f"Request service times (Run {run})")
    fig.tight_layout()
    fig.savefig(filename)
    plt.close(fig)
    return filename


def append_run_stats(logs, trace, run, stats_dir=cfg.STATS_DIR):
    # Create directory for run statistics if it does not exist
    stats_dir = ensure_dir(stats_dir)
    filename = os.path.join(stats_dir, "all_run_stats.txt")

    df = service_times(logs)
    served = len(df)
    avg_service = round(df["service_time"].mean(), 2) if served else 0
    max_service = int(df["service_time"].max()) if served else 0

    line = (
        f"Run {run}: "
        f"Ticks={len(trace)}, "
        f"Served={served}, "
        f"AvgServiceTime={avg_service}, "
        f"MaxServiceTime={max_service}\n"
    )
    with open(filename, "a") as f:
        f.write(line)
    return line
