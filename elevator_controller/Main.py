import argparse

from elevator_controller import config as cfg
from elevator_controller.Building import Building
from elevator_controller.CallGenerator import CallGenerator
from elevator_controller.Visualization import (
    append_run_stats,
    plot_floor_trace,
    plot_service_times,
    service_times,
)


def get_simulation_params(argv=None):
    parser = argparse.ArgumentParser(description="Elevator Controller Simulation")
    parser.add_argument(
        "--num-floors", type=int, default=cfg.N_FLOORS, help="Number of floors"
    )
    parser.add_argument(
        "--door-timer", type=int, default=cfg.DOOR_TIMER, help="Door dwell (ticks)"
    )
    parser.add_argument(
        "--ticks", type=int, default=cfg.SIM_TICKS, help="Ticks to simulate"
    )
    parser.add_argument(
        "--call-interval",
        type=float,
        default=cfg.SIM_CALL_INTERVAL,
        help="Mean ticks between random calls",
    )
    parser.add_argument(
        "--seed", type=int, default=cfg.SIM_RANDOM_SEED, help="Random seed"
    )
    parser.add_argument(
        "--run", type=int, default=1, help="Run number used in output names"
    )
    parser.add_argument(
        "--plots", action="store_true", help="Write plots and run stats"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Print every mode change"
    )
    params = parser.parse_args(argv)
    if params.ticks < 1:
        parser.error(f"--ticks must be at least 1, got {params.ticks}")
    return params


def main(argv=None):
    params = get_simulation_params(argv)

    # 1) Call source
    calls = CallGenerator(
        n_floors=params.num_floors,
        call_interval=params.call_interval,
        seed=params.seed,
    )

    # 2) Building with its SimPy environment
    building = Building(
        num_floors=params.num_floors,
        door_timer=params.door_timer,
        max_ticks=params.ticks,
        call_generator=calls,
        verbose=params.verbose,
    )

    # 3) Run until stop_event
    trace = building.run()

    # Results
    served = service_times(building.logs)
    print("Ticks: ", len(trace))
    print("Calls_generated: ", len(calls.generated))
    print("Requests_served: ", len(served))
    if len(served):
        print("Avg_service_time: ", round(served["service_time"].mean(), 2))
        print("Max_service_time: ", int(served["service_time"].max()))
    print("Pending_at_end: ", int(building.controller.pending().sum()))

    if params.plots:
        plot_floor_trace(trace, params.run)
        plot_service_times(building.logs, params.run)
        append_run_stats(building.logs, trace, params.run)
    return building


if __name__ == "__main__":
    main()
