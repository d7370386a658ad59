from intersection_sim.config import SimulationConfig, TimingConfig
from intersection_sim.experiments.runner import run_single
from intersection_sim.io.logging_utils import setup_logging, logger
from intersection_sim.io.results_writer import save_result_as_json
from intersection_sim.schedulers import SCHEDULERS


def choose_scheduler() -> str:
    print("=== Choose scheduler ===")
    for i, name in enumerate(SCHEDULERS.keys(), start=1):
        print(f"{i}. {name}")
    choice = input("Enter number: ").strip()

    try:
        idx = int(choice) - 1
        name = list(SCHEDULERS.keys())[idx]
    except (ValueError, IndexError):
        print("Invalid choice, falling back to 'manual'")
        name = "manual"
    return name


def _optional_ms(text: str):
    text = text.strip()
    return int(text) if text else None


def main():
    print("=== Four-way Intersection Simulation ===")

    verbose = input("Verbose logging (phase changes, WALK grants)? [y/N]: ").strip().lower() == "y"
    setup_logging(verbose=verbose)

    scheduler_name = choose_scheduler()

    try:
        total_time = int(input("Total simulation time [ms] (default 120000): ") or "120000")
        green = int(input("Green duration [ms] (default 4000): ") or "4000")
        yellow = int(input("Yellow duration [ms] (default 2000): ") or "2000")
        rate = float(input("Pedestrian presses [1/s/direction] (default 0.05): ") or "0.05")
        emergency_at = _optional_ms(input("Emergency stop at [ms] (empty = never): "))
        reset_at = _optional_ms(input("Reset at [ms] (empty = never): "))
        timing = TimingConfig(green_duration_ms=green, yellow_duration_ms=yellow)
    except ValueError:
        print("Invalid input, using defaults.")
        total_time, rate, emergency_at, reset_at = 120_000, 0.05, None, None
        timing = TimingConfig()

    cfg = SimulationConfig(
        scheduler=scheduler_name,
        total_time_ms=total_time,
        pedestrian_rate=rate,
        emergency_at_ms=emergency_at,
        reset_at_ms=reset_at,
        timing=timing,
    )

    logger.info(f"Running simulation with scheduler='{scheduler_name}'")
    result = run_single(cfg)

    logger.info("Simulation finished.")
    logger.info(f"Wall time: {result.wall_time_seconds:.4f} s")
    logger.info(f"Phase changes: {result.phase_changes}")
    logger.info(f"Pedestrian requests/grants: {result.pedestrian_requests}/{result.pedestrian_grants}")
    logger.info(f"Avg pedestrian wait: {result.avg_pedestrian_wait_ms:.0f} ms")
    logger.info(f"Max pedestrian wait: {result.max_pedestrian_wait_ms:.0f} ms")

    path = save_result_as_json(result, cfg.output_dir)
    logger.info(f"Results saved to {path}")


if __name__ == "__main__":
    main()
