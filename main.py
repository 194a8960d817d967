# main.py
"""
Main entry point for the Particle Fields simulation.

This script orchestrates the entire simulation lifecycle:
1. Loads configuration from `config.json`.
2. Initializes the logging system.
3. Sets up the window, the particle system and the simulation.
4. Runs the emit/step/render/reschedule loop until the user quits.
5. Handles clean shutdown.
"""
import logging
from utils import setup_logging, load_config, validate_simulation_parameters, frame_time_scale
import cProfile
import pstats
import io

def main():
    """
    The main function to run the simulation.
    """
    # Logging is not set up yet, so we use a print for this one error.
    try:
        config = load_config('config.json')
    except Exception as e:
        print(f"FATAL: Could not load config.json. Error: {e}")
        return

    setup_logging(config)

    logging.info("--- Particle Fields Simulation Starting ---")

    run_params = config.get('run_control', {})
    vis_params = config.get('visualization', {})

    # Raises ValueError (logged at CRITICAL) on an invalid section.
    sim_params = validate_simulation_parameters(config.get('simulation_parameters', {}))

    from particle import ParticleSystem
    from simulation import Simulation
    from visualization import Visualizer

    # --- Component Initialization ---
    # The visualizer determines the simulation area, which is also the
    # culling bounds.
    visualizer = Visualizer(vis_params)
    particles = ParticleSystem(sim_params['max_particles'])
    sim = Simulation(particles, sim_params, visualizer.sim_width, visualizer.sim_height)

    profiler = cProfile.Profile()

    log_throttle = run_params.get('log_throttle_steps', 300)
    max_steps = run_params.get('max_steps')  # None runs until the user quits
    scale_with_frame_time = run_params.get('scale_with_frame_time', False)

    running = True
    step_num = 0
    time_scale = 1.0

    profiler.enable()
    while running:
        sim.step(time_scale)
        step_num += 1

        if not visualizer.draw(sim):
            running = False

        # The clock wait is the only suspension point of the loop.
        elapsed_ms = visualizer.wait_for_next_frame()
        # The first wait also covers the kernels' JIT compile, so it is not
        # a frame time.
        if scale_with_frame_time and step_num > 1:
            time_scale = frame_time_scale(elapsed_ms)

        if step_num % log_throttle == 0:
            stats = sim.statistics()
            logging.info(f"Simulation step {step_num}: {stats['particles']} particles, {stats['fields']} fields")
            logging.debug(
                f"Step {step_num} | Mean Speed: {stats['mean_speed']:.4f} | "
                f"Mass: {stats['mass']:.0f} | Time Scale: {time_scale:.3f}"
            )

        if max_steps is not None and step_num >= max_steps:
            logging.info(f"Reached max_steps ({max_steps}). Stopping simulation.")
            running = False
    profiler.disable()

    visualizer.close()
    logging.info("Simulation loop finished.")

    logging.info("--- Performance Profile ---")
    s = io.StringIO()
    stats = pstats.Stats(profiler, stream=s).sort_stats('cumtime')
    stats.print_stats(20)
    logging.info(f"\n{s.getvalue()}")

    logging.info("--- Particle Fields Simulation Shutting Down ---")


if __name__ == "__main__":
    main()
