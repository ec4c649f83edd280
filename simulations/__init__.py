# simulations/__init__.py
"""
Monte Carlo harness around the monty_hall core.

Run a simulation via:
    python -m simulations.cli [TRIALS] [--prompt] [--seed N] [--plot] [--plot-out PATH]
"""
