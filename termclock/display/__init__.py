"""Terminal display service."""

from .terminal_monitor import TerminalMonitor
from .scheduler import CachedReading, ChimeState, RefreshScheduler


def main(argv=None):
    """Entry point for the dashboard."""
    from termclock.cli import parse_overrides
    from termclock.config.settings import load_config
    from termclock.providers import build_temperature_chain, build_todo_chain
    from termclock.shared.logging import setup_logging

    config_path, overrides = parse_overrides(argv)

    def reload_config():
        return load_config(config_path, overrides)

    config = reload_config()
    setup_logging(config.log_level, config.log_file)

    scheduler = RefreshScheduler(config, build_temperature_chain(), build_todo_chain())
    monitor = TerminalMonitor(config, scheduler, config_loader=reload_config)

    try:
        monitor.run()
    except KeyboardInterrupt:
        pass


__all__ = ["TerminalMonitor", "CachedReading", "ChimeState", "RefreshScheduler", "main"]
