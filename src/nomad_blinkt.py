#!/usr/bin/env python3
"""
Nomad Blinkt - resource utilization bar for a Nomad client node

Polls the local agent's /v1/metrics endpoint and shows how much of one
resource is allocated as a bar on an 8-pixel Blinkt strip. The strip flashes
red when the metrics cannot be read.

Agent address and TLS come from the usual NOMAD_ADDR, NOMAD_CACERT,
NOMAD_CAPATH, NOMAD_CLIENT_CERT, NOMAD_CLIENT_KEY and NOMAD_SKIP_VERIFY
environment variables.
"""

import argparse
import logging
import signal
import sys
from typing import List, Optional

from led_system import BrightnessRangeError, GPIOBitPort, LedBar, SimulatedBitPort
from metrics_system import MetricsClient, MetricsConfig, MetricsConfigError, RESOURCES
from monitor_system import MonitorConfig, ResourceMonitor
from utils import ClassLogger, HybridLogger


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Show Nomad client resource allocation on a Blinkt LED strip",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s
  %(prog)s --resource memory --brightness 0.2
  %(prog)s --resource allocations --max 12 --simulate -v
        """
    )
    parser.add_argument(
        "--resource", "-r",
        choices=RESOURCES, default="allocations",
        help="Resource to monitor (default: allocations)"
    )
    parser.add_argument(
        "--max", "-m", dest="max_allocations",
        type=int, default=8,
        help="Maximum allowed allocations, used when --resource=allocations (default: 8)"
    )
    parser.add_argument(
        "--brightness", "-b",
        type=float, default=0.5,
        help="Brightness of lit pixels 0.0-1.0 (default: 0.5)"
    )
    parser.add_argument(
        "--interval", "-i",
        type=int, default=5000,
        help="Polling interval in milliseconds (default: 5000)"
    )
    parser.add_argument(
        "--address", "-a",
        default=None,
        help="Agent address, overrides NOMAD_ADDR (default: http://127.0.0.1:4646)"
    )
    parser.add_argument(
        "--simulate",
        action="store_true",
        help="Do not touch GPIO; decode frames in memory and log them"
    )
    parser.add_argument(
        "--log-dir",
        default="logs",
        help="Directory for log files (default: logs)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )
    return parser.parse_args(argv)


def create_config(args: argparse.Namespace) -> MonitorConfig:
    return MonitorConfig(
        resource=args.resource,
        max_allocations=args.max_allocations,
        brightness=args.brightness,
        poll_interval_ms=args.interval,
        simulate=args.simulate,
        log_dir=args.log_dir,
        verbose=args.verbose,
    )


def create_metrics_config(args: argparse.Namespace) -> MetricsConfig:
    metrics_config = MetricsConfig.from_env()
    if args.address:
        metrics_config.address = args.address
    return metrics_config


def create_monitor(config: MonitorConfig,
                   metrics_client: MetricsClient,
                   hybrid_logger: HybridLogger) -> ResourceMonitor:
    """
    Build the LED bar and monitor from a validated configuration.

    Args:
        config: Validated MonitorConfig
        metrics_client: Client used for every poll
        hybrid_logger: Logger factory for the component loggers

    Returns:
        ResourceMonitor: ready to run()
    """
    level = logging.DEBUG if config.verbose else logging.INFO
    port_logger = hybrid_logger.get_class_logger("BitPort", level)
    bar_logger = hybrid_logger.get_class_logger("LedBar", level)
    monitor_logger = hybrid_logger.get_class_logger("ResourceMonitor", level)

    if config.simulate:
        port = SimulatedBitPort(port_logger)
    else:
        port = GPIOBitPort(port_logger, data_pin=config.data_pin, clock_pin=config.clock_pin)

    led_bar = LedBar(
        port,
        bar_logger,
        brightness=config.brightness,
        show_anim_on_start=config.show_anim_on_start,
        show_anim_on_exit=config.show_anim_on_exit,
        clear_on_exit=config.clear_on_exit,
    )
    return ResourceMonitor(led_bar, metrics_client, config, monitor_logger)


def install_signal_handlers(monitor: ResourceMonitor, logger: ClassLogger) -> None:
    """SIGINT/SIGTERM end the loop; the monitor then plays its shutdown sequence"""
    def request_stop(signum, frame):
        logger.info(f"Received signal {signal.Signals(signum).name}, shutting down...")
        monitor.stop()

    signal.signal(signal.SIGINT, request_stop)
    signal.signal(signal.SIGTERM, request_stop)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the monitor until SIGINT/SIGTERM.

    Returns:
        Process exit status: 0 on a clean stop, 1 on a fatal error
    """
    args = parse_args(argv)
    config = create_config(args)

    hybrid_logger = HybridLogger("NomadBlinkt", log_dir=config.log_dir)
    logger = hybrid_logger.get_class_logger("NomadBlinkt", logging.DEBUG if config.verbose else logging.INFO)

    logger.info("NOMAD BLINKT")
    logger.info(f"Resource: {config.resource} (max allocations {config.max_allocations})")
    logger.info(f"Brightness: {config.brightness}, poll interval: {config.poll_interval_ms}ms")
    logger.info(f"Output: {'simulated' if config.simulate else f'GPIO data={config.data_pin} clock={config.clock_pin}'}")

    metrics_client = None
    try:
        config.validate()
        metrics_client = MetricsClient(
            create_metrics_config(args),
            hybrid_logger.get_class_logger("MetricsClient", logging.DEBUG if config.verbose else logging.INFO),
        )
        monitor = create_monitor(config, metrics_client, hybrid_logger)
        install_signal_handlers(monitor, logger)
        monitor.run()
        return 0

    except BrightnessRangeError as e:
        # Programmer/config error: abort, never retried
        logger.critical(f"Fatal configuration error: {e}")
        return 1
    except (MetricsConfigError, ValueError) as e:
        logger.critical(f"Invalid configuration: {e}")
        return 1
    except ImportError as e:
        logger.critical(f"{e}")
        return 1
    except Exception as e:
        logger.error(f"Nomad Blinkt error: {e}", exception=e)
        return 1
    finally:
        if metrics_client is not None:
            metrics_client.close()
        logger.info("Nomad Blinkt stopped")
        hybrid_logger.cleanup()


if __name__ == "__main__":
    sys.exit(main())
