# src/patternbook/cli.py
"""
Command-line interface for Patternbook
"""

import argparse
import logging
import sys

import psutil

from . import __version__
from .config import PlaygroundConfig
from .demos import DEMOS, demo_names, run_all, run_demo
from .enums import PatternCategory


def format_bytes(bytes_value):
    """Format bytes to human-readable string."""
    for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
        if bytes_value < 1024.0:
            return f"{bytes_value:.2f} {unit}"
        bytes_value /= 1024.0
    return f"{bytes_value:.2f} PB"


def print_system_info():
    """Print the process and host figures the closure demos talk about."""
    print(f"Patternbook v{__version__} - System Information")
    print("=" * 50)

    print("\nCPU Information:")
    print(f"  Physical cores: {psutil.cpu_count(logical=False)}")
    print(f"  Logical cores: {psutil.cpu_count(logical=True)}")

    vm = psutil.virtual_memory()
    print("\nSystem Memory:")
    print(f"  Total: {format_bytes(vm.total)}")
    print(f"  Available: {format_bytes(vm.available)} ({vm.percent:.1f}% used)")

    process = psutil.Process()
    print("\nThis Process:")
    print(f"  Resident memory: {format_bytes(process.memory_info().rss)}")
    print(f"  Threads: {process.num_threads()}")


def print_demo_list():
    """Print every demo grouped by category."""
    for category in PatternCategory:
        demos = [demo for demo in DEMOS if demo.category is category]
        if not demos:
            continue
        print(f"\n{category.value.capitalize()}:")
        for demo in demos:
            print(f"  {demo.name:<14} {demo.summary}")


def build_parser():
    parser = argparse.ArgumentParser(
        prog="patternbook",
        description="Patternbook: a playground of classic design patterns",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  patternbook --list                  # List every demo
  patternbook --run memento           # Run one demo
  patternbook --all --fast            # Run everything without delays
  patternbook --category structural   # Run one family of demos
        """
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'Patternbook v{__version__}'
    )
    parser.add_argument('--list', action='store_true', help='List available demos')
    parser.add_argument(
        '--run',
        action='append',
        metavar='NAME',
        choices=demo_names(),
        help='Run the named demo (repeatable)'
    )
    parser.add_argument('--all', action='store_true', help='Run every demo in order')
    parser.add_argument(
        '--category',
        choices=[category.value for category in PatternCategory],
        help='Run every demo in a category'
    )
    parser.add_argument('--fast', action='store_true', help='Skip all demo delays')
    parser.add_argument('--seed', type=int, help='Random seed for the grazing flock')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable INFO logging')
    parser.add_argument('--info', action='store_true', help='Show process and system memory information')
    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    config = PlaygroundConfig(
        verbose=args.verbose,
        delay_scale=0.0 if args.fast else 1.0,
        random_seed=args.seed,
    )

    if args.info:
        print_system_info()

    if args.list:
        print_demo_list()

    if args.run:
        for name in args.run:
            run_demo(name, config)

    if args.all:
        run_all(config)
    elif args.category:
        run_all(config, PatternCategory(args.category))

    if not (args.info or args.list or args.run or args.all or args.category):
        parser.print_help()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
