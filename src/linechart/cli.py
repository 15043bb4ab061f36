import sys
import math
import argparse
from typing import List, Tuple

from .chart import ChartConfig, LineChart
from .core import load_series
from .interpolation import Interpolation
from .logger import logger, set_verbose
from .scale import LinearScale
from .utils import series_extent


def format_number(value: float) -> str:
    """Format a computed value without floating-point noise."""
    return f"{value:.10g}"


def read_stdin_series(args) -> Tuple[List[str], List[List[float]]]:
    """Read series from CSV piped on stdin."""
    if sys.stdin.isatty():
        raise ValueError("No input data. Please pipe CSV data to this script.")

    csv_data = sys.stdin.read().strip()
    if not csv_data:
        raise ValueError("No input data received.")

    if args.header:
        header_mode = 'yes'
    elif args.no_header:
        header_mode = 'no'
    else:
        header_mode = 'auto'

    return load_series(csv_data, header_mode, args.delimiter)


def parse_floats(values: List[str], what: str) -> List[float]:
    try:
        return [float(v) for v in values]
    except ValueError:
        raise ValueError(f"{what} must be numbers: {' '.join(values)}")


def run_ticks(args, interpolation: Interpolation) -> None:
    if len(args.command) < 2:
        raise ValueError("Tick count required after 'ticks'")
    try:
        count = int(args.command[1])
    except ValueError:
        raise ValueError(f"Tick count must be an integer: {args.command[1]}")

    if args.domain:
        domain = args.domain
    else:
        _, series = read_stdin_series(args)
        domain = series_extent(series, math.inf, -math.inf)

    spec = LinearScale(domain=domain, interpolation=interpolation).ticks(count)
    logger.debug("Ticks for domain %s: %s", list(domain), spec)

    if args.step:
        print(','.join(format_number(v) for v in spec))
    for value in spec.values():
        print(format_number(value))


def run_mapping(args, interpolation: Interpolation, inverse: bool) -> None:
    name = 'invert' if inverse else 'scale'
    if len(args.command) < 6:
        raise ValueError(f"'{name}' requires D0 D1 R0 R1 and at least one value")

    d0, d1, r0, r1 = parse_floats(args.command[1:5], "Bounds")
    values = parse_floats(args.command[5:], "Values")

    linear = LinearScale(domain=(d0, d1), range=(r0, r1), interpolation=interpolation)
    f = linear.invert() if inverse else linear.scale()
    for value in values:
        print(format_number(f(value)))


def run_labels(args, config: ChartConfig) -> None:
    _, series = read_stdin_series(args)
    chart = LineChart(config)
    for data in series:
        chart.add_line(data)
    chart.layout(args.width, args.height)

    print("value,label")
    for value, text in chart.y_labels():
        print(f"{format_number(value)},{text}")


def run_select(args, config: ChartConfig) -> None:
    if len(args.command) < 2:
        raise ValueError("Pointer x position required after 'select'")
    pixel_x = parse_floats(args.command[1:2], "Pointer x position")[0]

    names, series = read_stdin_series(args)
    chart = LineChart(config)
    for data in series:
        chart.add_line(data)
    chart.layout(args.width, args.height)

    selection = chart.select_at(pixel_x, notify=False)
    print(','.join(['column', 'x'] + names))
    print(','.join([str(selection.column), format_number(selection.x)] +
                   [format_number(v) for v in selection.y_values]))


def main():
    parser = argparse.ArgumentParser(
        description='Compute linear scales, nice axis ticks and chart hit-tests',
        epilog='Examples:\n'
               '  Ticks for a domain: linechart ticks 5 --domain 100 407\n'
               '  Ticks for data: cat data.csv | linechart t 5\n'
               '  Forward mapping: linechart scale 0 11 0 300 5.5\n'
               '  Inverse mapping: linechart i 0 11 0 300 150\n'
               '  Hit-test: cat data.csv | linechart select 120 --width 320 --height 200\n'
               '  Value axis labels: cat data.csv | linechart labels --shorten -g 5\n',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument('command', nargs='*',
                        help='Command: "ticks"/"t", "scale"/"s", "invert"/"i", "select"/"sel" or "labels"/"l"')
    parser.add_argument('--domain', nargs=2, type=float, metavar=('LO', 'HI'),
                        help='Domain for ticks (defaults to min/max of stdin data)')
    parser.add_argument('--step', action='store_true',
                        help='Print the start,stop,step triple before tick values')
    parser.add_argument('--interpolation', default='linear',
                        help='Interpolation: linear (default) or legacy')
    parser.add_argument('--width', type=float, default=320,
                        help='View width for select and labels (default: 320)')
    parser.add_argument('--height', type=float, default=200,
                        help='View height for select and labels (default: 200)')
    parser.add_argument('--grid-count', '-g', type=int, default=10,
                        help='Grid lines per axis for labels (default: 10)')
    parser.add_argument('--inner-margin', type=float, default=0.0,
                        help='Distance of lines from the chart edges (default: 0)')
    parser.add_argument('--shorten', action='store_true',
                        help='Shorten big numbers on the value axis with K/M suffixes')
    parser.add_argument('--delimiter', '-d',
                        help='CSV delimiter (auto-detected if not specified)')
    header_group = parser.add_mutually_exclusive_group()
    header_group.add_argument('--header', action='store_true',
                              help='Force treating first row as headers')
    header_group.add_argument('--no-header', action='store_true',
                              help='Force treating first row as data')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Show additional information')

    args = parser.parse_args()
    set_verbose(args.verbose)

    if not args.command:
        print("Error: No command specified.", file=sys.stderr)
        parser.print_help()
        sys.exit(1)

    command_aliases = {
        't': 'ticks',
        's': 'scale',
        'i': 'invert',
        'sel': 'select',
        'l': 'labels',
    }
    command_type = command_aliases.get(args.command[0], args.command[0])

    try:
        interpolation = Interpolation.from_string(args.interpolation)
        config = ChartConfig(
            x_grid_count=args.grid_count,
            y_grid_count=args.grid_count,
            inner_margin=args.inner_margin,
            shorten_big_numbers=args.shorten,
            interpolation=interpolation,
        )

        if command_type == 'ticks':
            run_ticks(args, interpolation)
        elif command_type == 'scale':
            run_mapping(args, interpolation, inverse=False)
        elif command_type == 'invert':
            run_mapping(args, interpolation, inverse=True)
        elif command_type == 'select':
            run_select(args, config)
        elif command_type == 'labels':
            run_labels(args, config)
        else:
            print(f"Error: Unknown command '{command_type}'", file=sys.stderr)
            sys.exit(1)

    except (ValueError, RuntimeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
