#!/usr/bin/env python3
"""
Hill Climb Search - Main Entry Point
====================================

Usage:
    # Fewest steps from the start marker and from any lowest cell
    hillclimb solve input.txt
    cat input.txt | hillclimb solve --display --costs

    # Save a plot of elevation and steps-from-start
    hillclimb solve input.txt --plot climb.png --json report.json

    # Write a generated heightmap
    hillclimb generate --rows 41 --cols 80 --seed 7 --output map.txt

    # Run both searches on a batch of generated heightmaps
    hillclimb suite --num_maps 20 --seed_base 42 --output suite.json -v

As a library:
    from hillclimb import parse_heightmap, fewest_steps, SourcePolicy

    grid = parse_heightmap(text).to_grid()
    steps = fewest_steps(grid, SourcePolicy.LOWEST)
"""

import argparse
import sys


def _format_cost(cost) -> str:
    return str(cost) if cost is not None else 'unreachable'


def run_solve(args):
    """Solve one heightmap from a file or stdin"""
    from hillclimb import (
        Config, SearchConfig, PuzzleRunner, ElevationSearch, SourcePolicy,
        MalformedInputError, parse_heightmap, render_elevation, render_costs,
        save_report,
    )

    config = Config(search=SearchConfig(max_climb=args.max_climb))
    config.verbose = args.verbose

    try:
        if args.input:
            with open(args.input, 'r') as f:
                heightmap = parse_heightmap(f)
        else:
            heightmap = parse_heightmap(sys.stdin)
    except MalformedInputError as e:
        print(f"Malformed heightmap: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Cannot read heightmap: {e}", file=sys.stderr)
        return 1

    runner = PuzzleRunner(config)
    grid = runner.build_grid(heightmap)

    if args.display:
        print(render_elevation(grid))
        print()

    report = runner.run(grid, name=args.input or 'stdin')

    print(f"Cost from start: {_format_cost(report.cost(SourcePolicy.START))}")
    print(f"Cost from lowest point: {_format_cost(report.cost(SourcePolicy.LOWEST))}")

    if args.costs or args.plot:
        ElevationSearch(grid, config).search(SourcePolicy.START)

    if args.costs:
        print()
        print(render_costs(grid))

    if args.plot:
        import matplotlib.pyplot as plt
        from hillclimb.visualization import GridVisualizer

        viz = GridVisualizer(grid, config.visualization)
        fig = viz.create_figure(title=args.input or 'stdin')
        viz.save_figure(fig, args.plot)
        plt.close(fig)
        print(f"Plot saved to: {args.plot}")

    if args.json:
        path = save_report(report, args.json)
        print(f"Report saved to: {path}")

    return 0


def run_generate(args):
    """Write a generated heightmap"""
    from hillclimb import Config, HeightmapGenerator

    config = Config()
    config.generator.rows = args.rows
    config.generator.cols = args.cols
    config.generator.smoothing_sigma = args.sigma

    heightmap = HeightmapGenerator(config.generator, seed=args.seed).generate()
    text = heightmap.to_text()

    if args.output:
        with open(args.output, 'w') as f:
            f.write(text)
        print(f"Heightmap saved to: {args.output}")
    else:
        sys.stdout.write(text)

    return 0


def run_suite(args):
    """Run both searches over generated heightmaps"""
    from hillclimb import Config, PuzzleRunner, save_report

    config = Config()
    config.generator.rows = args.rows
    config.generator.cols = args.cols

    runner = PuzzleRunner(config)
    suite = runner.run_suite(
        num_maps=args.num_maps,
        seed_base=args.seed_base,
        verbose=args.verbose
    )

    if args.output:
        path = save_report(suite, args.output)
        print(f"\nResults saved to: {path}")

    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Fewest-step search on elevation grids',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Solve command
    solve_parser = subparsers.add_parser('solve', help='Solve a heightmap')
    solve_parser.add_argument('input', nargs='?', help='Heightmap file (stdin if omitted)')
    solve_parser.add_argument('--display', action='store_true', help='Print the elevation table')
    solve_parser.add_argument('--costs', action='store_true', help='Print steps from start per cell')
    solve_parser.add_argument('--plot', type=str, help='Save elevation/cost figure to this file')
    solve_parser.add_argument('--json', type=str, help='Save report to this JSON file')
    solve_parser.add_argument('--max_climb', type=int, default=1, help='Largest ascent per move')
    solve_parser.add_argument('--verbose', '-v', action='store_true', help='Verbose output')

    # Generate command
    gen_parser = subparsers.add_parser('generate', help='Generate a heightmap')
    gen_parser.add_argument('--rows', type=int, default=41, help='Number of rows')
    gen_parser.add_argument('--cols', type=int, default=80, help='Number of columns')
    gen_parser.add_argument('--sigma', type=float, default=4.0, help='Smoothing sigma (cells)')
    gen_parser.add_argument('--seed', type=int, default=42, help='Random seed')
    gen_parser.add_argument('--output', type=str, help='Output file (stdout if omitted)')

    # Suite command
    suite_parser = subparsers.add_parser('suite', help='Run searches on generated heightmaps')
    suite_parser.add_argument('--num_maps', type=int, default=10, help='Number of heightmaps')
    suite_parser.add_argument('--seed_base', type=int, default=42, help='Base seed')
    suite_parser.add_argument('--rows', type=int, default=41, help='Number of rows')
    suite_parser.add_argument('--cols', type=int, default=80, help='Number of columns')
    suite_parser.add_argument('--output', type=str, help='Output JSON file')
    suite_parser.add_argument('--verbose', '-v', action='store_true', help='Verbose output')

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    if args.command == 'solve':
        return run_solve(args)
    elif args.command == 'generate':
        return run_generate(args)
    elif args.command == 'suite':
        return run_suite(args)
    else:
        parser.print_help()
        return 1


if __name__ == '__main__':
    sys.exit(main())
