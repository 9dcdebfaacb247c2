#!/usr/bin/env python3
"""
System Tests for Hill Climb Search
==================================

Tests all modules can be imported and the parser, runner, rendering,
plotting and command line work end to end.
"""

import io
import os
import sys
import json
import tempfile
import traceback
from contextlib import redirect_stdout, redirect_stderr

import matplotlib
matplotlib.use('Agg')

# Fix path - so the 'hillclimb' package is found without installing
script_dir = os.path.dirname(os.path.abspath(__file__))
if script_dir not in sys.path:
    sys.path.insert(0, script_dir)


SAMPLE = """\
Sabqponm
abcryxxl
accszExk
acctuvwj
abdefghi
"""


def test_imports():
    """Test all module imports"""
    from hillclimb.config import Config, SearchConfig, GeneratorConfig, VisualizationConfig
    from hillclimb.terrain import CellRole, parse_heightmap, HeightmapGenerator, MalformedInputError
    from hillclimb.environment import Grid, BoundsError
    from hillclimb.planning import Frontier, ElevationSearch, SourcePolicy, SearchOutcome
    from hillclimb.visualization import render_elevation, render_costs, GridVisualizer
    from hillclimb.pipeline import PuzzleRunner, save_report

    assert issubclass(BoundsError, IndexError)
    assert issubclass(MalformedInputError, ValueError)


def test_config():
    """Test configuration defaults and dict conversion"""
    from hillclimb.config import Config, SearchConfig

    config = Config()
    assert config.search.max_climb == 1
    assert config.search.lowest_elevation == 0
    assert config.search.record_expansion_order is False
    assert config.generator.max_elevation == 25
    assert config.verbose is False

    d = config.to_dict()
    assert d['search']['max_climb'] == 1

    restored = Config.from_dict({'search': {'max_climb': 2}, 'verbose': True})
    assert restored.search.max_climb == 2
    assert restored.verbose is True

    try:
        SearchConfig(max_climb=-1)
    except ValueError:
        pass
    else:
        raise AssertionError("negative max_climb should be rejected")


def test_parse_sample():
    """Test parsing of the sample heightmap"""
    from hillclimb.terrain import parse_heightmap, CellRole

    assert CellRole.from_symbol('S') == CellRole.START
    assert CellRole.from_symbol('E') == CellRole.END
    assert CellRole.from_symbol('a') == CellRole.NORMAL

    heightmap = parse_heightmap(SAMPLE)

    assert heightmap.shape == (5, 8)
    assert heightmap.start == (0, 0)
    assert heightmap.end == (2, 5)
    assert heightmap.elevation[0, 0] == 0   # S
    assert heightmap.elevation[2, 5] == 25  # E
    assert heightmap.elevation[0, 3] == 16  # q
    assert heightmap.elevation[1, 4] == 24  # y

    # Iterable of lines, as from an open file
    from_lines = parse_heightmap(io.StringIO(SAMPLE))
    assert (from_lines.elevation == heightmap.elevation).all()

    assert heightmap.to_text() == SAMPLE


def test_parse_errors():
    """Test malformed heightmaps are rejected"""
    from hillclimb.terrain import parse_heightmap, MalformedInputError

    bad_inputs = {
        'empty': "",
        'blank': "\n\n",
        'ragged': "Sab\nabcE\n",
        'symbol': "Sa#\nabE\n",
        'no start': "aab\nabE\n",
        'no end': "Sab\nabc\n",
        'two starts': "SaS\nabE\n",
        'two ends': "SaE\nabE\n",
    }

    for name, text in bad_inputs.items():
        try:
            parse_heightmap(text)
        except MalformedInputError:
            continue
        raise AssertionError(f"{name} input should be rejected")

    try:
        parse_heightmap("Sa#\nabE\n")
    except MalformedInputError as e:
        assert "'#'" in str(e)
        assert "row 0" in str(e)
        assert "column 2" in str(e)


def test_sample_search():
    """Test both policies on the sample heightmap"""
    from hillclimb import parse_heightmap, ElevationSearch, SourcePolicy, SearchOutcome

    grid = parse_heightmap(SAMPLE).to_grid()
    search = ElevationSearch(grid)

    result = search.search(SourcePolicy.START)
    assert result.outcome == SearchOutcome.FOUND
    assert result.found
    assert result.cost == 31
    assert result.policy == SourcePolicy.START
    assert result.num_sources == 1

    result = search.search(SourcePolicy.LOWEST)
    assert result.found
    assert result.cost == 29
    assert result.num_sources == 6

    assert search.last_stats is result.stats
    assert result.stats.pops == result.stats.finalized + result.stats.stale_pops


def test_unreachable_end():
    """Test a walled-off end gives NOT_FOUND, not a number"""
    from hillclimb import parse_heightmap, ElevationSearch, SourcePolicy, SearchOutcome

    grid = parse_heightmap("Sbz\naaE\n").to_grid()
    search = ElevationSearch(grid)

    for policy in (SourcePolicy.START, SourcePolicy.LOWEST):
        result = search.search(policy)
        assert result.outcome == SearchOutcome.NOT_FOUND
        assert not result.found
        assert result.cost is None
        assert grid.cost_at(grid.end) is None


def test_runner():
    """Test runner report and JSON export"""
    from hillclimb import parse_heightmap, PuzzleRunner, SourcePolicy, save_report

    runner = PuzzleRunner()
    report = runner.run_heightmap(parse_heightmap(SAMPLE), name='sample', verbose=False)

    assert report.cost(SourcePolicy.START) == 31
    assert report.cost(SourcePolicy.LOWEST) == 29
    assert report.shape == [5, 8]
    assert report.policies['start']['status'] == 'found'
    assert set(report.runtimes) == {'start', 'lowest'}

    with tempfile.TemporaryDirectory() as tmp:
        path = save_report(report, os.path.join(tmp, 'out', 'report.json'))
        with open(path) as f:
            data = json.load(f)
    assert data['policies']['lowest']['cost'] == 29
    assert data['name'] == 'sample'


def test_runner_verbose_output():
    """Test progress lines are printed only when verbose"""
    from hillclimb import parse_heightmap, PuzzleRunner, Config

    heightmap = parse_heightmap(SAMPLE)

    buf = io.StringIO()
    with redirect_stdout(buf):
        PuzzleRunner(Config()).run_heightmap(heightmap, name='quiet')
    assert buf.getvalue() == ""

    config = Config()
    config.verbose = True
    buf = io.StringIO()
    with redirect_stdout(buf):
        PuzzleRunner(config).run_heightmap(heightmap, name='sample')
    out = buf.getvalue()
    assert "[sample] start: found cost=31" in out
    assert "[sample] lowest: found cost=29" in out


def test_suite():
    """Test runner over generated heightmaps"""
    from hillclimb import Config, PuzzleRunner

    config = Config()
    config.generator.rows = 12
    config.generator.cols = 20
    config.generator.smoothing_sigma = 2.0

    suite = PuzzleRunner(config).run_suite(num_maps=4, seed_base=3, verbose=False)

    assert suite.num_maps == 4
    assert suite.seeds == [3, 4, 5, 6]
    assert len(suite.reports) == 4
    assert suite.summary['lowest']['n_found'] >= suite.summary['start']['n_found']
    json.dumps(suite.to_dict())


def test_render():
    """Test terminal rendering"""
    from hillclimb import parse_heightmap, ElevationSearch, render_elevation, render_costs, render_heightmap

    grid = parse_heightmap(SAMPLE).to_grid()

    lines = render_elevation(grid).split('\n')
    assert len(lines) == 5
    assert lines[0].startswith("[ 0]  0   1  16 ")
    assert "[25]" in lines[2]

    assert render_heightmap(grid) == SAMPLE.rstrip('\n')

    fresh = render_costs(grid).split('\n')
    assert fresh[0] == ' '.join(['.'] * 8)

    ElevationSearch(grid).search()
    costs = render_costs(grid).split('\n')
    assert costs[0].split()[0] == '0'
    assert costs[2].split()[5] == '31'


def test_plot():
    """Test matplotlib figure export"""
    import matplotlib.pyplot as plt
    from hillclimb import parse_heightmap, ElevationSearch, GridVisualizer

    grid = parse_heightmap(SAMPLE).to_grid()
    ElevationSearch(grid).search()

    viz = GridVisualizer(grid)
    fig = viz.create_figure(title='sample')
    assert len(fig.axes) >= 2

    with tempfile.TemporaryDirectory() as tmp:
        path = os.path.join(tmp, 'climb.png')
        viz.save_figure(fig, path)
        assert os.path.getsize(path) > 0
    plt.close(fig)


def test_cli():
    """Test command line solve, generate and error handling"""
    from hillclimb.main import main

    with tempfile.TemporaryDirectory() as tmp:
        sample_path = os.path.join(tmp, 'sample.txt')
        with open(sample_path, 'w') as f:
            f.write(SAMPLE)

        buf = io.StringIO()
        with redirect_stdout(buf):
            status = main(['solve', sample_path, '--display', '--costs'])
        out = buf.getvalue()
        assert status == 0
        assert "Cost from start: 31" in out
        assert "Cost from lowest point: 29" in out
        assert "[ 0]" in out

        report_path = os.path.join(tmp, 'report.json')
        plot_path = os.path.join(tmp, 'climb.png')
        with redirect_stdout(io.StringIO()):
            status = main(['solve', sample_path, '--json', report_path, '--plot', plot_path])
        assert status == 0
        assert os.path.exists(report_path)
        assert os.path.exists(plot_path)

        bad_path = os.path.join(tmp, 'bad.txt')
        with open(bad_path, 'w') as f:
            f.write("Sa?\nabE\n")
        err = io.StringIO()
        with redirect_stdout(io.StringIO()), redirect_stderr(err):
            status = main(['solve', bad_path])
        assert status == 1
        assert "Malformed heightmap" in err.getvalue()

        err = io.StringIO()
        with redirect_stdout(io.StringIO()), redirect_stderr(err):
            status = main(['solve', os.path.join(tmp, 'missing', 'x.txt')])
        assert status == 1
        assert "Cannot read heightmap" in err.getvalue()

        walled_path = os.path.join(tmp, 'walled.txt')
        with open(walled_path, 'w') as f:
            f.write("Sbz\naaE\n")
        buf = io.StringIO()
        with redirect_stdout(buf):
            status = main(['solve', walled_path])
        assert status == 0
        assert "Cost from start: unreachable" in buf.getvalue()

        gen_path = os.path.join(tmp, 'gen.txt')
        with redirect_stdout(io.StringIO()):
            status = main(['generate', '--rows', '9', '--cols', '15', '--seed', '1',
                           '--output', gen_path])
        assert status == 0

        from hillclimb import load_heightmap
        assert load_heightmap(gen_path).shape == (9, 15)

    with redirect_stdout(io.StringIO()):
        assert main([]) == 1


def run_all_tests():
    """Run all tests"""
    print("=" * 60)
    print("HILL CLIMB SEARCH - SYSTEM TESTS")
    print("=" * 60 + "\n")

    tests = [
        ("Imports", test_imports),
        ("Configuration", test_config),
        ("Parse Sample", test_parse_sample),
        ("Parse Errors", test_parse_errors),
        ("Sample Search", test_sample_search),
        ("Unreachable End", test_unreachable_end),
        ("Runner", test_runner),
        ("Runner Verbose", test_runner_verbose_output),
        ("Suite", test_suite),
        ("Rendering", test_render),
        ("Plotting", test_plot),
        ("Command Line", test_cli),
    ]

    results = []

    for name, test_func in tests:
        try:
            test_func()
            results.append((name, True, None))
        except Exception as e:
            print(f"  ✗ EXCEPTION: {e}")
            traceback.print_exc()
            results.append((name, False, str(e)))

    # Summary
    print("=" * 60)
    print("TEST SUMMARY")
    print("=" * 60)

    passed = sum(1 for _, s, _ in results if s)
    total = len(results)

    for name, success, error in results:
        status = "✓ PASS" if success else "✗ FAIL"
        print(f"  {status}: {name}")
        if error:
            print(f"         Error: {error}")

    print(f"\nTotal: {passed}/{total} tests passed")
    print("=" * 60)

    return passed == total


if __name__ == '__main__':
    success = run_all_tests()
    sys.exit(0 if success else 1)
