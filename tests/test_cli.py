"""
Command-line interface tests.
"""

import json

import pytest

from trajectory_recon.cli import main


def test_cli_writes_merged_trajectory(tmp_path, example_records):
    source = tmp_path / 'positions.json'
    source.write_text(json.dumps(example_records))
    output = tmp_path / 'merged.json'

    exit_code = main([str(source), '--output', str(output), '--step', '1'])

    assert exit_code == 0
    records = json.loads(output.read_text())
    assert [r['ts'] for r in records] == [0.0, 1.0, 2.0, 3.0, 4.0, 5.0, 6.0]
    assert [r['type'] for r in records].count('spline') == 2


def test_cli_saves_plot(tmp_path, example_records):
    source = tmp_path / 'positions.json'
    source.write_text(json.dumps(example_records))
    plot = tmp_path / 'trajectory.png'

    exit_code = main([str(source), '--output', str(tmp_path / 'out.json'), '--plot', str(plot)])

    assert exit_code == 0
    assert plot.exists()


def test_cli_reports_missing_segment(tmp_path, example_records):
    source = tmp_path / 'nodes_only.json'
    nodes = [r for r in example_records['positions'] if r['type'] == 'node']
    source.write_text(json.dumps(nodes))

    assert main([str(source), '--output', str(tmp_path / 'out.json')]) == 1


def test_cli_reports_missing_file(tmp_path):
    assert main([str(tmp_path / 'absent.json')]) == 1


def test_cli_rejects_bad_config(tmp_path, example_records):
    source = tmp_path / 'positions.json'
    source.write_text(json.dumps(example_records))
    config = tmp_path / 'config.yaml'
    config.write_text('sampling_step: -2\n')

    assert main([str(source), '--config', str(config)]) == 1


@pytest.mark.parametrize('payload', [
    [{'ts': 'abc', 'x': 0, 'y': 0, 'z': 0, 'type': 'node'}],
    [[0, 1, 2, 3, 'node']],
    {'positions': 5},
])
def test_cli_reports_malformed_records(tmp_path, payload):
    source = tmp_path / 'malformed.json'
    source.write_text(json.dumps(payload))

    assert main([str(source), '--output', str(tmp_path / 'out.json')]) == 1


def test_cli_reports_non_finite_values(tmp_path, example_records):
    records = example_records['positions'] + [{'ts': 7, 'x': float('nan'), 'y': 7, 'z': 7, 'type': 'pred'}]
    source = tmp_path / 'nan.json'
    source.write_text(json.dumps(records))

    assert main([str(source), '--output', str(tmp_path / 'out.json')]) == 1
    assert not (tmp_path / 'out.json').exists()
