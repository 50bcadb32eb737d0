"""End-to-end run of the command line entry point"""

import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import matplotlib
matplotlib.use("Agg")

import yaml

import main


def test_run_simulation_writes_outputs(tmp_path, capsys):
    log_path = tmp_path / "run.jsonl"
    plot_path = tmp_path / "run.png"
    config_path = tmp_path / "run.yaml"
    config_path.write_text(yaml.dump({'simulation': {
        'traffic': {'source': 'knuth'},
        'output': {'event_log': str(log_path), 'trajectory_plot': str(plot_path)},
    }}))

    simulation, stats = main.run_simulation(str(config_path), deadline=2000)

    assert simulation.config.deadline == 2000
    assert stats.arrivals == 10
    assert log_path.exists()
    assert plot_path.exists()
    out = capsys.readouterr().out
    assert "PASSENGER METRICS SUMMARY" in out


def test_main_reads_argv(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["main.py"])
    monkeypatch.setattr(main, "run_simulation",
                        lambda sim_config_path=None, deadline=None: print(sim_config_path, deadline))
    main.main()
    monkeypatch.setattr(sys, "argv", ["main.py", "scenarios/random_hour.yaml", "500"])
    main.main()

    assert capsys.readouterr().out.splitlines() == ["None None", "scenarios/random_hour.yaml 500"]
