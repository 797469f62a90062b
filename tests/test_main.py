import os

import pytest

from elevator_controller.Main import get_simulation_params, main


class TestMain:

    def test_defaults(self):
        params = get_simulation_params([])
        assert params.num_floors == 4
        assert params.door_timer == 50
        assert not params.plots

    def test_runs_and_prints_summary(self, capsys):
        argv = ["--ticks", "300", "--door-timer", "5", "--call-interval", "10"]
        building = main(argv)
        out = capsys.readouterr().out
        assert "Ticks:  300" in out
        assert "Requests_served" in out
        assert building.controller.n_floors == 4

    def test_writes_plots(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        main(["--ticks", "200", "--door-timer", "5", "--plots", "--run", "7"])
        assert os.path.exists(os.path.join("Visualizations", "floor_trace_run7.png"))
        assert os.path.exists(os.path.join("Visualizations", "service_times_run7.png"))
        assert os.path.exists(os.path.join("RunStats", "all_run_stats.txt"))

    def test_rejects_zero_ticks(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        with pytest.raises(SystemExit):
            main(["--ticks", "0", "--plots"])
        assert "--ticks must be at least 1" in capsys.readouterr().err
        assert not os.path.exists("Visualizations")
