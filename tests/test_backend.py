import json
import logging

import pytest

from shoal.core import ShoalSimulationBackend
from shoal.main import main


def test_step_only_advances_while_running(small_config):
    backend = ShoalSimulationBackend(seed=1, substeps=2)
    backend.configure(small_config)

    state = backend.step()
    assert state.tick == 0

    backend.start()
    state = backend.step()
    assert state.tick == 2
    assert state.age == 2
    assert state.population == small_config.world.animals
    assert state.food_count == small_config.world.foods
    assert len(state.frame["animals"]) == small_config.world.animals

    backend.stop()
    assert backend.step().tick == 2


def test_backend_reports_generations(small_config):
    backend = ShoalSimulationBackend(seed=3)
    backend.configure(small_config)
    backend.start()

    for _ in range(small_config.evolution.generation_length + 1):
        state = backend.step()

    assert state.generation == 1
    assert state.age == 0
    assert state.mean_satiation == 0.0
    assert state.statistics["size"] == small_config.world.animals


def test_snapshot(small_config):
    backend = ShoalSimulationBackend(seed=0)
    backend.configure(small_config)

    snapshot = backend.snapshot()

    assert snapshot["config"]["world"]["animals"] == small_config.world.animals
    assert snapshot["state"]["tick"] == 0
    assert snapshot["resources"]["food"] == small_config.world.foods
    assert snapshot["statistics"] is None
    assert set(snapshot["frame"]) == {"animals", "foods"}


def test_same_seed_same_frames(small_config):
    frames = []
    for _ in range(2):
        backend = ShoalSimulationBackend(seed=21)
        backend.configure(small_config)
        backend.start()
        for _ in range(8):
            backend.step()
        frames.append(backend.snapshot()["frame"])
    assert frames[0] == frames[1]


def test_configure_restarts_the_world(small_config):
    backend = ShoalSimulationBackend(seed=4)
    backend.configure(small_config)
    first = backend.snapshot()["frame"]
    backend.start()
    backend.step()

    backend.configure(small_config)

    assert backend.snapshot()["frame"] == first
    assert backend.snapshot()["state"]["tick"] == 0


def test_cli_runs_headless(tmp_path, caplog):
    config = tmp_path / "small.json"
    config.write_text(json.dumps({"world": {"animals": 4, "foods": 5}, "evolution": {"generation_length": 5}}))
    caplog.set_level(logging.INFO)

    code = main(["--steps", "12", "--seed", "2", "--config", str(config), "--report-every", "4"])

    assert code == 0
    assert "generation 1 evolved" in caplog.text
    assert "generation 2 evolved" in caplog.text
    assert "finished after 12 steps, 2 generation(s)" in caplog.text


@pytest.mark.parametrize(
    "argv",
    [
        ["--steps", "10", "--substeps", "3"],
        ["--steps", "-5"],
        ["--steps", "10", "--substeps", "0"],
    ],
)
def test_cli_rejects_bad_step_counts(argv, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(argv + ["--seed", "1", "--report-every", "0"])
    assert excinfo.value.code == 2
    assert "--s" in capsys.readouterr().err


def test_cli_runs_every_step_with_substeps(tmp_path, caplog):
    config = tmp_path / "tiny.json"
    config.write_text(json.dumps({"world": {"animals": 3, "foods": 3}, "evolution": {"generation_length": 100}}))
    caplog.set_level(logging.INFO)

    code = main(["--steps", "9", "--substeps", "3", "--seed", "1", "--config", str(config), "--report-every", "0"])

    assert code == 0
    assert "finished after 9 steps, 0 generation(s)" in caplog.text
