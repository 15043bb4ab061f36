"""Test the labels command."""
import os
import subprocess
import sys


SRC = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "..", "src")


def run_linechart(*args, input=None):
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [SRC, env.get("PYTHONPATH")]))
    return subprocess.run(
        [sys.executable, "-m", "linechart", *args],
        input=input,
        capture_output=True,
        text=True,
        env=env
    )


class TestLabelsCommand:
    csv_data = "a\n0\n2500000"

    def test_plain_labels(self):
        proc = run_linechart("labels", input=self.csv_data)

        assert proc.returncode == 0
        lines = proc.stdout.strip().splitlines()
        assert lines[0] == "value,label"
        # [0, 2500000] in 10 divisions -> step 200000
        assert len(lines) == 14
        assert lines[1] == "0,0"
        assert lines[2] == "200000,200000"
        assert lines[-1] == "2400000,2400000"

    def test_shortened_labels(self):
        proc = run_linechart("labels", "--shorten", input=self.csv_data)

        assert proc.returncode == 0
        lines = proc.stdout.strip().splitlines()
        assert lines[1] == "0,0"
        assert lines[2] == "200000,200K"
        assert lines[6] == "1000000,1000K"
        assert lines[7] == "1200000,1M"
        assert lines[-1] == "2400000,2M"

    def test_grid_count(self):
        proc = run_linechart("l", "--shorten", "-g", "5", input=self.csv_data)

        assert proc.returncode == 0
        assert proc.stdout.strip().splitlines() == [
            "value,label",
            "0,0",
            "500000,500K",
            "1000000,1000K",
            "1500000,1M",
            "2000000,2M",
            "2500000,2M",
        ]

    def test_invalid_grid_count(self):
        proc = run_linechart("labels", "-g", "0", input=self.csv_data)

        assert proc.returncode == 1
        assert "Error: Tick count must be positive" in proc.stderr
