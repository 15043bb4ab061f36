"""Test the select command."""
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


class TestSelectCommand:
    # 338px wide view leaves a 300px drawing area starting at x=23

    def test_select_column(self):
        csv_data = "a,b\n1,5\n2,7\n3,9"

        proc = run_linechart("select", "183", "--width", "338", "--height", "230", input=csv_data)

        assert proc.returncode == 0
        lines = proc.stdout.strip().splitlines()
        assert lines[0] == "column,x,a,b"
        assert lines[1] == "1,173,2,7"

    def test_select_clamps_out_of_range(self):
        csv_data = "a,b\n1,5\n2,7\n3,9"

        proc = run_linechart("sel", "5000", "--width", "338", "--height", "230", input=csv_data)

        assert proc.returncode == 0
        assert proc.stdout.strip().splitlines()[1] == "2,323,3,9"

    def test_select_headerless(self):
        csv_data = "1,5\n2,7\n3,9"

        proc = run_linechart("select", "0", "--width", "338", "--height", "230", input=csv_data)

        assert proc.returncode == 0
        lines = proc.stdout.strip().splitlines()
        assert lines[0] == "column,x,f1,f2"
        assert lines[1] == "0,23,1,5"

    def test_select_requires_position(self):
        proc = run_linechart("select", input="a\n1")

        assert proc.returncode == 1
        assert "Pointer x position required" in proc.stderr

    def test_select_requires_numeric_data(self):
        proc = run_linechart("select", "10", input="name\nann\nbob")

        assert proc.returncode == 1
        assert "No numeric columns" in proc.stderr

    def test_select_empty_input(self):
        proc = run_linechart("select", "10", input="")

        assert proc.returncode == 1
        assert "No input data" in proc.stderr
