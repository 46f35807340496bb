from __future__ import annotations

import subprocess


def run_cli(args: list[str]) -> subprocess.CompletedProcess[str]:
	return subprocess.run(["cve-ranges", *args], capture_output=True, text=True)


def test_cli_help_shows_commands():
	cp = run_cli(["--help"])
	assert cp.returncode == 0
	for command in ("ranges", "timeline", "convert", "reconstruct", "check"):
		assert command in cp.stdout


def test_cli_timeline_upper_only():
	cp = run_cli(["timeline", "< 1.0.1"])
	assert cp.returncode == 0
	assert cp.stdout.strip() == "fixed=1.0.1"
