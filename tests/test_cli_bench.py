import json

from typer.testing import CliRunner

from brace_expansion import BraceExpander
from brace_expansion.cli import BENCH_PATTERNS, app, run_bench

runner = CliRunner()


def test_bench_text():
    r = runner.invoke(app, ["bench", "--iterations", "1"])
    assert r.exit_code == 0, r.output
    out = r.stdout
    for phase in ("warmup:", "cached:", "cold:", "mixed:"):
        assert phase in out
    assert "Caches:" in out
    assert "- results:" in out


def test_bench_json():
    r = runner.invoke(app, ["bench", "-n", "2", "--format", "json"])
    assert r.exit_code == 0, r.output
    payload = json.loads(r.stdout)
    assert payload["command"] == "bench"
    assert payload["iterations"] == 2
    assert [p["name"] for p in payload["phases"]] == ["warmup", "cached", "cold", "mixed"]
    assert payload["phases"][0]["ops"] == 2 * len(BENCH_PATTERNS)
    assert payload["phases"][3]["ops"] == 4 * len(BENCH_PATTERNS)
    assert {c["name"] for c in payload["caches"]} == {"results", "comma_parts", "sub_expansions"}


def test_run_bench_leaves_results_correct():
    expander = BraceExpander()
    run_bench(expander, iterations=1)
    assert expander.expand("test-{a,b,c}.js") == ["test-a.js", "test-b.js", "test-c.js"]
    assert len(expander.expand("backup-{2024..2025}-{01..12}-{01..31}.log")) == 2 * 12 * 31
