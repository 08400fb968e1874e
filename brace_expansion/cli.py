from __future__ import annotations

import json
import logging
import time
from typing import Any, Callable

import typer

from brace_expansion.core.errors import (
    ConfigLoadError,
    ConfigValidationError,
    ExpansionError,
)
from brace_expansion.core.expand.cache_config import CacheConfig
from brace_expansion.core.expand.engine import BraceExpander
from brace_expansion.core.io.load_config import load_and_validate

app = typer.Typer(add_completion=False, no_args_is_help=True)


BENCH_PATTERNS: list[str] = [
    # simple
    "test-{a,b,c}.js",
    "file-{1..10}.txt",
    "{a,b,c}-{1,2,3}",
    # medium
    "path/to/{src,test}/{lib,utils}/*.{js,ts}",
    "{a..z}-{1..20}.{txt,md,js}",
    # nested
    "{{{a,b},{c,d}},{{e,f},{g,h}}}",
    "{a,b,{c,d,{e,f,{g,h}}}}",
    # sequences
    "file-{01..100}.txt",
    "backup-{2024..2025}-{01..12}-{01..31}.log",
    # real world
    "node_modules/{@types,@babel}/{core,preset-env,plugin-*}/{lib,dist}/**/*.{js,d.ts}",
]


@app.callback()
def _callback() -> None:
    """Bash-compatible brace expansion."""
    return


@app.command("expand")
def expand_cmd(
    patterns: list[str] = typer.Argument(..., help="Patterns to expand, e.g. 'file{1..3}.txt'"),
    format: str = typer.Option("text", "--format", help="Output format: text|json"),
    config: str | None = typer.Option(
        None, "--config", help="YAML/JSON cache capacity file (default: $BRACE_EXPANSION_CONFIG)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Expand each pattern and print the results."""
    _setup_logging(verbose)
    _check_format(format)
    expander = BraceExpander(_load_config_or_exit(config))

    results = [(p, expander.expand(p)) for p in patterns]

    if format == "json":
        payload = {
            "tool": "brace-expand",
            "command": "expand",
            "results": [
                {"pattern": p, "expansions": out, "count": len(out)} for p, out in results
            ],
        }
        typer.echo(json.dumps(payload, indent=2))
        return

    for _, out in results:
        for line in out:
            typer.echo(line)


@app.command("config")
def config_cmd(
    config: str | None = typer.Option(
        None, "--config", help="YAML/JSON cache capacity file (default: $BRACE_EXPANSION_CONFIG)"
    ),
) -> None:
    """Show the effective cache capacities."""
    cfg = _load_config_or_exit(config)
    typer.echo("Cache capacities:")
    for name, capacity in cfg.as_dict().items():
        typer.echo(f"- {name}: {capacity}")


@app.command("bench")
def bench_cmd(
    iterations: int = typer.Option(1000, "--iterations", "-n", min=1, help="Passes per phase"),
    format: str = typer.Option("text", "--format", help="Output format: text|json"),
    config: str | None = typer.Option(
        None, "--config", help="YAML/JSON cache capacity file (default: $BRACE_EXPANSION_CONFIG)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Time warm, cached, cold and mixed expansion over a fixed pattern suite."""
    _setup_logging(verbose)
    _check_format(format)
    expander = BraceExpander(_load_config_or_exit(config))
    phases = run_bench(expander, iterations=iterations)

    if format == "json":
        payload = {
            "tool": "brace-expand",
            "command": "bench",
            "iterations": iterations,
            "patterns": len(BENCH_PATTERNS),
            "phases": phases,
            "caches": [
                {
                    "name": s.name,
                    "capacity": s.capacity,
                    "size": s.size,
                    "hits": s.hits,
                    "misses": s.misses,
                }
                for s in expander.cache_stats()
            ],
        }
        typer.echo(json.dumps(payload, indent=2))
        return

    for phase in phases:
        typer.echo(
            f"{phase['name']}: {phase['elapsed_ms']:.2f}ms ({phase['ops_per_sec']:.0f} ops/sec)"
        )
    typer.echo("Caches:")
    for s in expander.cache_stats():
        typer.echo(
            f"- {s.name}: {s.size}/{s.capacity} entries, hit rate {s.hit_rate:.1%}"
        )


def run_bench(expander: BraceExpander, *, iterations: int) -> list[dict[str, Any]]:
    """Run the benchmark phases; the expander's caches are cleared first."""
    expander.clear_cache()
    mixed = BENCH_PATTERNS + [p + "-variant" for p in BENCH_PATTERNS]

    def warm() -> None:
        for p in BENCH_PATTERNS:
            expander.expand(p)

    def cold() -> None:
        for p in BENCH_PATTERNS:
            expander.clear_cache()
            expander.expand(p)

    def mixed_run() -> None:
        for p in mixed:
            expander.expand(p)

    phases = [
        _time_phase("warmup", warm, iterations, len(BENCH_PATTERNS)),
        _time_phase("cached", warm, iterations, len(BENCH_PATTERNS)),
        _time_phase("cold", cold, iterations, len(BENCH_PATTERNS)),
    ]
    expander.clear_cache()
    phases.append(_time_phase("mixed", mixed_run, iterations, len(mixed)))
    return phases


def _time_phase(name: str, run: Callable[[], None], iterations: int, per_pass: int) -> dict[str, Any]:
    start = time.perf_counter()
    for _ in range(iterations):
        run()
    elapsed_ms = (time.perf_counter() - start) * 1000
    ops = iterations * per_pass
    return {
        "name": name,
        "ops": ops,
        "elapsed_ms": elapsed_ms,
        "ops_per_sec": ops / (elapsed_ms / 1000) if elapsed_ms > 0 else 0.0,
    }


def _load_config_or_exit(config_path: str | None) -> CacheConfig:
    try:
        cfg, errors = load_and_validate(config_path)
    except ConfigLoadError as e:
        _print_errors([e])
        raise typer.Exit(code=1)

    if errors or cfg is None:
        _print_errors(errors)
        raise typer.Exit(code=2)
    return cfg


def _check_format(format: str) -> None:
    if format not in ("text", "json"):
        err = ConfigValidationError(
            code="E_CLI_UNKNOWN_FORMAT",
            message=f"unknown format: {format} (choose one of: text, json)",
            file=None,
            path="format",
        )
        _print_errors([err])
        raise typer.Exit(code=2)


def _setup_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


def _print_errors(errors: list[ExpansionError]) -> None:
    errors_sorted = sorted(errors, key=lambda e: (e.file or "", e.path or "", e.code))
    for e in errors_sorted:
        typer.echo(str(e), err=True)


def main() -> None:
    app(prog_name="brace-expand")


cli = typer.main.get_command(app)

if __name__ == "__main__":
    main()
