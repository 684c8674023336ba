"""Typer-based CLI for computing pq-gram distances between JSON trees."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, NoReturn, Optional

import typer

from .batch import load_tree, load_trees
from .comparison import compute_comparison
from .distance import DEFAULT_P, DEFAULT_Q, DEFAULT_W, pq_distance, pq_distance_windowed
from .profile import PQGramProfile
from .register import Register
from .reporting import distance_matrix, export_csv, export_json

app = typer.Typer(help="Approximate structural distances between labelled trees using pq-grams.")

_TREE_ARG = dict(exists=True, dir_okay=False, help="JSON tree file")


def _fail(exc: Exception) -> NoReturn:
    typer.echo(f"Error: {exc}", err=True)
    raise typer.Exit(code=1)


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")) -> None:
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO)


@app.command()
def distance(
    reference: Path = typer.Argument(..., **_TREE_ARG),
    candidate: Path = typer.Argument(..., **_TREE_ARG),
    p: int = typer.Option(DEFAULT_P, "--p", "-p", help="Ancestor register length"),
    q: int = typer.Option(DEFAULT_Q, "--q", "-q", help="Sibling register length"),
) -> None:
    """Print the ordered pq-gram distance between two trees."""
    try:
        result = pq_distance(load_tree(reference), load_tree(candidate), p=p, q=q)
    except ValueError as exc:
        _fail(exc)
    typer.echo(f"{result:.6f}")


@app.command()
def windowed(
    reference: Path = typer.Argument(..., **_TREE_ARG),
    candidate: Path = typer.Argument(..., **_TREE_ARG),
    p: int = typer.Option(DEFAULT_P, "--p", "-p", help="Ancestor register length"),
    w: int = typer.Option(DEFAULT_W, "--w", "-w", help="Sibling window width (>= 2)"),
) -> None:
    """Print the sibling-order-invariant pq-gram distance between two trees."""
    try:
        result = pq_distance_windowed(load_tree(reference), load_tree(candidate), p=p, w=w)
    except ValueError as exc:
        _fail(exc)
    typer.echo(f"{result:.6f}")


@app.command()
def compare(
    reference: Path = typer.Argument(..., **_TREE_ARG),
    candidate: Path = typer.Argument(..., **_TREE_ARG),
    p: int = typer.Option(DEFAULT_P, "--p", "-p", help="Ancestor register length"),
    q: int = typer.Option(DEFAULT_Q, "--q", "-q", help="Sibling register length"),
    w: int = typer.Option(DEFAULT_W, "--w", "-w", help="Sibling window width (>= 2)"),
) -> None:
    """Print both distances and the profile statistics for two trees."""
    try:
        result = compute_comparison(load_tree(reference), load_tree(candidate), p=p, q=q, w=w)
    except ValueError as exc:
        _fail(exc)
    for key, value in result.metrics.flat().items():
        typer.echo(f"{key}\t{value:.6f}" if isinstance(value, float) else f"{key}\t{value}")


@app.command()
def profile(
    tree_file: Path = typer.Argument(..., **_TREE_ARG),
    p: int = typer.Option(DEFAULT_P, "--p", "-p", help="Ancestor register length"),
    q: int = typer.Option(DEFAULT_Q, "--q", "-q", help="Sibling register length"),
    w: Optional[int] = typer.Option(None, "--w", "-w", help="Build the windowed profile with this width"),
) -> None:
    """List the registers of a tree's profile with their multiplicities."""
    try:
        root = load_tree(tree_file)
        built = PQGramProfile.windowed(root, p, w) if w is not None else PQGramProfile.of(root, p, q)
    except ValueError as exc:
        _fail(exc)
    for key, count in sorted(built.counts().items(), key=lambda item: [label or "" for label in item[0]]):
        typer.echo(f"{count}\t{Register.of(*key)}")
    typer.echo(f"total\t{len(built)}")


@app.command()
def matrix(
    tree_files: List[Path] = typer.Argument(..., exists=True, dir_okay=False, help="Two or more JSON tree files"),
    use_windowed: bool = typer.Option(False, "--windowed", help="Use the sibling-order-invariant distance"),
    p: int = typer.Option(DEFAULT_P, "--p", "-p"),
    q: int = typer.Option(DEFAULT_Q, "--q", "-q"),
    w: int = typer.Option(DEFAULT_W, "--w", "-w"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write .csv or .json instead of printing"),
) -> None:
    """Compute the pairwise distance matrix of several trees."""
    if len(tree_files) < 2:
        _fail(ValueError("matrix needs at least two tree files"))
    try:
        trees = load_trees(tree_files)
        frame = distance_matrix(trees, [path.stem for path in tree_files], windowed=use_windowed, p=p, q=q, w=w)
    except ValueError as exc:
        _fail(exc)
    if output is None:
        typer.echo(frame.round(6).to_string())
    elif output.suffix == ".json":
        export_json(frame, output)
        typer.echo(f"Saved {output}")
    else:
        export_csv(frame, output)
        typer.echo(f"Saved {output}")


if __name__ == "__main__":
    app()
